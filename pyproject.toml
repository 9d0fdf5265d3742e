[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Classic algorithms and data structures (Fenwick trees, heaps, interval trees, geometry, matching, dynamic programming) with a few small command-line tools."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "algorithms",
    "data-structures",
    "fenwick-tree",
    "heap",
    "interval-tree",
    "geometry",
    "bipartite-matching",
    "dynamic-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
check-columns = "algonotes.columns:main"
bipartite-matching = "algonotes.matching:main"
hamiltonian-segments = "algonotes.hamiltonian:main"
shuffle-classify = "algonotes.bayes:main"
log-stats = "algonotes.log_stats:main"
index-classes = "algonotes.class_index:main"

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
