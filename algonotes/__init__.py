"""Classic algorithms, data structures and small command-line tools."""

__version__ = "0.1.0"

__all__ = [
    "bayes",
    "class_index",
    "columns",
    "counting",
    "deck",
    "fenwick",
    "geometry",
    "hamiltonian",
    "heap",
    "interval_tree",
    "log_stats",
    "matching",
    "rectangles",
    "searching",
    "sequences",
]