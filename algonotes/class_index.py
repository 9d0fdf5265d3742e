"""Find class and struct definitions in C++ source text."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_WORD_START = r"(?<!\w)(?=\w)"
_WORD_END = r"(?<=\w)(?!\w)"

_CLASS_DEFINITION = re.compile(
    r"^\s*"
    r"(template\s*<[^;:{]+>\s*)?"
    r"(class|struct)\s*"
    r"("
    + _WORD_START + r"\w+" + _WORD_END
    + r"([ \t]*\([^)]*\))?"
    r"\s*"
    r")*"
    r"(" + _WORD_START + r"\w*" + _WORD_END + r")\s*"
    r"(<[^;:{]+>)?\s*"
    r"(\{|:[^;{()]*\{)",
    re.MULTILINE,
)


def index_classes(text: str) -> dict[str, int]:
    """Map each defined class name (with any specialisation) to its offset.

    The result is ordered by name; a name defined twice keeps its last offset.
    """
    found: dict[str, int] = {}
    for match in _CLASS_DEFINITION.finditer(text):
        name = match.group(5) + (match.group(6) or "")
        found[name] = match.start(5)
    return dict(sorted(found.items()))


def main(argv: Sequence[str] | None = None) -> int:
    """Index the classes of each file named on the command line."""
    paths = list(sys.argv[1:] if argv is None else argv)
    for path in paths:
        print(f"Processing file {path}")
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as handle:
                text = handle.read()
        except OSError as error:
            print(f"Cannot read {path}: {error.strerror}", file=sys.stderr)
            text = ""
        classes = index_classes(text)
        print(f"{len(classes)} matches found")
        for name, offset in classes.items():
            print(f'class "{name}" found at index: {offset}')
    return 0