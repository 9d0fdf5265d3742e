"""Check that every line of a file holds the same number of ``|`` separators."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Iterable, Sequence

SEPARATOR = "|"


class ColumnError(Exception):
    """A line does not hold the expected number of separators."""

    def __init__(self, line_number: int, count: int, line: str) -> None:
        super().__init__(f"Error on line {line_number}, it contains {count} separators")
        self.line_number = line_number
        self.count = count
        self.line = line


def check_columns(lines: Iterable[str], expected: int) -> int:
    """Return the number of lines checked; raise ColumnError at the first bad line."""
    checked = 0
    for line_number, line in enumerate(lines, start=1):
        if line.endswith("\n"):
            line = line[:-1]
        count = line.count(SEPARATOR)
        if count != expected:
            raise ColumnError(line_number, count, line)
        checked = line_number
    return checked


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: ``check-columns <file> <column_nb>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage:")
        print("./check-columns <file> <column_nb>")
        return 1
    path, column_text = args
    print(f"Checking file:{path}")
    started = time.process_time()
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            check_columns(handle, _leading_int(column_text))
    except OSError as error:
        print(f"Cannot read {path}: {error.strerror}", file=sys.stderr)
        return 1
    except ColumnError as error:
        print(error)
        print(error.line)
        return 1
    print("File is correct !")
    elapsed = time.process_time() - started
    print(f"Time {int(elapsed * 1_000_000)} clocks, {elapsed * 1000:.3f} milliseconds.")
    return 0