"""Aggregate request latencies per client and per operation from JSON log lines."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_DECODER = json.JSONDecoder()


@dataclass
class Stats:
    """Running totals for one client or one operation."""

    latency: float = 0.0
    count: int = 0
    operations: set[str] = field(default_factory=set)

    @property
    def average(self) -> float:
        """Mean latency; zero when nothing was counted."""
        return self.latency / self.count if self.count else 0.0


def _as_string(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError(f"expected a string, got {type(value).__name__}")


def _as_double(value) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    raise ValueError(f"expected a number, got {type(value).__name__}")


def parse_line(line: str) -> tuple[str, str, float] | None:
    """Return ``(client_name, operation_name, latency)`` from a log line.

    The JSON object starts at the first ``{`` of the line; anything after it
    is ignored. Missing fields default to ``""`` or ``0.0``. A line without
    ``{`` gives ``None``; malformed JSON raises ``ValueError``.
    """
    start = line.find("{")
    if start == -1:
        return None
    try:
        data, _ = _DECODER.raw_decode(line, start)
    except json.JSONDecodeError as error:
        raise ValueError(str(error)) from None
    return (
        _as_string(data.get("clientName")),
        _as_string(data.get("operationName")),
        _as_double(data.get("latency")),
    )


@dataclass
class LogReport:
    """Latency totals grouped by client name and by operation name."""

    by_service: dict[str, Stats] = field(default_factory=dict)
    by_operation: dict[str, Stats] = field(default_factory=dict)

    def add_line(self, line: str) -> bool:
        """Count one log line; return whether it held a JSON record.

        Raises ``ValueError`` when the JSON part cannot be parsed.
        """
        entry = parse_line(line)
        if entry is None:
            return False
        client, operation, latency = entry
        service = self.by_service.setdefault(client, Stats())
        service.latency += latency
        service.count += 1
        service.operations.add(operation)
        op_stats = self.by_operation.setdefault(operation, Stats())
        op_stats.latency += latency
        op_stats.count += 1
        return True

    def add_lines(self, lines: Iterable[str]) -> None:
        """Count every line, stopping at the first one that cannot be parsed."""
        for line in lines:
            self.add_line(line)

    def render(self) -> str:
        """Return the text report, services first, then operations."""
        out = ["======== SERVICES ========"]
        for name in sorted(self.by_service):
            stats = self.by_service[name]
            out.append(f"--- {name} ---")
            out.append(f"cnt: {stats.count}")
            out.append(f"latency: {stats.latency:g}")
            out.append(
                "operations: " + "".join(f"{op} " for op in sorted(stats.operations))
            )
        out.append("")
        out.append("======== OPERATIONS ========")
        for name in sorted(self.by_operation):
            stats = self.by_operation[name]
            out.append(f"--- {name} ---")
            out.append(f"cnt: {stats.count}")
            out.append(f"latency: {stats.latency:g}")
            out.append(f"average: {stats.average:g}")
            out.append("")
        return "\n".join(out) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Summarise a log file (``logs.txt`` by default) on standard output."""
    parser = argparse.ArgumentParser(description="Summarise JSON request logs.")
    parser.add_argument("path", nargs="?", default="logs.txt", help="log file to read")
    args = parser.parse_args(argv)

    report = LogReport()
    try:
        with open(args.path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                try:
                    report.add_line(line.rstrip("\n"))
                except ValueError as error:
                    print(f"Error on json parse: {error}", file=sys.stderr)
    except OSError:
        pass
    sys.stdout.write(report.render())
    return 0