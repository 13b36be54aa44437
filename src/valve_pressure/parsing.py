"""Parser for valve scan reports.

Each non-blank line reads like::

    Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
    Valve JJ has flow rate=21; tunnel leads to valve II
"""

from __future__ import annotations

import re
import sys
from pathlib import Path

from valve_pressure.network.model import ValveRecord

_READING = re.compile(
    r"^Valve (?P<name>\w+) has flow rate=(?P<flow>\d+); "
    r"(?:tunnels lead to valves|tunnel leads to valve) (?P<links>\w+(?:, \w+)*)$"
)


def parse_reading(line: str) -> ValveRecord:
    """Parse one scan line into a :class:`ValveRecord`."""
    match = _READING.match(line.strip())
    if match is None:
        msg = f"Not a valve reading: {line!r}"
        raise ValueError(msg)
    return ValveRecord(
        name=match["name"],
        flow=int(match["flow"]),
        neighbors=tuple(match["links"].split(", ")),
    )


def parse_scan(text: str) -> list[ValveRecord]:
    """Parse a whole report; blank lines are ignored."""
    records: list[ValveRecord] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(parse_reading(line))
        except ValueError as exc:
            msg = f"Line {lineno}: {exc}"
            raise ValueError(msg) from exc
    return records


def load_scan(path: str | Path) -> list[ValveRecord]:
    """Read and parse a report from ``path``; ``-`` reads standard input."""
    if str(path) == "-":
        return parse_scan(sys.stdin.read())
    file_path = Path(path).expanduser()
    return parse_scan(file_path.read_text())


__all__ = ["load_scan", "parse_reading", "parse_scan"]
