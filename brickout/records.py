"""The high-score table stored as ``place;name;score`` lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterator, List, Union

__all__ = ["Record", "parse_line", "format_line", "update_records", "get_records"]

PathType = Union[str, PathLike]

_NAME_LIMIT = 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass
class Record:
    place: int
    name: str
    score: int


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {value}")
    return value


def parse_line(line: str) -> Record:
    """Parse one ``place;name;score`` line."""
    fields = line.split(";", 2) + ["", ""]
    place_text, name, rest = fields[:3]
    score_text = rest.split(";", 1)[0]
    return Record(_leading_int(place_text), name, _leading_int(score_text))


def format_line(record: Record) -> str:
    return f"{record.place};{record.name};{record.score}"


def _lines(path: PathType) -> Iterator[str]:
    try:
        with open(path, encoding="utf-8") as file:
            for line in file:
                yield line.rstrip("\n")
    except FileNotFoundError:
        return


def update_records(path: PathType, name: str, score: int) -> None:
    """Enter ``score`` for ``name`` unless that name already has one at least as high.

    The table is re-sorted by score, highest first, and renumbered.
    """
    records: List[Record] = []
    for line in _lines(path):
        if not line:
            continue
        record = parse_line(line)
        if record.name == name:
            if score <= record.score:
                return
        else:
            records.append(record)

    records.append(Record(0, name[:_NAME_LIMIT], score))
    records.sort(key=lambda r: r.score, reverse=True)
    for place, record in enumerate(records, start=1):
        record.place = place

    Path(path).write_text(
        "".join(format_line(r) + "\n" for r in records), encoding="utf-8"
    )


def get_records(path: PathType, n: int = 10) -> List[Record]:
    """Return the first ``n`` records of the table; a missing file gives none."""
    records: List[Record] = []
    for line in _lines(path):
        if len(records) >= n:
            break
        records.append(parse_line(line))
    return records