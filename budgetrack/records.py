"""Budget entries and the pipe-separated file format they are stored in."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

MAX_FIELD_LENGTH = 99

_LINE = re.compile(
    r"\s*([+-]?\d+)\|\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)"
    r"\|([^|]{1,%d})\|([^|]{1,%d})\|([^|]{1,%d})\|\s*(\S+)\s*"
    % (MAX_FIELD_LENGTH, MAX_FIELD_LENGTH, MAX_FIELD_LENGTH)
)


class RecordFormatError(ValueError):
    """Raised when a line does not follow the entry format."""


@dataclass(frozen=True, order=True)
class EntryDate:
    """A calendar date as entered by the user; not validated."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass
class Entry:
    """One income or expense entry."""

    entry_id: int
    date: EntryDate
    entry_type: str
    category: str
    description: str
    amount: float


def _parse_line(line: str) -> Entry:
    match = _LINE.fullmatch(line)
    if match is None:
        raise RecordFormatError(f"malformed entry line: {line!r}")
    entry_id, year, month, day, entry_type, category, description, amount = match.groups()
    try:
        value = float(amount)
    except ValueError as exc:
        raise RecordFormatError(f"malformed amount: {amount!r}") from exc
    return Entry(
        entry_id=int(entry_id),
        date=EntryDate(int(year), int(month), int(day)),
        entry_type=entry_type,
        category=category,
        description=description,
        amount=value,
    )


def parse_entries(lines: Iterable[str]) -> list[Entry]:
    """Parse entries from lines of text.

    Blank lines are skipped; reading stops quietly at the first line that
    does not follow the format.
    """
    entries: list[Entry] = []
    for line in lines:
        if not line.strip():
            continue
        try:
            entries.append(_parse_line(line))
        except RecordFormatError:
            break
    return entries


def load_entries(path: Union[str, Path]) -> list[Entry]:
    """Read all entries from the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_entries(handle)