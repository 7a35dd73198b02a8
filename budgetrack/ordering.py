"""Orderings of budget entries."""

from __future__ import annotations

from enum import IntEnum
from functools import cmp_to_key
from typing import Callable, Iterable, Union

from budgetrack.records import Entry


class SortKey(IntEnum):
    """Sort orders, numbered as in the sort menu."""

    ID = 1
    DATE = 2
    AMOUNT = 3
    DESCRIPTION = 4


def _sign(first, second) -> int:
    return (first > second) - (first < second)


def compare_by_id(a: Entry, b: Entry) -> int:
    """Compare two entries by identifier."""
    return _sign(a.entry_id, b.entry_id)


def compare_by_date(a: Entry, b: Entry) -> int:
    """Compare two entries by year, then month, then day."""
    return _sign(a.date, b.date)


def compare_by_amount(a: Entry, b: Entry) -> int:
    """Compare two entries by amount."""
    return _sign(a.amount, b.amount)


def compare_by_description(a: Entry, b: Entry) -> int:
    """Compare two entries by description, case-sensitively."""
    return _sign(a.description, b.description)


_COMPARATORS: dict[SortKey, Callable[[Entry, Entry], int]] = {
    SortKey.ID: compare_by_id,
    SortKey.DATE: compare_by_date,
    SortKey.AMOUNT: compare_by_amount,
    SortKey.DESCRIPTION: compare_by_description,
}


def sort_entries(entries: Iterable[Entry], key: Union[SortKey, int]) -> list[Entry]:
    """Return a new list of the entries sorted by ``key``.

    Raises ValueError for an unknown key.
    """
    comparator = _COMPARATORS[SortKey(key)]
    return sorted(entries, key=cmp_to_key(comparator))