"""Reports and edits over a list of budget entries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from budgetrack.records import Entry, EntryDate

_HEADER = (
    "Finances Summary\n"
    "================\n\n"
    "ID\t\tDate\t\t\tType\t\t\tCategory\t\tDescription\t\tAmount\n"
    + "-" * 121
    + "\n"
)


class EntryNotFoundError(LookupError):
    """Raised when no entry has the requested identifier."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"Entry ID {entry_id} not found.")
        self.entry_id = entry_id


def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return math.nan if part == 0 else math.copysign(math.inf, part)
    return part / whole * 100


@dataclass(frozen=True)
class Distribution:
    """Whole-dollar totals of income, expenses, needs and wants."""

    income: int
    expenses: int
    needs: int
    wants: int

    @property
    def net_balance(self) -> int:
        return self.income - self.expenses

    @property
    def needs_share_of_income(self) -> float:
        return _percent(self.needs, self.income)

    @property
    def needs_share_of_expenses(self) -> float:
        return _percent(self.needs, self.expenses)

    @property
    def wants_share_of_income(self) -> float:
        return _percent(self.wants, self.income)

    @property
    def wants_share_of_expenses(self) -> float:
        return _percent(self.wants, self.expenses)


def compare_strings(first: str, second: str) -> bool:
    """Return True if the strings are equal ignoring case."""
    if len(first) != len(second):
        return False
    return all(a.lower() == b.lower() for a, b in zip(first, second))


def format_entries(entries: Iterable[Entry]) -> str:
    """Render entries as the summary table."""
    rows = [
        f"{e.entry_id:<5}\t\t{e.date.year:<4}-{e.date.month:<1}-{e.date.day:<1}"
        f"\t\t{e.entry_type:<10}\t\t{e.category:<10}\t\t{e.description:<10}"
        f"\t\t{e.amount:<8.2f}\n"
        for e in entries
    ]
    return _HEADER + "".join(rows)


def expense_distribution(entries: Iterable[Entry]) -> Distribution:
    """Total the entries; each running total is truncated to whole dollars."""
    income = expenses = needs = wants = 0
    for entry in entries:
        if compare_strings(entry.entry_type, "income"):
            income = int(income + entry.amount)
        if compare_strings(entry.entry_type, "expense"):
            expenses = int(expenses + entry.amount)
            if compare_strings(entry.category, "wants"):
                wants = int(wants + entry.amount)
            elif compare_strings(entry.category, "needs"):
                needs = int(needs + entry.amount)
    return Distribution(income=income, expenses=expenses, needs=needs, wants=wants)


def format_distribution(distribution: Distribution) -> str:
    """Render the expense distribution report."""
    d = distribution
    return (
        "======Expense Distribution Report======\n"
        f"Total Income: ${d.income}\n"
        f"Total Expenses: ${d.expenses}\n"
        f"Needs: ${d.needs} ({d.needs_share_of_expenses:.2f}% of expenses, "
        f"{d.needs_share_of_income:.2f}% of income)\n"
        f"Wants: ${d.wants} ({d.wants_share_of_expenses:.2f}% of expenses, "
        f"{d.wants_share_of_income:.2f}% of income)\n"
        f"Net Balance: ${d.net_balance}\n\n"
    )


def next_id(entries: Iterable[Entry]) -> int:
    """One more than the largest positive identifier, or 1."""
    return max([0, *(e.entry_id for e in entries)]) + 1


def add_entry(
    entries: list[Entry],
    date: EntryDate,
    entry_type: str,
    category: str,
    description: str,
    amount: float,
) -> Entry:
    """Append a new entry with the next free identifier and return it."""
    entry = Entry(
        entry_id=next_id(entries),
        date=date,
        entry_type=entry_type,
        category=category,
        description=description,
        amount=amount,
    )
    entries.append(entry)
    return entry


def find_entry(entries: Iterable[Entry], entry_id: int) -> Entry:
    """Return the first entry with ``entry_id``."""
    for entry in entries:
        if entry.entry_id == entry_id:
            return entry
    raise EntryNotFoundError(entry_id)


def format_entry_details(entry: Entry) -> str:
    """Render one entry's details, one field per line."""
    return (
        "Current Details:\n"
        f"ID: {entry.entry_id}\n"
        f"Date: {entry.date}\n"
        f"Type: {entry.entry_type}\n"
        f"Category: {entry.category}\n"
        f"Description: {entry.description}\n"
        f"Amount: ${entry.amount:.2f}\n"
    )


def filter_by_month(entries: Iterable[Entry], year: int, month: int) -> list[Entry]:
    """Entries dated in the given year and month, in their original order."""
    return [e for e in entries if e.date.year == year and e.date.month == month]