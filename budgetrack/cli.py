"""Interactive menu for browsing and editing budget entries."""

from __future__ import annotations

import datetime
import re
import subprocess
import sys
from typing import Callable, Optional, TextIO

from budgetrack.budget import (
    EntryNotFoundError,
    add_entry,
    expense_distribution,
    filter_by_month,
    find_entry,
    format_distribution,
    format_entries,
    format_entry_details,
)
from budgetrack.ordering import SortKey, sort_entries
from budgetrack.records import MAX_FIELD_LENGTH, Entry, EntryDate, load_entries

_MAIN_MENU = (
    "Budget Tracking System\n"
    "===============\n"
    "1. Display all entries\n"
    "2. Expense Distribution\n"
    "3. Sort Entries\n"
    "4. Add income/expense entry\n"
    "5. Modify entry\n"
    "6. Filter by month\n"
    "7. Exit\n"
)

_SORT_MENU = (
    "Sort Menu\n"
    "1. Sort by ID\n"
    "2. Sort by Date\n"
    "3. Sort by Amount\n"
    "4. Sort by Description\n"
)

_EXIT_CHOICE = 7
_DATE = re.compile(r"\s*([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)")


def _clear_terminal() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


class BudgetApp:
    """The menu loop over a mutable list of entries."""

    def __init__(
        self,
        entries: list[Entry],
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None,
        clear_screen: Optional[Callable[[], None]] = None,
    ) -> None:
        self.entries = entries
        self._input = input_func if input_func is not None else input
        self._output = output
        self._clear = clear_screen if clear_screen is not None else _clear_terminal

    def _write(self, text: str) -> None:
        (self._output if self._output is not None else sys.stdout).write(text)

    def _read_token(self, prompt: str) -> str:
        while True:
            tokens = self._input(prompt).split()
            if tokens:
                return tokens[0]

    def _read_int(self, prompt: str) -> int:
        while True:
            try:
                return int(self._read_token(prompt))
            except ValueError:
                continue

    def _read_float(self, prompt: str) -> float:
        while True:
            try:
                return float(self._read_token(prompt))
            except ValueError:
                continue

    def _read_date(self, prompt: str) -> EntryDate:
        while True:
            match = _DATE.match(self._input(prompt))
            if match:
                year, month, day = (int(part) for part in match.groups())
                return EntryDate(year, month, day)

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        actions = {
            1: self.display_all,
            2: self.show_distribution,
            3: self.sort_menu,
            4: self.add_entry,
            5: self.modify_entry,
            6: self.filter_by_month,
        }
        self._clear()
        try:
            while True:
                self._write(_MAIN_MENU)
                choice = self._read_int("Choice: ")
                if choice == _EXIT_CHOICE:
                    self._clear()
                    self._write("Goodbye and thanks for using our budget tracker app\n")
                    return
                action = actions.get(choice)
                if action is not None:
                    self._clear()
                    action()
        except EOFError:
            return

    def display_all(self) -> None:
        """Print every entry."""
        self._write(format_entries(self.entries))

    def show_distribution(self) -> None:
        """Print the expense distribution report."""
        self._write(format_distribution(expense_distribution(self.entries)))

    def sort_menu(self) -> None:
        """Ask for a sort order and print a sorted copy of the entries."""
        self._write(_SORT_MENU)
        choice = self._read_int("Choice: ")
        try:
            key = SortKey(choice)
        except ValueError:
            self._write("Invalid choice\n")
            return
        self._write(format_entries(sort_entries(self.entries, key)))

    def add_entry(self) -> None:
        """Ask for the fields of a new entry and append it."""
        answer = self._read_token("\nUse today's date? (y/n): ")
        if answer[0] in "yY":
            today = datetime.date.today()
            date = EntryDate(today.year, today.month, today.day)
        else:
            date = self._read_date("Enter date (YYYY-MM-DD): ")
        entry_type = self._read_token("Type (income/expense): ")[:MAX_FIELD_LENGTH]
        category = self._read_token("Category: ")[:MAX_FIELD_LENGTH]
        description = self._input("Description: ")[:MAX_FIELD_LENGTH]
        amount = self._read_float("Amount: $")
        add_entry(self.entries, date, entry_type, category, description, amount)

    def modify_entry(self) -> None:
        """Change the date or amount of an entry chosen by identifier."""
        self.display_all()
        entry_id = self._read_int("Enter ID of entry to modify: ")
        try:
            entry = find_entry(self.entries, entry_id)
        except EntryNotFoundError as exc:
            self._write(f"{exc}\n")
            return
        self._write("\n" + format_entry_details(entry) + "\n")
        self._write("What would you like to modify?\n1. Date\n2. Amount\n")
        choice = self._read_int("Choice: ")
        if choice == 1:
            entry.date = self._read_date("Enter new date (YYYY-MM-DD): ")
        elif choice == 2:
            amount = self._read_float("Enter new amount: $")
            if amount < 0:
                self._write("Amount cannot be negative.\n")
                return
            entry.amount = amount
        else:
            self._write("Invalid choice.\n")
            return
        self._write("Entry updated successfully.\n")

    def filter_by_month(self) -> None:
        """Print the entries of one month."""
        year = self._read_int("Enter year (YYYY): ")
        month = self._read_int("Enter month (1-12): ")
        self._write(f"\nEntries for {year:04d}-{month:02d}:\n")
        self._write(format_entries(filter_by_month(self.entries, year, month)))


def main(argv: Optional[list[str]] = None) -> int:
    """Load the entries file named on the command line and run the menu."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: budgetrack ENTRIES_FILE", file=sys.stderr)
        return 2
    try:
        entries = load_entries(args[0])
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    BudgetApp(entries).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())