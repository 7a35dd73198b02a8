# budgetrack

A small interactive budget tracker for the terminal. It loads income and
expense entries from a plain text file. You can then list, sort, filter,
add to and edit those entries, and see how your spending splits between
needs and wants.

## Installation

```
pip install .
```

## Data file

The file holds one entry per line. Fields are separated by `|`:

```
ID|YYYY-MM-DD|type|category|description|amount
```

For example:

```
1|2024-03-01|income|salary|March pay|3000.00
2|2024-03-02|expense|needs|Rent|1200.00
3|2024-03-05|expense|wants|Concert tickets|85.50
```

- The type is `income` or `expense`. Case does not matter.
- The expense categories `needs` and `wants` count towards the distribution
  report. Case does not matter here either.
- The type, category and description fields may be up to 99 characters long.
  They may not contain `|`.
- Blank lines are skipped. Reading stops without an error at the first line
  that does not follow the format. Entries after that line are not loaded.
- Dates are taken as written and are not checked against the calendar.

## Usage

```
budgetrack entries.txt
```

With no file argument the command prints a usage line and exits with status 2.
If the file cannot be opened, it exits with status 1.

The screen is cleared with the `clear` command when the menu starts and
before each action. The main menu offers:

1. Display all entries
2. Expense distribution: total income, total expenses, needs and wants as a
   share of each, and the net balance. Totals are kept in whole dollars.
3. Sort entries by ID, date, amount or description. Description sorting is
   case-sensitive. The sorted list is only displayed; the stored order is
   unchanged.
4. Add an income or expense entry. The date can be today's date or one you
   type as `YYYY-MM-DD`. The type and the category are single words. The new
   entry gets one more than the largest existing ID.
5. Modify the date or the amount of an entry. A negative amount is refused.
6. Filter entries by year and month
7. Exit

The menu also ends when input runs out.

## Library use

The same features can be used from Python code:

```python
from budgetrack.records import load_entries, EntryDate
from budgetrack.budget import (
    add_entry,
    expense_distribution,
    filter_by_month,
    find_entry,
    format_distribution,
    format_entries,
)
from budgetrack.ordering import SortKey, sort_entries

entries = load_entries("entries.txt")
print(format_distribution(expense_distribution(entries)))
print(format_entries(sort_entries(entries, SortKey.DATE)))
print(format_entries(filter_by_month(entries, 2024, 3)))

add_entry(entries, EntryDate(2024, 3, 9), "expense", "needs", "Groceries", 42.10)
entry = find_entry(entries, 2)  # raises EntryNotFoundError if absent
```

- `budgetrack.records`: `Entry`, `EntryDate`, `parse_entries` and
  `load_entries`.
- `budgetrack.ordering`: `SortKey` and `sort_entries`, plus the comparison
  functions `compare_by_id`, `compare_by_date`, `compare_by_amount` and
  `compare_by_description`.
- `budgetrack.budget`: the `Distribution` report with its percentage
  properties, and functions for formatting, filtering, adding and looking up
  entries.
- `budgetrack.cli.BudgetApp` runs the interactive menu. You can pass it your
  own input function, output stream and screen-clearing function.

## Limitations

Changes are kept in memory only. Entries you add or modify are not written
back to the data file, so they are lost when the program exits.

## Running the tests

```
pip install .[test]
pytest
```