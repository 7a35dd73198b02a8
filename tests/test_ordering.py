import pytest

from budgetrack.ordering import (
    SortKey,
    compare_by_amount,
    compare_by_date,
    compare_by_description,
    compare_by_id,
    sort_entries,
)
from budgetrack.records import Entry, EntryDate


def make_entries():
    return [
        Entry(3, EntryDate(2024, 2, 10), "expense", "needs", "Rent", 900.0),
        Entry(1, EntryDate(2023, 11, 5), "income", "salary", "Pay", 3000.0),
        Entry(2, EntryDate(2024, 2, 1), "expense", "wants", "Cinema", 15.5),
        Entry(4, EntryDate(2024, 1, 20), "expense", "needs", "Bus", 15.25),
    ]


def test_sort_by_id():
    result = sort_entries(make_entries(), SortKey.ID)
    ids = [e.entry_id for e in result]
    assert ids == sorted(ids)


def test_sort_by_date_across_years():
    result = sort_entries(make_entries(), SortKey.DATE)
    dates = [(e.date.year, e.date.month, e.date.day) for e in result]
    assert dates == sorted(dates)
    assert result[0].entry_id == 1


def test_sort_by_amount():
    result = sort_entries(make_entries(), SortKey.AMOUNT)
    amounts = [e.amount for e in result]
    assert amounts == sorted(amounts)


def test_sort_by_description():
    result = sort_entries(make_entries(), SortKey.DESCRIPTION)
    descs = [e.description for e in result]
    assert descs == sorted(descs)


def test_sort_accepts_menu_number():
    assert sort_entries(make_entries(), 3) == sort_entries(make_entries(), SortKey.AMOUNT)


def test_sort_leaves_input_unchanged():
    entries = make_entries()
    before = list(entries)
    sort_entries(entries, SortKey.ID)
    assert entries == before


def test_sort_invalid_key():
    with pytest.raises(ValueError):
        sort_entries(make_entries(), 5)


def test_comparators_signs():
    a, b, c, d = make_entries()
    assert compare_by_id(b, a) < 0
    assert compare_by_id(a, b) > 0
    assert compare_by_id(a, a) == 0
    assert compare_by_date(b, a) < 0
    assert compare_by_date(c, a) < 0
    assert compare_by_amount(d, c) < 0
    assert compare_by_description(c, a) < 0
    assert compare_by_description(a, a) == 0


def test_description_compare_is_case_sensitive():
    upper = Entry(1, EntryDate(2024, 1, 1), "expense", "needs", "Zed", 1.0)
    lower = Entry(2, EntryDate(2024, 1, 1), "expense", "needs", "abc", 1.0)
    assert compare_by_description(upper, lower) < 0