import pytest

from budgetrack.records import Entry, EntryDate, load_entries, parse_entries

LINE = "1|2024-01-15|income|salary|January pay|3000.00\n"


def test_parse_single_line_fields():
    (entry,) = parse_entries([LINE])
    assert entry == Entry(1, EntryDate(2024, 1, 15), "income", "salary", "January pay", 3000.0)


def test_blank_lines_are_skipped():
    lines = ["\n", LINE, "   \n", "2|2024-02-01|expense|needs|Rent|900.5\n"]
    entries = parse_entries(lines)
    assert [e.entry_id for e in entries] == [1, 2]
    assert entries[1].amount == 900.5


def test_parsing_stops_at_first_malformed_line():
    lines = [LINE, "garbage line\n", "2|2024-02-01|expense|needs|Rent|900.5\n"]
    entries = parse_entries(lines)
    assert [e.entry_id for e in entries] == [1]


def test_empty_field_stops_parsing():
    lines = [LINE, "2|2024-02-01||needs|Rent|900.5\n"]
    assert len(parse_entries(lines)) == 1


def test_overlong_field_stops_parsing():
    long_desc = "x" * 100
    lines = [LINE, f"2|2024-02-01|expense|needs|{long_desc}|900.5\n"]
    assert len(parse_entries(lines)) == 1


def test_field_at_limit_is_accepted():
    desc = "y" * 99
    (entry,) = parse_entries([f"3|2024-02-01|expense|needs|{desc}|1\n"])
    assert entry.description == desc


def test_bad_amount_stops_parsing():
    assert parse_entries(["1|2024-01-15|income|salary|pay|abc\n"]) == []


def test_load_entries_from_file(tmp_path):
    path = tmp_path / "entries.txt"
    path.write_text(LINE + "2|2023-12-31|expense|wants|Party hat|12.25\n", encoding="utf-8")
    entries = load_entries(path)
    assert len(entries) == 2
    assert entries[1].date == EntryDate(2023, 12, 31)
    assert entries[1].category == "wants"


def test_load_entries_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_entries(tmp_path / "absent.txt")


def test_entry_date_str_is_zero_padded():
    assert str(EntryDate(2024, 3, 5)) == "2024-03-05"


def test_entry_dates_order_chronologically():
    dates = [EntryDate(2024, 1, 2), EntryDate(2023, 12, 31), EntryDate(2024, 1, 1)]
    assert sorted(dates) == [dates[1], dates[2], dates[0]]