"""Tests for workbook reading and writing (app/services/spreadsheet.py)."""

import io
import json

import pytest
from openpyxl import load_workbook

from app.services.spreadsheet import SheetError, build_workbook, read_sheet_rows


def test_read_sheet_rows_keys_rows_by_header(make_sheet):
    content = make_sheet([["1", 20], [None, None], ["2", None]], header=[" A ", "B"])

    rows = read_sheet_rows(content)

    assert rows == [{"A": "1", "B": 20}, {"A": "2"}]


def test_read_sheet_rows_of_header_only_sheet_is_empty(make_sheet):
    assert read_sheet_rows(make_sheet([])) == []


def test_read_sheet_rows_rejects_garbage():
    with pytest.raises(SheetError):
        read_sheet_rows(b"not an xlsx file")


def test_build_workbook_writes_every_key():
    records = [
        {"id": "a", "number": "1", "fileAmount": 1000, "columnColors": {"note": "red"}},
        {"id": "b", "number": "2", "rowColor": "blue"},
    ]

    wb = load_workbook(io.BytesIO(build_workbook(records)))
    ws = wb.active
    rows = list(ws.iter_rows(values_only=True))

    assert ws.title == "Records"
    assert rows[0] == ("id", "number", "fileAmount", "columnColors", "rowColor")
    assert rows[1][:3] == ("a", "1", 1000)
    assert json.loads(rows[1][3]) == {"note": "red"}
    assert rows[1][4] is None
    assert rows[2] == ("b", "2", None, None, "blue")


def test_build_workbook_of_no_records_is_a_valid_file():
    wb = load_workbook(io.BytesIO(build_workbook([])))

    assert wb.active.max_row == 1
