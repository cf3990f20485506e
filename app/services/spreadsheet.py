"""
Excel (.xlsx) reading and writing with openpyxl.

`read_sheet_rows` turns the first worksheet into header-keyed dicts, skipping
blank rows. `build_workbook` does the reverse for an arbitrary record list.
"""
import io
import json
import uuid
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from openpyxl import Workbook, load_workbook

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class SheetError(ValueError):
    """The uploaded sheet cannot be imported."""


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def read_sheet_rows(content: bytes) -> list[dict[str, Any]]:
    try:
        wb = load_workbook(filename=io.BytesIO(content), read_only=True, data_only=True)
    except Exception as exc:
        raise SheetError("Invalid Excel file") from exc

    try:
        ws = wb.worksheets[0]
        rows = list(ws.iter_rows(values_only=True))
    finally:
        wb.close()

    if not rows:
        return []

    header = [str(c).strip() if c is not None else "" for c in rows[0]]
    result: list[dict[str, Any]] = []
    for row in rows[1:]:
        if all(_is_blank(v) for v in row):
            continue
        result.append({
            label: value
            for label, value in zip(header, row)
            if label and value is not None
        })
    return result


def _cell_value(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    if isinstance(value, uuid.UUID):
        return str(value)
    # Excel cells cannot hold timezone-aware datetimes
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def build_workbook(records: Iterable[Mapping[str, Any]], title: str = "Records") -> bytes:
    records = list(records)

    headers: list[str] = []
    for record in records:
        for key in record:
            if key not in headers:
                headers.append(key)

    wb = Workbook()
    ws = wb.active
    ws.title = title
    if headers:
        ws.append(headers)
    for record in records:
        ws.append([_cell_value(record.get(key)) for key in headers])

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
