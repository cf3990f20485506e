import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.orm import Session

from app.schemas.record import RecordPayload
from app.services.fields import IMPORT_LABELS, TEXT_FIELDS, to_text
from app.services.records import create_record
from app.services.spreadsheet import SheetError

logger = logging.getLogger(__name__)


def normalize_row(row: dict[str, Any]) -> dict[str, Any]:
    """Map one labelled sheet row to store-ready record fields."""
    data: dict[str, Any] = {}
    for label, key in IMPORT_LABELS.items():
        value = row.get(label)
        data[key] = to_text(value).strip() if key in TEXT_FIELDS else value
    data["rowColor"] = ""
    return RecordPayload.model_validate(data).model_dump()


def normalize_rows(rows: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    return [normalize_row(row) for row in rows]


def import_records(db: Session, rows: list[dict[str, Any]]) -> int:
    """
    Insert every sheet row as a new record and return how many were inserted.

    Rows are committed one at a time; a failure leaves earlier rows in place.
    Imports never match existing records, so importing a sheet twice
    duplicates its rows.
    """
    if not rows:
        raise SheetError("The file is empty or contains no data")

    normalized = normalize_rows(rows)

    imported = 0
    for index, fields in enumerate(normalized, start=1):
        try:
            create_record(db, fields)
        except Exception:
            db.rollback()
            logger.exception("Import stopped at data row %d (%d rows inserted)", index, imported)
            raise
        imported += 1

    logger.info("Imported %d records from spreadsheet", imported)
    return imported
