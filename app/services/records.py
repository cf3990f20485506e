import logging
import uuid
from typing import Any

from sqlalchemy.orm import Session

from app.models.record import Record, utcnow
from app.services.balance import remaining_balance

logger = logging.getLogger(__name__)


def apply_balance(record: Record) -> None:
    """Authoritative recomputation of the derived balance before every write."""
    record.remaining = remaining_balance(
        record.file_amount, record.payment1, record.payment2
    )


def list_records(db: Session) -> list[Record]:
    return db.query(Record).order_by(Record.seq).all()


def get_record(db: Session, record_id: uuid.UUID) -> Record | None:
    return db.query(Record).filter(Record.id == record_id).first()


def create_record(db: Session, fields: dict[str, Any]) -> Record:
    record = Record(**fields)
    apply_balance(record)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def update_record(db: Session, record: Record, changes: dict[str, Any]) -> Record:
    for key, value in changes.items():
        setattr(record, key, value)
    apply_balance(record)
    record.updated_at = utcnow()
    db.commit()
    db.refresh(record)
    return record


def set_row_colors(db: Session, ids: list[uuid.UUID], color: str) -> int:
    if not ids:
        return 0
    updated = (
        db.query(Record)
        .filter(Record.id.in_(ids))
        .update({"row_color": color, "updated_at": utcnow()}, synchronize_session=False)
    )
    db.commit()
    logger.info("Row color '%s' applied to %d records", color, updated)
    return updated


def record_to_dict(record: Record, column_colors: dict[str, str]) -> dict[str, Any]:
    return {
        "id": record.id,
        "number": record.number,
        "full_name": record.full_name,
        "birth_info": record.birth_info,
        "specialization": record.specialization,
        "cycle": record.cycle,
        "group": record.group,
        "intermediary": record.intermediary,
        "diploma": record.diploma,
        "note": record.note,
        "file_amount": record.file_amount,
        "payment1": record.payment1,
        "payment_date1": record.payment_date1,
        "payment2": record.payment2,
        "payment_date2": record.payment_date2,
        "remaining": record.remaining,
        "row_color": record.row_color,
        "column_colors": dict(column_colors),
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }
