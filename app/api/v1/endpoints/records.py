import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.record import Record
from app.schemas.record import RecordPayload, RecordResponse
from app.services import records as record_service
from app.services.column_colors import get_column_colors

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_record_or_404(db: Session, record_id: uuid.UUID) -> Record:
    record = record_service.get_record(db, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")
    return record


@router.get(
    "/records",
    response_model=list[RecordResponse],
    summary="List all records, oldest first",
)
def list_records(db: Session = Depends(get_db)) -> list[dict]:
    column_colors = get_column_colors(db)
    return [
        record_service.record_to_dict(record, column_colors)
        for record in record_service.list_records(db)
    ]


@router.post(
    "/records",
    response_model=RecordResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a record",
)
def create_record(
    data: RecordPayload,
    db: Session = Depends(get_db),
) -> dict:
    record = record_service.create_record(db, data.model_dump())
    logger.info("Record %s created (remaining=%s)", record.id, record.remaining)
    return record_service.record_to_dict(record, get_column_colors(db))


@router.put(
    "/records/{record_id}",
    response_model=RecordResponse,
    summary="Update the given fields of a record",
)
def update_record(
    record_id: uuid.UUID,
    data: RecordPayload,
    db: Session = Depends(get_db),
) -> dict:
    record = _get_record_or_404(db, record_id)
    record = record_service.update_record(db, record, data.model_dump(exclude_unset=True))
    return record_service.record_to_dict(record, get_column_colors(db))


@router.delete(
    "/records/{record_id}",
    summary="Delete a record",
)
def delete_record(
    record_id: uuid.UUID,
    db: Session = Depends(get_db),
) -> dict:
    record = _get_record_or_404(db, record_id)
    db.delete(record)
    db.commit()
    logger.info("Record %s deleted", record_id)
    return {"detail": "Record deleted"}
