import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.record import ImportResponse
from app.services.record_import import import_records
from app.services.spreadsheet import SheetError, read_sheet_rows

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/upload-excel",
    response_model=ImportResponse,
    summary="Import records from an Excel file",
)
def upload_excel(
    file: UploadFile | None = File(default=None),
    db: Session = Depends(get_db),
) -> dict:
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        rows = read_sheet_rows(file.file.read())
        imported = import_records(db, rows)
    except SheetError as exc:
        logger.warning("Rejected upload '%s': %s", file.filename, exc)
        raise HTTPException(status_code=400, detail=str(exc))

    return {"detail": f"Imported {imported} records", "imported": imported}
