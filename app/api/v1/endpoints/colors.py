from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.record import ColorUpdateResponse, ColumnColorUpdate, RowColorsUpdate
from app.services.column_colors import get_column_colors, set_column_color
from app.services.records import set_row_colors

router = APIRouter()


@router.get(
    "/column-colors",
    response_model=dict[str, str],
    summary="Get the display color of every colored column",
)
def list_column_colors(db: Session = Depends(get_db)) -> dict[str, str]:
    return get_column_colors(db)


@router.post(
    "/update-column-color",
    response_model=ColorUpdateResponse,
    summary="Set the display color of one column for all records",
)
def update_column_color(
    body: ColumnColorUpdate,
    db: Session = Depends(get_db),
) -> dict:
    set_column_color(db, body.field, body.color)
    return {"detail": "Column color updated"}


@router.post(
    "/update-row-colors",
    response_model=ColorUpdateResponse,
    summary="Set the row color of the given records",
)
def update_row_colors(
    body: RowColorsUpdate,
    db: Session = Depends(get_db),
) -> dict:
    updated = set_row_colors(db, body.ids, body.color)
    return {"detail": "Row colors updated", "updated": updated}
