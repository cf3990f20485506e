import logging

from sqlalchemy.orm import Session

from app.models.column_color import ColumnColor

logger = logging.getLogger(__name__)


def get_column_colors(db: Session) -> dict[str, str]:
    rows = db.query(ColumnColor).order_by(ColumnColor.field).all()
    return {row.field: row.color for row in rows}


def set_column_color(db: Session, field: str, color: str) -> None:
    entry = db.get(ColumnColor, field)
    if entry is None:
        db.add(ColumnColor(field=field, color=color))
    else:
        entry.color = color
    db.commit()
    logger.info("Column '%s' color set to '%s'", field, color)
