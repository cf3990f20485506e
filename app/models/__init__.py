from app.models.column_color import ColumnColor
from app.models.record import Record

__all__ = ["ColumnColor", "Record"]
