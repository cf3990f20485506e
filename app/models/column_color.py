from datetime import datetime

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.record import utcnow


class ColumnColor(Base):
    """Display color of one record field, shared by every record."""

    __tablename__ = "column_colors"

    field: Mapped[str] = mapped_column(Text, primary_key=True)
    color: Mapped[str] = mapped_column(Text, default="")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )
