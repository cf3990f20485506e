import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(Base):
    __tablename__ = "records"

    # Insertion order; records list oldest first even when created_at ties
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, unique=True, default=uuid.uuid4)

    number: Mapped[str] = mapped_column(Text, default="")
    full_name: Mapped[str] = mapped_column(Text, default="")
    birth_info: Mapped[str] = mapped_column(Text, default="")
    specialization: Mapped[str] = mapped_column(Text, default="")
    cycle: Mapped[str] = mapped_column(Text, default="")
    group: Mapped[str] = mapped_column("group_name", Text, default="")
    intermediary: Mapped[str] = mapped_column(Text, default="")
    diploma: Mapped[str] = mapped_column(Text, default="")
    note: Mapped[str] = mapped_column(Text, default="")

    file_amount: Mapped[float] = mapped_column(Float, default=0)
    payment1: Mapped[float] = mapped_column(Float, default=0)
    payment_date1: Mapped[str] = mapped_column(Text, default="")
    payment2: Mapped[float] = mapped_column(Float, default=0)
    payment_date2: Mapped[str] = mapped_column(Text, default="")
    remaining: Mapped[float] = mapped_column(Float, default=0)

    row_color: Mapped[str] = mapped_column(Text, default="")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
