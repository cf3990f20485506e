"""Seed script: creates a few sample records covering owed, settled and overpaid balances."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import app.models  # noqa: E402, F401
from app.core.database import Base, SessionLocal, engine  # noqa: E402
from app.models.record import Record  # noqa: E402
from app.services.balance import balance_status  # noqa: E402
from app.services.records import create_record  # noqa: E402

SAMPLES = [
    {"number": "1", "full_name": "Sample Student A", "file_amount": 1000, "payment1": 400, "payment2": 100},
    {"number": "2", "full_name": "Sample Student B", "file_amount": 1000, "payment1": 400, "payment2": 600},
    {"number": "3", "full_name": "Sample Student C", "file_amount": 1000, "payment1": 1200, "payment2": 400},
]


def seed() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Record).count():
            print("Records already present, nothing to seed")
            return

        for sample in SAMPLES:
            record = create_record(db, sample)
            print(
                f"Record created: id={record.id}, remaining={record.remaining} "
                f"({balance_status(record.remaining)})"
            )
    finally:
        db.close()


if __name__ == "__main__":
    seed()
