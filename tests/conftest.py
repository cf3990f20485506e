"""Pytest configuration: every test runs against a fresh in-memory SQLite database."""

import io
import os

# Must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from openpyxl import Workbook  # noqa: E402

from app.core.database import Base, SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402

HEADER = [
    "رقم", "الاسم و اللقب", "تاريخ و مكان الميلاد", "الاختصاص", "دورة", "الفوج",
    "مبلغ الملف", "الوسيط", "الدفعة 1", "تاريخ الدفعة 1", "الدفعة 2",
    "تاريخ الدفعة 2", "الديبلوم", "ملاحظة",
]


@pytest.fixture(autouse=True)
def reset_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_sheet():
    """Build an .xlsx file in memory from a header row and data rows."""

    def _make(rows, header=HEADER):
        wb = Workbook()
        ws = wb.active
        ws.append(header)
        for row in rows:
            ws.append(row)
        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    return _make


@pytest.fixture
def create_record(client):
    def _create(**fields):
        resp = client.post("/records", json=fields)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
