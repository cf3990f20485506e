"""
Record field catalogue and lenient value coercion.

Amounts never fail to parse: anything that is not a finite number becomes 0.
"""
import math
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any

AMOUNT_FIELDS: tuple[str, ...] = ("fileAmount", "payment1", "payment2")

TEXT_FIELDS: tuple[str, ...] = (
    "number", "fullName", "birthInfo", "specialization", "cycle", "group",
    "intermediary", "paymentDate1", "paymentDate2", "diploma", "note",
)

# Spreadsheet header label -> wire key, exact match
IMPORT_LABELS: dict[str, str] = {
    "رقم": "number",
    "الاسم و اللقب": "fullName",
    "تاريخ و مكان الميلاد": "birthInfo",
    "الاختصاص": "specialization",
    "دورة": "cycle",
    "الفوج": "group",
    "مبلغ الملف": "fileAmount",
    "الوسيط": "intermediary",
    "الدفعة 1": "payment1",
    "تاريخ الدفعة 1": "paymentDate1",
    "الدفعة 2": "payment2",
    "تاريخ الدفعة 2": "paymentDate2",
    "الديبلوم": "diploma",
    "ملاحظة": "note",
}

NUMERIC_PREFIX_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def to_amount(value: Any) -> float:
    """Best-effort numeric parse; 0 for missing, non-numeric or non-finite input."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        text = value.strip()
        try:
            number = float(text)
        except ValueError:
            match = NUMERIC_PREFIX_RE.match(text)
            if not match:
                return 0.0
            number = float(match.group(0))
    else:
        return 0.0

    return number if math.isfinite(number) else 0.0


def to_text(value: Any) -> str:
    """Render a cell or JSON value as the free-text string stored on a record."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        # Spreadsheet dates carry a midnight time component
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
