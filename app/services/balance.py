from collections.abc import Mapping
from typing import Any

from app.services.fields import to_amount


def remaining_balance(file_amount: Any, payment1: Any, payment2: Any) -> float:
    return to_amount(file_amount) - (to_amount(payment1) + to_amount(payment2))


def calculate_remaining(record: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of a wire-shaped record with `remaining` recomputed."""
    return {
        **record,
        "remaining": remaining_balance(
            record.get("fileAmount"), record.get("payment1"), record.get("payment2")
        ),
    }


def balance_status(remaining: float) -> str:
    if remaining > 0:
        return "owed"
    if remaining < 0:
        return "overpaid"
    return "settled"
