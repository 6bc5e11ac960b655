"""
Pytest configuration and fixtures for yaschool-finance tests.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

from yaschool_finance.utils.date_utils import format_iso8601


@pytest.fixture(scope="session")
def fixtures_path() -> Path:
    """Directory holding JSON fixture documents."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def category_dict() -> Dict[str, Any]:
    """A valid income category as decoded from JSON."""
    return {
        "id": 1,
        "name": "Зарплата",
        "emoji": "💰",
        "isIncome": True,
    }


@pytest.fixture
def make_transaction_dict(
    category_dict: Dict[str, Any],
) -> Callable[..., Dict[str, Any]]:
    """
    Factory for transaction dicts.

    ``comment=None`` or ``category=None`` leave the key out entirely; the
    date defaults to the current UTC time.
    """

    def _make(
        id: Any = 1,
        amount: Any = "500.00",
        transaction_date: Optional[datetime] = None,
        comment: Optional[str] = "Зарплата за месяц",
        category: Any = category_dict,
    ) -> Dict[str, Any]:
        if transaction_date is None:
            transaction_date = datetime.now(timezone.utc)
        data: Dict[str, Any] = {
            "id": id,
            "amount": amount,
            "transactionDate": format_iso8601(transaction_date),
        }
        if comment is not None:
            data["comment"] = comment
        if category is not None:
            data["category"] = category
        return data

    return _make
