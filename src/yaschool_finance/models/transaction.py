"""
Transaction model for yaschool-finance data.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from yaschool_finance.models.category import Category
from yaschool_finance.utils.date_utils import format_iso8601


class Transaction(BaseModel):
    """
    Represents a single income or expense transaction.

    The amount is an exact decimal that keeps the scale of its source text,
    so ``Decimal("500.00")`` and ``Decimal("500")`` stay distinguishable.
    """

    model_config = {"strict": True, "frozen": True, "populate_by_name": True}

    # Required fields
    id: int
    amount: Decimal
    transaction_date: datetime = Field(alias="transactionDate")
    category: Category

    # Optional fields
    comment: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def validate_amount_finite(cls, v: Decimal) -> Decimal:
        """Reject NaN and infinities."""
        if not v.is_finite():
            raise ValueError(f"Amount {v} is not a finite number")
        return v

    @field_validator("transaction_date")
    @classmethod
    def validate_date_has_zone(cls, v: datetime) -> datetime:
        """Require a timezone-aware timestamp."""
        if v.utcoffset() is None:
            raise ValueError("Transaction date must carry a zone offset")
        return v

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, v: Decimal) -> str:
        return str(v)

    @field_serializer("transaction_date", when_used="json")
    def serialize_transaction_date(self, v: datetime) -> str:
        return format_iso8601(v)

    @classmethod
    def parse(cls, json_object: Any) -> Optional["Transaction"]:
        """
        Parse a decoded JSON object into a Transaction.

        The nested ``category`` object is parsed as a Category. Failure of
        any field, nested ones included, rejects the whole transaction.

        Returns:
            The transaction, or None if the object is invalid
        """
        from yaschool_finance.core.decoder import parse_transaction

        return parse_transaction(json_object)

    def to_json_object(self) -> Dict[str, Any]:
        """Serialize back to the wire shape accepted by ``parse``."""
        data = self.model_dump(mode="json", by_alias=True)
        if self.comment is None:
            del data["comment"]
        return data
