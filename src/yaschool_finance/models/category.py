"""
Category model for transaction classification.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Category(BaseModel):
    """
    Represents a spending or income category.

    Every field is required; records are never built with defaulted values.
    """

    model_config = {"strict": True, "frozen": True, "populate_by_name": True}

    id: int
    name: str = Field(min_length=1)
    emoji: str = Field(min_length=1)  # a single glyph, only non-emptiness is enforced
    is_income: bool = Field(alias="isIncome")

    @classmethod
    def parse(cls, json_object: Any) -> Optional["Category"]:
        """
        Parse a decoded JSON object into a Category.

        Returns:
            The category, or None if any field is missing or invalid
        """
        from yaschool_finance.core.decoder import parse_category

        return parse_category(json_object)

    def to_json_object(self) -> Dict[str, Any]:
        """Serialize back to the wire shape accepted by ``parse``."""
        return self.model_dump(mode="json", by_alias=True)
