"""
Pydantic models for yaschool-finance records.
"""

from yaschool_finance.models.category import Category
from yaschool_finance.models.transaction import Transaction

__all__ = ["Transaction", "Category"]
