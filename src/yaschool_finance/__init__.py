"""
Strict parser for transaction and category JSON records.
"""

from yaschool_finance.models.category import Category
from yaschool_finance.models.transaction import Transaction

__version__ = "0.1.0"

__all__ = ["Category", "Transaction"]
