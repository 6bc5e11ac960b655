"""
Core functionality for yaschool-finance.
"""

from yaschool_finance.core.decoder import (
    decode_category,
    decode_transaction,
    decode_transactions,
    load_document,
    parse_category,
    parse_transaction,
)
from yaschool_finance.core.exceptions import (
    DecodeError,
    DocumentNotFoundError,
    ValidationFailure,
    YaschoolFinanceError,
)

__all__ = [
    "decode_category",
    "decode_transaction",
    "decode_transactions",
    "load_document",
    "parse_category",
    "parse_transaction",
    "DecodeError",
    "DocumentNotFoundError",
    "ValidationFailure",
    "YaschoolFinanceError",
]
