"""
Utility functions for yaschool-finance.
"""

from yaschool_finance.utils.date_utils import format_iso8601, parse_iso8601

__all__ = [
    "parse_iso8601",
    "format_iso8601",
]
