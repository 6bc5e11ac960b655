"""
Custom exceptions for yaschool-finance.
"""

from typing import Optional


class YaschoolFinanceError(Exception):
    """Base exception for yaschool-finance errors."""
    pass


class ValidationFailure(YaschoolFinanceError):
    """
    Raised when a JSON value cannot be turned into a record.

    Covers missing keys, wrong value types, empty required text and
    unparseable amounts or timestamps, including failures inside a
    nested category.
    """

    def __init__(self, field: Optional[str], reason: str):
        self.field = field
        self.reason = reason
        message = f"{field}: {reason}" if field else reason
        super().__init__(message)

    def nested(self, parent: str) -> "ValidationFailure":
        """Return a copy with the field path prefixed by ``parent``."""
        field = f"{parent}.{self.field}" if self.field else parent
        return ValidationFailure(field, self.reason)


class DocumentNotFoundError(YaschoolFinanceError):
    """Raised when a JSON document cannot be found."""
    pass


class DecodeError(YaschoolFinanceError):
    """Raised when a document is not valid JSON or has the wrong shape."""
    pass
