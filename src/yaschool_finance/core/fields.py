"""
Typed field extraction from decoded JSON objects.

Each helper either returns a value of exactly the expected JSON type or
raises ValidationFailure naming the offending key. Python's ``bool`` is a
subclass of ``int``, so integer checks exclude it explicitly.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional, Union

from yaschool_finance.core.exceptions import ValidationFailure

# Decoded JSON value: null, boolean, number, text, array or object.
JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
JSONObject = Mapping[str, Any]

# Plain base-10 notation with optional exponent; rejects NaN, Infinity,
# digit separators and surrounding whitespace that Decimal() would accept.
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?",
    re.ASCII,
)

_MISSING = object()


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def require_object(value: Any, field: Optional[str] = None) -> JSONObject:
    """Return ``value`` if it is a JSON object."""
    if not isinstance(value, Mapping):
        raise ValidationFailure(field, f"expected object, got {_type_name(value)}")
    return value


def _require_key(obj: JSONObject, key: str) -> Any:
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        raise ValidationFailure(key, "missing required field")
    return value


def require_int(obj: JSONObject, key: str) -> int:
    """Return the integer at ``key``; floats, booleans and numeric strings fail."""
    value = _require_key(obj, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationFailure(key, f"expected integer, got {_type_name(value)}")
    return value


def require_bool(obj: JSONObject, key: str) -> bool:
    """Return the boolean at ``key``; truthy strings and 0/1 fail."""
    value = _require_key(obj, key)
    if not isinstance(value, bool):
        raise ValidationFailure(key, f"expected boolean, got {_type_name(value)}")
    return value


def require_str(obj: JSONObject, key: str, non_empty: bool = False) -> str:
    """Return the string at ``key``, optionally rejecting the empty string."""
    value = _require_key(obj, key)
    if not isinstance(value, str):
        raise ValidationFailure(key, f"expected string, got {_type_name(value)}")
    if non_empty and not value:
        raise ValidationFailure(key, "must not be empty")
    return value


def optional_str(obj: JSONObject, key: str) -> Optional[str]:
    """
    Return the string at ``key`` or None when the key is absent or null.

    A present value of any other type is an error, not an absence.
    """
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationFailure(key, f"expected string, got {_type_name(value)}")
    return value


def require_decimal(obj: JSONObject, key: str) -> Decimal:
    """Return the decimal encoded as text at ``key``, keeping its scale."""
    text = require_str(obj, key)
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ValidationFailure(key, f"not a decimal number: {text!r}")
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise ValidationFailure(key, f"not a decimal number: {text!r}") from e
