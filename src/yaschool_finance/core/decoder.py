"""
JSON decoder for category and transaction records.

Converts decoded JSON values into validated, immutable models. The
``decode_*`` functions raise ValidationFailure naming the failing field;
the ``parse_*`` functions collapse every failure into None.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from yaschool_finance.core.exceptions import (
    DecodeError,
    DocumentNotFoundError,
    ValidationFailure,
)
from yaschool_finance.core.fields import (
    JSONObject,
    JSONValue,
    optional_str,
    require_bool,
    require_decimal,
    require_int,
    require_object,
    require_str,
)
from yaschool_finance.models.category import Category
from yaschool_finance.models.transaction import Transaction
from yaschool_finance.utils.date_utils import parse_iso8601

logger = logging.getLogger(__name__)


def _from_pydantic(error: ValidationError) -> ValidationFailure:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    return ValidationFailure(field, first["msg"])


def decode_category(json_object: Any) -> Category:
    """
    Decode a category object.

    Args:
        json_object: Decoded JSON value

    Returns:
        Validated Category

    Raises:
        ValidationFailure: If the value is not an object or any field is invalid
    """
    obj = require_object(json_object)
    try:
        return Category(
            id=require_int(obj, "id"),
            name=require_str(obj, "name", non_empty=True),
            emoji=require_str(obj, "emoji", non_empty=True),
            is_income=require_bool(obj, "isIncome"),
        )
    except ValidationError as e:
        raise _from_pydantic(e) from e


def _decode_transaction_date(obj: JSONObject) -> datetime:
    text = require_str(obj, "transactionDate")
    try:
        return parse_iso8601(text)
    except ValueError as e:
        raise ValidationFailure("transactionDate", str(e)) from e


def decode_transaction(json_object: Any) -> Transaction:
    """
    Decode a transaction object, including its nested category.

    Args:
        json_object: Decoded JSON value

    Returns:
        Validated Transaction

    Raises:
        ValidationFailure: If the value is not an object or any field,
            nested category fields included, is invalid
    """
    obj = require_object(json_object)

    transaction_id = require_int(obj, "id")
    amount = require_decimal(obj, "amount")
    transaction_date = _decode_transaction_date(obj)
    comment = optional_str(obj, "comment")

    if "category" not in obj:
        raise ValidationFailure("category", "missing required field")
    try:
        category = decode_category(obj["category"])
    except ValidationFailure as e:
        raise e.nested("category") from e

    try:
        return Transaction(
            id=transaction_id,
            amount=amount,
            transaction_date=transaction_date,
            comment=comment,
            category=category,
        )
    except ValidationError as e:
        raise _from_pydantic(e) from e


def parse_category(json_object: Any) -> Optional[Category]:
    """Decode a category, returning None instead of raising."""
    try:
        return decode_category(json_object)
    except ValidationFailure as e:
        logger.debug(f"Rejected category: {e}")
        return None


def parse_transaction(json_object: Any) -> Optional[Transaction]:
    """Decode a transaction, returning None instead of raising."""
    try:
        return decode_transaction(json_object)
    except ValidationFailure as e:
        logger.debug(f"Rejected transaction: {e}")
        return None


def decode_transactions(json_objects: Iterable[Any]) -> List[Transaction]:
    """
    Decode a batch of transaction objects.

    Invalid entries are skipped. When several entries share an id the first
    one wins.

    Args:
        json_objects: Decoded JSON values

    Returns:
        List of Transaction objects sorted by date descending
    """
    transactions: List[Transaction] = []
    seen = set()

    for index, item in enumerate(json_objects):
        try:
            txn = decode_transaction(item)
        except ValidationFailure as e:
            logger.info(f"Skipping transaction #{index}: {e}")
            continue

        if txn.id in seen:
            logger.info(f"Skipping duplicate transaction id {txn.id}")
            continue
        seen.add(txn.id)
        transactions.append(txn)

    transactions.sort(key=lambda x: x.transaction_date, reverse=True)
    return transactions


def load_document(path: Path) -> List[JSONValue]:
    """
    Load a JSON document holding one transaction object or a list of them.

    Args:
        path: Path to the JSON file

    Returns:
        List of decoded (not yet validated) transaction values

    Raises:
        DocumentNotFoundError: If the file does not exist
        DecodeError: If the file is not JSON or is neither an object nor a list
    """
    if not path.is_file():
        raise DocumentNotFoundError(f"Document not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise DecodeError(f"Expected an object or a list in {path}, got {type(data).__name__}")
