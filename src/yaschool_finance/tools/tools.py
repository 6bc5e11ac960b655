"""
MCP tool definitions for transaction parsing.

Exposes the category and transaction parsers through the Model Context Protocol.
"""

from typing import Any, Dict, List

from yaschool_finance.core.decoder import (
    decode_category,
    decode_transaction,
    decode_transactions,
)
from yaschool_finance.core.exceptions import ValidationFailure


def _failure(error: ValidationFailure) -> Dict[str, Any]:
    return {"valid": False, "field": error.field, "error": error.reason}


class TransactionParsingTools:
    """Collection of MCP tools for validating transaction JSON."""

    def parse_transaction(self, transaction: Any) -> Dict[str, Any]:
        """
        Validate a single transaction object.

        Args:
            transaction: Decoded JSON object with a nested category

        Returns:
            Dict with the normalized transaction, or the failing field and reason
        """
        try:
            txn = decode_transaction(transaction)
        except ValidationFailure as e:
            return _failure(e)
        return {"valid": True, "transaction": txn.to_json_object()}

    def parse_category(self, category: Any) -> Dict[str, Any]:
        """
        Validate a single category object.

        Args:
            category: Decoded JSON object

        Returns:
            Dict with the normalized category, or the failing field and reason
        """
        try:
            cat = decode_category(category)
        except ValidationFailure as e:
            return _failure(e)
        return {"valid": True, "category": cat.to_json_object()}

    def parse_transactions(self, transactions: List[Any]) -> Dict[str, Any]:
        """
        Validate a batch of transaction objects.

        Invalid entries and duplicate ids are dropped; the result reports
        how many were rejected.

        Args:
            transactions: List of decoded JSON objects

        Returns:
            Dict with accepted count, rejected count and the transactions
            sorted by date descending
        """
        if not isinstance(transactions, list):
            raise ValueError("transactions must be a list")

        accepted = decode_transactions(transactions)
        return {
            "count": len(accepted),
            "rejected": len(transactions) - len(accepted),
            "transactions": [txn.to_json_object() for txn in accepted],
        }


_CATEGORY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "description": "Category with id, name, emoji and isIncome",
    "properties": {
        "id": {"type": "integer"},
        "name": {"type": "string"},
        "emoji": {"type": "string"},
        "isIncome": {"type": "boolean"},
    },
}

_TRANSACTION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "description": (
        "Transaction with integer id, decimal amount as text (e.g. \"500.00\"), "
        "ISO-8601 transactionDate, optional comment and a nested category"
    ),
    "properties": {
        "id": {"type": "integer"},
        "amount": {"type": "string"},
        "transactionDate": {"type": "string"},
        "comment": {"type": "string"},
        "category": _CATEGORY_SCHEMA,
    },
}


def create_tool_schemas() -> List[Dict[str, Any]]:
    """
    Create MCP tool schemas for all tools.

    Returns:
        List of tool schema dictionaries
    """
    return [
        {
            "name": "parse_transaction",
            "description": (
                "Validate a transaction JSON object. Returns the normalized "
                "transaction, or the first field that failed validation."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"transaction": _TRANSACTION_SCHEMA},
                "required": ["transaction"],
            },
        },
        {
            "name": "parse_category",
            "description": (
                "Validate a category JSON object. Returns the normalized "
                "category, or the first field that failed validation."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"category": _CATEGORY_SCHEMA},
                "required": ["category"],
            },
        },
        {
            "name": "parse_transactions",
            "description": (
                "Validate a list of transaction JSON objects. Invalid entries and "
                "duplicate ids are dropped; returns the accepted transactions "
                "sorted by date, newest first, and the number rejected."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "transactions": {
                        "type": "array",
                        "items": _TRANSACTION_SCHEMA,
                    },
                },
                "required": ["transactions"],
            },
        },
    ]
