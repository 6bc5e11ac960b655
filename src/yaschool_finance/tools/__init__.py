"""
MCP tools for yaschool-finance.
"""

from yaschool_finance.tools.tools import TransactionParsingTools, create_tool_schemas

__all__ = ["TransactionParsingTools", "create_tool_schemas"]
