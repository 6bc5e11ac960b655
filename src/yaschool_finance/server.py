"""
MCP server for yaschool-finance.

Exposes the transaction parser through the Model Context Protocol.
"""

import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from yaschool_finance.tools.tools import TransactionParsingTools, create_tool_schemas

logger = logging.getLogger(__name__)


class TransactionParsingServer:
    """MCP server for validating transaction JSON."""

    def __init__(self, name: str = "yaschool-finance"):
        """
        Initialize the MCP server.

        Args:
            name: Server name announced to MCP clients.
        """
        self.tools = TransactionParsingTools()
        self.server = Server(name)

        # Register handlers
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            """List available tools."""
            schemas = create_tool_schemas()
            return [
                Tool(
                    name=schema["name"],
                    description=schema["description"],
                    inputSchema=schema["inputSchema"],
                )
                for schema in schemas
            ]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Handle tool calls."""
            return await self.handle_tool_call(name, arguments)

    async def handle_tool_call(
        self, name: str, arguments: dict[str, Any]
    ) -> list[TextContent]:
        """Route a tool call and format its result as JSON text."""
        try:
            if name == "parse_transaction":
                result = self.tools.parse_transaction(**arguments)
            elif name == "parse_category":
                result = self.tools.parse_category(**arguments)
            elif name == "parse_transactions":
                result = self.tools.parse_transactions(**arguments)
            else:
                return [
                    TextContent(
                        type="text",
                        text=f"Unknown tool: {name}",
                    )
                ]

            return [
                TextContent(
                    type="text",
                    text=json.dumps(result, indent=2, ensure_ascii=False),
                )
            ]

        except (TypeError, ValueError) as e:
            # Missing or malformed tool arguments
            return [TextContent(type="text", text=f"Error: {str(e)}")]
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return [
                TextContent(
                    type="text",
                    text=f"Error executing tool: {str(e)}",
                )
            ]

    async def run(self) -> None:  # pragma: no cover
        """Run the MCP server using stdio transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def run_server() -> None:  # pragma: no cover
    """Run the yaschool-finance MCP server."""
    server = TransactionParsingServer()
    await server.run()
