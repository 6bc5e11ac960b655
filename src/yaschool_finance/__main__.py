"""
CLI entry point for yaschool-finance.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from yaschool_finance.core.decoder import decode_transaction, load_document
from yaschool_finance.core.exceptions import ValidationFailure, YaschoolFinanceError
from yaschool_finance.server import run_server

logger = logging.getLogger(__name__)


def check_documents(paths: List[Path]) -> int:
    """
    Validate every transaction in the given JSON documents.

    Returns:
        Number of rejected transactions and unreadable documents
    """
    failures = 0
    for path in paths:
        try:
            items = load_document(path)
        except YaschoolFinanceError as e:
            logger.error(str(e))
            failures += 1
            continue

        accepted = 0
        for index, item in enumerate(items):
            try:
                decode_transaction(item)
            except ValidationFailure as e:
                print(f"{path}: transaction #{index}: {e}")
                failures += 1
                continue
            accepted += 1
        print(f"{path}: {accepted}/{len(items)} transactions valid")
    return failures


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="yaschool-finance - strict transaction JSON parser and MCP server"
    )
    parser.add_argument(
        "--check",
        type=Path,
        nargs="+",
        metavar="PATH",
        help="Validate transactions in JSON documents instead of running the server",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,  # MCP uses stdout for protocol, so log to stderr
    )

    if args.check:
        sys.exit(1 if check_documents(args.check) else 0)

    # Run the server
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        logging.info("Server stopped by user")
        sys.exit(0)
    except Exception as e:
        logging.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
