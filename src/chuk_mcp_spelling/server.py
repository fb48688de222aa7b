#!/usr/bin/env python3
"""
Entry point for the CHUK Spelling MCP Server.

Runs the MCP server (stdio or http), or prints a formula table for a
root and exits when --table is given.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def print_table(root: str, kind: str, fmt: str) -> None:
    """Print the formula table of every chord or scale over a root."""
    from chuk_mcp_spelling.catalog import CatalogLoader, build_formula_table
    from chuk_mcp_spelling.constants import CollectionKind
    from chuk_mcp_spelling.core import Pitch

    catalog = CatalogLoader()
    collections = catalog.list_collections(CollectionKind(kind))
    print(build_formula_table(collections, Pitch.from_name(root), fmt))  # type: ignore[arg-type]


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Spelling MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--table",
        metavar="ROOT",
        help="Print the formula table over ROOT (e.g. 'C', 'Bb') and exit",
    )
    parser.add_argument(
        "--kind",
        choices=["chord", "scale"],
        default="chord",
        help="Collections listed by --table (default: chord)",
    )
    parser.add_argument(
        "--format",
        choices=["markdown", "html"],
        default="markdown",
        help="Table format for --table (default: markdown)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.table:
        print_table(args.table, args.kind, args.format)
        return

    # Import after argument parsing to avoid issues
    from chuk_mcp_spelling.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Spelling MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Spelling MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
