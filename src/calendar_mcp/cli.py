from __future__ import annotations

import argparse
import json
import logging
from typing import Optional, Sequence

from .config import get_settings
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Read-only macOS Calendar tools over MCP and HTTP.")
    parser.add_argument("--log-level", default=None, help="Override CALENDAR_MCP_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server.")
    mcp_parser.add_argument("--transport", choices=("stdio", "streamable-http"), default="stdio")
    mcp_parser.add_argument("--host", default=settings.server.host)
    mcp_parser.add_argument("--port", type=int, default=settings.server.mcp_port)
    mcp_parser.add_argument("--db-path", default=None, help="Calendar database to read instead of the default.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the same tools.")
    api_parser.add_argument("--host", default=settings.server.host)
    api_parser.add_argument("--port", type=int, default=settings.server.api_port)
    api_parser.add_argument("--db-path", default=None, help="Calendar database to read instead of the default.")

    subparsers.add_parser("tools", help="Print the registered tools and their input schemas as JSON.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger = logging.getLogger(__name__)
    logger.info("Calendar MCP CLI starting (%s)", args.command)

    from .api import api_state, get_api_functions

    if getattr(args, "db_path", None):
        api_state.use_database(args.db_path)

    if args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(transport=args.transport, host=args.host, port=args.port)
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "tools":
        tools = [func.as_tool() for func in sorted(get_api_functions(), key=lambda item: item.name)]
        print(json.dumps({"tools": tools}, indent=2))
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
