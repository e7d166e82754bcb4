"""MCP server exposing the calendar tools."""

from .server import NOT_FOUND_TEXT, build_mcp_server, render_result, run_mcp_server

__all__ = ["NOT_FOUND_TEXT", "build_mcp_server", "render_result", "run_mcp_server"]
