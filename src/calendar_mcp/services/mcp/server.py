from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Literal

import orjson
from fastmcp import FastMCP
from fastmcp.tools import FunctionTool

from ...api import ApiFunction, get_api_functions

INSTRUCTIONS = (
    "Calendar MCP exposes read-only lookups over the local macOS Calendar database. "
    "Use the tools to list recent or upcoming events, query a date range, search by title, "
    "review today's agenda, and fetch the details of a single event by id."
)
NOT_FOUND_TEXT = "Event not found"

Transport = Literal["stdio", "streamable-http"]

logger = logging.getLogger(__name__)


def render_result(result: Any) -> str:
    """Encode a tool result as the single text payload returned to the client."""

    if result is None:
        return NOT_FOUND_TEXT
    return orjson.dumps(result, option=orjson.OPT_INDENT_2).decode("utf-8")


def _text_tool(api_function: ApiFunction) -> Callable[..., str]:
    """Wrap an API function so it returns pretty-printed JSON text.

    The wrapper advertises the wrapped function's parameters (as keyword-only,
    with resolved annotations) so FastMCP builds the same input schema.
    """

    def tool(**arguments: Any) -> str:
        try:
            result = api_function.func(**arguments)
        except Exception:
            logger.exception("MCP tool %s failed", api_function.name)
            raise
        return render_result(result)

    parameters = [
        param.replace(
            kind=inspect.Parameter.KEYWORD_ONLY,
            annotation=api_function.type_hints.get(param.name, Any),
        )
        for param in api_function.signature.parameters.values()
    ]
    tool.__name__ = api_function.func.__name__
    tool.__qualname__ = api_function.func.__qualname__
    tool.__doc__ = api_function.description
    tool.__signature__ = inspect.Signature(parameters, return_annotation=str)  # type: ignore[attr-defined]
    tool.__annotations__ = {**{param.name: param.annotation for param in parameters}, "return": str}
    return tool


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="calendar-mcp", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.add_tool(
            FunctionTool.from_function(
                _text_tool(api_function),
                name=api_function.name,
                title=api_function.title,
                description=api_function.description,
                tags=set(api_function.tags),
            )
        )
    return server


def run_mcp_server(transport: Transport = "stdio", host: str = "127.0.0.1", port: int = 8765) -> None:
    server = build_mcp_server()
    logger.info("Calendar MCP server starting (%s transport)", transport)
    if transport == "stdio":
        server.run("stdio")
    else:
        server.run("streamable-http", host=host, port=port)
