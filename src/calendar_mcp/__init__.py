"""Read-only access to the macOS Calendar database, exposed as MCP tools."""

from __future__ import annotations

from .cli import main as main

__all__ = ["main"]
