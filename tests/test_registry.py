"""Tests for the tool registry and generated input schemas."""

from __future__ import annotations

import pytest

from calendar_mcp.api import call_api, get_api_function, get_api_functions, register_api
from calendar_mcp.api.registry import REGISTRY

TOOL_NAMES = {
    "get-recent-events",
    "get-upcoming-events",
    "get-events-by-date-range",
    "search-events",
    "get-todays-events",
    "get-event-details",
}


def test_all_tools_registered():
    assert {func.name for func in get_api_functions()} == TOOL_NAMES


def test_recent_events_schema():
    schema = get_api_function("get-recent-events").parameter_schema

    assert schema["type"] == "object"
    assert "required" not in schema
    assert schema["properties"]["limit"] == {
        "type": "integer",
        "description": "Number of events to retrieve",
        "minimum": 1,
        "maximum": 100,
        "default": 10,
    }
    assert schema["properties"]["includeRescheduled"] == {
        "type": "boolean",
        "description": "Include original rescheduled events",
        "default": False,
    }


def test_search_schema_enumerates_time_ranges():
    properties = get_api_function("search-events").parameter_schema["properties"]

    assert properties["timeRange"]["enum"] == ["all", "past", "future"]
    assert properties["timeRange"]["type"] == "string"
    assert properties["timeRange"]["default"] == "all"
    assert properties["limit"]["default"] == 20


def test_required_parameters():
    assert get_api_function("get-events-by-date-range").parameter_schema["required"] == ["startDate", "endDate"]
    assert get_api_function("search-events").parameter_schema["required"] == ["query"]
    assert get_api_function("get-event-details").parameter_schema["required"] == ["eventId"]


def test_as_tool_includes_title_and_schema():
    tool = get_api_function("get-todays-events").as_tool()

    assert tool["name"] == "get-todays-events"
    assert tool["title"] == "Get Today's Events"
    assert tool["inputSchema"]["properties"]["includeRescheduled"]["type"] == "boolean"


def test_unknown_tool_raises_key_error():
    with pytest.raises(KeyError):
        call_api("delete-everything")


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_api("get-recent-events", title="x", description="x", category="calendar")(lambda: None)


def test_register_and_call_new_function():
    @register_api("echo-limit", title="Echo", description="Echo the limit back.", category="test")
    def echo(limit: int = 3) -> dict:
        return {"limit": limit}

    try:
        assert call_api("echo-limit", limit=7) == {"limit": 7}
        assert get_api_function("echo-limit").parameter_schema["properties"]["limit"] == {
            "type": "integer",
            "default": 3,
        }
    finally:
        REGISTRY.pop("echo-limit")
