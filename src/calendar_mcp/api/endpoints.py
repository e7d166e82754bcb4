from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import Field

from .models import DateRangeRequest, EventDetailsRequest, EventListRequest, SearchRequest, TodayRequest
from .registry import register_api
from .serializers import serialize_agenda, serialize_detailed_event, serialize_events
from .state import api_state

# Tool parameters keep their published camelCase names.
# ruff: noqa: N803

EventLimit = Annotated[int, Field(ge=1, le=100, description="Number of events to retrieve")]
SearchLimit = Annotated[int, Field(ge=1, le=100, description="Maximum number of results")]
IncludeRescheduled = Annotated[bool, Field(description="Include original rescheduled events")]


@register_api(
    "get-recent-events",
    title="Get Recent Calendar Events",
    description="Retrieve recent past calendar events from macOS Calendar",
    category="calendar",
    tags=("read", "past"),
)
def get_recent_events(limit: EventLimit = 10, includeRescheduled: IncludeRescheduled = False) -> List[Dict[str, Any]]:
    request = EventListRequest(limit=limit, include_rescheduled=includeRescheduled)
    events = api_state.calendar.recent(limit=request.limit, include_rescheduled=request.include_rescheduled)
    return serialize_events(events)


@register_api(
    "get-upcoming-events",
    title="Get Upcoming Calendar Events",
    description="Retrieve upcoming calendar events from macOS Calendar",
    category="calendar",
    tags=("read", "future"),
)
def get_upcoming_events(limit: EventLimit = 10, includeRescheduled: IncludeRescheduled = False) -> List[Dict[str, Any]]:
    request = EventListRequest(limit=limit, include_rescheduled=includeRescheduled)
    events = api_state.calendar.upcoming(limit=request.limit, include_rescheduled=request.include_rescheduled)
    return serialize_events(events)


@register_api(
    "get-events-by-date-range",
    title="Get Events by Date Range",
    description="Retrieve calendar events within a specific date range",
    category="calendar",
    tags=("read", "range"),
)
def get_events_by_date_range(
    startDate: Annotated[str, Field(description="Start date in ISO format (e.g., 2024-01-01)")],
    endDate: Annotated[str, Field(description="End date in ISO format (e.g., 2024-01-31)")],
    includeRescheduled: IncludeRescheduled = False,
) -> List[Dict[str, Any]]:
    request = DateRangeRequest(start_date=startDate, end_date=endDate, include_rescheduled=includeRescheduled)
    events = api_state.calendar.by_date_range(
        request.start_date,
        request.end_date,
        include_rescheduled=request.include_rescheduled,
    )
    return serialize_events(events)


@register_api(
    "search-events",
    title="Search Calendar Events",
    description="Search for calendar events by title/summary",
    category="calendar",
    tags=("read", "search"),
)
def search_calendar_events(
    query: Annotated[str, Field(description="Search query for event titles")],
    limit: SearchLimit = 20,
    timeRange: Annotated[Literal["all", "past", "future"], Field(description="Time range to search")] = "all",
    includeRescheduled: IncludeRescheduled = False,
) -> List[Dict[str, Any]]:
    request = SearchRequest(
        query=query,
        limit=limit,
        time_range=timeRange,
        include_rescheduled=includeRescheduled,
    )
    events = api_state.calendar.search(
        request.query,
        limit=request.limit,
        time_range=request.time_range,
        include_rescheduled=request.include_rescheduled,
    )
    return serialize_events(events)


@register_api(
    "get-todays-events",
    title="Get Today's Events",
    description="Get all events scheduled for today",
    category="calendar",
    tags=("read", "day"),
)
def get_todays_events(includeRescheduled: IncludeRescheduled = False) -> Dict[str, Any]:
    request = TodayRequest(include_rescheduled=includeRescheduled)
    agenda = api_state.calendar.today(include_rescheduled=request.include_rescheduled)
    return serialize_agenda(agenda)


@register_api(
    "get-event-details",
    title="Get Event Details",
    description="Get detailed information about a specific calendar event",
    category="calendar",
    tags=("read", "detail"),
)
def get_event_details(eventId: Annotated[int, Field(description="The ROWID of the event")]) -> Optional[Dict[str, Any]]:
    request = EventDetailsRequest(event_id=eventId)
    event = api_state.calendar.detail(request.event_id)
    if event is None:
        return None
    return serialize_detailed_event(event)
