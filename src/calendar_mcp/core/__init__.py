"""Read-only access to the Calendar.app database: connection, queries, formatting."""

from .constants import CALENDAR_DB_PATH, CORE_DATA_EPOCH, UNTITLED_EVENT
from .formatting import convert_core_data_timestamp, format_detailed_event, format_event
from .queries import (
    InvalidDateError,
    fetch_event_details,
    fetch_events_by_date_range,
    fetch_recent_events,
    fetch_todays_events,
    fetch_upcoming_events,
    parse_date_bound,
    search_events,
    to_core_data_timestamp,
)
from .store import CalendarStore, CalendarStoreError

__all__ = [
    "CALENDAR_DB_PATH",
    "CORE_DATA_EPOCH",
    "UNTITLED_EVENT",
    "CalendarStore",
    "CalendarStoreError",
    "InvalidDateError",
    "convert_core_data_timestamp",
    "fetch_event_details",
    "fetch_events_by_date_range",
    "fetch_recent_events",
    "fetch_todays_events",
    "fetch_upcoming_events",
    "format_detailed_event",
    "format_event",
    "parse_date_bound",
    "search_events",
    "to_core_data_timestamp",
]
