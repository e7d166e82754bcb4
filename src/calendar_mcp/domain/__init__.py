"""Domain types for Calendar.app rows and the records built from them."""

from __future__ import annotations

from .enums import EventStatus, TimeRange
from .models import CalendarItem, DailyAgenda, DetailedCalendarItem, FormattedDetailedEvent, FormattedEvent

__all__ = [
    "CalendarItem",
    "DailyAgenda",
    "DetailedCalendarItem",
    "EventStatus",
    "FormattedDetailedEvent",
    "FormattedEvent",
    "TimeRange",
]
