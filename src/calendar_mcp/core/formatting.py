"""Map raw Calendar.app rows to the records returned by the tools."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from ..domain import CalendarItem, DetailedCalendarItem, EventStatus, FormattedDetailedEvent, FormattedEvent
from .constants import CORE_DATA_EPOCH, UNTITLED_EVENT


REFERENCE_DATE = datetime.fromtimestamp(CORE_DATA_EPOCH, tz=timezone.utc)


def convert_core_data_timestamp(timestamp: Optional[float]) -> Optional[str]:
    """Return the UTC ISO-8601 instant for a Core Data timestamp, or ``None``.

    Values outside the years 1-9999 have no ISO rendering and are treated as absent.
    """

    if timestamp is None:
        return None
    try:
        instant = REFERENCE_DATE + timedelta(seconds=timestamp)
    except (OverflowError, ValueError):
        return None
    return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_event(item: CalendarItem) -> FormattedEvent:
    return FormattedEvent(
        id=item.rowid,
        title=item.summary or UNTITLED_EVENT,
        start_time=convert_core_data_timestamp(item.start_date),
        end_time=convert_core_data_timestamp(item.end_date),
        all_day=item.all_day == 1,
        status=EventStatus.from_code(item.status),
        is_rescheduled=item.orig_item_id is not None and item.orig_item_id > 0,
    )


def format_detailed_event(item: DetailedCalendarItem) -> FormattedDetailedEvent:
    base = format_event(item)
    return FormattedDetailedEvent(
        id=base.id,
        title=base.title,
        start_time=base.start_time,
        end_time=base.end_time,
        all_day=base.all_day,
        status=base.status,
        is_rescheduled=base.is_rescheduled,
        description=item.description,
        url=item.url,
        location=item.location,
        recurrence_rule=item.recurrence_rule,
        calendar=item.calendar_name,
    )
