"""SQL for the read-only calendar lookups.

Every function takes an open connection, runs a single parameterised query
against the ``CalendarItem`` table and returns formatted records. Limits are
trusted here; range checks belong to the tool boundary.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional, Sequence, Union

from ..domain import CalendarItem, DailyAgenda, DetailedCalendarItem, FormattedDetailedEvent, FormattedEvent, TimeRange
from .constants import CORE_DATA_EPOCH
from .formatting import format_detailed_event, format_event

logger = logging.getLogger(__name__)


class InvalidDateError(ValueError):
    """Raised when a date bound cannot be parsed into a timestamp."""


EVENT_COLUMNS = """
    ROWID AS rowid,
    summary,
    start_date,
    end_date,
    all_day,
    status,
    hidden,
    orig_item_id
"""

EXCLUDE_RESCHEDULED_CLAUSE = """
    AND ROWID NOT IN (
        SELECT orig_item_id
        FROM CalendarItem
        WHERE orig_item_id > 0
    )
"""


def _exclude_rescheduled(include_rescheduled: bool) -> str:
    return "" if include_rescheduled else EXCLUDE_RESCHEDULED_CLAUSE


def to_core_data_timestamp(moment: datetime) -> float:
    """Convert an aware (or local naive) datetime to seconds since 2001-01-01 UTC."""

    return moment.timestamp() - CORE_DATA_EPOCH


def _now_timestamp(now: Optional[datetime]) -> float:
    return to_core_data_timestamp(now or datetime.now(timezone.utc))


def parse_date_bound(value: str, *, field_name: str) -> datetime:
    """Parse an ISO date or datetime used as a range bound.

    Bare dates are UTC midnight. Datetimes without an offset are local time.
    """

    text = (value or "").strip()
    if not text:
        raise InvalidDateError(f"{field_name} is required and must be an ISO 8601 date")
    try:
        if "T" not in text and " " not in text:
            day = date.fromisoformat(text)
            return datetime.combine(day, time.min, tzinfo=timezone.utc)
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            parsed = parsed.astimezone()
        # Bound must map to a POSIX timestamp.
        parsed.timestamp()
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidDateError(f"Invalid ISO 8601 date for {field_name}: {value!r}") from exc
    return parsed


def _run(connection: sqlite3.Connection, sql: str, params: Sequence[object]) -> List[FormattedEvent]:
    rows = connection.execute(sql, tuple(params)).fetchall()
    logger.debug("Calendar query returned %d rows", len(rows))
    return [format_event(CalendarItem.from_record(row)) for row in rows]


def fetch_recent_events(
    connection: sqlite3.Connection,
    *,
    limit: int = 10,
    include_rescheduled: bool = False,
    now: Optional[datetime] = None,
) -> List[FormattedEvent]:
    """Events that have already started, most recent first."""

    sql = f"""
        SELECT {EVENT_COLUMNS}
        FROM CalendarItem
        WHERE
            start_date IS NOT NULL
            AND hidden = 0
            AND start_date <= ?
            {_exclude_rescheduled(include_rescheduled)}
        ORDER BY start_date DESC
        LIMIT ?
    """
    return _run(connection, sql, (_now_timestamp(now), limit))


def fetch_upcoming_events(
    connection: sqlite3.Connection,
    *,
    limit: int = 10,
    include_rescheduled: bool = False,
    now: Optional[datetime] = None,
) -> List[FormattedEvent]:
    """Events starting after now, earliest first."""

    sql = f"""
        SELECT {EVENT_COLUMNS}
        FROM CalendarItem
        WHERE
            start_date IS NOT NULL
            AND hidden = 0
            AND start_date > ?
            {_exclude_rescheduled(include_rescheduled)}
        ORDER BY start_date ASC
        LIMIT ?
    """
    return _run(connection, sql, (_now_timestamp(now), limit))


def fetch_events_by_date_range(
    connection: sqlite3.Connection,
    *,
    start_date: str,
    end_date: str,
    include_rescheduled: bool = False,
) -> List[FormattedEvent]:
    """All events starting inside the inclusive ``[start_date, end_date]`` window."""

    start = parse_date_bound(start_date, field_name="startDate")
    end = parse_date_bound(end_date, field_name="endDate")
    if start > end:
        raise InvalidDateError(f"startDate {start_date!r} is after endDate {end_date!r}")

    sql = f"""
        SELECT {EVENT_COLUMNS}
        FROM CalendarItem
        WHERE
            start_date IS NOT NULL
            AND hidden = 0
            AND start_date >= ?
            AND start_date <= ?
            {_exclude_rescheduled(include_rescheduled)}
        ORDER BY start_date ASC
    """
    return _run(connection, sql, (to_core_data_timestamp(start), to_core_data_timestamp(end)))


def _like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def search_events(
    connection: sqlite3.Connection,
    *,
    query: str,
    limit: int = 20,
    time_range: Union[TimeRange, str] = TimeRange.ALL,
    include_rescheduled: bool = False,
    now: Optional[datetime] = None,
) -> List[FormattedEvent]:
    """Events whose title contains ``query``, newest first."""

    scope = TimeRange(time_range)
    params: list[object] = [_like_pattern(query)]
    time_clause = ""
    if scope is TimeRange.PAST:
        time_clause = "AND start_date <= ?"
        params.append(_now_timestamp(now))
    elif scope is TimeRange.FUTURE:
        time_clause = "AND start_date > ?"
        params.append(_now_timestamp(now))
    params.append(limit)

    sql = f"""
        SELECT {EVENT_COLUMNS}
        FROM CalendarItem
        WHERE
            summary LIKE ? ESCAPE '\\'
            AND hidden = 0
            {time_clause}
            {_exclude_rescheduled(include_rescheduled)}
        ORDER BY start_date DESC
        LIMIT ?
    """
    return _run(connection, sql, params)


def _local_midnight(day: date) -> datetime:
    return datetime.combine(day, time.min).astimezone()


def fetch_todays_events(
    connection: sqlite3.Connection,
    *,
    include_rescheduled: bool = False,
    today: Optional[date] = None,
) -> DailyAgenda:
    """Events overlapping the local calendar day ``today`` (defaults to the current day)."""

    day = today or date.today()
    window_start = to_core_data_timestamp(_local_midnight(day))
    window_end = to_core_data_timestamp(_local_midnight(day + timedelta(days=1)))

    sql = f"""
        SELECT {EVENT_COLUMNS}
        FROM CalendarItem
        WHERE
            start_date IS NOT NULL
            AND hidden = 0
            AND (
                (start_date >= ? AND start_date < ?)
                OR (end_date >= ? AND end_date < ?)
                OR (start_date < ? AND end_date >= ?)
            )
            {_exclude_rescheduled(include_rescheduled)}
        ORDER BY start_date ASC
    """
    window = (window_start, window_end)
    events = _run(connection, sql, window * 3)
    return DailyAgenda(date=day, events=events)


def fetch_event_details(connection: sqlite3.Connection, event_id: int) -> Optional[FormattedDetailedEvent]:
    sql = """
        SELECT
            ci.ROWID AS rowid,
            ci.summary,
            ci.start_date,
            ci.end_date,
            ci.all_day,
            ci.status,
            ci.hidden,
            ci.orig_item_id,
            ci.description,
            ci.url,
            ci.location,
            ci.recurrence_rule,
            c.title AS calendar_name
        FROM CalendarItem ci
        LEFT JOIN Calendar c ON ci.calendar_id = c.ROWID
        WHERE ci.ROWID = ?
    """
    row = connection.execute(sql, (event_id,)).fetchone()
    if row is None:
        logger.debug("Calendar item %s not found", event_id)
        return None
    return format_detailed_event(DetailedCalendarItem.from_record(row))
