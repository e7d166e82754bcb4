from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Mapping, Optional

from .enums import EventStatus


def _column(record: Mapping[str, Any], name: str) -> Any:
    try:
        return record[name]
    except (KeyError, IndexError):
        return None


@dataclass(frozen=True, slots=True)
class CalendarItem:
    """A row of the ``CalendarItem`` table as stored by Calendar.app.

    ``start_date`` and ``end_date`` are seconds since the Core Data reference
    date (2001-01-01 UTC), not Unix timestamps.
    """

    rowid: int
    summary: Optional[str] = None
    start_date: Optional[float] = None
    end_date: Optional[float] = None
    all_day: int = 0
    status: Optional[int] = None
    hidden: int = 0
    orig_item_id: Optional[int] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CalendarItem":
        return cls(
            rowid=int(record["rowid"]),
            summary=_column(record, "summary"),
            start_date=_column(record, "start_date"),
            end_date=_column(record, "end_date"),
            all_day=_column(record, "all_day") or 0,
            status=_column(record, "status"),
            hidden=_column(record, "hidden") or 0,
            orig_item_id=_column(record, "orig_item_id"),
        )


@dataclass(frozen=True, slots=True)
class DetailedCalendarItem(CalendarItem):
    description: Optional[str] = None
    url: Optional[str] = None
    location: Optional[str] = None
    recurrence_rule: Optional[str] = None
    calendar_name: Optional[str] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "DetailedCalendarItem":
        base = CalendarItem.from_record(record)
        return cls(
            rowid=base.rowid,
            summary=base.summary,
            start_date=base.start_date,
            end_date=base.end_date,
            all_day=base.all_day,
            status=base.status,
            hidden=base.hidden,
            orig_item_id=base.orig_item_id,
            description=_column(record, "description"),
            url=_column(record, "url"),
            location=_column(record, "location"),
            recurrence_rule=_column(record, "recurrence_rule"),
            calendar_name=_column(record, "calendar_name"),
        )


@dataclass(frozen=True, slots=True)
class FormattedEvent:
    id: int
    title: str
    start_time: Optional[str]
    end_time: Optional[str]
    all_day: bool
    status: EventStatus
    is_rescheduled: bool


@dataclass(frozen=True, slots=True)
class FormattedDetailedEvent(FormattedEvent):
    description: Optional[str] = None
    url: Optional[str] = None
    location: Optional[str] = None
    recurrence_rule: Optional[str] = None
    calendar: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DailyAgenda:
    """Events overlapping a single local calendar day."""

    date: date
    events: List[FormattedEvent] = field(default_factory=list)
