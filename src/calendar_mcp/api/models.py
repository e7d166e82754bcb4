from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..domain import DailyAgenda, EventStatus, FormattedDetailedEvent, FormattedEvent


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class EventPayload(_CamelModel):
    id: int
    title: str
    start_time: Optional[str] = Field(default=None)
    end_time: Optional[str] = Field(default=None)
    all_day: bool
    status: EventStatus
    is_rescheduled: bool

    @classmethod
    def from_domain(cls, event: FormattedEvent) -> "EventPayload":
        return cls(
            id=event.id,
            title=event.title,
            start_time=event.start_time,
            end_time=event.end_time,
            all_day=event.all_day,
            status=event.status,
            is_rescheduled=event.is_rescheduled,
        )


class DetailedEventPayload(EventPayload):
    description: Optional[str] = Field(default=None)
    url: Optional[str] = Field(default=None)
    location: Optional[str] = Field(default=None)
    recurrence_rule: Optional[str] = Field(default=None)
    calendar: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: FormattedDetailedEvent) -> "DetailedEventPayload":
        return cls(
            **EventPayload.from_domain(event).model_dump(),
            description=event.description,
            url=event.url,
            location=event.location,
            recurrence_rule=event.recurrence_rule,
            calendar=event.calendar,
        )


class DailyAgendaPayload(_CamelModel):
    date: str
    events: List[EventPayload] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, agenda: DailyAgenda) -> "DailyAgendaPayload":
        return cls(
            date=agenda.date.isoformat(),
            events=[EventPayload.from_domain(event) for event in agenda.events],
        )


# Tool arguments. Field names match the tool parameter names through the camelCase aliases.


class EventListRequest(_CamelModel):
    limit: int = Field(default=10, ge=1, le=100)
    include_rescheduled: bool = False


class DateRangeRequest(_CamelModel):
    start_date: str = Field(min_length=1)
    end_date: str = Field(min_length=1)
    include_rescheduled: bool = False


class SearchRequest(_CamelModel):
    query: str
    limit: int = Field(default=20, ge=1, le=100)
    time_range: Literal["all", "past", "future"] = "all"
    include_rescheduled: bool = False


class TodayRequest(_CamelModel):
    include_rescheduled: bool = False


class EventDetailsRequest(_CamelModel):
    event_id: int
