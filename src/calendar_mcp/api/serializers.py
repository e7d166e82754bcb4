from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..domain import DailyAgenda, FormattedDetailedEvent, FormattedEvent
from .models import DailyAgendaPayload, DetailedEventPayload, EventPayload

_DUMP_OPTIONS: Dict[str, Any] = {"by_alias": True, "exclude_none": True, "mode": "json"}


def serialize_event(event: FormattedEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(**_DUMP_OPTIONS)


def serialize_events(events: Iterable[FormattedEvent]) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in events]


def serialize_detailed_event(event: FormattedDetailedEvent) -> Dict[str, Any]:
    return DetailedEventPayload.from_domain(event).model_dump(**_DUMP_OPTIONS)


def serialize_agenda(agenda: DailyAgenda) -> Dict[str, Any]:
    return DailyAgendaPayload.from_domain(agenda).model_dump(**_DUMP_OPTIONS)
