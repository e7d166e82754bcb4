from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Union

from ..core import (
    fetch_event_details,
    fetch_events_by_date_range,
    fetch_recent_events,
    fetch_todays_events,
    fetch_upcoming_events,
    search_events,
)
from ..domain import DailyAgenda, FormattedDetailedEvent, FormattedEvent, TimeRange
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    """Runs each lookup on its own read-only connection.

    The connection is opened per call and closed before the call returns,
    whether the query succeeds or raises.
    """

    context: ServiceContext

    def recent(
        self,
        *,
        limit: int = 10,
        include_rescheduled: bool = False,
        now: Optional[datetime] = None,
    ) -> List[FormattedEvent]:
        with self.context.store.connect() as connection:
            return fetch_recent_events(connection, limit=limit, include_rescheduled=include_rescheduled, now=now)

    def upcoming(
        self,
        *,
        limit: int = 10,
        include_rescheduled: bool = False,
        now: Optional[datetime] = None,
    ) -> List[FormattedEvent]:
        with self.context.store.connect() as connection:
            return fetch_upcoming_events(connection, limit=limit, include_rescheduled=include_rescheduled, now=now)

    def by_date_range(self, start_date: str, end_date: str, *, include_rescheduled: bool = False) -> List[FormattedEvent]:
        with self.context.store.connect() as connection:
            return fetch_events_by_date_range(
                connection,
                start_date=start_date,
                end_date=end_date,
                include_rescheduled=include_rescheduled,
            )

    def search(
        self,
        query: str,
        *,
        limit: int = 20,
        time_range: Union[TimeRange, str] = TimeRange.ALL,
        include_rescheduled: bool = False,
        now: Optional[datetime] = None,
    ) -> List[FormattedEvent]:
        with self.context.store.connect() as connection:
            return search_events(
                connection,
                query=query,
                limit=limit,
                time_range=time_range,
                include_rescheduled=include_rescheduled,
                now=now,
            )

    def today(self, *, include_rescheduled: bool = False, today: Optional[date] = None) -> DailyAgenda:
        with self.context.store.connect() as connection:
            return fetch_todays_events(connection, include_rescheduled=include_rescheduled, today=today)

    def detail(self, event_id: int) -> Optional[FormattedDetailedEvent]:
        with self.context.store.connect() as connection:
            event = fetch_event_details(connection, event_id)
        if event is None:
            logger.info("Event %s not found in %s", event_id, self.context.store.path)
        return event
