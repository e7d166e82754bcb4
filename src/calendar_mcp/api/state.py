from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from ..services import CalendarService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    calendar: CalendarService = field(init=False)

    def __post_init__(self) -> None:
        self.calendar = CalendarService(self.context)

    def use_database(self, path: Union[str, Path]) -> None:
        """Point every tool at a different calendar database."""

        self.context = ServiceContext(settings=self.context.settings, db_path=Path(path).expanduser())
        self.calendar = CalendarService(self.context)


api_state = ApiState()
