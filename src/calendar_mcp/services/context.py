from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import AppSettings, get_settings
from ..core import CalendarStore


@dataclass(slots=True)
class ServiceContext:
    """Shared settings and the read-only store handed to services."""

    settings: AppSettings = field(default_factory=get_settings)
    db_path: Optional[Path] = None
    store: CalendarStore = field(init=False)

    def __post_init__(self) -> None:
        self.store = CalendarStore(self.db_path or self.settings.calendar.db_path)
