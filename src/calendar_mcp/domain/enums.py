from __future__ import annotations

from enum import Enum
from typing import Optional


class EventStatus(str, Enum):
    CONFIRMED = "confirmed"
    TENTATIVE = "tentative"
    CANCELLED = "cancelled"

    @classmethod
    def from_code(cls, code: Optional[int]) -> "EventStatus":
        # Code 2 is left unmapped by the store and reads as confirmed.
        if code == 3:
            return cls.CANCELLED
        if code == 1:
            return cls.TENTATIVE
        return cls.CONFIRMED


class TimeRange(str, Enum):
    ALL = "all"
    PAST = "past"
    FUTURE = "future"
