from __future__ import annotations

from pathlib import Path

# Seconds between the Unix epoch and 2001-01-01T00:00:00Z, the Core Data reference date.
CORE_DATA_EPOCH = 978307200

CALENDAR_DB_PATH = (
    Path.home() / "Library" / "Group Containers" / "group.com.apple.calendar" / "Calendar.sqlitedb"
)

UNTITLED_EVENT = "Untitled Event"
