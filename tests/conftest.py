"""Shared fixtures: a throwaway Calendar.app-shaped SQLite database."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping

import pytest

from calendar_mcp.api import api_state
from calendar_mcp.core import CORE_DATA_EPOCH

# Fixed reference instant for queries that compare against "now".
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

SCHEMA = """
CREATE TABLE Calendar (
    ROWID INTEGER PRIMARY KEY,
    title TEXT
);
CREATE TABLE CalendarItem (
    ROWID INTEGER PRIMARY KEY,
    summary TEXT,
    start_date REAL,
    end_date REAL,
    all_day INTEGER DEFAULT 0,
    status INTEGER,
    hidden INTEGER DEFAULT 0,
    orig_item_id INTEGER,
    description TEXT,
    url TEXT,
    location TEXT,
    recurrence_rule TEXT,
    calendar_id INTEGER
);
"""

ITEM_COLUMNS = (
    "ROWID",
    "summary",
    "start_date",
    "end_date",
    "all_day",
    "status",
    "hidden",
    "orig_item_id",
    "description",
    "url",
    "location",
    "recurrence_rule",
    "calendar_id",
)


def core_ts(moment: datetime) -> float:
    """Seconds since 2001-01-01 UTC for ``moment``."""
    return moment.timestamp() - CORE_DATA_EPOCH


def item(rowid: int, summary: str | None, start: datetime | None, **extra: Any) -> dict[str, Any]:
    end = extra.pop("end", start + timedelta(hours=1) if start else None)
    record: dict[str, Any] = {
        "ROWID": rowid,
        "summary": summary,
        "start_date": core_ts(start) if start else None,
        "end_date": core_ts(end) if end else None,
        "all_day": 0,
        "status": 0,
        "hidden": 0,
        "orig_item_id": 0,
    }
    record.update(extra)
    return record


def build_calendar_db(path: Path, items: Iterable[Mapping[str, Any]], calendars: Iterable[tuple[int, str]] = ()) -> Path:
    connection = sqlite3.connect(path)
    try:
        connection.executescript(SCHEMA)
        connection.executemany("INSERT INTO Calendar (ROWID, title) VALUES (?, ?)", list(calendars))
        placeholders = ", ".join("?" for _ in ITEM_COLUMNS)
        connection.executemany(
            f"INSERT INTO CalendarItem ({', '.join(ITEM_COLUMNS)}) VALUES ({placeholders})",
            [tuple(record.get(column) for column in ITEM_COLUMNS) for record in items],
        )
        connection.commit()
    finally:
        connection.close()
    return path


def standard_items() -> list[dict[str, Any]]:
    day = timedelta(days=1)
    return [
        item(1, "Past meeting", NOW - 2 * day),
        item(2, "Older past", NOW - 10 * day),
        item(3, "Future standup", NOW + day),
        item(4, "Far future", NOW + 30 * day, status=1),
        item(5, "Hidden past", NOW - day, hidden=1),
        item(6, "Floating task", None),
        item(7, "Original dentist", NOW + 5 * day),
        item(8, "Dentist", NOW + 6 * day, orig_item_id=7),
        item(9, "", NOW - 3 * day, status=3),
        item(10, "Exactly now", NOW),
        item(
            11,
            "Planning",
            NOW + 2 * day,
            all_day=1,
            status=2,
            description="Quarterly planning",
            url="https://example.com/planning",
            location="Room 4",
            recurrence_rule="FREQ=WEEKLY",
            calendar_id=1,
        ),
        item(12, "Launch", datetime(2100, 1, 1, tzinfo=timezone.utc)),
        item(13, "Future meeting", NOW + 3 * day),
        item(14, "100% focus", NOW - 20 * day),
    ]


@pytest.fixture
def calendar_db(tmp_path: Path) -> Path:
    return build_calendar_db(tmp_path / "Calendar.sqlitedb", standard_items(), calendars=[(1, "Work")])


@pytest.fixture
def connection(calendar_db: Path):
    conn = sqlite3.connect(calendar_db)
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()


@pytest.fixture
def tool_state(calendar_db: Path):
    """Point the registered tools at the temporary database."""
    previous_context, previous_calendar = api_state.context, api_state.calendar
    api_state.use_database(calendar_db)
    yield api_state
    api_state.context = previous_context
    api_state.calendar = previous_calendar
