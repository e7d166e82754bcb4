"""Tests for the read-only store accessor and the per-call service wrapper."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from calendar_mcp.core import CalendarStore, CalendarStoreError
from calendar_mcp.services import CalendarService, ServiceContext
from tests.conftest import NOW


def test_missing_database_raises_store_error(tmp_path: Path):
    store = CalendarStore(tmp_path / "absent.sqlitedb")

    with pytest.raises(CalendarStoreError) as excinfo:
        store.open()

    assert excinfo.value.path == tmp_path / "absent.sqlitedb"
    assert "Cannot open calendar database" in str(excinfo.value)


def test_missing_database_is_not_created(tmp_path: Path):
    path = tmp_path / "absent.sqlitedb"
    with pytest.raises(CalendarStoreError):
        CalendarStore(path).open()
    assert not path.exists()


def test_corrupt_database_raises_store_error(tmp_path: Path):
    path = tmp_path / "corrupt.sqlitedb"
    path.write_bytes(b"this is not an sqlite database" * 200)

    with pytest.raises(CalendarStoreError):
        CalendarStore(path).open()


def test_connection_is_read_only(calendar_db: Path):
    store = CalendarStore(calendar_db)
    with store.connect() as connection:
        with pytest.raises(sqlite3.OperationalError):
            connection.execute("DELETE FROM CalendarItem")


def test_path_with_spaces(tmp_path: Path, calendar_db: Path):
    spaced = tmp_path / "Group Containers" / "Calendar.sqlitedb"
    spaced.parent.mkdir()
    spaced.write_bytes(calendar_db.read_bytes())

    with CalendarStore(spaced).connect() as connection:
        assert connection.execute("SELECT COUNT(*) FROM CalendarItem").fetchone()[0] == 14


def test_connect_closes_after_success(calendar_db: Path):
    with CalendarStore(calendar_db).connect() as connection:
        connection.execute("SELECT 1")

    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute("SELECT 1")


def test_connect_closes_when_query_raises(calendar_db: Path):
    captured = []
    with pytest.raises(RuntimeError, match="boom"):
        with CalendarStore(calendar_db).connect() as connection:
            captured.append(connection)
            raise RuntimeError("boom")

    with pytest.raises(sqlite3.ProgrammingError):
        captured[0].execute("SELECT 1")


def test_is_available(calendar_db: Path, tmp_path: Path):
    assert CalendarStore(calendar_db).is_available() is True
    assert CalendarStore(tmp_path / "absent.sqlitedb").is_available() is False


# ---------------------------------------------------------------------------
# CalendarService
# ---------------------------------------------------------------------------


class RecordingStore(CalendarStore):
    """Counts open/close calls."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        object.__setattr__(self, "opened", 0)
        object.__setattr__(self, "closed", 0)

    def open(self):
        connection = super().open()
        object.__setattr__(self, "opened", self.opened + 1)
        return connection

    def close(self, connection) -> None:
        object.__setattr__(self, "closed", self.closed + 1)
        super().close(connection)


def _service(store: CalendarStore) -> CalendarService:
    context = ServiceContext(db_path=store.path)
    context.store = store
    return CalendarService(context)


def test_service_opens_and_closes_once_per_call(calendar_db: Path):
    store = RecordingStore(calendar_db)
    service = _service(store)

    service.recent(limit=5, now=NOW)
    service.upcoming(limit=5, now=NOW)
    service.by_date_range("2024-06-01", "2024-06-30")
    service.search("meeting", now=NOW)
    service.today()
    service.detail(11)

    assert store.opened == 6
    assert store.closed == 6


def test_service_closes_when_validation_fails(calendar_db: Path):
    store = RecordingStore(calendar_db)
    service = _service(store)

    with pytest.raises(ValueError):
        service.by_date_range("garbage", "2024-06-30")

    assert store.opened == store.closed == 1


def test_service_propagates_query_errors_and_closes(tmp_path: Path):
    path = tmp_path / "empty.sqlitedb"
    sqlite3.connect(path).close()
    store = RecordingStore(path)

    with pytest.raises(sqlite3.OperationalError, match="no such table"):
        _service(store).recent()

    assert store.opened == store.closed == 1


def test_service_store_error_opens_nothing(tmp_path: Path):
    store = RecordingStore(tmp_path / "absent.sqlitedb")

    with pytest.raises(CalendarStoreError):
        _service(store).upcoming()

    assert store.opened == 0
    assert store.closed == 0


def test_service_detail_not_found(calendar_db: Path):
    assert _service(CalendarStore(calendar_db)).detail(12345) is None
