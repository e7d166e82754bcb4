from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .constants import CALENDAR_DB_PATH

logger = logging.getLogger(__name__)


class CalendarStoreError(RuntimeError):
    """Raised when the calendar database cannot be opened for reading."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot open calendar database at {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class CalendarStore:
    """Read-only accessor for the Calendar.app SQLite database."""

    path: Path = field(default=CALENDAR_DB_PATH)

    def open(self) -> sqlite3.Connection:
        uri = f"{Path(self.path).expanduser().resolve().as_uri()}?mode=ro"
        try:
            connection = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as exc:
            raise CalendarStoreError(self.path, str(exc)) from exc
        connection.row_factory = sqlite3.Row
        try:
            # Missing and corrupt files only fail once the header is read.
            connection.execute("PRAGMA schema_version").fetchone()
        except sqlite3.Error as exc:
            connection.close()
            raise CalendarStoreError(self.path, str(exc)) from exc
        logger.debug("Opened calendar database %s", self.path)
        return connection

    def close(self, connection: sqlite3.Connection) -> None:
        connection.close()
        logger.debug("Closed calendar database %s", self.path)

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        connection = self.open()
        try:
            yield connection
        finally:
            self.close(connection)

    def is_available(self) -> bool:
        try:
            with self.connect():
                return True
        except CalendarStoreError:
            return False
