from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_log_dir

from ..core.constants import CALENDAR_DB_PATH

load_dotenv()

APP_NAME = "calendar-mcp"


@dataclass(frozen=True)
class CalendarSettings:
    db_path: Path


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"{APP_NAME}.log"


@dataclass(frozen=True)
class ServerSettings:
    host: str
    mcp_port: int
    api_port: int


@dataclass(frozen=True)
class AppSettings:
    calendar: CalendarSettings
    logging: LoggingSettings
    server: ServerSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _path_from_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    return Path(raw).expanduser() if raw else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    calendar = CalendarSettings(db_path=_path_from_env("CALENDAR_MCP_DB_PATH", CALENDAR_DB_PATH))

    logging_settings = LoggingSettings(
        level=os.getenv("CALENDAR_MCP_LOG_LEVEL", "INFO").upper(),
        log_dir=_path_from_env("CALENDAR_MCP_LOG_DIR", Path(user_log_dir(APP_NAME))),
    )

    server = ServerSettings(
        host=os.getenv("CALENDAR_MCP_HOST", "127.0.0.1"),
        mcp_port=_int_from_env("CALENDAR_MCP_PORT", 8765),
        api_port=_int_from_env("CALENDAR_MCP_API_PORT", 8000),
    )

    return AppSettings(calendar=calendar, logging=logging_settings, server=server)
