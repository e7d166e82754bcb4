"""Process-wide logging for the calendar tools.

Records go to a rotating file under the configured log directory and to
stderr. stdout is reserved for the MCP stdio transport.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .config import LoggingSettings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 5

_INITIALIZED = False


def _resolve_level(level: Optional[str], settings: LoggingSettings) -> int:
    name = (level or settings.level).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handlers(log_file: Path) -> List[logging.Handler]:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: List[logging.Handler] = [
        RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
        logging.StreamHandler(sys.stderr),
    ]
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(level: Optional[str] = None, *, log_path: Optional[Path] = None) -> None:
    """Attach the file and stderr handlers to the root logger once per process.

    ``level`` and ``log_path`` override ``CALENDAR_MCP_LOG_LEVEL`` and the file
    under ``CALENDAR_MCP_LOG_DIR``. An unknown level name means INFO.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    log_file = log_path or settings.log_file

    root = logging.getLogger()
    root.setLevel(_resolve_level(level, settings))
    for handler in _build_handlers(log_file):
        root.addHandler(handler)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging to %s", log_file)


__all__ = ["configure_logging"]
