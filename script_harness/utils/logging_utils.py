from __future__ import annotations

import logging
from datetime import datetime

from script_harness.core.models import LogEntry, LogLevel

SESSION_LOGGER_NAME = "script_harness.session"


class SessionFormatter(logging.Formatter):
    """Render records as ``[yyyy-MM-dd HH:mm:ss] [LEVEL] message`` session lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created),
            level=LogLevel.from_levelno(record.levelno),
            message=record.getMessage(),
        )
        return entry.render()


def configure_logging(verbose: bool) -> None:
    """Set global logging levels."""
    root = logging.getLogger()
    target = logging.getLogger("script_harness")
    level = logging.DEBUG if verbose else logging.WARNING

    root.setLevel(level)
    target.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        root.addHandler(handler)

    for handler in root.handlers:
        handler.setLevel(level)
