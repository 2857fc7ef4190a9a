from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


class LogLevel(str, Enum):
    """Closed set of session log levels."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    DEBUG = "DEBUG"

    @property
    def levelno(self) -> int:
        return _LEVELNOS[self]

    @classmethod
    def from_levelno(cls, levelno: int) -> LogLevel:
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


_LEVELNOS = {
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.DEBUG: logging.DEBUG,
}


class RunState(str, Enum):
    SETUP = "setup"
    RUNNING = "running"
    CLEANUP = "cleanup"
    CLOSED = "closed"


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    level: LogLevel
    message: str

    def render(self) -> str:
        return f"[{format_timestamp(self.timestamp)}] [{self.level.value}] {self.message}"


@dataclass
class RunSession:
    log_path: Path
    start_time: datetime = field(default_factory=datetime.now)
    end_time: datetime | None = None
    state: RunState = RunState.SETUP
    error: str | None = None

    def finish(self, when: datetime | None = None) -> datetime:
        self.end_time = when or datetime.now()
        return self.end_time

    @property
    def duration(self) -> float:
        """Elapsed seconds; measured up to now while the session is still open."""
        end = self.end_time or datetime.now()
        return (end - self.start_time).total_seconds()

    @property
    def succeeded(self) -> bool:
        return self.state is RunState.CLOSED and self.error is None


def format_duration(seconds: float) -> str:
    return f"{round(seconds, 3):.3f}"
