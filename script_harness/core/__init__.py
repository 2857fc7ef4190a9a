"""Core configuration and domain models."""

from .config import RunConfig, ensure_percent
from .models import (
    LogEntry,
    LogLevel,
    RunSession,
    RunState,
    format_duration,
    format_timestamp,
)
from .paths import default_log_path, ensure_parent_dir

__all__ = [
    "RunConfig",
    "ensure_percent",
    "LogEntry",
    "LogLevel",
    "RunSession",
    "RunState",
    "format_duration",
    "format_timestamp",
    "default_log_path",
    "ensure_parent_dir",
]
