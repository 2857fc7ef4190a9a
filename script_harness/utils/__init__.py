"""General utilities used across script_harness.

Exports helpers for logging setup, progress display, and CLI parameter handling.
"""

from .logging_utils import SESSION_LOGGER_NAME, SessionFormatter, configure_logging
from .params import validate_log_file
from .progress import ProgressReporter

__all__ = [
    "SESSION_LOGGER_NAME",
    "SessionFormatter",
    "configure_logging",
    "validate_log_file",
    "ProgressReporter",
]
