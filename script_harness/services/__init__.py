"""Service implementations for session logging and workloads."""

from .interfaces import Workload
from .session_log import SessionLogger, TranscriptCapture
from .workload import SimulatedWorkload

__all__ = [
    "Workload",
    "SessionLogger",
    "TranscriptCapture",
    "SimulatedWorkload",
]
