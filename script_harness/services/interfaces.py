from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from script_harness.services.session_log import SessionLogger
    from script_harness.utils.progress import ProgressReporter


class Workload(ABC):
    @abstractmethod
    def run(self, log: SessionLogger, progress: ProgressReporter) -> None: ...
