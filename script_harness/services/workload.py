from __future__ import annotations

import time
from typing import Callable

from script_harness.core.config import ensure_percent
from script_harness.core.models import LogLevel
from script_harness.services.interfaces import Workload
from script_harness.services.session_log import SessionLogger
from script_harness.utils.progress import ProgressReporter

ACTIVITY = "Running custom workload"
PROGRESS_STEPS = tuple(range(0, 101, 10))


class SimulatedWorkload(Workload):
    """Placeholder workload: walks 0..100% in steps of 10 with a short pause per step.

    Replace the body of :meth:`run` with the real task. ``log`` and ``progress`` are the
    session logger and progress indicator owned by the runner.
    """

    def __init__(
        self,
        step_delay: float = 0.1,
        *,
        fail_at: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {step_delay}")
        self.step_delay = step_delay
        self.fail_at = ensure_percent(fail_at, "fail_at") if fail_at is not None else None
        self._sleep = sleep

    def run(self, log: SessionLogger, progress: ProgressReporter) -> None:
        for percent in PROGRESS_STEPS:
            if self.step_delay:
                self._sleep(self.step_delay)
            if self.fail_at is not None and percent >= self.fail_at:
                raise RuntimeError(f"Simulated failure at {percent}%")
            progress.report(percent, ACTIVITY, f"{percent}% complete")
            log.log(f"Completed {percent}% of workload", LogLevel.DEBUG)
