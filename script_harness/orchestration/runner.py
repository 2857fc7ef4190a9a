from __future__ import annotations

import logging

from script_harness.core.config import RunConfig
from script_harness.core.models import (
    LogLevel,
    RunSession,
    RunState,
    format_duration,
    format_timestamp,
)
from script_harness.services.interfaces import Workload
from script_harness.services.session_log import SessionLogger
from script_harness.utils.progress import ProgressReporter

logger = logging.getLogger("script_harness.runner")

ACTIVITY = "Custom workload"


class WorkloadRunner:
    """Runs a workload inside a logged, timed session.

    States go Setup -> Running -> Cleanup -> Closed. Closed always runs: it stamps the end
    time, logs the runtime and releases the log file. A workload exception is logged at
    ERROR and re-raised unchanged after Closed.
    """

    def __init__(
        self,
        config: RunConfig,
        workload: Workload,
        *,
        session_log: SessionLogger | None = None,
        progress: ProgressReporter | None = None,
    ) -> None:
        self.config = config.validated()
        self.workload = workload
        self.session_log = session_log or SessionLogger()
        self.progress = progress or ProgressReporter(
            self.config.progress_percent, enabled=self.config.show_progress
        )

    def _enter(self, session: RunSession, state: RunState) -> None:
        logger.debug("Session state %s -> %s", session.state.value, state.value)
        session.state = state

    def _close(self, session: RunSession) -> None:
        self._enter(session, RunState.CLOSED)
        end_time = session.finish()
        self.session_log.log(f"End time: {format_timestamp(end_time)}")
        self.session_log.log(f"Total runtime: {format_duration(session.duration)} seconds")

    def run(self) -> RunSession:
        log = self.session_log
        progress = self.progress
        with log.open(self.config.log_path) as session, progress.progress_bar():
            progress.report(self.config.progress_percent, "Initializing", "Session started")
            try:
                log.log("Beginning workload execution")
                progress.report(0, ACTIVITY, "Starting")

                self._enter(session, RunState.RUNNING)
                self.workload.run(log, progress)

                self._enter(session, RunState.CLEANUP)
                progress.report(100, ACTIVITY, "Completed")
                log.log("Custom workload completed successfully.")
            except Exception as e:
                session.error = str(e)
                log.log(f"Workload failed: {e}", LogLevel.ERROR)
                raise
            finally:
                self._close(session)
        return session
