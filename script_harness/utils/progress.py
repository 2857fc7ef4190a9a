"""Console progress indicator for the running workload."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from tqdm import tqdm

from script_harness.core.config import ensure_percent


class ProgressReporter:
    """Shows percent complete plus an activity/status text on standard error."""

    def __init__(self, initial: int = 0, *, enabled: bool = True, file: TextIO | None = None):
        """Initialize progress reporter.

        Args:
            initial: Percent shown before the first report, 0..100
            enabled: Whether to draw anything at all
            file: Output stream; defaults to standard error
        """
        self.percent = ensure_percent(initial, "initial percent")
        self.activity = ""
        self.status = ""
        self.enabled = enabled
        self.file = file
        self._bar: tqdm | None = None

    def _interactive(self) -> bool:
        stream = self.file if self.file is not None else sys.stderr
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def _ensure_bar(self) -> tqdm:
        if self._bar is None:
            self._bar = tqdm(
                total=100,
                initial=self.percent,
                unit="%",
                file=self.file,
                leave=False,
                disable=not (self.enabled and self._interactive()),
            )
        return self._bar

    def report(self, percent: int, activity: str, status: str = "") -> None:
        """Update the indicator.

        Args:
            percent: Percent complete, 0..100
            activity: What is running
            status: Short status text shown after the bar
        """
        self.percent = ensure_percent(percent)
        self.activity = activity
        self.status = status

        bar = self._ensure_bar()
        bar.n = self.percent
        bar.set_description_str(activity, refresh=False)
        bar.set_postfix_str(status, refresh=False)
        bar.refresh()

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    @contextmanager
    def progress_bar(self) -> Iterator[ProgressReporter]:
        """Context manager that releases the bar on every exit path."""
        try:
            yield self
        finally:
            self.close()
