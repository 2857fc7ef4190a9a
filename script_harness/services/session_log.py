from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, TextIO

from script_harness.core.models import LogLevel, RunSession, format_timestamp
from script_harness.core.paths import ensure_parent_dir
from script_harness.utils.logging_utils import SESSION_LOGGER_NAME, SessionFormatter

logger = logging.getLogger("script_harness.session_log")

_RULE = "*" * 22


class _TeeStream:
    """Text stream that writes to the console and the transcript file."""

    def __init__(self, console: TextIO, transcript: TextIO) -> None:
        self.console = console
        self.transcript = transcript

    def write(self, data: str) -> int:
        self.console.write(data)
        self.transcript.write(data)
        return len(data)

    def flush(self) -> None:
        self.console.flush()
        self.transcript.flush()

    def isatty(self) -> bool:
        return self.console.isatty()

    def __getattr__(self, name: str):
        return getattr(self.console, name)


class TranscriptCapture:
    """Append-mode capture of standard output into a file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.stream: TextIO | None = None
        self.console: TextIO | None = None
        self._tee: _TeeStream | None = None

    @property
    def active(self) -> bool:
        return self.stream is not None

    def start(self) -> TextIO:
        if self.stream is not None:
            raise RuntimeError(f"Transcript already started: {self.path}")
        self.stream = open(self.path, "a", encoding="utf-8")
        self.stream.write(
            f"{_RULE}\nTranscript started, output file is {self.path}\n"
            f"Start: {format_timestamp(datetime.now())}\n{_RULE}\n"
        )
        self.stream.flush()
        self.console = sys.stdout
        self._tee = _TeeStream(self.console, self.stream)
        sys.stdout = self._tee
        logger.debug("Transcript started at %s", self.path)
        return self.stream

    def stop(self) -> None:
        if self.stream is None:
            return
        if sys.stdout is self._tee:
            sys.stdout = self.console
        try:
            self.stream.write(
                f"{_RULE}\nTranscript stopped at {format_timestamp(datetime.now())}\n{_RULE}\n"
            )
        finally:
            self.stream.close()
            self.stream = None
            self._tee = None
        logger.debug("Transcript stopped at %s", self.path)


class SessionLogger:
    """File-backed session log with console echo for everything but DEBUG."""

    def __init__(self) -> None:
        self.session: RunSession | None = None
        self._transcript: TranscriptCapture | None = None
        self._handlers: list[logging.Handler] = []
        # One logger per instance so concurrent sessions never share handlers.
        self._logger = logging.getLogger(f"{SESSION_LOGGER_NAME}.{id(self):x}")
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

    def initialize(self, path: Path) -> RunSession:
        if self.session is not None:
            raise RuntimeError("Session log already initialized")
        path = Path(path)
        ensure_parent_dir(path)

        transcript = TranscriptCapture(path)
        file_stream = transcript.start()
        self._transcript = transcript

        formatter = SessionFormatter()
        file_handler = logging.StreamHandler(file_stream)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        console_handler = logging.StreamHandler(transcript.console)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        for handler in (file_handler, console_handler):
            self._logger.addHandler(handler)
            self._handlers.append(handler)

        self.session = RunSession(log_path=path)
        self.log(f"Start time: {format_timestamp(self.session.start_time)}")
        return self.session

    def log(self, message: str, level: LogLevel | str = LogLevel.INFO) -> None:
        if self.session is None:
            raise RuntimeError("Session log is not initialized")
        level = LogLevel(level)
        self._logger.log(level.levelno, message)

    def close(self) -> None:
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.flush()
        self._handlers.clear()
        if self._transcript is not None:
            self._transcript.stop()
            self._transcript = None
        self.session = None

    @contextmanager
    def open(self, path: Path) -> Iterator[RunSession]:
        session = self.initialize(path)
        try:
            yield session
        finally:
            self.close()
