from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def _ensure_non_negative(value: float, name: str) -> float:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def ensure_percent(value: int, name: str = "percent") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0 or value > 100:
        raise ValueError(f"{name} must be between 0 and 100, got {value}")
    return value


@dataclass
class RunConfig:
    log_path: Path
    progress_percent: int = 0
    step_delay: float = 0.1
    fail_at: int | None = None
    show_progress: bool = True

    def validated(self) -> RunConfig:
        self.log_path = Path(self.log_path)
        if self.log_path.exists() and self.log_path.is_dir():
            raise ValueError(f"log_path points to a directory: {self.log_path}")
        ensure_percent(self.progress_percent, "progress_percent")
        _ensure_non_negative(self.step_delay, "step_delay")
        if self.fail_at is not None:
            ensure_percent(self.fail_at, "fail_at")
        return self
