from __future__ import annotations

import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from script_harness import __version__
from script_harness.cli import cli, main
from script_harness.services.workload import SimulatedWorkload


def test_run_writes_log(tmp_path: Path) -> None:
    log_path = tmp_path / "out" / "cli.log"
    result = CliRunner().invoke(
        cli, ["run", "--log-file", str(log_path), "--step-delay", "0", "--no-progress"]
    )

    assert result.exit_code == 0, result.output
    assert "[INFO] Beginning workload execution" in result.output
    assert "Completed 50% of workload" not in result.output
    assert f"Log written to {log_path}" in result.output

    text = log_path.read_text(encoding="utf-8")
    assert "[DEBUG] Completed 50% of workload" in text
    assert "Custom workload completed successfully." in text


def test_run_defaults_to_script_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "weekly_cleanup.py")])
    result = CliRunner().invoke(cli, ["run", "--step-delay", "0"])

    assert result.exit_code == 0, result.output
    log_path = tmp_path.resolve() / "weekly_cleanup.log"
    text = log_path.read_text(encoding="utf-8")
    assert "Start time: " in text
    assert "[DEBUG] Completed 0% of workload" in text
    assert "[DEBUG] Completed 100% of workload" in text
    assert "End time: " in text
    assert "Total runtime: " in text


@pytest.mark.parametrize("value", ["-1", "101"])
def test_run_rejects_progress_out_of_range(tmp_path: Path, value: str) -> None:
    result = CliRunner().invoke(
        cli, ["run", "--log-file", str(tmp_path / "x.log"), "--progress-percent", value]
    )

    assert result.exit_code == 2
    assert "--progress-percent" in result.output
    assert not (tmp_path / "x.log").exists()


def test_run_rejects_directory_log_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["run", "--log-file", str(tmp_path)])
    assert result.exit_code == 2


def test_run_failure_propagates(tmp_path: Path) -> None:
    log_path = tmp_path / "fail.log"
    result = CliRunner().invoke(
        cli, ["run", "--log-file", str(log_path), "--step-delay", "0", "--fail-at", "50"]
    )

    assert result.exit_code == 1
    assert isinstance(result.exception, RuntimeError)
    text = log_path.read_text(encoding="utf-8")
    assert "[ERROR] Workload failed: Simulated failure at 50%" in text
    assert text.index("Workload failed") < text.index("End time: ") < text.index("Total runtime")


def test_main_exits_non_zero_on_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    log_path = tmp_path / "main.log"
    monkeypatch.setattr(
        sys,
        "argv",
        ["script-harness", "run", "--log-file", str(log_path), "--step-delay", "0",
         "--fail-at", "0"],
    )

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    assert "Unexpected error: Simulated failure at 0%" in capsys.readouterr().err
    assert "Total runtime" in log_path.read_text(encoding="utf-8")


def test_info_lists_levels() -> None:
    result = CliRunner().invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "[yyyy-MM-dd HH:mm:ss] [LEVEL] message" in result.output
    assert "INFO, WARN, ERROR, DEBUG" in result.output


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert __version__ in result.output


def test_main_exits_130_on_interrupt(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def interrupted(self, log, progress) -> None:
        raise KeyboardInterrupt

    log_path = tmp_path / "interrupted.log"
    monkeypatch.setattr(SimulatedWorkload, "run", interrupted)
    monkeypatch.setattr(sys, "argv", ["script-harness", "run", "--log-file", str(log_path)])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 130
    assert "Interrupted by user" in capsys.readouterr().err
    text = log_path.read_text(encoding="utf-8")
    assert "End time: " in text
    assert "Total runtime" in text


def test_main_keeps_usage_error_exit_code(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["script-harness", "run", "--progress-percent", "101"])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 2
    assert "--progress-percent" in capsys.readouterr().err
