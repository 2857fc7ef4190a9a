from __future__ import annotations

import io

import pytest

from script_harness.utils.progress import ProgressReporter


class _TTYBuffer(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_report_accepts_full_range() -> None:
    reporter = ProgressReporter(file=io.StringIO())
    with reporter.progress_bar():
        for percent in range(0, 101):
            reporter.report(percent, "Working", f"{percent}%")
    assert reporter.percent == 100
    assert reporter.status == "100%"


@pytest.mark.parametrize("percent", [-1, 101, 250])
def test_report_rejects_out_of_range(percent: int) -> None:
    reporter = ProgressReporter(enabled=False)
    with pytest.raises(ValueError):
        reporter.report(percent, "Working", "bad")
    assert reporter.percent == 0


@pytest.mark.parametrize("initial", [-5, 101])
def test_constructor_rejects_out_of_range(initial: int) -> None:
    with pytest.raises(ValueError):
        ProgressReporter(initial)


def test_bar_drawn_on_terminal() -> None:
    stream = _TTYBuffer()
    reporter = ProgressReporter(file=stream)
    reporter.report(50, "Working", "halfway")
    output = stream.getvalue()
    reporter.close()

    assert "Working" in output
    assert "halfway" in output


def test_bar_hidden_when_not_terminal() -> None:
    stream = io.StringIO()
    reporter = ProgressReporter(file=stream)
    reporter.report(50, "Working", "halfway")
    reporter.close()

    assert stream.getvalue() == ""


def test_bar_hidden_when_disabled() -> None:
    stream = _TTYBuffer()
    reporter = ProgressReporter(enabled=False, file=stream)
    reporter.report(10, "Working", "quiet")
    reporter.close()

    assert stream.getvalue() == ""
