from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from script_harness import __version__
from script_harness.core.config import RunConfig
from script_harness.core.models import LogLevel, format_duration
from script_harness.core.paths import default_log_path
from script_harness.orchestration.runner import WorkloadRunner
from script_harness.services.session_log import SessionLogger
from script_harness.services.workload import SimulatedWorkload
from script_harness.utils import configure_logging, validate_log_file

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("script_harness.cli")


@click.group()
@click.version_option(version=__version__)
def cli():
    """ScriptHarness CLI.

    Runs an ad-hoc workload with a session log file, console status lines, a progress
    indicator, and start/end time reporting.
    """


@cli.command()
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    callback=validate_log_file,
    help="Session log destination; defaults to <script dir>/<script name>.log.",
)
@click.option(
    "--progress-percent",
    type=click.IntRange(0, 100),
    default=0,
    show_default=True,
    help="Initial progress value shown before the workload starts.",
)
@click.option(
    "--step-delay",
    type=click.FloatRange(min=0),
    default=0.1,
    show_default=True,
    help="Seconds of simulated work per progress step.",
)
@click.option(
    "--fail-at",
    type=click.IntRange(0, 100),
    default=None,
    help="Raise a simulated failure when progress reaches this percent.",
)
@click.option("--no-progress", is_flag=True, help="Hide the progress indicator.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def run(
    log_file: Path | None,
    progress_percent: int,
    step_delay: float,
    fail_at: int | None,
    no_progress: bool,
    verbose: bool,
):
    """Run the workload inside a logged, timed session."""
    configure_logging(verbose)

    config = RunConfig(
        log_path=log_file or default_log_path(),
        progress_percent=progress_percent,
        step_delay=step_delay,
        fail_at=fail_at,
        show_progress=not (no_progress or verbose),
    ).validated()
    logger.debug("Session log: %s", config.log_path)

    runner = WorkloadRunner(
        config=config,
        workload=SimulatedWorkload(config.step_delay, fail_at=config.fail_at),
        session_log=SessionLogger(),
    )
    session = runner.run()

    click.echo(
        f"Log written to {session.log_path} (runtime {format_duration(session.duration)}s)"
    )


@cli.command()
def info():
    """Display the default log location and line format.

    The default log sits next to the launched script; for the installed console script
    that is the ``script-harness`` entry point in the environment's ``bin`` directory.
    """
    click.echo(f"Default log file: {default_log_path()} (next to the launched script)")
    click.echo("Line format: [yyyy-MM-dd HH:mm:ss] [LEVEL] message")
    click.echo(f"Levels: {', '.join(level.value for level in LogLevel)} (DEBUG is file-only)")


def main():
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:  # noqa: BLE001
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
