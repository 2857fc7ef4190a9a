from pathlib import Path

import click


def validate_log_file(ctx, param, value):
    """Resolve the log file option to an absolute path, rejecting directories."""
    if value is None:
        return None
    path = Path(value).expanduser()
    if path.is_dir():
        raise click.BadParameter(f"Log file path is a directory: {value}")
    return path.absolute()
