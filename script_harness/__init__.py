"""Harness for one-off administrative scripts: session log, progress, and timing."""

__version__ = "0.1.0"
