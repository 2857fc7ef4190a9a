from __future__ import annotations

import logging
import sys
from pathlib import Path

logger = logging.getLogger("script_harness.paths")


def default_log_path(script: str | Path | None = None) -> Path:
    """Return ``<script dir>/<script stem>.log`` for the running script.

    Falls back to ``script_harness.log`` in the working directory when the interpreter
    was started without a script (interactive session, ``-c``). Under the installed
    ``script-harness`` console script the "script" is the entry-point shim, so the log
    lands beside it in the environment's ``bin`` directory; pass ``--log-file`` to
    choose a location.
    """
    if script is None:
        script = sys.argv[0] if sys.argv and sys.argv[0] not in ("", "-c") else None
    if script is None:
        return Path.cwd() / "script_harness.log"
    script_path = Path(script).resolve()
    return script_path.parent / f"{script_path.stem}.log"


def ensure_parent_dir(path: Path) -> Path:
    parent = path.parent
    if not parent.exists():
        parent.mkdir(parents=True, exist_ok=True)
        logger.info("Created log directory %s", parent)
    return parent
