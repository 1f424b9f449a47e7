"""Logging utilities.

Standard `logging` with a plain structured format.

- Console output goes to stderr; stdout carries only the frequency table.
- With a log directory, the run also logs to `<log_dir>/<run_id>.log`.
"""

from __future__ import annotations
import logging
import os
import sys
from typing import List, Optional

_installed: List[logging.Handler] = []

def reset_logging() -> None:
    """Remove the handlers installed by setup_logging and restore WARNING."""
    root = logging.getLogger()
    for h in _installed:
        root.removeHandler(h)
        h.close()
    _installed.clear()
    root.setLevel(logging.WARNING)

def setup_logging(level: str = "WARNING", log_dir: Optional[str] = None, run_id: str = "run") -> Optional[str]:
    """Configure the root logger and return the log file path, if any.

    Calling it again replaces the handlers installed by the previous call.
    """
    reset_logging()
    root = logging.getLogger()
    root.setLevel(level.upper())

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    # Console
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    root.addHandler(ch)
    _installed.append(ch)

    if not log_dir:
        return None

    # File
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f"{run_id}.log")
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)
    _installed.append(fh)
    return log_path
