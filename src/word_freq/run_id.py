"""Run ID resolution: explicit or derived from the input name and a timestamp.

The run id only names the log file of a run.
"""

from __future__ import annotations
import os
import re
from datetime import datetime, timezone
from typing import Optional

def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")

def _input_name(input_path: str) -> str:
    if input_path == "-":
        return "stdin"
    stem = os.path.splitext(os.path.basename(os.path.normpath(input_path)))[0]
    return stem or "run"

def generate_run_id(input_path: str, separator: str = "_") -> str:
    name = re.sub(r"[^\w\-]", "_", _input_name(input_path))
    return separator.join([name or "run", _timestamp()])

def resolve_run_id(explicit: Optional[str], input_path: str) -> str:
    """Return the explicit run id if set, else an auto-generated one."""
    if explicit is not None and str(explicit).strip():
        return re.sub(r"[^\w\-]", "_", str(explicit).strip())
    return generate_run_id(input_path)
