"""Error types raised at the package boundary."""

from __future__ import annotations
from typing import Optional


class InputReadError(OSError):
    """The designated input source could not be opened or fully read."""

    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        self.detail = detail or "unreadable input"
        super().__init__(f"cannot read {path}: {self.detail}")


class ConfigError(ValueError):
    """Invalid or unreadable configuration."""
