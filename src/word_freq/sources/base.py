"""Text source plugin interface.

A source hands the counter its whole input as one string. There is no
streaming: `read()` returns everything or raises `InputReadError`.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

@dataclass
class SourceSpec:
    path: str
    kind: str = "local_file"   # implementation key, e.g. local_file, stdin
    encoding: str = "utf-8"

class TextSource:
    """Base interface for all sources."""
    name: str

    def metadata(self) -> Dict[str, Any]:
        return {}

    def read(self) -> str:
        raise NotImplementedError
