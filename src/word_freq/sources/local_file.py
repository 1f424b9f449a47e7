"""Local file source: the whole file is read into memory."""

from __future__ import annotations
import logging
import os
from typing import Any, Dict
from ..errors import InputReadError
from .base import SourceSpec, TextSource

log = logging.getLogger(__name__)

class LocalFileSource(TextSource):
    def __init__(self, spec: SourceSpec):
        self.spec = spec
        self.name = spec.path

    def metadata(self) -> Dict[str, Any]:
        return {
            "kind": "local_file",
            "path": self.spec.path,
            "encoding": self.spec.encoding,
            "size_bytes": os.path.getsize(self.spec.path) if os.path.isfile(self.spec.path) else None,
        }

    def read(self) -> str:
        path = self.spec.path
        try:
            with open(path, "r", encoding=self.spec.encoding) as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise InputReadError(path, f"not valid {self.spec.encoding} text ({e.reason} at byte {e.start})") from e
        except LookupError as e:
            raise InputReadError(path, f"unknown encoding {self.spec.encoding!r}") from e
        except OSError as e:
            raise InputReadError(path, e.strerror or str(e)) from e
        log.debug(f"Read {len(text)} chars from {path}")
        return text
