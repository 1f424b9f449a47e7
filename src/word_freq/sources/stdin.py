"""Standard input source, selected by the path `-`."""

from __future__ import annotations
import sys
from typing import Any, Dict, Optional, TextIO
from ..errors import InputReadError
from .base import SourceSpec, TextSource

class StdinSource(TextSource):
    def __init__(self, spec: SourceSpec, stream: Optional[TextIO] = None):
        self.spec = spec
        self.name = "<stdin>"
        self.stream = stream

    def metadata(self) -> Dict[str, Any]:
        return {"kind": "stdin", "encoding": self.spec.encoding}

    def read(self) -> str:
        stream = self.stream if self.stream is not None else sys.stdin
        try:
            # Decode the raw bytes ourselves so the configured encoding wins
            # over the locale; replaced streams (tests, pipes) may be text-only.
            buf = getattr(stream, "buffer", None)
            if buf is not None:
                return buf.read().decode(self.spec.encoding)
            return stream.read()
        except UnicodeDecodeError as e:
            raise InputReadError(self.name, f"not valid {self.spec.encoding} text ({e.reason} at byte {e.start})") from e
        except LookupError as e:
            raise InputReadError(self.name, f"unknown encoding {self.spec.encoding!r}") from e
        except OSError as e:
            raise InputReadError(self.name, e.strerror or str(e)) from e
