"""Output writers.

A writer emits every (token, count) pair of a FrequencyTable once. Order is
not part of the contract unless the caller asks for one via `order`.

`out` is a destination path, an open text stream, or None for stdout.
"""

from __future__ import annotations
import os
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, TextIO, Union
from ..pipeline.context import FrequencyTable

Destination = Union[str, TextIO, None]

class FrequencyWriter(ABC):
    name: str

    @abstractmethod
    def write(self, table: FrequencyTable, *, out: Destination = None, order: str = "none") -> str:
        """Write the table and return a description of where it went."""
        raise NotImplementedError

def describe(out: Destination) -> str:
    if out is None:
        return "<stdout>"
    if isinstance(out, str):
        return out
    return getattr(out, "name", "<stream>")

@contextmanager
def open_text(out: Destination) -> Iterator[TextIO]:
    """Yield a text stream for `out`; only paths opened here get closed."""
    if out is None:
        yield sys.stdout
    elif isinstance(out, str):
        parent = os.path.dirname(out)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(out, "w", encoding="utf-8") as f:
            yield f
    else:
        yield out
