"""Writer registry.

Add new output formats without changing the CLI by registering them here.
"""

from __future__ import annotations
from typing import Dict
from .base import FrequencyWriter
from .jsonl import JSONLFrequencyWriter
from .parquet import ParquetFrequencyWriter
from .text import TextFrequencyWriter

_WRITERS: Dict[str, FrequencyWriter] = {
    "text": TextFrequencyWriter(),
    "jsonl": JSONLFrequencyWriter(),
    "parquet": ParquetFrequencyWriter(),
}

def register_writer(name: str, writer: FrequencyWriter) -> None:
    """Register a new writer dynamically."""
    if name in _WRITERS:
        raise ValueError(f"Writer '{name}' already registered")
    _WRITERS[name] = writer

def unregister_writer(name: str) -> None:
    """Unregister a dynamically registered writer."""
    if name in _WRITERS:
        del _WRITERS[name]

def list_writers() -> list[str]:
    return list(_WRITERS.keys())

def get_writer(name: str) -> FrequencyWriter:
    if name not in _WRITERS:
        raise KeyError(
            f"Unknown writer: {name}. "
            f"Available: {list(_WRITERS)}. "
            f"Register with register_writer()"
        )
    return _WRITERS[name]
