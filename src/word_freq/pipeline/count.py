"""Word frequency counter.

input text -> tokenize -> count -> FrequencyTable

A single synchronous pass; the whole source is read before counting starts.
Read failures (`InputReadError`) propagate to the caller unchanged.
"""

from __future__ import annotations
import logging
from typing import Iterable
from ..sources.base import TextSource
from ..utils.text import tokenize
from .context import FrequencyTable

log = logging.getLogger(__name__)

def count_tokens(tokens: Iterable[str]) -> FrequencyTable:
    table = FrequencyTable()
    for tok in tokens:
        table.add(tok)
    return table

def count_text(text: str) -> FrequencyTable:
    return count_tokens(tokenize(text))

def count_source(source: TextSource) -> FrequencyTable:
    """Read `source` in full and count its tokens."""
    text = source.read()
    table = count_text(text)
    log.debug(
        f"Counted {table.total} tokens ({table.distinct} distinct) from {source.name} {source.metadata()}"
    )
    return table
