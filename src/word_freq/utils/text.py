"""Text tokenization."""

from __future__ import annotations
from typing import List

def tokenize(text: str) -> List[str]:
    """Split text on runs of whitespace.

    Delimiters are dropped and no normalization is applied, so `"The"` and
    `"the,"` are distinct tokens. Empty or all-whitespace text yields `[]`.
    """
    return text.split()
