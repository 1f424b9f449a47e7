from __future__ import annotations
from .base import Destination, FrequencyWriter, describe, open_text
from ..pipeline.context import FrequencyTable

class TextFrequencyWriter(FrequencyWriter):
    """`<token>: <count>` per line."""
    name = "text"

    def write(self, table: FrequencyTable, *, out: Destination = None, order: str = "none") -> str:
        with open_text(out) as f:
            for tok, n in table.sorted_items(order):
                f.write(f"{tok}: {n}\n")
        return describe(out)
