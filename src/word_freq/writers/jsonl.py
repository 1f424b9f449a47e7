from __future__ import annotations
import json
from .base import Destination, FrequencyWriter, describe, open_text
from ..pipeline.context import FrequencyTable

class JSONLFrequencyWriter(FrequencyWriter):
    name = "jsonl"

    def write(self, table: FrequencyTable, *, out: Destination = None, order: str = "none") -> str:
        with open_text(out) as f:
            for tok, n in table.sorted_items(order):
                f.write(json.dumps({"token": tok, "count": n}, ensure_ascii=False) + "\n")
        return describe(out)
