"""Parquet output: one row per distinct token."""

from __future__ import annotations
import os
import pyarrow as pa
import pyarrow.parquet as pq
from .base import Destination, FrequencyWriter
from ..pipeline.context import FrequencyTable

def frequency_schema() -> pa.Schema:
    return pa.schema([
        ("token", pa.string()),
        ("count", pa.int64()),
    ], metadata={"schema_version": "v1"})

class ParquetFrequencyWriter(FrequencyWriter):
    name = "parquet"

    def write(self, table: FrequencyTable, *, out: Destination = None, order: str = "none") -> str:
        if not isinstance(out, str):
            raise ValueError("parquet output needs a file path (use --output)")
        parent = os.path.dirname(out)
        if parent:
            os.makedirs(parent, exist_ok=True)
        items = table.sorted_items(order)
        arrow_table = pa.Table.from_pydict(
            {
                "token": [tok for tok, _ in items],
                "count": [n for _, n in items],
            },
            schema=frequency_schema(),
        )
        pq.write_table(arrow_table, out, compression="zstd")
        return out
