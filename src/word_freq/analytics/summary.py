"""Run summary statistics over a FrequencyTable.

Percentiles are over the per-token counts, so `count_p50` is the count of
the median distinct token.
"""

from __future__ import annotations
from typing import Any, Dict, List
import numpy as np
from ..pipeline.context import FrequencyTable

def _percentiles(xs: List[float], ps=(50, 90, 99)) -> Dict[str, float]:
    if not xs:
        return {}
    arr = np.array(xs, dtype=np.float64)
    out = {}
    for p in ps:
        out[f"p{p}"] = float(np.percentile(arr, p))
    return out

def summarize(table: FrequencyTable) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "total_tokens": table.total,
        "distinct_tokens": table.distinct,
        "max_count": 0,
        "top_token": None,
    }
    if not table:
        return out
    top_token, max_count = table.sorted_items("count")[0]
    out["max_count"] = max_count
    out["top_token"] = top_token
    for pk, pv in _percentiles([float(n) for _, n in table.items()]).items():
        out[f"count_{pk}"] = pv
    return out
