"""Core data model.

FrequencyTable is the only state of a run: created empty, filled in one
forward pass over the tokens, emitted, then discarded.

Iteration order is whatever the underlying dict gives (first encounter).
Callers that need a stable order ask for it with `sorted_items(order)`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

SORT_ORDERS = ("none", "count", "token")

@dataclass
class FrequencyTable:
    counts: Dict[str, int] = field(default_factory=dict)

    def add(self, token: str) -> int:
        """Increment `token` by one and return its new count."""
        n = self.counts.get(token, 0) + 1
        self.counts[token] = n
        return n

    def get(self, token: str, default: Optional[int] = None) -> Optional[int]:
        return self.counts.get(token, default)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def distinct(self) -> int:
        return len(self.counts)

    def items(self):
        return self.counts.items()

    def sorted_items(self, order: str = "none") -> List[Tuple[str, int]]:
        if order == "none":
            return list(self.counts.items())
        if order == "count":
            return sorted(self.counts.items(), key=lambda kv: (-kv[1], kv[0]))
        if order == "token":
            return sorted(self.counts.items())
        raise ValueError(f"Unknown sort order: {order}. Available: {list(SORT_ORDERS)}")

    def as_dict(self) -> Dict[str, int]:
        return dict(self.counts)

    def __contains__(self, token: object) -> bool:
        return token in self.counts

    def __iter__(self) -> Iterator[str]:
        return iter(self.counts)

    def __len__(self) -> int:
        return len(self.counts)
