"""Bounded keeper of the K best scored names seen in a stream.

The keeper holds a min-heap of at most ``k`` entries so the current worst
of the best is always at ``heap[0]``; each insertion costs O(log k).  On a
boundary tie the entry inserted first is kept.
"""
from __future__ import annotations

import heapq
import itertools
import math
from typing import Iterator, List, Tuple

__all__ = ["TopKeeper", "create", "add", "high_scores_first"]


class TopKeeper:
    """Keep the ``k`` highest ``(score, name)`` pairs added so far.

    Examples
    --------
    >>> keeper = TopKeeper(2)
    >>> keeper.add("a", 1.0).add("b", 3.0).add("c", 2.0).high_scores_first()
    [(3.0, 'b'), (2.0, 'c')]
    """

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")
        self.capacity = k
        # (score, -insertion_index, name): among equal scores the latest
        # insertion compares smallest and is evicted first
        self._heap: List[Tuple[float, int, str]] = []
        self._counter = itertools.count()

    def add(self, name: str, score: float) -> "TopKeeper":
        """Offer ``(name, score)``; kept only if it beats the current worst."""
        if math.isnan(score):
            raise ValueError(f"NaN score for {name!r}")
        if self.capacity == 0:
            return self
        entry = (score, -next(self._counter), name)
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, entry)
        elif score > self._heap[0][0]:
            heapq.heapreplace(self._heap, entry)
        return self

    def high_scores_first(self) -> List[Tuple[float, str]]:
        """Kept entries as ``(score, name)``, best first; state is untouched."""
        ranked = sorted(self._heap, key=lambda e: (-e[0], -e[1]))
        return [(score, name) for score, _, name in ranked]

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Tuple[float, str]]:
        return iter(self.high_scores_first())

    def __repr__(self) -> str:
        return f"TopKeeper(capacity={self.capacity}, size={len(self)})"


def create(k: int) -> TopKeeper:
    """Create a keeper retaining up to ``k`` best entries."""
    return TopKeeper(k)


def add(name: str, score: float, keeper: TopKeeper) -> TopKeeper:
    """Add ``score`` under ``name`` to ``keeper`` and return it."""
    return keeper.add(name, score)


def high_scores_first(keeper: TopKeeper) -> List[Tuple[float, str]]:
    return keeper.high_scores_first()
