from __future__ import annotations

from .top_keeper import TopKeeper, add, create, high_scores_first

__all__ = ["TopKeeper", "create", "add", "high_scores_first"]
