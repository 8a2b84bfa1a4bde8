"""Rank ordering of score/label sequences.

Every metric in :mod:`rankmetrics.eval` is defined over the rank-ordered
sequence: highest score first, equal scores kept in input order.  Python's
sort is stable (also with ``reverse=True``), which makes curves and areas
reproducible for any permutation inside a group of tied scores.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence, Tuple, TypeVar

from ..data.scorable import Scorable

__all__ = [
    "rank_order_by_score",
    "rank_order_by_score_in_place",
    "nb_actives",
    "actives_rate",
    "round_half_up",
]

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Scorable)


def _score_key(item: Scorable) -> float:
    score = item.get_score()
    if math.isnan(score):
        raise ValueError(f"NaN score in score/label sequence: {item!r}")
    return score


def rank_order_by_score(score_labels: Iterable[S]) -> List[S]:
    """Return a new list sorted by decreasing score (stable)."""
    ranked = sorted(score_labels, key=_score_key, reverse=True)
    logger.debug("rank ordered %d items", len(ranked))
    return ranked


def rank_order_by_score_in_place(score_labels: List[S]) -> List[S]:
    """Sort the caller's list by decreasing score and return it.

    The list passed in is mutated; use :func:`rank_order_by_score` when the
    input order must be preserved.
    """
    score_labels.sort(key=_score_key, reverse=True)
    return score_labels


def nb_actives(score_labels: Iterable[Scorable]) -> int:
    """Number of items labelled positive."""
    return sum(1 for sl in score_labels if sl.get_label())


def actives_rate(score_labels: Sequence[Scorable]) -> Tuple[int, float]:
    """Return ``(n_items, fraction_of_actives)``.

    Raises ``ZeroDivisionError`` on an empty sequence.
    """
    n = len(score_labels)
    return n, nb_actives(score_labels) / n


def round_half_up(x: float) -> int:
    """Round a non-negative float to the nearest int, halves going up."""
    return int(math.floor(x + 0.5))
