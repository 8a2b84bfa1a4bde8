"""Vectorised metrics over fixed-size score/label arrays.

:class:`ScoreLabelArray` keeps scores and labels in two numpy buffers so a
dataset can be rank ordered once (optionally in place) and then evaluated
repeatedly, e.g. enrichment factors at many cutoffs.  Results agree with the
list based functions up to floating point summation order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..data.scorable import Scorable
from .early import DEFAULT_BEDROC_ALPHA, bedroc_terms, check_alpha, top_size

__all__ = [
    "ScoreLabelArray",
    "rank_order",
    "rank_order_in_place",
    "cumulated_actives_curve",
    "fast_auc",
    "auc",
    "fast_enrichment_factor",
    "fast_initial_enhancement",
    "fast_robust_initial_enhancement",
    "fast_power_metric",
    "fast_bedroc_auc",
]

logger = logging.getLogger(__name__)


@dataclass
class ScoreLabelArray:
    """Parallel ``scores`` (float64) and ``labels`` (bool) arrays."""

    scores: np.ndarray
    labels: np.ndarray

    def __post_init__(self) -> None:
        self.scores = np.asarray(self.scores, dtype=np.float64)
        self.labels = np.asarray(self.labels, dtype=bool)
        if self.scores.ndim != 1 or self.labels.ndim != 1:
            raise ValueError("scores and labels must be 1D arrays")
        if len(self.scores) != len(self.labels):
            raise ValueError(
                f"scores and labels must have same length "
                f"({len(self.scores)} != {len(self.labels)})"
            )
        if np.isnan(self.scores).any():
            raise ValueError("NaN score in score/label array")

    @classmethod
    def from_scorables(cls, score_labels: Iterable[Scorable]) -> "ScoreLabelArray":
        items = list(score_labels)
        scores = np.fromiter((sl.get_score() for sl in items), dtype=np.float64, count=len(items))
        labels = np.fromiter((sl.get_label() for sl in items), dtype=bool, count=len(items))
        return cls(scores, labels)

    @classmethod
    def from_arrays(cls, scores, labels) -> "ScoreLabelArray":
        return cls(np.asarray(scores), np.asarray(labels))

    def __len__(self) -> int:
        return len(self.scores)

    @property
    def n_actives(self) -> int:
        return int(self.labels.sum())

    def head(self, n: int) -> "ScoreLabelArray":
        """View on the first ``n`` items (no copy)."""
        return ScoreLabelArray(self.scores[:n], self.labels[:n])

    def copy(self) -> "ScoreLabelArray":
        return ScoreLabelArray(self.scores.copy(), self.labels.copy())


def _descending_order(arr: ScoreLabelArray) -> np.ndarray:
    # stable sort on negated scores keeps ties in input order
    return np.argsort(-arr.scores, kind="stable")


def rank_order(arr: ScoreLabelArray) -> ScoreLabelArray:
    """Return a rank-ordered copy of ``arr``."""
    order = _descending_order(arr)
    return ScoreLabelArray(arr.scores[order], arr.labels[order])


def rank_order_in_place(arr: ScoreLabelArray) -> ScoreLabelArray:
    """Rank order the buffers of ``arr`` in place and return it."""
    order = _descending_order(arr)
    arr.scores[:] = arr.scores[order]
    arr.labels[:] = arr.labels[order]
    logger.debug("rank ordered %d items in place", len(arr))
    return arr


def cumulated_actives_curve(high_scores_first: ScoreLabelArray) -> np.ndarray:
    return np.cumsum(high_scores_first.labels.astype(np.int64))


def fast_auc(high_scores_first: ScoreLabelArray) -> float:
    """ROC AUC of a rank-ordered array, tied scores forming one step."""
    labels = high_scores_first.labels
    scores = high_scores_first.scores
    n = len(labels)
    area = 0.0
    if n:
        tps = np.cumsum(labels, dtype=np.float64)
        fps = np.cumsum(~labels, dtype=np.float64)
        ends = np.r_[np.flatnonzero(scores[1:] != scores[:-1]), n - 1]
        x = np.r_[0.0, fps[ends]]
        y = np.r_[0.0, tps[ends]]
        area = float(np.sum(np.diff(x) * 0.5 * (y[1:] + y[:-1])))
    n_pos = float(labels.sum())
    n_neg = float(n) - n_pos
    return area / (n_neg * n_pos)


def auc(arr: ScoreLabelArray) -> float:
    return fast_auc(rank_order(arr))


def fast_enrichment_factor(p: float, high_scores_first: ScoreLabelArray) -> float:
    n_tot = len(high_scores_first)
    top_n = top_size(p, n_tot)
    rand_actives_rate = high_scores_first.n_actives / n_tot
    top_actives_rate = int(high_scores_first.labels[:top_n].sum()) / top_n
    return top_actives_rate / rand_actives_rate


def fast_initial_enhancement(a: float, high_scores_first: ScoreLabelArray) -> float:
    check_alpha(a, "a")
    ranks = np.flatnonzero(high_scores_first.labels)
    return float(np.exp(-ranks / a).sum())


def _exp_rank_sum(alpha: float, labels: np.ndarray, n_tot: float) -> float:
    ranks = np.flatnonzero(labels) + 1.0
    return float(np.exp(-alpha * ranks / n_tot).sum())


def fast_robust_initial_enhancement(alpha: float, high_scores_first: ScoreLabelArray) -> float:
    n_tot = float(len(high_scores_first))
    _, factor2, _ = bedroc_terms(alpha, n_tot, float(high_scores_first.n_actives))
    return _exp_rank_sum(alpha, high_scores_first.labels, n_tot) * factor2


def fast_bedroc_auc(
    high_scores_first: ScoreLabelArray, alpha: float = DEFAULT_BEDROC_ALPHA
) -> float:
    n_tot = float(len(high_scores_first))
    factor1, factor2, constant = bedroc_terms(
        alpha, n_tot, float(high_scores_first.n_actives)
    )
    total = _exp_rank_sum(alpha, high_scores_first.labels, n_tot)
    return total * factor1 * factor2 + constant


def fast_power_metric(cutoff: float, high_scores_first: ScoreLabelArray) -> float:
    size_tot = len(high_scores_first)
    size_x = top_size(cutoff, size_tot)
    actives_x = int(high_scores_first.labels[:size_x].sum())
    actives_tot = high_scores_first.n_actives
    tpr_x = actives_x / actives_tot
    fpr_x = (size_x - actives_x) / (size_tot - actives_tot)
    return tpr_x / (tpr_x + fpr_x)
