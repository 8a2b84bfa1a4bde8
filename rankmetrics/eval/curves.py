"""ROC, precision-recall and cumulated-actives curves."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from itertools import groupby

import numpy as np

from ..data.scorable import Scorable
from .ranking import nb_actives, rank_order_by_score

__all__ = [
    "Curve",
    "cumulated_actives_curve",
    "iter_roc_points",
    "roc_curve",
    "fast_pr_curve",
    "pr_curve",
]

Curve = List[Tuple[float, float]]


def cumulated_actives_curve(high_scores_first: Iterable[Scorable]) -> List[int]:
    """Running count of actives along an already rank-ordered sequence."""
    total = 0
    curve: List[int] = []
    for sl in high_scores_first:
        if sl.get_label():
            total += 1
        curve.append(total)
    return curve


def iter_roc_points(high_scores_first: Sequence[Scorable]) -> Iterator[Tuple[float, float]]:
    """Yield ``(FPR, TPR)`` after each item of a rank-ordered sequence.

    The first point is always ``(0.0, 0.0)``.  A sequence without actives or
    without decoys raises ``ZeroDivisionError`` on the first step.
    """
    n_act_tot = nb_actives(high_scores_first)
    n_dec_tot = len(high_scores_first) - n_act_tot
    n_act = 0
    n_dec = 0
    yield 0.0, 0.0
    for sl in high_scores_first:
        if sl.get_label():
            n_act += 1
        else:
            n_dec += 1
        yield n_dec / n_dec_tot, n_act / n_act_tot


def roc_curve(score_labels: Iterable[Scorable]) -> Curve:
    """ROC curve as a list of ``(FPR, TPR)`` points from unsorted input."""
    return list(iter_roc_points(rank_order_by_score(score_labels)))


def fast_pr_curve(ranked: Sequence[Scorable]) -> Curve:
    """Precision-recall curve of a rank-ordered sequence.

    Returns ``(recall, precision)`` points, one per distinct score threshold
    from the highest down, preceded by ``(0.0, 1.0)``.  Items with a score
    greater than or equal to the threshold are predicted positive.  Rates
    are raw divisions: with no actives at all recall is NaN at every
    threshold.
    """
    n_act_tot = nb_actives(ranked)
    thresholds = [score for score, _ in groupby(sl.get_score() for sl in ranked)]

    tps = np.empty(len(thresholds), dtype=float)
    fps = np.empty(len(thresholds), dtype=float)
    i = 0
    tp = 0
    fp = 0
    # ranked is sorted, so each threshold only extends the positive side
    for j, tau in enumerate(thresholds):
        while i < len(ranked) and ranked[i].get_score() >= tau:
            if ranked[i].get_label():
                tp += 1
            else:
                fp += 1
            i += 1
        tps[j] = tp
        fps[j] = fp

    with np.errstate(divide="ignore", invalid="ignore"):
        recall = tps / np.float64(n_act_tot)  # tp / (tp + fn)
        precision = tps / (tps + fps)

    curve: Curve = [(0.0, 1.0)]
    curve.extend(zip(recall.tolist(), precision.tolist()))
    return curve


def pr_curve(score_labels: Iterable[Scorable]) -> Curve:
    """Precision-recall curve of an unsorted sequence, see :func:`fast_pr_curve`."""
    return fast_pr_curve(rank_order_by_score(score_labels))
