"""Area under ROC and precision-recall curves."""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from ..data.scorable import Scorable
from .curves import fast_pr_curve, pr_curve
from .ranking import rank_order_by_score

__all__ = ["trapezoid_surface", "curve_area", "fast_auc", "auc", "fast_pr_auc", "pr_auc"]


def trapezoid_surface(x1: float, x2: float, y1: float, y2: float) -> float:
    """Area of the trapezoid between ``x1`` and ``x2`` under ``y1``/``y2``."""
    base = abs(x1 - x2)
    height = 0.5 * (y1 + y2)
    return base * height


def curve_area(curve: Sequence[Tuple[float, float]]) -> float:
    """Trapezoidal integration over consecutive curve points."""
    area = 0.0
    for (x1, y1), (x2, y2) in zip(curve, curve[1:]):
        area += trapezoid_surface(x1, x2, y1, y2)
    return area


def fast_auc(high_scores_first: Iterable[Scorable]) -> float:
    """ROC AUC of an already rank-ordered sequence.

    Single pass accumulating false/true positive counts.  A trapezoid is
    closed only when the score changes, so a block of tied scores counts
    as one diagonal step.  This is the area of Fawcett's
    "efficient AUC" algorithm, normalised by ``n_negatives * n_positives``.

    Raises ``ZeroDivisionError`` if the sequence lacks either class.
    """
    fp = tp = 0.0
    fp_prev = tp_prev = 0.0
    area = 0.0
    score_prev = float("-inf")
    for sl in high_scores_first:
        score = sl.get_score()
        if score != score_prev:
            area += trapezoid_surface(fp, fp_prev, tp, tp_prev)
            score_prev = score
            fp_prev = fp
            tp_prev = tp
        if sl.get_label():
            tp += 1.0
        else:
            fp += 1.0
    area += trapezoid_surface(fp, fp_prev, tp, tp_prev)
    return area / (fp * tp)


def auc(score_labels: Iterable[Scorable]) -> float:
    """ROC AUC of an unsorted sequence; 0.5 is random, 1.0 is perfect."""
    return fast_auc(rank_order_by_score(score_labels))


def fast_pr_auc(high_scores_first: Sequence[Scorable]) -> float:
    return curve_area(fast_pr_curve(high_scores_first))


def pr_auc(score_labels: Iterable[Scorable]) -> float:
    """Area under the precision-recall curve of an unsorted sequence."""
    return curve_area(pr_curve(score_labels))
