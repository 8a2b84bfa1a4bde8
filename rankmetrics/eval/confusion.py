"""Threshold-based confusion counts and Matthews correlation."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..data.scorable import Scorable

__all__ = ["ConfusionMatrix", "confusion_matrix", "mcc"]


@dataclass(frozen=True)
class ConfusionMatrix:
    tp: int
    fp: int
    tn: int
    fn: int

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn


def confusion_matrix(threshold: float, score_labels: Iterable[Scorable]) -> ConfusionMatrix:
    """Count outcomes predicting positive when ``score >= threshold``."""
    tp = fp = tn = fn = 0
    for sl in score_labels:
        predicted = sl.get_score() >= threshold
        if sl.get_label():
            if predicted:
                tp += 1
            else:
                fn += 1
        elif predicted:
            fp += 1
        else:
            tn += 1
    return ConfusionMatrix(tp=tp, fp=fp, tn=tn, fn=fn)


def mcc(threshold: float, score_labels: Iterable[Scorable]) -> float:
    """Matthews Correlation Coefficient at ``threshold``, in [-1, 1].

    Returns 0.0 when any marginal of the confusion matrix is empty
    (e.g. every item predicted positive), following the usual convention.
    """
    cm = confusion_matrix(threshold, score_labels)
    denom = (cm.tp + cm.fp) * (cm.tp + cm.fn) * (cm.tn + cm.fp) * (cm.tn + cm.fn)
    if denom == 0:
        return 0.0
    return (cm.tp * cm.tn - cm.fp * cm.fn) / math.sqrt(denom)
