"""Platt scaling of raw scores into calibrated probabilities.

``P(active | score) = 1 / (1 + exp(a * score + b))``.  The fitting step is
an injectable :class:`PlattFitter`; two implementations are provided.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

import numpy as np
from scipy.optimize import curve_fit
from scipy.special import expit
from sklearn.linear_model import LogisticRegression

from ..data.scorable import Scorable

__all__ = [
    "PlattParams",
    "PlattFitter",
    "LogisticPlattFitter",
    "CurveFitPlattFitter",
    "platt_probability",
    "apply_platt",
    "platt_scale",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlattParams:
    a: float
    b: float


class PlattFitter(Protocol):
    def fit(self, scores: np.ndarray, labels: np.ndarray) -> PlattParams:
        ...


def platt_probability(a: float, b: float, score: float) -> float:
    """Calibrated probability of ``score`` under parameters ``(a, b)``."""
    return float(expit(-(a * score + b)))


def apply_platt(params: PlattParams, scores) -> np.ndarray:
    """Vectorised :func:`platt_probability`."""
    scores = np.asarray(scores, dtype=float)
    return expit(-(params.a * scores + params.b))


@dataclass
class LogisticPlattFitter:
    """Fit ``(a, b)`` with scikit-learn's logistic regression."""

    C: float = 1.0
    max_iter: int = 1000

    def fit(self, scores: np.ndarray, labels: np.ndarray) -> PlattParams:
        model = LogisticRegression(C=self.C, max_iter=self.max_iter)
        model.fit(np.asarray(scores, dtype=float).reshape(-1, 1), np.asarray(labels, dtype=int))
        # sklearn models p = expit(w * s + c), Platt's form uses the opposite sign
        return PlattParams(a=-float(model.coef_[0, 0]), b=-float(model.intercept_[0]))


@dataclass
class CurveFitPlattFitter:
    """Non-linear least squares fit of the sigmoid with ``scipy.optimize``."""

    a0: float = -1.0
    b0: float = 0.0
    maxfev: int = 10000

    def fit(self, scores: np.ndarray, labels: np.ndarray) -> PlattParams:
        def sigmoid(x, a, b):
            return expit(-(a * x + b))

        popt, _ = curve_fit(
            sigmoid,
            np.asarray(scores, dtype=float),
            np.asarray(labels, dtype=float),
            p0=(self.a0, self.b0),
            maxfev=self.maxfev,
        )
        return PlattParams(a=float(popt[0]), b=float(popt[1]))


def platt_scale(
    score_labels: Iterable[Scorable], fitter: PlattFitter | None = None
) -> PlattParams:
    """Fit Platt parameters on labelled scores.

    Raises
    ------
    ValueError
        If the data holds a single class.
    """
    items = list(score_labels)
    scores = np.array([sl.get_score() for sl in items], dtype=float)
    labels = np.array([sl.get_label() for sl in items], dtype=bool)
    if labels.all() or not labels.any():
        raise ValueError("Platt scaling needs both actives and decoys")
    fitter = fitter or LogisticPlattFitter()
    params = fitter.fit(scores, labels)
    logger.info("fitted Platt parameters a=%.6g b=%.6g on %d items", params.a, params.b, len(items))
    return params
