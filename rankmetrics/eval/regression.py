"""Performance measures for regression models.

See chapter 12 "Regression models" in Varnek, A. (ed.), 2017. *Tutorials
in Chemoinformatics*. John Wiley & Sons.  Every function takes the
experimental values first and the predictions second.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

__all__ = ["rmse", "mae", "std_dev_res", "r2", "regression_report"]


def _validate_inputs(
    y_exp: Sequence[float], y_pred: Sequence[float]
) -> Tuple[np.ndarray, np.ndarray]:
    y_exp = np.asarray(y_exp, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    if y_exp.ndim != 1 or y_pred.ndim != 1:
        raise ValueError("expected and predicted values must be 1D")
    if len(y_exp) != len(y_pred):
        raise ValueError(
            f"expected and predicted values must have same length "
            f"({len(y_exp)} != {len(y_pred)})"
        )
    return y_exp, y_pred


def _sum_squared_diffs(y_exp: np.ndarray, y_pred: np.ndarray) -> float:
    return float(np.sum((y_exp - y_pred) ** 2))


def rmse(y_exp: Sequence[float], y_pred: Sequence[float]) -> float:
    """Root mean squared error."""
    y_exp, y_pred = _validate_inputs(y_exp, y_pred)
    return float(np.sqrt(_sum_squared_diffs(y_exp, y_pred) / len(y_exp)))


def mae(y_exp: Sequence[float], y_pred: Sequence[float]) -> float:
    """Mean absolute error."""
    y_exp, y_pred = _validate_inputs(y_exp, y_pred)
    return float(np.sum(np.abs(y_exp - y_pred)) / len(y_exp))


def std_dev_res(y_exp: Sequence[float], y_pred: Sequence[float]) -> float:
    """Standard deviation of residuals, ``n - 2`` degrees of freedom."""
    y_exp, y_pred = _validate_inputs(y_exp, y_pred)
    return float(np.sqrt(_sum_squared_diffs(y_exp, y_pred) / (len(y_exp) - 2)))


def r2(y_exp: Sequence[float], y_pred: Sequence[float]) -> float:
    """Coefficient of determination ``1 - SS_res / SS_tot``."""
    y_exp, y_pred = _validate_inputs(y_exp, y_pred)
    ss_res = _sum_squared_diffs(y_exp, y_pred)
    ss_tot = float(np.sum((y_exp - y_exp.mean()) ** 2))
    return 1.0 - ss_res / ss_tot


def regression_report(y_exp: Sequence[float], y_pred: Sequence[float]) -> dict[str, float]:
    return {
        "rmse": rmse(y_exp, y_pred),
        "mae": mae(y_exp, y_pred),
        "std_dev_res": std_dev_res(y_exp, y_pred),
        "r2": r2(y_exp, y_pred),
    }
