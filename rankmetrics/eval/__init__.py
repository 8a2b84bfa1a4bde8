"""Ranking, curve and early-recognition metrics over score/label sequences."""
from __future__ import annotations

from .area import auc, curve_area, fast_auc, fast_pr_auc, pr_auc, trapezoid_surface
from .confusion import ConfusionMatrix, confusion_matrix, mcc
from .curves import (
    cumulated_actives_curve,
    fast_pr_curve,
    iter_roc_points,
    pr_curve,
    roc_curve,
)
from .early import (
    DEFAULT_BEDROC_ALPHA,
    bedroc_auc,
    enrichment_factor,
    fast_bedroc_auc,
    fast_enrichment_factor,
    fast_initial_enhancement,
    fast_power_metric,
    fast_robust_initial_enhancement,
    initial_enhancement,
    power_metric,
    robust_initial_enhancement,
)
from .ranking import (
    actives_rate,
    nb_actives,
    rank_order_by_score,
    rank_order_by_score_in_place,
)
from .regression import mae, r2, regression_report, rmse, std_dev_res

__all__ = [
    "rank_order_by_score",
    "rank_order_by_score_in_place",
    "nb_actives",
    "actives_rate",
    "cumulated_actives_curve",
    "iter_roc_points",
    "roc_curve",
    "fast_pr_curve",
    "pr_curve",
    "trapezoid_surface",
    "curve_area",
    "fast_auc",
    "auc",
    "fast_pr_auc",
    "pr_auc",
    "DEFAULT_BEDROC_ALPHA",
    "enrichment_factor",
    "fast_enrichment_factor",
    "initial_enhancement",
    "fast_initial_enhancement",
    "robust_initial_enhancement",
    "fast_robust_initial_enhancement",
    "power_metric",
    "fast_power_metric",
    "bedroc_auc",
    "fast_bedroc_auc",
    "ConfusionMatrix",
    "confusion_matrix",
    "mcc",
    "rmse",
    "mae",
    "std_dev_res",
    "r2",
    "regression_report",
]
