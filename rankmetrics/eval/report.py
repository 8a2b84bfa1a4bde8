"""One-shot performance report over a score/label dataset."""
from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable

from omegaconf import DictConfig

from ..config import load_config
from ..data.scorable import Scorable
from .area import fast_auc, fast_pr_auc
from .confusion import mcc
from .early import (
    fast_bedroc_auc,
    fast_enrichment_factor,
    fast_power_metric,
    fast_robust_initial_enhancement,
)
from .ranking import nb_actives, rank_order_by_score

__all__ = ["ef_key", "performance_report"]

logger = logging.getLogger(__name__)


def ef_key(fraction: float) -> str:
    """Report key for an enrichment fraction, e.g. ``0.01 -> "ef_1pct"``."""
    return f"ef_{fraction * 100:g}pct"


def _metric(name: str, fn: Callable[[], float]) -> float:
    # degenerate datasets make single metrics undefined, not the whole report
    try:
        return float(fn())
    except (ZeroDivisionError, OverflowError, ValueError) as exc:
        logger.warning("%s undefined for this dataset: %s", name, exc)
        return math.nan


def performance_report(
    score_labels: Iterable[Scorable], cfg: DictConfig | None = None
) -> Dict[str, float]:
    """Compute the ranking metrics configured in ``cfg.metrics``.

    Returns a flat dictionary with keys ``n``, ``n_actives``, ``auc``,
    ``pr_auc``, ``bedroc``, ``rie``, ``power_metric``, ``mcc`` and one
    ``ef_<p>pct`` entry per enrichment fraction.  Metrics that are undefined
    for the data (e.g. a single class) are NaN.
    """
    cfg = cfg if cfg is not None else load_config()
    m = cfg.metrics
    ranked = rank_order_by_score(score_labels)
    report: Dict[str, float] = {
        "n": float(len(ranked)),
        "n_actives": float(nb_actives(ranked)),
        "auc": _metric("auc", lambda: fast_auc(ranked)),
        "pr_auc": _metric("pr_auc", lambda: fast_pr_auc(ranked)),
        "bedroc": _metric("bedroc", lambda: fast_bedroc_auc(ranked, alpha=m.bedroc_alpha)),
        "rie": _metric("rie", lambda: fast_robust_initial_enhancement(m.rie_alpha, ranked)),
        "power_metric": _metric(
            "power_metric", lambda: fast_power_metric(m.power_cutoff, ranked)
        ),
        "mcc": _metric("mcc", lambda: mcc(m.mcc_threshold, ranked)),
    }
    for fraction in m.ef_fractions:
        key = ef_key(fraction)
        report[key] = _metric(key, lambda f=fraction: fast_enrichment_factor(f, ranked))
    logger.debug("performance report: %s", report)
    return report
