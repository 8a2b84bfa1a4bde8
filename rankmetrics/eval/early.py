"""Early-recognition metrics for virtual-screening style rankings.

References
----------
* Truchon, J.-F. & Bayly, C. I. (2007). Evaluating virtual screening
  methods: good and bad metrics for the "early recognition" problem.
  J. Chem. Inf. Model. 47, 488-508. DOI: 10.1021/ci600426e
* Lopes, J. C. D. et al. (2017). The power metric: a new statistically
  robust enrichment-type metric for virtual screening applications with
  early recovery capability. J. Cheminform. 9:7.
* Sheridan, R. P. et al. (2001). Protocols for bridging the peptide to
  nonpeptide gap in topological similarity searches. J. Chem. Inf.
  Comput. Sci. 41, 1395-1406.

Each metric comes in two flavours: ``fast_*`` takes a sequence that is
already rank ordered (see :func:`rank_order_by_score`), the plain name
sorts its input first.
"""
from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

from ..data.scorable import Scorable
from .ranking import nb_actives, rank_order_by_score, round_half_up

__all__ = [
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
]

DEFAULT_BEDROC_ALPHA = 20.0


def check_cutoff(cutoff: float) -> None:
    if not 0.0 < cutoff <= 1.0:
        raise ValueError(f"cutoff must be in (0, 1], got {cutoff}")


def check_alpha(alpha: float, name: str = "alpha") -> None:
    if not alpha > 0.0:
        raise ValueError(f"{name} must be > 0, got {alpha}")


def top_size(cutoff: float, n_tot: int) -> int:
    """Number of top-ranked items selected by ``cutoff`` (at least one)."""
    check_cutoff(cutoff)
    size_x = round_half_up(cutoff * n_tot)
    if size_x < 1:
        raise ValueError(
            f"cutoff {cutoff} selects no item out of {n_tot}; use a larger cutoff"
        )
    return size_x


# ---------------------------------------------------------------------------
# Enrichment factor


def fast_enrichment_factor(p: float, high_scores_first: Sequence[Scorable]) -> float:
    """Enrichment factor of the top ``p`` fraction of a rank-ordered sequence.

    ``EF = actives_rate(top round(p * N)) / actives_rate(all)``; 1.0 is what
    a random ranking achieves on average.
    """
    n_tot = len(high_scores_first)
    top_n = top_size(p, n_tot)
    rand_actives_rate = nb_actives(high_scores_first) / n_tot
    top_actives_rate = nb_actives(high_scores_first[:top_n]) / top_n
    return top_actives_rate / rand_actives_rate


def enrichment_factor(p: float, score_labels: Iterable[Scorable]) -> float:
    """Enrichment factor at ``p`` (e.g. ``p=0.01`` for EF at 1%)."""
    return fast_enrichment_factor(p, rank_order_by_score(score_labels))


# ---------------------------------------------------------------------------
# Initial enhancement


def fast_initial_enhancement(a: float, high_scores_first: Iterable[Scorable]) -> float:
    """Sum of ``exp(-rank / a)`` over actives, ``rank`` counted from 0.

    A larger ``a`` flattens the decay and weights late actives more.
    """
    check_alpha(a, "a")
    acc = 0.0
    for rank, sl in enumerate(high_scores_first):
        if sl.get_label():
            acc += math.exp(-rank / a)
    return acc


def initial_enhancement(a: float, score_labels: Iterable[Scorable]) -> float:
    return fast_initial_enhancement(a, rank_order_by_score(score_labels))


# ---------------------------------------------------------------------------
# RIE and BEDROC


def _exp_rank_sum(alpha: float, high_scores_first: Iterable[Scorable], n_tot: float) -> float:
    acc = 0.0
    for rank, sl in enumerate(high_scores_first):
        if sl.get_label():
            # ranks start at 1
            acc += math.exp(-alpha * (1.0 + rank) / n_tot)
    return acc


def bedroc_terms(alpha: float, n_tot: float, n_act: float) -> Tuple[float, float, float]:
    """Return ``(factor1, factor2, constant)`` of the BEDROC closed form.

    Undefined when the actives ratio is 0 or 1.
    """
    check_alpha(alpha)
    if n_act <= 0 or n_act >= n_tot:
        raise ValueError(
            f"BEDROC is undefined with {int(n_act)} actives out of {int(n_tot)} items"
        )
    half_alpha = 0.5 * alpha
    r_a = n_act / n_tot
    factor1 = r_a * math.sinh(half_alpha) / (
        math.cosh(half_alpha) - math.cosh(half_alpha - r_a * alpha)
    )
    factor2 = 1.0 / r_a * (math.exp(alpha / n_tot) - 1.0) / (1.0 - math.exp(-alpha))
    constant = 1.0 / (1.0 - math.exp(alpha * (1.0 - r_a)))
    return factor1, factor2, constant


def fast_robust_initial_enhancement(
    alpha: float, high_scores_first: Sequence[Scorable]
) -> float:
    """Normalised RIE of a rank-ordered sequence; 1.0 is random."""
    n_tot = float(len(high_scores_first))
    _, factor2, _ = bedroc_terms(alpha, n_tot, float(nb_actives(high_scores_first)))
    return _exp_rank_sum(alpha, high_scores_first, n_tot) * factor2


def robust_initial_enhancement(alpha: float, score_labels: Iterable[Scorable]) -> float:
    return fast_robust_initial_enhancement(alpha, rank_order_by_score(score_labels))


def fast_bedroc_auc(
    high_scores_first: Sequence[Scorable], alpha: float = DEFAULT_BEDROC_ALPHA
) -> float:
    """BEDROC of a rank-ordered sequence.

    ``bedroc = sum * factor1 * factor2 + constant`` where ``sum`` runs over
    the 1-based ranks ``r`` of actives as ``exp(-alpha * r / N)``.  The
    result lies in [0, 1]; ``alpha=20`` puts 80% of the weight on the top
    8% of the ranking.
    """
    n_tot = float(len(high_scores_first))
    n_act = float(nb_actives(high_scores_first))
    factor1, factor2, constant = bedroc_terms(alpha, n_tot, n_act)
    total = _exp_rank_sum(alpha, high_scores_first, n_tot)
    return total * factor1 * factor2 + constant


def bedroc_auc(
    score_labels: Iterable[Scorable], alpha: float = DEFAULT_BEDROC_ALPHA
) -> float:
    """BEDROC of an unsorted sequence (default ``alpha=20.0``)."""
    return fast_bedroc_auc(rank_order_by_score(score_labels), alpha=alpha)


# ---------------------------------------------------------------------------
# Power metric


def fast_power_metric(cutoff: float, high_scores_first: Sequence[Scorable]) -> float:
    """Power metric ``TPR_x / (TPR_x + FPR_x)`` at ``cutoff`` in (0, 1].

    ``x = round(cutoff * N)`` top items are taken from the rank-ordered
    sequence.  Raises ``ValueError`` when ``x`` would be zero.
    """
    size_tot = len(high_scores_first)
    size_x = top_size(cutoff, size_tot)
    actives_x = nb_actives(high_scores_first[:size_x])
    actives_tot = nb_actives(high_scores_first)
    tpr_x = actives_x / actives_tot
    fpr_x = (size_x - actives_x) / (size_tot - actives_tot)
    return tpr_x / (tpr_x + fpr_x)


def power_metric(cutoff: float, score_labels: Iterable[Scorable]) -> float:
    return fast_power_metric(cutoff, rank_order_by_score(score_labels))
