import math

import pytest

from rankmetrics.data.scorable import ScoreLabel
from rankmetrics.eval.early import (
    bedroc_auc,
    bedroc_terms,
    enrichment_factor,
    fast_bedroc_auc,
    fast_enrichment_factor,
    fast_initial_enhancement,
    fast_power_metric,
    initial_enhancement,
    power_metric,
    robust_initial_enhancement,
)
from rankmetrics.eval.ranking import rank_order_by_score


def _bedroc_by_formula(active_ranks, n_tot, alpha=20.0):
    N = float(n_tot)
    n = float(len(active_ranks))
    total = 0.0
    for rank in active_ranks:
        total += math.exp(-alpha * rank / N)
    ra = n / N
    factor1 = ra * math.sinh(alpha / 2.0) / (math.cosh(alpha / 2.0) - math.cosh(alpha / 2.0 - ra * alpha))
    factor2 = 1.0 / ra * (math.exp(alpha / N) - 1.0) / (1.0 - math.exp(-alpha))
    constant = 1.0 / (1.0 - math.exp(alpha * (1.0 - ra)))
    return total * factor1 * factor2 + constant


def test_power_metric_reference(shuffled_reference):
    tpr_x = 3.0 / 4.0
    fpr_x = (5.0 - 3.0) / (14.0 - 4.0)
    assert power_metric(0.35, shuffled_reference) == tpr_x / (tpr_x + fpr_x)


def test_power_metric_fast_matches(reference_scores):
    assert fast_power_metric(0.35, reference_scores) == power_metric(0.35, reference_scores)


@pytest.mark.parametrize("cutoff", [0.0, -0.1, 1.5])
def test_power_metric_rejects_cutoff_outside_domain(reference_scores, cutoff):
    with pytest.raises(ValueError):
        power_metric(cutoff, reference_scores)


def test_power_metric_rejects_empty_selection(reference_scores):
    # round(0.01 * 14) == 0
    with pytest.raises(ValueError):
        power_metric(0.01, reference_scores)


def test_bedroc_golden(shuffled_reference):
    expected = _bedroc_by_formula([1, 2, 4, 9], 14)
    assert bedroc_auc(shuffled_reference) == pytest.approx(expected, abs=1e-9)
    assert 0.0 < expected < 1.0


def test_bedroc_alpha_keyword(reference_scores):
    expected = _bedroc_by_formula([1, 2, 4, 9], 14, alpha=5.0)
    assert bedroc_auc(reference_scores, alpha=5.0) == pytest.approx(expected, abs=1e-9)
    assert fast_bedroc_auc(reference_scores, alpha=5.0) == bedroc_auc(reference_scores, alpha=5.0)


def test_bedroc_extremes():
    best = [ScoreLabel(10.0 - i, i < 3) for i in range(10)]
    worst = [ScoreLabel(10.0 - i, i >= 7) for i in range(10)]
    assert bedroc_auc(best) == pytest.approx(1.0, abs=1e-9)
    assert bedroc_auc(worst) == pytest.approx(0.0, abs=1e-9)


def test_bedroc_undefined_without_both_classes():
    all_actives = [ScoreLabel(1.0, True), ScoreLabel(0.5, True)]
    no_actives = [ScoreLabel(1.0, False), ScoreLabel(0.5, False)]
    with pytest.raises(ValueError):
        bedroc_auc(all_actives)
    with pytest.raises(ValueError):
        bedroc_auc(no_actives)


def test_bedroc_rejects_non_positive_alpha(reference_scores):
    with pytest.raises(ValueError):
        bedroc_auc(reference_scores, alpha=0.0)


def test_rie_bedroc_relation(tied_dataset):
    alpha = 20.0
    ranked = rank_order_by_score(tied_dataset)
    n_act = float(sum(sl.label for sl in ranked))
    factor1, _, constant = bedroc_terms(alpha, float(len(ranked)), n_act)
    rie = robust_initial_enhancement(alpha, tied_dataset)
    assert fast_bedroc_auc(ranked, alpha) == pytest.approx(rie * factor1 + constant, abs=1e-12)


def test_rie_random_is_about_one():
    # evenly spread actives
    items = [ScoreLabel(1000.0 - i, i % 10 == 0) for i in range(1000)]
    assert robust_initial_enhancement(20.0, items) == pytest.approx(1.0, abs=0.15)


def test_enrichment_factor(shuffled_reference, reference_scores):
    assert enrichment_factor(0.35, shuffled_reference) == pytest.approx(0.6 / (4 / 14))
    assert enrichment_factor(0.5, shuffled_reference) == pytest.approx(1.5)
    assert fast_enrichment_factor(1.0, reference_scores) == pytest.approx(1.0)


def test_enrichment_factor_rejects_empty_selection(reference_scores):
    with pytest.raises(ValueError):
        enrichment_factor(0.01, reference_scores)


def test_initial_enhancement(shuffled_reference, reference_scores):
    expected = sum(math.exp(-r / 2.0) for r in (0, 1, 3, 8))
    assert initial_enhancement(2.0, shuffled_reference) == pytest.approx(expected)
    assert fast_initial_enhancement(2.0, reference_scores) == initial_enhancement(2.0, shuffled_reference)


def test_initial_enhancement_larger_a_flattens(reference_scores):
    assert fast_initial_enhancement(100.0, reference_scores) > fast_initial_enhancement(1.0, reference_scores)
    with pytest.raises(ValueError):
        fast_initial_enhancement(0.0, reference_scores)
