import numpy as np
import pytest

from rankmetrics.calibration.platt import (
    CurveFitPlattFitter,
    LogisticPlattFitter,
    PlattParams,
    apply_platt,
    platt_probability,
    platt_scale,
)
from rankmetrics.data.scorable import ScoreLabel


@pytest.fixture
def logistic_data():
    rng = np.random.default_rng(0)
    scores = rng.normal(size=5000)
    labels = rng.random(5000) < 1.0 / (1.0 + np.exp(-(2.0 * scores - 1.0)))
    return [ScoreLabel(float(s), bool(l)) for s, l in zip(scores, labels)]


def test_platt_probability():
    assert platt_probability(0.0, 0.0, 3.0) == 0.5
    assert platt_probability(-1.0, 0.0, 2.0) > platt_probability(-1.0, 0.0, 1.0)
    assert platt_probability(-1.0, 0.0, 1e4) == pytest.approx(1.0)


def test_apply_platt_matches_scalar():
    params = PlattParams(a=-2.0, b=0.5)
    scores = np.array([-1.0, 0.0, 2.0])
    probs = apply_platt(params, scores)
    expected = [platt_probability(params.a, params.b, s) for s in scores]
    assert np.allclose(probs, expected)


def test_logistic_fitter_recovers_parameters(logistic_data):
    params = platt_scale(logistic_data, LogisticPlattFitter(C=1e6))
    assert params.a == pytest.approx(-2.0, abs=0.3)
    assert params.b == pytest.approx(1.0, abs=0.3)


def test_curve_fit_fitter_recovers_parameters(logistic_data):
    params = platt_scale(logistic_data, CurveFitPlattFitter())
    assert params.a == pytest.approx(-2.0, abs=0.5)
    assert params.b == pytest.approx(1.0, abs=0.5)


def test_injected_fitter():
    class FixedFitter:
        def __init__(self):
            self.seen = None

        def fit(self, scores, labels):
            self.seen = (scores, labels)
            return PlattParams(a=-1.0, b=0.0)

    fitter = FixedFitter()
    items = [ScoreLabel(1.0, True), ScoreLabel(0.0, False)]
    assert platt_scale(items, fitter) == PlattParams(a=-1.0, b=0.0)
    assert fitter.seen[1].tolist() == [True, False]


def test_single_class_rejected():
    with pytest.raises(ValueError):
        platt_scale([ScoreLabel(1.0, True), ScoreLabel(0.0, True)])
