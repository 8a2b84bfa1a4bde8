import numpy as np
import pytest

from rankmetrics.data.scorable import ScoreLabel


# 14 molecules, actives at ranks 1, 2, 4 and 9
REFERENCE_LABELS = [
    True, True, False, True, False, False, False,
    False, True, False, False, False, False, False,
]


@pytest.fixture
def reference_scores():
    return [
        ScoreLabel(score=float(14 - i), label=label, name=f"mol{i}")
        for i, label in enumerate(REFERENCE_LABELS)
    ]


@pytest.fixture
def shuffled_reference(reference_scores):
    rng = np.random.default_rng(42)
    order = rng.permutation(len(reference_scores))
    return [reference_scores[i] for i in order]


@pytest.fixture
def tied_dataset():
    rng = np.random.default_rng(7)
    scores = np.round(rng.normal(size=300), 1)
    labels = rng.random(300) < 1.0 / (1.0 + np.exp(-2.0 * scores))
    return [ScoreLabel(float(s), bool(l), f"c{i}") for i, (s, l) in enumerate(zip(scores, labels))]
