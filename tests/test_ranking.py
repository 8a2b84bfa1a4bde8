import pytest

from rankmetrics.data.scorable import Scorable, ScoreLabel, project
from rankmetrics.eval.ranking import (
    actives_rate,
    nb_actives,
    rank_order_by_score,
    rank_order_by_score_in_place,
    round_half_up,
)


def test_rank_order_descending(shuffled_reference):
    ranked = rank_order_by_score(shuffled_reference)
    scores = [sl.get_score() for sl in ranked]
    assert scores == sorted(scores, reverse=True)
    assert scores[0] == 14.0


def test_rank_order_idempotent(tied_dataset):
    once = rank_order_by_score(tied_dataset)
    twice = rank_order_by_score(once)
    assert once == twice


def test_rank_order_stable_on_ties():
    items = [
        ScoreLabel(1.0, False, "a"),
        ScoreLabel(2.0, True, "b"),
        ScoreLabel(1.0, True, "c"),
        ScoreLabel(2.0, False, "d"),
    ]
    ranked = rank_order_by_score(items)
    assert [sl.name for sl in ranked] == ["b", "d", "a", "c"]


def test_rank_order_copy_leaves_input(shuffled_reference):
    before = list(shuffled_reference)
    rank_order_by_score(shuffled_reference)
    assert shuffled_reference == before


def test_rank_order_in_place(shuffled_reference):
    ranked = rank_order_by_score_in_place(shuffled_reference)
    assert ranked is shuffled_reference
    assert shuffled_reference[0].get_score() == 14.0


def test_nan_score_rejected():
    with pytest.raises(ValueError):
        rank_order_by_score([ScoreLabel(float("nan"), True), ScoreLabel(1.0, False)])


def test_actives_rate(reference_scores):
    assert nb_actives(reference_scores) == 4
    n, rate = actives_rate(reference_scores)
    assert n == 14
    assert rate == pytest.approx(4 / 14)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.35 * 14) == 5
    assert round_half_up(0.49) == 0


def test_project_adapter():
    rows = [{"id": "x", "s": 0.2, "active": 0}, {"id": "y", "s": 0.9, "active": 1}]
    items = project(rows, lambda r: r["s"], lambda r: r["active"] == 1)
    assert all(isinstance(it, Scorable) for it in items)
    ranked = rank_order_by_score(items)
    assert ranked[0].record["id"] == "y"
    assert ranked[0].get_label() is True
