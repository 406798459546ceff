import pytest

from sxa.analyzers.placeholder_analyzer import SCORE_RANGES, PlaceholderAnalyzer
from sxa.models.analysis import RawScores
from sxa.services.scoring_engine import ScoringEngine, compute_overall
from sxa.utils.sport_configs import SPORT_PATTERNS


def uniform(value):
    return {dim: value for dim in ("form", "power", "consistency", "balance", "timing")}


@pytest.mark.parametrize("sport_key", sorted(SPORT_PATTERNS))
def test_uniform_scores_give_the_same_overall(sport_key, sample_scores):
    card = ScoringEngine().score(sport_key, sample_scores)
    assert card.overall == 90
    assert card.scores == sample_scores


def test_weighted_sum_uses_sport_weights():
    scores = RawScores(form=100, power=0, consistency=0, balance=0, timing=0)
    engine = ScoringEngine()
    assert engine.score("yoga", scores).overall == 40
    assert engine.score("running", scores).overall == 25


def test_unknown_sport_uses_default_weights():
    scores = RawScores(form=100, power=0, consistency=0, balance=0, timing=0)
    assert ScoringEngine().score("underwater-hockey", scores).overall == 25


def test_overall_is_clamped_when_weights_overshoot():
    assert compute_overall(uniform(100), uniform(0.5)) == 100


def test_overall_is_clamped_at_zero():
    weights = {"form": -1.0, "power": 0.0, "consistency": 0.0, "balance": 0.0, "timing": 0.0}
    assert compute_overall(uniform(100), weights) == 0


def test_missing_weight_defaults_to_even_share():
    assert compute_overall(uniform(70), {}) == 70
    assert compute_overall(uniform(70), {"form": 0.2, "power": 0.2}) == 70


def test_rounds_half_up():
    weights = {"form": 0.5, "power": 0.0, "consistency": 0.0, "balance": 0.0, "timing": 0.0}
    scores = {"form": 1, "power": 0, "consistency": 0, "balance": 0, "timing": 0}
    assert compute_overall(scores, weights) == 1


@pytest.mark.parametrize("seed", range(25))
def test_placeholder_scores_stay_in_range(seed):
    engine = ScoringEngine(placeholder=PlaceholderAnalyzer(seed=seed))
    card = engine.score("sprinting")

    assert isinstance(card.overall, int)
    assert 0 <= card.overall <= 100
    for dim, (base, spread) in SCORE_RANGES.items():
        assert base <= getattr(card.scores, dim) <= base + spread


def test_extreme_scores_always_in_range():
    engine = ScoringEngine()
    for sport_key in SPORT_PATTERNS:
        for value in (0, 1, 99, 100):
            overall = engine.score(sport_key, RawScores(**uniform(value))).overall
            assert 0 <= overall <= 100
