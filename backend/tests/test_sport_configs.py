import dataclasses

import pytest

from sxa.utils.sport_configs import (
    DEFAULT_SPORT,
    SCORE_DIMENSIONS,
    SPORT_PATTERNS,
    get_sport_pattern,
    get_supported_sports,
    resolve_sport_key,
    validate_sport_type,
)


def test_registry_ships_twelve_sports():
    assert len(SPORT_PATTERNS) == 12
    assert set(get_supported_sports()) == set(SPORT_PATTERNS)


@pytest.mark.parametrize("sport_key", sorted(SPORT_PATTERNS))
def test_weights_are_non_negative_and_sum_to_one(sport_key):
    pattern = SPORT_PATTERNS[sport_key]
    assert set(pattern.weights) == set(SCORE_DIMENSIONS)
    assert all(weight >= 0 for weight in pattern.weights.values())
    assert pattern.weight_total() == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("sport_key", ["curling", "", None, "RUNNING"])
def test_unknown_sport_resolves_to_distance_running(sport_key):
    pattern = get_sport_pattern(sport_key)
    assert pattern.key == DEFAULT_SPORT
    assert pattern.name == "Distance Running"
    assert pattern.weights == SPORT_PATTERNS["running"].weights
    assert resolve_sport_key(sport_key) == "running"
    assert not validate_sport_type(sport_key)


def test_known_sport_lookup():
    pattern = get_sport_pattern("basketball")
    assert pattern.name == "Basketball Shooting"
    assert pattern.weights["form"] == 0.35
    assert validate_sport_type("basketball")


def test_patterns_are_read_only():
    pattern = SPORT_PATTERNS["yoga"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        pattern.name = "Pilates"
    with pytest.raises(TypeError):
        pattern.weights["form"] = 1.0
    with pytest.raises(TypeError):
        SPORT_PATTERNS["pilates"] = pattern
