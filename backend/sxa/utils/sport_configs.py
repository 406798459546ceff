"""
Sport patterns: display names and scoring weights per sport
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

# Scoring dimensions, in the order they are reported
SCORE_DIMENSIONS = ("form", "power", "consistency", "balance", "timing")

DEFAULT_SPORT = "running"


@dataclass(frozen=True)
class SportPattern:
    """Display name and dimension weights for one sport"""
    key: str
    name: str
    weights: Mapping[str, float] = field(default_factory=dict)

    def weight_total(self) -> float:
        return sum(self.weights.values())


def _pattern(key: str, name: str, weights: Dict[str, float]) -> SportPattern:
    return SportPattern(key=key, name=name, weights=MappingProxyType(dict(weights)))


# Weights per sport; each row sums to 1.0
SPORT_PATTERNS: Mapping[str, SportPattern] = MappingProxyType({
    p.key: p for p in (
        _pattern("long-jump", "Long Jump",
                 {"form": 0.30, "power": 0.20, "consistency": 0.20, "balance": 0.15, "timing": 0.15}),
        _pattern("high-jump", "High Jump",
                 {"form": 0.35, "power": 0.20, "consistency": 0.18, "balance": 0.12, "timing": 0.15}),
        _pattern("sprinting", "Sprinting",
                 {"form": 0.25, "power": 0.25, "consistency": 0.25, "balance": 0.10, "timing": 0.15}),
        _pattern("basketball", "Basketball Shooting",
                 {"form": 0.35, "power": 0.15, "consistency": 0.25, "balance": 0.15, "timing": 0.10}),
        _pattern("soccer", "Soccer Kicking",
                 {"form": 0.30, "power": 0.20, "consistency": 0.20, "balance": 0.15, "timing": 0.15}),
        _pattern("tennis", "Tennis Serve",
                 {"form": 0.32, "power": 0.18, "consistency": 0.22, "balance": 0.13, "timing": 0.15}),
        _pattern("running", "Distance Running",
                 {"form": 0.25, "power": 0.20, "consistency": 0.30, "balance": 0.15, "timing": 0.10}),
        _pattern("golf", "Golf Swing",
                 {"form": 0.35, "power": 0.20, "consistency": 0.25, "balance": 0.12, "timing": 0.08}),
        _pattern("yoga", "Yoga",
                 {"form": 0.40, "power": 0.05, "consistency": 0.20, "balance": 0.30, "timing": 0.05}),
        _pattern("jumping", "Jump Training",
                 {"form": 0.25, "power": 0.35, "consistency": 0.20, "balance": 0.12, "timing": 0.08}),
        _pattern("swimming", "Swimming",
                 {"form": 0.35, "power": 0.20, "consistency": 0.25, "balance": 0.10, "timing": 0.10}),
        _pattern("cycling", "Cycling",
                 {"form": 0.30, "power": 0.25, "consistency": 0.25, "balance": 0.12, "timing": 0.08}),
    )
})


def resolve_sport_key(sport_key: Optional[str]) -> str:
    """Return the registered key for sport_key, or the default sport"""
    if sport_key and sport_key in SPORT_PATTERNS:
        return sport_key
    return DEFAULT_SPORT


def get_sport_pattern(sport_key: Optional[str]) -> SportPattern:
    """Get the pattern for a sport; unknown sports fall back to distance running"""
    return SPORT_PATTERNS[resolve_sport_key(sport_key)]


def get_supported_sports() -> List[str]:
    """Get list of supported sports"""
    return list(SPORT_PATTERNS.keys())


def validate_sport_type(sport_key: Optional[str]) -> bool:
    """Validate if sport type is registered"""
    return bool(sport_key) and sport_key in SPORT_PATTERNS
