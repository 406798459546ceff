"""
Weighted scoring of the five movement dimensions
"""

import math
from typing import Mapping, Optional, Union

from sxa.analyzers.placeholder_analyzer import PlaceholderAnalyzer
from sxa.models.analysis import RawScores, ScoreCard
from sxa.utils.logger import get_logger
from sxa.utils.sport_configs import SCORE_DIMENSIONS, get_sport_pattern

logger = get_logger(__name__)

# Weight applied to a dimension the sport pattern does not list
DEFAULT_DIMENSION_WEIGHT = 0.2


def compute_overall(scores: Union[RawScores, Mapping[str, float]], weights: Mapping[str, float]) -> int:
    """
    Weighted sum of the dimension scores, rounded half up and clamped to [0, 100]

    The clamp keeps the result in range even when a weight vector does not
    sum to exactly 1.0.
    """
    values = scores.model_dump() if isinstance(scores, RawScores) else scores
    total = sum(values[dim] * weights.get(dim, DEFAULT_DIMENSION_WEIGHT) for dim in SCORE_DIMENSIONS)
    return int(min(100, max(0, math.floor(total + 0.5))))


class ScoringEngine:
    """Resolves sport weights and computes the overall score"""

    def __init__(self, placeholder: Optional[PlaceholderAnalyzer] = None):
        self.placeholder = placeholder or PlaceholderAnalyzer()

    def score(self, sport_key: Optional[str], raw_scores: Optional[RawScores] = None) -> ScoreCard:
        """
        Score a movement for a sport

        Args:
            sport_key: Sport identifier; unknown values use the default sport
            raw_scores: Dimension scores, or None to draw placeholder values

        Returns:
            ScoreCard with the overall score and the raw scores used
        """
        pattern = get_sport_pattern(sport_key)
        if raw_scores is None:
            logger.debug(f"No raw scores supplied for {pattern.key}, using placeholder values")
            raw_scores = self.placeholder.generate_scores()

        overall = compute_overall(raw_scores, pattern.weights)
        return ScoreCard(overall=overall, scores=raw_scores)
