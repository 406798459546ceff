"""
Placeholder score source used until a pose pipeline feeds real frame metrics
"""

import numpy as np
from typing import Any, Dict, Optional, Sequence, Tuple

from sxa.analyzers.base_analyzer import BaseAnalyzer
from sxa.models.analysis import FrameMetrics, Metrics, RawScores
from sxa.utils.logger import get_logger

logger = get_logger(__name__)

# (base, spread): values are drawn from [base, base + spread]; sport independent
SCORE_RANGES: Dict[str, Tuple[int, int]] = {
    "form": (60, 35),
    "power": (55, 40),
    "consistency": (58, 37),
    "balance": (62, 33),
    "timing": (57, 38),
}

METRIC_RANGES: Dict[str, Tuple[int, int]] = {
    "knee_angle": (75, 30),
    "hip_angle": (155, 40),
    "arm_angle": (70, 60),
    "balance": (60, 35),
}

SPEED_INDEX_RANGE = (1.5, 3.5)
FRAME_COUNT_RANGE = (180, 120)


class PlaceholderAnalyzer(BaseAnalyzer):
    """Random values within documented ranges; ignores any frames passed in"""

    def __init__(self, seed: Optional[int] = None):
        super().__init__("placeholder")
        self.rng = np.random.default_rng(seed)

    async def analyze(self, frames: Optional[Sequence[FrameMetrics]], sport_key: str) -> Dict[str, Any]:
        logger.debug(f"Generating placeholder scores for {sport_key}")
        return self.build_result(
            scores=self.generate_scores(),
            metrics=self.generate_metrics(),
            frame_count=self._draw(*FRAME_COUNT_RANGE),
        )

    async def validate_input(self, frames: Optional[Sequence[FrameMetrics]]) -> bool:
        return True

    def generate_scores(self) -> RawScores:
        return RawScores(**{dim: self._draw(base, spread) for dim, (base, spread) in SCORE_RANGES.items()})

    def generate_metrics(self) -> Metrics:
        values = {name: self._draw(base, spread) for name, (base, spread) in METRIC_RANGES.items()}
        base, spread = SPEED_INDEX_RANGE
        values["speed_index"] = f"{base + self.rng.random() * spread:.1f}"
        return Metrics(**values)

    def _draw(self, base: int, spread: int) -> int:
        return base + int(round(self.rng.random() * spread))
