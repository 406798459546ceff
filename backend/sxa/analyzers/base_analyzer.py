"""
Base analyzer abstract class
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from sxa.models.analysis import FrameMetrics, Metrics, RawScores


class BaseAnalyzer(ABC):
    """
    Produces raw dimension scores and auxiliary metrics for one movement.

    Every implementation returns the same shape, so callers never need to
    know whether values come from pose data or from the placeholder source.
    """

    def __init__(self, analyzer_type: str):
        self.analyzer_type = analyzer_type

    @abstractmethod
    async def analyze(self, frames: Optional[Sequence[FrameMetrics]], sport_key: str) -> Dict[str, Any]:
        """
        Analyze per-frame metrics and return results

        Args:
            frames: Per-frame joint angle / velocity measurements (may be None)
            sport_key: Registered sport identifier

        Returns:
            Dict with "scores" (RawScores), "metrics" (Metrics) and "frame_count" (int)
        """
        pass

    @abstractmethod
    async def validate_input(self, frames: Optional[Sequence[FrameMetrics]]) -> bool:
        """
        Validate input data before analysis

        Returns:
            bool: True if valid, False otherwise
        """
        pass

    @staticmethod
    def build_result(scores: RawScores, metrics: Metrics, frame_count: int) -> Dict[str, Any]:
        return {"scores": scores, "metrics": metrics, "frame_count": frame_count}
