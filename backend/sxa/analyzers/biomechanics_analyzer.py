"""
Biomechanics analyzer: scores derived from per-frame pose metrics
"""

import numpy as np
from typing import Any, Dict, Optional, Sequence

from sxa.analyzers.base_analyzer import BaseAnalyzer
from sxa.errors import ValidationError
from sxa.models.analysis import (
    MAX_ABS_ANGLE,
    MAX_ABS_COM_OFFSET,
    MAX_ABS_VELOCITY,
    FrameMetrics,
    Metrics,
    RawScores,
)
from sxa.utils.logger import get_logger

logger = get_logger(__name__)

# Neutral joint angle windows in degrees; deviation outside a window costs form points
ANGLE_WINDOWS = {
    "knee_angle": (80.0, 160.0),
    "hip_angle": (150.0, 195.0),
    "arm_angle": (70.0, 130.0),
}

# Peak velocity that maps to a power score of 100
REFERENCE_PEAK_VELOCITY = 5.0

# Points lost per degree of standard deviation across frames
CONSISTENCY_PENALTY = 2.0


def _to_score(value: float) -> int:
    return int(np.clip(np.floor(value + 0.5), 0, 100))


class BiomechanicsAnalyzer(BaseAnalyzer):
    """Analyzer for biomechanical movement patterns"""

    def __init__(self):
        super().__init__("biomechanics")
        self.joints = list(ANGLE_WINDOWS.keys())

    async def analyze(self, frames: Optional[Sequence[FrameMetrics]], sport_key: str) -> Dict[str, Any]:
        """
        Derive dimension scores and summary metrics from frame measurements.

        The same frames always yield the same result.
        """
        if not await self.validate_input(frames):
            raise ValidationError(
                "Biomechanics analysis requires at least one frame with finite values within physical bounds."
            )

        angles = {
            joint: np.array([getattr(frame, joint) for frame in frames], dtype=float)
            for joint in self.joints
        }
        velocity = np.array([frame.velocity for frame in frames], dtype=float)
        com_offset = np.array([frame.com_offset for frame in frames], dtype=float)

        balance = self._calculate_balance(com_offset)
        scores = RawScores(
            form=self._calculate_form(angles),
            power=self._calculate_power(velocity),
            consistency=self._calculate_consistency(angles),
            balance=balance,
            timing=self._calculate_timing(velocity),
        )
        metrics = Metrics(
            knee_angle=int(np.floor(angles["knee_angle"].mean() + 0.5)),
            hip_angle=int(np.floor(angles["hip_angle"].mean() + 0.5)),
            arm_angle=int(np.floor(angles["arm_angle"].mean() + 0.5)),
            speed_index=f"{np.abs(velocity).mean():.1f}",
            balance=balance,
        )

        logger.debug(f"Biomechanics scores for {sport_key} over {len(frames)} frames: {scores.model_dump()}")
        return self.build_result(scores=scores, metrics=metrics, frame_count=len(frames))

    async def validate_input(self, frames: Optional[Sequence[FrameMetrics]]) -> bool:
        """Validate frame data for biomechanical analysis"""
        if not frames:
            return False

        values = np.array(
            [[f.knee_angle, f.hip_angle, f.arm_angle, f.velocity, f.com_offset] for f in frames],
            dtype=float,
        )
        if not np.isfinite(values).all():
            return False

        limits = np.array([MAX_ABS_ANGLE, MAX_ABS_ANGLE, MAX_ABS_ANGLE, MAX_ABS_VELOCITY, MAX_ABS_COM_OFFSET])
        return bool((np.abs(values) <= limits).all())

    def _calculate_form(self, angles: Dict[str, np.ndarray]) -> int:
        """Mean degrees outside the neutral windows, per frame"""
        deviation = np.zeros_like(next(iter(angles.values())))
        for joint, series in angles.items():
            low, high = ANGLE_WINDOWS[joint]
            deviation += np.clip(low - series, 0, None) + np.clip(series - high, 0, None)
        return _to_score(100.0 - deviation.mean())

    def _calculate_consistency(self, angles: Dict[str, np.ndarray]) -> int:
        spread = np.mean([series.std() for series in angles.values()])
        return _to_score(100.0 - CONSISTENCY_PENALTY * spread)

    def _calculate_power(self, velocity: np.ndarray) -> int:
        peak = np.abs(velocity).max()
        return _to_score(peak / REFERENCE_PEAK_VELOCITY * 100.0)

    def _calculate_balance(self, com_offset: np.ndarray) -> int:
        return _to_score(100.0 - np.abs(com_offset).mean() * 100.0)

    def _calculate_timing(self, velocity: np.ndarray) -> int:
        """Smoothness of the velocity profile; abrupt frame-to-frame changes lose points"""
        if len(velocity) < 2:
            return 100
        jerk = np.abs(np.diff(velocity)).mean()
        scale = max(np.abs(velocity).mean(), 1e-6)
        return _to_score(100.0 - 100.0 * jerk / scale)
