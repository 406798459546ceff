"""
Analysis data models
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RawScores(CamelModel):
    form: int = Field(ge=0, le=100)
    power: int = Field(ge=0, le=100)
    consistency: int = Field(ge=0, le=100)
    balance: int = Field(ge=0, le=100)
    timing: int = Field(ge=0, le=100)


class Metrics(CamelModel):
    """Auxiliary measurements consumed by the insight rules"""
    knee_angle: int
    hip_angle: int
    arm_angle: int
    speed_index: str
    balance: int = Field(ge=0, le=100)


# Physical bounds for frame measurements; values outside them are rejected as malformed
MAX_ABS_ANGLE = 720.0
MAX_ABS_VELOCITY = 1000.0
MAX_ABS_COM_OFFSET = 100.0


class FrameMetrics(CamelModel):
    """Per-frame joint angles (degrees) and motion measurements from the pose pipeline"""
    knee_angle: float = Field(ge=-MAX_ABS_ANGLE, le=MAX_ABS_ANGLE)
    hip_angle: float = Field(ge=-MAX_ABS_ANGLE, le=MAX_ABS_ANGLE)
    arm_angle: float = Field(ge=-MAX_ABS_ANGLE, le=MAX_ABS_ANGLE)
    velocity: float = Field(0.0, ge=-MAX_ABS_VELOCITY, le=MAX_ABS_VELOCITY)
    com_offset: float = Field(0.0, ge=-MAX_ABS_COM_OFFSET, le=MAX_ABS_COM_OFFSET)  # centre of mass offset from base of support, normalized


class AnalyzeRequest(CamelModel):
    sport: Optional[str] = None
    athlete_id: Optional[str] = None
    file_path: Optional[str] = None
    frames: Optional[List[FrameMetrics]] = None


class ScoreCard(CamelModel):
    overall: int = Field(ge=0, le=100)
    scores: RawScores


class AnalysisResult(CamelModel):
    sport: str
    sport_key: str
    overall: int = Field(ge=0, le=100)
    scores: RawScores
    metrics: Metrics
    insights: List[str] = Field(default_factory=list, max_length=5)
    frame_count: int


class AnalysisResponse(AnalysisResult):
    session_id: str


class UploadResponse(CamelModel):
    message: str
    session_id: str
    filename: str
    size: int
    sport: str
    file_url: str
    file_path: str
    next_step: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str
    db: str
    uploads: str
    scoring_mode: str
