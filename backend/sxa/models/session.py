"""
Persisted analysis session model
"""

from datetime import datetime
from typing import List, Optional

from sxa.models.analysis import CamelModel, Metrics, RawScores


class SessionRecord(CamelModel):
    id: str
    athlete_id: Optional[str] = None
    sport: str
    overall: int
    scores: RawScores
    metrics: Metrics
    insights: List[str]
    file_path: Optional[str] = None
    frame_count: int
    created_at: datetime
