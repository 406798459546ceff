"""
Analysis orchestration: score source -> scoring -> insights -> best-effort persistence
"""

import uuid
from typing import Optional, Sequence

from fastapi.concurrency import run_in_threadpool

from sxa.analyzers.base_analyzer import BaseAnalyzer
from sxa.analyzers.biomechanics_analyzer import BiomechanicsAnalyzer
from sxa.analyzers.placeholder_analyzer import PlaceholderAnalyzer
from sxa.errors import DependencyUnavailableError, PersistenceError, ValidationError
from sxa.models.analysis import AnalysisResponse, AnalysisResult, AnalyzeRequest, FrameMetrics
from sxa.services.insight_generator import generate_insights
from sxa.services.scoring_engine import ScoringEngine
from sxa.utils.logger import PerformanceLogger, get_logger
from sxa.utils.sport_configs import get_sport_pattern

logger = get_logger(__name__)

SCORING_MODES = ("auto", "placeholder", "metrics")


class AnalysisService:
    """
    Runs one analysis request end to end.

    The score source is picked by scoring_mode:
      auto        - frame metrics when supplied, placeholder values otherwise
      placeholder - always placeholder values
      metrics     - frame metrics required
    """

    def __init__(self, session_store, scoring_mode: str = "auto", placeholder_seed: Optional[int] = None):
        if scoring_mode not in SCORING_MODES:
            raise ValueError(f"Unknown scoring mode '{scoring_mode}', expected one of {', '.join(SCORING_MODES)}")

        self.session_store = session_store
        self.scoring_mode = scoring_mode
        self.placeholder = PlaceholderAnalyzer(seed=placeholder_seed)
        self.biomechanics = BiomechanicsAnalyzer()
        self.engine = ScoringEngine(placeholder=self.placeholder)

    def select_analyzer(self, frames: Optional[Sequence[FrameMetrics]]) -> BaseAnalyzer:
        if self.scoring_mode == "placeholder":
            return self.placeholder
        if frames:
            return self.biomechanics
        if self.scoring_mode == "metrics":
            raise ValidationError("frames are required when SCORING_MODE is 'metrics'.")
        return self.placeholder

    async def analyze(self, request: AnalyzeRequest) -> AnalysisResponse:
        pattern = get_sport_pattern(request.sport)
        if request.sport and request.sport != pattern.key:
            logger.info(f"Unknown sport '{request.sport}', using {pattern.key}")

        analyzer = self.select_analyzer(request.frames)
        perf = PerformanceLogger("analysis")
        perf.start(f"{analyzer.analyzer_type} analysis for {pattern.key}")

        output = await analyzer.analyze(request.frames, pattern.key)
        card = self.engine.score(pattern.key, output["scores"])
        insights = generate_insights(card.scores, output["metrics"], pattern.name)

        result = AnalysisResult(
            sport=pattern.name,
            sport_key=pattern.key,
            overall=card.overall,
            scores=card.scores,
            metrics=output["metrics"],
            insights=insights,
            frame_count=output["frame_count"],
        )
        perf.end(f"overall={result.overall}, insights={len(insights)}")

        session_id = str(uuid.uuid4())
        await run_in_threadpool(self.persist, result, session_id, request.athlete_id, request.file_path)

        return AnalysisResponse(session_id=session_id, **result.model_dump())

    def persist(self, result: AnalysisResult, session_id: str, athlete_id: Optional[str], file_path: Optional[str]) -> bool:
        """Single best-effort write; failures are logged and never reach the caller"""
        try:
            self.session_store.create(result, athlete_id=athlete_id, file_path=file_path, session_id=session_id)
            return True
        except DependencyUnavailableError:
            logger.debug(f"Persistence not configured, session {session_id} not stored")
        except PersistenceError as e:
            logger.error(f"DB insert failed for session {session_id}: {e.message}")
        except Exception:
            logger.exception(f"Unexpected error storing session {session_id}")
        return False
