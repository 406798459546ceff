import threading

import pytest

from sxa.errors import PersistenceError, ValidationError
from sxa.models.analysis import AnalyzeRequest
from sxa.services.analysis_service import AnalysisService
from sxa.services.session_store import UnavailableSessionStore


class FailingSessionStore:
    available = True

    def __init__(self):
        self.attempts = 0

    def create(self, result, athlete_id=None, file_path=None, session_id=None):
        self.attempts += 1
        raise PersistenceError("disk I/O error")


@pytest.mark.asyncio
async def test_placeholder_analysis_is_persisted(session_store):
    service = AnalysisService(session_store, placeholder_seed=5)
    response = await service.analyze(AnalyzeRequest(sport="high-jump", athlete_id="ath-9"))

    assert response.sport == "High Jump"
    assert response.sport_key == "high-jump"
    assert 0 <= response.overall <= 100
    assert len(response.insights) <= 5
    assert 180 <= response.frame_count <= 300

    stored = session_store.get(response.session_id)
    assert stored.athlete_id == "ath-9"
    assert stored.overall == response.overall
    assert stored.insights == response.insights


@pytest.mark.asyncio
async def test_frames_use_biomechanics_scores(session_store, steady_frames):
    service = AnalysisService(session_store)
    response = await service.analyze(AnalyzeRequest(sport="running", frames=steady_frames))

    assert response.frame_count == 3
    assert response.scores.model_dump() == {
        "form": 100, "power": 50, "consistency": 100, "balance": 90, "timing": 100
    }
    # 100*.25 + 50*.20 + 100*.30 + 90*.15 + 100*.10
    assert response.overall == 89
    assert response.insights == [
        "Excellent Distance Running form! Maintain this technique under fatigue.",
        "Highly consistent movement patterns — great for competition repeatability.",
    ]


@pytest.mark.asyncio
async def test_unknown_sport_is_remapped(session_store):
    response = await AnalysisService(session_store).analyze(AnalyzeRequest(sport="quidditch"))
    assert response.sport_key == "running"
    assert response.sport == "Distance Running"


@pytest.mark.asyncio
async def test_persistence_failure_does_not_fail_the_request():
    store = FailingSessionStore()
    response = await AnalysisService(store, placeholder_seed=1).analyze(AnalyzeRequest(sport="golf"))

    assert store.attempts == 1
    assert response.session_id
    assert response.sport == "Golf Swing"


@pytest.mark.asyncio
async def test_missing_persistence_does_not_fail_the_request():
    response = await AnalysisService(UnavailableSessionStore()).analyze(AnalyzeRequest())
    assert response.sport_key == "running"


@pytest.mark.asyncio
async def test_metrics_mode_requires_frames(session_store):
    service = AnalysisService(session_store, scoring_mode="metrics")
    with pytest.raises(ValidationError):
        await service.analyze(AnalyzeRequest(sport="golf"))


@pytest.mark.asyncio
async def test_placeholder_mode_ignores_frames(session_store, steady_frames):
    service = AnalysisService(session_store, scoring_mode="placeholder", placeholder_seed=2)
    response = await service.analyze(AnalyzeRequest(frames=steady_frames))
    assert response.frame_count >= 180


def test_unknown_scoring_mode(session_store):
    with pytest.raises(ValueError):
        AnalysisService(session_store, scoring_mode="magic")


class TimingOutSessionStore:
    available = True

    def create(self, result, athlete_id=None, file_path=None, session_id=None):
        raise TimeoutError("storage backend did not answer")


@pytest.mark.asyncio
async def test_unexpected_store_error_does_not_fail_the_request():
    response = await AnalysisService(TimingOutSessionStore(), placeholder_seed=4).analyze(AnalyzeRequest(sport="golf"))
    assert response.session_id
    assert response.sport == "Golf Swing"


@pytest.mark.asyncio
async def test_session_is_written_off_the_event_loop():
    class RecordingSessionStore:
        available = True
        thread = None

        def create(self, result, athlete_id=None, file_path=None, session_id=None):
            RecordingSessionStore.thread = threading.current_thread()

    await AnalysisService(RecordingSessionStore(), placeholder_seed=4).analyze(AnalyzeRequest())
    assert RecordingSessionStore.thread is not None
    assert RecordingSessionStore.thread is not threading.current_thread()
