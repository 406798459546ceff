"""
Pytest configuration and fixtures for testing
"""

import pytest
from fastapi.testclient import TestClient

from sxa.config.base import Settings
from sxa.main import create_app
from sxa.models.analysis import AnalysisResult, FrameMetrics, Metrics, RawScores
from sxa.services.database import Database
from sxa.services.profile_store import ProfileStore
from sxa.services.session_store import SessionStore


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database and upload directory"""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'db' / 'sxa.sqlite'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        PLACEHOLDER_SEED=7,
        MAX_FILE_SIZE_MB=1,
    )


@pytest.fixture
def client(test_settings):
    """Create a test client for the FastAPI app, running its lifespan"""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'store.sqlite'}")
    yield db
    db.dispose()


@pytest.fixture
def session_store(database):
    return SessionStore(database)


@pytest.fixture
def profile_store(database):
    return ProfileStore(database)


@pytest.fixture
def sample_scores():
    return RawScores(form=90, power=90, consistency=90, balance=90, timing=90)


@pytest.fixture
def sample_metrics():
    return Metrics(knee_angle=110, hip_angle=170, arm_angle=95, speed_index="3.2", balance=82)


@pytest.fixture
def sample_result(sample_scores, sample_metrics):
    return AnalysisResult(
        sport="Long Jump",
        sport_key="long-jump",
        overall=90,
        scores=sample_scores,
        metrics=sample_metrics,
        insights=["Excellent Long Jump form! Maintain this technique under fatigue."],
        frame_count=240,
    )


@pytest.fixture
def steady_frames():
    """Three identical frames inside every neutral joint window"""
    return [
        FrameMetrics(knee_angle=120, hip_angle=170, arm_angle=100, velocity=2.5, com_offset=0.1)
        for _ in range(3)
    ]
