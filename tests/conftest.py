"""
Shared pytest fixtures.

Time is frozen at 2030-06-15 04:30 UTC, which is 15-06-2030 10:00 on the
business clock (UTC+05:30).
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_business_clock,
    get_feedback_repo,
    get_settings,
    get_workout_repo,
)
from backend.main import create_app
from backend.settings import Settings
from domain.services import BusinessClock
from tests.fakes import FakeFeedbackRepository, FakeWorkoutRepository

NOW_UTC = datetime(2030, 6, 15, 4, 30, tzinfo=timezone.utc)
TODAY = "15-06-2030"
NOW_TIME = "10:00"


@pytest.fixture
def clock() -> BusinessClock:
    return BusinessClock(330, now_fn=lambda: NOW_UTC)


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    return FakeWorkoutRepository()


@pytest.fixture
def feedback_repo(workout_repo) -> FakeFeedbackRepository:
    return FakeFeedbackRepository(workout_repo)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def app(test_settings, workout_repo, feedback_repo, clock):
    """App wired to in-memory fakes and the frozen clock."""
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_workout_repo] = lambda: workout_repo
    app.dependency_overrides[get_feedback_repo] = lambda: feedback_repo
    app.dependency_overrides[get_business_clock] = lambda: clock
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
