"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, make_workout_record

    repo = FakeWorkoutRepository()
    repo.seed([make_workout_record(date="01-07-2030", time="09:00")])
"""
from typing import Optional, Dict, Any
import uuid

from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.feedback_repository import FakeFeedbackRepository


# =============================================================================
# Factory Functions
# =============================================================================


def new_id() -> str:
    """A well-formed record id."""
    return str(uuid.uuid4())


def make_workout_record(
    *,
    coach_id: Optional[str] = None,
    client_id: Optional[str] = None,
    date: str = "01-07-2030",
    time: str = "09:00",
    type: str = "Strength",
    coach_status: str = "Booked",
    client_status: str = "Booked",
    **extra: Any,
) -> Dict[str, Any]:
    """
    Build a stored workout record (snake_case) with sensible defaults.

    Args:
        coach_id: Coach id, generated if omitted
        client_id: Client id, generated if omitted
        date: DD-MM-YYYY
        time: HH:MM
        **extra: Any additional columns (id, details, ...)
    """
    return {
        "id": extra.pop("id", None) or new_id(),
        "coach_id": coach_id or new_id(),
        "client_id": client_id or new_id(),
        "type": type,
        "date": date,
        "time": time,
        "coach_status": coach_status,
        "client_status": client_status,
        **extra,
    }


def create_repos() -> "tuple[FakeWorkoutRepository, FakeFeedbackRepository]":
    """Create a workout repo and a feedback repo that share storage."""
    workouts = FakeWorkoutRepository()
    return workouts, FakeFeedbackRepository(workouts)


__all__ = [
    "FakeWorkoutRepository",
    "FakeFeedbackRepository",
    "new_id",
    "make_workout_record",
    "create_repos",
]
