"""
Domain models for the Coach Booking API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Workout: A booked session with one status per side
- Feedback: The coach's note that closes out a session
- WorkoutSlot: The stored DD-MM-YYYY / HH:MM schedule pair
- WorkoutStatus / WorkoutSide: The per-side lifecycle state machine

Usage:
    >>> from domain.models import Workout, WorkoutSide, WorkoutStatus

    >>> workout = Workout(coach_id=..., client_id=..., type="Yoga",
    ...                   date="01-06-2031", time="07:30")
    >>> workout = workout.with_status(WorkoutSide.COACH, WorkoutStatus.WAITING_FOR_FEEDBACK)
"""

from domain.models.feedback import Feedback
from domain.models.slot import (
    DATE_FORMAT,
    TIME_FORMAT,
    WorkoutSlot,
    comparable_date_key,
    encode_date,
    encode_time,
    is_valid_date_text,
    is_valid_time_text,
    legacy_sort_key,
)
from domain.models.status import (
    InvalidStatusTransition,
    WorkoutSide,
    WorkoutStatus,
    advance,
    can_transition,
)
from domain.models.workout import Workout

__all__ = [
    # Entities
    "Workout",
    "Feedback",
    # Schedule
    "WorkoutSlot",
    "DATE_FORMAT",
    "TIME_FORMAT",
    "comparable_date_key",
    "encode_date",
    "encode_time",
    "is_valid_date_text",
    "is_valid_time_text",
    "legacy_sort_key",
    # Status
    "WorkoutStatus",
    "WorkoutSide",
    "InvalidStatusTransition",
    "advance",
    "can_transition",
]
