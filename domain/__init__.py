"""
Domain layer for the Coach Booking API.

This package contains pure domain models and services that are independent
of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Feedback,
    Workout,
    WorkoutSide,
    WorkoutSlot,
    WorkoutStatus,
)

__all__ = [
    "Feedback",
    "Workout",
    "WorkoutSide",
    "WorkoutSlot",
    "WorkoutStatus",
]
