"""
Repository Interfaces (Ports) for the Coach Booking API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRepository, FeedbackRepository

    class CancelWorkoutUseCase:
        def __init__(self, workout_repo: WorkoutRepository):
            self._workout_repo = workout_repo
"""

# Workout persistence
from application.ports.workout_repository import WorkoutRepository

# Coach feedback persistence
from application.ports.feedback_repository import FeedbackRepository

__all__ = [
    "WorkoutRepository",
    "FeedbackRepository",
]
