"""
Application Use Cases for the Coach Booking API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses
- Rule violations are raised as application.exceptions.WorkoutError

Usage:
    from application.use_cases import (
        BookWorkoutUseCase,
        ListWorkoutsUseCase,
        CancelWorkoutUseCase,
        SubmitFeedbackUseCase,
    )

    clock = BusinessClock(settings.business_utc_offset_minutes)

    # Book a slot
    workout = BookWorkoutUseCase(workout_repo, clock).execute(request)

    # Coach-facing listing with reconciliation
    result = ListWorkoutsUseCase(workout_repo, clock, WorkoutSide.COACH).execute(coach_id)

    # Client-initiated cancellation
    workout = CancelWorkoutUseCase(workout_repo, clock, WorkoutSide.CLIENT).execute(workout_id)

    # Coach feedback
    feedback = SubmitFeedbackUseCase(workout_repo, feedback_repo, clock).execute(request)
"""

from application.use_cases.book_workout import BookWorkoutUseCase
from application.use_cases.cancel_workout import CancelWorkoutUseCase
from application.use_cases.list_workouts import ListWorkoutsResult, ListWorkoutsUseCase
from application.use_cases.submit_feedback import SubmitFeedbackUseCase

__all__ = [
    # BookWorkout
    "BookWorkoutUseCase",
    # ListWorkouts
    "ListWorkoutsUseCase",
    "ListWorkoutsResult",
    # CancelWorkout
    "CancelWorkoutUseCase",
    # SubmitFeedback
    "SubmitFeedbackUseCase",
]
