"""
FastAPI Dependency Providers for the Coach Booking API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Use case providers assemble repositories, the business clock and settings

Usage in routers:
    from api.deps import get_book_workout_use_case
    from application.use_cases import BookWorkoutUseCase

    @router.post("/workouts")
    def create_workout(
        use_case: BookWorkoutUseCase = Depends(get_book_workout_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
    app.dependency_overrides[get_business_clock] = lambda: frozen_clock
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import FeedbackRepository, WorkoutRepository

# Use cases
from application.use_cases import (
    BookWorkoutUseCase,
    CancelWorkoutUseCase,
    ListWorkoutsUseCase,
    SubmitFeedbackUseCase,
)

# Concrete implementations
from infrastructure import SupabaseFeedbackRepository, SupabaseWorkoutRepository

from backend.settings import Settings, get_settings as _get_settings
from domain.models import WorkoutSide
from domain.services import BusinessClock


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseWorkoutRepository(client)


def get_feedback_repo(
    client: Client = Depends(get_supabase_client_required),
) -> FeedbackRepository:
    """Get FeedbackRepository implementation."""
    return SupabaseFeedbackRepository(client)


# =============================================================================
# Clock Provider
# =============================================================================


def get_business_clock(
    settings: Settings = Depends(get_settings),
) -> BusinessClock:
    """
    Get the business clock every time-dependent rule reads "now" from.

    Override in tests to freeze time.
    """
    return BusinessClock(utc_offset_minutes=settings.business_utc_offset_minutes)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_book_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    clock: BusinessClock = Depends(get_business_clock),
) -> BookWorkoutUseCase:
    return BookWorkoutUseCase(workout_repo=workout_repo, clock=clock)


def get_client_list_workouts_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    clock: BusinessClock = Depends(get_business_clock),
) -> ListWorkoutsUseCase:
    return ListWorkoutsUseCase(workout_repo, clock, side=WorkoutSide.CLIENT)


def get_coach_list_workouts_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    clock: BusinessClock = Depends(get_business_clock),
) -> ListWorkoutsUseCase:
    return ListWorkoutsUseCase(workout_repo, clock, side=WorkoutSide.COACH)


def get_client_cancel_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    clock: BusinessClock = Depends(get_business_clock),
    settings: Settings = Depends(get_settings),
) -> CancelWorkoutUseCase:
    return CancelWorkoutUseCase(
        workout_repo,
        clock,
        side=WorkoutSide.CLIENT,
        cutoff_hours=settings.cancellation_cutoff_hours,
    )


def get_coach_cancel_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    clock: BusinessClock = Depends(get_business_clock),
    settings: Settings = Depends(get_settings),
) -> CancelWorkoutUseCase:
    return CancelWorkoutUseCase(
        workout_repo,
        clock,
        side=WorkoutSide.COACH,
        cutoff_hours=settings.cancellation_cutoff_hours,
    )


def get_submit_feedback_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    feedback_repo: FeedbackRepository = Depends(get_feedback_repo),
    clock: BusinessClock = Depends(get_business_clock),
) -> SubmitFeedbackUseCase:
    return SubmitFeedbackUseCase(workout_repo, feedback_repo, clock)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    "get_feedback_repo",
    # Clock
    "get_business_clock",
    # Use cases
    "get_book_workout_use_case",
    "get_client_list_workouts_use_case",
    "get_coach_list_workouts_use_case",
    "get_client_cancel_workout_use_case",
    "get_coach_cancel_workout_use_case",
    "get_submit_feedback_use_case",
]
