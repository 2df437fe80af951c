"""
Coach-side workouts router.

Same lifecycle as the client routes, seen from the coach: listing reconciles
``coachStatus`` and cancelling checks the coach side for a repeat.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import (
    get_coach_cancel_workout_use_case,
    get_coach_list_workouts_use_case,
    get_settings,
)
from api.errors import translate_errors
from api.routers.workouts import list_response
from application.use_cases import CancelWorkoutUseCase, ListWorkoutsUseCase
from backend.settings import Settings

router = APIRouter(
    prefix="/api/coach/workouts",
    tags=["Coach Workouts"],
)


@router.get("")
def list_coach_workouts(
    coach_id: Optional[str] = Query(None, alias="coachId"),
    use_case: ListWorkoutsUseCase = Depends(get_coach_list_workouts_use_case),
    settings: Settings = Depends(get_settings),
):
    """List workouts, optionally for one coach. Empty result is 204."""
    with translate_errors(settings, "fetch coach workouts"):
        result = use_case.execute(party_id=coach_id)

    return list_response(result)


@router.patch("/{workout_id}/cancel")
def cancel_coach_workout(
    workout_id: str,
    use_case: CancelWorkoutUseCase = Depends(get_coach_cancel_workout_use_case),
    settings: Settings = Depends(get_settings),
):
    with translate_errors(settings, "cancel workout as coach"):
        workout = use_case.execute(workout_id)

    return {
        "message": "Workout successfully canceled by coach",
        "workout": workout.to_response(),
    }
