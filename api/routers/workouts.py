"""
Client-side workouts router.

This router provides:
- Booking a workout with a coach
- Listing a client's workouts (with lifecycle reconciliation)
- Cancelling a workout from the client side
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from api.deps import (
    get_book_workout_use_case,
    get_client_cancel_workout_use_case,
    get_client_list_workouts_use_case,
    get_settings,
)
from api.errors import translate_errors
from application.use_cases import (
    BookWorkoutUseCase,
    CancelWorkoutUseCase,
    ListWorkoutsResult,
    ListWorkoutsUseCase,
)
from backend.settings import Settings
from domain.models import WorkoutStatus

router = APIRouter(
    prefix="/api/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request Models
# =============================================================================


class CreateWorkoutRequest(BaseModel):
    """
    Booking request body.

    Required fields are optional here so that a missing field is reported as
    MissingFields (400) rather than a schema error. Unknown fields are kept
    and stored with the workout.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    coach_id: Optional[str] = Field(None, description="Coach identifier")
    client_id: Optional[str] = Field(None, description="Client identifier")
    type: Optional[str] = Field(None, description="Session category")
    date: Optional[str] = Field(None, description="DD-MM-YYYY")
    time: Optional[str] = Field(None, description="24-hour HH:MM")
    coach_status: Optional[WorkoutStatus] = Field(None, description="Defaults to Booked")
    client_status: Optional[WorkoutStatus] = Field(None, description="Defaults to Booked")


def list_response(result: ListWorkoutsResult) -> Union[Response, dict]:
    """Shape a listing result; an empty listing is 204 with no body."""
    if not result.workouts:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    body = {
        "message": "Workouts retrieved successfully",
        "count": result.count,
        "workouts": [w.to_response() for w in result.workouts],
    }
    if result.updated_count:
        body["updatedCount"] = result.updated_count
    return body


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", status_code=status.HTTP_201_CREATED)
def create_workout(
    request: CreateWorkoutRequest,
    use_case: BookWorkoutUseCase = Depends(get_book_workout_use_case),
    settings: Settings = Depends(get_settings),
):
    """
    Book a workout slot with a coach.

    Both statuses start as Booked. A coach can hold only one workout per
    date and time.
    """
    with translate_errors(settings, "create workout"):
        workout = use_case.execute(request.model_dump())

    return {
        "message": "Workout successfully booked",
        "workout": workout.to_response(),
    }


@router.get("")
def list_client_workouts(
    client_id: Optional[str] = Query(None, alias="clientId"),
    use_case: ListWorkoutsUseCase = Depends(get_client_list_workouts_use_case),
    settings: Settings = Depends(get_settings),
):
    """
    List workouts, optionally for one client.

    Past workouts still Booked on the client side move to Waiting for
    feedback before the list is returned.
    """
    with translate_errors(settings, "fetch workouts"):
        result = use_case.execute(party_id=client_id)

    return list_response(result)


@router.patch("/{workout_id}/cancel")
def cancel_client_workout(
    workout_id: str,
    use_case: CancelWorkoutUseCase = Depends(get_client_cancel_workout_use_case),
    settings: Settings = Depends(get_settings),
):
    """Cancel a workout for both parties, at least 24 hours ahead."""
    with translate_errors(settings, "cancel workout"):
        workout = use_case.execute(workout_id)

    return {
        "message": "Workout successfully canceled",
        "workout": workout.to_response(),
    }
