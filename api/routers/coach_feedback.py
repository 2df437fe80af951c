"""
Coach feedback router.

A coach submits one feedback per workout once the session has taken place.
Submitting marks the workout Finished on the coach side.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from api.deps import get_settings, get_submit_feedback_use_case
from api.errors import translate_errors
from application.use_cases import SubmitFeedbackUseCase
from backend.settings import Settings

router = APIRouter(
    prefix="/api/coach-feedback",
    tags=["Coach Feedback"],
)


class SubmitFeedbackRequest(BaseModel):
    """Feedback body. Presence is checked by the use case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_id: Optional[str] = Field(None, description="Client the session was with")
    coach_id: Optional[str] = Field(None, description="Coach leaving the feedback")
    workout_id: Optional[str] = Field(None, description="Workout being closed out")
    comment: Optional[str] = Field(None, description="Free-form feedback text")


@router.post("", status_code=status.HTTP_201_CREATED)
def submit_coach_feedback(
    request: SubmitFeedbackRequest,
    use_case: SubmitFeedbackUseCase = Depends(get_submit_feedback_use_case),
    settings: Settings = Depends(get_settings),
):
    """
    Submit feedback for a workout that has already happened.

    Rejects cancelled or finished workouts, future workouts and a second
    feedback from the same coach.
    """
    with translate_errors(settings, "submit coach feedback"):
        feedback = use_case.execute(request.model_dump())

    return {
        "message": "Feedback submitted successfully",
        "feedback": feedback.to_response(),
    }
