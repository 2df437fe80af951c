"""
SubmitFeedback Use Case.

A coach closes out a session by leaving feedback. The session must have
actually happened, must not be cancelled, and may only receive one feedback
per coach. Storing the feedback and marking the coach side Finished happen
in a single store operation.
"""

import logging
from typing import Any, Dict

from pydantic.alias_generators import to_camel

from application.exceptions import (
    AlreadyCancelledError,
    AlreadyFinishedError,
    DuplicateFeedbackError,
    FeedbackTakenError,
    InvalidIdentifierError,
    MissingFieldsError,
    WorkoutNotFoundError,
    WorkoutNotYetOccurredError,
)
from application.ports import FeedbackRepository, WorkoutRepository
from domain.models import Feedback, Workout, WorkoutStatus
from domain.services import BusinessClock, is_valid_record_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("client_id", "coach_id", "workout_id", "comment")
ID_FIELDS = ("client_id", "coach_id")


class SubmitFeedbackUseCase:
    """
    Use case for recording coach feedback on a past workout.

    Only the coach status moves to Finished; the client status is left as is.
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        feedback_repo: FeedbackRepository,
        clock: BusinessClock,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for workout lookups
            feedback_repo: Repository for feedback persistence
            clock: Source of business "now"
        """
        self._workout_repo = workout_repo
        self._feedback_repo = feedback_repo
        self._clock = clock

    def execute(self, request: Dict[str, Any]) -> Feedback:
        """
        Validate and store feedback, finishing the workout for the coach.

        Args:
            request: Dict with client_id, coach_id, workout_id and comment

        Returns:
            The created Feedback

        Raises:
            MissingFieldsError, InvalidIdentifierError, WorkoutNotFoundError,
            AlreadyFinishedError, AlreadyCancelledError,
            WorkoutNotYetOccurredError, DuplicateFeedbackError
        """
        missing = [to_camel(name) for name in REQUIRED_FIELDS if not request.get(name)]
        if missing:
            logger.warning("Feedback rejected, missing fields: %s", missing)
            raise MissingFieldsError(missing)

        invalid_ids = [to_camel(name) for name in ID_FIELDS if not is_valid_record_id(request[name])]
        if invalid_ids:
            logger.warning("Feedback rejected, invalid ids: %s", invalid_ids)
            raise InvalidIdentifierError(invalid_ids)

        workout_id = request["workout_id"]
        coach_id = request["coach_id"]

        record = self._workout_repo.get_by_id(workout_id) if is_valid_record_id(workout_id) else None
        if not record:
            raise WorkoutNotFoundError()

        workout = Workout.model_validate(record)
        if workout.coach_status == WorkoutStatus.FINISHED:
            raise AlreadyFinishedError()
        if workout.coach_status == WorkoutStatus.CANCELLED:
            raise AlreadyCancelledError()

        starts_at = workout.slot.instant(self._clock.tz)
        now = self._clock.now()
        if not starts_at < now:
            logger.info("Feedback for workout %s refused, starts %s", workout_id, starts_at.isoformat())
            raise WorkoutNotYetOccurredError(
                details={
                    "workoutTime": starts_at.isoformat(),
                    "currentTime": now.isoformat(),
                }
            )

        if self._feedback_repo.find_for_workout(workout_id, coach_id):
            raise DuplicateFeedbackError()

        feedback = Feedback(
            client_id=request["client_id"],
            coach_id=coach_id,
            workout_id=workout_id,
            comment=request["comment"],
        )
        try:
            saved = self._feedback_repo.create_and_finish_workout(feedback.to_record(), workout_id)
        except FeedbackTakenError:
            logger.info("Feedback for workout %s stored by a concurrent submission", workout_id)
            raise DuplicateFeedbackError()

        logger.info(f"Feedback {saved.get('id')} recorded, workout {workout_id} finished")
        return Feedback.model_validate(saved)
