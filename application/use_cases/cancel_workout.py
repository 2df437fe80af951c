"""
CancelWorkout Use Case.

Either party may cancel a workout up to 24 hours before it starts.
Cancelling from one side cancels it for both. Cancelling an already
cancelled workout is reported as an error, not ignored.
"""

import logging
from datetime import timedelta

from application.exceptions import (
    AlreadyCancelledError,
    CancellationWindowExpiredError,
    InvalidIdentifierError,
    WorkoutNotFoundError,
)
from application.ports import WorkoutRepository
from domain.models import Workout, WorkoutSide, WorkoutStatus
from domain.services import BusinessClock, is_valid_record_id

logger = logging.getLogger(__name__)

DEFAULT_CUTOFF_HOURS = 24
SECONDS_PER_HOUR = timedelta(hours=1).total_seconds()


class CancelWorkoutUseCase:
    """
    Use case for cancelling a workout from the client or coach side.

    The side only decides which status is checked for a repeated
    cancellation; the result is the same either way.

    Usage:
        >>> use_case = CancelWorkoutUseCase(repo, clock, side=WorkoutSide.CLIENT)
        >>> workout = use_case.execute(workout_id)
        >>> workout.coach_status, workout.client_status
        (<WorkoutStatus.CANCELLED: 'Cancelled'>, <WorkoutStatus.CANCELLED: 'Cancelled'>)
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        clock: BusinessClock,
        side: WorkoutSide,
        cutoff_hours: float = DEFAULT_CUTOFF_HOURS,
    ) -> None:
        self._workout_repo = workout_repo
        self._clock = clock
        self._side = side
        self._cutoff_hours = cutoff_hours

    def execute(self, workout_id: str) -> Workout:
        """
        Cancel a workout if the cutoff has not passed.

        Args:
            workout_id: Workout to cancel

        Returns:
            The updated Workout with both sides Cancelled

        Raises:
            InvalidIdentifierError: Malformed id (400)
            WorkoutNotFoundError: No such workout
            AlreadyCancelledError: This side is already Cancelled
            CancellationWindowExpiredError: Fewer than cutoff hours remain
        """
        if not is_valid_record_id(workout_id):
            raise InvalidIdentifierError(["workoutId"], status_code=400)

        record = self._workout_repo.get_by_id(workout_id)
        if not record:
            raise WorkoutNotFoundError()

        workout = Workout.model_validate(record)
        if workout.status_for(self._side) == WorkoutStatus.CANCELLED:
            raise AlreadyCancelledError()

        starts_at = workout.slot.instant(self._clock.tz)
        now = self._clock.now()
        hours_remaining = (starts_at - now).total_seconds() / SECONDS_PER_HOUR
        logger.info(
            "Cancel request (%s) for workout %s: %.2f hours remaining",
            self._side.value, workout_id, hours_remaining,
        )

        if hours_remaining < self._cutoff_hours:
            raise CancellationWindowExpiredError(
                details={
                    "workoutTime": starts_at.isoformat(),
                    "currentTime": now.isoformat(),
                    "hoursRemaining": hours_remaining,
                }
            )

        cancelled = workout.cancelled()
        updated = self._workout_repo.update(
            workout_id,
            {
                "client_status": cancelled.client_status.value,
                "coach_status": cancelled.coach_status.value,
            },
        )
        if updated is None:
            raise WorkoutNotFoundError()

        logger.info(f"Workout {workout_id} cancelled by {self._side.value}")
        return Workout.model_validate(updated)
