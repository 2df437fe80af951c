"""
BookWorkout Use Case.

Validates a booking request and stores the new workout. Validation runs as a
pipeline that stops at the first failing step:

1. Required fields present
2. Coach and client identifiers well-formed
3. Date matches DD-MM-YYYY
4. Time matches HH:MM (24-hour)
5. Slot is not in the past (business time)
6. Coach has nothing booked in the same slot

Steps 1-5 never touch the store.
"""

import logging
from typing import Any, Dict

from pydantic.alias_generators import to_camel

from application.exceptions import (
    InvalidDateFormatError,
    InvalidIdentifierError,
    InvalidTimeFormatError,
    MissingFieldsError,
    PastDateTimeError,
    SlotConflictError,
    SlotTakenError,
)
from application.ports import WorkoutRepository
from domain.models import Workout, WorkoutSlot, is_valid_date_text, is_valid_time_text
from domain.services import BusinessClock, is_valid_record_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("coach_id", "client_id", "type", "date", "time")
ID_FIELDS = ("coach_id", "client_id")

# Assigned by the store, never by the caller
SERVER_FIELDS = frozenset({"id", "created_at", "updated_at", "createdAt", "updatedAt"})


class BookWorkoutUseCase:
    """
    Use case for booking a workout slot.

    Usage:
        >>> use_case = BookWorkoutUseCase(workout_repo=repo, clock=BusinessClock())
        >>> workout = use_case.execute({
        ...     "coach_id": coach_id,
        ...     "client_id": client_id,
        ...     "type": "Strength",
        ...     "date": "31-12-2099",
        ...     "time": "10:00",
        ... })
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        clock: BusinessClock,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for workout persistence
            clock: Source of business "now"
        """
        self._workout_repo = workout_repo
        self._clock = clock

    def execute(self, request: Dict[str, Any]) -> Workout:
        """
        Validate and create a booking.

        Args:
            request: Booking fields keyed by snake_case name. Keys other than
                the workout fields are stored as-is.

        Returns:
            The created Workout

        Raises:
            MissingFieldsError, InvalidIdentifierError, InvalidDateFormatError,
            InvalidTimeFormatError, PastDateTimeError, SlotConflictError
        """
        data = {
            key: value
            for key, value in request.items()
            if value is not None and key not in SERVER_FIELDS
        }

        missing = [to_camel(name) for name in REQUIRED_FIELDS if not data.get(name)]
        if missing:
            logger.warning("Booking rejected, missing fields: %s", missing)
            raise MissingFieldsError(missing)

        invalid_ids = [to_camel(name) for name in ID_FIELDS if not is_valid_record_id(data[name])]
        if invalid_ids:
            logger.warning("Booking rejected, invalid ids: %s", invalid_ids)
            raise InvalidIdentifierError(invalid_ids)

        if not is_valid_date_text(data["date"]):
            logger.warning("Booking rejected, bad date format: %r", data["date"])
            raise InvalidDateFormatError(data["date"])

        if not is_valid_time_text(data["time"]):
            logger.warning("Booking rejected, bad time format: %r", data["time"])
            raise InvalidTimeFormatError(data["time"])

        self._ensure_not_in_past(data["date"], data["time"])

        coach_id, date_text, time_text = data["coach_id"], data["date"], data["time"]
        if self._workout_repo.find_by_slot(coach_id, date_text, time_text):
            logger.info("Slot %s %s already booked for coach %s", date_text, time_text, coach_id)
            raise SlotConflictError()

        workout = Workout.model_validate(data)
        try:
            saved = self._workout_repo.create(workout.to_record())
        except SlotTakenError:
            logger.info(
                "Slot %s %s for coach %s taken by a concurrent booking",
                date_text, time_text, coach_id,
            )
            raise SlotConflictError()

        logger.info(f"Workout booked: {saved.get('id')} ({date_text} {time_text})")
        return Workout.model_validate(saved)

    def _ensure_not_in_past(self, date_text: str, time_text: str) -> None:
        """Reject slots strictly earlier than business now."""
        try:
            slot = WorkoutSlot.parse(date_text, time_text)
        except ValueError:
            # Year 0000 and the like; day and month overflow roll over instead
            logger.warning("Booking rejected, date out of range: %s", date_text)
            raise InvalidDateFormatError(date_text)

        slot_at = slot.instant(self._clock.tz)
        now = self._clock.now()
        if slot_at < now:
            logger.warning("Booking rejected, %s is before %s", slot_at.isoformat(), now.isoformat())
            raise PastDateTimeError(
                details={
                    "workoutDateTime": slot_at.isoformat(),
                    "currentDateTime": now.isoformat(),
                }
            )
