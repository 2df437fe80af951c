"""
ListWorkouts Use Case.

Returns the workouts visible from one side (client or coach) and, on the
way, reconciles their lifecycle: any workout whose scheduled time has passed
and whose status on that side is neither Finished nor Cancelled is set to
Waiting for feedback. Only the side being listed is touched.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic.alias_generators import to_camel

from application.exceptions import InvalidIdentifierError
from application.ports import WorkoutRepository
from domain.models import (
    Workout,
    WorkoutSide,
    WorkoutStatus,
    comparable_date_key,
    encode_date,
    encode_time,
)
from domain.services import BusinessClock, is_valid_record_id

logger = logging.getLogger(__name__)


@dataclass
class ListWorkoutsResult:
    """Result of listing workouts."""
    workouts: List[Workout] = field(default_factory=list)
    updated_count: int = 0

    @property
    def count(self) -> int:
        return len(self.workouts)


class ListWorkoutsUseCase:
    """
    Use case for listing and reconciling one side's workouts.

    Usage:
        >>> use_case = ListWorkoutsUseCase(repo, clock, side=WorkoutSide.COACH)
        >>> result = use_case.execute(party_id=coach_id)
        >>> result.updated_count
        2
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        clock: BusinessClock,
        side: WorkoutSide,
    ) -> None:
        self._workout_repo = workout_repo
        self._clock = clock
        self._side = side

    def execute(self, party_id: Optional[str] = None) -> ListWorkoutsResult:
        """
        List workouts, reconciling any that have become due for feedback.

        Args:
            party_id: Optional client id (client side) or coach id (coach
                side). When empty, all workouts are listed.

        Returns:
            ListWorkoutsResult with the workouts in store order and the number
            of workouts moved to Waiting for feedback

        Raises:
            InvalidIdentifierError: If ``party_id`` is given but malformed
        """
        filters: Dict[str, str] = {}
        if party_id:
            if not is_valid_record_id(party_id):
                raise InvalidIdentifierError([to_camel(self._side.id_field)], status_code=400)
            filters[self._side.id_field] = party_id

        records = self._workout_repo.list_workouts(**filters)
        if not records:
            return ListWorkoutsResult()

        due_ids = self._find_due(records)
        if not due_ids:
            return ListWorkoutsResult(workouts=[Workout.model_validate(r) for r in records])

        logger.info(
            "Moving %d past workouts to '%s' (%s side)",
            len(due_ids),
            WorkoutStatus.WAITING_FOR_FEEDBACK.value,
            self._side.value,
        )
        self._workout_repo.update_many(
            due_ids,
            {self._side.status_field: WorkoutStatus.WAITING_FOR_FEEDBACK.value},
        )

        refreshed = self._workout_repo.list_workouts(**filters)
        return ListWorkoutsResult(
            workouts=[Workout.model_validate(r) for r in refreshed],
            updated_count=len(due_ids),
        )

    def _find_due(self, records: List[Dict[str, Any]]) -> List[str]:
        """Ids of workouts whose slot has passed and whose side is still open."""
        now = self._clock.now()
        today_key = comparable_date_key(encode_date(now.date()))
        current_time = encode_time(now.time())

        due: List[str] = []
        for record in records:
            status = WorkoutStatus(record.get(self._side.status_field) or WorkoutStatus.BOOKED)
            if status.is_closed:
                continue

            workout_key = comparable_date_key(record["date"])
            if workout_key < today_key:
                due.append(record["id"])
            elif workout_key == today_key and record["time"] < current_time:
                due.append(record["id"])
        return due
