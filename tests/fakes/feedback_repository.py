"""
Fake Feedback Repository for testing.

In-memory implementation of FeedbackRepository. It shares a
FakeWorkoutRepository so that submitting feedback finishes the workout the
same way the stored procedure does.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import uuid
import copy

from application.exceptions import FeedbackSubmissionError, FeedbackTakenError
from tests.fakes.workout_repository import FakeWorkoutRepository


class FakeFeedbackRepository:
    """
    In-memory fake implementation of FeedbackRepository for testing.

    Usage:
        workouts = FakeWorkoutRepository()
        repo = FakeFeedbackRepository(workouts)
        repo.simulate_atomic_failure()  # next submission fails, nothing kept
        repo.simulate_concurrent_submission()  # next lookup misses stored feedback
    """

    def __init__(self, workout_repo: Optional[FakeWorkoutRepository] = None):
        self._feedback: Dict[str, Dict[str, Any]] = {}
        self._workout_repo = workout_repo or FakeWorkoutRepository()
        self._fail_on_next_atomic = False
        self._hide_next_lookup = False

    def reset(self) -> None:
        """Clear all stored feedback."""
        self._feedback.clear()
        self._fail_on_next_atomic = False
        self._hide_next_lookup = False

    def seed(self, feedback: List[Dict[str, Any]]) -> None:
        for item in feedback:
            feedback_id = item.get("id") or str(uuid.uuid4())
            self._feedback[feedback_id] = {**item, "id": feedback_id}

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored feedback (test helper)."""
        return list(self._feedback.values())

    def simulate_atomic_failure(self) -> None:
        """
        Configure the fake to fail on the next submission.

        Neither the feedback nor the workout status change is kept.
        """
        self._fail_on_next_atomic = True

    def simulate_concurrent_submission(self) -> None:
        """
        Make the next find_for_workout miss, as if another submission
        landed between the check and the insert.
        """
        self._hide_next_lookup = True

    # =========================================================================
    # FeedbackRepository Protocol Methods
    # =========================================================================

    def find_for_workout(
        self,
        workout_id: str,
        coach_id: str,
    ) -> Optional[Dict[str, Any]]:
        if self._hide_next_lookup:
            self._hide_next_lookup = False
            return None
        for item in self._feedback.values():
            if item.get("workout_id") == workout_id and item.get("coach_id") == coach_id:
                return copy.deepcopy(item)
        return None

    def create_and_finish_workout(
        self,
        feedback_data: Dict[str, Any],
        workout_id: str,
    ) -> Dict[str, Any]:
        if self._fail_on_next_atomic:
            self._fail_on_next_atomic = False
            raise FeedbackSubmissionError("Simulated atomic submission failure")

        if self._workout_repo.get_by_id(workout_id) is None:
            raise FeedbackSubmissionError(f"Workout {workout_id} not found")

        for item in self._feedback.values():
            if (
                item.get("workout_id") == workout_id
                and item.get("coach_id") == feedback_data.get("coach_id")
            ):
                raise FeedbackTakenError(f"Feedback for workout {workout_id} already exists")

        feedback_id = str(uuid.uuid4())
        feedback = {
            **copy.deepcopy(feedback_data),
            "id": feedback_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        self._feedback[feedback_id] = feedback
        self._workout_repo.update(workout_id, {"coach_status": "Finished"})
        return copy.deepcopy(feedback)
