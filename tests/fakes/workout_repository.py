"""
Fake Workout Repository for testing.

This module provides an in-memory implementation of WorkoutRepository
for fast, isolated testing without database dependencies.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import uuid
import copy

from application.exceptions import SlotTakenError
from domain.models import legacy_sort_key


class FakeWorkoutRepository:
    """
    In-memory fake implementation of WorkoutRepository for testing.

    Stores workouts in a dict keyed by workout ID. Listings come back in the
    same (date text, time text) order the real table produces, and inserts
    enforce the (coach_id, date, time) unique index.

    Usage:
        repo = FakeWorkoutRepository()
        repo.seed([{"id": "...", "coach_id": "...", "date": "01-01-2030", ...}])
        workouts = repo.list_workouts(coach_id="...")
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._workouts: Dict[str, Dict[str, Any]] = {}
        self._hide_slots = False
        self.update_many_calls: List[List[str]] = []
        self.list_calls = 0

    def reset(self) -> None:
        """Clear all stored workouts and recorded calls."""
        self._workouts.clear()
        self._hide_slots = False
        self.update_many_calls.clear()
        self.list_calls = 0

    def seed(self, workouts: List[Dict[str, Any]]) -> None:
        """
        Seed the repository with test data.

        Args:
            workouts: List of workout records (snake_case). Missing ids and
                statuses are filled in.
        """
        for workout in workouts:
            workout_id = workout.get("id") or str(uuid.uuid4())
            self._workouts[workout_id] = {
                "coach_status": "Booked",
                "client_status": "Booked",
                **workout,
                "id": workout_id,
            }

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored workouts (test helper)."""
        return list(self._workouts.values())

    def simulate_concurrent_booking(self) -> None:
        """
        Make slot lookups miss while inserts still enforce uniqueness.

        Reproduces two requests passing the conflict check at the same time;
        the second insert then hits the unique index.
        """
        self._hide_slots = True

    # =========================================================================
    # WorkoutRepository Protocol Methods
    # =========================================================================

    def get_by_id(self, workout_id: str) -> Optional[Dict[str, Any]]:
        workout = self._workouts.get(workout_id)
        return copy.deepcopy(workout) if workout else None

    def find_by_slot(
        self,
        coach_id: str,
        date: str,
        time: str,
    ) -> Optional[Dict[str, Any]]:
        if self._hide_slots:
            return None
        for workout in self._workouts.values():
            if (
                workout.get("coach_id") == coach_id
                and workout.get("date") == date
                and workout.get("time") == time
            ):
                return copy.deepcopy(workout)
        return None

    def list_workouts(
        self,
        *,
        coach_id: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        self.list_calls += 1
        results = []
        for workout in self._workouts.values():
            if coach_id and workout.get("coach_id") != coach_id:
                continue
            if client_id and workout.get("client_id") != client_id:
                continue
            results.append(copy.deepcopy(workout))

        results.sort(key=legacy_sort_key)
        return results

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        for existing in self._workouts.values():
            if (
                existing.get("coach_id") == data.get("coach_id")
                and existing.get("date") == data.get("date")
                and existing.get("time") == data.get("time")
            ):
                raise SlotTakenError("duplicate key value violates unique constraint")

        now = datetime.now(timezone.utc).isoformat()
        workout_id = data.get("id") or str(uuid.uuid4())
        workout = {
            **copy.deepcopy(data),
            "id": workout_id,
            "created_at": now,
            "updated_at": now,
        }
        self._workouts[workout_id] = workout
        return copy.deepcopy(workout)

    def update(self, workout_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        workout = self._workouts.get(workout_id)
        if workout is None:
            return None
        workout.update(data)
        workout["updated_at"] = datetime.now(timezone.utc).isoformat()
        return copy.deepcopy(workout)

    def update_many(self, workout_ids: List[str], data: Dict[str, Any]) -> int:
        self.update_many_calls.append(list(workout_ids))
        updated = 0
        for workout_id in workout_ids:
            if self.update(workout_id, data) is not None:
                updated += 1
        return updated
