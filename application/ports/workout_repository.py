"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from typing import Protocol, Optional, List, Dict, Any


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Records are plain dicts with snake_case keys. Lookups signal "not found"
    by returning None, never by raising.
    """

    def get_by_id(self, workout_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a single workout by ID.

        Args:
            workout_id: Workout identifier

        Returns:
            Workout record or None if not found
        """
        ...

    def find_by_slot(
        self,
        coach_id: str,
        date: str,
        time: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Find any workout occupying a coach's slot, whatever its status.

        Args:
            coach_id: Coach identifier
            date: Slot date, DD-MM-YYYY
            time: Slot time, HH:MM

        Returns:
            The first matching workout, or None
        """
        ...

    def list_workouts(
        self,
        *,
        coach_id: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List workouts, optionally filtered by coach and/or client.

        Results are ordered by the date string, then the time string
        (see ``domain.models.legacy_sort_key``).

        Args:
            coach_id: Only workouts for this coach
            client_id: Only workouts for this client

        Returns:
            List of workout records (possibly empty)
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new workout.

        Args:
            data: Workout record without an id

        Returns:
            Created record with generated id

        Raises:
            SlotTakenError: If the store's unique (coach_id, date, time)
                constraint rejects the insert
        """
        ...

    def update(self, workout_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update fields of one workout.

        Args:
            workout_id: Workout identifier
            data: Fields to overwrite

        Returns:
            Updated record, or None if the workout no longer exists
        """
        ...

    def update_many(self, workout_ids: List[str], data: Dict[str, Any]) -> int:
        """
        Apply the same field update to every workout in ``workout_ids``.

        Args:
            workout_ids: Workout identifiers
            data: Fields to overwrite

        Returns:
            Number of records updated
        """
        ...
