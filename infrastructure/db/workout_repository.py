"""
Supabase Workout Repository Implementation.

This module implements the WorkoutRepository protocol using Supabase as the
backend. Workouts live in the ``workouts`` table:

    id             uuid primary key
    coach_id       uuid
    client_id      uuid
    type           text
    date           text   -- DD-MM-YYYY
    time           text   -- HH:MM
    coach_status   text
    client_status  text
    details        jsonb  -- booking fields with no column of their own
    created_at     timestamptz
    updated_at     timestamptz

    unique (coach_id, date, time)

The unique index backs up the booking conflict check against concurrent
inserts; violations surface as ``SlotTakenError``.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import SlotTakenError

logger = logging.getLogger(__name__)

TABLE = "workouts"

COLUMNS = frozenset({
    "id",
    "coach_id",
    "client_id",
    "type",
    "date",
    "time",
    "coach_status",
    "client_status",
    "created_at",
    "updated_at",
})

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


# ============================================================================
# Row conversion
# ============================================================================

def to_row(record: Dict[str, Any]) -> Dict[str, Any]:
    """Split a workout record into table columns plus a ``details`` blob."""
    row = {key: value for key, value in record.items() if key in COLUMNS}
    extras = {key: value for key, value in record.items() if key not in COLUMNS}
    if extras:
        row["details"] = extras
    return row


def from_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Inverse of ``to_row``: fold ``details`` back into the record."""
    record = {key: value for key, value in row.items() if key != "details"}
    for key, value in (row.get("details") or {}).items():
        record.setdefault(key, value)
    return record


def is_unique_violation(error: Exception) -> bool:
    """True if a PostgREST error reports a unique constraint violation."""
    return getattr(error, "code", None) == UNIQUE_VIOLATION


class SupabaseWorkoutRepository:
    """
    Supabase-backed workout repository implementation.

    Errors from the client propagate to the caller, except unique
    violations on insert which become ``SlotTakenError``.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def get_by_id(self, workout_id: str) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table(TABLE)
            .select("*")
            .eq("id", workout_id)
            .limit(1)
            .execute()
        )
        return from_row(response.data[0]) if response.data else None

    def find_by_slot(
        self,
        coach_id: str,
        date: str,
        time: str,
    ) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table(TABLE)
            .select("*")
            .eq("coach_id", coach_id)
            .eq("date", date)
            .eq("time", time)
            .limit(1)
            .execute()
        )
        return from_row(response.data[0]) if response.data else None

    def list_workouts(
        self,
        *,
        coach_id: Optional[str] = None,
        client_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List workouts ordered by the date text, then the time text.

        Args:
            coach_id: Optional coach filter
            client_id: Optional client filter

        Returns:
            List of workout records
        """
        query = self._client.table(TABLE).select("*")
        if coach_id:
            query = query.eq("coach_id", coach_id)
        if client_id:
            query = query.eq("client_id", client_id)
        response = query.order("date").order("time").execute()
        return [from_row(row) for row in response.data or []]

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a workout.

        Raises:
            SlotTakenError: If (coach_id, date, time) is already taken
        """
        try:
            response = self._client.table(TABLE).insert(to_row(data)).execute()
        except Exception as e:
            if is_unique_violation(e):
                raise SlotTakenError(
                    f"Slot {data.get('date')} {data.get('time')} already taken for coach {data.get('coach_id')}"
                ) from e
            raise
        return from_row(response.data[0])

    def update(self, workout_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        update_data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        response = (
            self._client.table(TABLE)
            .update(update_data)
            .eq("id", workout_id)
            .execute()
        )
        return from_row(response.data[0]) if response.data else None

    def update_many(self, workout_ids: List[str], data: Dict[str, Any]) -> int:
        if not workout_ids:
            return 0
        update_data = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        response = (
            self._client.table(TABLE)
            .update(update_data)
            .in_("id", workout_ids)
            .execute()
        )
        updated = len(response.data or [])
        logger.info(f"Bulk status update touched {updated} of {len(workout_ids)} workouts")
        return updated
