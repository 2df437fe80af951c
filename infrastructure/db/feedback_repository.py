"""
Supabase Feedback Repository Implementation.

Feedback rows live in the ``coach_feedback`` table, unique on
(workout_id, coach_id). Submission goes through the ``submit_coach_feedback``
stored procedure, which inserts the feedback and sets the workout's
coach_status to 'Finished' in one transaction.
"""
import json
import logging
from typing import Any, Dict, Optional

from supabase import Client

from application.exceptions import FeedbackSubmissionError, FeedbackTakenError
from infrastructure.db.workout_repository import is_unique_violation

logger = logging.getLogger(__name__)

TABLE = "coach_feedback"
SUBMIT_RPC = "submit_coach_feedback"


class SupabaseFeedbackRepository:
    """Supabase-backed coach feedback repository implementation."""

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def find_for_workout(
        self,
        workout_id: str,
        coach_id: str,
    ) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table(TABLE)
            .select("*")
            .eq("workout_id", workout_id)
            .eq("coach_id", coach_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def create_and_finish_workout(
        self,
        feedback_data: Dict[str, Any],
        workout_id: str,
    ) -> Dict[str, Any]:
        """
        Insert feedback and finish the workout's coach side atomically.

        Uses a PostgreSQL stored procedure so both writes share one
        transaction. If either fails, neither is kept.

        Args:
            feedback_data: Feedback record without an id
            workout_id: Workout to mark Finished on the coach side

        Returns:
            Created feedback record

        Raises:
            FeedbackTakenError: If feedback from this coach already exists
            FeedbackSubmissionError: If the RPC call fails for any other reason
        """
        try:
            response = self._client.rpc(
                SUBMIT_RPC,
                {
                    "p_feedback": json.dumps(feedback_data),
                    "p_workout_id": workout_id,
                },
            ).execute()

            if not response.data:
                raise FeedbackSubmissionError("RPC returned no data")

            data = response.data
            return data[0] if isinstance(data, list) else data
        except Exception as e:
            if isinstance(e, FeedbackSubmissionError):
                raise
            if is_unique_violation(e):
                logger.info(f"Feedback for workout {workout_id} already exists")
                raise FeedbackTakenError(str(e)) from e
            logger.error(f"Feedback submission for workout {workout_id} failed: {e}")
            raise FeedbackSubmissionError(f"Atomic feedback submission failed: {e}") from e
