"""
Feedback Repository Interface (Port).

This module defines the abstract interface for coach feedback persistence.
"""
from typing import Protocol, Optional, Dict, Any


class FeedbackRepository(Protocol):
    """
    Abstract interface for coach feedback persistence.

    Feedback is written once and never edited or deleted.
    """

    def find_for_workout(
        self,
        workout_id: str,
        coach_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Find the feedback a coach left for a workout.

        Args:
            workout_id: Workout identifier
            coach_id: Coach identifier

        Returns:
            Feedback record or None
        """
        ...

    def create_and_finish_workout(
        self,
        feedback_data: Dict[str, Any],
        workout_id: str,
    ) -> Dict[str, Any]:
        """
        Insert feedback and mark the workout's coach side Finished atomically.

        Either both writes commit or neither does.

        Args:
            feedback_data: Feedback record without an id
            workout_id: Workout to close out

        Returns:
            Created feedback record with generated id

        Raises:
            FeedbackSubmissionError: If the combined write fails
        """
        ...
