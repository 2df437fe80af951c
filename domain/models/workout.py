"""
Workout aggregate - one scheduled coaching session between a coach and a client.

Records cross the API boundary with camelCase keys (``coachId``,
``clientStatus``) and live in the store with snake_case columns. The model
accepts either spelling and keeps unknown keys so that extra booking fields
round-trip untouched.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.slot import WorkoutSlot
from domain.models.status import WorkoutSide, WorkoutStatus, advance


class Workout(BaseModel):
    """
    Aggregate root for a booked session.

    The two status fields are independent. Single-sided changes go through
    ``with_status``; cancellation goes through ``cancelled`` and always moves
    both sides together.

    Examples:
        >>> workout = Workout(
        ...     coach_id="0b5f6f0e-1c1e-4d7e-9a55-2f3f2b8f8c11",
        ...     client_id="6a4a0f7c-7f0e-4b55-8f0a-2b9d7a1f0e22",
        ...     type="Strength",
        ...     date="31-12-2099",
        ...     time="10:00",
        ... )
        >>> workout.coach_status
        <WorkoutStatus.BOOKED: 'Booked'>
        >>> workout.to_response()["clientStatus"]
        'Booked'
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: Optional[str] = Field(default=None, description="Store identifier. None before insert.")
    coach_id: str = Field(..., description="Coach record identifier")
    client_id: str = Field(..., description="Client record identifier")
    type: str = Field(..., description="Session category, free-form")
    date: str = Field(..., description="Scheduled day as DD-MM-YYYY")
    time: str = Field(..., description="Scheduled time as 24-hour HH:MM")
    coach_status: WorkoutStatus = Field(default=WorkoutStatus.BOOKED)
    client_status: WorkoutStatus = Field(default=WorkoutStatus.BOOKED)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # -------------------------------------------------------------------------
    # Schedule
    # -------------------------------------------------------------------------

    @property
    def slot(self) -> WorkoutSlot:
        """Decoded schedule. Raises ValueError for a corrupt stored value."""
        return WorkoutSlot.parse(self.date, self.time)

    # -------------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------------

    def status_for(self, side: WorkoutSide) -> WorkoutStatus:
        if side == WorkoutSide.COACH:
            return self.coach_status
        return self.client_status

    def with_status(self, side: WorkoutSide, status: WorkoutStatus) -> "Workout":
        """
        Return a copy with one side moved to ``status``.

        Raises:
            InvalidStatusTransition: If the move is not a forward edge
        """
        new_status = advance(self.status_for(side), status)
        return self.model_copy(update={side.status_field: new_status})

    def cancelled(self) -> "Workout":
        """Return a copy with both sides cancelled."""
        update = {}
        for side in WorkoutSide:
            current = self.status_for(side)
            if current != WorkoutStatus.CANCELLED:
                update[side.status_field] = advance(current, WorkoutStatus.CANCELLED)
        return self.model_copy(update=update)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_record(self) -> Dict[str, Any]:
        """Store representation (snake_case, extras kept, no unset id)."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_response(self) -> Dict[str, Any]:
        """API representation (camelCase)."""
        return self.model_dump(mode="json", by_alias=True)
