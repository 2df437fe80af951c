"""
Workout status state machine.

A workout carries two independent status values, one per side (coach and
client). Each side moves forward on its own:

    Booked -> Waiting for feedback -> Finished

and any side that is not yet cancelled may move to Cancelled, which is
terminal. Cancellation is the only joint transition (see
``Workout.cancelled``); every other transition touches one side.
"""

from enum import Enum


class WorkoutStatus(str, Enum):
    """
    Lifecycle status of one side of a workout.

    - BOOKED: Scheduled, session has not happened yet
    - WAITING_FOR_FEEDBACK: Scheduled time has passed, awaiting feedback
    - FINISHED: Feedback submitted, session closed
    - CANCELLED: Cancelled by either party (terminal)
    """

    BOOKED = "Booked"
    WAITING_FOR_FEEDBACK = "Waiting for feedback"
    FINISHED = "Finished"
    CANCELLED = "Cancelled"

    @property
    def is_closed(self) -> bool:
        """True once the side no longer takes part in reconciliation."""
        return self in (WorkoutStatus.FINISHED, WorkoutStatus.CANCELLED)


class WorkoutSide(str, Enum):
    """Which party's view of a workout an operation acts on."""

    CLIENT = "client"
    COACH = "coach"

    @property
    def status_field(self) -> str:
        """Store column holding this side's status."""
        return f"{self.value}_status"

    @property
    def id_field(self) -> str:
        """Store column holding this side's party identifier."""
        return f"{self.value}_id"


# Position along the forward path. Cancelled sits outside it.
_FORWARD_ORDER = {
    WorkoutStatus.BOOKED: 0,
    WorkoutStatus.WAITING_FOR_FEEDBACK: 1,
    WorkoutStatus.FINISHED: 2,
}


class InvalidStatusTransition(ValueError):
    """Raised when a status change would move backwards or out of Cancelled."""

    def __init__(self, current: WorkoutStatus, target: WorkoutStatus):
        super().__init__(f"Cannot move workout status from '{current.value}' to '{target.value}'")
        self.current = current
        self.target = target


def can_transition(current: WorkoutStatus, target: WorkoutStatus) -> bool:
    """
    Check whether one side may move from ``current`` to ``target``.

    Args:
        current: Status the side holds now
        target: Requested status

    Returns:
        True if the edge is allowed
    """
    if current == WorkoutStatus.CANCELLED:
        return False
    if target == WorkoutStatus.CANCELLED:
        return True
    return _FORWARD_ORDER[target] > _FORWARD_ORDER[current]


def advance(current: WorkoutStatus, target: WorkoutStatus) -> WorkoutStatus:
    """
    Apply a single-sided transition.

    Raises:
        InvalidStatusTransition: If the edge is not allowed
    """
    if not can_transition(current, target):
        raise InvalidStatusTransition(current, target)
    return target
