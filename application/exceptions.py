"""
Application-layer exceptions.

Use cases raise ``WorkoutError`` subclasses at the point a rule is violated;
routers turn them into HTTP responses with ``to_http_exception()``. Each
subclass fixes the HTTP status and a stable ``code`` clients can switch on.

The store errors at the bottom are raised by repository adapters and
translated by the use cases that call them.
"""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from domain.models import DATE_FORMAT, TIME_FORMAT


class WorkoutError(Exception):
    """Base class for every booking, lifecycle and feedback failure."""

    status_code: int = 500
    code: str = "Unexpected"
    default_message: str = "Internal Server Error: An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={
                "error": self.message,
                "code": self.code,
                "details": self.details,
            },
        )


# =============================================================================
# Request validation
# =============================================================================


class MissingFieldsError(WorkoutError):
    """One or more required fields are absent or empty."""

    status_code = 400
    code = "MissingFields"
    default_message = "Bad Request: Missing required fields"

    def __init__(self, missing_fields: List[str]):
        super().__init__(details={"missingFields": missing_fields})
        self.missing_fields = missing_fields


class InvalidIdentifierError(WorkoutError):
    """
    Identifier fields are not well-formed store ids.

    Booking bodies report this as 422; query and path identifiers as 400.
    """

    code = "InvalidIdentifierFormat"

    def __init__(self, invalid_fields: List[str], status_code: int = 422):
        label = "ID" if len(invalid_fields) == 1 else "IDs"
        prefix = "Unprocessable Entity" if status_code == 422 else "Bad Request"
        super().__init__(
            message=f"{prefix}: Invalid {label} format ({', '.join(invalid_fields)})",
            details={"invalidFields": invalid_fields},
        )
        self.status_code = status_code
        self.invalid_fields = invalid_fields


class InvalidDateFormatError(WorkoutError):
    status_code = 422
    code = "InvalidDateFormat"
    default_message = "Unprocessable Entity: Invalid date format"

    def __init__(self, value: Any = None):
        super().__init__(
            details={"invalidField": "date", "value": value, "expectedFormat": DATE_FORMAT}
        )


class InvalidTimeFormatError(WorkoutError):
    status_code = 422
    code = "InvalidTimeFormat"
    default_message = "Unprocessable Entity: Invalid time format"

    def __init__(self, value: Any = None):
        super().__init__(
            details={
                "invalidField": "time",
                "value": value,
                "expectedFormat": TIME_FORMAT,
                "example": "14:30",
            }
        )


# =============================================================================
# Scheduling rules
# =============================================================================


class PastDateTimeError(WorkoutError):
    status_code = 422
    code = "PastDateTime"
    default_message = "Unprocessable Entity: Cannot create workout for a past date and time"


class SlotConflictError(WorkoutError):
    status_code = 409
    code = "SlotConflict"
    default_message = "Conflict: This time slot is already booked with this coach"


class WorkoutNotFoundError(WorkoutError):
    status_code = 404
    code = "NotFound"
    default_message = "Not Found: Workout does not exist"


class AlreadyCancelledError(WorkoutError):
    status_code = 409
    code = "AlreadyCancelled"
    default_message = "Conflict: Workout is already cancelled"


class CancellationWindowExpiredError(WorkoutError):
    status_code = 409
    code = "CancellationWindowExpired"
    default_message = "Conflict: Cannot cancel workout within 24 hours of start time"


# =============================================================================
# Feedback rules
# =============================================================================


class WorkoutNotYetOccurredError(WorkoutError):
    status_code = 400
    code = "WorkoutNotYetOccurred"
    default_message = "Bad Request: Workout is not yet completed"


class AlreadyFinishedError(WorkoutError):
    status_code = 409
    code = "AlreadyFinished"
    default_message = "Conflict: Feedback already submitted or workout already marked as finished"


class DuplicateFeedbackError(WorkoutError):
    status_code = 409
    code = "DuplicateFeedback"
    default_message = "Conflict: Feedback already exists for this workout"


# =============================================================================
# Unexpected failures
# =============================================================================


class UnexpectedError(WorkoutError):
    """Anything not covered above. Detail text is hidden in production."""

    @classmethod
    def from_exception(cls, exc: Exception, *, include_detail: bool) -> "UnexpectedError":
        details = {"details": str(exc)} if include_detail else {}
        return cls(details=details)


# =============================================================================
# Store errors (raised by infrastructure adapters)
# =============================================================================


class SlotTakenError(Exception):
    """The store rejected an insert because the (coach, date, time) slot exists."""

    pass


class FeedbackSubmissionError(Exception):
    """Error during atomic feedback submission.

    Raised when the feedback insert and the workout status update could not
    be committed together. Neither change is kept.
    """

    pass


class FeedbackTakenError(Exception):
    """The store rejected feedback because this coach already left it for the workout."""

    pass
