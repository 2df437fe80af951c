"""
Coach feedback entity.

Written once by the coach after a session has taken place. At most one
feedback record exists per (workout, coach) pair; records are never edited.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Feedback(BaseModel):
    """A coach's written note about a finished workout."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    client_id: str
    coach_id: str
    workout_id: str
    comment: str = Field(..., description="Free-text note from the coach")
    created_at: Optional[datetime] = None

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
