"""
Record identifier checks.

Workout, feedback, coach and client records are keyed by the store's native
identifier, a canonical UUID string. Only well-formedness is checked here;
whether the referenced record exists is not this layer's concern.
"""

import uuid
from typing import Any


def is_valid_record_id(value: Any) -> bool:
    """
    Check that ``value`` is a well-formed record identifier.

    Accepts the canonical hyphenated form in either case. Other spellings
    that ``uuid.UUID`` tolerates (braces, ``urn:uuid:``, bare hex) are
    rejected so the stored text matches what the store itself emits.
    """
    if not isinstance(value, str):
        return False
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return False
    return str(parsed) == value.lower()
