"""
Domain services.

Stateless helpers the use cases share:
- BusinessClock: server instant -> business timezone conversion
- is_valid_record_id: store identifier well-formedness
"""

from domain.services.business_clock import BusinessClock, DEFAULT_UTC_OFFSET_MINUTES
from domain.services.identifiers import is_valid_record_id

__all__ = [
    "BusinessClock",
    "DEFAULT_UTC_OFFSET_MINUTES",
    "is_valid_record_id",
]
