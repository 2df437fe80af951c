"""
Translation of application errors into HTTP responses.

Routers wrap each use case call in ``translate_errors``. Known
``WorkoutError`` subclasses become their own HTTP status; anything else is
logged with a traceback and reported as a 500 whose underlying message is
only exposed outside production.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from application.exceptions import UnexpectedError, WorkoutError
from backend.settings import Settings

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors(settings: Settings, operation: str) -> Iterator[None]:
    try:
        yield
    except HTTPException:
        raise
    except WorkoutError as e:
        raise e.to_http_exception() from e
    except Exception as e:
        logger.exception(f"Unexpected error while trying to {operation}")
        raise UnexpectedError.from_exception(
            e, include_detail=not settings.is_production
        ).to_http_exception() from e
