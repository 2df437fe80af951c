"""
Business clock: one place that decides what "now" means for scheduling.

Stored slots are wall-clock strings in the business timezone, a fixed UTC
offset (UTC+05:30 by default). Every component compares them against
``BusinessClock.now()``, which converts the server's current instant with
``to_business_time``. Nothing else in the code base shifts time by hand.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

DEFAULT_UTC_OFFSET_MINUTES = 5 * 60 + 30


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BusinessClock:
    """
    Converts server instants into the business timezone.

    Args:
        utc_offset_minutes: Fixed offset of the business timezone from UTC
        now_fn: Source of the current server instant (injected in tests)

    Examples:
        >>> clock = BusinessClock(330, now_fn=lambda: datetime(2030, 1, 1, tzinfo=timezone.utc))
        >>> clock.now().isoformat()
        '2030-01-01T05:30:00+05:30'
    """

    def __init__(
        self,
        utc_offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES,
        now_fn: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._tz = timezone(timedelta(minutes=utc_offset_minutes))
        self._now_fn = now_fn or _utc_now

    @property
    def tz(self) -> timezone:
        """The business timezone."""
        return self._tz

    def to_business_time(self, server_instant: datetime) -> datetime:
        """
        Express a server instant in the business timezone.

        Naive datetimes are taken to be UTC.
        """
        if server_instant.tzinfo is None:
            server_instant = server_instant.replace(tzinfo=timezone.utc)
        return server_instant.astimezone(self._tz)

    def now(self) -> datetime:
        return self.to_business_time(self._now_fn())
