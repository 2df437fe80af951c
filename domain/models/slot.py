"""
Booking slot value object and the stored date/time string format.

Workouts persist their schedule as two zero-padded strings: a ``DD-MM-YYYY``
date and a 24-hour ``HH:MM`` time. The strings are the on-disk contract and
must round-trip byte for byte. Only their shape is checked: a day or month
beyond its range rolls over into the next month or year (``31-02-2030`` is
03-03-2030). ``WorkoutSlot`` resolves them into a wall-clock datetime so
comparisons are chronological. The legacy helpers at the bottom reproduce
the orderings the store itself produces.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Any, Mapping, Tuple

DATE_FORMAT = "DD-MM-YYYY"
TIME_FORMAT = "24-hour (HH:MM)"

DATE_PATTERN = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")
TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


def is_valid_date_text(value: Any) -> bool:
    """Format-level check only; ``31-02-2025`` passes."""
    return isinstance(value, str) and bool(DATE_PATTERN.fullmatch(value))


def is_valid_time_text(value: Any) -> bool:
    """Check a 24-hour ``HH:MM`` string (00:00 to 23:59)."""
    return isinstance(value, str) and bool(TIME_PATTERN.fullmatch(value))


def encode_date(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def encode_time(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def resolve_wall_clock(date_text: str, time_text: str) -> datetime:
    """
    Combine stored date and time strings into a naive wall-clock datetime.

    Out-of-range parts carry over instead of failing, so ``31-02-2030``
    resolves to 3 March 2030 and month ``00`` to December of the previous
    year.

    Raises:
        ValueError: If the resolved year falls outside 1..9999
    """
    day_part, month_part, year_part = (int(p) for p in date_text.split("-"))
    hour_part, minute_part = (int(p) for p in time_text.split(":"))
    extra_years, month_index = divmod(month_part - 1, 12)
    month_start = datetime(year_part + extra_years, month_index + 1, 1)
    return month_start + timedelta(days=day_part - 1, hours=hour_part, minutes=minute_part)


@dataclass(frozen=True)
class WorkoutSlot:
    """
    A scheduled (date, time) pair in the business timezone's wall clock.

    Keeps the stored strings as given; ``starts`` is where they land on
    the calendar.

    Examples:
        >>> slot = WorkoutSlot.parse("31-02-2030", "09:15")
        >>> slot.date_text, slot.starts
        ('31-02-2030', datetime.datetime(2030, 3, 3, 9, 15))
    """

    date_text: str
    time_text: str
    starts: datetime

    @classmethod
    def parse(cls, date_text: str, time_text: str) -> "WorkoutSlot":
        """
        Decode stored strings.

        Raises:
            ValueError: If either string is malformed, or the date resolves
                outside the supported year range
        """
        if not is_valid_date_text(date_text):
            raise ValueError(f"Date '{date_text}' is not in {DATE_FORMAT} format")
        if not is_valid_time_text(time_text):
            raise ValueError(f"Time '{time_text}' is not in {TIME_FORMAT} format")
        return cls(
            date_text=date_text,
            time_text=time_text,
            starts=resolve_wall_clock(date_text, time_text),
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "WorkoutSlot":
        return cls.parse(record["date"], record["time"])

    @property
    def day(self) -> date:
        return self.starts.date()

    @property
    def at(self) -> time:
        return self.starts.time()

    def instant(self, tz: tzinfo) -> datetime:
        """Absolute instant of the slot, reading its wall clock in ``tz``."""
        return self.starts.replace(tzinfo=tz)


# =============================================================================
# Legacy orderings
# =============================================================================


def comparable_date_key(date_text: str) -> int:
    """
    Turn ``DD-MM-YYYY`` into an integer that orders chronologically.

    Pure arithmetic on the string parts, so it never rejects a value that
    passed the format check.
    """
    day_part, month_part, year_part = (int(p) for p in date_text.split("-"))
    return year_part * 10000 + month_part * 100 + day_part


def legacy_sort_key(record: Mapping[str, Any]) -> Tuple[str, str]:
    """
    Sort key the store applies to workout listings: ``(date, time)`` as text.

    Because the date string leads with the day of month, this orders by day
    first, not by year or month. It only matches chronological order for
    workouts within the same month.
    """
    return (record.get("date") or "", record.get("time") or "")
