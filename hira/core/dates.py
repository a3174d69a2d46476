"""
Calendar-date helpers.

Every date crossing a boundary is an ISO ``YYYY-MM-DD`` string. Timestamps
(``2024-01-01T09:30:00.000Z``) are accepted wherever a date is expected and
truncated to their date part. Anything else fails fast with InvalidDateError.
"""
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from hira.core.errors import InvalidDateError

DayLike = Union[str, date, datetime]


def parse_day(value: DayLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value)

    text = value.strip()
    if "T" in text:
        text = text.split("T", 1)[0]
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(value) from None


def to_iso(day: date) -> str:
    return day.isoformat()


def today() -> date:
    return date.today()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def days_until(end: DayLike, start: DayLike) -> int:
    """Whole days from start to end, never negative."""
    delta = (parse_day(end) - parse_day(start)).days
    return max(delta, 0)


def now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")
