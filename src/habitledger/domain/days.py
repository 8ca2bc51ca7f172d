"""Calendar-day helpers for completion stamps.

Days are handled as :class:`datetime.date` values and compared through
``date.toordinal()``, so adjacency checks never depend on wall-clock time,
time zones or daylight-saving shifts. The wire form is ``YYYY-MM-DD``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Callable, Iterable

from ..errors import InvalidDate

DEFAULT_WINDOW = 35

_DAY_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

Clock = Callable[[], datetime]


def parse_day(value: date | str) -> date:
    """Return ``value`` as a date, accepting ``date`` objects or ``YYYY-MM-DD`` strings."""

    if isinstance(value, datetime):
        # A datetime carries a time component; completions never do.
        raise InvalidDate(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDate(value)

    text = value.strip()
    if not _DAY_PATTERN.match(text):
        raise InvalidDate(value)
    try:
        return date(int(text[0:4]), int(text[5:7]), int(text[8:10]))
    except ValueError as exc:
        raise InvalidDate(value) from exc


def format_day(day: date) -> str:
    """Render a day as ``YYYY-MM-DD``."""

    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_days(values: Iterable[date | str]) -> set[date]:
    """Parse and de-duplicate a collection of days."""

    return {parse_day(v) for v in values}


def is_next_day(earlier: date, later: date) -> bool:
    """True when ``later`` is exactly one calendar day after ``earlier``."""

    return later.toordinal() - earlier.toordinal() == 1


def resolve_today(clock: Clock | None = None) -> date:
    """Return the local calendar date according to ``clock`` (defaults to ``datetime.now``)."""

    now = (clock or datetime.now)()
    return now.date()


def generate_day_window(as_of: date | str, n: int = DEFAULT_WINDOW) -> list[str]:
    """Return the ``n`` days ending at ``as_of`` (inclusive), oldest first."""

    end = parse_day(as_of)
    if n <= 0:
        return []
    try:
        start = end - timedelta(days=n - 1)
    except OverflowError as exc:
        raise InvalidDate(as_of, f"a {n}-day window would start before year 1") from exc
    return [format_day(start + timedelta(days=offset)) for offset in range(n)]


def count_back(days: set[date], as_of: date) -> int:
    """Count consecutive days in ``days`` ending at ``as_of`` inclusive."""

    count = 0
    cursor = as_of.toordinal()
    ordinals = {d.toordinal() for d in days}
    while cursor in ordinals:
        count += 1
        cursor -= 1
    return count


__all__ = [
    "DEFAULT_WINDOW",
    "Clock",
    "count_back",
    "format_day",
    "generate_day_window",
    "is_next_day",
    "parse_day",
    "parse_days",
    "resolve_today",
]
