"""Domain errors raised by the habit store and scoring engine."""

from __future__ import annotations


class HabitError(ValueError):
    """Base class for recoverable habit tracking errors."""


class InvalidDate(HabitError):
    """A completion day is not a valid ``YYYY-MM-DD`` calendar date."""

    def __init__(self, value: object, reason: str = "use YYYY-MM-DD"):
        self.value = value
        super().__init__(f"Invalid date {value!r}; {reason}")


class FutureDate(HabitError):
    """A completion was requested for a day after today."""

    def __init__(self, day: str, today: str):
        self.day = day
        self.today = today
        super().__init__(f"Date {day} cannot be in the future (today is {today})")


class DuplicateDate(HabitError):
    """The completion day is already logged for the habit."""

    def __init__(self, habit_id: int, day: str):
        self.habit_id = habit_id
        self.day = day
        super().__init__(f"Date {day} is already logged for habit {habit_id}")


class EmptyName(HabitError):
    """Habit name is blank after trimming."""

    def __init__(self) -> None:
        super().__init__("Habit name is required")


class NotFound(HabitError, LookupError):
    """Unknown habit id, or a completion that is not recorded."""


__all__ = [
    "DuplicateDate",
    "EmptyName",
    "FutureDate",
    "HabitError",
    "InvalidDate",
    "NotFound",
]
