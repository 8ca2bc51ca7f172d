"""Habit store: owns the habit collection and validates every mutation."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..domain.days import Clock, format_day, parse_day, resolve_today
from ..domain.repositories.habit import HabitPersistence
from ..errors import DuplicateDate, EmptyName, FutureDate, NotFound
from ..logging_config import get_logger
from ..models.habit import Habit


class HabitStore:
    """In-memory habit collection backed by a snapshot persistence collaborator.

    All validation happens before any state changes, so a raised error leaves
    the collection untouched. After each successful mutation the whole
    collection is handed to ``persistence.save``.
    """

    def __init__(
        self,
        persistence: HabitPersistence,
        habits: Iterable[Habit] = (),
        *,
        clock: Clock | None = None,
        logger: logging.Logger | None = None,
    ):
        self.persistence = persistence
        self._clock: Clock = clock or datetime.now
        self._habits: list[Habit] = list(habits)
        self._last_id = max((h.id for h in self._habits), default=0)
        self.logger = logger or get_logger("store")

    @classmethod
    def open(
        cls,
        persistence: HabitPersistence,
        *,
        clock: Clock | None = None,
        logger: logging.Logger | None = None,
    ) -> "HabitStore":
        """Create a store seeded from ``persistence.load()``."""

        return cls(persistence, persistence.load(), clock=clock, logger=logger)

    # Read access
    @property
    def habits(self) -> tuple[Habit, ...]:
        return tuple(self._habits)

    def today(self) -> date:
        return resolve_today(self._clock)

    def get(self, habit_id: int) -> Habit:
        """Return the habit with ``habit_id`` or raise ``NotFound``."""

        habit = self._find(habit_id)
        if habit is None:
            raise NotFound(f"Habit {habit_id} not found")
        return habit

    def _find(self, habit_id: int) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    # Mutations
    def create_habit(self, name: str) -> Habit:
        """Create a habit with an empty completion set."""

        clean = (name or "").strip()
        if not clean:
            raise EmptyName()

        habit = Habit(id=self._next_id(), name=clean)
        self._habits.append(habit)
        self._last_id = habit.id
        self.logger.info("Habit created", extra={"habit_id": habit.id, "habit_name": clean})
        self._persist()
        return habit

    def delete_habit(self, habit_id: int) -> None:
        habit = self.get(habit_id)
        self._habits.remove(habit)
        self.logger.info("Habit deleted", extra={"habit_id": habit_id})
        self._persist()

    def add_completion(self, habit_id: int, day: date | str) -> date:
        """Strictly add a completion; raises ``DuplicateDate`` if already logged."""

        habit = self.get(habit_id)
        completion = self._not_future(parse_day(day))
        if habit.has(completion):
            raise DuplicateDate(habit_id, format_day(completion))

        habit.completions.add(completion)
        self.logger.info(
            "Completion added", extra={"habit_id": habit_id, "day": format_day(completion)}
        )
        self._persist()
        return completion

    def remove_completion(self, habit_id: int, day: date | str) -> date:
        """Strictly remove a completion; raises ``NotFound`` if it is not logged."""

        habit = self.get(habit_id)
        completion = parse_day(day)
        if not habit.has(completion):
            raise NotFound(f"Date {format_day(completion)} is not logged for habit {habit_id}")

        habit.completions.discard(completion)
        self.logger.info(
            "Completion removed", extra={"habit_id": habit_id, "day": format_day(completion)}
        )
        self._persist()
        return completion

    def toggle_completion(self, habit_id: int, day: date | str) -> bool:
        """Add ``day`` if absent, remove it if present.

        Returns True when the day is logged after the call.
        """

        habit = self.get(habit_id)
        completion = parse_day(day)
        if habit.has(completion):
            habit.completions.discard(completion)
            logged = False
        else:
            self._not_future(completion)
            habit.completions.add(completion)
            logged = True

        self.logger.info(
            "Completion toggled",
            extra={"habit_id": habit_id, "day": format_day(completion), "logged": logged},
        )
        self._persist()
        return logged

    def log_today(self, habit_id: int) -> bool:
        """Log today's completion; returns False when it was already logged."""

        habit = self.get(habit_id)
        today = self.today()
        if habit.has(today):
            return False
        self.add_completion(habit_id, today)
        return True

    # Helpers
    def _next_id(self) -> int:
        # Millisecond timestamps, bumped past the last id so ids stay unique and increasing.
        stamp = int(self._clock().timestamp() * 1000)
        return max(stamp, self._last_id + 1)

    def _not_future(self, day: date) -> date:
        today = self.today()
        if day > today:
            raise FutureDate(format_day(day), format_day(today))
        return day

    def _persist(self) -> None:
        try:
            self.persistence.save(self._habits)
        except (SQLAlchemyError, OSError):
            # Snapshots are best-effort; in-memory state stays authoritative.
            self.logger.exception("Failed to save habits", extra={"habit_count": len(self._habits)})


__all__ = ["HabitStore"]
