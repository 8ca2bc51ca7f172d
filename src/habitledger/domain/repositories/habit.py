"""Habit persistence protocol."""

from __future__ import annotations

from typing import Protocol, Sequence

from ...models.habit import Habit


class HabitPersistence(Protocol):
    """Durable snapshot storage for the whole habit collection."""

    def load(self) -> list[Habit]:
        """Return the stored habits, or an empty list when nothing is stored."""
        ...

    def save(self, habits: Sequence[Habit]) -> None:
        """Overwrite the stored collection with ``habits``."""
        ...
