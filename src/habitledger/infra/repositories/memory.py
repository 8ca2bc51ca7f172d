"""In-memory habit persistence, used by tests and throwaway sessions."""

from __future__ import annotations

import json
from typing import Sequence

from ...models.habit import Habit


class InMemoryHabitPersistence:
    """Keeps the last saved snapshot as serialized JSON text."""

    def __init__(self, payload: str | None = None):
        self.payload = payload
        self.save_count = 0

    def load(self) -> list[Habit]:
        if not self.payload:
            return []
        records = json.loads(self.payload) or []
        return [Habit.from_record(r) for r in records]

    def save(self, habits: Sequence[Habit]) -> None:
        self.payload = json.dumps([h.to_record() for h in habits])
        self.save_count += 1


__all__ = ["InMemoryHabitPersistence"]
