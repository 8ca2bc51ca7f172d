"""SQLModel key-value implementation of habit persistence."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Callable, Sequence

from sqlmodel import Session, select

from ...models.habit import Habit
from ...models.store import StoredValue

DEFAULT_STORAGE_KEY = "habits"


class SQLModelHabitPersistence:
    """Stores the whole habit collection as one JSON value under a fixed key."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        key: str = DEFAULT_STORAGE_KEY,
    ):
        """Initialize with a session factory and the storage key."""
        self.session_factory = session_factory
        self.key = key

    def load(self) -> list[Habit]:
        """Return stored habits; a missing or empty value loads as no habits."""
        with self.session_factory() as session:
            row = session.exec(select(StoredValue).where(StoredValue.key == self.key)).first()
            payload = row.value if row else None

        if not payload:
            return []
        try:
            records = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Stored value for {self.key!r} is not valid JSON") from exc
        if records is None:
            return []
        if not isinstance(records, list):
            raise ValueError(f"Stored value for {self.key!r} must be a list of habits")
        return [Habit.from_record(r) for r in records]

    def save(self, habits: Sequence[Habit]) -> None:
        """Overwrite the stored collection in a single transaction."""
        payload = json.dumps([h.to_record() for h in habits])
        with self.session_factory() as session:
            row = session.exec(select(StoredValue).where(StoredValue.key == self.key)).first()
            if row:
                row.value = payload
                row.updated_at = datetime.now()
            else:
                row = StoredValue(key=self.key, value=payload, updated_at=datetime.now())
            session.add(row)
            session.commit()

    def clear(self) -> None:
        """Remove the stored collection entirely."""
        with self.session_factory() as session:
            row = session.exec(select(StoredValue).where(StoredValue.key == self.key)).first()
            if row:
                session.delete(row)
                session.commit()


__all__ = ["DEFAULT_STORAGE_KEY", "SQLModelHabitPersistence"]
