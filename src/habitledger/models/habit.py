"""Habit records and their serialized form."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping

from ..domain.days import format_day, parse_day


@dataclass(slots=True)
class Habit:
    """A named habit and the calendar days it was completed."""

    id: int
    name: str
    completions: set[date] = field(default_factory=set)

    def has(self, day: date) -> bool:
        return day in self.completions

    def snapshot(self) -> frozenset[date]:
        """Read-only copy of the completion set for scoring."""
        return frozenset(self.completions)

    def sorted_days(self) -> list[str]:
        return [format_day(d) for d in sorted(self.completions)]

    def to_record(self) -> dict[str, Any]:
        """Serialize as ``{id, name, completions}`` with ``YYYY-MM-DD`` strings."""
        return {"id": self.id, "name": self.name, "completions": self.sorted_days()}

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Habit":
        """Build a habit from its stored record; malformed days raise ``InvalidDate``."""
        return cls(
            id=int(record["id"]),
            name=str(record["name"]),
            completions={parse_day(d) for d in record.get("completions") or []},
        )
