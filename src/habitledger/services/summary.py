"""Display-ready habit rows built from the store and the scoring engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..domain.days import DEFAULT_WINDOW, generate_day_window, parse_day
from ..models.habit import Habit
from .scoring import ScoreResult, ScoringPolicy, score


@dataclass(frozen=True)
class HabitSummary:
    habit_id: int
    name: str
    completion_count: int
    completed_today: bool
    score: ScoreResult


def summarize(habit: Habit, as_of: date | str, *, policy: ScoringPolicy | None = None) -> HabitSummary:
    """Score one habit and collect the fields a habit row displays."""

    today = parse_day(as_of)
    days = habit.snapshot()
    return HabitSummary(
        habit_id=habit.id,
        name=habit.name,
        completion_count=len(days),
        completed_today=today in days,
        score=score(days, today, policy=policy),
    )


def summarize_all(
    habits: Iterable[Habit], as_of: date | str, *, policy: ScoringPolicy | None = None
) -> list[HabitSummary]:
    return [summarize(h, as_of, policy=policy) for h in habits]


def calendar_grid(habit: Habit, as_of: date | str, n: int = DEFAULT_WINDOW) -> list[tuple[str, bool]]:
    """Pair each day of the window ending at ``as_of`` with whether it was completed."""

    done = set(habit.sorted_days())
    return [(day, day in done) for day in generate_day_window(as_of, n)]


__all__ = ["HabitSummary", "calendar_grid", "summarize", "summarize_all"]
