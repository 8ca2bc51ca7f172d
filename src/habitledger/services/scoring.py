"""Habit scoring: points, golden points and streaks from completion days.

Scoring is a pure function of a habit's completion set and an injected
"today". The point rules are isolated behind :class:`ScoringPolicy` so an
alternate rule set can be swapped in without touching the day arithmetic or
the cross-habit aggregation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Iterable, Protocol, Sequence

from ..domain.days import count_back, generate_day_window, is_next_day, parse_day, parse_days

if TYPE_CHECKING:  # pragma: no cover
    from ..models.habit import Habit

GOLDEN_STREAK = 7


@dataclass(frozen=True)
class ScoreResult:
    """Derived score for one habit; recomputed on demand, never stored."""

    points: int = 0
    golden: int = 0
    current_streak: int = 0
    longest_streak: int = 0


class ScoringPolicy(Protocol):
    """A named rule set turning an ordered day sequence into points."""

    name: str

    def tally(self, ordered_days: Sequence[date]) -> tuple[int, int, int]:
        """Return ``(points, golden, longest_streak)`` for ascending, unique days."""
        ...


class GoldenStreakPolicy:
    """Streak bonuses with a golden point on every seventh consecutive day.

    Each day earns a base point. Day ``n`` (2..6) of a running streak adds
    ``n`` bonus points; day 7 earns a golden point instead and the running
    streak drops back to 0, so the next consecutive day starts over at 1.
    """

    name = "golden"

    def tally(self, ordered_days: Sequence[date]) -> tuple[int, int, int]:
        points = 0
        golden = 0
        longest = 0
        run = 0
        previous: date | None = None

        for day in ordered_days:
            if previous is not None and is_next_day(previous, day):
                run += 1
            else:
                run = 1
            previous = day

            points += 1
            longest = max(longest, run)
            if run == GOLDEN_STREAK:
                golden += 1
                run = 0
            elif run >= 2:
                points += run

        return points, golden, longest


class FlatStreakPolicy:
    """One point per completed day; longest streak is the longest uncapped run."""

    name = "flat"

    def tally(self, ordered_days: Sequence[date]) -> tuple[int, int, int]:
        longest = 0
        run = 0
        previous: date | None = None
        for day in ordered_days:
            run = run + 1 if previous is not None and is_next_day(previous, day) else 1
            longest = max(longest, run)
            previous = day
        return len(ordered_days), 0, longest


_POLICIES: dict[str, ScoringPolicy] = {
    GoldenStreakPolicy.name: GoldenStreakPolicy(),
    FlatStreakPolicy.name: FlatStreakPolicy(),
}

DEFAULT_POLICY = GoldenStreakPolicy.name


def get_policy(name: str | None = None) -> ScoringPolicy:
    """Resolve a scoring policy by name (``golden`` when omitted)."""

    key = (name or DEFAULT_POLICY).strip().lower()
    try:
        return _POLICIES[key]
    except KeyError:
        raise ValueError(
            f"Unknown scoring policy {name!r}; expected one of {', '.join(sorted(_POLICIES))}"
        ) from None


def available_policies() -> list[str]:
    return sorted(_POLICIES)


def score(
    completion_days: Iterable[date | str],
    as_of: date | str,
    *,
    policy: ScoringPolicy | None = None,
) -> ScoreResult:
    """Score one habit's completion days as of the given day.

    Input order and duplicates do not matter. Raises ``InvalidDate`` for a
    day that cannot be parsed.
    """

    days = parse_days(completion_days)
    today = parse_day(as_of)
    rules = policy or get_policy()

    points, golden, longest = rules.tally(sorted(days))
    return ScoreResult(
        points=points,
        golden=golden,
        current_streak=count_back(days, today),
        longest_streak=longest,
    )


def current_streak(completion_days: Iterable[date | str], as_of: date | str) -> int:
    """Consecutive completed days ending at ``as_of``; 0 when ``as_of`` is missing."""

    return count_back(parse_days(completion_days), parse_day(as_of))


def overall_current_streak(habits: Iterable["Habit"], as_of: date | str) -> int:
    """Consecutive days ending at ``as_of`` on which at least one habit was completed."""

    union: set[date] = set()
    for habit in habits:
        union.update(habit.snapshot())
    return count_back(union, parse_day(as_of))


__all__ = [
    "DEFAULT_POLICY",
    "FlatStreakPolicy",
    "GOLDEN_STREAK",
    "GoldenStreakPolicy",
    "ScoreResult",
    "ScoringPolicy",
    "available_policies",
    "current_streak",
    "generate_day_window",
    "get_policy",
    "overall_current_streak",
    "score",
]
