"""CSV export helpers for habit completions."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from ..models.habit import Habit

HEADERS = ["habit_id", "habit_name", "day"]


def export_completions_csv(*, habits: Iterable[Habit], output_path: Path) -> Path:
    """Write one row per completed day to CSV at `output_path`.

    Columns are deterministic: habit_id, habit_name, day. Habits keep their
    given order and days are ascending. Returns the path written.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=HEADERS, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        for habit in habits:
            for day in habit.sorted_days():
                writer.writerow({"habit_id": habit.id, "habit_name": habit.name, "day": day})

    return output_path
