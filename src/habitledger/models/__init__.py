"""Record types and SQLModel table exports."""

from .habit import Habit
from .store import StoredValue

__all__ = ["Habit", "StoredValue"]
