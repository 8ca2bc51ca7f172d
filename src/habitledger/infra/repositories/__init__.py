"""Concrete persistence implementations."""

from .habit import SQLModelHabitPersistence
from .memory import InMemoryHabitPersistence

__all__ = ["InMemoryHabitPersistence", "SQLModelHabitPersistence"]
