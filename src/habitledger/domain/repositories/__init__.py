"""Repository protocol definitions for domain layer."""

from .habit import HabitPersistence

__all__ = ["HabitPersistence"]
