"""Pytest configuration and shared fixtures for HabitLedger tests.

Fixtures provide a fixed clock, in-memory and SQLite-backed persistence, and
a ready application context, so nothing touches the real data directory.
"""

from __future__ import annotations

import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from habitledger.config import BaseConfig
from habitledger.context import create_app_context
from habitledger.infra.database import create_session_factory
from habitledger.infra.repositories import InMemoryHabitPersistence, SQLModelHabitPersistence
from habitledger.models import StoredValue  # noqa: F401  # register table metadata
from habitledger.services.habits import HabitStore



# =============================================================================
# Clock Fixtures
# =============================================================================


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-06-15 09:30 local time."""

    def _clock() -> datetime:
        return datetime(2024, 6, 15, 9, 30)

    return _clock


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one used by the application context."""

    return create_session_factory(db_engine)


@pytest.fixture
def sql_persistence(session_factory) -> SQLModelHabitPersistence:
    return SQLModelHabitPersistence(session_factory)


@pytest.fixture
def memory_persistence() -> InMemoryHabitPersistence:
    return InMemoryHabitPersistence()


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def store(memory_persistence, fixed_clock) -> HabitStore:
    """Empty habit store backed by in-memory persistence."""

    return HabitStore(memory_persistence, clock=fixed_clock)


@pytest.fixture
def habit_factory(store):
    """Factory creating a habit in ``store`` with the given completion days."""

    def _create_habit(name: str = "Test Habit", days: tuple[str, ...] = ()):
        habit = store.create_habit(name)
        for day in days:
            store.add_completion(habit.id, day)
        return habit

    return _create_habit


@pytest.fixture
def app_config(tmp_path, monkeypatch) -> BaseConfig:
    """Configuration rooted in a temporary data directory."""

    monkeypatch.setenv("HABITLEDGER_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("HABITLEDGER_DATABASE_URL", raising=False)
    monkeypatch.delenv("HABITLEDGER_SCORING_POLICY", raising=False)
    monkeypatch.delenv("HABITLEDGER_DAY_WINDOW", raising=False)
    monkeypatch.delenv("HABITLEDGER_STORAGE_KEY", raising=False)
    return BaseConfig()


@pytest.fixture
def app_context(app_config, fixed_clock):
    """Application context on a temporary SQLite database."""

    return create_app_context(app_config, clock=fixed_clock)
