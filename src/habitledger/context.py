"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .domain.days import Clock
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelHabitPersistence
from .services.habits import HabitStore
from .services.scoring import ScoringPolicy, get_policy


@dataclass
class AppContext:
    """Configuration, persistence and the habit store for one run."""

    config: BaseConfig
    session_factory: Callable[[], Session]
    persistence: SQLModelHabitPersistence
    store: HabitStore
    policy: ScoringPolicy


def create_app_context(
    config: Optional[BaseConfig] = None, *, clock: Clock | None = None
) -> AppContext:
    """Create the engine, load stored habits and resolve the scoring policy."""

    if config is None:
        config = BaseConfig()

    policy = get_policy(config.SCORING_POLICY)
    _, session_factory = bootstrap_database(config)
    persistence = SQLModelHabitPersistence(session_factory, key=config.STORAGE_KEY)
    store = HabitStore.open(persistence, clock=clock)

    return AppContext(
        config=config,
        session_factory=session_factory,
        persistence=persistence,
        store=store,
        policy=policy,
    )
