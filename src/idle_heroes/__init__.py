"""Idle Heroes progression engine.

An idle game core: resources accrue over time, characters train skills,
and teams complete missions for rewards. The engine owns the game state,
advances it on each tick, reconciles offline time, and persists it.

Modules:
    core: Configuration, logging, and the exception hierarchy.
    models: Pydantic game models, tagged effects, and the character catalog.
    engine: Progression engine, game rules, missions, and offline catch-up.
    storage: Key-value stores, the save repository, migrations, and repair.
    session: ``open_session``, which configures logging and starts an engine.
"""

from __future__ import annotations

# Core
from idle_heroes.core.config import Settings, get_settings
from idle_heroes.core.exceptions import IdleHeroesError
from idle_heroes.core.logging import configure_logging, configure_logging_from_settings, get_logger

# Engine
from idle_heroes.engine.progression import ProgressionEngine

# Models
from idle_heroes.models import (
    Character,
    GameState,
    Mission,
    OfflineSummary,
    Resources,
    Skill,
    get_catalog,
)

# Storage
from idle_heroes.storage import InMemoryStore, SQLiteStore

# Entry point
from idle_heroes.session import open_session


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "IdleHeroesError",
    "Settings",
    "get_settings",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    # Engine
    "ProgressionEngine",
    # Models
    "Character",
    "GameState",
    "Mission",
    "OfflineSummary",
    "Resources",
    "Skill",
    "get_catalog",
    # Storage
    "InMemoryStore",
    "SQLiteStore",
    # Entry point
    "open_session",
]
