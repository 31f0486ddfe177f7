"""Storage module for Idle Heroes persistence.

Provides:
- A key-value store port with in-memory and SQLite adapters
- The game state repository (JSON record under a fixed key)
- Versioned record migrations and the post-load repair pass
"""

from idle_heroes.storage.base import InMemoryStore, KeyValueStore
from idle_heroes.storage.database import SQLiteStore, get_store
from idle_heroes.storage.migrations import CURRENT_SCHEMA_VERSION, migrate
from idle_heroes.storage.repair import repair_game_state
from idle_heroes.storage.repository import DEFAULT_STORAGE_KEY, GameStateRepository

__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "DEFAULT_STORAGE_KEY",
    "GameStateRepository",
    "InMemoryStore",
    "KeyValueStore",
    "SQLiteStore",
    "get_store",
    "migrate",
    "repair_game_state",
]
