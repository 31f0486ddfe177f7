"""Save and load the game state through a key-value store."""

from __future__ import annotations

import json

from pydantic import ValidationError as PydanticValidationError

from idle_heroes.core.exceptions import SerializationError
from idle_heroes.core.logging import get_logger
from idle_heroes.models.game_state import CURRENT_SCHEMA_VERSION, GameState
from idle_heroes.storage.base import KeyValueStore
from idle_heroes.storage.migrations import migrate


logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "idle_heroes_game_state"


class GameStateRepository:
    """Persists one game state record under a fixed key.

    The record is the camelCase JSON dump of ``GameState``. Loading runs the
    migration chain before validation; repair is left to the caller, which
    owns the catalog and settings.

    Example:
        >>> repo = GameStateRepository(InMemoryStore())
        >>> repo.save(state)
        >>> restored = repo.load()
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, state: GameState) -> None:
        """Serialize and store a game state.

        Raises:
            SerializationError: If the state cannot be encoded.
            PersistenceError: If the store rejects the write.
        """
        try:
            record = state.model_dump(mode="json", by_alias=True)
            record["schemaVersion"] = CURRENT_SCHEMA_VERSION
            payload = json.dumps(record, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot encode game state: {exc}",
                storage_key=self._key,
            ) from exc

        self._store.set(self._key, payload)
        logger.debug("Game state saved", key=self._key, size=len(payload))

    def load(self) -> GameState | None:
        """Load, migrate, and validate the stored game state.

        Returns:
            The stored state, or None if nothing is stored.

        Raises:
            SerializationError: If the record is not valid JSON or does not
                validate after migration.
            MigrationError: If the record cannot be migrated.
            PersistenceError: If the store cannot be read.
        """
        payload = self._store.get(self._key)
        if payload is None:
            logger.debug("No stored game state", key=self._key)
            return None

        try:
            record = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise SerializationError(
                f"Stored game state is not valid JSON: {exc}",
                storage_key=self._key,
            ) from exc

        try:
            record = migrate(record)
        except (TypeError, AttributeError, KeyError) as exc:
            raise SerializationError(
                f"Stored game state has an unexpected shape: {exc}",
                storage_key=self._key,
            ) from exc

        try:
            state = GameState.model_validate(record)
        except PydanticValidationError as exc:
            raise SerializationError(
                f"Stored game state failed validation: {exc.error_count()} errors",
                storage_key=self._key,
                details={"errors": exc.errors(include_url=False)[:5]},
            ) from exc

        logger.info("Game state loaded", key=self._key, characters=len(state.characters))
        return state

    def clear(self) -> None:
        """Delete the stored game state."""
        self._store.delete(self._key)
        logger.info("Game state cleared", key=self._key)


__all__ = ["DEFAULT_STORAGE_KEY", "GameStateRepository"]
