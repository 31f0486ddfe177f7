"""Application entry point: build a configured engine for one session."""

from __future__ import annotations

from typing import Any

from idle_heroes.core.config import Settings, get_settings
from idle_heroes.core.logging import configure_logging_from_settings, get_logger
from idle_heroes.engine.progression import ProgressionEngine
from idle_heroes.storage.database import SQLiteStore


logger = get_logger(__name__)


def open_session(
    starting_character_id: str | None = None,
    *,
    settings: Settings | None = None,
    **engine_kwargs: Any,
) -> ProgressionEngine:
    """Configure logging and start an engine on the configured SQLite save.

    Args:
        starting_character_id: Start a new game with this character instead
            of restoring the saved one.
        settings: Application settings; defaults to the settings singleton.
        **engine_kwargs: Collaborator overrides passed to the engine
            (``clock``, ``rng``, ``timer_factory``, ``store``...).

    Returns:
        A running engine. Call ``cleanup()`` (or use it as a context
        manager) to stop auto-save and write the final save.
    """
    settings = settings or get_settings()
    configure_logging_from_settings(settings)

    if "store" not in engine_kwargs:
        engine_kwargs["store"] = SQLiteStore(settings.storage.database_path)
    engine_kwargs.setdefault("storage_key", settings.storage.storage_key)
    engine_kwargs.setdefault("settings", settings.game)

    logger.info(
        "Opening session",
        app_name=settings.app_name,
        version=settings.app_version,
        database=str(settings.storage.database_path),
    )
    return ProgressionEngine(starting_character_id, **engine_kwargs)


__all__ = ["open_session"]
