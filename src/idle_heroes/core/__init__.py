"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        IdleHeroesError: Base exception for all application errors.
        PersistenceError: Save/load failures.
        ConfigurationError: Configuration-related errors.
        ValidationError: Invalid operation arguments.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_logging_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from idle_heroes.core.config import (
    GameSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from idle_heroes.core.exceptions import (
    ConfigurationError,
    GameEngineError,
    IdleHeroesError,
    MigrationError,
    PersistenceError,
    SerializationError,
    StorageUnavailableError,
    ValidationError,
)
from idle_heroes.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Base exception
    "IdleHeroesError",
    # Engine exceptions
    "GameEngineError",
    # Persistence exceptions
    "PersistenceError",
    "StorageUnavailableError",
    "SerializationError",
    "MigrationError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "GameSettings",
    "StorageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
