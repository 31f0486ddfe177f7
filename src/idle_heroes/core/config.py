"""Configuration management for the Idle Heroes progression engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.
Game tuning constants (idle multiplier, tick clamps, offline threshold)
live here so they can be adjusted without touching engine code.

Example:
    >>> from idle_heroes.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.max_tick_seconds
    60.0

Environment Variables:
    IDLE_HEROES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    IDLE_HEROES_DEBUG: Human-readable DEBUG logs instead of JSON
    IDLE_HEROES_LOG_FILE: Optional log file path
    IDLE_HEROES_DATABASE_PATH: Path to the SQLite save database
    IDLE_HEROES_STORAGE_KEY: Key of the persisted game state record
    IDLE_HEROES_GAME_IDLE_MULTIPLIER: Global idle accrual multiplier
    IDLE_HEROES_GAME_AUTO_SAVE_INTERVAL_SECONDS: Auto-save period (0 disables)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from idle_heroes.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Tuning constants for the progression engine.

    Attributes:
        idle_multiplier: Global multiplier applied to idle gold/data accrual.
        negative_tick_seconds: Delta used when the clock runs backwards.
        max_tick_seconds: Cap on a single tick's delta (e.g. after sleep).
        auto_save_interval_seconds: Period of the auto-save timer, 0 disables it.
        offline_threshold_seconds: Minimum absence before offline gains apply.
        max_offline_completions: Upper bound on missions resolved offline.
        unlock_chance_per_difficulty: Character unlock chance per difficulty point.
        default_training_rate: Fallback skill training rate used by load repair.
    """

    model_config = SettingsConfigDict(
        env_prefix="IDLE_HEROES_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    idle_multiplier: float = Field(
        default=1.0,
        gt=0,
        description="Global idle accrual multiplier",
    )
    negative_tick_seconds: float = Field(
        default=0.1,
        gt=0,
        description="Delta substituted for negative clock deltas",
    )
    max_tick_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Largest delta a single tick may simulate",
    )
    auto_save_interval_seconds: float = Field(
        default=300.0,
        ge=0,
        description="Auto-save period in seconds (0 disables the timer)",
    )
    offline_threshold_seconds: float = Field(
        default=120.0,
        ge=0,
        description="Minimum absence before offline reconciliation runs",
    )
    max_offline_completions: int = Field(
        default=1000,
        ge=1,
        description="Maximum missions completed during one offline reconciliation",
    )
    unlock_chance_per_difficulty: float = Field(
        default=0.10,
        ge=0,
        le=1,
        description="Unlock chance granted per point of mission difficulty",
    )
    default_training_rate: float = Field(
        default=0.5,
        gt=0,
        description="Training rate used when neither save nor catalog has a valid one",
    )

    @model_validator(mode="after")
    def validate_tick_bounds(self) -> "GameSettings":
        """Ensure the tick cap is not below the negative-delta fallback.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If max_tick_seconds < negative_tick_seconds.
        """
        if self.max_tick_seconds < self.negative_tick_seconds:
            raise ConfigurationError(
                f"max_tick_seconds ({self.max_tick_seconds}) must be at least "
                f"negative_tick_seconds ({self.negative_tick_seconds})",
                config_key="max_tick_seconds",
            )
        return self


class StorageSettings(BaseSettings):
    """Configuration for save-game storage.

    Attributes:
        database_path: Path to the SQLite key-value database.
        storage_key: Key under which the game state record is stored.
    """

    model_config = SettingsConfigDict(
        env_prefix="IDLE_HEROES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_path: Path = Field(
        default=Path("data/idle_heroes.db"),
        description="Path to SQLite save database",
    )
    storage_key: str = Field(
        default="idle_heroes_game_state",
        min_length=1,
        description="Key of the persisted game state record",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_file: Optional log file path.
        game: Engine tuning settings.
        storage: Save-game storage settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="IDLE_HEROES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Idle Heroes",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that also receives log records",
    )

    game: GameSettings = Field(default_factory=GameSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "StorageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
