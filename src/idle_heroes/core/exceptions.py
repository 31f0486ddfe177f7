"""Custom exception hierarchy for the Idle Heroes progression engine.

All exceptions inherit from IdleHeroesError so callers can handle every
application failure at a single boundary. The engine's public operations do
not let these escape for expected failures: validation problems are reported
as ``False`` return values and persistence problems are logged. The
exceptions below are raised by the lower layers (configuration, storage,
migrations) and caught where the engine meets them.

Example:
    >>> from idle_heroes.core.exceptions import PersistenceError
    >>> raise PersistenceError("Store is read-only", storage_key="idle_heroes_game_state")
"""

from __future__ import annotations

from typing import Any


class IdleHeroesError(Exception):
    """Base exception for all Idle Heroes errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(IdleHeroesError):
    """Base exception for progression engine errors."""


# =============================================================================
# Persistence Domain Exceptions
# =============================================================================


class PersistenceError(IdleHeroesError):
    """Base exception for save/load failures."""

    def __init__(
        self,
        message: str,
        *,
        storage_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize persistence error with storage key context.

        Args:
            message: Human-readable error description.
            storage_key: Key of the record being read or written.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if storage_key:
            combined_details["storage_key"] = storage_key
        super().__init__(message, details=combined_details)


class StorageUnavailableError(PersistenceError):
    """Raised when the key-value store cannot be read or written.

    Covers missing files, locked databases and quota-style write failures.
    """


class SerializationError(PersistenceError):
    """Raised when a stored record is not valid JSON or fails schema validation."""


class MigrationError(PersistenceError):
    """Raised when a stored record cannot be brought to the current schema."""

    def __init__(
        self,
        message: str,
        *,
        from_version: int | None = None,
        to_version: int | None = None,
        storage_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize migration error with version context.

        Args:
            message: Human-readable error description.
            from_version: Schema version found in the stored record.
            to_version: Schema version the code expects.
            storage_key: Key of the record being migrated.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if from_version is not None:
            combined_details["from_version"] = from_version
        if to_version is not None:
            combined_details["to_version"] = to_version
        super().__init__(message, storage_key=storage_key, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(IdleHeroesError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(IdleHeroesError):
    """Raised when operation arguments fail validation.

    The engine raises this from its internal ``_require_*`` helpers and turns
    it into a ``False`` return at the public boundary.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "IdleHeroesError",
    # Game engine exceptions
    "GameEngineError",
    # Persistence exceptions
    "PersistenceError",
    "StorageUnavailableError",
    "SerializationError",
    "MigrationError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
]
