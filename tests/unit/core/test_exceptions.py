"""Tests for the exception hierarchy."""

from __future__ import annotations

from idle_heroes.core.exceptions import (
    ConfigurationError,
    IdleHeroesError,
    MigrationError,
    PersistenceError,
    SerializationError,
    StorageUnavailableError,
    ValidationError,
)


class TestIdleHeroesError:
    """Tests for the base IdleHeroesError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = IdleHeroesError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = IdleHeroesError("Test error", details={"key": "value", "count": 42})
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(IdleHeroesError("Test", details={"x": 1}))
        assert "IdleHeroesError" in repr_str
        assert "x" in repr_str


class TestPersistenceExceptions:
    """Tests for persistence exceptions."""

    def test_storage_key_detail(self) -> None:
        """Test storage key is recorded."""
        exc = StorageUnavailableError("Disk full", storage_key="save")
        assert exc.details["storage_key"] == "save"

    def test_migration_versions(self) -> None:
        """Test MigrationError records both versions."""
        exc = MigrationError("Too new", from_version=9, to_version=3)
        assert exc.details["from_version"] == 9
        assert exc.details["to_version"] == 3

    def test_inheritance(self) -> None:
        """Test exception inheritance chain."""
        for exc in (StorageUnavailableError("x"), SerializationError("x"), MigrationError("x")):
            assert isinstance(exc, PersistenceError)
            assert isinstance(exc, IdleHeroesError)


class TestValidationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error_key(self) -> None:
        """Test ConfigurationError records the key."""
        exc = ConfigurationError("Bad value", config_key="max_tick_seconds")
        assert exc.details["config_key"] == "max_tick_seconds"

    def test_validation_error_fields(self) -> None:
        """Test ValidationError records field and value."""
        exc = ValidationError("Bad id", field_name="character_id", invalid_value="nobody")
        assert exc.details == {"field_name": "character_id", "invalid_value": "nobody"}
