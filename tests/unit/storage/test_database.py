"""Tests for the SQLite key-value store."""

from __future__ import annotations

from datetime import datetime

import pytest

from idle_heroes.core.exceptions import StorageUnavailableError
from idle_heroes.storage.base import KeyValueStore
from idle_heroes.storage.database import SQLiteStore


@pytest.fixture
def sqlite_store(temp_db_path) -> SQLiteStore:
    """SQLite store in a temporary directory."""
    return SQLiteStore(temp_db_path)


class TestSQLiteStore:
    """Tests for SQLiteStore."""

    def test_creates_database(self, sqlite_store: SQLiteStore, temp_db_path) -> None:
        """Test the file and its parent directory are created."""
        assert temp_db_path.exists()
        assert isinstance(sqlite_store, KeyValueStore)

    def test_get_missing(self, sqlite_store: SQLiteStore) -> None:
        """Test missing keys return None."""
        assert sqlite_store.get("missing") is None
        assert sqlite_store.get_updated_at("missing") is None

    def test_set_and_get(self, sqlite_store: SQLiteStore) -> None:
        """Test values round-trip."""
        sqlite_store.set("save", '{"gold": 1}')
        assert sqlite_store.get("save") == '{"gold": 1}'
        assert isinstance(sqlite_store.get_updated_at("save"), datetime)

    def test_overwrite(self, sqlite_store: SQLiteStore) -> None:
        """Test setting a key replaces its value."""
        sqlite_store.set("save", "first")
        sqlite_store.set("save", "second")
        assert sqlite_store.get("save") == "second"

    def test_delete(self, sqlite_store: SQLiteStore) -> None:
        """Test deleting removes the key and tolerates missing keys."""
        sqlite_store.set("save", "value")
        sqlite_store.delete("save")
        sqlite_store.delete("save")
        assert sqlite_store.get("save") is None

    def test_persists_across_instances(self, sqlite_store: SQLiteStore, temp_db_path) -> None:
        """Test a second store on the same file sees the data."""
        sqlite_store.set("save", "value")
        assert SQLiteStore(temp_db_path).get("save") == "value"

    def test_unopenable_database(self, tmp_path) -> None:
        """Test a directory in place of the file is a storage error."""
        target = tmp_path / "occupied"
        target.mkdir()
        with pytest.raises(StorageUnavailableError):
            SQLiteStore(target)

    def test_default_path_from_settings(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Test the configured database path is used by default."""
        monkeypatch.setenv("IDLE_HEROES_DATABASE_PATH", str(tmp_path / "configured.db"))
        store = SQLiteStore()
        assert store.db_path == tmp_path / "configured.db"
