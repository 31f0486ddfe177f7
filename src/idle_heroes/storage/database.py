"""SQLite persistence layer for Idle Heroes.

Stores save records in a single key-value table:

    kv_store(key TEXT PRIMARY KEY, value TEXT, updated_at TEXT)

Default location: data/idle_heroes.db (see ``StorageSettings``).
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Generator

from idle_heroes.core.config import get_settings
from idle_heroes.core.exceptions import StorageUnavailableError
from idle_heroes.core.logging import get_logger


logger = get_logger(__name__)


# =============================================================================
# SQLite Store
# =============================================================================


class SQLiteStore:
    """Key-value store backed by a SQLite file.

    Every ``sqlite3.Error`` is re-raised as ``StorageUnavailableError`` so
    callers only deal with the application's persistence errors.
    """

    SCHEMA_VERSION = 1

    def __init__(self, db_path: str | Path | None = None) -> None:
        """Initialize the store.

        Args:
            db_path: Path to database file. If None, uses the configured path.
                ``":memory:"`` is not supported because each operation opens
                its own connection.
        """
        if db_path is None:
            self.db_path = get_settings().storage.database_path
        else:
            self.db_path = Path(db_path)

        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailableError(
                f"Cannot create database directory: {exc}",
                details={"db_path": str(self.db_path)},
            ) from exc

        self._init_schema()
        logger.info("SQLite store initialized", db_path=str(self.db_path))

    @contextmanager
    def _get_connection(self, key: str | None = None) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection with commit/rollback and cleanup."""
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as exc:
            raise StorageUnavailableError(
                f"Cannot open database: {exc}",
                storage_key=key,
                details={"db_path": str(self.db_path)},
            ) from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageUnavailableError(
                f"Database operation failed: {exc}",
                storage_key=key,
                details={"db_path": str(self.db_path)},
            ) from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_schema(self) -> None:
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY
                )
            """)
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            cursor.execute(
                "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                (self.SCHEMA_VERSION,),
            )

    # =========================================================================
    # Key-Value Operations
    # =========================================================================

    def get(self, key: str) -> str | None:
        with self._get_connection(key) as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        with self._get_connection(key) as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                               updated_at = excluded.updated_at
                """,
                (key, value, datetime.now().isoformat()),
            )
        logger.debug("Stored value", key=key, size=len(value))

    def delete(self, key: str) -> None:
        with self._get_connection(key) as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def get_updated_at(self, key: str) -> datetime | None:
        """Get when a key was last written."""
        with self._get_connection(key) as conn:
            row = conn.execute("SELECT updated_at FROM kv_store WHERE key = ?", (key,)).fetchone()
        return None if row is None else datetime.fromisoformat(row[0])


# =============================================================================
# Singleton Instance
# =============================================================================


_store_instance: SQLiteStore | None = None


def get_store() -> SQLiteStore:
    """Get the global SQLite store instance.

    Returns:
        SQLiteStore singleton at the configured database path.
    """
    global _store_instance

    if _store_instance is None:
        _store_instance = SQLiteStore()

    return _store_instance


__all__ = ["SQLiteStore", "get_store"]
