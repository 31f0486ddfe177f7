"""Key-value storage port and the in-memory adapter."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from idle_heroes.core.exceptions import StorageUnavailableError


@runtime_checkable
class KeyValueStore(Protocol):
    """Synchronous string key-value store.

    Implementations raise ``PersistenceError`` subclasses on failure.
    """

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...


class InMemoryStore:
    """Dict-backed store.

    The ``fail_reads`` and ``fail_writes`` switches make every read or write
    raise ``StorageUnavailableError``, simulating an unavailable or full
    backend.
    """

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        *,
        fail_reads: bool = False,
        fail_writes: bool = False,
    ) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.write_count = 0

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageUnavailableError("In-memory store read failure", storage_key=key)
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageUnavailableError("In-memory store write failure", storage_key=key)
        self._data[key] = value
        self.write_count += 1

    def delete(self, key: str) -> None:
        if self.fail_writes:
            raise StorageUnavailableError("In-memory store write failure", storage_key=key)
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


__all__ = ["InMemoryStore", "KeyValueStore"]
