"""Wall-clock abstraction injected into the engine."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of wall-clock time in seconds."""

    def now(self) -> float:
        """Return the current time in seconds since the epoch."""
        ...


class SystemClock:
    """Clock backed by ``time.time``."""

    def now(self) -> float:
        return time.time()


__all__ = ["Clock", "SystemClock"]
