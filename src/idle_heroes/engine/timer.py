"""Periodic timer used for auto-save.

The engine receives a ``TimerFactory`` rather than creating threads itself,
so tests can substitute a timer that fires on demand.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from idle_heroes.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class Timer(Protocol):
    """A repeating timer."""

    def start(self) -> None:
        """Begin firing the callback periodically."""
        ...

    def cancel(self) -> None:
        """Stop firing. Safe to call more than once."""
        ...

    @property
    def is_running(self) -> bool:
        """Whether the timer is currently scheduled."""
        ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]
"""Builds a timer from ``(interval_seconds, callback)``."""


class RepeatingTimer:
    """Runs a callback every ``interval`` seconds on a daemon thread.

    Errors raised by the callback are logged and do not stop the timer.

    Example:
        >>> timer = RepeatingTimer(300, engine.save_game_state)
        >>> timer.start()
        >>> timer.cancel()
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        *,
        name: str = "IdleHeroesAutoSave",
    ) -> None:
        """Initialize the timer.

        Args:
            interval: Seconds between callback invocations.
            callback: Function to run each interval.
            name: Thread name.
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._callback = callback
        self._name = name
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.RLock()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._run,
                daemon=True,
                name=self._name,
            )
            self._thread.start()
        logger.debug("Timer started", name=self._name, interval=self._interval)

    def cancel(self) -> None:
        with self._lock:
            thread = self._thread
            self._thread = None
            self._stop_event.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=5.0)
            logger.debug("Timer cancelled", name=self._name)

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                self._callback()
            except Exception as exc:
                logger.error("Timer callback failed", name=self._name, error=str(exc))


def repeating_timer_factory(interval: float, callback: Callable[[], None]) -> Timer:
    """Default ``TimerFactory`` producing a ``RepeatingTimer``."""
    return RepeatingTimer(interval, callback)


__all__ = [
    "RepeatingTimer",
    "Timer",
    "TimerFactory",
    "repeating_timer_factory",
]
