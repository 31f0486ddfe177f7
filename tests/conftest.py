"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Idle Heroes test suite: deterministic clock, timer, and random
source, an in-memory store, and an engine factory wired to them.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from idle_heroes.core.config import GameSettings
    from idle_heroes.engine.progression import ProgressionEngine
    from idle_heroes.storage.base import InMemoryStore


# =============================================================================
# Test Doubles
# =============================================================================


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class ManualTimer:
    """Timer that fires only when ``fire()`` is called."""

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def is_running(self) -> bool:
        return self.started and not self.cancelled

    def fire(self) -> None:
        self.callback()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from idle_heroes.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "IDLE_HEROES_DEBUG": "true",
        "IDLE_HEROES_LOG_LEVEL": "DEBUG",
        "IDLE_HEROES_STORAGE_KEY": "test_save",
        "IDLE_HEROES_GAME_IDLE_MULTIPLIER": "2.0",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo global logging configuration made during a test."""
    import logging

    import structlog

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def game_settings() -> GameSettings:
    """Default game settings, independent of the environment."""
    from idle_heroes.core.config import GameSettings

    return GameSettings(_env_file=None)


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def clock() -> ManualClock:
    """Provide a manual clock."""
    return ManualClock()


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random source for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def store() -> InMemoryStore:
    """Provide an empty in-memory store."""
    from idle_heroes.storage.base import InMemoryStore

    return InMemoryStore()


@pytest.fixture
def timers() -> list[ManualTimer]:
    """Collects the timers created by engines under test."""
    return []


@pytest.fixture
def timer_factory(timers: list[ManualTimer]) -> Callable[[float, Callable[[], None]], ManualTimer]:
    """Timer factory producing manual timers."""

    def factory(interval: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(interval, callback)
        timers.append(timer)
        return timer

    return factory


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def make_engine(
    store: InMemoryStore,
    clock: ManualClock,
    rng: random.Random,
    game_settings: GameSettings,
    timer_factory: Callable[[float, Callable[[], None]], ManualTimer],
) -> Generator[Callable[..., ProgressionEngine], None, None]:
    """Factory building engines wired to the shared test doubles.

    Keyword arguments override the injected collaborators.
    """
    from idle_heroes.engine.progression import ProgressionEngine

    engines: list[ProgressionEngine] = []

    def factory(starting_character_id: str | None = None, **overrides: Any) -> ProgressionEngine:
        kwargs: dict[str, Any] = {
            "store": store,
            "storage_key": "test_game_state",
            "clock": clock,
            "rng": rng,
            "settings": game_settings,
            "timer_factory": timer_factory,
        }
        kwargs.update(overrides)
        engine = ProgressionEngine(starting_character_id, **kwargs)
        engines.append(engine)
        return engine

    yield factory

    for engine in engines:
        engine.cleanup()


@pytest.fixture
def engine(make_engine: Callable[..., ProgressionEngine]) -> ProgressionEngine:
    """Fresh game started with Ryan."""
    return make_engine("ryan")


def unlock_all(engine: ProgressionEngine) -> None:
    """Unlock every catalog character."""
    for character_id in engine.get_game_state().characters:
        engine.unlock_character(character_id)


@pytest.fixture
def full_roster_engine(engine: ProgressionEngine) -> ProgressionEngine:
    """Engine with every character unlocked and active."""
    unlock_all(engine)
    return engine


@pytest.fixture
def mission_engine(engine: ProgressionEngine) -> ProgressionEngine:
    """Full roster with the starter missions seeded.

    Buying the second character seeds the pool; the rest are unlocked for
    free, so every starter mission's requirements are covered.
    """
    assert engine.purchase_character("daniel", 0, 0)
    unlock_all(engine)
    return engine


def tick_until(
    engine: ProgressionEngine,
    predicate: Callable[[Any], bool],
    *,
    step: float = 60.0,
    limit: int = 200,
) -> None:
    """Tick until ``predicate(snapshot)`` holds."""
    for _ in range(limit):
        if predicate(engine.get_game_state()):
            return
        engine.tick(step)
    raise AssertionError("Condition not reached within tick limit")


@pytest.fixture
def run_until() -> Callable[..., None]:
    """Expose ``tick_until`` to test modules."""
    return tick_until


@pytest.fixture
def temp_db_path(tmp_path: Any) -> Any:
    """Path for a temporary SQLite database."""
    return tmp_path / "data" / "idle_heroes.db"
