"""Integration tests for session persistence.

Tests full sessions over the SQLite store: save on close, restore with
migration and repair, and offline catch-up.
"""

from __future__ import annotations

import json

import pytest

from idle_heroes.engine.progression import ProgressionEngine
from idle_heroes.models import get_catalog
from idle_heroes.storage.database import SQLiteStore


def all_ids() -> list[str]:
    return [c.id for c in get_catalog()]


@pytest.fixture
def sqlite_store(temp_db_path) -> SQLiteStore:
    return SQLiteStore(temp_db_path)


class TestSessionPersistence:
    """Test session state persistence."""

    def test_session_round_trip(self, make_engine, sqlite_store: SQLiteStore) -> None:
        """Progress made in one session is there in the next."""
        with make_engine("ryan", store=sqlite_store) as first:
            first.set_training_skill("ryan", "intelligence")
            first.award_experience("ryan", 120)
            first.purchase_character("daniel", 0, 0)
            first.tick(30.0)
            saved = first.get_game_state()

        restored = make_engine(store=sqlite_store).get_game_state()

        assert restored.unlocked_characters == ["ryan", "daniel"]
        assert restored.characters["ryan"].level == 2
        assert restored.characters["ryan"].currently_training == "intelligence"
        assert restored.characters["ryan"].get_skill("intelligence").experience == pytest.approx(15.0)
        assert [m.id for m in restored.missions] == [m.id for m in saved.missions]
        assert restored.resources.gold == pytest.approx(saved.resources.gold)

    def test_mission_in_progress_survives(self, mission_engine: ProgressionEngine, make_engine) -> None:
        """An in-progress mission keeps its team and progress across sessions."""
        mission = mission_engine.get_game_state().missions[0]
        mission_engine.start_mission(mission.id, all_ids())
        mission_engine.tick(5.0)
        progress = mission_engine.get_game_state().current_missions[0].completion_progress
        mission_engine.cleanup()

        restored = make_engine().get_game_state()

        assert restored.current_missions[0].id == mission.id
        assert restored.current_missions[0].completion_progress == pytest.approx(progress)
        assert restored.current_missions[0].assigned_characters == all_ids()
        assert restored.characters["ryan"].currently_training is None

    def test_legacy_save_is_migrated_and_repaired(self, make_engine, sqlite_store: SQLiteStore) -> None:
        """A save from the oldest layout loads into a playable game."""
        legacy = {
            "characters": [
                {
                    "id": "ryan",
                    "name": "Ryan",
                    "characterClass": "mathematician",
                    "gameStrength": "first_person_movement",
                    "level": 3,
                    "skills": [
                        {"type": "intelligence", "name": "Mathematical Analysis", "trainingRate": 0},
                    ],
                    "currentlyTraining": "intelligence",
                },
            ],
            "unlockedCharacters": ["ryan", "ryan"],
            "activeCharacters": [],
            "currentMission": None,
            "resources": {"gold": 250, "dataPoints": 40, "teamMorale": 50},
            "gameTime": 100.0,
        }
        sqlite_store.set("test_game_state", json.dumps(legacy))

        engine = make_engine(store=sqlite_store)
        state = engine.get_game_state()

        assert state.unlocked_characters == ["ryan"]
        assert state.active_character_ids == ["ryan"]
        assert len(state.characters) == len(get_catalog())
        assert state.characters["ryan"].level == 3
        assert state.characters["ryan"].get_skill("intelligence").training_rate == pytest.approx(0.5)
        assert state.resources.gold == 250

        engine.tick(10.0)
        assert engine.get_character_skill("ryan", "intelligence").experience == pytest.approx(5.0)

    def test_reset_clears_save(self, make_engine, sqlite_store: SQLiteStore) -> None:
        """Resetting replaces the stored game."""
        engine = make_engine("ryan", store=sqlite_store)
        engine.unlock_character("daniel")
        engine.reset_game("kyle")

        record = json.loads(sqlite_store.get("test_game_state"))
        assert record["unlockedCharacters"] == ["kyle"]

    def test_offline_progress_across_sessions(self, make_engine, sqlite_store: SQLiteStore, clock) -> None:
        """Closing the game for an hour credits idle gains on return."""
        with make_engine("ryan", store=sqlite_store) as first:
            first.tick(1.0)

        clock.advance(3600.0)
        restored = make_engine(store=sqlite_store)
        summary = restored.get_offline_summary()

        assert summary.elapsed_minutes == 60
        assert summary.gold_gained == pytest.approx(0.55 * 3600)
        stored = json.loads(sqlite_store.get("test_game_state"))
        assert stored["lastUpdateTime"] == pytest.approx(clock.now())
