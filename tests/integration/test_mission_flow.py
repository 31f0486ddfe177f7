"""Integration tests for the mission and auto-mission flow.

Drives the engine through purchases, missions, unlocks, and an
auto-mission chain the way a player session would.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from idle_heroes.engine import rules
from idle_heroes.engine.progression import ProgressionEngine
from idle_heroes.models import get_catalog


def all_ids() -> list[str]:
    return [c.id for c in get_catalog()]


class TestMissionFlow:
    """Test a player's path from one character to auto-missions."""

    def test_progress_from_first_purchase(self, make_engine, run_until: Callable[..., None]) -> None:
        """Missions grow the roster until auto-mission is available."""
        engine = make_engine("ryan", rng=random.Random(7))
        engine.purchase_character("daniel", 0, 0)
        for character_id in all_ids():
            engine.unlock_character(character_id)
        assert engine.can_enable_auto_mission()

        engine.set_training_skill("josiah", "hacking")
        assert engine.toggle_auto_mission()
        mission = engine.get_game_state().missions[0]
        assert engine.start_mission(mission.id, all_ids())

        completed_ids: set[str] = set()

        def chained_three(state) -> bool:
            completed_ids.add(state.current_missions[0].id)
            return len(completed_ids) > 3

        run_until(engine, chained_three)
        state = engine.get_game_state()

        assert len(state.current_missions) == 1
        assert state.resources.adaptation_tokens >= 3
        assert all(c.experience > 0 or c.level > 1 for c in state.characters.values())
        assert state.characters["josiah"].original_training == "hacking"

        assert engine.toggle_auto_mission()
        run_until(engine, lambda s: not s.current_missions)
        josiah = engine.get_game_state().characters["josiah"]
        assert josiah.currently_training is None
        assert josiah.original_training is None

    def test_synergy_and_rates_follow_roster(self, engine: ProgressionEngine) -> None:
        """Roster changes are reflected in synergy and idle rates."""
        engine.unlock_character("daniel")
        engine.unlock_character("kyle")
        engine.tick(1.0)
        state = engine.get_game_state()

        assert state.team_synergy == 3 * 5 + 10
        rate_with_three = rules.idle_gold_rate(state)

        engine.remove_active_character("kyle")
        engine.tick(1.0)
        state = engine.get_game_state()

        assert state.team_synergy == 2 * 5
        assert rules.idle_gold_rate(state) < rate_with_three

    def test_data_specialist_boost(self, engine: ProgressionEngine) -> None:
        """Unlocking the data specialist boosts data even off the roster."""
        engine.tick(1.0)
        baseline = engine.get_game_state().resources.data_points

        engine.unlock_character("josiah")
        engine.remove_active_character("josiah")
        before = engine.get_game_state().resources.data_points
        engine.tick(1.0)
        gained = engine.get_game_state().resources.data_points - before

        assert gained == pytest.approx(baseline * 1.5)
