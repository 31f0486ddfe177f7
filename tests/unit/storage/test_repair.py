"""Tests for the post-load repair pass."""

from __future__ import annotations

import pytest

from idle_heroes.core.config import GameSettings
from idle_heroes.models import (
    Effect,
    EffectKind,
    GameState,
    Mission,
    SkillType,
    get_catalog,
    new_roster,
)
from idle_heroes.storage.repair import repair_game_state


@pytest.fixture
def state() -> GameState:
    """Consistent state with Ryan and Daniel unlocked."""
    return GameState(
        characters=new_roster(),
        unlocked_characters=["ryan", "daniel"],
        active_character_ids=["ryan"],
    )


class TestRosterRepair:
    """Tests for roster and mission reference repair."""

    def test_restores_missing_characters(self, state: GameState, game_settings: GameSettings) -> None:
        """Test catalog characters missing from the save are re-added."""
        del state.characters["kyle"]
        repair_game_state(state, game_settings)
        assert "kyle" in state.characters
        assert len(state.characters) == len(get_catalog())

    def test_dedupes_and_drops_unknown_ids(self, state: GameState, game_settings: GameSettings) -> None:
        """Test roster id lists only reference known characters once."""
        state.unlocked_characters = ["ryan", "ghost", "daniel", "ryan"]
        state.active_character_ids = ["ryan", "ryan", "ghost"]

        repair_game_state(state, game_settings)

        assert state.unlocked_characters == ["ryan", "daniel"]
        assert state.active_character_ids == ["ryan"]

    def test_promotes_when_nobody_active(self, state: GameState, game_settings: GameSettings) -> None:
        """Test an empty active roster gets the first unlocked character."""
        state.active_character_ids = []
        repair_game_state(state, game_settings)
        assert state.active_character_ids == ["ryan"]

    def test_orphaned_mission_returns_to_pool(self, state: GameState, game_settings: GameSettings) -> None:
        """Test a mission whose team vanished goes back to the pool."""
        state.current_missions = [
            Mission(id="m1", name="M", difficulty=1.0, completion_progress=40, assigned_characters=["ghost"]),
        ]

        repair_game_state(state, game_settings)

        assert state.current_missions == []
        assert state.missions[0].id == "m1"
        assert state.missions[0].completion_progress == 0

    def test_mission_team_filtered(self, state: GameState, game_settings: GameSettings) -> None:
        """Test unknown ids are dropped from a mission team."""
        state.current_missions = [
            Mission(id="m1", name="M", difficulty=1.0, assigned_characters=["ryan", "ghost"]),
        ]
        repair_game_state(state, game_settings)
        assert state.current_missions[0].assigned_characters == ["ryan"]


class TestCharacterRepair:
    """Tests for per-character and per-skill repair."""

    def test_training_paused_on_mission(self, state: GameState, game_settings: GameSettings) -> None:
        """Test a character on a mission never trains."""
        state.characters["ryan"].currently_training = SkillType.INTELLIGENCE
        state.current_missions = [
            Mission(id="m1", name="M", difficulty=1.0, assigned_characters=["ryan"]),
        ]

        repair_game_state(state, game_settings)
        ryan = state.characters["ryan"]

        assert ryan.currently_training is None
        assert ryan.paused_training == SkillType.INTELLIGENCE

    def test_unknown_training_target_cleared(self, state: GameState, game_settings: GameSettings) -> None:
        """Test training fields naming a missing skill are cleared."""
        ryan = state.characters["ryan"]
        ryan.currently_training = SkillType.HACKING
        ryan.original_training = SkillType.STEALTH

        repair_game_state(state, game_settings)

        assert ryan.currently_training is None
        assert ryan.original_training is None

    def test_training_rate_from_catalog(self, state: GameState, game_settings: GameSettings) -> None:
        """Test a non-positive rate is replaced by the catalog rate."""
        skill = state.characters["ryan"].get_skill(SkillType.PERCEPTION)
        skill.training_rate = 0

        repair_game_state(state, game_settings)

        assert skill.training_rate == pytest.approx(0.4)

    def test_training_rate_fallback(self, state: GameState, game_settings: GameSettings) -> None:
        """Test the configured rate is used when the catalog has none."""
        ryan = state.characters["ryan"]
        ryan.skills.append(ryan.get_skill(SkillType.INTELLIGENCE).model_copy(update={"type": SkillType.HACKING}))
        ryan.skills[-1].training_rate = -1

        repair_game_state(state, game_settings)

        assert ryan.skills[-1].training_rate == game_settings.default_training_rate

    def test_skill_values_clamped(self, state: GameState, game_settings: GameSettings) -> None:
        """Test level, threshold, and experience are brought into range."""
        skills = state.characters["ryan"].skills
        skills[0].level = 12
        skills[0].experience = 50
        skills[1].experience_to_next_level = 0
        skills[1].level = 3
        skills[2].experience = 500

        repair_game_state(state, game_settings)

        assert skills[0].level == skills[0].max_level
        assert skills[0].experience == 0
        assert skills[1].experience_to_next_level == 225
        assert skills[2].experience == 99

    def test_negative_experience(self, state: GameState, game_settings: GameSettings) -> None:
        """Test negative skill experience is reset."""
        state.characters["ryan"].skills[0].experience = -5
        repair_game_state(state, game_settings)
        assert state.characters["ryan"].skills[0].experience == 0

    def test_effects_resynced_from_catalog(self, state: GameState, game_settings: GameSettings) -> None:
        """Test stored ability effects are replaced by the catalog's."""
        ability = state.characters["ryan"].abilities[0]
        ability.effect = Effect(kind=EffectKind.SKILL_POINTS, params={"amount": 99})

        repair_game_state(state, game_settings)

        assert ability.effect == Effect()
