"""Tests for mission generation."""

from __future__ import annotations

import math
import random

import pytest

from idle_heroes.engine.missions import (
    MISSION_ARCHETYPES,
    STARTER_MISSIONS,
    MissionArchetype,
    MissionGenerator,
)
from idle_heroes.models import GameStrength


@pytest.fixture
def generator(rng: random.Random) -> MissionGenerator:
    """Generator with a seeded random source."""
    return MissionGenerator(rng)


class TestGenerate:
    """Tests for MissionGenerator.generate."""

    def test_fresh_mission(self, generator: MissionGenerator) -> None:
        """Test generated missions start unassigned at zero progress."""
        mission = generator.generate(unlocked_count=1)

        assert mission.id.startswith("mission_")
        assert mission.completion_progress == 0.0
        assert mission.assigned_characters == []
        assert mission.name in {a.name for a in MISSION_ARCHETYPES}

    def test_two_distinct_strengths_from_pool(self, generator: MissionGenerator) -> None:
        """Test requirements are two distinct tags from the archetype pool."""
        for _ in range(50):
            mission = generator.generate(unlocked_count=3)
            archetype = next(a for a in MISSION_ARCHETYPES if a.name == mission.name)
            assert len(mission.required_strengths) == 2
            assert len(set(mission.required_strengths)) == 2
            assert set(mission.required_strengths) <= set(archetype.strength_pool)

    def test_difficulty_and_rewards_scale(self) -> None:
        """Test difficulty follows roster size and rewards follow difficulty."""
        archetype = MissionArchetype(
            "Only", "Single archetype.", 1.5, 200, 100, 7.9, 2,
            (GameStrength.GRINDING, GameStrength.SNIPING),
        )
        generator = MissionGenerator(random.Random(1), archetypes=(archetype,))

        mission = generator.generate(unlocked_count=5)

        assert mission.difficulty == pytest.approx(3.0)
        assert mission.duration == pytest.approx(180.0)
        assert mission.rewards.gold == 600
        assert mission.rewards.data_points == 300
        assert mission.rewards.team_morale == 7
        assert mission.rewards.adaptation_tokens == 2

    def test_rewards_are_floored(self) -> None:
        """Test scaled rewards drop fractions."""
        archetype = MissionArchetype(
            "Only", "Single archetype.", 1.0, 150, 150, 5, 1,
            (GameStrength.GRINDING, GameStrength.SNIPING),
        )
        generator = MissionGenerator(random.Random(1), archetypes=(archetype,))

        mission = generator.generate(unlocked_count=1)

        assert mission.difficulty == pytest.approx(1.2)
        assert mission.rewards.gold == math.floor(150 * 1.2)

    def test_unique_ids(self, generator: MissionGenerator) -> None:
        """Test every mission gets its own id."""
        ids = {generator.generate(unlocked_count=1).id for _ in range(100)}
        assert len(ids) == 100


class TestStarterMissions:
    """Tests for the starter mission set."""

    def test_fixed_set(self, generator: MissionGenerator) -> None:
        """Test starter missions mirror their templates."""
        missions = generator.starter_missions()

        assert [m.name for m in missions] == [s.name for s in STARTER_MISSIONS]
        for mission, template in zip(missions, STARTER_MISSIONS):
            assert mission.difficulty == template.difficulty
            assert mission.rewards == template.rewards
            assert mission.duration == 60.0
            assert len(mission.required_strengths) == 2
            assert set(mission.required_strengths) <= set(template.strength_pool)

    def test_rewards_are_copies(self, generator: MissionGenerator) -> None:
        """Test starter rewards never alias the template."""
        missions = generator.starter_missions()
        missions[0].rewards.gold += 1
        assert STARTER_MISSIONS[0].rewards.gold == 150
