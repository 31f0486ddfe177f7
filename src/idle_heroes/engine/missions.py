"""Mission generation.

The general generator scales difficulty with the size of the unlocked
roster and picks one of a fixed set of archetypes. A separate, fixed set of
starter missions seeds the pool the first time the player owns a team.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from uuid import uuid4

from idle_heroes.core.logging import get_logger
from idle_heroes.models.enums import GameStrength
from idle_heroes.models.mission import Mission, Resources


logger = get_logger(__name__)

BASE_MISSION_DURATION = 60.0
DIFFICULTY_PER_UNLOCKED = 0.2
REQUIRED_STRENGTH_COUNT = 2


@dataclass(frozen=True)
class MissionArchetype:
    """Template a generated mission is rolled from.

    Attributes:
        name: Mission name.
        description: Flavor text.
        difficulty_modifier: Multiplier applied to the difficulty baseline.
        gold: Base gold reward (scaled by final difficulty).
        data_points: Base data reward (scaled by final difficulty).
        team_morale: Morale reward (not scaled).
        adaptation_tokens: Token reward (not scaled).
        strength_pool: Tags the mission may require.
    """

    name: str
    description: str
    difficulty_modifier: float
    gold: float
    data_points: float
    team_morale: float
    adaptation_tokens: float
    strength_pool: tuple[GameStrength, ...]


@dataclass(frozen=True)
class StarterMission:
    """A fixed mission template used to seed the first mission pool.

    Like archetypes, starter missions draw their required strengths from a
    pool; their difficulty and rewards are fixed.
    """

    name: str
    description: str
    difficulty: float
    rewards: Resources
    strength_pool: tuple[GameStrength, ...]


S = GameStrength

MISSION_ARCHETYPES: tuple[MissionArchetype, ...] = (
    MissionArchetype(
        "Resource Gathering", "Collect vital resources for the team.",
        0.8, 200, 100, 3, 1,
        (S.GRINDING, S.PERSISTENT_TRAINING, S.JACK_OF_ALL_TRADES, S.ADDICTION,
         S.UNBREAKABLE_PATIENCE),
    ),
    MissionArchetype(
        "Tactical Operation", "Execute a precise maneuver requiring coordination.",
        1.2, 150, 150, 5, 2,
        (S.TACTICAL_AREA_CONTROL, S.TEAM_SUPPORT, S.JACK_OF_ALL_TRADES, S.HIGH_GAME_MODE),
    ),
    MissionArchetype(
        "Speed Run", "Complete an objective as quickly as possible.",
        1.0, 120, 120, 8, 2,
        (S.ADDICTION, S.FIRST_PERSON_MOVEMENT, S.SNIPING, S.HIGH_GAME_MODE),
    ),
    MissionArchetype(
        "Endurance Test", "A challenging test that pushes the team's limits.",
        1.5, 300, 300, 10, 3,
        (S.PAINFUL_GAMES, S.PERSISTENT_TRAINING, S.GRINDING, S.TEAM_SUPPORT,
         S.UNBREAKABLE_PATIENCE),
    ),
    MissionArchetype(
        "Covert Infiltration", "Sneak into a secured location to retrieve valuable information.",
        1.3, 250, 200, 7, 2,
        (S.SNIPING, S.FIRST_PERSON_MOVEMENT, S.JACK_OF_ALL_TRADES, S.TACTICAL_AREA_CONTROL,
         S.UNBREAKABLE_PATIENCE),
    ),
    MissionArchetype(
        "Digital Heist", "Break through digital security systems to access restricted data.",
        1.4, 150, 350, 6, 2,
        (S.HIGH_GAME_MODE, S.JACK_OF_ALL_TRADES, S.TACTICAL_AREA_CONTROL, S.PERSISTENT_TRAINING),
    ),
    MissionArchetype(
        "Diplomatic Negotiation", "Negotiate favorable terms with rival factions.",
        0.9, 300, 150, 12, 1,
        (S.TEAM_SUPPORT, S.JACK_OF_ALL_TRADES, S.HIGH_GAME_MODE, S.GRINDING),
    ),
    MissionArchetype(
        "Combat Arena", "Prove your team's combat prowess in a battle arena.",
        1.6, 400, 100, 8, 3,
        (S.PAINFUL_GAMES, S.SNIPING, S.FIRST_PERSON_MOVEMENT, S.ADDICTION),
    ),
    MissionArchetype(
        "Long Surveillance", "Monitor a target location for extended periods to gather intelligence.",
        1.2, 250, 250, 5, 2,
        (S.UNBREAKABLE_PATIENCE, S.SNIPING, S.PERSISTENT_TRAINING),
    ),
)

STARTER_MISSIONS: tuple[StarterMission, ...] = (
    StarterMission(
        "Training Exercise", "A simple training mission to test your team's coordination.",
        1.0, Resources(gold=150, data_points=75, team_morale=5, adaptation_tokens=1),
        (S.TEAM_SUPPORT, S.JACK_OF_ALL_TRADES, S.PERSISTENT_TRAINING, S.UNBREAKABLE_PATIENCE),
    ),
    StarterMission(
        "Data Collection", "Gather important information from various sources.",
        1.5, Resources(gold=100, data_points=200, team_morale=3, adaptation_tokens=1),
        (S.GRINDING, S.SNIPING, S.HIGH_GAME_MODE, S.UNBREAKABLE_PATIENCE),
    ),
    StarterMission(
        "Strategic Planning", "Develop a tactical approach to an upcoming challenge.",
        2.0, Resources(gold=200, data_points=150, team_morale=10, adaptation_tokens=2),
        (S.TACTICAL_AREA_CONTROL, S.JACK_OF_ALL_TRADES, S.TEAM_SUPPORT),
    ),
    StarterMission(
        "Guard Duty", "Keep watch over valuable team assets and guard against threats.",
        1.3, Resources(gold=175, data_points=100, team_morale=6, adaptation_tokens=1),
        (S.UNBREAKABLE_PATIENCE, S.PERSISTENT_TRAINING, S.TEAM_SUPPORT),
    ),
)

del S


def new_mission_id() -> str:
    """Generate a unique mission id."""
    return f"mission_{uuid4().hex[:12]}"


class MissionGenerator:
    """Rolls new missions from the archetype table.

    Example:
        >>> generator = MissionGenerator(random.Random(7))
        >>> mission = generator.generate(unlocked_count=1)
        >>> len(mission.required_strengths)
        2
    """

    def __init__(
        self,
        rng: random.Random,
        *,
        archetypes: tuple[MissionArchetype, ...] = MISSION_ARCHETYPES,
    ) -> None:
        """Initialize the generator.

        Args:
            rng: Source of all random choices.
            archetypes: Archetype table to draw from.
        """
        self._rng = rng
        self._archetypes = archetypes

    def generate(self, unlocked_count: int) -> Mission:
        """Generate one mission for the available pool.

        Args:
            unlocked_count: Number of unlocked characters, which sets the
                difficulty baseline.

        Returns:
            A fresh mission at 0% progress with no assigned characters.
        """
        archetype = self._rng.choice(self._archetypes)
        baseline = 1 + unlocked_count * DIFFICULTY_PER_UNLOCKED
        difficulty = baseline * archetype.difficulty_modifier

        required = self._pick_strengths(archetype.strength_pool)

        mission = Mission(
            id=new_mission_id(),
            name=archetype.name,
            description=archetype.description,
            duration=BASE_MISSION_DURATION * difficulty,
            difficulty=difficulty,
            rewards=Resources(
                gold=math.floor(archetype.gold * difficulty),
                data_points=math.floor(archetype.data_points * difficulty),
                team_morale=math.floor(archetype.team_morale),
                adaptation_tokens=archetype.adaptation_tokens,
            ),
            required_strengths=required,
        )
        logger.debug(
            "Mission generated",
            mission_id=mission.id,
            archetype=archetype.name,
            difficulty=round(difficulty, 3),
        )
        return mission

    def starter_missions(self) -> list[Mission]:
        """Build the fixed starter mission set."""
        return [
            Mission(
                id=new_mission_id(),
                name=starter.name,
                description=starter.description,
                duration=BASE_MISSION_DURATION,
                difficulty=starter.difficulty,
                rewards=starter.rewards.model_copy(),
                required_strengths=self._pick_strengths(starter.strength_pool),
            )
            for starter in STARTER_MISSIONS
        ]

    def _pick_strengths(self, pool: tuple[GameStrength, ...]) -> list[GameStrength]:
        """Pick up to two distinct tags from a pool without replacement."""
        return self._rng.sample(list(pool), min(REQUIRED_STRENGTH_COUNT, len(pool)))


__all__ = [
    "MISSION_ARCHETYPES",
    "STARTER_MISSIONS",
    "MissionArchetype",
    "MissionGenerator",
    "StarterMission",
    "new_mission_id",
]
