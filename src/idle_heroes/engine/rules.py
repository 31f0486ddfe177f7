"""Game rules shared by the live tick and offline reconciliation.

Every formula the engine applies lives here as a pure function, so the
live engine and the offline fast-forward can never disagree about rates,
synergy, or mission speed.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from idle_heroes.models.catalog import (
    DATA_SPECIALIST_ID,
    DATA_SPECIALIST_MULTIPLIER,
    SYNERGY_COMBOS,
)
from idle_heroes.models.character import Character
from idle_heroes.models.effects import stat_contributions
from idle_heroes.models.enums import GameStrength, Stat
from idle_heroes.models.game_state import GameState
from idle_heroes.models.mission import Mission


GOLD_PER_LEVEL = 0.5
DATA_PER_INTELLIGENCE = 0.2
SYNERGY_PER_CLASS = 5.0
SYNERGY_COMBO_BONUS = 10.0
MISSION_XP_PER_DIFFICULTY = 10.0
SKILL_THRESHOLD_GROWTH = 1.5


# =============================================================================
# Leveling
# =============================================================================


def xp_for_next_level(level: int) -> int:
    """Character experience required to advance from ``level``.

    >>> [xp_for_next_level(n) for n in (1, 2, 3)]
    [100, 150, 225]
    """
    return math.floor(100 * 1.5 ** (level - 1))


def recompute_stats(character: Character, definition: Character | None) -> None:
    """Rebuild a character's four base stats.

    Stats are the catalog baseline plus every skill's flat stat bonus times
    the skill's level, plus the stat bonuses of unlocked upgrade nodes.
    Resource gain, mission speed, and ability effectiveness are contextual
    and never baked into stats.

    Args:
        character: Character to update in place.
        definition: Catalog definition supplying the baseline. When None
            the character's stats are left unchanged.
    """
    if definition is None:
        return

    totals = {stat: definition.get_stat(stat) for stat in Stat}
    for skill in character.skills:
        for stat in Stat:
            totals[stat] += skill.bonuses.stat_bonus(stat) * skill.level
    for node in character.upgrade_tree:
        if node.unlocked:
            for stat, amount in stat_contributions(node.effect).items():
                totals[stat] += amount

    for stat, value in totals.items():
        setattr(character, stat.value, value)


# =============================================================================
# Idle Accrual
# =============================================================================


def resource_gain_bonus(character: Character) -> float:
    """Fractional idle gain bonus of a character."""
    return character.resource_gain_bonus


def data_multiplier(state: GameState) -> float:
    """Idle data multiplier, boosted while the data specialist is unlocked."""
    if state.is_unlocked(DATA_SPECIALIST_ID):
        return DATA_SPECIALIST_MULTIPLIER
    return 1.0


def idle_gold_rate(state: GameState) -> float:
    """Gold per second produced by the active roster."""
    return sum(
        c.level * GOLD_PER_LEVEL * (1 + resource_gain_bonus(c))
        for c in state.active_characters
    )


def idle_data_rate(state: GameState) -> float:
    """Data points per second produced by the active roster."""
    multiplier = data_multiplier(state)
    return sum(
        c.intelligence * DATA_PER_INTELLIGENCE * multiplier * (1 + resource_gain_bonus(c))
        for c in state.active_characters
    )


# =============================================================================
# Missions
# =============================================================================


def covers_required_strengths(
    required: Iterable[GameStrength],
    characters: Iterable[Character],
) -> bool:
    """Check that every required strength is held by some character."""
    held = {c.game_strength for c in characters}
    return all(strength in held for strength in required)


def strength_coverage(mission: Mission, characters: Sequence[Character]) -> float:
    """Fraction of a mission's required strengths the team covers.

    A mission without requirements is fully covered.
    """
    if not mission.required_strengths:
        return 1.0
    held = {c.game_strength for c in characters}
    covered = sum(1 for s in mission.required_strengths if s in held)
    return covered / len(mission.required_strengths)


def mission_team_synergy(characters: Sequence[Character]) -> float:
    """Mission-local synergy: points per distinct class in the team."""
    return SYNERGY_PER_CLASS * len({c.character_class for c in characters})


def mission_speed_bonus(characters: Sequence[Character]) -> float:
    """Summed mission speed bonus of a team."""
    return sum(c.mission_speed_bonus for c in characters)


def mission_progress_rate(mission: Mission, characters: Sequence[Character]) -> float:
    """Progress percentage per second of a mission with the given team.

    Args:
        mission: The mission being worked on.
        characters: The assigned team, resolved from the character store.

    Returns:
        Percentage points of completion gained per second.
    """
    rate = 1.0
    rate *= 1 + mission_team_synergy(characters) / 100
    rate *= 0.5 + 0.5 * strength_coverage(mission, characters)
    rate /= mission.difficulty
    rate *= 1 + mission_speed_bonus(characters)
    return rate


def assigned_team(state: GameState, mission: Mission) -> list[Character]:
    """Resolve a mission's assigned ids against the character store."""
    return [state.characters[cid] for cid in mission.assigned_characters if cid in state.characters]


def time_to_complete(state: GameState, mission: Mission) -> float:
    """Seconds until a mission reaches full progress at its current rate."""
    remaining = max(0.0, 100.0 - mission.completion_progress)
    if remaining == 0:
        return 0.0
    rate = mission_progress_rate(mission, assigned_team(state, mission))
    if rate <= 0:
        return math.inf
    return remaining / rate


# =============================================================================
# Team Synergy
# =============================================================================


def team_synergy(characters: Sequence[Character]) -> float:
    """Global roster synergy.

    Five points per distinct class among the given characters plus a flat
    bonus for each named pair that is fully present.
    """
    synergy = SYNERGY_PER_CLASS * len({c.character_class for c in characters})
    present = {c.id for c in characters}
    for first, second in SYNERGY_COMBOS:
        if first in present and second in present:
            synergy += SYNERGY_COMBO_BONUS
    return synergy


__all__ = [
    "GOLD_PER_LEVEL",
    "DATA_PER_INTELLIGENCE",
    "MISSION_XP_PER_DIFFICULTY",
    "SKILL_THRESHOLD_GROWTH",
    "SYNERGY_COMBO_BONUS",
    "SYNERGY_PER_CLASS",
    "assigned_team",
    "covers_required_strengths",
    "data_multiplier",
    "idle_data_rate",
    "idle_gold_rate",
    "mission_progress_rate",
    "mission_speed_bonus",
    "mission_team_synergy",
    "recompute_stats",
    "resource_gain_bonus",
    "strength_coverage",
    "team_synergy",
    "time_to_complete",
    "xp_for_next_level",
]
