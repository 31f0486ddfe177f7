"""Pydantic models for the Idle Heroes game state.

Exports:
    Enums: CharacterClass, SkillType, GameStrength, Stat, EffectKind
    Effects: Effect, apply_effect, stat_contributions
    Characters: Character, Skill, SkillBonuses, Ability, UpgradeNode
    Missions: Mission, Resources
    State: GameState, OfflineSummary, CURRENT_SCHEMA_VERSION
    Catalog: get_catalog, get_definition, new_roster, character_price
"""

from __future__ import annotations

from idle_heroes.models.base import GameModel
from idle_heroes.models.catalog import (
    DATA_SPECIALIST_ID,
    DATA_SPECIALIST_MULTIPLIER,
    SYNERGY_COMBOS,
    character_price,
    get_catalog,
    get_definition,
    new_roster,
)
from idle_heroes.models.character import (
    Ability,
    Character,
    Skill,
    SkillBonuses,
    UpgradeNode,
)
from idle_heroes.models.effects import Effect, apply_effect, stat_contributions
from idle_heroes.models.enums import (
    CharacterClass,
    EffectKind,
    GameStrength,
    SkillType,
    Stat,
)
from idle_heroes.models.game_state import (
    CURRENT_SCHEMA_VERSION,
    GameState,
    OfflineSummary,
)
from idle_heroes.models.mission import Mission, Resources


__all__ = [
    # Base
    "GameModel",
    # Enums
    "CharacterClass",
    "SkillType",
    "GameStrength",
    "Stat",
    "EffectKind",
    # Effects
    "Effect",
    "apply_effect",
    "stat_contributions",
    # Characters
    "Ability",
    "Character",
    "Skill",
    "SkillBonuses",
    "UpgradeNode",
    # Missions
    "Mission",
    "Resources",
    # State
    "CURRENT_SCHEMA_VERSION",
    "GameState",
    "OfflineSummary",
    # Catalog
    "DATA_SPECIALIST_ID",
    "DATA_SPECIALIST_MULTIPLIER",
    "SYNERGY_COMBOS",
    "character_price",
    "get_catalog",
    "get_definition",
    "new_roster",
]
