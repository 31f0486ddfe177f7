"""Enumeration types for the Idle Heroes progression engine.

Character classes, trainable skill types, mission strength tags, and the
kinds of tagged effects carried by abilities and upgrade nodes.
"""

from __future__ import annotations

from enum import StrEnum


class CharacterClass(StrEnum):
    """Archetype of a roster character.

    Distinct classes among a team contribute to synergy.
    """

    MATHEMATICIAN = "mathematician"
    DECEIVER = "deceiver"
    DATA_MASTER = "data_master"
    SUPPORT = "support"
    BOX_MAKER = "box_maker"
    SOCIAL_TRAINER = "social_trainer"
    MAVERICK = "maverick"
    MEDIC = "medic"
    VERSATILE = "versatile"
    SPEEDSTER = "speedster"
    WARDEN = "warden"


class SkillType(StrEnum):
    """Category of a trainable skill."""

    COMBAT = "combat"
    TACTICS = "tactics"
    INTELLIGENCE = "intelligence"
    PERCEPTION = "perception"
    ENDURANCE = "endurance"
    CHARISMA = "charisma"
    STEALTH = "stealth"
    HACKING = "hacking"
    LEADERSHIP = "leadership"
    TEAMWORK = "teamwork"


class GameStrength(StrEnum):
    """Capability tag matched against mission requirements.

    Every character carries exactly one; a mission team must cover each
    required tag with at least one member.
    """

    FIRST_PERSON_MOVEMENT = "first_person_movement"
    TACTICAL_AREA_CONTROL = "tactical_area_control"
    GRINDING = "grinding"
    SNIPING = "sniping"
    PAINFUL_GAMES = "painful_games"
    PERSISTENT_TRAINING = "persistent_training"
    HIGH_GAME_MODE = "high_game_mode"
    TEAM_SUPPORT = "team_support"
    JACK_OF_ALL_TRADES = "jack_of_all_trades"
    ADDICTION = "addiction"
    UNBREAKABLE_PATIENCE = "unbreakable_patience"


class Stat(StrEnum):
    """The four base stats a skill or upgrade can raise."""

    STRENGTH = "strength"
    AGILITY = "agility"
    INTELLIGENCE = "intelligence"
    CHARISMA = "charisma"


class EffectKind(StrEnum):
    """Discriminator of a tagged effect.

    Effects are plain data interpreted by ``idle_heroes.models.effects``.
    """

    NONE = "none"
    """Presentation-only hook with no simulated effect."""

    STAT_BONUS = "stat_bonus"
    """Flat bonus to one base stat: ``{"stat": Stat, "amount": float}``."""

    TRAINING_RATE = "training_rate"
    """Multiplies one skill's training rate: ``{"skill": SkillType, "multiplier": float}``."""

    SKILL_POINTS = "skill_points"
    """Refunds skill points: ``{"amount": int}``."""


__all__ = [
    "CharacterClass",
    "SkillType",
    "GameStrength",
    "Stat",
    "EffectKind",
]
