"""Character, skill, ability, and upgrade models.

A Character is one roster entry. The game state stores each character
exactly once (keyed by id); "active" and "unlocked" are id lists, so there
is never a second copy of a character to keep in sync.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from idle_heroes.models.base import GameModel
from idle_heroes.models.effects import Effect
from idle_heroes.models.enums import CharacterClass, GameStrength, SkillType, Stat


Level = Annotated[int, Field(ge=1, description="Level (1-based)")]


class Ability(GameModel):
    """An unlockable ability.

    Abilities are presentation hooks: the engine reports when one becomes
    available but does not simulate its effect.
    """

    id: str
    name: str
    description: str = ""
    cooldown: float = Field(default=0, ge=0, description="Cooldown in seconds (0 = passive)")
    unlock_level: Level = 1
    icon: str = ""
    effect: Effect = Field(default_factory=Effect)


class UpgradeNode(GameModel):
    """A node of a character's upgrade tree, bought with skill points."""

    id: str
    name: str
    description: str = ""
    cost: int = Field(default=1, ge=0)
    unlocked: bool = False
    required_nodes: list[str] = Field(default_factory=list)
    effect: Effect = Field(default_factory=Effect)


class SkillBonuses(GameModel):
    """Sparse per-level bonuses granted by a skill.

    Each value is multiplied by the skill's level when applied. Stat
    bonuses are baked into the character's stats; the other three are read
    where they matter (idle accrual, mission speed, abilities).
    """

    strength: float | None = None
    agility: float | None = None
    intelligence: float | None = None
    charisma: float | None = None
    resource_gain: float | None = None
    mission_speed: float | None = None
    ability_effectiveness: float | None = None

    def stat_bonus(self, stat: Stat) -> float:
        """Get the per-level bonus for a base stat (0 when absent)."""
        return getattr(self, stat.value) or 0.0


class Skill(GameModel):
    """A trainable per-character skill.

    Attributes:
        type: Skill category; unique within a character.
        level: Current level, never above max_level.
        experience: Progress toward the next level.
        experience_to_next_level: Threshold that triggers a level-up.
        training_rate: Experience gained per second while training.
        bonuses: Per-level bonuses.
    """

    type: SkillType
    name: str
    description: str = ""
    level: Level = 1
    max_level: Level = 10
    experience: float = 0.0
    experience_to_next_level: float = 100.0
    training_rate: float = 0.5
    bonuses: SkillBonuses = Field(default_factory=SkillBonuses)

    @property
    def is_maxed(self) -> bool:
        """Check whether the skill has reached its maximum level."""
        return self.level >= self.max_level


class Character(GameModel):
    """A roster character.

    Training state:
        currently_training: Skill accruing experience right now. Always None
            while the character is assigned to an in-progress mission.
        paused_training: Skill that was training when the current mission
            started.
        original_training: Skill to restore once a mission (or a chain of
            auto-missions) ends.
    """

    id: str
    name: str
    character_class: CharacterClass
    game_strength: GameStrength
    level: Level = 1
    experience: float = Field(default=0.0, ge=0)
    abilities: list[Ability] = Field(default_factory=list)
    background: str = ""
    portrait: str = ""

    strength: float = 0.0
    agility: float = 0.0
    intelligence: float = 0.0
    charisma: float = 0.0

    skill_points: int = Field(default=0, ge=0)
    upgrade_tree: list[UpgradeNode] = Field(default_factory=list)

    skills: list[Skill] = Field(default_factory=list)
    currently_training: SkillType | None = None
    paused_training: SkillType | None = None
    original_training: SkillType | None = None

    def get_skill(self, skill_type: SkillType | str) -> Skill | None:
        """Find a skill by type."""
        for skill in self.skills:
            if skill.type == skill_type:
                return skill
        return None

    def has_skill(self, skill_type: SkillType | str) -> bool:
        """Check whether the character has a skill of the given type."""
        return self.get_skill(skill_type) is not None

    def get_upgrade(self, upgrade_id: str) -> UpgradeNode | None:
        """Find an upgrade node by id."""
        for node in self.upgrade_tree:
            if node.id == upgrade_id:
                return node
        return None

    def unlocked_abilities(self) -> list[Ability]:
        """Abilities available at the character's current level."""
        return [a for a in self.abilities if a.unlock_level <= self.level]

    def get_stat(self, stat: Stat) -> float:
        """Read a base stat by enum."""
        return getattr(self, stat.value)

    @property
    def resource_gain_bonus(self) -> float:
        """Fractional idle gain bonus summed over skills, scaled by level."""
        return sum((s.bonuses.resource_gain or 0.0) * s.level for s in self.skills)

    @property
    def mission_speed_bonus(self) -> float:
        """Fractional mission speed bonus summed over skills, scaled by level."""
        return sum((s.bonuses.mission_speed or 0.0) * s.level for s in self.skills)


__all__ = [
    "Ability",
    "Character",
    "Level",
    "Skill",
    "SkillBonuses",
    "UpgradeNode",
]
