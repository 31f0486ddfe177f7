"""Tagged effects for abilities and upgrade nodes.

An effect is a ``{kind, params}`` value rather than a callable, so the whole
game state serializes losslessly. Two pure dispatchers interpret effects:

- ``stat_contributions`` reports the permanent stat bonuses an effect grants.
  These are folded into a character's stats whenever stats are recomputed.
- ``apply_effect`` performs the one-shot part of an effect (training rate
  multipliers, skill point refunds) on a character.

Example:
    >>> effect = Effect(kind=EffectKind.STAT_BONUS, params={"stat": "agility", "amount": 2})
    >>> stat_contributions(effect)
    {<Stat.AGILITY: 'agility'>: 2.0}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from idle_heroes.core.exceptions import ValidationError
from idle_heroes.models.base import GameModel
from idle_heroes.models.enums import EffectKind, SkillType, Stat


if TYPE_CHECKING:
    from idle_heroes.models.character import Character


class Effect(GameModel):
    """A serializable effect description.

    Attributes:
        kind: Which dispatcher branch interprets the params.
        params: Kind-specific parameters (see ``EffectKind``).
    """

    kind: EffectKind = Field(default=EffectKind.NONE)
    params: dict[str, Any] = Field(default_factory=dict)


def _param(effect: Effect, name: str) -> Any:
    try:
        return effect.params[name]
    except KeyError:
        raise ValidationError(
            f"Effect '{effect.kind}' is missing parameter '{name}'",
            field_name=name,
        ) from None


def stat_contributions(effect: Effect) -> dict[Stat, float]:
    """Return the permanent stat bonuses granted by an effect.

    Args:
        effect: The effect to interpret.

    Returns:
        Mapping of stat to flat bonus; empty for non-stat effects.

    Raises:
        ValidationError: If a stat bonus effect has malformed params.
    """
    if effect.kind != EffectKind.STAT_BONUS:
        return {}
    try:
        stat = Stat(_param(effect, "stat"))
        amount = float(_param(effect, "amount"))
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Invalid stat bonus effect: {exc}",
            field_name="params",
            invalid_value=effect.params,
        ) from exc
    return {stat: amount}


def apply_effect(effect: Effect, character: Character) -> bool:
    """Apply the one-shot part of an effect to a character.

    Stat bonuses are not applied here; they are permanent and picked up by
    stat recomputation.

    Args:
        effect: The effect to apply.
        character: Character to mutate.

    Returns:
        True if the character was changed.

    Raises:
        ValidationError: If the params are malformed or name a skill the
            character does not have.
    """
    if effect.kind == EffectKind.TRAINING_RATE:
        try:
            skill_type = SkillType(_param(effect, "skill"))
            multiplier = float(_param(effect, "multiplier"))
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Invalid training rate effect: {exc}",
                field_name="params",
                invalid_value=effect.params,
            ) from exc
        if multiplier <= 0:
            raise ValidationError(
                "Training rate multiplier must be positive",
                field_name="multiplier",
                invalid_value=multiplier,
            )
        skill = character.get_skill(skill_type)
        if skill is None:
            raise ValidationError(
                f"Character {character.id} has no {skill_type} skill",
                field_name="skill",
                invalid_value=skill_type,
            )
        skill.training_rate *= multiplier
        return True

    if effect.kind == EffectKind.SKILL_POINTS:
        try:
            amount = int(_param(effect, "amount"))
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Invalid skill point effect: {exc}",
                field_name="amount",
                invalid_value=effect.params.get("amount"),
            ) from exc
        if character.skill_points + amount < 0:
            raise ValidationError(
                "Skill point effect would leave a negative balance",
                field_name="amount",
                invalid_value=amount,
            )
        character.skill_points += amount
        return amount != 0

    return False


__all__ = [
    "Effect",
    "apply_effect",
    "stat_contributions",
]
