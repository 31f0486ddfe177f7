"""Repair pass run on every loaded game state.

Migrations fix the *shape* of old records; repair fixes *values* that are
well-formed but inconsistent with the catalog or with the engine's
invariants. Repair never fails: every anomaly is corrected and logged.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from idle_heroes.core.config import GameSettings
from idle_heroes.core.logging import get_logger
from idle_heroes.models.catalog import get_catalog
from idle_heroes.models.character import Character, Skill
from idle_heroes.models.game_state import GameState


logger = get_logger(__name__)


def _resync_effects(character: Character, definition: Character) -> None:
    """Copy ability and upgrade effects from the catalog by id, then index."""
    abilities_by_id = {a.id: a for a in definition.abilities}
    for index, ability in enumerate(character.abilities):
        source = abilities_by_id.get(ability.id)
        if source is None and index < len(definition.abilities):
            source = definition.abilities[index]
        if source is not None:
            ability.effect = source.effect.model_copy(deep=True)

    nodes_by_id = {n.id: n for n in definition.upgrade_tree}
    for index, node in enumerate(character.upgrade_tree):
        source = nodes_by_id.get(node.id)
        if source is None and index < len(definition.upgrade_tree):
            source = definition.upgrade_tree[index]
        if source is not None:
            node.effect = source.effect.model_copy(deep=True)


def _repair_skill(
    character_id: str,
    skill: Skill,
    definition: Character | None,
    fallback_rate: float,
) -> None:
    if skill.level > skill.max_level:
        logger.warning(
            "Clamped skill level",
            character_id=character_id,
            skill=skill.type,
            level=skill.level,
            max_level=skill.max_level,
        )
        skill.level = skill.max_level

    if skill.experience_to_next_level <= 0:
        skill.experience_to_next_level = float(math.floor(100 * 1.5 ** (skill.level - 1)))

    if skill.experience < 0:
        skill.experience = 0.0
    elif skill.is_maxed:
        skill.experience = 0.0
    elif skill.experience >= skill.experience_to_next_level:
        skill.experience = max(0.0, skill.experience_to_next_level - 1)

    if skill.training_rate <= 0:
        source = definition.get_skill(skill.type) if definition is not None else None
        rate = source.training_rate if source is not None and source.training_rate > 0 else fallback_rate
        logger.warning(
            "Replaced non-positive training rate",
            character_id=character_id,
            skill=skill.type,
            training_rate=rate,
        )
        skill.training_rate = rate


def _repair_character(
    state: GameState,
    character: Character,
    definition: Character | None,
    settings: GameSettings,
) -> None:
    if definition is not None:
        _resync_effects(character, definition)

    for field_name in ("currently_training", "paused_training", "original_training"):
        skill_type = getattr(character, field_name)
        if skill_type is not None and not character.has_skill(skill_type):
            logger.warning(
                "Cleared unknown training target",
                character_id=character.id,
                field=field_name,
                skill=skill_type,
            )
            setattr(character, field_name, None)

    if state.is_character_on_mission(character.id) and character.currently_training is not None:
        if character.paused_training is None:
            character.paused_training = character.currently_training
        character.currently_training = None

    for skill in character.skills:
        _repair_skill(character.id, skill, definition, settings.default_training_rate)


def _dedupe(ids: Sequence[str], known: dict[str, Character]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for cid in ids:
        if cid in known and cid not in seen:
            seen.add(cid)
            result.append(cid)
    return result


def repair_game_state(
    state: GameState,
    settings: GameSettings,
    catalog: tuple[Character, ...] | None = None,
) -> GameState:
    """Repair a freshly loaded game state in place.

    Args:
        state: State validated from storage.
        settings: Supplies the fallback training rate.
        catalog: Reference catalog; defaults to the built-in one.

    Returns:
        The same state object, repaired.
    """
    definitions = get_catalog() if catalog is None else catalog
    by_id = {d.id: d for d in definitions}

    for definition in definitions:
        if definition.id not in state.characters:
            logger.info("Restored missing catalog character", character_id=definition.id)
            state.characters[definition.id] = definition.model_copy(deep=True)

    state.unlocked_characters = _dedupe(state.unlocked_characters, state.characters)
    state.active_character_ids = _dedupe(state.active_character_ids, state.characters)
    if not state.active_character_ids and state.unlocked_characters:
        promoted = state.unlocked_characters[0]
        logger.warning("Active roster empty, promoting first unlocked character", character_id=promoted)
        state.active_character_ids = [promoted]

    for mission in list(state.current_missions):
        mission.assigned_characters = _dedupe(mission.assigned_characters, state.characters)
        if not mission.assigned_characters:
            logger.warning("Returned unassigned mission to pool", mission_id=mission.id)
            state.current_missions.remove(mission)
            mission.completion_progress = 0.0
            state.missions.append(mission)

    for character in state.characters.values():
        _repair_character(state, character, by_id.get(character.id), settings)

    return state


__all__ = ["repair_game_state"]
