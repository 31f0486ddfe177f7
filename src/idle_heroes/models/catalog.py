"""Static reference catalog of playable characters.

Definitions are level-1 baselines. The engine never mutates them; every
game works on the deep copies returned by ``new_roster()``.

Example:
    >>> roster = new_roster()
    >>> roster["josiah"].character_class
    <CharacterClass.DATA_MASTER: 'data_master'>
"""

from __future__ import annotations

import math

from idle_heroes.models.character import Ability, Character, Skill, SkillBonuses
from idle_heroes.models.enums import CharacterClass, GameStrength, SkillType


DATA_SPECIALIST_ID = "josiah"
"""Character whose unlock boosts everyone's idle data accrual."""

DATA_SPECIALIST_MULTIPLIER = 1.5

SYNERGY_COMBOS: tuple[tuple[str, str], ...] = (
    ("daniel", "kyle"),
    ("vinny", "ben"),
)
"""Pairs that grant a flat synergy bonus when both are active."""


def _skill(
    skill_type: SkillType,
    name: str,
    description: str,
    training_rate: float,
    **bonuses: float,
) -> Skill:
    return Skill(
        type=skill_type,
        name=name,
        description=description,
        training_rate=training_rate,
        bonuses=SkillBonuses(**bonuses),
    )


def _ability(
    ability_id: str,
    name: str,
    description: str,
    cooldown: float,
    unlock_level: int,
    icon: str,
) -> Ability:
    return Ability(
        id=ability_id,
        name=name,
        description=description,
        cooldown=cooldown,
        unlock_level=unlock_level,
        icon=icon,
    )


def _build_catalog() -> tuple[Character, ...]:
    return (
        Character(
            id="ryan",
            name="Ryan",
            character_class=CharacterClass.MATHEMATICIAN,
            game_strength=GameStrength.FIRST_PERSON_MOVEMENT,
            strength=3, agility=8, intelligence=10, charisma=6,
            background="Solves problems with numbers and gets up before everyone else.",
            abilities=[
                _ability("quick_calculations", "Quick Calculations",
                         "Optimizes resource generation rates.", 30, 1, "calculator"),
                _ability("sleep_recharge", "Sleep Recharge",
                         "Rests to recover and boost the next mission.", 120, 3, "bed"),
                _ability("early_bird", "Early Bird Advantage",
                         "Starts the day ahead of every rival.", 300, 5, "sunrise"),
            ],
            skills=[
                _skill(SkillType.INTELLIGENCE, "Mathematical Analysis",
                       "Breaks problems down into solvable parts.", 0.5,
                       intelligence=1, mission_speed=0.05),
                _skill(SkillType.PERCEPTION, "Pattern Recognition",
                       "Spots the pattern before anyone else.", 0.4,
                       agility=0.5, ability_effectiveness=0.05),
                _skill(SkillType.ENDURANCE, "Early Riser",
                       "Gets more done by starting earlier.", 0.3,
                       strength=0.3, resource_gain=0.1),
            ],
        ),
        Character(
            id="daniel",
            name="Daniel",
            character_class=CharacterClass.DECEIVER,
            game_strength=GameStrength.TACTICAL_AREA_CONTROL,
            strength=5, agility=7, intelligence=8, charisma=9,
            background="Talks his way into anything and controls the map while doing it.",
            abilities=[
                _ability("clever_misdirection", "Clever Misdirection",
                         "Confuses opponents to open an advantage.", 45, 1, "mask"),
                _ability("zone_domination", "Zone Domination",
                         "Locks down an area for the team.", 90, 3, "area"),
                _ability("banter_boost", "Banter Boost",
                         "Lifts team morale with quick wit.", 60, 5, "chat"),
            ],
            skills=[
                _skill(SkillType.TACTICS, "Tactical Deception",
                       "Wins by making the enemy guess wrong.", 0.5,
                       intelligence=0.5, ability_effectiveness=0.1),
                _skill(SkillType.CHARISMA, "Witty Banter",
                       "Keeps everyone talking and laughing.", 0.6,
                       charisma=1, mission_speed=0.05),
                _skill(SkillType.STEALTH, "Subtle Manipulation",
                       "Nudges outcomes without being noticed.", 0.4,
                       agility=0.7, resource_gain=0.05),
            ],
        ),
        Character(
            id="josiah",
            name="Josiah",
            character_class=CharacterClass.DATA_MASTER,
            game_strength=GameStrength.GRINDING,
            strength=4, agility=5, intelligence=10, charisma=3,
            background="Lives in his room with more data than anyone knows what to do with.",
            abilities=[
                _ability("algorithmic_insight", "Algorithmic Insight",
                         "Finds the optimal path through a problem.", 60, 1, "algorithm"),
                _ability("data_dump", "Data Dump",
                         "Floods the team with useful information.", 120, 3, "database"),
                _ability("room_lock", "Room Lock",
                         "Shuts out distractions to focus completely.", 90, 5, "door"),
            ],
            skills=[
                _skill(SkillType.HACKING, "Data Mining",
                       "Extracts value from raw data.", 0.6,
                       intelligence=1, resource_gain=0.15),
                _skill(SkillType.INTELLIGENCE, "Algorithm Optimization",
                       "Makes every process a little faster.", 0.5,
                       intelligence=0.8, mission_speed=0.1),
                _skill(SkillType.ENDURANCE, "Room Isolation",
                       "Works for hours without leaving.", 0.3,
                       strength=0.2, ability_effectiveness=0.08),
            ],
        ),
        Character(
            id="case",
            name="Case",
            character_class=CharacterClass.SUPPORT,
            game_strength=GameStrength.SNIPING,
            strength=5, agility=9, intelligence=7, charisma=8,
            background="A patient marksman who always has the team's back.",
            abilities=[
                _ability("supportive_aim", "Supportive Aim",
                         "Covers teammates from a distance.", 45, 1, "target"),
                _ability("empathy_boost", "Empathy Boost",
                         "Reads the room and steadies the team.", 60, 3, "heart"),
                _ability("adaptable_tactics", "Adaptable Tactics",
                         "Switches plans when things go wrong.", 90, 5, "arrows"),
            ],
            skills=[
                _skill(SkillType.PERCEPTION, "Precision Focus",
                       "Never misses the important detail.", 0.5,
                       agility=0.8, ability_effectiveness=0.1),
                _skill(SkillType.CHARISMA, "Supportive Presence",
                       "Makes everyone around him better.", 0.6,
                       charisma=1.2, mission_speed=0.05),
                _skill(SkillType.TEAMWORK, "Selfless Coordination",
                       "Puts the team's goals first.", 0.4,
                       intelligence=0.5, resource_gain=0.08),
            ],
        ),
        Character(
            id="ian",
            name="Ian",
            character_class=CharacterClass.BOX_MAKER,
            game_strength=GameStrength.PAINFUL_GAMES,
            strength=9, agility=6, intelligence=7, charisma=5,
            background="Builds boxes by day and plays the most punishing games by night.",
            abilities=[
                _ability("box_fortress", "Box Fortress",
                         "Builds cover out of whatever is nearby.", 50, 1, "shield"),
                _ability("tarkov_tolerance", "Tarkov Tolerance",
                         "Shrugs off losses that would break others.", 75, 3, "armor"),
                _ability("masochist_might", "Masochist's Might",
                         "Gets stronger the harder things get.", 120, 5, "fist"),
            ],
            skills=[
                _skill(SkillType.ENDURANCE, "Pain Tolerance",
                       "Keeps going long after others quit.", 0.7,
                       strength=1.0, ability_effectiveness=0.05),
                _skill(SkillType.COMBAT, "Brutal Efficiency",
                       "Ends fights quickly.", 0.6,
                       strength=0.8, agility=0.4),
                _skill(SkillType.TACTICS, "Box Construction",
                       "Turns cardboard into strategy.", 0.4,
                       intelligence=0.5, resource_gain=0.1),
            ],
        ),
        Character(
            id="ben",
            name="Ben",
            character_class=CharacterClass.SOCIAL_TRAINER,
            game_strength=GameStrength.PERSISTENT_TRAINING,
            strength=7, agility=6, intelligence=7, charisma=9,
            background="Keeps a daily log and keeps everyone else on schedule.",
            abilities=[
                _ability("motivational_hype", "Motivational Hype",
                         "Fires the team up before a push.", 60, 1, "megaphone"),
                _ability("daily_log", "Daily Log",
                         "Records progress so nothing is wasted.", 240, 3, "book"),
                _ability("unity_pulse", "Unity Pulse",
                         "Brings the team into sync.", 180, 5, "pulse"),
            ],
            skills=[
                _skill(SkillType.LEADERSHIP, "Motivational Training",
                       "Pushes people past their limits.", 0.6,
                       charisma=1.0, mission_speed=0.08),
                _skill(SkillType.ENDURANCE, "Persistent Work Ethic",
                       "Shows up every single day.", 0.5,
                       strength=0.7, ability_effectiveness=0.07),
                _skill(SkillType.TEAMWORK, "Social Cohesion",
                       "Holds the group together.", 0.7,
                       charisma=0.8, resource_gain=0.1),
            ],
        ),
        Character(
            id="rodney",
            name="Rodney",
            character_class=CharacterClass.MAVERICK,
            game_strength=GameStrength.HIGH_GAME_MODE,
            strength=6, agility=8, intelligence=9, charisma=7,
            background="Rides motorcycles, runs servers, and plays best when relaxed.",
            abilities=[
                _ability("motorcycle_mayhem", "Motorcycle Mayhem",
                         "Arrives fast and causes chaos.", 90, 1, "motorcycle"),
                _ability("server_overclock", "Server Overclock",
                         "Pushes the hardware past its limits.", 120, 3, "server"),
                _ability("high_enlightenment", "High Enlightenment",
                         "Sees solutions nobody else can.", 300, 5, "cloud"),
            ],
            skills=[
                _skill(SkillType.PERCEPTION, "Heightened Awareness",
                       "Notices everything.", 0.5,
                       intelligence=0.9, ability_effectiveness=0.12),
                _skill(SkillType.TACTICS, "System Architecture",
                       "Designs systems that scale.", 0.4,
                       intelligence=0.8, resource_gain=0.1),
                _skill(SkillType.COMBAT, "Motorcycle Maneuvering",
                       "Weaves through any obstacle.", 0.6,
                       agility=1.1, mission_speed=0.07),
            ],
        ),
        Character(
            id="vinny",
            name="Vinny",
            character_class=CharacterClass.MEDIC,
            game_strength=GameStrength.TEAM_SUPPORT,
            strength=4, agility=6, intelligence=9, charisma=8,
            background="Patches the team up and sends them back out.",
            abilities=[
                _ability("rapid_heal", "Rapid Heal",
                         "Gets a teammate back on their feet.", 45, 1, "medkit"),
                _ability("vitality_surge", "Vitality Surge",
                         "Restores energy across the team.", 75, 3, "pulse"),
                _ability("resilience_field", "Resilience Field",
                         "Protects the team from setbacks.", 120, 5, "shield-pulse"),
            ],
            skills=[
                _skill(SkillType.TEAMWORK, "Medical Triage",
                       "Knows who needs help first.", 0.5,
                       intelligence=0.7, mission_speed=0.1),
                _skill(SkillType.CHARISMA, "Bedside Manner",
                       "Keeps everyone calm under pressure.", 0.6,
                       charisma=1.2, resource_gain=0.05),
                _skill(SkillType.PERCEPTION, "Symptom Analysis",
                       "Diagnoses problems early.", 0.45,
                       intelligence=0.9, ability_effectiveness=0.08),
            ],
        ),
        Character(
            id="kyle",
            name="Kyle",
            character_class=CharacterClass.VERSATILE,
            game_strength=GameStrength.JACK_OF_ALL_TRADES,
            strength=6, agility=7, intelligence=8, charisma=6,
            background="A designer who can pick up any role on short notice.",
            abilities=[
                _ability("clip_and_snip", "Clip and Snip",
                         "Cuts a problem down to size.", 60, 1, "scissors"),
                _ability("adaptive_deployment", "Adaptive Deployment",
                         "Fills whatever role the team is missing.", 90, 3, "arrows-switch"),
                _ability("design_ingenuity", "Design Ingenuity",
                         "Redesigns the plan on the fly.", 180, 5, "pencil"),
            ],
            skills=[
                _skill(SkillType.PERCEPTION, "Designer's Eye",
                       "Sees what could be better.", 0.5,
                       intelligence=0.8, ability_effectiveness=0.1),
                _skill(SkillType.COMBAT, "Precision Strikes",
                       "Hits exactly where it matters.", 0.55,
                       agility=0.9, ability_effectiveness=0.08),
                _skill(SkillType.TACTICS, "Adaptive Strategy",
                       "Adjusts the plan as it unfolds.", 0.5,
                       intelligence=0.7, mission_speed=0.09),
            ],
        ),
        Character(
            id="christian",
            name="Christian",
            character_class=CharacterClass.SPEEDSTER,
            game_strength=GameStrength.ADDICTION,
            strength=7, agility=10, intelligence=6, charisma=6,
            background="Moves fast, takes risks, and never stops playing.",
            abilities=[
                _ability("fearless_charge", "Fearless Charge",
                         "Rushes in before anyone can object.", 45, 1, "lightning"),
                _ability("smokescreen_escape", "Smokescreen Escape",
                         "Gets out of trouble in a cloud of smoke.", 75, 3, "smoke"),
                _ability("reckless_gambit", "Reckless Gambit",
                         "Bets everything on one big play.", 120, 5, "dice"),
            ],
            skills=[
                _skill(SkillType.COMBAT, "Reckless Momentum",
                       "Never slows down.", 0.7,
                       strength=1.2, agility=0.8),
                _skill(SkillType.ENDURANCE, "Nicotine Rush",
                       "Short bursts of intense focus.", 0.6,
                       agility=1.0, mission_speed=0.12),
                _skill(SkillType.PERCEPTION, "Risk Assessment",
                       "Knows exactly how far to push it.", 0.5,
                       intelligence=0.6, ability_effectiveness=0.1),
            ],
        ),
        Character(
            id="andrew",
            name="Andrew",
            character_class=CharacterClass.WARDEN,
            game_strength=GameStrength.UNBREAKABLE_PATIENCE,
            strength=7, agility=4, intelligence=6, charisma=5,
            background="A prison guard with patience nobody can shake.",
            abilities=[
                _ability("iron_focus", "Iron Focus",
                         "Passive: stays calm no matter what.", 0, 1, "focus"),
                _ability("lockdown_protocol", "Lockdown Protocol",
                         "Secures the area completely.", 90, 3, "lock"),
                _ability("wardens_presence", "Warden's Presence",
                         "Keeps everyone in line.", 120, 5, "shield"),
            ],
            skills=[
                _skill(SkillType.ENDURANCE, "Unbreakable Patience",
                       "Outlasts anyone.", 0.6,
                       strength=0.8, resource_gain=0.15),
                _skill(SkillType.TACTICS, "Routine Mastery",
                       "Turns routine into efficiency.", 0.5,
                       intelligence=0.7, mission_speed=0.1),
                _skill(SkillType.LEADERSHIP, "Prison Protocol",
                       "Runs a tight ship.", 0.55,
                       charisma=0.6, ability_effectiveness=0.12),
            ],
        ),
    )


_CATALOG: tuple[Character, ...] = _build_catalog()
_BY_ID: dict[str, Character] = {c.id: c for c in _CATALOG}


def get_catalog() -> tuple[Character, ...]:
    """Get the ordered character definitions.

    The returned definitions are shared and must be treated as read-only.
    """
    return _CATALOG


def get_definition(character_id: str) -> Character | None:
    """Get the read-only definition of a character by id."""
    return _BY_ID.get(character_id)


def new_roster(catalog: tuple[Character, ...] | None = None) -> dict[str, Character]:
    """Create a per-game character store.

    Args:
        catalog: Definitions to copy; defaults to the built-in catalog.

    Returns:
        Deep copies keyed by id, in catalog order.
    """
    definitions = _CATALOG if catalog is None else catalog
    return {c.id: c.model_copy(deep=True) for c in definitions}


def character_price(character: Character) -> tuple[int, int]:
    """Shop price of a character as (gold, data points)."""
    gold = math.floor(100 * (character.strength + character.agility))
    data = math.floor(50 * (character.intelligence + character.charisma))
    return gold, data


__all__ = [
    "DATA_SPECIALIST_ID",
    "DATA_SPECIALIST_MULTIPLIER",
    "SYNERGY_COMBOS",
    "character_price",
    "get_catalog",
    "get_definition",
    "new_roster",
]
