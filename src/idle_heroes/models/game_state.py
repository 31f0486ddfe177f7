"""Game state aggregate for the Idle Heroes progression engine.

Models:
    GameState: The aggregate root owned by the progression engine.
    OfflineSummary: One-time report of gains made while the game was closed.
"""

from __future__ import annotations

from pydantic import Field

from idle_heroes.models.base import GameModel
from idle_heroes.models.character import Character
from idle_heroes.models.mission import Mission, Resources


CURRENT_SCHEMA_VERSION = 3
"""Layout version written by this code; see ``idle_heroes.storage.migrations``."""


# =============================================================================
# Game State
# =============================================================================


class GameState(GameModel):
    """Complete state of one game.

    Characters are stored exactly once, keyed by id. The unlocked and active
    rosters are ordered id lists referencing that store; the model views
    below derive everything else.

    Attributes:
        characters: Canonical per-game character store (catalog order).
        unlocked_characters: Ids of characters the player owns.
        active_character_ids: Ids of characters on the active roster.
        missions: Available mission pool.
        current_missions: Missions in progress.
        resources: Player balances.
        game_time: Simulated seconds elapsed.
        team_synergy: Derived roster synergy score.
        auto_mission: Whether completed missions re-chain automatically.
        last_update_time: Wall-clock seconds of the last tick, for offline
            reconciliation.
        schema_version: Stored layout version.
    """

    characters: dict[str, Character] = Field(default_factory=dict)
    unlocked_characters: list[str] = Field(default_factory=list)
    active_character_ids: list[str] = Field(default_factory=list)
    missions: list[Mission] = Field(default_factory=list)
    current_missions: list[Mission] = Field(default_factory=list)
    resources: Resources = Field(default_factory=Resources)
    game_time: float = Field(default=0.0, ge=0)
    team_synergy: float = Field(default=0.0, ge=0)
    auto_mission: bool = False
    last_update_time: float | None = None
    schema_version: int = CURRENT_SCHEMA_VERSION

    @property
    def active_characters(self) -> list[Character]:
        """Active roster, resolved against the canonical store."""
        return [self.characters[cid] for cid in self.active_character_ids if cid in self.characters]

    @property
    def unlocked_character_models(self) -> list[Character]:
        """Unlocked characters, resolved against the canonical store."""
        return [self.characters[cid] for cid in self.unlocked_characters if cid in self.characters]

    @property
    def all_unlocked(self) -> bool:
        """Check whether every character in the store is unlocked."""
        unlocked = set(self.unlocked_characters)
        return all(cid in unlocked for cid in self.characters)

    def get_character(self, character_id: str) -> Character | None:
        """Get a character by id."""
        return self.characters.get(character_id)

    def is_unlocked(self, character_id: str) -> bool:
        """Check whether a character is unlocked."""
        return character_id in self.unlocked_characters

    def is_active(self, character_id: str) -> bool:
        """Check whether a character is on the active roster."""
        return character_id in self.active_character_ids

    def mission_for_character(self, character_id: str) -> Mission | None:
        """Get the in-progress mission a character is assigned to, if any."""
        for mission in self.current_missions:
            if character_id in mission.assigned_characters:
                return mission
        return None

    def is_character_on_mission(self, character_id: str) -> bool:
        """Check whether a character is assigned to an in-progress mission."""
        return self.mission_for_character(character_id) is not None

    def find_available_mission(self, mission_id: str) -> Mission | None:
        """Get a mission from the available pool by id."""
        for mission in self.missions:
            if mission.id == mission_id:
                return mission
        return None


# =============================================================================
# Offline Summary
# =============================================================================


class OfflineSummary(GameModel):
    """Gains applied by offline reconciliation, shown to the player once."""

    elapsed_seconds: float = Field(ge=0)
    gold_gained: float = 0.0
    data_gained: float = 0.0
    missions_completed: int = 0

    @property
    def elapsed_minutes(self) -> int:
        """Whole minutes the game was closed."""
        return int(self.elapsed_seconds // 60)


__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "GameState",
    "OfflineSummary",
]
