"""Resource and mission models."""

from __future__ import annotations

from pydantic import Field

from idle_heroes.models.base import GameModel
from idle_heroes.models.enums import GameStrength


class Resources(GameModel):
    """The four resource counters.

    Used both for the player's balances and for mission reward bundles.
    """

    gold: float = Field(default=0.0, ge=0)
    data_points: float = Field(default=0.0, ge=0)
    team_morale: float = Field(default=0.0, ge=0)
    adaptation_tokens: float = Field(default=0.0, ge=0)

    def add(self, other: Resources) -> None:
        """Credit every counter of another bundle into this one."""
        self.gold += other.gold
        self.data_points += other.data_points
        self.team_morale += other.team_morale
        self.adaptation_tokens += other.adaptation_tokens

    def can_afford(self, gold: float, data_points: float) -> bool:
        """Check whether both balances cover the given prices."""
        return self.gold >= gold and self.data_points >= data_points


class Mission(GameModel):
    """A unit of work a team of characters completes for rewards.

    A mission lives in the available pool (no assigned characters) until it
    is started, then in the in-progress set until its completion progress
    reaches 100.

    Attributes:
        id: Unique mission id.
        duration: Nominal duration in seconds, a display hint only.
        difficulty: Divides the progress rate; also scales XP and unlock chance.
        rewards: Bundle credited on completion.
        required_strengths: Tags the assigned team must collectively cover.
        completion_progress: Percentage in [0, 100].
        assigned_characters: Ids of the team while in progress.
    """

    id: str
    name: str
    description: str = ""
    duration: float = Field(default=60.0, ge=0)
    difficulty: float = Field(gt=0)
    rewards: Resources = Field(default_factory=Resources)
    required_strengths: list[GameStrength] = Field(default_factory=list)
    completion_progress: float = Field(default=0.0, ge=0)
    assigned_characters: list[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """Check whether the mission has reached full progress."""
        return self.completion_progress >= 100.0


__all__ = ["Mission", "Resources"]
