"""Progression engine for Idle Heroes.

The ProgressionEngine owns the game state for a session. It advances the
simulation on each tick, runs the mission and training lifecycles, manages
the roster, and persists the state through an injected key-value store.

Public operations never raise for expected failures: invalid arguments
return False, and persistence failures are logged and absorbed.

Example:
    >>> engine = ProgressionEngine("ryan", store=InMemoryStore(), rng=random.Random(1))
    >>> engine.tick(10.0)
    >>> snapshot = engine.get_game_state()
    >>> engine.cleanup()
"""

from __future__ import annotations

import math
import random
import threading
from collections.abc import Callable, Iterable
from types import TracebackType

from idle_heroes.core.config import GameSettings, get_settings
from idle_heroes.core.exceptions import GameEngineError, PersistenceError, ValidationError
from idle_heroes.core.logging import get_logger
from idle_heroes.engine import rules
from idle_heroes.engine.clock import Clock, SystemClock
from idle_heroes.engine.missions import MissionGenerator
from idle_heroes.engine.offline import OfflineReconciler
from idle_heroes.engine.timer import Timer, TimerFactory, repeating_timer_factory
from idle_heroes.models.catalog import get_catalog, new_roster
from idle_heroes.models.character import Character, Skill
from idle_heroes.models.effects import apply_effect, stat_contributions
from idle_heroes.models.enums import SkillType
from idle_heroes.models.game_state import GameState, OfflineSummary
from idle_heroes.models.mission import Mission, Resources
from idle_heroes.storage.base import KeyValueStore
from idle_heroes.storage.repair import repair_game_state
from idle_heroes.storage.repository import GameStateRepository


logger = get_logger(__name__)

STARTING_MORALE = 50.0


class ProgressionEngine:
    """Owns and advances one game.

    Collaborators are injected so the engine runs deterministically under
    test: a clock for wall time, a random source, a key-value store, and a
    timer factory for auto-save.

    Attributes:
        settings: Engine tuning constants.
    """

    def __init__(
        self,
        starting_character_id: str | None = None,
        *,
        store: KeyValueStore | None = None,
        storage_key: str | None = None,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        settings: GameSettings | None = None,
        timer_factory: TimerFactory | None = None,
        catalog: tuple[Character, ...] | None = None,
    ) -> None:
        """Initialize the engine.

        With a starting character the engine always begins a fresh game.
        Without one it restores the stored game (repaired and reconciled for
        offline time) and falls back to a fresh game with a random
        character when nothing usable is stored.

        Args:
            starting_character_id: Character to start a new game with.
            store: Key-value store for saves; defaults to the SQLite store.
            storage_key: Key of the save record; defaults to the configured key.
            clock: Wall clock; defaults to the system clock.
            rng: Random source for missions and unlocks.
            settings: Tuning constants; defaults to the configured settings.
            timer_factory: Builds the auto-save timer.
            catalog: Character definitions; defaults to the built-in catalog.

        Raises:
            GameEngineError: If the catalog is empty.
        """
        if store is None or storage_key is None or settings is None:
            app_settings = get_settings()
            settings = settings or app_settings.game
            storage_key = storage_key or app_settings.storage.storage_key
            if store is None:
                from idle_heroes.storage.database import get_store

                store = get_store()

        self.settings = settings
        self._clock = clock or SystemClock()
        self._rng = rng or random.Random()
        self._catalog = get_catalog() if catalog is None else catalog
        if not self._catalog:
            raise GameEngineError("Character catalog is empty")
        self._definitions = {c.id: c for c in self._catalog}

        self._repository = GameStateRepository(store, storage_key)
        self._missions = MissionGenerator(self._rng)
        self._reconciler = OfflineReconciler(settings, self._complete_mission)
        self._lock = threading.RLock()

        self._last_unlocked_id: str | None = None
        self._offline_summary: OfflineSummary | None = None
        self._closed = False

        if starting_character_id is not None:
            self._state = self._new_game_state(starting_character_id)
        else:
            restored = self._load()
            if restored is not None:
                self._state = restored
                self._offline_summary = self._reconciler.reconcile(self._state, self._clock.now())
                if self._offline_summary is not None:
                    self.save_game_state()
            else:
                self._state = self._new_game_state(None)

        self._last_timestamp = self._clock.now()
        self._last_save_time = self._clock.now()

        self._timer: Timer | None = None
        interval = settings.auto_save_interval_seconds
        if interval > 0:
            self._timer = (timer_factory or repeating_timer_factory)(interval, self._auto_save)
            self._timer.start()

        logger.info(
            "ProgressionEngine initialized",
            unlocked=len(self._state.unlocked_characters),
            active=len(self._state.active_character_ids),
            auto_save_interval=interval,
        )

    # =========================================================================
    # State Construction
    # =========================================================================

    def _new_game_state(self, character_id: str | None) -> GameState:
        """Create a fresh game with one unlocked, active character."""
        roster = new_roster(self._catalog)
        if character_id not in roster:
            if character_id is not None:
                logger.warning("Unknown starting character, choosing at random", character_id=character_id)
            character_id = self._rng.choice(list(roster))

        logger.info("Starting new game", character_id=character_id)
        return GameState(
            characters=roster,
            unlocked_characters=[character_id],
            active_character_ids=[character_id],
            resources=Resources(team_morale=STARTING_MORALE),
        )

    def _load(self) -> GameState | None:
        """Load and repair the stored game, or None if unusable."""
        try:
            state = self._repository.load()
        except PersistenceError as exc:
            logger.error("Failed to load game state, starting fresh", error=exc.message, **exc.details)
            return None
        if state is None:
            return None

        repair_game_state(state, self.settings, self._catalog)
        if not state.unlocked_characters:
            logger.warning("Stored game has no unlocked characters, starting fresh")
            return None
        state.team_synergy = rules.team_synergy(state.active_characters)
        return state

    # =========================================================================
    # Tick
    # =========================================================================

    def update(self) -> None:
        """Advance the simulation by the wall time since the previous tick."""
        with self._lock:
            now = self._clock.now()
            delta = now - self._last_timestamp
            self._last_timestamp = now
            self._advance(self._clamp_delta(delta))
            self._state.last_update_time = now

    def tick(self, delta_seconds: float) -> None:
        """Advance the simulation by an explicit delta.

        The same clamps as ``update`` apply.
        """
        with self._lock:
            self._advance(self._clamp_delta(delta_seconds))
            self._state.last_update_time = self._clock.now()

    def _clamp_delta(self, delta: float) -> float:
        if math.isnan(delta) or delta < 0:
            logger.debug("Clamped negative tick delta", delta=delta)
            return self.settings.negative_tick_seconds
        if delta > self.settings.max_tick_seconds:
            logger.debug("Capped large tick delta", delta=delta)
            return self.settings.max_tick_seconds
        return delta

    def _advance(self, delta: float) -> None:
        state = self._state
        state.game_time += delta
        self._accrue_idle(delta)
        if state.current_missions:
            self._advance_missions(delta)
        self._train_skills(delta)
        state.team_synergy = rules.team_synergy(state.active_characters)

    def _accrue_idle(self, delta: float) -> None:
        state = self._state
        multiplier = self.settings.idle_multiplier
        state.resources.gold += rules.idle_gold_rate(state) * delta * multiplier
        state.resources.data_points += rules.idle_data_rate(state) * delta * multiplier

    def _advance_missions(self, delta: float) -> None:
        state = self._state
        for mission in state.current_missions:
            rate = rules.mission_progress_rate(mission, rules.assigned_team(state, mission))
            mission.completion_progress = min(100.0, mission.completion_progress + rate * delta)

        finished = [i for i, m in enumerate(state.current_missions) if m.is_complete]
        for index in reversed(finished):
            self._complete_mission(index)
        if finished:
            self.save_game_state()

    def _train_skills(self, delta: float) -> None:
        state = self._state
        for character in state.active_characters:
            if character.currently_training is None or state.is_character_on_mission(character.id):
                continue
            skill = character.get_skill(character.currently_training)
            if skill is None:
                continue
            self._gain_skill_experience(character, skill, max(0.0, skill.training_rate * delta))

    # =========================================================================
    # Missions
    # =========================================================================

    def _complete_mission(self, index: int) -> Mission:
        """Resolve the in-progress mission at ``index``.

        Credits rewards, awards experience, rolls for an unlock, adds one
        replacement mission, then either re-chains the team (auto-mission)
        or resumes their training.
        """
        state = self._state
        mission = state.current_missions[index]
        team = list(mission.assigned_characters)

        state.resources.add(mission.rewards)
        xp = rules.MISSION_XP_PER_DIFFICULTY * mission.difficulty
        for character_id in team:
            if character_id in state.characters:
                self._gain_character_experience(character_id, xp)
        self._roll_unlock(mission.difficulty)
        state.missions.append(self._missions.generate(len(state.unlocked_characters)))
        del state.current_missions[index]

        logger.info("Mission completed", mission_id=mission.id, name=mission.name, team=team)

        if state.auto_mission and state.missions and state.all_unlocked:
            target = state.missions[0]
            try:
                self._start_mission(target.id, team)
            except ValidationError as exc:
                logger.info("Auto-mission re-chain failed, resuming training", reason=exc.message)
            else:
                logger.info("Auto-mission re-chained", mission_id=target.id, team=team)
                # Members benched mid-mission are not re-chained.
                self._resume_training([cid for cid in team if not state.is_character_on_mission(cid)])
                return mission

        self._resume_training(team)
        return mission

    def _roll_unlock(self, difficulty: float) -> None:
        state = self._state
        chance = difficulty * self.settings.unlock_chance_per_difficulty
        if self._rng.random() >= chance:
            return
        locked = [cid for cid in state.characters if not state.is_unlocked(cid)]
        if not locked:
            return
        character_id = self._rng.choice(locked)
        self._unlock(character_id)
        self._last_unlocked_id = character_id

    def _start_mission(self, mission_id: str, character_ids: Iterable[str]) -> None:
        state = self._state
        mission = state.find_available_mission(mission_id)
        if mission is None:
            raise ValidationError("Mission is not available", field_name="mission_id", invalid_value=mission_id)

        assigned = [cid for cid in dict.fromkeys(character_ids) if state.is_active(cid)]
        if not assigned:
            raise ValidationError("No active characters assigned", field_name="character_ids")

        team = [state.characters[cid] for cid in assigned]
        if not rules.covers_required_strengths(mission.required_strengths, team):
            raise ValidationError(
                "Team does not cover the required strengths",
                field_name="character_ids",
                details={"required": [str(s) for s in mission.required_strengths]},
            )

        busy = [cid for cid in assigned if state.is_character_on_mission(cid)]
        if busy:
            raise ValidationError("Characters already on a mission", field_name="character_ids", invalid_value=busy)

        for character in team:
            previous_paused = character.paused_training
            character.paused_training = character.currently_training
            if character.original_training is None and (state.auto_mission or previous_paused is None):
                character.original_training = character.currently_training
            character.currently_training = None

        state.missions = [m for m in state.missions if m.id != mission_id]
        mission.assigned_characters = assigned
        mission.completion_progress = 0.0
        state.current_missions.append(mission)
        logger.info("Mission started", mission_id=mission_id, team=assigned)

    def _resume_training(self, character_ids: Iterable[str]) -> None:
        state = self._state
        for character_id in character_ids:
            character = state.get_character(character_id)
            if character is None or state.is_character_on_mission(character_id):
                continue
            if character.original_training is not None:
                character.currently_training = character.original_training
            else:
                character.currently_training = character.paused_training
            character.paused_training = None
            if not state.auto_mission:
                character.original_training = None

    def start_mission(self, mission_id: str, character_ids: Iterable[str]) -> bool:
        """Send a team on an available mission.

        Only active characters are assigned. The team must cover every
        required strength and nobody may already be on a mission.

        Args:
            mission_id: Id of a mission in the available pool.
            character_ids: Proposed team.

        Returns:
            True if the mission started.
        """
        return self._attempt("start_mission", lambda: self._start_mission(mission_id, list(character_ids)))

    def cancel_mission(self, index: int) -> bool:
        """Return an in-progress mission to the available pool.

        Args:
            index: Position in the in-progress list.

        Returns:
            True if a mission was canceled.
        """

        def cancel() -> None:
            state = self._state
            if not 0 <= index < len(state.current_missions):
                raise ValidationError("Mission index out of range", field_name="index", invalid_value=index)
            mission = state.current_missions.pop(index)
            team = list(mission.assigned_characters)
            mission.assigned_characters = []
            mission.completion_progress = 0.0
            state.missions.append(mission)
            self._resume_training(team)
            logger.info("Mission canceled", mission_id=mission.id)

        return self._attempt("cancel_mission", cancel)

    # =========================================================================
    # Training
    # =========================================================================

    def _gain_skill_experience(self, character: Character, skill: Skill, amount: float) -> None:
        if skill.is_maxed:
            skill.experience = 0.0
            return

        skill.experience += amount
        leveled = False
        while not skill.is_maxed and skill.experience >= skill.experience_to_next_level:
            skill.experience -= skill.experience_to_next_level
            skill.level += 1
            skill.experience_to_next_level = math.floor(
                skill.experience_to_next_level * rules.SKILL_THRESHOLD_GROWTH
            )
            leveled = True
        if skill.is_maxed:
            skill.experience = 0.0

        if leveled:
            rules.recompute_stats(character, self._definitions.get(character.id))
            logger.info("Skill leveled up", character_id=character.id, skill=skill.type, level=skill.level)

    def set_training_skill(self, character_id: str, skill_type: SkillType | str | None) -> bool:
        """Choose which skill a character trains (None stops training).

        Returns:
            False if the character is on a mission, unknown, or lacks the skill.
        """

        def select() -> None:
            character = self._require_character(character_id)
            if self._state.is_character_on_mission(character_id):
                raise ValidationError("Character is on a mission", field_name="character_id", invalid_value=character_id)
            if skill_type is None:
                character.currently_training = None
                return
            skill = self._require_skill(character, skill_type)
            character.currently_training = skill.type

        return self._attempt("set_training_skill", select)

    def add_skill_experience(self, character_id: str, skill_type: SkillType | str, amount: float) -> bool:
        """Grant experience directly to a character's skill.

        Rejected while the character is on a mission, for non-positive
        amounts, and for maxed skills.
        """

        def grant() -> None:
            if amount <= 0:
                raise ValidationError("Experience must be positive", field_name="amount", invalid_value=amount)
            character = self._require_character(character_id)
            if self._state.is_character_on_mission(character_id):
                raise ValidationError("Character is on a mission", field_name="character_id", invalid_value=character_id)
            skill = self._require_skill(character, skill_type)
            if skill.is_maxed:
                raise ValidationError("Skill is at max level", field_name="skill_type", invalid_value=skill.type)
            self._gain_skill_experience(character, skill, amount)

        return self._attempt("add_skill_experience", grant)

    def get_character_skill(self, character_id: str, skill_type: SkillType | str) -> Skill | None:
        """Get a copy of a character's skill, or None."""
        with self._lock:
            character = self._state.get_character(character_id)
            if character is None:
                return None
            skill = character.get_skill(skill_type)
            return None if skill is None else skill.model_copy(deep=True)

    # =========================================================================
    # Character Progression
    # =========================================================================

    def _gain_character_experience(self, character_id: str, amount: float) -> None:
        if amount <= 0:
            raise ValidationError("Experience must be positive", field_name="amount", invalid_value=amount)
        character = self._require_character(character_id)
        character.experience += amount
        while character.experience >= (required := rules.xp_for_next_level(character.level)):
            character.experience -= required
            character.level += 1
            character.skill_points += 1
            logger.info("Character leveled up", character_id=character_id, level=character.level)

    def award_experience(self, character_id: str, amount: float) -> bool:
        """Award character experience; non-positive amounts are rejected."""
        return self._attempt("award_experience", lambda: self._gain_character_experience(character_id, amount))

    def purchase_upgrade(self, character_id: str, upgrade_id: str) -> bool:
        """Spend skill points on an upgrade node.

        The node must be locked, affordable, and have every required node
        unlocked. Its effect is applied once; stat bonuses persist through
        stat recomputation.
        """

        def purchase() -> None:
            character = self._require_character(character_id)
            node = character.get_upgrade(upgrade_id)
            if node is None:
                raise ValidationError("Unknown upgrade", field_name="upgrade_id", invalid_value=upgrade_id)
            if node.unlocked:
                raise ValidationError("Upgrade already unlocked", field_name="upgrade_id", invalid_value=upgrade_id)
            if character.skill_points < node.cost:
                raise ValidationError("Not enough skill points", field_name="skill_points", invalid_value=character.skill_points)
            missing = [
                rid for rid in node.required_nodes
                if (required := character.get_upgrade(rid)) is None or not required.unlocked
            ]
            if missing:
                raise ValidationError("Required upgrades are locked", field_name="required_nodes", invalid_value=missing)

            # Rejects malformed params before anything is mutated.
            stat_contributions(node.effect)
            apply_effect(node.effect, character)
            node.unlocked = True
            character.skill_points -= node.cost
            rules.recompute_stats(character, self._definitions.get(character_id))
            logger.info("Upgrade purchased", character_id=character_id, upgrade_id=upgrade_id)

        return self._attempt("purchase_upgrade", purchase)

    # =========================================================================
    # Roster
    # =========================================================================

    def _unlock(self, character_id: str) -> None:
        state = self._state
        self._require_character(character_id)
        if state.is_unlocked(character_id):
            raise ValidationError("Character already unlocked", field_name="character_id", invalid_value=character_id)
        state.unlocked_characters.append(character_id)
        if not state.is_active(character_id):
            state.active_character_ids.append(character_id)
        state.team_synergy = rules.team_synergy(state.active_characters)
        logger.info("Character unlocked", character_id=character_id)

    def unlock_character(self, character_id: str) -> bool:
        """Unlock a character and add it to the active roster.

        Returns:
            False if the character is unknown or already unlocked.
        """
        return self._attempt("unlock_character", lambda: self._unlock(character_id))

    def purchase_character(self, character_id: str, gold_cost: float, data_cost: float) -> bool:
        """Buy a locked character.

        Both prices are deducted together. The first purchase that gives the
        player a team seeds the starter missions when the pool is empty.
        """

        def purchase() -> None:
            state = self._state
            self._require_character(character_id)
            if state.is_unlocked(character_id):
                raise ValidationError("Character already unlocked", field_name="character_id", invalid_value=character_id)
            if gold_cost < 0 or data_cost < 0:
                raise ValidationError("Prices must not be negative", field_name="cost")
            if not state.resources.can_afford(gold_cost, data_cost):
                raise ValidationError(
                    "Insufficient resources",
                    field_name="resources",
                    details={"gold_cost": gold_cost, "data_cost": data_cost},
                )
            state.resources.gold -= gold_cost
            state.resources.data_points -= data_cost
            self._unlock(character_id)
            if len(state.unlocked_characters) > 1 and not state.missions:
                state.missions.extend(self._missions.starter_missions())
                logger.info("Seeded starter missions", count=len(state.missions))

        return self._attempt("purchase_character", purchase)

    def add_active_character(self, character_id: str) -> bool:
        """Put an unlocked character on the active roster."""

        def add() -> None:
            state = self._state
            if not state.is_unlocked(character_id):
                raise ValidationError("Character is not unlocked", field_name="character_id", invalid_value=character_id)
            if state.is_active(character_id):
                raise ValidationError("Character already active", field_name="character_id", invalid_value=character_id)
            state.active_character_ids.append(character_id)
            state.team_synergy = rules.team_synergy(state.active_characters)

        return self._attempt("add_active_character", add)

    def remove_active_character(self, character_id: str) -> bool:
        """Take a character off the active roster (it stays unlocked)."""

        def remove() -> None:
            state = self._state
            if not state.is_active(character_id):
                raise ValidationError("Character is not active", field_name="character_id", invalid_value=character_id)
            state.active_character_ids.remove(character_id)
            state.team_synergy = rules.team_synergy(state.active_characters)

        return self._attempt("remove_active_character", remove)

    def is_character_on_mission(self, character_id: str) -> bool:
        """Check whether a character is on an in-progress mission."""
        with self._lock:
            return self._state.is_character_on_mission(character_id)

    def get_last_unlocked_character(self) -> Character | None:
        """Character most recently unlocked by a mission, until cleared."""
        with self._lock:
            if self._last_unlocked_id is None:
                return None
            character = self._state.get_character(self._last_unlocked_id)
            return None if character is None else character.model_copy(deep=True)

    def clear_last_unlocked_character(self) -> None:
        with self._lock:
            self._last_unlocked_id = None

    # =========================================================================
    # Auto-Mission
    # =========================================================================

    def can_enable_auto_mission(self) -> bool:
        """Auto-mission requires every catalog character to be unlocked."""
        with self._lock:
            return self._state.all_unlocked

    def toggle_auto_mission(self) -> bool:
        """Flip auto-mission.

        Enabling captures each idle character's current training as the
        target to restore when the chain ends. Disabling clears those
        targets.

        Returns:
            True if the mode changed, False if enabling was not allowed.
        """

        def toggle() -> None:
            state = self._state
            if state.auto_mission:
                state.auto_mission = False
                for character in state.characters.values():
                    character.original_training = None
                logger.info("Auto-mission disabled")
                return

            if not state.all_unlocked:
                raise ValidationError("Auto-mission requires every character unlocked", field_name="auto_mission")
            state.auto_mission = True
            for character in state.characters.values():
                if character.original_training is None and not state.is_character_on_mission(character.id):
                    character.original_training = character.currently_training
            logger.info("Auto-mission enabled")

        return self._attempt("toggle_auto_mission", toggle)

    # =========================================================================
    # Offline Progress
    # =========================================================================

    def reconcile_offline(self) -> OfflineSummary | None:
        """Apply gains for the time since the last tick, if long enough.

        Returns:
            The summary (also kept for ``get_offline_summary``), or None.
        """
        with self._lock:
            summary = self._reconciler.reconcile(self._state, self._clock.now())
            if summary is None:
                return None
            self._offline_summary = summary
            self._last_timestamp = self._clock.now()
            self.save_game_state()
            return summary

    def get_offline_summary(self) -> OfflineSummary | None:
        """Summary of the last offline reconciliation, until cleared."""
        with self._lock:
            return self._offline_summary

    def clear_offline_summary(self) -> None:
        with self._lock:
            self._offline_summary = None

    # =========================================================================
    # State & Persistence
    # =========================================================================

    def get_game_state(self) -> GameState:
        """Get a deep-copied snapshot of the game state."""
        with self._lock:
            return self._state.model_copy(deep=True)

    def save_game_state(self) -> bool:
        """Persist the game state.

        Returns:
            True if the state was written; failures are logged.
        """
        with self._lock:
            try:
                self._repository.save(self._state)
            except PersistenceError as exc:
                logger.error("Failed to save game state", error=exc.message, **exc.details)
                return False
            self._last_save_time = self._clock.now()
            return True

    def get_time_since_last_save(self) -> float:
        """Seconds since the last successful save (or engine start)."""
        with self._lock:
            return self._clock.now() - self._last_save_time

    def reset_game(self, character_id: str | None = None) -> None:
        """Discard the current game and start a new one.

        Args:
            character_id: Starting character; random when None or unknown.
        """
        with self._lock:
            try:
                self._repository.clear()
            except PersistenceError as exc:
                logger.error("Failed to clear stored game state", error=exc.message, **exc.details)
            self._state = self._new_game_state(character_id)
            self._last_unlocked_id = None
            self._offline_summary = None
            self._last_timestamp = self._clock.now()
            self.save_game_state()

    def _auto_save(self) -> None:
        if self.save_game_state():
            logger.info("Auto-saved game state")

    def cleanup(self) -> None:
        """Stop the auto-save timer and save one final time."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        self.save_game_state()
        logger.info("ProgressionEngine cleaned up")

    def __enter__(self) -> ProgressionEngine:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _attempt(self, operation: str, action: Callable[[], None]) -> bool:
        """Run a mutation; validation failures become False, success saves."""
        with self._lock:
            try:
                action()
            except ValidationError as exc:
                logger.warning("Operation rejected", operation=operation, reason=exc.message, **exc.details)
                return False
            self.save_game_state()
            return True

    def _require_character(self, character_id: str) -> Character:
        character = self._state.get_character(character_id)
        if character is None:
            raise ValidationError("Unknown character", field_name="character_id", invalid_value=character_id)
        return character

    @staticmethod
    def _require_skill(character: Character, skill_type: SkillType | str) -> Skill:
        skill = character.get_skill(skill_type)
        if skill is None:
            raise ValidationError(
                f"Character {character.id} has no such skill",
                field_name="skill_type",
                invalid_value=skill_type,
            )
        return skill


__all__ = ["ProgressionEngine", "STARTING_MORALE"]
