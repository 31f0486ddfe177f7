"""Offline reconciliation.

When a session starts, the time since the last recorded tick is simulated
in one pass: idle resources accrue at the rates the roster had when the
game was closed, then in-progress missions are fast-forwarded event by
event. Each step jumps to the next mission completion, so a mission chain
of any length resolves in as many steps as there are completions.
"""

from __future__ import annotations

from collections.abc import Callable

from idle_heroes.core.config import GameSettings
from idle_heroes.core.logging import get_logger
from idle_heroes.engine import rules
from idle_heroes.models.game_state import GameState, OfflineSummary
from idle_heroes.models.mission import Mission


logger = get_logger(__name__)

CompleteMission = Callable[[int], Mission]
"""Completes the in-progress mission at an index, returning it."""


class OfflineReconciler:
    """Applies the gains of an absence to a game state.

    Mission completion is delegated to the engine, so offline completions
    grant the same rewards, experience, unlock rolls, replacement missions,
    and auto-mission re-chaining as live ones.

    Example:
        >>> reconciler = OfflineReconciler(settings, engine_complete_mission)
        >>> summary = reconciler.reconcile(state, now=clock.now())
    """

    def __init__(self, settings: GameSettings, complete_mission: CompleteMission) -> None:
        """Initialize the reconciler.

        Args:
            settings: Supplies the threshold, idle multiplier, and the bound
                on offline completions.
            complete_mission: The engine's mission completion routine.
        """
        self._settings = settings
        self._complete_mission = complete_mission

    def reconcile(self, state: GameState, now: float) -> OfflineSummary | None:
        """Simulate the time elapsed since ``state.last_update_time``.

        Args:
            state: State to update in place.
            now: Current wall-clock time in seconds.

        Returns:
            Summary of the gains, or None if the absence was too short (or
            the state has never been ticked).
        """
        if state.last_update_time is None:
            return None

        elapsed = now - state.last_update_time
        if elapsed <= self._settings.offline_threshold_seconds:
            logger.debug("Offline time below threshold", elapsed=round(elapsed, 3))
            return None

        gold_before = state.resources.gold
        data_before = state.resources.data_points

        multiplier = self._settings.idle_multiplier
        gold_rate = rules.idle_gold_rate(state)
        data_rate = rules.idle_data_rate(state)
        state.resources.gold += gold_rate * elapsed * multiplier
        state.resources.data_points += data_rate * elapsed * multiplier

        completed = self._fast_forward(state, elapsed)

        state.team_synergy = rules.team_synergy(state.active_characters)
        state.last_update_time = now

        summary = OfflineSummary(
            elapsed_seconds=elapsed,
            gold_gained=state.resources.gold - gold_before,
            data_gained=state.resources.data_points - data_before,
            missions_completed=completed,
        )
        logger.info(
            "Offline progress applied",
            elapsed_minutes=summary.elapsed_minutes,
            gold_gained=round(summary.gold_gained, 2),
            data_gained=round(summary.data_gained, 2),
            missions_completed=completed,
        )
        return summary

    def _fast_forward(self, state: GameState, remaining: float) -> int:
        """Advance missions through ``remaining`` seconds.

        Returns:
            Number of missions completed.
        """
        completed = 0
        limit = self._settings.max_offline_completions

        while state.current_missions:
            if completed >= limit:
                logger.warning("Offline completion limit reached", limit=limit)
                break

            times = [rules.time_to_complete(state, m) for m in state.current_missions]
            index = min(range(len(times)), key=times.__getitem__)
            step = times[index]

            if step > remaining:
                self._advance_all(state, remaining)
                break

            self._advance_all(state, step)
            state.current_missions[index].completion_progress = 100.0
            remaining -= step
            self._complete_mission(index)
            completed += 1

        return completed

    @staticmethod
    def _advance_all(state: GameState, seconds: float) -> None:
        if seconds <= 0:
            return
        for mission in state.current_missions:
            rate = rules.mission_progress_rate(mission, rules.assigned_team(state, mission))
            mission.completion_progress = min(100.0, mission.completion_progress + rate * seconds)


__all__ = ["OfflineReconciler"]
