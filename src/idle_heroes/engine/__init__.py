"""Game engine module for Idle Heroes.

This module contains the simulation logic:
- Progression engine (tick, missions, training, roster, persistence)
- Shared game rules (idle rates, mission speed, synergy, leveling)
- Mission generation
- Offline reconciliation
- Clock and timer ports
"""

from idle_heroes.engine.clock import Clock, SystemClock
from idle_heroes.engine.missions import (
    MISSION_ARCHETYPES,
    STARTER_MISSIONS,
    MissionArchetype,
    MissionGenerator,
)
from idle_heroes.engine.offline import OfflineReconciler
from idle_heroes.engine.progression import ProgressionEngine
from idle_heroes.engine.timer import RepeatingTimer, Timer, TimerFactory

__all__ = [
    # Engine
    "ProgressionEngine",
    "OfflineReconciler",
    # Missions
    "MISSION_ARCHETYPES",
    "STARTER_MISSIONS",
    "MissionArchetype",
    "MissionGenerator",
    # Ports
    "Clock",
    "SystemClock",
    "RepeatingTimer",
    "Timer",
    "TimerFactory",
]
