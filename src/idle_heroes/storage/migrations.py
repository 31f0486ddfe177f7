"""Versioned migrations for stored game state records.

A stored record is the camelCase JSON object written by
``GameStateRepository``. Older records lack a ``schemaVersion`` field and
are treated as version 0. Each step is a pure ``dict -> dict`` function that
upgrades a record by exactly one version; ``migrate`` applies them in order.

Versions:
    0: Single ``currentMission`` field.
    1: ``currentMissions`` list; characters stored as a list, with the
       active roster duplicated as full character objects.
    2: Characters keyed by id; active roster stored as ids.
    3: Auto-mission flag, last update timestamp, and per-character
       paused/original training fields.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from idle_heroes.core.exceptions import MigrationError
from idle_heroes.core.logging import get_logger
from idle_heroes.models.game_state import CURRENT_SCHEMA_VERSION


logger = get_logger(__name__)

Record = dict[str, Any]
Migration = Callable[[Record], Record]

SCHEMA_VERSION_KEY = "schemaVersion"

# Timestamps above this are milliseconds since the epoch (year 5138 in seconds).
_MILLISECOND_EPOCH_FLOOR = 1e11


def _expect_field(record: Record, key: str, types: tuple[type, ...], version: int) -> None:
    """Reject a record whose ``key`` is present, non-null, and of the wrong type."""
    value = record.get(key)
    if value is not None and not isinstance(value, types):
        raise MigrationError(
            f"Field {key!r} has unexpected type {type(value).__name__}",
            from_version=version,
            to_version=version + 1,
            details={"field": key},
        )


def migrate_v0_to_v1(record: Record) -> Record:
    """Replace the legacy single ``currentMission`` with ``currentMissions``."""
    _expect_field(record, "currentMission", (dict,), 0)
    _expect_field(record, "currentMissions", (list,), 0)
    result = copy.deepcopy(record)
    legacy = result.pop("currentMission", None)
    if "currentMissions" not in result:
        result["currentMissions"] = [legacy] if legacy else []
    return result


def migrate_v1_to_v2(record: Record) -> Record:
    """Key characters by id and store the active roster as ids.

    Where a character appears both in the list and in ``activeCharacters``,
    the active-roster copy wins: it is the one training updates went to.
    """
    _expect_field(record, "characters", (list, dict), 1)
    _expect_field(record, "activeCharacters", (list,), 1)
    _expect_field(record, "activeCharacterIds", (list,), 1)
    result = copy.deepcopy(record)

    characters = result.get("characters")
    if isinstance(characters, list):
        result["characters"] = {
            c["id"]: c for c in characters if isinstance(c, dict) and "id" in c
        }

    active = result.pop("activeCharacters", None)
    if "activeCharacterIds" not in result:
        active_ids: list[str] = []
        for entry in active or []:
            if isinstance(entry, dict) and "id" in entry:
                active_ids.append(entry["id"])
                store = result.setdefault("characters", {})
                store[entry["id"]] = {**store.get(entry["id"], {}), **entry}
            elif isinstance(entry, str):
                active_ids.append(entry)
        result["activeCharacterIds"] = active_ids

    return result


def migrate_v2_to_v3(record: Record) -> Record:
    """Add auto-mission and offline fields; normalize training state fields.

    ``originalTraining`` is initialized from ``currentlyTraining`` only where
    the field is missing, so an explicit null is preserved. A millisecond
    ``lastUpdateTime`` is converted to seconds.
    """
    _expect_field(record, "characters", (dict,), 2)
    _expect_field(record, "currentMissions", (list,), 2)
    result = copy.deepcopy(record)
    result.setdefault("autoMission", False)

    last_update = result.get("lastUpdateTime")
    if isinstance(last_update, (int, float)) and last_update > _MILLISECOND_EPOCH_FLOOR:
        result["lastUpdateTime"] = last_update / 1000.0
    else:
        result.setdefault("lastUpdateTime", None)

    for character in (result.get("characters") or {}).values():
        if not isinstance(character, dict):
            continue
        character.setdefault("pausedTraining", None)
        if "originalTraining" not in character:
            character["originalTraining"] = character.get("currentlyTraining")

    return result


MIGRATIONS: dict[int, Migration] = {
    0: migrate_v0_to_v1,
    1: migrate_v1_to_v2,
    2: migrate_v2_to_v3,
}
"""Step that upgrades a record *from* the keyed version."""


def detect_version(record: Record) -> int:
    """Read a record's schema version (0 when absent).

    Raises:
        MigrationError: If the version field is not a non-negative integer.
    """
    version = record.get(SCHEMA_VERSION_KEY, 0)
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        raise MigrationError(
            f"Invalid schema version: {version!r}",
            to_version=CURRENT_SCHEMA_VERSION,
        )
    return version


def migrate(record: Record, *, target: int = CURRENT_SCHEMA_VERSION) -> Record:
    """Upgrade a stored record to ``target``.

    Args:
        record: Decoded record; not modified.
        target: Version to upgrade to.

    Returns:
        A new record at ``target`` with ``schemaVersion`` set.

    Raises:
        MigrationError: If the record is not an object, is newer than
            ``target``, or a step is missing.
    """
    if not isinstance(record, dict):
        raise MigrationError(
            f"Stored record must be an object, got {type(record).__name__}",
            to_version=target,
        )

    version = detect_version(record)
    if version > target:
        raise MigrationError(
            "Stored record is newer than this version of the game",
            from_version=version,
            to_version=target,
        )

    result = record
    while version < target:
        step = MIGRATIONS.get(version)
        if step is None:
            raise MigrationError(
                f"No migration from schema version {version}",
                from_version=version,
                to_version=target,
            )
        result = step(result)
        version += 1
        result[SCHEMA_VERSION_KEY] = version
        logger.info("Migrated game state record", from_version=version - 1, to_version=version)

    if result is record:
        result = copy.deepcopy(record)
    result[SCHEMA_VERSION_KEY] = target
    return result


__all__ = [
    "CURRENT_SCHEMA_VERSION",
    "MIGRATIONS",
    "SCHEMA_VERSION_KEY",
    "detect_version",
    "migrate",
    "migrate_v0_to_v1",
    "migrate_v1_to_v2",
    "migrate_v2_to_v3",
]
