"""Shared Pydantic base class for persisted game models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GameModel(BaseModel):
    """Base class for every model that is part of the saved game record.

    Fields are snake_case in Python and camelCase in the stored JSON, so a
    save written as ``model_dump(mode="json", by_alias=True)`` keeps the
    record layout of earlier versions (``currentlyTraining``,
    ``completionProgress``...). Unknown keys from older saves are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )


__all__ = ["GameModel"]
