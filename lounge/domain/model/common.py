"""Shared configuration for Lounge entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Entities are never mutated in place; repositories hand back a fresh copy
    (``model_copy(update=...)``) when a stored value changes.
    """

    model_config = ConfigDict(frozen=True)
