"""Shared configuration of domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model rejecting unknown fields.

    Entities are replaced, never mutated: repositories hand out new
    instances via ``model_copy`` when something changes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
