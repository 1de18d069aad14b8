"""Shared schema base classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictSchemaModel(BaseModel):
    """Base model with strict validation defaults."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True, frozen=False)


class FrozenSchemaModel(BaseModel):
    """Immutable value model fixed for the lifetime of one build."""

    model_config = ConfigDict(extra="forbid", frozen=True)
