"""Pydantic models for plugin options and the build environment."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import AliasChoices, Field, field_validator

from transpilegate.constants import (
    ENV_MODE,
    ENV_MODERN_BUILD,
    ENV_TRANSPILE_RUNTIME,
)
from transpilegate.policy.specifiers import DependencySpecifier, coerce_specifier
from transpilegate.schemas.base import FrozenSchemaModel, StrictSchemaModel


class PluginOptions(StrictSchemaModel):
    """User options recognized by the transpile plugin."""

    transpile_dependencies: list[DependencySpecifier] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "transpile_dependencies", "transpileDependencies"
        ),
    )
    parallel: bool | int | None = None

    @field_validator("transpile_dependencies", mode="before")
    @classmethod
    def coerce_specifiers(cls, value: Any) -> list[Any]:
        if value is None:
            return []
        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise ValueError(
                "transpile_dependencies only accepts a list of strings or regular "
                "expressions"
            )
        return [coerce_specifier(item) for item in value]


class BuildEnvironment(FrozenSchemaModel):
    """Process-wide build signals, read once per build."""

    production: bool = False
    transpile_runtime_helpers: bool = False
    modern_build: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "BuildEnvironment":
        return cls(
            production=env.get(ENV_MODE) == "production",
            transpile_runtime_helpers=bool(env.get(ENV_TRANSPILE_RUNTIME)),
            modern_build=bool(env.get(ENV_MODERN_BUILD)),
        )
