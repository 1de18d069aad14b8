"""Cache-keying contracts shared by the fingerprint builder and hosts."""

from __future__ import annotations

import hashlib
from typing import Any

import orjson
from pydantic import Field

from transpilegate.schemas.base import FrozenSchemaModel, StrictSchemaModel


class CacheFingerprint(FrozenSchemaModel):
    """Factors whose change must invalidate cached compiler output."""

    variables: dict[str, Any] = Field(default_factory=dict)
    config_files: tuple[str, ...] = ()

    def digest(self) -> str:
        """Stable sha256 over variables and config file names."""
        payload = orjson.dumps(
            {"variables": self.variables, "config_files": list(self.config_files)},
            option=orjson.OPT_SORT_KEYS,
        )
        return hashlib.sha256(payload).hexdigest()


class CacheConfig(StrictSchemaModel):
    """Cache location and identifier handed to the compiler stage."""

    cache_directory: str = Field(min_length=1)
    cache_identifier: str = Field(min_length=1)

    def as_loader_options(self) -> dict[str, str]:
        return {
            "cacheDirectory": self.cache_directory,
            "cacheIdentifier": self.cache_identifier,
        }
