"""Schema contract exports."""

from transpilegate.schemas.base import FrozenSchemaModel, StrictSchemaModel
from transpilegate.schemas.cache_models import CacheConfig, CacheFingerprint

__all__ = [
    "CacheConfig",
    "CacheFingerprint",
    "FrozenSchemaModel",
    "StrictSchemaModel",
]
