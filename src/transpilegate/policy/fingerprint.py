"""Build-cache fingerprint for compiled output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from transpilegate.constants import (
    CACHE_CONFIG_FILES,
    COMPILER_LOADER,
    COMPILER_PACKAGE,
    PRESET_PACKAGE,
)
from transpilegate.schemas.cache_models import CacheFingerprint

if TYPE_CHECKING:
    from transpilegate.config.models import BuildEnvironment
    from transpilegate.pipeline.host import PluginHost

LOGGER = logging.getLogger(__name__)


def build_cache_fingerprint(
    host: PluginHost,
    environment: BuildEnvironment,
) -> CacheFingerprint:
    """Collect tool versions, build flags and targets that key the cache.

    File contents are left to the host; only the names of the config files
    that influence output are declared here.
    """
    fingerprint = CacheFingerprint(
        variables={
            COMPILER_PACKAGE: host.package_version(COMPILER_PACKAGE),
            PRESET_PACKAGE: host.package_version(PRESET_PACKAGE),
            COMPILER_LOADER: host.package_version(COMPILER_LOADER),
            "modern": environment.modern_build,
            "browserslist": host.manifest_field("browserslist"),
        },
        config_files=CACHE_CONFIG_FILES,
    )
    LOGGER.debug("Cache fingerprint digest: %s", fingerprint.digest())
    return fingerprint
