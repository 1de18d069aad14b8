"""Host plugin API contract and a filesystem-backed implementation."""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol

import orjson

from transpilegate.constants import ENV_MODE, THIRD_PARTY_DIR
from transpilegate.pipeline.rules import ScriptRule
from transpilegate.schemas.cache_models import CacheConfig, CacheFingerprint

LOGGER = logging.getLogger(__name__)

LOCKFILES = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml")


class PluginHost(Protocol):
    """Services the build tool exposes to the transpile plugin."""

    def resolve(self, rel_path: str) -> str:
        """Resolve a project-relative path."""

    def package_dir(self, name: str) -> str | None:
        """Directory holding the resolved entry of an installed package."""

    def package_version(self, name: str) -> str:
        """Installed version of a package."""

    def manifest_field(self, name: str) -> Any:
        """Field of the project's own package manifest, or None."""

    def resolve_loader(self, name: str) -> str:
        """Location of a loader the rule should use."""

    def load_partial_compiler_config(self, filename: str) -> None:
        """Let the compiler load project config as if compiling `filename`."""

    def gen_cache_config(
        self, identifier: str, fingerprint: CacheFingerprint
    ) -> CacheConfig:
        """Turn a fingerprint into cache options for a compiler stage."""

    def prepend_loader_path(self, path: str) -> None:
        """Search `path` first when resolving loaders."""

    def register_rule(self, rule: ScriptRule) -> None:
        """Hand a configured rule to the bundler."""


class LocalPluginHost:
    """Plugin host reading a project laid out on disk.

    Rules are kept in memory; nothing is bundled.
    """

    def __init__(
        self,
        project_root: Path,
        *,
        plugin_root: Path | None = None,
        env: Mapping[str, str] | None = None,
        compiler_config_loader: Callable[[str], None] | None = None,
    ) -> None:
        self.project_root = project_root.resolve()
        self.plugin_root = plugin_root.resolve() if plugin_root is not None else None
        self.loader_paths: list[Path] = []
        self.rules: dict[str, ScriptRule] = {}
        self._env = env
        self._compiler_config_loader = compiler_config_loader

    def resolve(self, rel_path: str) -> str:
        return str(self.project_root / rel_path)

    def package_dir(self, name: str) -> str | None:
        package_root = self._locate_package(name)
        if package_root is None:
            return None
        manifest = _read_manifest(package_root / "package.json")
        entry = package_root / manifest.get("main", "index.js")
        return str(entry.parent)

    def package_version(self, name: str) -> str:
        package_root = self._locate_package(name)
        if package_root is None:
            raise FileNotFoundError(f"Package not installed: {name}")
        version = _read_manifest(package_root / "package.json").get("version")
        if not isinstance(version, str):
            raise ValueError(f"Package manifest for {name} has no version")
        return version

    def manifest_field(self, name: str) -> Any:
        manifest_path = self.project_root / "package.json"
        if not manifest_path.exists():
            return None
        return _read_manifest(manifest_path).get(name)

    def resolve_loader(self, name: str) -> str:
        for root in [*self.loader_paths, *self._package_roots()]:
            candidate = root / name
            if (candidate / "package.json").exists():
                return str(candidate)
        raise FileNotFoundError(f"Loader not found: {name}")

    def load_partial_compiler_config(self, filename: str) -> None:
        if self._compiler_config_loader is None:
            LOGGER.debug("No compiler config loader; skipping %s", filename)
            return
        self._compiler_config_loader(filename)

    def gen_cache_config(
        self, identifier: str, fingerprint: CacheFingerprint
    ) -> CacheConfig:
        env = os.environ if self._env is None else self._env
        digest = hashlib.sha256()
        digest.update(fingerprint.digest().encode("utf-8"))
        digest.update(f"{ENV_MODE}={env.get(ENV_MODE, '')}".encode("utf-8"))
        for rel_path in (*fingerprint.config_files, *LOCKFILES):
            path = self.project_root / rel_path
            if path.is_file():
                digest.update(rel_path.encode("utf-8"))
                digest.update(path.read_bytes())
        cache_directory = self.project_root / THIRD_PARTY_DIR / ".cache" / identifier
        return CacheConfig(
            cache_directory=str(cache_directory),
            cache_identifier=digest.hexdigest(),
        )

    def prepend_loader_path(self, path: str) -> None:
        self.loader_paths.insert(0, Path(path))

    def register_rule(self, rule: ScriptRule) -> None:
        if rule.name in self.rules:
            LOGGER.warning("Replacing previously registered rule %r", rule.name)
        self.rules[rule.name] = rule

    def _package_roots(self) -> list[Path]:
        roots = [self.project_root / THIRD_PARTY_DIR]
        if self.plugin_root is not None:
            roots.insert(0, self.plugin_root / THIRD_PARTY_DIR)
        return roots

    def _locate_package(self, name: str) -> Path | None:
        for root in self._package_roots():
            candidate = root / name
            if (candidate / "package.json").exists():
                return candidate
        return None


def _read_manifest(path: Path) -> dict[str, Any]:
    data = orjson.loads(path.read_bytes())
    if not isinstance(data, dict):
        raise ValueError(f"Package manifest must be a JSON object: {path}")
    return data
