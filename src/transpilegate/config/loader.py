"""Configuration loading and override resolution."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from transpilegate.config.models import BuildEnvironment, PluginOptions
from transpilegate.constants import ENV_PARALLEL_OVERRIDE

DEFAULT_CONFIG_PATH = Path("transpile.config.yaml")


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError("Configuration file must deserialize to a mapping")
    return data


def apply_overrides(
    raw_config: dict[str, Any],
    env: Mapping[str, str],
    overrides: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Apply precedence: explicit overrides > env > YAML defaults."""
    merged = dict(raw_config)
    env_parallel = env.get(ENV_PARALLEL_OVERRIDE)
    if env_parallel:
        merged["parallel"] = _parse_parallel(env_parallel)

    if overrides:
        for key in ("transpile_dependencies", "transpileDependencies"):
            if overrides.get(key) is not None:
                merged.pop("transpileDependencies", None)
                merged["transpile_dependencies"] = overrides[key]
        if "parallel" in overrides:
            merged["parallel"] = overrides["parallel"]
    return merged


def _parse_parallel(raw: str) -> bool | int:
    normalized = raw.strip().lower()
    if normalized.lstrip("-").isdigit():
        return int(normalized)
    if normalized in {"true", "yes", "on"}:
        return True
    if normalized in {"false", "no", "off"}:
        return False
    raise ValueError(f"{ENV_PARALLEL_OVERRIDE} must be a boolean or integer, got {raw!r}")


def load_plugin_options(
    config_path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> PluginOptions:
    """Load and validate plugin options.

    A missing default config file means defaults; an explicit path must exist.
    """
    active_env = os.environ if env is None else env
    path = config_path or DEFAULT_CONFIG_PATH
    raw = _load_yaml(path) if config_path is not None or path.exists() else {}
    merged = apply_overrides(raw, active_env, overrides)
    return PluginOptions.model_validate(merged)


def load_build_environment(env: Mapping[str, str] | None = None) -> BuildEnvironment:
    """Snapshot the build-mode and compiler flags from the environment."""
    return BuildEnvironment.from_env(os.environ if env is None else env)
