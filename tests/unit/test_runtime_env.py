"""Runtime .env loading tests."""

from __future__ import annotations

import os
from pathlib import Path

from transpilegate.runtime_env import load_runtime_env


def _write_env(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def _clear_env(monkeypatch, *names: str) -> None:  # type: ignore[no-untyped-def]
    # setenv first so values loaded from .env are rolled back after the test.
    for name in names:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_load_runtime_env_reads_dotenv(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Runtime loader should populate build flags from .env when present."""
    _write_env(tmp_path / ".env", "NODE_ENV=production\nVUE_CLI_MODERN_BUILD=1\n")
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch, "NODE_ENV", "VUE_CLI_MODERN_BUILD")
    monkeypatch.delenv("TRANSPILEGATE_DISABLE_DOTENV", raising=False)

    loaded = load_runtime_env()

    assert loaded is True
    assert os.environ["NODE_ENV"] == "production"
    assert os.environ["VUE_CLI_MODERN_BUILD"] == "1"


def test_load_runtime_env_does_not_override_existing(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Runtime loader should preserve already-exported process env values."""
    _write_env(tmp_path / ".env", "NODE_ENV=production\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NODE_ENV", "development")
    monkeypatch.delenv("TRANSPILEGATE_DISABLE_DOTENV", raising=False)

    loaded = load_runtime_env()

    assert loaded is True
    assert os.environ["NODE_ENV"] == "development"


def test_load_runtime_env_from_project_root(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    project = tmp_path / "project"
    project.mkdir()
    _write_env(project / ".env", "TRANSPILEGATE_PARALLEL=3\n")
    _clear_env(monkeypatch, "TRANSPILEGATE_PARALLEL")
    monkeypatch.delenv("TRANSPILEGATE_DISABLE_DOTENV", raising=False)

    assert load_runtime_env(project_root=project) is True
    assert os.environ["TRANSPILEGATE_PARALLEL"] == "3"
    assert load_runtime_env(project_root=tmp_path) is False


def test_load_runtime_env_can_be_disabled(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    """Runtime loader should no-op when explicit disable flag is set."""
    _write_env(tmp_path / ".env", "VUE_CLI_MODERN_BUILD=1\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TRANSPILEGATE_DISABLE_DOTENV", "true")
    _clear_env(monkeypatch, "VUE_CLI_MODERN_BUILD")

    loaded = load_runtime_env()

    assert loaded is False
    assert "VUE_CLI_MODERN_BUILD" not in os.environ
