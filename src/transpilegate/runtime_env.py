"""Runtime environment loading helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from transpilegate.constants import ENV_DISABLE_DOTENV

_DISABLE_DOTENV_VALUES = {"1", "true", "yes", "on"}


def load_runtime_env(
    *,
    filename: str = ".env",
    project_root: Path | None = None,
) -> bool:
    """Load .env without overriding existing process env.

    Looks in `project_root` when given, otherwise in cwd and its parents.
    Build flags such as NODE_ENV are commonly kept there.
    """
    disabled = os.getenv(ENV_DISABLE_DOTENV, "").strip().lower()
    if disabled in _DISABLE_DOTENV_VALUES:
        return False

    if project_root is not None:
        candidate = project_root / filename
        dotenv_path = str(candidate) if candidate.is_file() else ""
    else:
        dotenv_path = find_dotenv(filename=filename, usecwd=True)
    if not dotenv_path:
        return False

    return bool(load_dotenv(dotenv_path=dotenv_path, override=False))
