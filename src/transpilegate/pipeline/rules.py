"""Bundler rule registration payloads."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class LoaderUse:
    """One stage of a rule: a named loader and its options."""

    name: str
    loader: str
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class ScriptRule:
    """Module rule as handed to the bundler.

    Stages in `uses` run in list order, so a worker-dispatch stage must be
    added before the compiler stage it wraps.
    """

    name: str
    test: re.Pattern[str]
    exclude: list[Callable[[str], bool]] = field(default_factory=list)
    uses: list[LoaderUse] = field(default_factory=list)

    def use(self, name: str, loader: str, options: dict[str, Any] | None = None) -> LoaderUse:
        entry = LoaderUse(name=name, loader=loader, options=dict(options or {}))
        self.uses.append(entry)
        return entry

    def use_names(self) -> list[str]:
        return [entry.name for entry in self.uses]

    def applies_to(self, filepath: str) -> bool:
        """Whether the bundler would send `filepath` through this rule."""
        if self.test.search(filepath) is None:
            return False
        return not any(predicate(filepath) for predicate in self.exclude)
