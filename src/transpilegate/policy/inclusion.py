"""Ordered exclusion policy for the script rule."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from transpilegate.constants import (
    COMPONENT_SCRIPT_PATTERN,
    RUNTIME_HELPER_FRAGMENTS,
    THIRD_PARTY_DIR,
)
from transpilegate.schemas.base import FrozenSchemaModel

LOGGER = logging.getLogger(__name__)


class InclusionContext(FrozenSchemaModel):
    """Build-time inputs the predicate is closed over."""

    service_root: str | None = None
    transpile_runtime_helpers: bool = False


@dataclass(frozen=True)
class InclusionRule:
    """One (condition, outcome) pair; `exclude` is returned when `matches` fires."""

    name: str
    matches: Callable[[str], bool]
    exclude: bool


@dataclass(frozen=True)
class InclusionPredicate:
    """First matching rule decides whether a file skips the compiler."""

    rules: tuple[InclusionRule, ...]

    @classmethod
    def build(
        cls,
        context: InclusionContext,
        matcher: re.Pattern[str] | None,
    ) -> "InclusionPredicate":
        rules = [
            InclusionRule(
                name="component_script",
                matches=lambda path: COMPONENT_SCRIPT_PATTERN.search(path) is not None,
                exclude=False,
            )
        ]
        service_root = context.service_root
        if service_root:
            rules.append(
                InclusionRule(
                    name="service_internal",
                    matches=lambda path: path.startswith(service_root),
                    exclude=True,
                )
            )
        if context.transpile_runtime_helpers:
            rules.append(
                InclusionRule(
                    name="runtime_helpers",
                    matches=lambda path: any(
                        fragment in path for fragment in RUNTIME_HELPER_FRAGMENTS
                    ),
                    exclude=False,
                )
            )
        if matcher is not None:
            rules.append(
                InclusionRule(
                    name="transpile_dependencies",
                    matches=lambda path: matcher.search(path) is not None,
                    exclude=False,
                )
            )
        rules.append(
            InclusionRule(
                name="third_party",
                matches=lambda path: THIRD_PARTY_DIR in path,
                exclude=True,
            )
        )
        rules.append(
            InclusionRule(name="default", matches=lambda path: True, exclude=False)
        )
        LOGGER.debug(
            "Inclusion predicate built with rules: %s",
            ", ".join(rule.name for rule in rules),
        )
        return cls(rules=tuple(rules))

    def __call__(self, filepath: str) -> bool:
        return self.decide(filepath).exclude

    def decide(self, filepath: str) -> InclusionRule:
        """Return the first rule whose condition holds for `filepath`."""
        for rule in self.rules:
            if rule.matches(filepath):
                return rule
        raise LookupError(f"No inclusion rule matched {filepath!r}")

    def explain(self, filepath: str) -> str:
        """Name the rule responsible for the decision on `filepath`."""
        return self.decide(filepath).name
