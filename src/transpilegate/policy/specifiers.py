"""Compile transpile-dependency specifiers into one path matcher."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any, Union

from pydantic import Field

from transpilegate.constants import THIRD_PARTY_DIR
from transpilegate.schemas.base import FrozenSchemaModel

# Either separator, so one matcher serves POSIX and Windows paths.
_SEPARATOR = r"[\\/]"

_LEADING_FLAGS = re.compile(r"^(?:\(\?[aiLmsux]+\))+")
_SCOPED_FLAGS = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


class InvalidSpecifierError(ValueError):
    """Raised when a transpile dependency is neither a string nor a pattern."""


class PackageName(FrozenSchemaModel):
    """Dependency named by its installed package name."""

    name: str = Field(min_length=1)


class PathPattern(FrozenSchemaModel):
    """Dependency selected by a regular expression over file paths."""

    pattern: re.Pattern[str]


DependencySpecifier = Union[PackageName, PathPattern]


def _invalid(value: Any) -> InvalidSpecifierError:
    return InvalidSpecifierError(
        "transpile_dependencies only accepts a list of strings or regular "
        f"expressions, got {type(value).__name__}: {value!r}"
    )


def coerce_specifier(value: Any) -> PackageName | PathPattern:
    """Normalize one raw configuration entry into a specifier variant."""
    if isinstance(value, (PackageName, PathPattern)):
        return value
    if isinstance(value, str):
        return PackageName(name=value)
    if isinstance(value, re.Pattern) and isinstance(value.pattern, str):
        return PathPattern(pattern=value)
    if (
        isinstance(value, Mapping)
        and set(value) == {"pattern"}
        and isinstance(value["pattern"], str)
    ):
        return PathPattern(pattern=re.compile(value["pattern"]))
    raise _invalid(value)


def package_fragment(name: str) -> str:
    """Return the regex source matching `node_modules/<name>/` in a path."""
    segments = [THIRD_PARTY_DIR, *re.split(r"[\\/]", name.strip("/\\"))]
    return _SEPARATOR.join(re.escape(segment) for segment in segments) + _SEPARATOR


def pattern_fragment(pattern: re.Pattern[str]) -> str:
    """Return the pattern's source with its flags scoped to its own group.

    Global flags are only legal at the start of a whole expression, so they
    are moved into the group instead of being joined in as written.
    """
    source = _LEADING_FLAGS.sub("", pattern.pattern)
    flags = "".join(letter for flag, letter in _SCOPED_FLAGS if pattern.flags & flag)
    if pattern.flags & re.VERBOSE:
        # A trailing comment would otherwise swallow the closing paren.
        source += "\n"
    return f"(?{flags}:{source})"


def compile_specifiers(specifiers: Iterable[Any]) -> re.Pattern[str] | None:
    """Compile specifiers into one alternation, or None when there are none."""
    fragments: list[str] = []
    for raw in specifiers:
        specifier = coerce_specifier(raw)
        if isinstance(specifier, PackageName):
            fragments.append(package_fragment(specifier.name))
        else:
            fragments.append(pattern_fragment(specifier.pattern))
    if not fragments:
        return None
    return re.compile("|".join(fragments))
