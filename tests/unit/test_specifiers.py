"""Specifier compilation tests."""

from __future__ import annotations

import re

import pytest

from transpilegate.policy.specifiers import (
    InvalidSpecifierError,
    PackageName,
    PathPattern,
    coerce_specifier,
    compile_specifiers,
)


def test_empty_specifier_list_yields_no_matcher() -> None:
    """No specifiers should produce the None sentinel, not an empty regex."""
    assert compile_specifiers([]) is None


def test_package_name_matches_its_install_dir_only() -> None:
    """A literal name must not match a package sharing its prefix."""
    matcher = compile_specifiers(["pkg"])
    assert matcher is not None
    assert matcher.search("/proj/node_modules/pkg/index.js")
    assert not matcher.search("/proj/node_modules/pkg-extra/index.js")
    assert not matcher.search("/proj/src/pkg/index.js")


def test_package_name_matches_windows_paths() -> None:
    """Backslash-separated paths should match without extra escaping."""
    matcher = compile_specifiers(["lodash-es", "@scope/ui"])
    assert matcher is not None
    assert matcher.search("C:\\proj\\node_modules\\lodash-es\\index.js")
    assert matcher.search("C:\\proj\\node_modules\\@scope\\ui\\dist\\a.js")
    assert matcher.search("/proj/node_modules/@scope/ui/dist/a.js")


def test_package_name_dots_are_literal() -> None:
    """Dots in package names should not act as regex wildcards."""
    matcher = compile_specifiers(["vue.draggable"])
    assert matcher is not None
    assert matcher.search("/p/node_modules/vue.draggable/x.js")
    assert not matcher.search("/p/node_modules/vueXdraggable/x.js")


def test_pattern_source_is_kept_in_its_own_group() -> None:
    """Pattern specifiers contribute their source, grouped, to the alternation."""
    matcher = compile_specifiers([re.compile(r"my-lib[\\/]src"), "pkg"])
    assert matcher is not None
    assert matcher.pattern.startswith(r"(?:my-lib[\\/]src)|")
    assert matcher.search("/p/node_modules/my-lib/src/a.js")
    assert matcher.search("/p/node_modules/pkg/a.js")


def test_inline_flag_pattern_after_package_name() -> None:
    """A leading (?i) must stay scoped to its own pattern once joined."""
    matcher = compile_specifiers(["pkg", re.compile(r"(?i)MyLib")])
    assert matcher is not None
    assert matcher.search("/p/node_modules/mylib/a.js")
    assert matcher.search("/p/node_modules/pkg/a.js")
    assert not matcher.search("/p/node_modules/PKG/a.js")


def test_compile_flags_are_kept() -> None:
    """Flags given to re.compile should apply to that pattern only."""
    matcher = compile_specifiers([re.compile(r"mylib", re.IGNORECASE), "pkg"])
    assert matcher is not None
    assert matcher.search("/p/node_modules/MyLib/a.js")
    assert not matcher.search("/p/node_modules/PKG/a.js")


def test_verbose_pattern_with_trailing_comment() -> None:
    matcher = compile_specifiers([re.compile(r"my-lib  # vendored fork", re.VERBOSE), "pkg"])
    assert matcher is not None
    assert matcher.search("/p/node_modules/my-lib/a.js")
    assert matcher.search("/p/node_modules/pkg/a.js")


def test_mapping_pattern_entry_is_coerced() -> None:
    """YAML-friendly pattern mappings should become PathPattern variants."""
    specifier = coerce_specifier({"pattern": "foo$"})
    assert isinstance(specifier, PathPattern)
    assert specifier.pattern.pattern == "foo$"
    assert isinstance(coerce_specifier("foo"), PackageName)


@pytest.mark.parametrize(
    "bad_value",
    [
        42,
        None,
        ["pkg"],
        {"name": "pkg"},
        {"kind": "package", "name": "pkg"},
        {"pattern": 5},
        re.compile(rb"x"),
    ],
)
def test_invalid_specifier_is_fatal(bad_value: object) -> None:
    """Unsupported entries must abort compilation instead of being skipped."""
    with pytest.raises(InvalidSpecifierError, match="only accepts"):
        compile_specifiers(["ok", bad_value])
