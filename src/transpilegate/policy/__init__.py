"""File-inclusion policy engine exports."""

from transpilegate.policy.concurrency import ConcurrencyDecision, decide_concurrency
from transpilegate.policy.fingerprint import build_cache_fingerprint
from transpilegate.policy.inclusion import (
    InclusionContext,
    InclusionPredicate,
    InclusionRule,
)
from transpilegate.policy.specifiers import (
    DependencySpecifier,
    InvalidSpecifierError,
    PackageName,
    PathPattern,
    compile_specifiers,
)

__all__ = [
    "ConcurrencyDecision",
    "DependencySpecifier",
    "InclusionContext",
    "InclusionPredicate",
    "InclusionRule",
    "InvalidSpecifierError",
    "PackageName",
    "PathPattern",
    "build_cache_fingerprint",
    "compile_specifiers",
    "decide_concurrency",
]
