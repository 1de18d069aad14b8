"""Parallel compilation policy."""

from __future__ import annotations

from typing import Any

from transpilegate.schemas.base import FrozenSchemaModel


class ConcurrencyDecision(FrozenSchemaModel):
    """Whether to dispatch compilation to workers, and how many."""

    enabled: bool = False
    worker_count: int | None = None

    def loader_options(self) -> dict[str, Any]:
        """Options for the worker-dispatch stage; empty keeps its default."""
        if self.worker_count is None:
            return {}
        return {"workers": self.worker_count}


def decide_concurrency(
    *,
    production: bool,
    parallel: bool | int | None,
) -> ConcurrencyDecision:
    """Enable workers only for production builds with a truthy `parallel`."""
    if not (production and parallel):
        return ConcurrencyDecision(enabled=False)
    if isinstance(parallel, int) and not isinstance(parallel, bool):
        return ConcurrencyDecision(enabled=True, worker_count=parallel)
    return ConcurrencyDecision(enabled=True)
