"""Concurrency policy tests."""

from __future__ import annotations

import pytest

from transpilegate.policy.concurrency import decide_concurrency


@pytest.mark.parametrize(
    ("production", "parallel"),
    [(False, True), (False, 4), (True, False), (True, None), (True, 0)],
)
def test_workers_disabled(production: bool, parallel: bool | int | None) -> None:
    decision = decide_concurrency(production=production, parallel=parallel)
    assert decision.enabled is False
    assert decision.worker_count is None
    assert decision.loader_options() == {}


def test_explicit_worker_count_is_passed_through() -> None:
    decision = decide_concurrency(production=True, parallel=4)
    assert decision.enabled is True
    assert decision.worker_count == 4
    assert decision.loader_options() == {"workers": 4}


def test_true_leaves_worker_count_to_dispatcher() -> None:
    """A boolean True must not be mistaken for one worker."""
    decision = decide_concurrency(production=True, parallel=True)
    assert decision.enabled is True
    assert decision.worker_count is None
    assert decision.loader_options() == {}
