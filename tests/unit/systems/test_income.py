# tests/unit/systems/test_income.py
"""
Income-tick unit tests.
"""
from __future__ import annotations

from tycoonengine.systems import tick
from tests.helpers.factories import mock_state


def test_tick_adds_rps() -> None:
    state = mock_state(cash=10.0, total_rps=5.0, total_earnings=100.0)

    credited = tick(state)

    assert credited == 5.0
    assert state.cash == 15.0
    assert state.total_earnings == 105.0


def test_tick_noop_without_income() -> None:
    state = mock_state(cash=10.0)

    assert tick(state) == 0.0
    assert state.cash == 10.0
    assert state.total_earnings == 0.0


def test_ticks_accumulate() -> None:
    state = mock_state(total_rps=8438.0)
    for _ in range(60):
        tick(state)
    assert state.cash == 60 * 8438
