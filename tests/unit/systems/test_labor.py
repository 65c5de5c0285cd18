# tests/unit/systems/test_labor.py
"""
Work-click unit tests.
"""
from __future__ import annotations

from tycoonengine.systems import apply_work_click, recompute_income_per_click
from tests.helpers.factories import mock_state


def test_first_click_pays_part_time_rate(engine, state) -> None:
    """
    floor(20,000,000 / 3600 · 1.0) = 5555
    """
    paid = apply_work_click(engine, state)

    assert paid == 5555
    assert state.cash == 5555
    assert state.total_earnings == 5555
    assert state.total_clicks == 1
    assert state.income_per_click == 5555


def test_click_paid_at_rate_before_promotion(engine) -> None:
    """The click that reaches a new tier is still paid at the old rate."""
    state = mock_state(total_clicks=19)

    paid = apply_work_click(engine, state)

    assert paid == 5555
    assert state.total_clicks == 20
    # promotion shows up in the refreshed per-click income
    assert state.income_per_click == engine.income_per_click(engine.current_career(20))
    assert state.income_per_click > 5555


def test_clicks_accumulate(engine, state) -> None:
    for _ in range(25):
        apply_work_click(engine, state)

    expected = 20 * 5555 + 5 * state.income_per_click
    assert state.total_clicks == 25
    assert state.cash == expected
    assert state.total_earnings == expected


def test_click_checks_unlocks(engine, state) -> None:
    unlocked = []
    apply_work_click(engine, state, on_unlock=unlocked.append)

    assert "deposit" in state.unlocked_products
    assert [item.id for item in unlocked] == ["deposit"]


def test_recompute_income_per_click(engine) -> None:
    state = mock_state(total_clicks=2000)
    assert recompute_income_per_click(engine, state) == 3472222
    assert state.income_per_click == 3472222
