# tests/unit/systems/test_market.py
"""
Purchase and RPS unit tests.
"""
from __future__ import annotations

import copy

import pytest

from tycoonengine.catalog import Category
from tycoonengine.systems import (
    apply_purchase,
    recompute_total_rps,
    set_purchase_quantity,
)
from tests.helpers.factories import mock_state


def test_purchase_success(engine) -> None:
    state = mock_state(cash=60_000)

    assert apply_purchase(engine, state, "financial", "deposit")

    assert state.cash == 10_000
    assert state.financial == {"deposit": 1}
    assert state.total_rps == 5


def test_purchase_accepts_enum_category(engine) -> None:
    state = mock_state(cash=50_000)
    assert apply_purchase(engine, state, Category.FINANCIAL, "deposit")
    assert state.cash == 0


def test_one_short_is_rejected(engine) -> None:
    """cash == cost − 1 leaves the state untouched."""
    state = mock_state(cash=49_999)
    before = copy.deepcopy(state)

    assert not apply_purchase(engine, state, "financial", "deposit")
    assert state == before


def test_locked_item_rejected(engine) -> None:
    state = mock_state(cash=10**9)
    before = copy.deepcopy(state)

    assert not apply_purchase(engine, state, "financial", "savings")
    assert state == before


def test_unknown_item_rejected(engine) -> None:
    state = mock_state(cash=10**9)
    assert not apply_purchase(engine, state, "financial", "gold")
    assert state.cash == 10**9


def test_batch_priced_at_single_unit_rate(engine) -> None:
    """A batch is charged the price of the next unit only."""
    state = mock_state(cash=100_000, financial={"deposit": 1})

    assert apply_purchase(engine, state, "financial", "deposit", quantity=10)

    assert state.cash == 100_000 - 57_500
    assert state.financial["deposit"] == 11
    assert state.total_rps == 55


def test_batch_uses_state_quantity_by_default(engine) -> None:
    state = mock_state(cash=50_000, purchase_quantity=3)

    assert apply_purchase(engine, state, "financial", "deposit")
    assert state.financial["deposit"] == 3


def test_purchase_unlocks_next_tier(engine) -> None:
    state = mock_state(cash=50_000)
    unlocked = []

    apply_purchase(engine, state, "financial", "deposit", on_unlock=unlocked.append)

    assert [i.id for i in unlocked] == ["deposit", "savings"]
    assert state.unlocked_products == {"deposit", "savings"}


@pytest.mark.parametrize("quantity", [0, -1, 1.5, True])
def test_invalid_quantity(engine, quantity) -> None:
    with pytest.raises(ValueError, match="positive int"):
        apply_purchase(engine, mock_state(cash=1e9), "financial", "deposit", quantity)


def test_recompute_total_rps(engine) -> None:
    state = mock_state(
        financial={"deposit": 3, "savings": 0, "ghost": 5},
        real_estate={"villa": 2},
    )

    total = recompute_total_rps(engine, state)

    assert total == 3 * 5 + 2 * 8438
    assert state.total_rps == total


def test_set_purchase_quantity(state) -> None:
    set_purchase_quantity(state, 10)
    assert state.purchase_quantity == 10

    with pytest.raises(ValueError):
        set_purchase_quantity(state, 0)
    assert state.purchase_quantity == 10


def test_purchase_after_huge_batch_is_rejected(engine) -> None:
    """Once the next price overflows, further purchases are refused quietly."""
    state = mock_state(cash=10**9)
    set_purchase_quantity(state, 10_000)

    assert apply_purchase(engine, state, "financial", "deposit")
    assert state.financial["deposit"] == 10_000
    before = copy.deepcopy(state)

    assert not apply_purchase(engine, state, "financial", "deposit")
    assert state.cash == before.cash
    assert state.financial == before.financial
