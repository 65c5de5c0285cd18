# src/tycoonengine/systems/market.py
"""
Asset purchases and the aggregate revenue-per-second they produce.
"""
from __future__ import annotations

from tycoonengine.catalog import Category
from tycoonengine.economy import EconomyEngine
from tycoonengine.logging import DEEP_DEBUG, getLogger
from tycoonengine.state import ProgressState
from tycoonengine.systems.unlocks import UnlockCallback, check_new_unlocks

log = getLogger(__name__)


def recompute_total_rps(engine: EconomyEngine, state: ProgressState) -> float:
    """
    total_rps = Σ income(category, id, count)   over every count > 0
    """
    total = 0.0
    for category in (Category.FINANCIAL, Category.REAL_ESTATE):
        for item_id, count in state.holdings(category).items():
            if count > 0:
                income = engine.income(category, item_id, count)
                if log.isEnabledFor(DEEP_DEBUG):
                    log.deep("    %s/%s x%d -> %s/s", category.value, item_id, count, income)
                total += income
    state.total_rps = total
    return total


def set_purchase_quantity(state: ProgressState, quantity: int) -> None:
    """Select how many units a single purchase action buys."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValueError(f"purchase quantity must be a positive int, got {quantity!r}")
    state.purchase_quantity = quantity


def apply_purchase(
    engine: EconomyEngine,
    state: ProgressState,
    category: Category | str,
    item_id: str,
    quantity: int | None = None,
    on_unlock: UnlockCallback | None = None,
) -> bool:
    """
    Buy *quantity* units of an item (defaults to ``state.purchase_quantity``).

    Rule
    ----
        cost = cost(category, id, owned)        (one unit's price, whole batch)
        locked ∨ cash < cost  →  rejected, nothing changes
        cash  -= cost
        owned += quantity

    The price is taken once at the current owned count and charged for the
    whole batch; it is not summed unit by unit.

    Returns
    -------
    bool
        True when the purchase went through.
    """
    qty = state.purchase_quantity if quantity is None else quantity
    if isinstance(qty, bool) or not isinstance(qty, int) or qty < 1:
        raise ValueError(f"purchase quantity must be a positive int, got {qty!r}")

    item = engine.catalog.get_item(category, item_id)
    if item is None:
        log.debug("  Purchase rejected: unknown item %s/%s", category, item_id)
        return False

    holdings = state.holdings(item.category)
    owned = holdings.get(item_id, 0)
    cost = engine.cost(item.category, item_id, owned)

    if not engine.is_unlocked(item.category, item_id, state):
        log.debug("  Purchase rejected: '%s' is locked", item_id)
        return False
    if state.cash < cost:
        log.debug(
            "  Purchase rejected: '%s' costs %.0f, cash is %.0f",
            item_id,
            cost,
            state.cash,
        )
        return False

    state.cash -= cost
    holdings[item_id] = owned + qty
    log.debug(
        "  Bought %d x '%s' for %.0f (now owning %d)",
        qty,
        item_id,
        cost,
        holdings[item_id],
    )

    recompute_total_rps(engine, state)
    check_new_unlocks(engine, state, on_unlock)
    return True
