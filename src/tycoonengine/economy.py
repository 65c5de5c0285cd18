"""
Economy engine: pure queries over a catalog and a progress snapshot.

Cost compounds geometrically with the owned count while income scales
linearly, so each extra unit of the same asset returns less per unit spent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tycoonengine.catalog import Catalog, CareerTier, Category, ItemDefinition
from tycoonengine.logging import getLogger
from tycoonengine.state import ProgressState

__all__ = ["EconomyEngine", "SECONDS_PER_HOUR"]

log = getLogger(__name__)

SECONDS_PER_HOUR = 3600

# decimals kept before flooring a price, so float noise such as
# 50000 * 1.15 == 57499.99999999999 does not lose a whole unit
_COST_DECIMALS = 6


@dataclass(slots=True)
class EconomyEngine:
    """
    Read-only economic rules bound to one :class:`Catalog`.

    None of the methods mutate the state they are given.
    """

    catalog: Catalog

    # items
    # ---------------------------------------------------------------------
    def cost(
        self, category: Category | str, item_id: str, owned: int
    ) -> int | float:
        """
        Price of the next purchase when *owned* units are held.

        Rule
        ----
            cost = floor(base_cost · multiplier ^ owned)

        Unknown items cost 0. A price beyond float range is ``math.inf``,
        which no amount of cash can cover.
        """
        item = self.catalog.get_item(category, item_id)
        if item is None:
            return 0
        try:
            price = item.base_cost * item.cost_multiplier**owned
        except OverflowError:
            return math.inf
        if not math.isfinite(price):
            return math.inf
        return math.floor(round(price, _COST_DECIMALS))

    def income(self, category: Category | str, item_id: str, owned: int) -> float:
        """
        Revenue per second of *owned* units.

        Rule
        ----
            income = base_income · owned

        Unknown items earn 0.
        """
        item = self.catalog.get_item(category, item_id)
        if item is None:
            return 0
        return item.base_income * owned

    def is_unlocked(
        self, category: Category | str, item_id: str, state: ProgressState
    ) -> bool:
        """Whether the item's unlock condition holds for *state*."""
        item = self.catalog.get_item(category, item_id)
        if item is None:
            return False
        unlocked = item.unlock_condition.evaluate(
            lambda ref: self.current_value_of(ref, state)
        )
        log.deep(
            "  unlock %s/%s [%s] -> %s",
            item.category.value,
            item_id,
            item.unlock_condition,
            unlocked,
        )
        return unlocked

    def can_afford(
        self, category: Category | str, item_id: str, state: ProgressState
    ) -> bool:
        """Whether *state* holds enough cash for the next unit of the item."""
        if self.catalog.get_item(category, item_id) is None:
            return False
        return state.cash >= self.cost(category, item_id, state.owned(category, item_id))

    @staticmethod
    def current_value_of(reference_id: str, state: ProgressState) -> float:
        """
        Resolve a condition's reference id against *state*.

        Lookup order: financial owned count, real-estate owned count, then a
        scalar state field (``totalClicks``, ``cash``...). Unresolved → 0.
        """
        if reference_id in state.financial:
            return state.financial[reference_id]
        if reference_id in state.real_estate:
            return state.real_estate[reference_id]
        value = state.field_value(reference_id)
        return 0 if value is None else value

    def items_of(self, category: Category | str) -> tuple[ItemDefinition, ...]:
        return self.catalog.get_all_of_category(category)

    # careers
    # ---------------------------------------------------------------------
    def current_career(self, total_clicks: int) -> CareerTier:
        """
        Highest tier reached with *total_clicks*.

        Tiers are scanned in catalog order and the scan stops at the first
        tier whose requirement is not met; the first tier is the floor.
        """
        careers = self.catalog.careers
        current = careers[0]
        for tier in careers:
            if total_clicks >= tier.required_clicks:
                current = tier
            else:
                break
        return current

    def next_career(self, total_clicks: int) -> CareerTier | None:
        """Tier following :meth:`current_career`, or None at the top."""
        careers = self.catalog.careers
        idx = careers.index(self.current_career(total_clicks))
        return careers[idx + 1] if idx < len(careers) - 1 else None

    def career_progress(self, total_clicks: int) -> float:
        """Fraction of the way from the current tier to the next (1.0 at the top)."""
        current = self.current_career(total_clicks)
        nxt = self.next_career(total_clicks)
        if nxt is None:
            return 1.0
        span = nxt.required_clicks - current.required_clicks
        if span <= 0:
            return 1.0
        return min(max((total_clicks - current.required_clicks) / span, 0.0), 1.0)

    @staticmethod
    def income_per_click(tier: CareerTier) -> int:
        """
        Rule
        ----
            income_per_click = floor(salary / 3600 · multiplier)
        """
        return math.floor(tier.salary / SECONDS_PER_HOUR * tier.multiplier)
