"""Immutable catalog records: purchasable items and career tiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tycoonengine.catalog.conditions import ALWAYS, UnlockCondition


class Category(str, Enum):
    """
    Shop categories.

    The value is the wire name used by the JSON catalog and save files.
    """

    FINANCIAL = "financial"
    REAL_ESTATE = "realEstate"

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        """Accept an enum member, its wire name, or its attribute name."""
        if isinstance(value, Category):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(
                f"Unknown category {value!r}. "
                f"Must be one of {[c.value for c in cls]}"
            ) from None


@dataclass(slots=True, frozen=True)
class ItemDefinition:
    """
    A purchasable asset.

    Attributes
    ----------
    id : str
        Unique key within its category.
    category : Category
        Financial or RealEstate.
    base_cost : float
        Price of the first unit.
    base_income : float
        Revenue per second contributed by each owned unit.
    cost_multiplier : float
        Geometric growth factor of the price per owned unit (> 1).
    unlock_condition : UnlockCondition
        Parsed predicate gating visibility and purchase.
    name, icon : str
        Display labels carried through from the catalog source.
    """

    id: str
    category: Category
    base_cost: float
    base_income: float
    cost_multiplier: float
    unlock_condition: UnlockCondition = ALWAYS
    name: str = ""
    icon: str = ""


@dataclass(slots=True, frozen=True)
class CareerTier:
    """A rung of the career ladder, reached by accumulating work clicks."""

    id: str
    name: str
    level: int
    multiplier: float
    required_clicks: int
    salary: float
    achievement: str | None = None
