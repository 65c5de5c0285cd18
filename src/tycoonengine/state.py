"""Mutable progress state of a single game session."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Mapping

from tycoonengine.catalog.items import Category

__all__ = ["ProgressState", "WIRE_FIELDS"]

# attribute name -> key used in save files (the original camelCase layout)
WIRE_FIELDS: dict[str, str] = {
    "cash": "cash",
    "total_clicks": "totalClicks",
    "total_rps": "totalRPS",
    "income_per_click": "incomePerClick",
    "total_earnings": "totalEarnings",
    "game_start_time": "gameStartTime",
    "financial": "financial",
    "real_estate": "realEstate",
    "unlocked_products": "unlockedProducts",
    "purchase_quantity": "purchaseQuantity",
}
_ATTR_BY_WIRE = {wire: attr for attr, wire in WIRE_FIELDS.items()}

_SCALAR_FIELDS = (
    "cash",
    "total_clicks",
    "total_rps",
    "income_per_click",
    "total_earnings",
    "game_start_time",
    "purchase_quantity",
)


@dataclass(slots=True)
class ProgressState:
    """
    Pure *state* container for one player's progress.

    Only the functions in :mod:`tycoonengine.systems` mutate it. ``total_rps``
    and ``income_per_click`` are derived and get recomputed after every
    mutation, load and reset.
    """

    # ── balances ─────────────────────────────────────────────────────────
    cash: float = 0.0
    total_clicks: int = 0
    total_earnings: float = 0.0

    # ── derived rates ────────────────────────────────────────────────────
    total_rps: float = 0.0
    income_per_click: int = 0

    # ── session ──────────────────────────────────────────────────────────
    game_start_time: float = field(default_factory=time.time)
    purchase_quantity: int = 1

    # ── holdings (item id -> owned count; absent == 0) ───────────────────
    financial: dict[str, int] = field(default_factory=dict)
    real_estate: dict[str, int] = field(default_factory=dict)
    unlocked_products: set[str] = field(default_factory=set)

    def holdings(self, category: Category | str) -> dict[str, int]:
        """Owned-count mapping for *category*."""
        if Category.parse(category) is Category.FINANCIAL:
            return self.financial
        return self.real_estate

    def owned(self, category: Category | str, item_id: str) -> int:
        return self.holdings(category).get(item_id, 0)

    def field_value(self, name: str) -> float | None:
        """
        Numeric value of a scalar field by attribute or save-file name.

        Returns None for unknown names and for non-numeric fields.
        """
        attr = _ATTR_BY_WIRE.get(name, name)
        if attr not in _SCALAR_FIELDS:
            return None
        return getattr(self, attr)

    # serialization
    # ---------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        """Structural, JSON-ready snapshot using the save-file key names."""
        return {
            "cash": self.cash,
            "totalClicks": self.total_clicks,
            "totalRPS": self.total_rps,
            "incomePerClick": self.income_per_click,
            "totalEarnings": self.total_earnings,
            "gameStartTime": self.game_start_time,
            "financial": dict(self.financial),
            "realEstate": dict(self.real_estate),
            "unlockedProducts": {item_id: True for item_id in sorted(self.unlocked_products)},
            "purchaseQuantity": self.purchase_quantity,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProgressState":
        """
        Rebuild a state from :meth:`to_dict` output.

        Missing keys fall back to fresh-state defaults; unknown keys (such as
        ``lastSaveTime``) are ignored. ``unlockedProducts`` may be either a
        ``{id: bool}`` mapping or a list of ids.

        Raises
        ------
        TypeError, ValueError
            If a field has a value that cannot be coerced.
        """
        fresh = cls()
        unlocked = data.get("unlockedProducts", {})
        if isinstance(unlocked, Mapping):
            unlocked_ids = {str(k) for k, v in unlocked.items() if v}
        else:
            unlocked_ids = {str(k) for k in unlocked}

        return cls(
            cash=max(float(data.get("cash", fresh.cash)), 0.0),
            total_clicks=int(data.get("totalClicks", fresh.total_clicks)),
            total_rps=float(data.get("totalRPS", fresh.total_rps)),
            income_per_click=int(data.get("incomePerClick", fresh.income_per_click)),
            total_earnings=float(data.get("totalEarnings", fresh.total_earnings)),
            game_start_time=float(data.get("gameStartTime", fresh.game_start_time)),
            financial=_counts(data.get("financial", {})),
            real_estate=_counts(data.get("realEstate", {})),
            unlocked_products=unlocked_ids,
            purchase_quantity=max(int(data.get("purchaseQuantity", 1)), 1),
        )


def _counts(raw: Mapping[str, Any]) -> dict[str, int]:
    if not isinstance(raw, Mapping):
        raise TypeError(f"holdings must be a mapping, got {type(raw).__name__}")
    return {str(k): max(int(v), 0) for k, v in raw.items()}
