# tests/helpers/factories.py
"""
Small builders for catalogs and states used across the unit tests.
"""
from __future__ import annotations

from typing import Any

from tycoonengine.catalog import Catalog
from tycoonengine.state import ProgressState


def item_entry(
    item_id: str,
    *,
    base_cost: float = 100,
    base_income: float = 1,
    cost_multiplier: float = 1.15,
    unlock: str = "always",
) -> dict[str, Any]:
    """One catalog item in the JSON (camelCase) layout."""
    return {
        "id": item_id,
        "name": item_id.title(),
        "icon": "",
        "baseCost": base_cost,
        "baseIncome": base_income,
        "costMultiplier": cost_multiplier,
        "unlockCondition": unlock,
    }


def career_entry(
    career_id: str,
    level: int,
    required_clicks: int,
    *,
    salary: float = 3_600,
    multiplier: float = 1.0,
    achievement: str | None = None,
) -> dict[str, Any]:
    return {
        "id": career_id,
        "name": career_id.title(),
        "level": level,
        "multiplier": multiplier,
        "requiredClicks": required_clicks,
        "salary": salary,
        "achievement": achievement,
    }


def catalog_data(
    financial: list[dict[str, Any]] | None = None,
    real_estate: list[dict[str, Any]] | None = None,
    careers: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """A minimal valid catalog mapping; every section can be replaced."""
    return {
        "financial": financial if financial is not None else [item_entry("coin")],
        "realEstate": real_estate if real_estate is not None else [],
        "careers": careers
        if careers is not None
        else [career_entry("intern", 0, 0), career_entry("boss", 1, 10, multiplier=2.0)],
    }


def mock_catalog(**sections: Any) -> Catalog:
    return Catalog.from_mapping(catalog_data(**sections))


def mock_state(
    *,
    cash: float = 0.0,
    total_clicks: int = 0,
    financial: dict[str, int] | None = None,
    real_estate: dict[str, int] | None = None,
    **kwargs: Any,
) -> ProgressState:
    """A ProgressState with a fixed start time and the given holdings."""
    return ProgressState(
        cash=cash,
        total_clicks=total_clicks,
        financial=dict(financial or {}),
        real_estate=dict(real_estate or {}),
        game_start_time=kwargs.pop("game_start_time", 1_000.0),
        **kwargs,
    )
