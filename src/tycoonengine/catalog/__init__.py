"""Catalog of purchasable items, career tiers and unlock conditions."""

from tycoonengine.catalog.catalog import Catalog, CatalogError
from tycoonengine.catalog.conditions import (
    ALWAYS,
    Always,
    Never,
    Operator,
    Threshold,
    UnlockCondition,
    parse_condition,
)
from tycoonengine.catalog.items import CareerTier, Category, ItemDefinition
from tycoonengine.catalog.loader import default_catalog, load_catalog

__all__ = [
    "ALWAYS",
    "Always",
    "CareerTier",
    "Catalog",
    "CatalogError",
    "Category",
    "ItemDefinition",
    "Never",
    "Operator",
    "Threshold",
    "UnlockCondition",
    "default_catalog",
    "load_catalog",
    "parse_condition",
]
