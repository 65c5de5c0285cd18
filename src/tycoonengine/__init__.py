"""
tycoonengine - Progression & Economy Engine for an Idle Tycoon Game
====================================================================

tycoonengine is the headless model behind a browser "idle tycoon" game:
the player earns money by clicking "work", buys financial and real-estate
assets that pay revenue every second, climbs a career ladder that raises the
pay per click, and reviews statistics. Rendering and input handling live in
whatever front-end binds to the command interface.

Quick Start
-----------
>>> import tycoonengine as te
>>> session = te.GameSession.init()
>>> session.work_click()
5555
>>> session.purchase("financial", "deposit")
False
>>> session.stats().career.name
'알바'

Custom configuration via YAML file or kwargs:

>>> session = te.GameSession.init(config="my_config.yml", save_dir="saves")

Key Concepts
------------
**Catalog**
  Immutable item definitions (cost, income, unlock condition) and career
  tiers, loaded from JSON with a built-in fallback.

**Economy Engine**
  Pure rules: geometric cost, linear income, unlock evaluation, career
  lookup.

**Systems**
  The only functions that mutate a ProgressState: work clicks, purchases,
  income ticks, unlock detection, reset.

**Statistics**
  Derived views: total assets, revenue shares, efficiency ranking.

Public API
----------
GameSession
    Facade owning catalog, rules, state, timers and storage.
Catalog, ItemDefinition, CareerTier, Category
    Catalog records.
EconomyEngine
    Pure economic queries.
ProgressState
    Mutable player progress.
StatisticsAggregator
    Derived statistics.
SaveStore
    JSON snapshot persistence.
"""

# Logger class must be installed before any submodule creates its logger.
from tycoonengine import logging  # noqa: I001
from tycoonengine.catalog import (
    CareerTier,
    Catalog,
    CatalogError,
    Category,
    ItemDefinition,
    default_catalog,
    load_catalog,
)
from tycoonengine.config import Config
from tycoonengine.economy import EconomyEngine
from tycoonengine.persistence import SaveStore
from tycoonengine.session import GameSession
from tycoonengine.state import ProgressState
from tycoonengine.stats import StatisticsAggregator
from tycoonengine.systems import (
    apply_purchase,
    apply_work_click,
    check_new_unlocks,
    recompute_income_per_click,
    recompute_total_rps,
    reset_progress,
    tick,
)

__version__ = "0.1.0"

__all__ = [
    "CareerTier",
    "Catalog",
    "CatalogError",
    "Category",
    "Config",
    "EconomyEngine",
    "GameSession",
    "ItemDefinition",
    "ProgressState",
    "SaveStore",
    "StatisticsAggregator",
    "apply_purchase",
    "apply_work_click",
    "check_new_unlocks",
    "default_catalog",
    "load_catalog",
    "logging",
    "recompute_income_per_click",
    "recompute_total_rps",
    "reset_progress",
    "tick",
]
