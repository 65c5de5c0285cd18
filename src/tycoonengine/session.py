# src/tycoonengine/session.py
from __future__ import annotations

import time
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

import yaml

from tycoonengine import logging as tlogging
from tycoonengine.catalog import Catalog, Category, ItemDefinition, load_catalog
from tycoonengine.config import Config, ConfigValidator
from tycoonengine.economy import EconomyEngine
from tycoonengine.logging import getLogger
from tycoonengine.persistence import SaveStore
from tycoonengine.state import ProgressState
from tycoonengine.stats import GameStats, StatisticsAggregator
from tycoonengine.systems import (
    UnlockCallback,
    apply_purchase,
    apply_work_click,
    check_new_unlocks,
    notify_unlock,
    refresh_derived,
    reset_progress,
    set_purchase_quantity,
    tick,
)

__all__ = ["GameSession"]

log = getLogger(__name__)

Clock = Callable[[], float]


# helpers
# ---------------------------------------------------------------------------
def _read_yaml(obj: str | Path | Mapping[str, Any] | None) -> Dict[str, Any]:
    """Return a plain dict – {} if *obj* is None."""
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    p = Path(obj)
    with p.open("rt", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"config root must be mapping, got {type(data)!r}")
    return dict(data)


def _package_defaults() -> Dict[str, Any]:
    """Load tycoonengine/defaults.yml"""
    txt = resources.files("tycoonengine").joinpath("defaults.yml").read_text(
        encoding="utf-8"
    )
    return yaml.safe_load(txt) or {}


# GameSession
# ---------------------------------------------------------------------
@dataclass(slots=True)
class GameSession:
    """
    Facade that owns one player's game: catalog, rules, state and storage.

    A front-end binds its inputs to the command methods (:meth:`work_click`,
    :meth:`purchase`, :meth:`set_purchase_quantity`, :meth:`reset`) and
    drives time through :meth:`advance`, which fires the income tick and the
    autosave on their own intervals. Every command runs to completion,
    derived fields included, before it returns.
    """

    config: Config
    catalog: Catalog
    engine: EconomyEngine
    stats_view: StatisticsAggregator
    state: ProgressState
    store: SaveStore | None
    clock: Clock = time.time

    # timers
    last_tick_time: float = 0.0
    last_save_time: float = 0.0
    closed: bool = False

    unlock_subscribers: list[UnlockCallback] = field(default_factory=list)

    # Constructor
    # ---------------------------------------------------------------------
    @classmethod
    def init(
        cls,
        config: str | Path | Mapping[str, Any] | None = None,
        *,
        clock: Clock | None = None,
        catalog: Catalog | None = None,
        **overrides: Any,  # anything here wins last
    ) -> "GameSession":
        """
        Build a GameSession.

        Order of precedence (later overrides earlier):

            1. package defaults  (tycoonengine/defaults.yml)
            2. *config*  (Path / str / Mapping / None)
            3. explicit keyword arguments (**overrides)

        A saved game under ``save_key`` in ``save_dir`` is resumed when
        present; otherwise a fresh state is created.
        """
        # 1 + 2 + 3 → one merged dict
        cfg_dict: Dict[str, Any] = _package_defaults()
        cfg_dict.update(_read_yaml(config))
        cfg_dict.update(overrides)

        ConfigValidator.validate_config(cfg_dict)

        catalog_path = cfg_dict.get("catalog_path")
        if catalog is None and catalog_path is not None:
            ConfigValidator.validate_catalog_path(catalog_path)

        if "logging" in cfg_dict:
            tlogging.configure(cfg_dict.pop("logging"))

        cfg = Config(**cfg_dict)
        clock = clock or time.time

        if catalog is None:
            catalog = load_catalog(cfg.catalog_path)
        engine = EconomyEngine(catalog)
        store = SaveStore(Path(cfg.save_dir)) if cfg.save_dir is not None else None

        now = clock()
        state = store.load(cfg.save_key, now=now) if store is not None else None
        if state is None:
            state = reset_progress(engine, now=now)
            state.purchase_quantity = cfg.purchase_quantity
        else:
            refresh_derived(engine, state)

        career = engine.current_career(state.total_clicks)
        log.info("Session started (career: %s)", career.name)
        return cls(
            config=cfg,
            catalog=catalog,
            engine=engine,
            stats_view=StatisticsAggregator(engine),
            state=state,
            store=store,
            clock=clock,
            last_tick_time=now,
            last_save_time=now,
        )

    # notifications
    # ---------------------------------------------------------------------
    def on_unlock(self, callback: UnlockCallback) -> UnlockCallback:
        """Subscribe *callback* to unlock notifications (usable as decorator)."""
        self.unlock_subscribers.append(callback)
        return callback

    def _notify(self, item: ItemDefinition) -> None:
        notify_unlock(item, self.unlock_subscribers)

    # commands
    # ---------------------------------------------------------------------
    def work_click(self) -> int:
        """One click of work; returns the amount paid."""
        paid = apply_work_click(self.engine, self.state, self._notify)
        self._save_after_action()
        return paid

    def purchase(
        self, category: Category | str, item_id: str, quantity: int | None = None
    ) -> bool:
        """Try to buy an item; False when it is locked or unaffordable."""
        bought = apply_purchase(
            self.engine, self.state, category, item_id, quantity, self._notify
        )
        if bought:
            self._save_after_action()
        return bought

    def _save_after_action(self) -> None:
        if self.config.save_on_action and self.store is not None and not self.closed:
            self.save()

    def set_purchase_quantity(self, quantity: int) -> None:
        set_purchase_quantity(self.state, quantity)

    def tick(self) -> float:
        """Credit one tick of passive income immediately."""
        return tick(self.state)

    def check_unlocks(self) -> list[ItemDefinition]:
        return check_new_unlocks(self.engine, self.state, self._notify)

    # timeline
    # ---------------------------------------------------------------------
    def advance(self, now: float | None = None) -> int:
        """
        Bring the session up to *now* (defaults to the clock).

        Fires every income tick that fell due since the previous call, one
        after another, then autosaves if ``autosave_interval`` has elapsed.
        A closed session ignores the call.

        Returns
        -------
        int
            Number of ticks fired.
        """
        if self.closed:
            return 0
        now = self.clock() if now is None else now

        interval = self.config.tick_interval
        n_ticks = 0
        while now - self.last_tick_time >= interval:
            tick(self.state)
            self.last_tick_time += interval
            n_ticks += 1

        if now - self.last_save_time >= self.config.autosave_interval:
            self.save(now)
        return n_ticks

    # persistence
    # ---------------------------------------------------------------------
    def save(self, now: float | None = None) -> bool:
        """Write the current state; False when persistence is off or fails."""
        now = self.clock() if now is None else now
        self.last_save_time = now
        if self.store is None:
            return False
        return self.store.save(self.config.save_key, self.state, now=now)

    def load(self) -> bool:
        """
        Replace the state with the saved snapshot, if any.

        Derived fields are recomputed and play time restarts now.
        """
        if self.store is None:
            return False
        now = self.clock()
        loaded = self.store.load(self.config.save_key, now=now)
        if loaded is None:
            return False
        refresh_derived(self.engine, loaded)
        self.state = loaded
        self.last_tick_time = now
        return True

    def reset(self) -> ProgressState:
        """Discard the saved snapshot and start over with a fresh state."""
        if self.store is not None:
            self.store.delete(self.config.save_key)
        now = self.clock()
        self.state = reset_progress(self.engine, now=now)
        self.state.purchase_quantity = self.config.purchase_quantity
        self.last_tick_time = now
        self.last_save_time = now
        return self.state

    def close(self) -> None:
        """Stop the timers after a final save."""
        if self.closed:
            return
        self.save()
        self.closed = True
        log.info("Session closed")

    # views
    # ---------------------------------------------------------------------
    def stats(self, now: float | None = None) -> GameStats:
        return self.stats_view.summary(self.state, self.clock() if now is None else now)

    def cost(self, category: Category | str, item_id: str) -> int | float:
        """Price of the next unit of an item for the current state."""
        return self.engine.cost(category, item_id, self.state.owned(category, item_id))

    def is_unlocked(self, category: Category | str, item_id: str) -> bool:
        return self.engine.is_unlocked(category, item_id, self.state)
