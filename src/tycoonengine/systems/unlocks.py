# src/tycoonengine/systems/unlocks.py
"""
Unlock detection.

Items move one way, Locked → Unlocked, and each transition is announced
exactly once through an optional callback.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from tycoonengine.catalog import ItemDefinition
from tycoonengine.economy import EconomyEngine
from tycoonengine.state import ProgressState

log = logging.getLogger(__name__)

UnlockCallback = Callable[[ItemDefinition], None]


def notify_unlock(item: ItemDefinition, callbacks: Iterable[UnlockCallback]) -> None:
    """
    Fire-and-forget delivery of one unlock notification.

    A failing subscriber is logged and skipped; it never interrupts the
    mutation that triggered the unlock.
    """
    for callback in callbacks:
        try:
            callback(item)
        except Exception:
            log.exception("Unlock subscriber %r failed for '%s'", callback, item.id)


def check_new_unlocks(
    engine: EconomyEngine,
    state: ProgressState,
    on_unlock: UnlockCallback | Iterable[UnlockCallback] | None = None,
) -> list[ItemDefinition]:
    """
    Reveal every catalog item whose condition now holds.

    Rule
    ----
        for item in financial ++ real_estate:
            item ∉ unlocked ∧ is_unlocked(item)  →  unlocked ∪= {item}, notify

    Returns
    -------
    list[ItemDefinition]
        Items unlocked by this call, in catalog order.
    """
    if on_unlock is None:
        callbacks: tuple[UnlockCallback, ...] = ()
    elif callable(on_unlock):
        callbacks = (on_unlock,)
    else:
        callbacks = tuple(on_unlock)

    newly: list[ItemDefinition] = []
    for item in engine.catalog.items():
        if item.id in state.unlocked_products:
            continue
        if engine.is_unlocked(item.category, item.id, state):
            state.unlocked_products.add(item.id)
            newly.append(item)
            log.info("  New unlock: %s (%s)", item.name or item.id, item.category.value)
            notify_unlock(item, callbacks)
    return newly
