"""Mutation operations on :class:`~tycoonengine.state.ProgressState`."""

from tycoonengine.systems.income import tick
from tycoonengine.systems.labor import apply_work_click, recompute_income_per_click
from tycoonengine.systems.lifecycle import refresh_derived, reset_progress
from tycoonengine.systems.market import (
    apply_purchase,
    recompute_total_rps,
    set_purchase_quantity,
)
from tycoonengine.systems.unlocks import (
    UnlockCallback,
    check_new_unlocks,
    notify_unlock,
)

__all__ = [
    "UnlockCallback",
    "apply_purchase",
    "apply_work_click",
    "check_new_unlocks",
    "notify_unlock",
    "recompute_income_per_click",
    "recompute_total_rps",
    "refresh_derived",
    "reset_progress",
    "set_purchase_quantity",
    "tick",
]
