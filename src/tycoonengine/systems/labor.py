# src/tycoonengine/systems/labor.py
"""
Work clicks and the career ladder.
"""
from __future__ import annotations

import logging

from tycoonengine.economy import EconomyEngine
from tycoonengine.state import ProgressState
from tycoonengine.systems.unlocks import UnlockCallback, check_new_unlocks

log = logging.getLogger(__name__)


def recompute_income_per_click(engine: EconomyEngine, state: ProgressState) -> int:
    """
    income_per_click = floor(salary / 3600 · multiplier) of the current tier
    """
    tier = engine.current_career(state.total_clicks)
    state.income_per_click = engine.income_per_click(tier)
    return state.income_per_click


def apply_work_click(
    engine: EconomyEngine,
    state: ProgressState,
    on_unlock: UnlockCallback | None = None,
) -> int:
    """
    Pay one click of work.

    Rule
    ----
        pay           = income_per_click(career(total_clicks))   (before ++)
        total_clicks += 1
        cash         += pay
        earnings     += pay

    The career is evaluated on the click count before this click; the tier
    reached by the click pays from the next one on. ``income_per_click`` and
    unlocks are refreshed afterwards.

    Returns
    -------
    int
        The amount paid for this click.
    """
    tier_before = engine.current_career(state.total_clicks)
    pay = engine.income_per_click(tier_before)

    state.cash += pay
    state.total_clicks += 1
    state.total_earnings += pay
    log.debug("  Work click #%d paid %d (%s)", state.total_clicks, pay, tier_before.id)

    tier_after = engine.current_career(state.total_clicks)
    if tier_after.id != tier_before.id:
        log.info(
            "  Career advanced: %s -> %s after %d clicks",
            tier_before.name,
            tier_after.name,
            state.total_clicks,
        )

    recompute_income_per_click(engine, state)
    check_new_unlocks(engine, state, on_unlock)
    return pay
