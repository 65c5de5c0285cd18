# src/tycoonengine/systems/income.py
"""
Passive income accrual, run once per tick.
"""
from __future__ import annotations

import logging

from tycoonengine.state import ProgressState

log = logging.getLogger(__name__)


def tick(state: ProgressState) -> float:
    """
    cash     += total_rps
    earnings += total_rps

    No-op while nothing produces income. Returns the amount credited.
    """
    if state.total_rps <= 0:
        return 0.0
    state.cash += state.total_rps
    state.total_earnings += state.total_rps
    log.debug("  Tick: +%s (cash %.0f)", state.total_rps, state.cash)
    return state.total_rps
