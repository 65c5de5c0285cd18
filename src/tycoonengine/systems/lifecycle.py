# src/tycoonengine/systems/lifecycle.py
"""
Fresh states and derived-field refresh after load / reset.
"""
from __future__ import annotations

import logging
import time

from tycoonengine.economy import EconomyEngine
from tycoonengine.state import ProgressState
from tycoonengine.systems.labor import recompute_income_per_click
from tycoonengine.systems.market import recompute_total_rps

log = logging.getLogger(__name__)


def refresh_derived(engine: EconomyEngine, state: ProgressState) -> None:
    """Recompute ``total_rps`` and ``income_per_click`` from scratch."""
    recompute_total_rps(engine, state)
    recompute_income_per_click(engine, state)


def reset_progress(
    engine: EconomyEngine | None = None, now: float | None = None
) -> ProgressState:
    """
    Return a freshly initialised state.

    Discarding any persisted snapshot is the caller's job. When *engine* is
    given the derived fields are computed immediately.
    """
    state = ProgressState(game_start_time=time.time() if now is None else now)
    if engine is not None:
        refresh_derived(engine, state)
    log.info("Progress reset")
    return state
