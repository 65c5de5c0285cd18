# src/tycoonengine/config/schema.py
"""Configuration dataclass for session parameters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Config:
    """
    Immutable configuration for a game session.

    Attributes
    ----------
    tick_interval : float
        Seconds between passive-income ticks.
    autosave_interval : float
        Seconds between automatic saves.
    save_on_action : bool
        Also save after every click and successful purchase.
    save_key : str
        Name of the snapshot inside ``save_dir``.
    save_dir : str | None
        Directory holding save files; None disables persistence.
    catalog_path : str | None
        JSON catalog to load; None uses the packaged catalog.
    purchase_quantity : int
        Units bought per purchase action for a fresh state.
    """

    # Timers
    tick_interval: float = 1.0
    autosave_interval: float = 10.0
    save_on_action: bool = True

    # Persistence
    save_key: str = "budongsan-tycoon-save"
    save_dir: str | None = None

    # Catalog
    catalog_path: str | None = None

    # Shop
    purchase_quantity: int = 1
