"""Loading the catalog from JSON with a built-in fallback."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

from tycoonengine.catalog.catalog import Catalog, CatalogError
from tycoonengine.catalog.defaults import DEFAULT_CATALOG_DATA

log = logging.getLogger(__name__)


def default_catalog() -> Catalog:
    """Return the built-in catalog (5 financial, 5 real estate, 10 careers)."""
    return Catalog.from_mapping(DEFAULT_CATALOG_DATA)


def _read_source(source: str | Path | Mapping[str, Any] | None) -> Any:
    if isinstance(source, Mapping):
        return source
    if source is None:
        txt = resources.files("tycoonengine").joinpath("data/items.json").read_text(
            encoding="utf-8"
        )
        return json.loads(txt)
    with Path(source).open("rt", encoding="utf-8") as fh:
        return json.load(fh)


def load_catalog(source: str | Path | Mapping[str, Any] | None = None) -> Catalog:
    """
    Load the catalog, falling back to :func:`default_catalog` on failure.

    Parameters
    ----------
    source : str, Path, Mapping or None
        JSON file path, an already-decoded mapping, or None for the
        packaged ``tycoonengine/data/items.json``.

    Returns
    -------
    Catalog
        The loaded catalog. Read, decode and validation errors are logged
        and replaced by the built-in catalog; this function never raises
        for a bad source.
    """
    try:
        catalog = Catalog.from_mapping(_read_source(source))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError, CatalogError) as exc:
        log.error("Failed to load catalog from %s: %s", source or "<package>", exc)
        log.warning("Using built-in default catalog")
        return default_catalog()

    log.info(
        "Catalog loaded from %s (%d items, %d careers)",
        source if source is not None else "<package>",
        len(catalog.financial) + len(catalog.real_estate),
        len(catalog.careers),
    )
    return catalog
