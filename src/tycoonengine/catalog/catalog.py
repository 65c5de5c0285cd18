"""In-memory catalog of shop items and career tiers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence

from tycoonengine.catalog.conditions import parse_condition
from tycoonengine.catalog.items import CareerTier, Category, ItemDefinition

log = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data violates the schema or its invariants."""


@dataclass(slots=True, frozen=True)
class Catalog:
    """
    Immutable catalog: items per category (authoring order) and careers.

    Careers are guaranteed to be sorted by ``required_clicks`` with the first
    tier requiring zero clicks; :meth:`from_mapping` enforces this, so the
    ordered career scan in :class:`~tycoonengine.economy.EconomyEngine` can
    rely on it.
    """

    financial: tuple[ItemDefinition, ...]
    real_estate: tuple[ItemDefinition, ...]
    careers: tuple[CareerTier, ...]
    _index: dict[tuple[Category, str], ItemDefinition] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        _validate_careers(self.careers)
        index: dict[tuple[Category, str], ItemDefinition] = {}
        for item in (*self.financial, *self.real_estate):
            key = (item.category, item.id)
            if key in index:
                raise CatalogError(
                    f"Duplicate item id '{item.id}' in category "
                    f"'{item.category.value}'"
                )
            _validate_item(item)
            index[key] = item
        object.__setattr__(self, "_index", index)

    # queries
    # ---------------------------------------------------------------------
    def get_item(self, category: Category | str, item_id: str) -> ItemDefinition | None:
        """Return the item definition, or ``None`` when it does not exist."""
        try:
            cat = Category.parse(category)
        except ValueError:
            return None
        return self._index.get((cat, item_id))

    def get_all_of_category(self, category: Category | str) -> tuple[ItemDefinition, ...]:
        """All items of *category* in authoring order."""
        cat = Category.parse(category)
        if cat is Category.FINANCIAL:
            return self.financial
        return self.real_estate

    def items(self) -> Iterator[ItemDefinition]:
        """Iterate every item: financial first, then real estate."""
        yield from self.financial
        yield from self.real_estate

    def get_career(self, career_id: str) -> CareerTier | None:
        for tier in self.careers:
            if tier.id == career_id:
                return tier
        return None

    # construction
    # ---------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Catalog":
        """
        Build a catalog from the JSON structure.

        Parameters
        ----------
        data : Mapping
            Object with ``financial``, ``realEstate`` and ``careers`` arrays
            using the camelCase keys of the catalog file.

        Raises
        ------
        CatalogError
            If a section is missing or any entry is invalid.
        """
        if not isinstance(data, Mapping):
            raise CatalogError(
                f"Catalog root must be a mapping, got {type(data).__name__}"
            )
        for section in ("financial", "realEstate", "careers"):
            if not isinstance(data.get(section), Sequence) or isinstance(
                data.get(section), str
            ):
                raise CatalogError(f"Catalog section '{section}' must be a list")

        try:
            financial = tuple(
                _item_from_mapping(entry, Category.FINANCIAL)
                for entry in data["financial"]
            )
            real_estate = tuple(
                _item_from_mapping(entry, Category.REAL_ESTATE)
                for entry in data["realEstate"]
            )
            careers = tuple(_career_from_mapping(entry) for entry in data["careers"])
        except (KeyError, TypeError, ValueError) as exc:
            if isinstance(exc, CatalogError):
                raise
            raise CatalogError(f"Invalid catalog entry: {exc!r}") from exc

        catalog = cls(financial=financial, real_estate=real_estate, careers=careers)
        log.debug(
            "Catalog built: %d financial, %d real estate, %d careers",
            len(financial),
            len(real_estate),
            len(careers),
        )
        return catalog


# helpers
# ---------------------------------------------------------------------------
def _item_from_mapping(entry: Mapping[str, Any], category: Category) -> ItemDefinition:
    return ItemDefinition(
        id=str(entry["id"]),
        category=category,
        base_cost=float(entry["baseCost"]),
        base_income=float(entry["baseIncome"]),
        cost_multiplier=float(entry["costMultiplier"]),
        unlock_condition=parse_condition(entry.get("unlockCondition", "always")),
        name=str(entry.get("name", entry["id"])),
        icon=str(entry.get("icon", "")),
    )


def _career_from_mapping(entry: Mapping[str, Any]) -> CareerTier:
    achievement = entry.get("achievement")
    return CareerTier(
        id=str(entry["id"]),
        name=str(entry.get("name", entry["id"])),
        level=int(entry["level"]),
        multiplier=float(entry["multiplier"]),
        required_clicks=int(entry["requiredClicks"]),
        salary=float(entry["salary"]),
        achievement=None if achievement is None else str(achievement),
    )


def _validate_item(item: ItemDefinition) -> None:
    if item.base_cost <= 0:
        raise CatalogError(f"Item '{item.id}': baseCost must be > 0, got {item.base_cost}")
    if item.base_income < 0:
        raise CatalogError(
            f"Item '{item.id}': baseIncome must be >= 0, got {item.base_income}"
        )
    if item.cost_multiplier <= 1:
        raise CatalogError(
            f"Item '{item.id}': costMultiplier must be > 1, "
            f"got {item.cost_multiplier}"
        )


def _validate_careers(careers: Sequence[CareerTier]) -> None:
    if not careers:
        raise CatalogError("Catalog must define at least one career tier")
    if careers[0].required_clicks != 0:
        raise CatalogError(
            f"First career tier '{careers[0].id}' must require 0 clicks, "
            f"got {careers[0].required_clicks}"
        )
    seen: set[str] = set()
    for prev, tier in zip(careers, careers[1:]):
        if tier.required_clicks < prev.required_clicks:
            raise CatalogError(
                f"Career tiers must be sorted by requiredClicks: "
                f"'{tier.id}' ({tier.required_clicks}) follows "
                f"'{prev.id}' ({prev.required_clicks})"
            )
    for tier in careers:
        if tier.id in seen:
            raise CatalogError(f"Duplicate career id '{tier.id}'")
        seen.add(tier.id)
        if tier.multiplier < 1:
            raise CatalogError(
                f"Career '{tier.id}': multiplier must be >= 1, got {tier.multiplier}"
            )
