"""
Statistics aggregator: read-only summaries of a progress snapshot.

Everything here is derived from ``(Catalog, ProgressState)`` and never
mutates the state.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field

import numpy as np

from tycoonengine.catalog import CareerTier, Category, ItemDefinition
from tycoonengine.economy import SECONDS_PER_HOUR, EconomyEngine
from tycoonengine.state import ProgressState

__all__ = [
    "Achievement",
    "EfficiencyEntry",
    "GameStats",
    "LIQUIDATION_RATE",
    "RevenueBreakdown",
    "StatisticsAggregator",
]

# fraction of the acquisition cost recovered when valuing owned assets
LIQUIDATION_RATE: dict[Category, float] = {
    Category.FINANCIAL: 0.8,
    Category.REAL_ESTATE: 0.9,
}

EFFICIENCY_TOP_K = 5


@dataclass(slots=True, frozen=True)
class RevenueBreakdown:
    """Shares of income by source; they sum to 1 unless everything is zero."""

    work: float = 0.0
    financial: float = 0.0
    real_estate: float = 0.0


@dataclass(slots=True, frozen=True)
class EfficiencyEntry:
    item: ItemDefinition
    owned: int
    efficiency: float  # income per owned unit


@dataclass(slots=True, frozen=True)
class Achievement:
    id: str
    name: str
    icon: str
    unlocked: bool


@dataclass(slots=True, frozen=True)
class GameStats:
    """Every statistics view bundled for a front-end."""

    cash: float
    total_assets: float
    total_rps: float
    income_per_click: int
    income_per_hour: float
    total_earnings: float
    play_time_seconds: int
    total_clicks: int
    career: CareerTier
    next_career: CareerTier | None
    career_progress: float
    revenue_breakdown: RevenueBreakdown
    efficiency_ranking: list[EfficiencyEntry] = field(default_factory=list)
    achievements: list[Achievement] = field(default_factory=list)


@dataclass(slots=True)
class StatisticsAggregator:
    """Derived views over an :class:`EconomyEngine`'s catalog and a state."""

    engine: EconomyEngine

    def _owned_items(self, state: ProgressState) -> list[tuple[ItemDefinition, int]]:
        """Owned catalog items in catalog order (financial first)."""
        return [
            (item, state.owned(item.category, item.id))
            for item in self.engine.catalog.items()
            if state.owned(item.category, item.id) > 0
        ]

    def total_assets(self, state: ProgressState) -> float:
        """
        Rule
        ----
            assets = cash + Σ_fin base_cost·n·0.8 + Σ_re base_cost·n·0.9

        Ids missing from the catalog contribute nothing.
        """
        owned = self._owned_items(state)
        if not owned:
            return float(state.cash)
        base_cost = np.array([item.base_cost for item, _ in owned], dtype=np.float64)
        counts = np.array([n for _, n in owned], dtype=np.float64)
        rates = np.array(
            [LIQUIDATION_RATE[item.category] for item, _ in owned], dtype=np.float64
        )
        return float(state.cash + np.sum(base_cost * counts * rates))

    def revenue_breakdown(self, state: ProgressState) -> RevenueBreakdown:
        """
        Rule
        ----
            work       = income_per_click · total_clicks
            financial  = Σ income(fin)
            realEstate = Σ income(re)
            share_k    = k / (work + financial + realEstate)

        ``work`` is a cumulative-click proxy rather than the income actually
        earned over time.
        """
        sources = np.array(
            [
                state.income_per_click * state.total_clicks,
                self._category_income(state, Category.FINANCIAL),
                self._category_income(state, Category.REAL_ESTATE),
            ],
            dtype=np.float64,
        )
        total = sources.sum()
        if total <= 0:
            return RevenueBreakdown()
        work, financial, real_estate = (sources / total).tolist()
        return RevenueBreakdown(work=work, financial=financial, real_estate=real_estate)

    def _category_income(self, state: ProgressState, category: Category) -> float:
        return float(
            sum(
                self.engine.income(category, item_id, count)
                for item_id, count in state.holdings(category).items()
            )
        )

    def efficiency_ranking(
        self, state: ProgressState, limit: int = EFFICIENCY_TOP_K
    ) -> list[EfficiencyEntry]:
        """
        Owned items ranked by income per owned unit, best first.

        Ties keep catalog order (financial before real estate, then
        authoring order).
        """
        owned = self._owned_items(state)
        if not owned:
            return []
        efficiency = np.array(
            [self.engine.income(item.category, item.id, n) / n for item, n in owned],
            dtype=np.float64,
        )
        # stable sort on the negated key keeps catalog order among ties
        order = np.argsort(-efficiency, kind="stable")[:limit]
        return [
            EfficiencyEntry(item=owned[i][0], owned=owned[i][1], efficiency=float(efficiency[i]))
            for i in order
        ]

    @staticmethod
    def play_time_seconds(state: ProgressState, now: float | None = None) -> int:
        """Whole seconds since ``game_start_time`` (0 if the clock is behind)."""
        now = time.time() if now is None else now
        return max(math.floor(now - state.game_start_time), 0)

    @staticmethod
    def income_per_hour(state: ProgressState) -> float:
        return state.total_rps * SECONDS_PER_HOUR

    def achievements(self, state: ProgressState) -> list[Achievement]:
        """Milestones shown on the statistics screen."""
        career = self.engine.current_career(state.total_clicks)
        top_career = self.engine.catalog.careers[-1]
        milestones = [
            ("first_click", "첫 클릭", "👆", state.total_clicks >= 1),
            ("hundred_clicks", "백 클릭", "💯", state.total_clicks >= 100),
            ("thousand_clicks", "천 클릭", "🎯", state.total_clicks >= 1000),
            (
                "first_investment",
                "첫 투자",
                "💰",
                any(n > 0 for n in state.financial.values()),
            ),
            (
                "real_estate",
                "부동산",
                "🏠",
                any(n > 0 for n in state.real_estate.values()),
            ),
            ("millionaire", "백만장자", "💎", state.cash >= 1_000_000),
            ("billionaire", "억만장자", "👑", state.cash >= 100_000_000),
            ("ceo", "CEO", "🏆", career.id == top_career.id),
        ]
        return [Achievement(*m) for m in milestones]

    def summary(self, state: ProgressState, now: float | None = None) -> GameStats:
        clicks = state.total_clicks
        return GameStats(
            cash=state.cash,
            total_assets=self.total_assets(state),
            total_rps=state.total_rps,
            income_per_click=state.income_per_click,
            income_per_hour=self.income_per_hour(state),
            total_earnings=state.total_earnings,
            play_time_seconds=self.play_time_seconds(state, now),
            total_clicks=clicks,
            career=self.engine.current_career(clicks),
            next_career=self.engine.next_career(clicks),
            career_progress=self.engine.career_progress(clicks),
            revenue_breakdown=self.revenue_breakdown(state),
            efficiency_ranking=self.efficiency_ranking(state),
            achievements=self.achievements(state),
        )
