"""Pytest configuration and fixtures for tycoonengine tests."""

import pytest

from tycoonengine import logging
from tycoonengine.catalog import Catalog, default_catalog
from tycoonengine.economy import EconomyEngine
from tycoonengine.session import GameSession
from tycoonengine.state import ProgressState
from tycoonengine.stats import StatisticsAggregator
from tests.helpers.logging_env import log_level_for_run


@pytest.fixture
def catalog() -> Catalog:
    """The built-in catalog (5 financial, 5 real estate, 10 careers)."""
    return default_catalog()


@pytest.fixture
def engine(catalog: Catalog) -> EconomyEngine:
    return EconomyEngine(catalog)


@pytest.fixture
def state() -> ProgressState:
    """A fresh state with a fixed start time."""
    return ProgressState(game_start_time=1_000.0)


@pytest.fixture
def aggregator(engine: EconomyEngine) -> StatisticsAggregator:
    return StatisticsAggregator(engine)


class FakeClock:
    """Manually advanced clock for deterministic timer tests."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(tmp_path, clock: FakeClock, catalog: Catalog) -> GameSession:
    """A session persisting into a temporary directory."""
    return GameSession.init(save_dir=str(tmp_path), clock=clock, catalog=catalog)


@pytest.fixture(autouse=True)
def mute_tycoonengine_logs(caplog):
    level = log_level_for_run()

    caplog.set_level(level, logger="tycoonengine")
    logging.getLogger("tycoonengine").setLevel(level)
