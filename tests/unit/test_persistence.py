"""Tests for the JSON save store."""

import json
import logging

import pytest

from tycoonengine.persistence import DEFAULT_SAVE_KEY, SaveStore
from tests.helpers.factories import mock_state


@pytest.fixture
def store(tmp_path) -> SaveStore:
    return SaveStore(tmp_path)


def test_round_trip_resets_start_time(store):
    state = mock_state(
        cash=77.0,
        total_clicks=12,
        total_earnings=500.0,
        financial={"deposit": 2},
        game_start_time=10.0,
    )
    state.unlocked_products.update({"deposit", "savings"})

    assert store.save(DEFAULT_SAVE_KEY, state, now=20.0)
    loaded = store.load(DEFAULT_SAVE_KEY, now=99.0)

    assert loaded is not None
    assert loaded.game_start_time == 99.0
    loaded.game_start_time = state.game_start_time
    assert loaded == state


def test_file_layout(store, tmp_path):
    store.save("slot-1", mock_state(total_clicks=3), now=1234.0)

    data = json.loads((tmp_path / "slot-1.json").read_text(encoding="utf-8"))

    assert data["totalClicks"] == 3
    assert data["lastSaveTime"] == 1234.0


def test_load_missing_returns_none(store):
    assert store.load("absent") is None


def test_load_corrupt_returns_none(store, tmp_path, caplog):
    (tmp_path / "broken.json").write_text("{oops", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="tycoonengine"):
        assert store.load("broken") is None

    assert "Failed to load game" in caplog.text


def test_load_non_object_returns_none(store, tmp_path):
    (tmp_path / "list.json").write_text("[1, 2]", encoding="utf-8")
    assert store.load("list") is None


def test_save_failure_returns_false(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = SaveStore(blocker / "sub")  # parent is a file

    assert store.save("game", mock_state()) is False


def test_invalid_key_is_reported_not_raised(store):
    assert store.save("../escape", mock_state()) is False
    assert store.load("../escape") is None


@pytest.mark.parametrize("key", ["game\n", "game\nx", ""])
def test_path_for_rejects_keys_with_line_breaks(store, key):
    with pytest.raises(ValueError):
        store.path_for(key)


def test_delete(store, tmp_path):
    store.save("game", mock_state())
    assert store.delete("game")
    assert not (tmp_path / "game.json").exists()
    assert store.delete("game")  # already gone


def test_save_overwrites(store):
    store.save("game", mock_state(cash=1.0))
    store.save("game", mock_state(cash=2.0))
    assert store.load("game").cash == 2.0


def test_no_temp_files_left(store, tmp_path):
    store.save("game", mock_state())
    assert [p.name for p in tmp_path.iterdir()] == ["game.json"]
