"""Smoke tests for the command-line runner."""

import json

from tycoonengine.main import main


def test_cli_runs_and_saves(tmp_path):
    main(["--seconds", "30", "--clicks-per-second", "3", "--save-dir", str(tmp_path)])

    data = json.loads((tmp_path / "budongsan-tycoon-save.json").read_text(encoding="utf-8"))
    assert data["totalClicks"] == 90
    assert data["financial"].get("deposit", 0) >= 1
    assert "lastSaveTime" in data


def test_cli_resumes_and_resets(tmp_path):
    main(["--seconds", "2", "--clicks-per-second", "1", "--save-dir", str(tmp_path)])
    main(["--seconds", "2", "--clicks-per-second", "1", "--save-dir", str(tmp_path)])
    path = tmp_path / "budongsan-tycoon-save.json"
    assert json.loads(path.read_text(encoding="utf-8"))["totalClicks"] == 4

    main(["--seconds", "1", "--clicks-per-second", "1", "--save-dir", str(tmp_path), "--reset"])
    assert json.loads(path.read_text(encoding="utf-8"))["totalClicks"] == 1
