import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from settings import ENV_VARS, ExportSettings, build_settings, default_values, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)


def test_load_settings_merges_known_keys(tmp_path):
    cfg = tmp_path / "settings.json"
    cfg.write_text(json.dumps({"output_dir": "out", "unknown": 1}), encoding="utf-8")
    merged = load_settings(str(cfg), {"output_dir": "output", "debug": False})
    assert merged == {"output_dir": "out", "debug": False}


def test_load_settings_falls_back_to_defaults(tmp_path):
    defaults = {"output_dir": "output"}
    assert load_settings(str(tmp_path / "missing.json"), defaults) == defaults
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_settings(str(broken), defaults) == defaults
    assert load_settings(None, defaults) == defaults


def test_precedence_file_env_flags(tmp_path, monkeypatch):
    cfg = tmp_path / "settings.json"
    cfg.write_text(
        json.dumps({"output_dir": "from_file", "header_counts": [2], "spreadsheet_id": "FILE"}),
        encoding="utf-8",
    )
    monkeypatch.setenv("SHEET_JSON_SPREADSHEET_ID", "ENV")
    settings = build_settings(str(cfg), {"output_dir": "from_flag", "debug": None})
    assert settings.output_dir == "from_flag"
    assert settings.spreadsheet_id == "ENV"
    assert settings.header_counts == [2]
    assert settings.debug is False


def test_header_depth_defaults_to_one():
    settings = ExportSettings(header_counts=[3])
    assert settings.header_depth(0) == 3
    assert settings.header_depth(1) == 1


def test_default_values_cover_every_field():
    values = default_values()
    assert values["output_dir"] == "output"
    assert values["credentials_file"] == "credentials.json"
    assert ExportSettings(**values) == ExportSettings()
