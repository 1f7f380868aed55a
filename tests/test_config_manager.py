import json

import pytest

from CalcCore import config_manager
from CalcCore import error as E


def test_missing_file_falls_back_to_defaults():
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("decimal_places") == 10


def test_broken_file_falls_back_to_defaults(isolated_config):
    isolated_config.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("fractions") is False


def test_save_then_load(isolated_config):
    settings = config_manager.load_setting_value("all")
    settings["decimal_places"] = 3
    assert config_manager.save_setting(settings) == settings

    assert json.loads(isolated_config.read_text(encoding="utf-8"))["decimal_places"] == 3
    assert config_manager.load_setting_value("decimal_places") == 3


def test_partial_file_keeps_other_defaults(isolated_config):
    isolated_config.write_text('{"debug": true}', encoding="utf-8")
    all_settings = config_manager.load_setting_value("all")
    assert all_settings["debug"] is True
    assert all_settings["show_steps"] is True


def test_unknown_key_returns_zero():
    assert config_manager.load_setting_value("no_such_setting") == 0


def test_save_into_missing_directory_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing" / "config.json")
    with pytest.raises(E.MathError) as excinfo:
        config_manager.save_setting({"debug": True})
    assert excinfo.value.code == "5000"


def test_shipped_config_matches_defaults():
    shipped = config_manager.Path(config_manager.__file__).resolve().parent / "config.json"
    assert json.loads(shipped.read_text(encoding="utf-8")) == config_manager.DEFAULT_SETTINGS
