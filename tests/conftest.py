import pytest

from CalcCore import config_manager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the settings file at a temp path so tests never touch CalcCore/config.json."""
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path
