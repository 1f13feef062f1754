"""Tests for settings and controller mapping persistence."""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv import constants
from jetcaster_tv.config import settings as settings_module
from jetcaster_tv.config.settings import (
    Settings,
    get_controller_mapping,
    get_default_settings,
    load_controller_mapping,
    load_settings,
    save_settings,
)


def test_defaults():
    defaults = get_default_settings()
    assert defaults == {
        "enable_artwork": True,
        "fullscreen": True,
        "catalog_path": "",
        "catalog_url": "",
        "account_name": "Name",
    }


def test_from_dict_ignores_unknown_keys():
    settings = Settings.from_dict({"fullscreen": False, "view_type": "grid"})
    assert settings.fullscreen is False
    assert not hasattr(settings, "view_type")


def test_load_creates_missing_file(monkeypatch, tmp_path):
    config = tmp_path / "nested" / "config.json"
    monkeypatch.setattr(constants, "CONFIG_FILE", str(config))

    assert load_settings() == get_default_settings()
    assert json.loads(config.read_text()) == get_default_settings()


def test_load_merges_over_defaults(monkeypatch, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"enable_artwork": False, "account_name": "Sam"}))
    monkeypatch.setattr(constants, "CONFIG_FILE", str(config))

    loaded = load_settings()
    assert loaded["enable_artwork"] is False
    assert loaded["account_name"] == "Sam"
    assert loaded["fullscreen"] is True


def test_load_corrupt_file_uses_defaults(monkeypatch, tmp_path, temp_log_file):
    config = tmp_path / "config.json"
    config.write_text("{broken")
    monkeypatch.setattr(constants, "CONFIG_FILE", str(config))

    assert load_settings() == get_default_settings()
    assert "Failed to load settings" in temp_log_file.read_text()


def test_save_round_trip(monkeypatch, tmp_path):
    monkeypatch.setattr(constants, "CONFIG_FILE", str(tmp_path / "config.json"))
    values = dict(get_default_settings(), catalog_url="https://example.com/c.json")
    assert save_settings(values) is True
    assert load_settings()["catalog_url"] == "https://example.com/c.json"


def test_controller_mapping_lists_become_tuples(monkeypatch, tmp_path):
    mapping = tmp_path / "controller_mapping.json"
    mapping.write_text(json.dumps({"select": 0, "up": ["hat", 0, 1]}))
    monkeypatch.setattr(constants, "CONTROLLER_MAPPING_FILE", str(mapping))
    monkeypatch.setattr(settings_module, "_controller_mapping", {})

    assert load_controller_mapping() is True
    assert get_controller_mapping() == {"select": 0, "up": ("hat", 0, 1)}


def test_controller_mapping_missing_file(monkeypatch, tmp_path):
    monkeypatch.setattr(constants, "CONTROLLER_MAPPING_FILE", str(tmp_path / "none.json"))
    assert load_controller_mapping() is False
    assert get_controller_mapping() == {}
