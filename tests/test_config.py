from __future__ import annotations

from datetime import timedelta, timezone

import pytest
import yaml
from pydantic import ValidationError

from skyterm.config import (
    Config,
    DisplayConfig,
    config_from_mapping,
    default_config_path,
    load_config,
    save_config,
)
from skyterm.errors import ConfigError


def test_missing_file_gives_defaults(tmp_path, caplog):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == Config()
    assert "no config file" in caplog.text


def test_partial_file_merges_over_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "location:\n"
        "  latitude: 44.80\n"
        "  longitude: 10.33\n"
        "  name: Parma\n"
        "display:\n"
        "  magnitude_limit: 4\n"
        "  show_coordinate_grid: true\n"
        "time:\n"
        "  time_step: 10m\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    obs = cfg.observer()
    assert (obs.latitude, obs.longitude, obs.name) == (44.80, 10.33, "Parma")
    assert obs.elevation_m == 10.0
    assert cfg.display.magnitude_limit == 4.0
    assert cfg.display.show_coordinate_grid
    assert cfg.display.show_deep_sky == DisplayConfig().show_deep_sky
    assert cfg.time.step == timedelta(minutes=10)
    assert cfg.controls.zoom_step == 1.2


def test_round_trip(tmp_path):
    cfg = config_from_mapping({"display": {"show_star_labels": True},
                               "controls": {"pan_speed": 2.5}})
    path = tmp_path / "sub" / "config.yaml"
    save_config(cfg, path)
    assert load_config(path) == cfg


def test_malformed_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("location: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_config(path)


@pytest.mark.parametrize("data", [
    {"location": {"latitude": "north"}},
    {"display": {"show_deep_sky": "yes"}},
    {"display": {"magnitude_limit": True}},
    {"display": ["not", "a", "mapping"]},
    {"time": {"time_step": "whenever"}},
    {"location": {"latitude": 95.0}},
    {"controls": {"zoom_step": 0.5}},
    ["root", "is", "a", "list"],
])
def test_bad_values(data):
    with pytest.raises(ConfigError):
        config_from_mapping(data)


def test_unknown_keys_are_ignored(caplog):
    cfg = config_from_mapping({"display": {"sparkles": True}})
    assert cfg == Config()
    assert "display.sparkles" in caplog.text


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == Config()


def test_default_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SKYTERM_CONFIG", str(tmp_path / "custom.yaml"))
    assert default_config_path() == tmp_path / "custom.yaml"


def test_default_path_xdg(tmp_path, monkeypatch):
    monkeypatch.delenv("SKYTERM_CONFIG")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_config_path() == tmp_path / "skyterm" / "config.yaml"


def test_display_tz():
    cfg = config_from_mapping({"time": {"use_utc": True}})
    assert cfg.display_tz() is timezone.utc
    assert Config().display_tz() is not None


def test_saved_file_is_plain_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    save_config(Config(), path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert set(data) == {"location", "display", "time", "controls"}


def test_error_names_the_bad_key():
    with pytest.raises(ConfigError, match=r"display\.show_deep_sky"):
        config_from_mapping({"display": {"show_deep_sky": "yes"}})


def test_integer_values_are_accepted(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("location:\n  latitude: 45\ncontrols:\n  pan_speed: 2\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.location.latitude == 45.0
    assert cfg.controls.pan_speed == 2.0


def test_empty_section_means_defaults():
    assert config_from_mapping({"display": None, "time": {}}) == Config()


def test_config_is_frozen():
    cfg = Config()
    with pytest.raises(ValidationError):
        cfg.display.magnitude_limit = 3.0
