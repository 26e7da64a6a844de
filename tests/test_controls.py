from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from skyterm.config import ControlsConfig
from skyterm.controls import ChartControls, InputMode, next_magnitude_limit
from skyterm.core.time_controller import TimeController
from skyterm.sky_model import SkyModel

UTC = timezone.utc
WALL = datetime(2030, 6, 1, 12, tzinfo=UTC)


@pytest.fixture
def ctl(nyc, instant) -> ChartControls:
    model = SkyModel(nyc)
    model.update(instant)
    clock = TimeController(start_utc=instant, clock=lambda: WALL)
    return ChartControls(model, clock, ControlsConfig(pan_speed=5.0, fast_pan_multiplier=4.0))


def press(ctl, *keys):
    for k in keys:
        ctl.press(k)


def test_pan(ctl):
    press(ctl, "up", "k")
    assert ctl.view.center_alt == 55.0
    press(ctl, "L")
    assert ctl.view.center_az == 200.0
    press(ctl, "shift+left", "h")
    assert ctl.view.center_az == 175.0


def test_altitude_is_clamped(ctl):
    press(ctl, *["K"] * 10)
    assert ctl.view.center_alt == 90.0


def test_zoom_and_reset(ctl):
    press(ctl, "+")
    assert ctl.view.fov == pytest.approx(50.0)
    press(ctl, "-", "-")
    assert ctl.view.fov == pytest.approx(72.0)
    press(ctl, "z", "e", "0")
    assert (ctl.view.center_alt, ctl.view.center_az, ctl.view.fov) == (45.0, 180.0, 60.0)


def test_cardinals(ctl):
    press(ctl, "w")
    assert ctl.view.center_az == 270.0
    press(ctl, "n")
    assert ctl.view.center_az == 0.0
    press(ctl, "z")
    assert ctl.view.center_alt == 90.0


def test_toggles(ctl):
    before = ctl.options.show_grid
    press(ctl, "g")
    assert ctl.options.show_grid is not before
    for key, attr in (("C", "show_constellation_lines"), ("N", "show_constellation_labels"),
                      ("p", "show_planets"), ("P", "show_planet_labels"),
                      ("d", "show_deep_sky"), ("S", "show_star_labels")):
        old = getattr(ctl.options, attr)
        press(ctl, key)
        assert getattr(ctl.options, attr) is not old, key


def test_magnitude_cycle(ctl):
    assert next_magnitude_limit(3.0) == 4.0
    assert next_magnitude_limit(6.0) == 3.0
    assert next_magnitude_limit(4.5) == 3.0
    ctl.options.magnitude_limit = 5.0
    press(ctl, "m")
    assert ctl.options.magnitude_limit == 6.0
    press(ctl, "m")
    assert ctl.options.magnitude_limit == 3.0


def test_time_keys_mark_dirty(ctl, instant):
    press(ctl, "]")
    assert ctl.dirty
    assert ctl.clock.now == instant + timedelta(minutes=1)
    press(ctl, "{")
    assert ctl.clock.now == instant - timedelta(minutes=9)
    press(ctl, "T")
    assert ctl.clock.now == WALL
    assert not ctl.clock.paused
    press(ctl, " ")
    assert ctl.clock.paused


def test_set_time_input(ctl):
    press(ctl, "t")
    assert ctl.mode is InputMode.TIME
    press(ctl, *"2024-12-25T0x", "backspace", *"0:00Z", "enter")
    assert ctl.mode is InputMode.NONE
    assert ctl.clock.now == datetime(2024, 12, 25, tzinfo=UTC)
    assert ctl.clock.paused


def test_bad_time_input_keeps_clock(ctl, instant):
    press(ctl, "t", *"later", "enter")
    assert ctl.clock.now == instant
    assert "ISO 8601" in ctl.message


def test_search_selects_and_centres(ctl):
    press(ctl, "/", *"vega")
    assert ctl.prompt == "/vega"
    press(ctl, "enter")
    vega = ctl.model.selected
    assert vega.name == "Vega"
    assert ctl.show_info
    assert ctl.view.center_alt == pytest.approx(vega.altitude)


def test_search_escape_cancels(ctl):
    press(ctl, "/", "x", "esc")
    assert ctl.mode is InputMode.NONE
    assert ctl.model.selected is None
    assert ctl.running


def test_select_centre_and_follow(ctl):
    sirius = ctl.model.find("Sirius")
    ctl.view.fov = 10.0
    ctl.view.look_at(sirius.altitude, sirius.azimuth)
    press(ctl, "enter")
    assert ctl.model.selected is sirius
    assert ctl.show_info
    press(ctl, "i")
    assert not ctl.show_info
    press(ctl, "f")
    assert ctl.model.following
    assert ctl.message == "following"


def test_escape_closes_overlays_then_quits(ctl):
    press(ctl, "?")
    assert ctl.show_help
    press(ctl, "esc")
    assert not ctl.show_help and ctl.running
    press(ctl, "esc")
    assert not ctl.running


def test_q_quits_and_unknown_keys_are_ignored(ctl):
    press(ctl, "F13", "§")
    assert ctl.running
    press(ctl, "q")
    assert not ctl.running
