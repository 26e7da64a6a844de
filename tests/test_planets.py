from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest
from hypothesis import given, strategies as st

from skyterm.core.types import Observer
from skyterm.universe.bodies import BodyKind
from skyterm.universe.planets import (
    BODY_NAMES,
    PLANET_ELEMENTS,
    PLANET_NAMES,
    calculate_body,
    calculate_planet,
    calculate_planets,
    planet_equatorial,
    solve_kepler,
    true_anomaly,
)
from skyterm.core.astro_time import julian_date
from skyterm.universe.ephemeris import DEFAULT_EPHEMERIS

UTC = timezone.utc

INSTANTS = st.datetimes(min_value=datetime(1990, 1, 1), max_value=datetime(2060, 1, 1),
                        timezones=st.just(UTC))


def _separation_deg(ra1, dec1, ra2, dec2):
    a1, d1 = math.radians(ra1 * 15.0), math.radians(dec1)
    a2, d2 = math.radians(ra2 * 15.0), math.radians(dec2)
    c = math.sin(d1) * math.sin(d2) + math.cos(d1) * math.cos(d2) * math.cos(a1 - a2)
    return math.degrees(math.acos(max(-1.0, min(1.0, c))))


def _elongation(name, dt):
    jd = julian_date(dt)
    ra, dec = planet_equatorial(name, jd)
    sun_ra, sun_dec = DEFAULT_EPHEMERIS.sun_equatorial(jd)
    return _separation_deg(ra, dec, sun_ra, sun_dec)


@given(st.floats(min_value=-2 * math.pi, max_value=2 * math.pi),
       st.floats(min_value=0.0, max_value=0.25))
def test_kepler_residual(M, e):
    E = solve_kepler(M, e)
    assert abs(E - e * math.sin(E) - M) < 1e-6


def test_kepler_circular_orbit():
    assert solve_kepler(1.234, 0.0) == 1.234
    assert true_anomaly(0.0, 0.2) == 0.0
    assert true_anomaly(math.pi, 0.2) == pytest.approx(math.pi)


def test_element_table_covers_every_planet():
    assert PLANET_NAMES == ("Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune")
    assert set(PLANET_ELEMENTS) == set(PLANET_NAMES)


def test_all_bodies_fixed_order(nyc, instant):
    bodies = calculate_planets(instant, nyc).all_bodies()
    assert [b.name for b in bodies] == list(BODY_NAMES)
    assert bodies[0].kind is BodyKind.SUN
    assert bodies[1].kind is BodyKind.MOON
    assert all(b.kind is BodyKind.PLANET for b in bodies[2:])
    assert all(b.known for b in bodies)


@given(INSTANTS)
def test_positions_in_range(dt):
    obs = Observer(51.48, 0.0)
    for body in calculate_planets(dt, obs).all_bodies():
        assert 0.0 <= body.ra < 24.0
        assert abs(body.dec) < 35.0
        assert -90.0 <= body.altitude <= 90.0
        assert 0.0 <= body.azimuth < 360.0


def test_unknown_planet_is_flagged(nyc, instant):
    p = calculate_planet("Pluto", instant, nyc)
    assert not p.known
    assert (p.ra, p.dec, p.altitude, p.azimuth) == (0.0, 0.0, 0.0, 0.0)
    assert planet_equatorial("Pluto", 2451545.0) is None


def test_calculate_body_is_case_insensitive(nyc, instant):
    assert calculate_body("jupiter", instant, nyc).name == "Jupiter"
    assert calculate_body("SUN", instant, nyc).kind is BodyKind.SUN
    assert calculate_body(" moon ", instant, nyc).kind is BodyKind.MOON
    assert not calculate_body("Vulcan", instant, nyc).known


def test_jupiter_opposite_the_sun_at_opposition():
    # Opposition of 2024-12-07
    dt = datetime(2024, 12, 7, 12, tzinfo=UTC)
    assert _elongation("Jupiter", dt) == pytest.approx(180.0, abs=3.0)


@given(INSTANTS)
def test_inner_planets_stay_near_the_sun(dt):
    assert _elongation("Venus", dt) < 50.0
    assert _elongation("Mercury", dt) < 30.0


def test_by_name(nyc, instant):
    system = calculate_planets(instant, nyc)
    assert system.by_name()["Mars"] is system.mars
