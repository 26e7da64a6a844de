from __future__ import annotations

from datetime import datetime, timezone

import pytest
from hypothesis import given, strategies as st

from skyterm.core.astro_time import J2000_JD, julian_date
from skyterm.universe.ephemeris import (
    DEFAULT_EPHEMERIS,
    OBLIQUITY_J2000,
    ecliptic_to_equatorial,
    illuminated_fraction,
    mean_obliquity,
    moon_phase,
)

UTC = timezone.utc


def test_obliquity():
    assert mean_obliquity(J2000_JD) == pytest.approx(OBLIQUITY_J2000)
    # Decreasing by roughly 47" per century
    assert mean_obliquity(J2000_JD + 36525.0) == pytest.approx(OBLIQUITY_J2000 - 0.013, abs=1e-3)


def test_ecliptic_to_equatorial_cardinal_points():
    ra, dec = ecliptic_to_equatorial(0.0, 0.0, 23.44)
    assert (ra, dec) == (pytest.approx(0.0, abs=1e-12), pytest.approx(0.0, abs=1e-12))
    ra, dec = ecliptic_to_equatorial(90.0, 0.0, 23.44)
    assert ra == pytest.approx(6.0)
    assert dec == pytest.approx(23.44)
    ra, dec = ecliptic_to_equatorial(0.0, 90.0, 23.44)
    assert dec == pytest.approx(90.0 - 23.44)


def test_sun_at_march_equinox():
    ra, dec = DEFAULT_EPHEMERIS.sun_equatorial(julian_date(datetime(2024, 3, 20, 3, 6, tzinfo=UTC)))
    assert dec == pytest.approx(0.0, abs=0.05)
    assert min(ra, 24.0 - ra) < 0.01


def test_sun_at_june_solstice():
    ra, dec = DEFAULT_EPHEMERIS.sun_equatorial(julian_date(datetime(2024, 6, 20, 20, 51, tzinfo=UTC)))
    assert dec == pytest.approx(23.44, abs=0.05)
    assert ra == pytest.approx(6.0, abs=0.02)


def test_moon_distance_is_plausible():
    _, beta, dist = DEFAULT_EPHEMERIS.moon_ecliptic(julian_date(datetime(2024, 1, 25, tzinfo=UTC)))
    assert 356000.0 < dist < 407000.0
    assert abs(beta) < 5.4


def test_full_and_new_moon():
    full = datetime(2024, 1, 25, 17, 54, tzinfo=UTC)
    new = datetime(2024, 1, 11, 11, 57, tzinfo=UTC)
    assert illuminated_fraction(full) > 0.98
    assert moon_phase(full) > 0.95
    assert illuminated_fraction(new) < 0.02
    assert moon_phase(new) < 0.05


@given(st.datetimes(min_value=datetime(1990, 1, 1), max_value=datetime(2060, 1, 1),
                    timezones=st.just(UTC)))
def test_phase_ranges(dt):
    assert 0.0 <= moon_phase(dt) <= 1.0
    assert 0.0 <= illuminated_fraction(dt) <= 1.0
    ra, dec = DEFAULT_EPHEMERIS.moon_equatorial(julian_date(dt))
    assert 0.0 <= ra < 24.0
    assert abs(dec) < 30.0
