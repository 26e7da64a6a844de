from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given, strategies as st

from skyterm.core.astro_time import (
    J2000_JD,
    days_since_j2000,
    format_sidereal_time,
    gmst_hours,
    jd_to_datetime,
    julian_date,
    local_sidereal_time,
    parse_iso,
    to_utc,
)

UTC = timezone.utc

INSTANTS = st.datetimes(
    min_value=datetime(1950, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=st.just(UTC),
)


def test_julian_date_unix_epoch():
    assert julian_date(datetime(1970, 1, 1, tzinfo=UTC)) == pytest.approx(2440587.5)


def test_julian_date_2025():
    assert julian_date(datetime(2025, 1, 1, tzinfo=UTC)) == pytest.approx(2460676.5)


def test_julian_date_j2000():
    assert julian_date(datetime(2000, 1, 1, 12, tzinfo=UTC)) == pytest.approx(J2000_JD)
    assert days_since_j2000(datetime(2000, 1, 2, 12, tzinfo=UTC)) == pytest.approx(1.0)


def test_naive_datetime_is_utc():
    naive = datetime(2024, 6, 1, 12, 30)
    assert julian_date(naive) == julian_date(naive.replace(tzinfo=UTC))


def test_offset_is_normalised():
    plus_two = timezone(timedelta(hours=2))
    local = datetime(2024, 6, 1, 14, 30, tzinfo=plus_two)
    assert to_utc(local) == datetime(2024, 6, 1, 12, 30, tzinfo=UTC)
    assert julian_date(local) == pytest.approx(julian_date(datetime(2024, 6, 1, 12, 30, tzinfo=UTC)))


@given(INSTANTS)
def test_jd_round_trip(dt):
    back = jd_to_datetime(julian_date(dt))
    assert abs((back - dt).total_seconds()) < 1e-3


@given(INSTANTS)
def test_one_day_is_one_jd(dt):
    assert julian_date(dt + timedelta(days=1)) - julian_date(dt) == pytest.approx(1.0, abs=1e-6)


def test_gmst_at_j2000():
    assert gmst_hours(J2000_JD) == pytest.approx(280.46061837 / 15.0, abs=1e-9)


@given(st.floats(min_value=2433282.5, max_value=2488069.5))
def test_gmst_range(jd):
    assert 0.0 <= gmst_hours(jd) < 24.0


@given(st.floats(min_value=2433282.5, max_value=2488069.5))
def test_lst_at_greenwich_is_gmst(jd):
    assert local_sidereal_time(jd, 0.0) == pytest.approx(gmst_hours(jd), abs=1e-9)


def test_lst_east_longitude_adds_time():
    jd = 2460676.5
    gmst = gmst_hours(jd)
    lst = local_sidereal_time(jd, 90.0)
    assert math.isclose((lst - gmst) % 24.0, 6.0, abs_tol=1e-9)


def test_sidereal_day_is_shorter():
    # The sky returns to the same LST about 3m56s before a solar day is over.
    jd = 2460676.5
    g0 = gmst_hours(jd)
    g1 = gmst_hours(jd + 1.0)
    assert (g1 - g0) % 24.0 == pytest.approx(0.0657, abs=1e-3)


def test_format_sidereal_time():
    assert format_sidereal_time(6.5) == "06:30:00"
    assert format_sidereal_time(0.0) == "00:00:00"
    assert format_sidereal_time(23.999) == "23:59:56"


def test_parse_iso():
    assert parse_iso("2025-01-01T03:00:00Z") == datetime(2025, 1, 1, 3, tzinfo=UTC)
    assert parse_iso("2025-01-01T03:00") == datetime(2025, 1, 1, 3, tzinfo=UTC)
    assert parse_iso("2025-01-01T05:00+02:00") == datetime(2025, 1, 1, 3, tzinfo=UTC)
    with pytest.raises(ValueError):
        parse_iso("yesterday")
