from __future__ import annotations

from datetime import datetime, timedelta, timezone

from hypothesis import given, strategies as st

from skyterm.core.astro_time import julian_date, local_sidereal_time
from skyterm.core.coords import ang_diff_deg
from skyterm.core.types import Observer
from skyterm.universe.riseset import calculate_rise_set_transit, format_event_time

UTC = timezone.utc


def test_never_rises(nyc, instant):
    rst = calculate_rise_set_transit(12.0, -80.0, nyc, instant)
    assert rst.never_rises
    assert not rst.circumpolar
    assert rst.rise is None and rst.set is None
    assert rst.transit == datetime(2025, 1, 1, tzinfo=UTC)


def test_circumpolar(nyc, instant):
    rst = calculate_rise_set_transit(2.53, 89.26, nyc, instant)
    assert rst.circumpolar
    assert not rst.never_rises
    assert rst.rise is None and rst.set is None
    assert rst.transit.date() == instant.date()


def test_equatorial_object_is_up_about_half_a_day(nyc, instant):
    rst = calculate_rise_set_transit(6.0, 0.0, nyc, instant)
    assert rst.rise < rst.transit < rst.set
    hours_up = (rst.set - rst.rise).total_seconds() / 3600.0
    # Refraction keeps it up a few minutes longer than 12 h.
    assert 12.0 < hours_up < 12.3


def test_transit_is_when_lst_equals_ra(nyc, instant):
    ra = 18.62
    rst = calculate_rise_set_transit(ra, 38.78, nyc, instant)
    lst = local_sidereal_time(julian_date(rst.transit), nyc.longitude)
    assert abs(ang_diff_deg(lst * 15.0, ra * 15.0)) < 0.05


@given(st.floats(min_value=0.0, max_value=23.99), st.floats(min_value=-60.0, max_value=60.0),
       st.floats(min_value=-60.0, max_value=60.0))
def test_transit_falls_on_the_utc_day(ra, dec, lat):
    midnight = datetime(2025, 3, 10, tzinfo=UTC)
    rst = calculate_rise_set_transit(ra, dec, Observer(lat, 10.0), midnight + timedelta(hours=15))
    assert midnight <= rst.transit < midnight + timedelta(days=1)
    if rst.rise is not None:
        assert rst.rise < rst.transit < rst.set


def test_observer_at_pole():
    pole = Observer(90.0, 0.0)
    t = datetime(2025, 6, 1, tzinfo=UTC)
    assert calculate_rise_set_transit(3.0, 45.0, pole, t).circumpolar
    assert calculate_rise_set_transit(3.0, -45.0, pole, t).never_rises


def test_object_at_celestial_pole():
    t = datetime(2025, 6, 1, tzinfo=UTC)
    assert calculate_rise_set_transit(0.0, 90.0, Observer(10.0, 0.0), t).circumpolar
    assert calculate_rise_set_transit(0.0, 90.0, Observer(-10.0, 0.0), t).never_rises


def test_format_event_time():
    assert format_event_time(None) == "---"
    t = datetime(2025, 1, 1, 5, 7, 42, tzinfo=UTC)
    assert format_event_time(t) == "05:07"
    assert format_event_time(t, timezone(timedelta(hours=-5))) == "00:07"


def test_day_is_taken_in_the_instants_zone(nyc):
    est = timezone(timedelta(hours=-5))
    evening = datetime(2025, 1, 1, 20, 0, tzinfo=est)

    rst = calculate_rise_set_transit(12.0, -80.0, nyc, evening)
    assert rst.never_rises
    assert rst.transit == datetime(2025, 1, 1, tzinfo=est)

    vega = calculate_rise_set_transit(18.62, 38.78, nyc, evening)
    midnight = datetime(2025, 1, 1, tzinfo=est)
    assert midnight <= vega.transit < midnight + timedelta(days=1)
    assert vega.rise < vega.transit < vega.set


def test_naive_instant_is_utc(nyc):
    rst = calculate_rise_set_transit(12.0, -80.0, nyc, datetime(2025, 1, 1, 20, 0))
    assert rst.transit == datetime(2025, 1, 1, tzinfo=UTC)
