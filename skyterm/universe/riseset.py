"""
Rise, set and meridian transit for a fixed RA/Dec.

Same-day approximation: the events are computed for the calendar day
containing the instant in its own time zone (UTC for a naive instant),
using GMST at that midnight and a constant sidereal-to-solar ratio. Good
to a couple of minutes, which is the resolution the info panel shows.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Optional

from ..core.astro_time import gmst_hours, julian_date, to_utc
from ..core.types import Observer

# Standard altitude of a point source at rise/set (refraction), degrees.
STANDARD_ALTITUDE = -0.8333
SIDEREAL_TO_SOLAR = 0.99726957


@dataclass(frozen=True, slots=True)
class RiseSetTransit:
    transit: datetime
    rise: Optional[datetime] = None
    set: Optional[datetime] = None
    never_rises: bool = False
    circumpolar: bool = False


def _midnight(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        instant = to_utc(instant)
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def transit_time(ra_hours: float, observer: Observer, midnight: datetime) -> datetime:
    """Instant on the given day when LST equals the RA."""
    gmst0 = gmst_hours(julian_date(midnight))
    sidereal_hours = (ra_hours - gmst0 - observer.longitude / 15.0) % 24.0
    return midnight + timedelta(hours=sidereal_hours * SIDEREAL_TO_SOLAR)


def calculate_rise_set_transit(ra_hours: float, dec_deg: float,
                               observer: Observer,
                               instant: datetime) -> RiseSetTransit:
    midnight = _midnight(instant)

    lat = math.radians(observer.latitude)
    dec = math.radians(dec_deg)
    h0 = math.radians(STANDARD_ALTITUDE)

    denom = math.cos(lat) * math.cos(dec)
    if denom == 0.0:
        # Observer at a pole or object at a celestial pole: the object
        # never changes altitude, so it is up or down all day.
        always_up = math.sin(lat) * math.sin(dec) > math.sin(h0)
        cos_h0 = -2.0 if always_up else 2.0
    else:
        cos_h0 = (math.sin(h0) - math.sin(lat) * math.sin(dec)) / denom

    if cos_h0 > 1.0:
        return RiseSetTransit(transit=midnight, never_rises=True)

    transit = transit_time(ra_hours, observer, midnight)
    if cos_h0 < -1.0:
        return RiseSetTransit(transit=transit, circumpolar=True)

    half_arc = timedelta(hours=math.degrees(math.acos(cos_h0)) / 15.0)
    return RiseSetTransit(transit=transit,
                          rise=transit - half_arc,
                          set=transit + half_arc)


def format_event_time(t: Optional[datetime], tz: Optional[tzinfo] = None) -> str:
    """'HH:MM' (UTC unless ``tz`` is given), or '---' when the event does not happen."""
    if t is None:
        return "---"
    t = to_utc(t)
    if tz is not None:
        t = t.astimezone(tz)
    return t.strftime("%H:%M")
