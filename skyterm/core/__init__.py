"""
Core module — time, coordinates and projection.

Usage:
    from skyterm.core import Observer, EquatorialCoords, equatorial_to_horizontal
    hz = equatorial_to_horizontal(EquatorialCoords(6.75, -16.72), observer, instant)
    p = project(hz.altitude, hz.azimuth, 45.0, 180.0, 60.0, 80, 24)
"""

from .types import (
    Observer,
    EquatorialCoords,
    HorizontalCoords,
    ScreenPoint,
    ViewState,
    DEFAULT_OBSERVER,
)
from .astro_time import (
    julian_date,
    jd_to_datetime,
    days_since_j2000,
    gmst_hours,
    local_sidereal_time,
    format_sidereal_time,
    to_utc,
    parse_iso,
)
from .coords import (
    equatorial_to_horizontal,
    horizontal_to_equatorial,
    equatorial_to_horizontal_array,
    angular_separation,
    format_ra,
    format_dec,
)
from .projection import project, project_normalized, ViewProjection
from .time_controller import TimeController, parse_time_step

__all__ = [
    "Observer",
    "EquatorialCoords",
    "HorizontalCoords",
    "ScreenPoint",
    "ViewState",
    "DEFAULT_OBSERVER",
    "julian_date",
    "jd_to_datetime",
    "days_since_j2000",
    "gmst_hours",
    "local_sidereal_time",
    "format_sidereal_time",
    "to_utc",
    "parse_iso",
    "equatorial_to_horizontal",
    "horizontal_to_equatorial",
    "equatorial_to_horizontal_array",
    "angular_separation",
    "format_ra",
    "format_dec",
    "project",
    "project_normalized",
    "ViewProjection",
    "TimeController",
    "parse_time_step",
]
