"""
Universe module — bodies, ephemerides and rise/set times.

Usage:
    from skyterm.universe import calculate_planets, calculate_rise_set_transit
    system = calculate_planets(instant, observer)
    rst = calculate_rise_set_transit(star.ra, star.dec, observer, instant)
"""

from .bodies import (
    BodyKind,
    DSOType,
    CelestialBody,
    Star,
    DeepSkyObject,
    Planet,
    require_all_kinds,
)
from .ephemeris import (
    EphemerisProvider,
    LowPrecisionEphemeris,
    DEFAULT_EPHEMERIS,
    mean_obliquity,
    moon_phase,
    illuminated_fraction,
)
from .planets import (
    PlanetarySystem,
    PlanetElements,
    BODY_NAMES,
    solve_kepler,
    calculate_body,
    calculate_planet,
    calculate_planets,
)
from .riseset import RiseSetTransit, calculate_rise_set_transit, format_event_time

__all__ = [
    "BodyKind",
    "DSOType",
    "CelestialBody",
    "Star",
    "DeepSkyObject",
    "Planet",
    "require_all_kinds",
    "EphemerisProvider",
    "LowPrecisionEphemeris",
    "DEFAULT_EPHEMERIS",
    "mean_obliquity",
    "moon_phase",
    "illuminated_fraction",
    "PlanetarySystem",
    "PlanetElements",
    "BODY_NAMES",
    "solve_kepler",
    "calculate_body",
    "calculate_planet",
    "calculate_planets",
    "RiseSetTransit",
    "calculate_rise_set_transit",
    "format_event_time",
]
