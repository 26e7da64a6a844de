"""
Planetary positions — Sun, Moon and the seven classical planets.

Pipeline for a planet at instant t:
    elements(T)  ->  Kepler  ->  heliocentric ecliptic xyz
                 ->  minus Earth (unit circle opposite the Sun)
                 ->  geocentric ecliptic λ, β
                 ->  equatorial RA/Dec (mean obliquity of date)
                 ->  horizontal Alt/Az for the observer

Sun and Moon come straight from the EphemerisProvider.

Earth is put on a circular 1 AU orbit, so errors reach about a degree for
Mars near opposition and stay a fraction of a degree for the outer planets.

Usage:
    system = calculate_planets(instant, observer)
    for body in system.all_bodies():
        print(body.name, body.altitude, body.azimuth)
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from ..core.astro_time import centuries_since_j2000, julian_date
from ..core.coords import equatorial_to_horizontal, wrap_deg
from ..core.types import EquatorialCoords, Observer
from .bodies import BodyKind, Planet
from .ephemeris import (
    DEFAULT_EPHEMERIS,
    EphemerisProvider,
    ecliptic_to_equatorial,
    mean_obliquity,
)

log = logging.getLogger(__name__)

SUN_MAGNITUDE  = -26.7
# Phase-independent; full Moon is about -12.7
MOON_MAGNITUDE = -12.0

KEPLER_ITERATIONS = 10


# ---------------------------------------------------------------------------
# Orbital elements (linear in T, Julian centuries from J2000)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlanetElements:
    """
    Units:
        L     : mean longitude (degrees)
        a     : semi-major axis (AU)
        e     : eccentricity
        i     : inclination (degrees)
        w_bar : longitude of perihelion (degrees)
        Om    : longitude of ascending node (degrees)
    Each element has a secular rate suffix _dot (per Julian century).
    """
    L:     float;  L_dot:     float
    a:     float
    e:     float;  e_dot:     float
    i:     float;  i_dot:     float
    w_bar: float;  w_bar_dot: float
    Om:    float;  Om_dot:    float

    def at_epoch(self, T: float) -> 'PlanetElements':
        """Return elements at T Julian centuries from J2000 (rates zeroed)."""
        return PlanetElements(
            L     = self.L     + self.L_dot     * T, L_dot     = 0.0,
            a     = self.a,
            e     = self.e     + self.e_dot     * T, e_dot     = 0.0,
            i     = self.i     + self.i_dot     * T, i_dot     = 0.0,
            w_bar = self.w_bar + self.w_bar_dot * T, w_bar_dot = 0.0,
            Om    = self.Om    + self.Om_dot    * T, Om_dot    = 0.0,
        )

    @property
    def mean_anomaly(self) -> float:
        return self.L - self.w_bar

    @property
    def arg_perihelion(self) -> float:
        return self.w_bar - self.Om


PLANET_ELEMENTS: MappingProxyType[str, PlanetElements] = MappingProxyType({
    "Mercury": PlanetElements(252.25, 149474.07, 0.387098, 0.205635, +0.000020,
                              7.005, -0.006, 77.46, -0.16, 48.33, +0.04),
    "Venus":   PlanetElements(181.98, 58519.21, 0.723330, 0.006773, -0.000042,
                              3.395, -0.008, 131.56, -0.05, 76.68, +0.28),
    "Mars":    PlanetElements(355.43, 19141.70, 1.523688, 0.093405, +0.000090,
                              1.850, -0.007, 336.06, +0.44, 49.56, -0.29),
    "Jupiter": PlanetElements(34.35, 3036.30, 5.202603, 0.048498, -0.000163,
                              1.303, -0.002, 14.33, +0.21, 100.46, -0.11),
    "Saturn":  PlanetElements(50.08, 1223.51, 9.554909, 0.055546, -0.000347,
                              2.489, -0.004, 93.06, +0.57, 113.67, -0.26),
    "Uranus":  PlanetElements(314.05, 429.86, 19.218446, 0.047318, -0.000018,
                              0.773, +0.001, 173.01, +0.10, 74.01, -0.04),
    "Neptune": PlanetElements(304.35, 219.88, 30.110387, 0.008606, +0.000002,
                              1.770, -0.001, 48.12, -0.04, 131.78, -0.02),
})

PLANET_MAGNITUDES: MappingProxyType[str, float] = MappingProxyType({
    "Mercury": -0.4,
    "Venus":   -4.4,
    "Mars":    -2.0,
    "Jupiter": -2.7,
    "Saturn":   0.4,
    "Uranus":   5.7,
    "Neptune":  7.8,
})

PLANET_NAMES: Tuple[str, ...] = tuple(PLANET_ELEMENTS)
BODY_NAMES: Tuple[str, ...] = ("Sun", "Moon") + PLANET_NAMES


# ---------------------------------------------------------------------------
# Kepler
# ---------------------------------------------------------------------------

def solve_kepler(M_rad: float, e: float, iterations: int = KEPLER_ITERATIONS) -> float:
    """
    Eccentric anomaly E (radians) from M = E - e*sin(E).

    Plain fixed-point iteration E <- M + e*sin(E), a fixed number of times.
    Converges for every planet here (e < 0.21); no early exit.
    """
    E = M_rad
    for _ in range(iterations):
        E = M_rad + e * math.sin(E)
    return E


def true_anomaly(E_rad: float, e: float) -> float:
    """True anomaly v (radians) from the eccentric anomaly, half-angle form."""
    return 2.0 * math.atan2(math.sqrt(1.0 + e) * math.sin(E_rad / 2.0),
                            math.sqrt(1.0 - e) * math.cos(E_rad / 2.0))


def heliocentric_ecliptic(elems: PlanetElements) -> Tuple[float, float, float]:
    """Heliocentric ecliptic x, y, z (AU) for elements already at epoch."""
    M = math.radians(elems.mean_anomaly)
    E = solve_kepler(M, elems.e)
    v = true_anomaly(E, elems.e)
    r = elems.a * (1.0 - elems.e * math.cos(E))

    x_orb = r * math.cos(v)
    y_orb = r * math.sin(v)

    w_r  = math.radians(elems.arg_perihelion)
    Om_r = math.radians(elems.Om)
    i_r  = math.radians(elems.i)

    cos_w, sin_w   = math.cos(w_r),  math.sin(w_r)
    cos_Om, sin_Om = math.cos(Om_r), math.sin(Om_r)
    cos_i, sin_i   = math.cos(i_r),  math.sin(i_r)

    x = (cos_Om*cos_w - sin_Om*sin_w*cos_i)*x_orb + (-cos_Om*sin_w - sin_Om*cos_w*cos_i)*y_orb
    y = (sin_Om*cos_w + cos_Om*sin_w*cos_i)*x_orb + (-sin_Om*sin_w + cos_Om*cos_w*cos_i)*y_orb
    z = (sin_w*sin_i)*x_orb + (cos_w*sin_i)*y_orb
    return x, y, z


def earth_heliocentric(sun_longitude_deg: float) -> Tuple[float, float, float]:
    """Earth on a circular 1 AU orbit, opposite the Sun's apparent longitude."""
    lon = math.radians(sun_longitude_deg + 180.0)
    return math.cos(lon), math.sin(lon), 0.0


def planet_equatorial(name: str, jde: float,
                      provider: EphemerisProvider = DEFAULT_EPHEMERIS
                      ) -> Optional[Tuple[float, float]]:
    """Geocentric (RA hours, Dec degrees) of a planet, None for unknown names."""
    base = PLANET_ELEMENTS.get(name)
    if base is None:
        return None

    T = centuries_since_j2000(jde)
    px, py, pz = heliocentric_ecliptic(base.at_epoch(T))
    ex, ey, ez = earth_heliocentric(provider.sun_apparent_longitude(T))

    gx, gy, gz = px - ex, py - ey, pz - ez
    lon = wrap_deg(math.degrees(math.atan2(gy, gx)))
    lat = math.degrees(math.atan2(gz, math.hypot(gx, gy)))
    return ecliptic_to_equatorial(lon, lat, mean_obliquity(jde))


# ---------------------------------------------------------------------------
# Body construction
# ---------------------------------------------------------------------------

def _make_body(name: str, kind: BodyKind, ra: float, dec: float, mag: float,
               observer: Observer, instant: datetime) -> Planet:
    hz = equatorial_to_horizontal(EquatorialCoords(ra, dec), observer, instant)
    return Planet(name=name, ra=ra, dec=dec, magnitude=mag,
                  altitude=hz.altitude, azimuth=hz.azimuth, body_type=kind)


def calculate_sun(instant: datetime, observer: Observer,
                  provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> Planet:
    ra, dec = provider.sun_equatorial(julian_date(instant))
    return _make_body("Sun", BodyKind.SUN, ra, dec, SUN_MAGNITUDE, observer, instant)


def calculate_moon(instant: datetime, observer: Observer,
                   provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> Planet:
    ra, dec = provider.moon_equatorial(julian_date(instant))
    return _make_body("Moon", BodyKind.MOON, ra, dec, MOON_MAGNITUDE, observer, instant)


def calculate_planet(name: str, instant: datetime, observer: Observer,
                     provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> Planet:
    """
    Position of one of Mercury..Neptune.

    An unknown name gives a zero-valued Planet with known=False rather than
    an exception.
    """
    radec = planet_equatorial(name, julian_date(instant), provider)
    if radec is None:
        log.debug("no orbital elements for %r", name)
        return Planet(name=name, known=False)
    ra, dec = radec
    return _make_body(name, BodyKind.PLANET, ra, dec, PLANET_MAGNITUDES[name],
                      observer, instant)


def calculate_body(name: str, instant: datetime, observer: Observer,
                   provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> Planet:
    """Any solar-system body by name (case-insensitive)."""
    canonical = name.strip().capitalize()
    if canonical == "Sun":
        return calculate_sun(instant, observer, provider)
    if canonical == "Moon":
        return calculate_moon(instant, observer, provider)
    if canonical in PLANET_ELEMENTS:
        return calculate_planet(canonical, instant, observer, provider)
    return calculate_planet(name, instant, observer, provider)


# ---------------------------------------------------------------------------
# All bodies at once
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class PlanetarySystem:
    sun:     Planet
    moon:    Planet
    mercury: Planet
    venus:   Planet
    mars:    Planet
    jupiter: Planet
    saturn:  Planet
    uranus:  Planet
    neptune: Planet

    def all_bodies(self) -> List[Planet]:
        """Fixed order: Sun, Moon, Mercury … Neptune."""
        return [self.sun, self.moon, self.mercury, self.venus, self.mars,
                self.jupiter, self.saturn, self.uranus, self.neptune]

    def by_name(self) -> Dict[str, Planet]:
        return {b.name: b for b in self.all_bodies()}


def calculate_planets(instant: datetime, observer: Observer,
                      provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> PlanetarySystem:
    planets = [calculate_planet(n, instant, observer, provider) for n in PLANET_NAMES]
    return PlanetarySystem(calculate_sun(instant, observer, provider),
                           calculate_moon(instant, observer, provider),
                           *planets)
