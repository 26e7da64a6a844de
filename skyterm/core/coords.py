"""
Equatorial <-> horizontal coordinate transforms.

Conventions
- RA in hours [0, 24), Dec/Alt in degrees [-90, 90]
- Azimuth in degrees [0, 360), measured from North towards East
- Every inverse-trig argument is clamped into [-1, 1] first, so rounding
  overshoot never turns into a NaN
"""

from __future__ import annotations
import math
from datetime import datetime

import numpy as np

from .astro_time import julian_date, local_sidereal_time, wrap_hours
from .types import EquatorialCoords, HorizontalCoords, Observer

# Keeps the azimuth denominator finite at the zenith and at the poles.
_EPS = 1e-12


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x

def clamp_unit(x: float) -> float:
    return clamp(x, -1.0, 1.0)

def wrap_deg(x: float) -> float:
    x = x % 360.0
    # -1e-17 % 360.0 rounds up to 360.0
    return 0.0 if x >= 360.0 else x

def ang_diff_deg(a: float, b: float) -> float:
    """Smallest signed difference a-b in degrees in [-180,180)."""
    return (a - b + 180.0) % 360.0 - 180.0


def equatorial_to_horizontal(eq: EquatorialCoords, observer: Observer,
                             instant: datetime) -> HorizontalCoords:
    """Convert RA/Dec to Alt/Az for an observer at an instant."""
    lst = local_sidereal_time(julian_date(instant), observer.longitude)

    ha = math.radians((lst - eq.ra) * 15.0)
    dec = math.radians(eq.dec)
    lat = math.radians(observer.latitude)

    sin_alt = math.sin(dec) * math.sin(lat) + math.cos(dec) * math.cos(lat) * math.cos(ha)
    alt = math.asin(clamp_unit(sin_alt))

    cos_az = (math.sin(dec) - math.sin(lat) * math.sin(alt)) / (math.cos(lat) * math.cos(alt) + _EPS)
    az = math.acos(clamp_unit(cos_az))
    if math.sin(ha) > 0:
        az = 2 * math.pi - az

    return HorizontalCoords(
        altitude=clamp(math.degrees(alt), -90.0, 90.0),
        azimuth=wrap_deg(math.degrees(az)),
    )


def horizontal_to_equatorial(hz: HorizontalCoords, observer: Observer,
                             instant: datetime) -> EquatorialCoords:
    """Convert Alt/Az to RA/Dec (inverse of equatorial_to_horizontal)."""
    lst = local_sidereal_time(julian_date(instant), observer.longitude)

    alt = math.radians(hz.altitude)
    az = math.radians(hz.azimuth)
    lat = math.radians(observer.latitude)

    sin_dec = math.sin(alt) * math.sin(lat) + math.cos(alt) * math.cos(lat) * math.cos(az)
    dec = math.asin(clamp_unit(sin_dec))

    cos_ha = (math.sin(alt) - math.sin(lat) * math.sin(dec)) / (math.cos(lat) * math.cos(dec) + _EPS)
    ha = math.acos(clamp_unit(cos_ha))
    if math.sin(az) > 0:
        ha = 2 * math.pi - ha

    return EquatorialCoords(
        ra=wrap_hours(lst - math.degrees(ha) / 15.0),
        dec=math.degrees(dec),
    )


def equatorial_to_horizontal_array(ra_hours: np.ndarray, dec_deg: np.ndarray,
                                   observer: Observer, instant: datetime
                                   ) -> tuple[np.ndarray, np.ndarray]:
    """
    Vectorised equatorial_to_horizontal for a whole catalog.
    Returns (alt_deg, az_deg) arrays.
    """
    lst = local_sidereal_time(julian_date(instant), observer.longitude)

    ha = np.radians((lst - np.asarray(ra_hours, dtype=np.float64)) * 15.0)
    dec = np.radians(np.asarray(dec_deg, dtype=np.float64))
    lat = math.radians(observer.latitude)

    sin_alt = np.sin(dec) * math.sin(lat) + np.cos(dec) * math.cos(lat) * np.cos(ha)
    alt = np.arcsin(np.clip(sin_alt, -1.0, 1.0))

    cos_az = (np.sin(dec) - math.sin(lat) * np.sin(alt)) / (math.cos(lat) * np.cos(alt) + _EPS)
    az = np.arccos(np.clip(cos_az, -1.0, 1.0))
    az = np.where(np.sin(ha) > 0, 2 * np.pi - az, az)

    az = np.degrees(az) % 360.0
    return np.degrees(alt), np.where(az >= 360.0, 0.0, az)


def angular_separation(alt1: float, az1: float, alt2: float, az2: float) -> float:
    """Great-circle distance between two horizontal positions, degrees."""
    a1, a2 = math.radians(alt1), math.radians(alt2)
    d_az = math.radians(az1 - az2)
    cos_sep = math.sin(a1) * math.sin(a2) + math.cos(a1) * math.cos(a2) * math.cos(d_az)
    return math.degrees(math.acos(clamp_unit(cos_sep)))


def format_ra(hours: float) -> str:
    """RA in hours -> 'HHh MMm SS.Ss'."""
    h = int(hours)
    m = int((hours - h) * 60.0)
    s = ((hours - h) * 60.0 - m) * 60.0
    return f"{h:02d}h {m:02d}m {s:04.1f}s"


def format_dec(degrees: float) -> str:
    """Dec in degrees -> '+DD° MM' SS.S"'."""
    sign = "-" if degrees < 0 else "+"
    degrees = abs(degrees)
    d = int(degrees)
    m = int((degrees - d) * 60.0)
    s = ((degrees - d) * 60.0 - m) * 60.0
    return f"{sign}{d:02d}° {m:02d}' {s:04.1f}\""
