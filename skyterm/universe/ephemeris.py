"""
Sun and Moon apparent positions.

The planet engine only needs the (RA, Dec) output and the Sun's apparent
ecliptic longitude, so the series below sit behind ``EphemerisProvider``
and can be swapped for a more precise theory without touching callers.

Default provider:
  Sun  — low-precision solar theory (Meeus ch. 25), ~0.01°
  Moon — Meeus ch. 47 truncated to the largest terms, ~0.1°
JDE is taken equal to JD (ΔT ignored).
"""

from __future__ import annotations
import math
from datetime import datetime
from typing import Protocol, Tuple

from ..core.astro_time import centuries_since_j2000, julian_date
from ..core.coords import wrap_hours

# Obliquity of ecliptic at J2000 (degrees)
OBLIQUITY_J2000 = 23.43929111


def _normalize_deg(x: float) -> float:
    x = x % 360.0
    return 0.0 if x >= 360.0 else x


def mean_obliquity(jde: float) -> float:
    """Mean obliquity of the ecliptic in degrees (Meeus eq. 22.2)."""
    T = centuries_since_j2000(jde)
    return OBLIQUITY_J2000 - (46.8150 * T + 0.00059 * T * T - 0.001813 * T * T * T) / 3600.0


class EphemerisProvider(Protocol):
    def sun_equatorial(self, jde: float) -> Tuple[float, float]:
        """Apparent geocentric (RA hours, Dec degrees) of the Sun."""

    def moon_equatorial(self, jde: float) -> Tuple[float, float]:
        """Apparent geocentric (RA hours, Dec degrees) of the Moon."""

    def sun_apparent_longitude(self, T: float) -> float:
        """Apparent ecliptic longitude of the Sun in degrees, T in centuries."""


class LowPrecisionEphemeris:
    """Truncated analytic series; good to a fraction of a degree."""

    # ------------------------------------------------------------------
    # Sun
    # ------------------------------------------------------------------

    def sun_apparent_longitude(self, T: float) -> float:
        # Geometric mean longitude and mean anomaly
        L0 = _normalize_deg(280.46646 + 36000.76983 * T + 0.0003032 * T * T)
        M  = _normalize_deg(357.52911 + 35999.05029 * T - 0.0001537 * T * T)
        M_r = math.radians(M)
        # Equation of centre
        C = ((1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_r)
             + (0.019993 - 0.000101 * T) * math.sin(2 * M_r)
             + 0.000289 * math.sin(3 * M_r))
        # Aberration + nutation quick correction
        omega = _normalize_deg(125.04 - 1934.136 * T)
        return _normalize_deg(L0 + C - 0.00569 - 0.00478 * math.sin(math.radians(omega)))

    def sun_equatorial(self, jde: float) -> Tuple[float, float]:
        T = centuries_since_j2000(jde)
        lam_r = math.radians(self.sun_apparent_longitude(T))
        omega = _normalize_deg(125.04 - 1934.136 * T)
        eps_r = math.radians(mean_obliquity(jde) + 0.00256 * math.cos(math.radians(omega)))

        ra_r  = math.atan2(math.cos(eps_r) * math.sin(lam_r), math.cos(lam_r))
        dec_r = math.asin(max(-1.0, min(1.0, math.sin(eps_r) * math.sin(lam_r))))
        return wrap_hours(math.degrees(ra_r) / 15.0), math.degrees(dec_r)

    # ------------------------------------------------------------------
    # Moon
    # ------------------------------------------------------------------

    def moon_ecliptic(self, jde: float) -> Tuple[float, float, float]:
        """Geocentric ecliptic (longitude°, latitude°, distance km)."""
        T = centuries_since_j2000(jde)
        # Fundamental arguments (degrees)
        Lp = _normalize_deg(218.3164477 + 481267.88123421 * T)   # mean longitude
        D  = _normalize_deg(297.8501921 + 445267.1114034 * T)    # mean elongation
        M  = _normalize_deg(357.5291092 + 35999.0502909 * T)     # Sun mean anomaly
        Mp = _normalize_deg(134.9633964 + 477198.8675055 * T)    # Moon mean anomaly
        F  = _normalize_deg(93.2720950 + 483202.0175233 * T)     # argument of latitude
        E  = 1.0 - 0.002516 * T - 0.0000074 * T * T

        D_r, M_r, Mp_r, F_r = (math.radians(x) for x in (D, M, Mp, F))

        lon_sum = (6288774 * math.sin(Mp_r)
                   + 1274027 * math.sin(2 * D_r - Mp_r)
                   + 658314 * math.sin(2 * D_r)
                   + 213618 * math.sin(2 * Mp_r)
                   - 185116 * E * math.sin(M_r)
                   - 114332 * math.sin(2 * F_r)
                   + 58793 * math.sin(2 * D_r - 2 * Mp_r)
                   + 57066 * E * math.sin(2 * D_r - M_r - Mp_r)
                   + 53322 * math.sin(2 * D_r + Mp_r)
                   + 45758 * E * math.sin(2 * D_r - M_r))

        lat_sum = (5128122 * math.sin(F_r)
                   + 280602 * math.sin(Mp_r + F_r)
                   + 277693 * math.sin(Mp_r - F_r)
                   + 173237 * math.sin(2 * D_r - F_r)
                   + 55413 * math.sin(2 * D_r - Mp_r + F_r)
                   + 46271 * math.sin(2 * D_r - Mp_r - F_r))

        dist_sum = (-20905355 * math.cos(Mp_r)
                    - 3699111 * math.cos(2 * D_r - Mp_r)
                    - 2955968 * math.cos(2 * D_r)
                    - 569925 * math.cos(2 * Mp_r)
                    + 48888 * E * math.cos(M_r))

        lam = _normalize_deg(Lp + lon_sum / 1e6)
        beta = lat_sum / 1e6
        dist_km = 385000.56 + dist_sum / 1000.0
        return lam, beta, dist_km

    def moon_equatorial(self, jde: float) -> Tuple[float, float]:
        lam, beta, _ = self.moon_ecliptic(jde)
        return ecliptic_to_equatorial(lam, beta, mean_obliquity(jde))


def ecliptic_to_equatorial(lon_deg: float, lat_deg: float,
                           obliquity_deg: float) -> Tuple[float, float]:
    """Ecliptic (λ, β) degrees -> equatorial (RA hours, Dec degrees)."""
    lam = math.radians(lon_deg)
    beta = math.radians(lat_deg)
    eps = math.radians(obliquity_deg)

    ra = math.atan2(math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps),
                    math.cos(lam))
    sin_dec = math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam)
    dec = math.asin(max(-1.0, min(1.0, sin_dec)))
    return wrap_hours(math.degrees(ra) / 15.0), math.degrees(dec)


DEFAULT_EPHEMERIS = LowPrecisionEphemeris()


def moon_elongation(instant: datetime,
                    provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> float:
    """Sun–Moon angular separation in radians [0, π]."""
    jde = julian_date(instant)
    sun_ra, sun_dec = provider.sun_equatorial(jde)
    moon_ra, moon_dec = provider.moon_equatorial(jde)

    s_ra, s_dec = math.radians(sun_ra * 15.0), math.radians(sun_dec)
    m_ra, m_dec = math.radians(moon_ra * 15.0), math.radians(moon_dec)
    cos_e = (math.sin(s_dec) * math.sin(m_dec)
             + math.cos(s_dec) * math.cos(m_dec) * math.cos(s_ra - m_ra))
    return math.acos(max(-1.0, min(1.0, cos_e)))


def moon_phase(instant: datetime,
               provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> float:
    """Elongation / π: 0 = new, 1 = full."""
    return moon_elongation(instant, provider) / math.pi


def illuminated_fraction(instant: datetime,
                         provider: EphemerisProvider = DEFAULT_EPHEMERIS) -> float:
    """Illuminated fraction of the lunar disk 0..1."""
    return (1.0 - math.cos(moon_elongation(instant, provider))) / 2.0
