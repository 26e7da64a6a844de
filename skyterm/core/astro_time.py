from __future__ import annotations
from datetime import datetime, timedelta, timezone

# Lightweight time utilities (no external deps).
# Instants are normalised to UTC; a naive datetime is taken to be UTC.

J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0
_J2000_DT = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def wrap_hours(hours: float) -> float:
    # a tiny negative value % 24.0 comes back as 24.0
    hours = hours % 24.0
    return 0.0 if hours >= 24.0 else hours


def to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_iso(text: str) -> datetime:
    """ISO 8601 -> UTC datetime; a trailing "Z" or no offset both mean UTC."""
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(raw))


def julian_date(dt: datetime) -> float:
    """Convert a datetime to Julian Date (proleptic Gregorian calendar)."""
    dt = to_utc(dt)

    year = dt.year
    month = dt.month
    day = dt.day + (dt.hour + (dt.minute + (dt.second + dt.microsecond / 1e6) / 60.0) / 60.0) / 24.0

    if month <= 2:
        year -= 1
        month += 12

    A = year // 100
    B = 2 - A + (A // 4)

    jd = int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + B - 1524.5
    return float(jd)


def jd_to_datetime(jd: float) -> datetime:
    """JD -> datetime UTC."""
    return _J2000_DT + timedelta(seconds=(jd - J2000_JD) * 86400.0)


def days_since_j2000(dt: datetime) -> float:
    return julian_date(dt) - J2000_JD


def centuries_since_j2000(jd: float) -> float:
    return (jd - J2000_JD) / DAYS_PER_CENTURY


def gmst_hours(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time in hours [0, 24).
    Meeus, Astronomical Algorithms, eq. 12.4.
    """
    d = jd - J2000_JD
    T = d / DAYS_PER_CENTURY
    gmst = 280.46061837 + 360.98564736629 * d + 0.000387933 * T * T - (T * T * T) / 38710000.0
    return wrap_hours((gmst % 360.0) / 15.0)


def local_sidereal_time(jd: float, longitude_deg: float) -> float:
    """Local Sidereal Time in hours [0, 24). Longitude positive East."""
    return wrap_hours(gmst_hours(jd) + longitude_deg / 15.0)


def format_sidereal_time(hours: float) -> str:
    """Sidereal time in hours -> 'HH:MM:SS' (truncated, not rounded)."""
    h = int(hours)
    m = int((hours - h) * 60.0)
    s = int(((hours - h) * 60.0 - m) * 60.0)
    return f"{h:02d}:{m:02d}:{s:02d}"
