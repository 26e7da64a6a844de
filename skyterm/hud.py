"""
Status line and object info rows shared by the snapshot CLI and the window.
"""

from __future__ import annotations
from datetime import datetime, tzinfo
from typing import List, Optional, Tuple

from rich.text import Text

from .core.astro_time import format_sidereal_time, julian_date, local_sidereal_time, to_utc
from .core.coords import format_dec, format_ra
from .core.types import Observer, ViewState
from .rendering.pipeline import RenderOptions
from .universe.bodies import CelestialBody, DeepSkyObject, Planet, Star
from .universe.ephemeris import illuminated_fraction
from .universe.riseset import calculate_rise_set_transit, format_event_time

InfoRow = Tuple[str, str]


def observer_label(obs: Observer) -> str:
    return obs.name or f"{obs.latitude:+.2f}°, {obs.longitude:+.2f}°"


def status_line(observer: Observer, view: ViewState, options: RenderOptions,
                instant: datetime, speed_label: str = "") -> Text:
    lst = local_sidereal_time(julian_date(instant), observer.longitude)
    line = Text()
    line.append(f"{observer_label(observer)}  ", style="bold")
    line.append(f"{to_utc(instant):%Y-%m-%d %H:%M:%S} UTC  ")
    if speed_label:
        line.append(f"[{speed_label}]  ", style="yellow")
    line.append(f"LST {format_sidereal_time(lst)}  ")
    line.append(f"Alt {view.center_alt:.0f}° Az {view.center_az:.0f}° FOV {view.fov:.0f}°  ")
    line.append(f"mag≤{options.magnitude_limit:g}  ")
    line.append(f"Moon {illuminated_fraction(instant) * 100:.0f}%", style="color(250)")
    return line


def info_rows(body: CelestialBody, observer: Observer, instant: datetime,
              tz: Optional[tzinfo] = None) -> List[InfoRow]:
    """Label/value rows for the selected-object panel."""
    rows: List[InfoRow] = []
    if isinstance(body, Star):
        rows += [("Type", "Star"),
                 ("Magnitude", f"{body.magnitude:.2f}"),
                 ("Spectral Type", body.spectral_type)]
    elif isinstance(body, DeepSkyObject):
        if body.common_name:
            rows.append(("Name", body.common_name))
        rows += [("Type", body.dso_type.value),
                 ("Magnitude", f"{body.magnitude:.1f}")]
    elif isinstance(body, Planet):
        rows += [("Type", body.body_type.value.capitalize()),
                 ("Magnitude", f"{body.magnitude:.1f}")]

    rows += [("RA", format_ra(body.ra)),
             ("Dec", format_dec(body.dec)),
             ("Altitude", f"{body.altitude:.1f}°"),
             ("Azimuth", f"{body.azimuth:.1f}°")]

    # Planets move too fast for a fixed-RA estimate to be worth showing.
    if isinstance(body, Planet):
        return rows
    return rows + event_rows(body, observer, instant, tz)


def event_rows(body: CelestialBody, observer: Observer, instant: datetime,
               tz: Optional[tzinfo] = None) -> List[InfoRow]:
    """Rise/transit/set rows for the body's current RA/Dec."""
    rows: List[InfoRow] = []
    # Events belong to the day as the reader sees it.
    day = to_utc(instant).astimezone(tz) if tz is not None else instant
    rst = calculate_rise_set_transit(body.ra, body.dec, observer, day)
    if rst.never_rises:
        rows.append(("Visibility", "Never rises"))
    elif rst.circumpolar:
        rows += [("Visibility", "Circumpolar"),
                 ("Transit", format_event_time(rst.transit, tz))]
    else:
        rows += [("Rises", format_event_time(rst.rise, tz)),
                 ("Transit", format_event_time(rst.transit, tz)),
                 ("Sets", format_event_time(rst.set, tz))]
    return rows
