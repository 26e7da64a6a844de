"""
Celestial body variants.

Every object the renderer can draw is one of a closed set of kinds:

    CelestialBody
        ├── Star           (BodyKind.STAR)      fixed RA/Dec from a catalog
        ├── DeepSkyObject  (BodyKind.DEEP_SKY)  fixed RA/Dec from a catalog
        └── Planet         (BodyKind.SUN / MOON / PLANET)  RA/Dec per instant

Tables keyed by BodyKind must cover every member; ``require_all_kinds`` is
called on them at import time so adding a kind fails loudly until every
consumer has been updated.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from ..core.types import EquatorialCoords


class BodyKind(Enum):
    STAR     = "star"
    DEEP_SKY = "deepsky"
    PLANET   = "planet"
    SUN      = "sun"
    MOON     = "moon"

    @property
    def is_solar_system(self) -> bool:
        return self in (BodyKind.PLANET, BodyKind.SUN, BodyKind.MOON)


def require_all_kinds(table: Mapping[BodyKind, object], what: str) -> None:
    missing = set(BodyKind) - set(table)
    if missing:
        names = ", ".join(sorted(k.name for k in missing))
        raise RuntimeError(f"{what} has no entry for {names}")


class DSOType(Enum):
    GALAXY            = "Galaxy"
    NEBULA            = "Nebula"
    SUPERNOVA_REMNANT = "Supernova Remnant"
    GLOBULAR_CLUSTER  = "Globular Cluster"
    OPEN_CLUSTER      = "Open Cluster"
    PLANETARY_NEBULA  = "Planetary Nebula"
    OTHER             = "Other"


@dataclass(slots=True)
class CelestialBody:
    """
    Common fields of every drawable object.

    ra/dec are the equatorial position (hours / degrees); altitude/azimuth
    are derived for the current observer and instant and overwritten on
    every tick.
    """
    name: str
    ra: float = 0.0
    dec: float = 0.0
    magnitude: float = 0.0
    altitude: float = 0.0
    azimuth: float = 0.0

    @property
    def kind(self) -> BodyKind:
        raise NotImplementedError

    @property
    def equatorial(self) -> EquatorialCoords:
        return EquatorialCoords(self.ra, self.dec)


@dataclass(slots=True)
class Star(CelestialBody):
    spectral_type: str = "A"

    @property
    def kind(self) -> BodyKind:
        return BodyKind.STAR


@dataclass(slots=True)
class DeepSkyObject(CelestialBody):
    number: int = 0                 # Messier number
    common_name: str = ""
    dso_type: DSOType = DSOType.OTHER

    @property
    def kind(self) -> BodyKind:
        return BodyKind.DEEP_SKY

    @property
    def label(self) -> str:
        return f"M{self.number}"


@dataclass(slots=True)
class Planet(CelestialBody):
    """
    Sun, Moon or planet at a specific instant.

    ``known`` is False for a name the ephemeris does not recognise; such a
    result is all zeros and must not be read as RA=0, Dec=0.
    """
    body_type: BodyKind = BodyKind.PLANET
    known: bool = True

    @property
    def kind(self) -> BodyKind:
        return self.body_type
