"""
Base for catalogs of objects with fixed RA/Dec.

Positions are stored twice: on the body objects (what the renderer and the
selection code read) and as numpy arrays (what the per-tick update works
on). ``update_positions`` recomputes every Alt/Az in one vectorised pass
and writes the results back onto the bodies.
"""

from __future__ import annotations
from datetime import datetime
from typing import Dict, Generic, Iterator, List, Optional, Sequence, TypeVar

import numpy as np

from ..core.coords import equatorial_to_horizontal_array
from ..core.types import Observer
from ..universe.bodies import CelestialBody

B = TypeVar("B", bound=CelestialBody)


class FixedCatalog(Generic[B]):

    def __init__(self, bodies: Sequence[B]):
        self._bodies: List[B] = list(bodies)
        self._by_name: Dict[str, B] = {b.name.lower(): b for b in self._bodies}
        self._ra  = np.array([b.ra for b in self._bodies], dtype=np.float64)
        self._dec = np.array([b.dec for b in self._bodies], dtype=np.float64)
        self._mag = np.array([b.magnitude for b in self._bodies], dtype=np.float64)

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[B]:
        return iter(self._bodies)

    @property
    def bodies(self) -> List[B]:
        return self._bodies

    def get(self, name: str) -> Optional[B]:
        """Case-insensitive exact lookup."""
        return self._by_name.get(name.strip().lower())

    def update_positions(self, observer: Observer, instant: datetime) -> None:
        if not self._bodies:
            return
        alt, az = equatorial_to_horizontal_array(self._ra, self._dec, observer, instant)
        for body, a, z in zip(self._bodies, alt.tolist(), az.tolist()):
            body.altitude = a
            body.azimuth = z

    def brighter_than(self, mag_limit: float) -> List[B]:
        idx = np.nonzero(self._mag <= mag_limit)[0]
        return [self._bodies[i] for i in idx]
