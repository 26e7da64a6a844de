"""
Messier objects — the showpieces of each object class.
"""

from __future__ import annotations

from ..universe.bodies import DeepSkyObject, DSOType
from .fixed import FixedCatalog

# Format: (number, common_name, dso_type, ra_hours, dec_deg, mag)
MESSIER_DATA = [
    (1,  "Crab Nebula",       DSOType.SUPERNOVA_REMNANT,  5.58,  22.02, 8.4),
    (8,  "Lagoon Nebula",     DSOType.NEBULA,            18.06, -24.38, 6.0),
    (13, "Hercules Cluster",  DSOType.GLOBULAR_CLUSTER,  16.69,  36.46, 5.8),
    (31, "Andromeda Galaxy",  DSOType.GALAXY,             0.71,  41.27, 3.4),
    (42, "Orion Nebula",      DSOType.NEBULA,             5.59,  -5.39, 4.0),
    (44, "Beehive Cluster",   DSOType.OPEN_CLUSTER,       8.67,  19.98, 3.7),
    (45, "Pleiades",          DSOType.OPEN_CLUSTER,       3.79,  24.12, 1.6),
    (51, "Whirlpool Galaxy",  DSOType.GALAXY,            13.50,  47.20, 8.4),
    (57, "Ring Nebula",       DSOType.PLANETARY_NEBULA,  18.89,  33.03, 8.8),
    (81, "Bode's Galaxy",     DSOType.GALAXY,             9.93,  69.07, 6.9),
]


def load_messier() -> list[DeepSkyObject]:
    return [DeepSkyObject(name=f"M{num}", number=num, common_name=common,
                          dso_type=kind, ra=ra, dec=dec, magnitude=mag)
            for num, common, kind, ra, dec, mag in MESSIER_DATA]


class DeepSkyCatalog(FixedCatalog[DeepSkyObject]):

    def __init__(self):
        super().__init__(load_messier())
        self._by_common = {o.common_name.lower(): o for o in self.bodies}

    def get(self, name: str):
        """Lookup by catalog label ('M42') or common name ('Orion Nebula')."""
        key = name.strip().lower()
        return self._by_name.get(key) or self._by_common.get(key)
