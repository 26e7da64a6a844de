"""
Catalogs module — built-in stars, Messier objects and constellation figures.
"""

from .fixed import FixedCatalog
from .stars import StarCatalog, BRIGHT_STARS, load_bright_stars
from .messier import DeepSkyCatalog, MESSIER_DATA, load_messier
from .constellations import (
    Constellation,
    ConstellationLabel,
    CONSTELLATIONS,
    CONSTELLATION_LABELS,
    all_segments,
    referenced_star_names,
)

__all__ = [
    "FixedCatalog",
    "StarCatalog",
    "BRIGHT_STARS",
    "load_bright_stars",
    "DeepSkyCatalog",
    "MESSIER_DATA",
    "load_messier",
    "Constellation",
    "ConstellationLabel",
    "CONSTELLATIONS",
    "CONSTELLATION_LABELS",
    "all_segments",
    "referenced_star_names",
]
