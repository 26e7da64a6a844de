"""
Constellation stick figures and label anchors.

Segments reference stars by name; every name used here must exist in the
bright star catalog (checked by the tests). A segment whose two ends name
the same star is a placeholder for a constellation represented by a single
bright star and is never drawn.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class Constellation:
    name: str
    abbreviation: str
    lines: Tuple[Tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class ConstellationLabel:
    name: str
    star_name: str        # label is placed next to this star


CONSTELLATIONS: Tuple[Constellation, ...] = (
    Constellation("Orion", "Ori", (
        # Shoulders to belt
        ("Betelgeuse", "Bellatrix"),
        ("Betelgeuse", "Alnitak"),
        ("Bellatrix", "Mintaka"),
        # Belt
        ("Alnitak", "Alnilam"),
        ("Alnilam", "Mintaka"),
        # Legs
        ("Alnitak", "Saiph"),
        ("Mintaka", "Rigel"),
        ("Rigel", "Saiph"),
    )),
    Constellation("Ursa Major", "UMa", (
        # Bowl
        ("Dubhe", "Merak"),
        ("Merak", "Phecda"),
        ("Phecda", "Megrez"),
        ("Megrez", "Dubhe"),
        # Handle
        ("Megrez", "Alioth"),
        ("Alioth", "Mizar"),
        ("Mizar", "Alkaid"),
    )),
    Constellation("Ursa Minor", "UMi", (
        ("Polaris", "Kochab"),
        ("Kochab", "Pherkad"),
    )),
    Constellation("Cassiopeia", "Cas", (
        ("Caph", "Schedar"),
        ("Schedar", "Gamma Cassiopeiae"),
        ("Gamma Cassiopeiae", "Ruchbah"),
        ("Ruchbah", "Segin"),
    )),
    Constellation("Summer Triangle", "---", (
        ("Vega", "Deneb"),
        ("Deneb", "Altair"),
        ("Altair", "Vega"),
    )),
    Constellation("Cygnus", "Cyg", (
        ("Deneb", "Sadr"),
        ("Sadr", "Albireo"),
        ("Gienah", "Sadr"),
        ("Sadr", "Fawaris"),
    )),
    Constellation("Lyra", "Lyr", (
        ("Vega", "Sheliak"),
        ("Sheliak", "Sulafat"),
        ("Sulafat", "Vega"),
    )),
    Constellation("Pegasus", "Peg", (
        # Great Square
        ("Markab", "Scheat"),
        ("Scheat", "Alpheratz"),
        ("Alpheratz", "Algenib"),
        ("Algenib", "Markab"),
        ("Markab", "Enif"),
    )),
    Constellation("Andromeda", "And", (
        ("Alpheratz", "Mirach"),
        ("Mirach", "Almach"),
    )),
    Constellation("Crux", "Cru", (
        ("Acrux", "Gacrux"),
        ("Mimosa", "Imai"),
    )),
    Constellation("Canis Major", "CMa", (
        ("Sirius", "Mirzam"),
        ("Sirius", "Adhara"),
        ("Adhara", "Wezen"),
        ("Wezen", "Aludra"),
    )),
    Constellation("Leo", "Leo", (
        ("Regulus", "Algieba"),
        ("Algieba", "Zosma"),
        ("Zosma", "Denebola"),
        ("Denebola", "Chertan"),
        ("Chertan", "Regulus"),
    )),
    Constellation("Gemini", "Gem", (
        ("Castor", "Pollux"),
        ("Pollux", "Alhena"),
    )),
    Constellation("Scorpius", "Sco", (
        ("Dschubba", "Antares"),
        ("Antares", "Sargas"),
        ("Sargas", "Shaula"),
    )),
    Constellation("Bootes", "Boo", (
        ("Arcturus", "Izar"),
        ("Izar", "Nekkar"),
        ("Nekkar", "Seginus"),
        ("Seginus", "Arcturus"),
    )),
    Constellation("Corvus", "Crv", (
        ("Gienah Corvi", "Algorab"),
        ("Algorab", "Kraz"),
        ("Kraz", "Minkar"),
        ("Minkar", "Gienah Corvi"),
    )),
    Constellation("Perseus", "Per", (
        ("Mirfak", "Algol"),
    )),
)


CONSTELLATION_LABELS: Tuple[ConstellationLabel, ...] = (
    ConstellationLabel("ORION", "Alnilam"),
    ConstellationLabel("URSA MAJOR", "Alioth"),
    ConstellationLabel("URSA MINOR", "Kochab"),
    ConstellationLabel("CASSIOPEIA", "Gamma Cassiopeiae"),
    ConstellationLabel("CYGNUS", "Sadr"),
    ConstellationLabel("LYRA", "Sulafat"),
    ConstellationLabel("PEGASUS", "Markab"),
    ConstellationLabel("CRUX", "Acrux"),
    ConstellationLabel("GEMINI", "Castor"),
    ConstellationLabel("LEO", "Regulus"),
    ConstellationLabel("CANIS MAJOR", "Sirius"),
    ConstellationLabel("SCORPIUS", "Antares"),
    ConstellationLabel("BOOTES", "Arcturus"),
)


def all_segments() -> List[Tuple[str, str]]:
    return [seg for c in CONSTELLATIONS for seg in c.lines]


def referenced_star_names() -> set[str]:
    names = {n for a, b in all_segments() for n in (a, b)}
    names.update(lbl.star_name for lbl in CONSTELLATION_LABELS)
    return names
