"""
Glyphs and colours for every object class.

All tables are read-only (MappingProxyType); colours are xterm-256 indices
wrapped in rich Styles so the same cell styles work for the ANSI output and
for the pygame host (via ``Color.get_truecolor``).
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Tuple

from rich.style import Style

from ..universe.bodies import BodyKind, DSOType, require_all_kinds

BLANK = " "
BLANK_STYLE = Style.null()

# ---------------------------------------------------------------------------
# Stars
# ---------------------------------------------------------------------------

SPECTRAL_COLORS = MappingProxyType({
    "O": "color(27)",    # hot blue
    "B": "color(75)",    # blue-white
    "A": "color(231)",   # white
    "F": "color(230)",   # yellow-white
    "G": "color(229)",   # yellow
    "K": "color(214)",   # orange
    "M": "color(196)",   # red
})
DEFAULT_STAR_COLOR = "color(231)"

MAGNITUDE_GLYPHS = MappingProxyType({
    -2: "★",
    -1: "✦",
     0: "●",
     1: "◉",
     2: "○",
     3: "◦",
     4: "·",
     5: "⋅",
     6: "·",
})
DEFAULT_STAR_GLYPH = "·"

BOLD_MAGNITUDE = 0.5


def star_glyph(magnitude: float) -> str:
    return MAGNITUDE_GLYPHS.get(round(magnitude), DEFAULT_STAR_GLYPH)


def spectral_color(spectral_type: str) -> str:
    return SPECTRAL_COLORS.get(spectral_type[:1].upper(), DEFAULT_STAR_COLOR)


def star_style(magnitude: float, spectral_type: str, color_by_type: bool = True) -> Style:
    color = spectral_color(spectral_type) if color_by_type else DEFAULT_STAR_COLOR
    return Style(color=color, bold=magnitude < BOLD_MAGNITUDE)


# ---------------------------------------------------------------------------
# Deep sky
# ---------------------------------------------------------------------------

DSO_GLYPHS: MappingProxyType[DSOType, Tuple[str, str]] = MappingProxyType({
    DSOType.GALAXY:            ("◈", "color(141)"),
    DSOType.NEBULA:            ("◇", "color(213)"),
    DSOType.SUPERNOVA_REMNANT: ("✸", "color(196)"),
    DSOType.GLOBULAR_CLUSTER:  ("◉", "color(220)"),
    DSOType.OPEN_CLUSTER:      ("◌", "color(117)"),
    DSOType.PLANETARY_NEBULA:  ("◎", "color(48)"),
})
DEFAULT_DSO_GLYPH = ("◆", "color(245)")


def dso_marker(dso_type: DSOType) -> Tuple[str, Style]:
    glyph, color = DSO_GLYPHS.get(dso_type, DEFAULT_DSO_GLYPH)
    return glyph, Style(color=color)


# ---------------------------------------------------------------------------
# Solar system
# ---------------------------------------------------------------------------

BODY_GLYPHS = MappingProxyType({
    "Sun":     ("☉", "color(226)"),
    "Moon":    ("☽", "color(250)"),
    "Mercury": ("☿", "color(249)"),
    "Venus":   ("♀", "color(230)"),
    "Mars":    ("♂", "color(196)"),
    "Jupiter": ("♃", "color(215)"),
    "Saturn":  ("♄", "color(229)"),
    "Uranus":  ("♅", "color(117)"),
    "Neptune": ("♆", "color(27)"),
})

# ---------------------------------------------------------------------------
# Overlays and labels
# ---------------------------------------------------------------------------

GRID_GLYPH = "·"
GRID_STYLE = Style(color="color(238)")
GRID_LABEL_STYLE = Style(color="color(242)")
CARDINAL_STYLE = Style(color="yellow", bold=True)
CARDINALS = MappingProxyType({0.0: "N", 90.0: "E", 180.0: "S", 270.0: "W"})

LINE_GLYPH = "─"
LINE_STYLE = Style(color="color(240)")

# Label style per kind of object being labelled.
LABEL_STYLES = MappingProxyType({
    BodyKind.STAR:     Style(color="white", dim=True),
    BodyKind.DEEP_SKY: Style(color="magenta", dim=True),
    BodyKind.PLANET:   Style(color="yellow", bold=True),
    BodyKind.SUN:      Style(color="yellow", bold=True),
    BodyKind.MOON:     Style(color="yellow", bold=True),
})
require_all_kinds(LABEL_STYLES, "LABEL_STYLES")

CONSTELLATION_LABEL_STYLE = Style(color="color(51)", bold=True)
SELECTION_STYLE = Style(reverse=True)
