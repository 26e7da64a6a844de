"""
BrailleCanvas — 2×4 sub-cell dots per character (U+2800 block).

Gives twice the horizontal and four times the vertical resolution of the
plain canvas, at the cost of one colour per character cell. Only stars
are drawn this way; everything else stays on the normal Canvas.

Dot bits per cell:
     1   8
     2  16
     4  32
    64 128
"""

from __future__ import annotations
import math
from typing import Iterable, List

from rich.style import Style
from rich.text import Text

from ..core.projection import ViewProjection
from ..universe.bodies import Star
from . import styles

BRAILLE_BASE = 0x2800
BRAILLE_DOTS = ((1, 8), (2, 16), (4, 32), (64, 128))


class BrailleCanvas:

    def __init__(self, width: int, height: int):
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.bits: List[List[int]] = [[0] * self.width for _ in range(self.height)]
        self.styles: List[List[Style]] = [[styles.BLANK_STYLE] * self.width
                                          for _ in range(self.height)]

    @property
    def pixel_width(self) -> int:
        return self.width * 2

    @property
    def pixel_height(self) -> int:
        return self.height * 4

    def clear(self) -> None:
        for y in range(self.height):
            self.bits[y] = [0] * self.width
            self.styles[y] = [styles.BLANK_STYLE] * self.width

    def set_pixel(self, px: int, py: int, style: Style = styles.BLANK_STYLE) -> None:
        """Light one dot; (px, py) in dot coordinates. Outside is ignored."""
        if px < 0 or py < 0:
            return
        cx, cy = px // 2, py // 4
        if cx >= self.width or cy >= self.height:
            return
        self.bits[cy][cx] |= BRAILLE_DOTS[py % 4][px % 2]
        self.styles[cy][cx] = style

    def char_at(self, x: int, y: int) -> str:
        return chr(BRAILLE_BASE + self.bits[y][x])

    def to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for y in range(self.height):
            for x in range(self.width):
                text.append(self.char_at(x, y), self.styles[y][x])
            if y < self.height - 1:
                text.append("\n")
        return text

    def plain(self) -> str:
        return "\n".join("".join(self.char_at(x, y) for x in range(self.width))
                         for y in range(self.height))


def render_stars_braille(bc: BrailleCanvas, stars: Iterable[Star],
                         proj: ViewProjection, magnitude_limit: float) -> int:
    """
    Stars on the dot grid: 3×3 dots for mag < 1, 2×2 for mag < 3, else 1.
    Returns the number of stars drawn.
    """
    pw, ph = bc.pixel_width, bc.pixel_height
    drawn = 0
    for star in stars:
        if star.magnitude > magnitude_limit:
            continue
        sx, sy, inside = proj.project_normalized(star.altitude, star.azimuth)
        if not inside:
            continue
        px = math.floor((sx + 1.0) * pw / 2.0)
        py = math.floor((1.0 - sy) * ph / 2.0)
        if not (0 <= px < pw and 0 <= py < ph):
            continue

        style = Style(color=styles.spectral_color(star.spectral_type))
        if star.magnitude < 1.0:
            offsets = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)]
        elif star.magnitude < 3.0:
            offsets = [(dx, dy) for dy in (0, 1) for dx in (0, 1)]
        else:
            offsets = [(0, 0)]
        for dx, dy in offsets:
            bc.set_pixel(px + dx, py + dy, style)
        drawn += 1
    return drawn
