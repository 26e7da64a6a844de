"""
Render layers — one function per object class.

Every layer has the same signature::

    layer(canvas, scene, proj, options) -> int   # cells/objects drawn

and reads only the already-updated Alt/Az of the bodies in ``scene``. The
grid and constellation lines are "background" layers: they use
``Canvas.put_if_free`` exclusively, so whatever they draw can be covered by
later layers but never covers anything itself.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List, Tuple

from rich.style import Style

from ..core.projection import ViewProjection
from ..universe.bodies import BodyKind, CelestialBody, Star
from . import styles
from .canvas import Canvas

if TYPE_CHECKING:
    from .pipeline import RenderOptions, SkyScene

GRID_STEP_DEG = 15.0
GRID_SAMPLE_DEG = 5.0
LABEL_OFFSET_X = 2
STAR_LABEL_MAX_MAG = 2.5
DSO_MAG_MARGIN = 3.0


def _frange(start: float, stop: float, step: float) -> List[float]:
    n = int(round((stop - start) / step))
    return [start + i * step for i in range(n + 1)]


def draw_line(canvas: Canvas, x1: int, y1: int, x2: int, y2: int,
              glyph: str, style: Style) -> None:
    """
    Bresenham from (x1, y1) to (x2, y2), both endpoints included.
    Uses put_if_free, so stars and other glyphs already present survive.
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    x, y = x1, y1

    while True:
        canvas.put_if_free(x, y, glyph, style)
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
        if not canvas.in_bounds(x, y):
            break


def _label(canvas: Canvas, x: int, y: int, text: str, style: Style) -> None:
    if 0 <= y < canvas.height:
        canvas.write_text(x + LABEL_OFFSET_X, y, text, style)


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------

def render_grid(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                options: "RenderOptions") -> int:
    """Alt/Az grid every 15°, degree labels and N/E/S/W on the horizon."""
    drawn = 0

    # Cardinals and labels go first so the dotted lines cannot block them.
    for az, letter in styles.CARDINALS.items():
        p = proj.project(0.0, az)
        if p.visible and canvas.put_if_free(p.x, p.y, letter, styles.CARDINAL_STYLE):
            drawn += 1

    for alt in _frange(-90.0, 90.0, GRID_STEP_DEG):
        p = proj.project(alt, proj.center_az)
        if p.visible:
            for i, ch in enumerate(f"{alt:.0f}°"):
                canvas.put_if_free(p.x + i, p.y, ch, styles.GRID_LABEL_STYLE)

    for az in _frange(0.0, 360.0 - GRID_STEP_DEG, GRID_STEP_DEG):
        p = proj.project(0.0, az)
        if p.visible and az not in styles.CARDINALS:
            for i, ch in enumerate(f"{az:.0f}°"):
                canvas.put_if_free(p.x, p.y + 1 + i, ch, styles.GRID_LABEL_STYLE)

    # Altitude circles
    for alt in _frange(-90.0, 90.0, GRID_STEP_DEG):
        for az in _frange(0.0, 360.0 - GRID_SAMPLE_DEG, GRID_SAMPLE_DEG):
            p = proj.project(alt, az)
            if p.visible and canvas.put_if_free(p.x, p.y, styles.GRID_GLYPH, styles.GRID_STYLE):
                drawn += 1

    # Azimuth meridians
    for az in _frange(0.0, 360.0 - GRID_STEP_DEG, GRID_STEP_DEG):
        for alt in _frange(-90.0, 90.0, GRID_SAMPLE_DEG):
            p = proj.project(alt, az)
            if p.visible and canvas.put_if_free(p.x, p.y, styles.GRID_GLYPH, styles.GRID_STYLE):
                drawn += 1

    return drawn


def _star_index(stars: List[Star]) -> Dict[str, Star]:
    return {s.name: s for s in stars}


def render_constellation_lines(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                               options: "RenderOptions") -> int:
    index = _star_index(scene.stars)
    drawn = 0
    for constellation in scene.constellations:
        for name1, name2 in constellation.lines:
            if name1 == name2:
                continue
            s1, s2 = index.get(name1), index.get(name2)
            if s1 is None or s2 is None:
                continue
            p1 = proj.project(s1.altitude, s1.azimuth)
            p2 = proj.project(s2.altitude, s2.azimuth)
            if not (p1.visible and p2.visible):
                continue
            draw_line(canvas, p1.x, p1.y, p2.x, p2.y, styles.LINE_GLYPH, styles.LINE_STYLE)
            drawn += 1
    return drawn


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------

def _visible_dsos(scene: "SkyScene", proj: ViewProjection,
                  options: "RenderOptions") -> List[Tuple[CelestialBody, int, int]]:
    out = []
    limit = options.magnitude_limit + DSO_MAG_MARGIN
    for obj in scene.deep_sky:
        if obj.magnitude > limit:
            continue
        p = proj.project(obj.altitude, obj.azimuth)
        if p.visible:
            out.append((obj, p.x, p.y))
    return out


def render_deep_sky(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                    options: "RenderOptions") -> int:
    """Markers first, then 'M<n>' labels, so a label never hides a marker drawn before it."""
    visible = _visible_dsos(scene, proj, options)
    for obj, x, y in visible:
        glyph, style = styles.dso_marker(obj.dso_type)
        canvas.set(x, y, glyph, style)
    label_style = styles.LABEL_STYLES[BodyKind.DEEP_SKY]
    for obj, x, y in visible:
        _label(canvas, x, y, obj.label, label_style)
    return len(visible)


def render_stars(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                 options: "RenderOptions") -> int:
    drawn = 0
    for star in scene.stars:
        if star.magnitude > options.magnitude_limit:
            continue
        p = proj.project(star.altitude, star.azimuth)
        if not p.visible:
            continue
        canvas.set(p.x, p.y, styles.star_glyph(star.magnitude),
                   styles.star_style(star.magnitude, star.spectral_type,
                                     options.color_by_spectral_type))
        drawn += 1
    return drawn


def render_star_labels(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                       options: "RenderOptions") -> int:
    drawn = 0
    for star in scene.stars:
        if star.magnitude > STAR_LABEL_MAX_MAG or star.magnitude > options.magnitude_limit:
            continue
        p = proj.project(star.altitude, star.azimuth)
        if not p.visible:
            continue
        _label(canvas, p.x, p.y, star.name, styles.LABEL_STYLES[star.kind])
        drawn += 1
    return drawn


def render_planets(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                   options: "RenderOptions") -> int:
    drawn = 0
    for body in scene.planets:
        entry = styles.BODY_GLYPHS.get(body.name)
        if entry is None or not body.known:
            continue
        p = proj.project(body.altitude, body.azimuth)
        if not p.visible:
            continue
        glyph, color = entry
        canvas.set(p.x, p.y, glyph, Style(color=color, bold=True))
        drawn += 1
    return drawn


def render_planet_labels(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                         options: "RenderOptions") -> int:
    drawn = 0
    for body in scene.planets:
        if not body.known:
            continue
        p = proj.project(body.altitude, body.azimuth)
        if not p.visible:
            continue
        _label(canvas, p.x, p.y, body.name, styles.LABEL_STYLES[body.kind])
        drawn += 1
    return drawn


def render_constellation_labels(canvas: Canvas, scene: "SkyScene", proj: ViewProjection,
                                options: "RenderOptions") -> int:
    """Name placed up and to the right of its anchor star, or below when off the top."""
    index = _star_index(scene.stars)
    drawn = 0
    for label in scene.constellation_labels:
        star = index.get(label.star_name)
        if star is None:
            continue
        p = proj.project(star.altitude, star.azimuth)
        if not p.visible:
            continue
        y = p.y - 1
        if y < 0:
            y = p.y + 1
            if y >= canvas.height:
                continue
        canvas.write_text(p.x + LABEL_OFFSET_X, y, label.name, styles.CONSTELLATION_LABEL_STYLE)
        drawn += 1
    return drawn
