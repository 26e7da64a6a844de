"""
Window host — draws the character chart in a pygame window.

The canvas is the same one the snapshot CLI prints: every cell is blitted
as one monospace glyph in its rich style colour. Positions are recomputed
on a one-second tick of simulated time (or immediately after a time jump);
the view and layer toggles apply on the next frame.
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Dict, Optional, Tuple

import pygame
from rich.style import Style

from .config import Config
from .controls import HELP_LINES, ChartControls, InputMode
from .core.projection import ViewProjection
from .core.time_controller import TimeController
from .core.types import Observer
from .hud import info_rows, status_line
from .rendering.canvas import Canvas
from .rendering.pipeline import RenderOptions, RenderPipeline
from .rendering.styles import BLANK, SELECTION_STYLE
from .sky_model import SkyModel

log = logging.getLogger(__name__)

DEFAULT_COLS, DEFAULT_ROWS = 120, 40
FONT_NAME = "monospace"
FONT_SIZE = 16
FPS = 30
TICK_SECONDS = 1.0

BG_COLOR = (0, 0, 8)
FG_COLOR = (200, 200, 200)
HUD_COLOR = (0, 185, 85)
HINT_COLOR = (0, 110, 58)
PANEL_BG = (0, 16, 10, 215)
PANEL_BORDER = (0, 150, 70)
PANEL_TITLE = (0, 255, 120)
PANEL_TEXT = (175, 255, 175)

RGB = Tuple[int, int, int]

_SPECIAL_KEYS = {
    pygame.K_UP: "up", pygame.K_DOWN: "down",
    pygame.K_LEFT: "left", pygame.K_RIGHT: "right",
    pygame.K_RETURN: "enter", pygame.K_KP_ENTER: "enter",
    pygame.K_ESCAPE: "esc", pygame.K_BACKSPACE: "backspace",
}
_ARROWS = ("up", "down", "left", "right")


def key_name(event) -> Optional[str]:
    """pygame KEYDOWN -> ChartControls key name."""
    name = _SPECIAL_KEYS.get(event.key)
    if name is not None:
        if name in _ARROWS and event.mod & pygame.KMOD_SHIFT:
            return f"shift+{name}"
        return name
    return event.unicode or None


def style_rgb(style: Style) -> RGB:
    if style.color is None:
        return FG_COLOR
    return tuple(style.color.get_truecolor())


class SkyViewer:

    def __init__(self, cfg: Config, observer: Observer,
                 start: Optional[datetime] = None,
                 cols: int = DEFAULT_COLS, rows: int = DEFAULT_ROWS):
        d = cfg.display
        options = RenderOptions(
            magnitude_limit=d.magnitude_limit,
            show_grid=d.show_coordinate_grid,
            show_constellation_lines=d.show_constellation_lines,
            show_constellation_labels=d.show_constellation_names,
            show_star_labels=d.show_star_labels,
            show_deep_sky=d.show_deep_sky,
            show_planet_labels=d.show_planet_labels,
            color_by_spectral_type=d.color_stars_by_type,
        )
        self.cfg = cfg
        self.tz = cfg.display_tz()
        self.model = SkyModel(observer)
        self.clock = TimeController(start_utc=start, time_step=cfg.time.step)
        # One status row on top, one hint/prompt row at the bottom.
        self.canvas = Canvas(cols, max(rows - 2, 1))
        self.controls = ChartControls(self.model, self.clock, cfg.controls, options,
                                      width=self.canvas.width, height=self.canvas.height)
        self.pipeline = RenderPipeline()

        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.bold = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        self.cell_w, _ = self.font.size("M")
        self.cell_h = self.font.get_linesize()
        self._glyphs: Dict[Tuple[str, RGB, bool], pygame.Surface] = {}
        self._since_tick = 0.0

        self.model.update(self.clock.now)

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return self.canvas.width * self.cell_w, (self.canvas.height + 2) * self.cell_h

    # ── Input ───────────────────────────────────────────────────────────────

    def handle_event(self, ev) -> None:
        if ev.type == pygame.KEYDOWN:
            name = key_name(ev)
            if name:
                self.controls.press(name)

    # ── Update ──────────────────────────────────────────────────────────────

    def update(self, dt: float) -> None:
        self.clock.tick(dt)
        self._since_tick += dt
        if self._since_tick >= TICK_SECONDS or self.controls.dirty:
            self._since_tick = 0.0
            self.controls.dirty = False
            self.model.update(self.clock.now)
            self.model.apply_follow(self.controls.view)

    # ── Draw ────────────────────────────────────────────────────────────────

    def _glyph(self, ch: str, rgb: RGB, bold: bool) -> pygame.Surface:
        key = (ch, rgb, bold)
        surf = self._glyphs.get(key)
        if surf is None:
            font = self.bold if bold else self.font
            surf = font.render(ch, True, rgb)
            self._glyphs[key] = surf
        return surf

    def _text(self, surface, text: str, pos: Tuple[int, int], rgb: RGB = HUD_COLOR) -> None:
        surface.blit(self.font.render(text, True, rgb), pos)

    def draw(self, surface) -> None:
        ctl = self.controls
        self.pipeline.render(self.canvas, self.model.scene(), ctl.view, ctl.options)

        surface.fill(BG_COLOR)
        top = self.cell_h
        for y, row in enumerate(self.canvas.cells):
            for x, cell in enumerate(row):
                if cell.glyph == BLANK:
                    continue
                surf = self._glyph(cell.glyph, style_rgb(cell.style), bool(cell.style.bold))
                surface.blit(surf, (x * self.cell_w, top + y * self.cell_h))
        self._draw_selection(surface)

        status = status_line(self.model.observer, ctl.view, ctl.options,
                             self.clock.now, self.clock.speed_label)
        self._text(surface, status.plain, (0, 0))

        bottom = (self.canvas.height + 1) * self.cell_h
        if ctl.mode is not InputMode.NONE:
            self._text(surface, ctl.prompt + "_", (0, bottom), PANEL_TITLE)
        elif ctl.message:
            self._text(surface, ctl.message, (0, bottom), PANEL_TITLE)
        else:
            self._text(surface, "[?] help  [/] search  [enter] select  [q] quit",
                       (0, bottom), HINT_COLOR)

        if ctl.show_info and self.model.selected is not None:
            self._draw_info_panel(surface)
        if ctl.show_help:
            self._draw_panel(surface, "Keys", list(HELP_LINES), centered=True)

    def _draw_selection(self, surface) -> None:
        """Selected object's cell in reverse video."""
        body = self.model.selected
        if body is None:
            return
        pt = ViewProjection(self.controls.view, self.canvas.width,
                            self.canvas.height).project(body.altitude, body.azimuth)
        if not pt.visible:
            return
        cell = self.canvas.get(pt.x, pt.y)
        fg, bg = style_rgb(cell.style), BG_COLOR
        if SELECTION_STYLE.reverse:
            fg, bg = bg, fg
        rect = (pt.x * self.cell_w, (pt.y + 1) * self.cell_h, self.cell_w, self.cell_h)
        surface.fill(bg, rect)
        if cell.glyph != BLANK:
            surface.blit(self._glyph(cell.glyph, fg, bool(cell.style.bold)), rect[:2])

    def _draw_info_panel(self, surface) -> None:
        body = self.model.selected
        rows = info_rows(body, self.model.observer, self.clock.now, self.tz)
        lines = [f"{label + ':':<15}{value}" for label, value in rows]
        if self.model.following:
            lines.append("(following)")
        self._draw_panel(surface, body.name, lines)

    def _draw_panel(self, surface, title: str, lines, centered: bool = False) -> None:
        pad = self.cell_w
        width = (max([len(title), *map(len, lines)]) + 2) * self.cell_w
        height = (len(lines) + 2) * self.cell_h
        W, H = surface.get_size()
        if centered:
            px, py = (W - width) // 2, (H - height) // 2
        else:
            px, py = W - width - pad, self.cell_h + pad

        bg = pygame.Surface((width, height), pygame.SRCALPHA)
        bg.fill(PANEL_BG)
        pygame.draw.rect(bg, PANEL_BORDER, (0, 0, width, height), 1)
        surface.blit(bg, (px, py))

        fy = py + self.cell_h // 2
        surface.blit(self.bold.render(title, True, PANEL_TITLE), (px + pad, fy))
        fy += self.cell_h
        for line in lines:
            self._text(surface, line, (px + pad, fy), PANEL_TEXT)
            fy += self.cell_h


def run_viewer(cfg: Config, observer: Observer, start: Optional[datetime] = None,
               width: int = 0, height: int = 0) -> int:
    """Open the chart window and run until the user quits; returns 0."""
    pygame.init()
    try:
        viewer = SkyViewer(cfg, observer, start,
                           cols=width or DEFAULT_COLS, rows=height or DEFAULT_ROWS)
        screen = pygame.display.set_mode(viewer.pixel_size)
        pygame.display.set_caption(f"skyterm — {observer.name or 'sky chart'}")
        pygame.key.set_repeat(300, 40)
        clock = pygame.time.Clock()
        log.info("window %dx%d cells", viewer.canvas.width, viewer.canvas.height)

        while viewer.controls.running:
            dt = clock.tick(FPS) / 1000.0
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    viewer.controls.quit()
                else:
                    viewer.handle_event(ev)

            viewer.update(dt)
            viewer.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0
