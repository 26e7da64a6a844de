"""
ChartControls — keyboard state machine for the interactive chart.

Kept free of any windowing library: the host translates its events into
key names and calls ``press``. Printable keys are passed as the character
itself ("g", "C", "{"); the rest by name:

    up down left right  shift+up shift+down shift+left shift+right
    enter  esc  backspace

Bindings are listed in HELP_LINES, which the window shows on "?".
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Dict, Optional

from .config import ControlsConfig
from .core.astro_time import parse_iso
from .core.time_controller import TimeController
from .core.types import ViewState
from .rendering.pipeline import RenderOptions
from .sky_model import SkyModel

log = logging.getLogger(__name__)

MAGNITUDE_CYCLE = {3.0: 4.0, 4.0: 5.0, 5.0: 6.0}
MAGNITUDE_CYCLE_START = 3.0

HELP_LINES = (
    "arrows, h j k l    pan          H J K L, shift+arrows  fast pan",
    "+ = -              zoom         0                      reset view",
    "n s e w            face N S E W z                      zenith",
    "g C N              grid, constellation lines, constellation names",
    "p P d S            planets, planet labels, deep sky, star labels",
    "m                  magnitude limit 3 > 4 > 5 > 6",
    "enter              select nearest to centre",
    "i c f              info panel, centre on selection, follow",
    "/                  search by name",
    "space [ ] { }      pause, step back/forward, fast step",
    "< > r              slower, faster, reverse",
    "T t                jump to now, enter a time",
    "?                  help",
    "q                  quit (esc closes an overlay first)",
)


class InputMode(Enum):
    NONE   = "none"
    SEARCH = "search"
    TIME   = "time"


def next_magnitude_limit(current: float) -> float:
    return MAGNITUDE_CYCLE.get(current, MAGNITUDE_CYCLE_START)


class ChartControls:
    """
    Owns the view, the layer toggles and the overlay state of one chart.

    ``dirty`` is set whenever simulated time jumps, so the host recomputes
    positions before the next frame instead of waiting for its tick.
    """

    def __init__(self, model: SkyModel, clock: TimeController,
                 controls: Optional[ControlsConfig] = None,
                 options: Optional[RenderOptions] = None,
                 view: Optional[ViewState] = None,
                 width: int = 80, height: int = 24):
        self.model = model
        self.clock = clock
        self.controls = controls or ControlsConfig()
        self.options = options or RenderOptions()
        self.view = view or ViewState()
        self.width = width
        self.height = height

        self.show_info = False
        self.show_help = False
        self.mode = InputMode.NONE
        self.buffer = ""
        self.message = ""
        self.running = True
        self.dirty = False

        pan = self._pan
        self._bindings: Dict[str, Callable[[], None]] = {
            "up":    lambda: pan(0, 1),          "k": lambda: pan(0, 1),
            "down":  lambda: pan(0, -1),         "j": lambda: pan(0, -1),
            "left":  lambda: pan(-1, 0),         "h": lambda: pan(-1, 0),
            "right": lambda: pan(1, 0),          "l": lambda: pan(1, 0),
            "shift+up":    lambda: pan(0, 1, fast=True),  "K": lambda: pan(0, 1, fast=True),
            "shift+down":  lambda: pan(0, -1, fast=True), "J": lambda: pan(0, -1, fast=True),
            "shift+left":  lambda: pan(-1, 0, fast=True), "H": lambda: pan(-1, 0, fast=True),
            "shift+right": lambda: pan(1, 0, fast=True),  "L": lambda: pan(1, 0, fast=True),

            "+": self._zoom_in, "=": self._zoom_in, "-": self._zoom_out,
            "0": self.view.reset,

            "n": lambda: self._face(0.0),   "s": lambda: self._face(180.0),
            "e": lambda: self._face(90.0),  "w": lambda: self._face(270.0),
            "z": self._zenith,

            "g": lambda: self._toggle("show_grid"),
            "C": lambda: self._toggle("show_constellation_lines"),
            "N": lambda: self._toggle("show_constellation_labels"),
            "p": lambda: self._toggle("show_planets"),
            "P": lambda: self._toggle("show_planet_labels"),
            "d": lambda: self._toggle("show_deep_sky"),
            "S": lambda: self._toggle("show_star_labels"),
            "m": self._cycle_magnitude,

            "enter": self._select,
            "i": self._toggle_info,
            "c": self._center,
            "f": self._follow,
            "/": lambda: self._begin_input(InputMode.SEARCH),

            " ": self._time(self.clock.toggle_pause),
            "[": self._time(self.clock.step_backward),
            "]": self._time(self.clock.step_forward),
            "{": self._time(lambda: self.clock.step_backward(fast=True)),
            "}": self._time(lambda: self.clock.step_forward(fast=True)),
            "<": self._time(self.clock.speed_down),
            ">": self._time(self.clock.speed_up),
            "r": self._time(self.clock.reverse),
            "T": self._time(self.clock.jump_to_now),
            "t": lambda: self._begin_input(InputMode.TIME),

            "?": self._toggle_help,
            "esc": self._escape,
            "q": self.quit,
        }

    # ── Entry point ─────────────────────────────────────────────────────────

    def press(self, key: str) -> None:
        if self.mode is not InputMode.NONE:
            self._input_key(key)
            return
        action = self._bindings.get(key)
        if action is None:
            return
        self.message = ""
        action()

    def quit(self) -> None:
        self.running = False

    @property
    def prompt(self) -> str:
        if self.mode is InputMode.SEARCH:
            return f"/{self.buffer}"
        if self.mode is InputMode.TIME:
            return f"time (ISO 8601): {self.buffer}"
        return ""

    # ── View ────────────────────────────────────────────────────────────────

    def _pan(self, d_az: int, d_alt: int, fast: bool = False) -> None:
        step = self.controls.pan_speed
        if fast:
            step *= self.controls.fast_pan_multiplier
        self.view.pan(d_az * step, d_alt * step)

    def _zoom_in(self) -> None:
        self.view.zoom_in(self.controls.zoom_step)

    def _zoom_out(self) -> None:
        self.view.zoom_out(self.controls.zoom_step)

    def _face(self, az: float) -> None:
        self.view.center_az = az

    def _zenith(self) -> None:
        self.view.center_alt = 90.0

    def _toggle(self, attr: str) -> None:
        setattr(self.options, attr, not getattr(self.options, attr))

    def _cycle_magnitude(self) -> None:
        self.options.magnitude_limit = next_magnitude_limit(self.options.magnitude_limit)

    # ── Selection ───────────────────────────────────────────────────────────

    def _select(self) -> None:
        body = self.model.select_nearest(self.view, self.width, self.height, self.options)
        self.show_info = body is not None
        if body is None:
            self.message = "nothing near the centre"

    def _toggle_info(self) -> None:
        self.show_info = self.model.selected is not None and not self.show_info

    def _center(self) -> None:
        self.model.center_on_selected(self.view)

    def _follow(self) -> None:
        following = self.model.toggle_follow()
        self.message = "following" if following else "follow off"
        self.model.apply_follow(self.view)

    def _search(self, query: str) -> None:
        body = self.model.search(query)
        if body is None:
            self.message = f"no match for {query!r}"
            return
        self.model.select(body)
        self.model.center_on_selected(self.view)
        self.show_info = True

    # ── Time ────────────────────────────────────────────────────────────────

    def _time(self, fn: Callable[[], None]) -> Callable[[], None]:
        def run() -> None:
            fn()
            self.dirty = True
        return run

    def _set_time(self, text: str) -> None:
        try:
            instant = parse_iso(text)
        except ValueError:
            self.message = f"not an ISO 8601 time: {text!r}"
            return
        self.clock.set_time(instant)
        self.dirty = True

    # ── Overlays and text input ─────────────────────────────────────────────

    def _toggle_help(self) -> None:
        self.show_help = not self.show_help

    def _escape(self) -> None:
        if self.show_help:
            self.show_help = False
        elif self.show_info:
            self.show_info = False
        else:
            self.quit()

    def _begin_input(self, mode: InputMode) -> None:
        self.mode = mode
        self.buffer = ""

    def _input_key(self, key: str) -> None:
        if key == "esc":
            self.mode = InputMode.NONE
        elif key == "backspace":
            self.buffer = self.buffer[:-1]
        elif key == "enter":
            mode, text = self.mode, self.buffer.strip()
            self.mode = InputMode.NONE
            if not text:
                return
            log.debug("%s input %r", mode.value, text)
            if mode is InputMode.SEARCH:
                self._search(text)
            else:
                self._set_time(text)
        elif len(key) == 1:
            self.buffer += key
