"""
RenderPipeline — composites every layer onto one Canvas.

Layer order is fixed and is part of the contract: later layers win over
earlier ones wherever both write a cell.

    GRID                  background, put_if_free only
    CONSTELLATION_LINES   background, put_if_free only
    DEEP_SKY              markers, then M-number labels
    STARS
    STAR_LABELS
    PLANETS
    PLANET_LABELS
    CONSTELLATION_LABELS  always on top

Usage:
    pipeline = RenderPipeline()
    pipeline.render(canvas, scene, view, RenderOptions(show_grid=True))
    print(canvas.render())
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from ..catalogs.constellations import (
    CONSTELLATIONS,
    CONSTELLATION_LABELS,
    Constellation,
    ConstellationLabel,
)
from ..core.projection import ViewProjection
from ..core.types import ViewState
from ..universe.bodies import DeepSkyObject, Planet, Star
from . import layers
from .canvas import Canvas

log = logging.getLogger(__name__)


class Layer(Enum):
    GRID                 = "grid"
    CONSTELLATION_LINES  = "constellation_lines"
    DEEP_SKY             = "deep_sky"
    STARS                = "stars"
    STAR_LABELS          = "star_labels"
    PLANETS              = "planets"
    PLANET_LABELS        = "planet_labels"
    CONSTELLATION_LABELS = "constellation_labels"


LAYER_ORDER: Tuple[Layer, ...] = (
    Layer.GRID,
    Layer.CONSTELLATION_LINES,
    Layer.DEEP_SKY,
    Layer.STARS,
    Layer.STAR_LABELS,
    Layer.PLANETS,
    Layer.PLANET_LABELS,
    Layer.CONSTELLATION_LABELS,
)

LayerFn = Callable[[Canvas, "SkyScene", ViewProjection, "RenderOptions"], int]

_LAYER_FUNCS: Dict[Layer, LayerFn] = {
    Layer.GRID:                 layers.render_grid,
    Layer.CONSTELLATION_LINES:  layers.render_constellation_lines,
    Layer.DEEP_SKY:             layers.render_deep_sky,
    Layer.STARS:                layers.render_stars,
    Layer.STAR_LABELS:          layers.render_star_labels,
    Layer.PLANETS:              layers.render_planets,
    Layer.PLANET_LABELS:        layers.render_planet_labels,
    Layer.CONSTELLATION_LABELS: layers.render_constellation_labels,
}
if set(_LAYER_FUNCS) != set(Layer):
    raise RuntimeError("every Layer needs a render function")


@dataclass(slots=True)
class RenderOptions:
    """Layer toggles and the limiting magnitude (mirrors the viewer keys)."""
    magnitude_limit: float = 5.0
    show_grid: bool = False
    show_constellation_lines: bool = True
    show_constellation_labels: bool = True
    show_star_labels: bool = False
    show_deep_sky: bool = True
    show_planets: bool = True
    show_planet_labels: bool = True
    color_by_spectral_type: bool = True

    def enabled(self, layer: Layer) -> bool:
        return {
            Layer.GRID:                 self.show_grid,
            Layer.CONSTELLATION_LINES:  self.show_constellation_lines,
            Layer.DEEP_SKY:             self.show_deep_sky,
            Layer.STARS:                True,
            Layer.STAR_LABELS:          self.show_star_labels,
            Layer.PLANETS:              self.show_planets,
            Layer.PLANET_LABELS:        self.show_planets and self.show_planet_labels,
            Layer.CONSTELLATION_LABELS: self.show_constellation_labels,
        }[layer]


@dataclass(slots=True)
class SkyScene:
    """Everything a frame draws, with Alt/Az already computed for the instant."""
    stars: List[Star] = field(default_factory=list)
    deep_sky: List[DeepSkyObject] = field(default_factory=list)
    planets: List[Planet] = field(default_factory=list)
    constellations: Sequence[Constellation] = CONSTELLATIONS
    constellation_labels: Sequence[ConstellationLabel] = CONSTELLATION_LABELS


class RenderPipeline:

    def __init__(self, order: Sequence[Layer] = LAYER_ORDER):
        self.order = tuple(order)
        self.last_counts: Dict[Layer, int] = {}

    def render(self, canvas: Canvas, scene: SkyScene, view: ViewState,
               options: RenderOptions) -> Canvas:
        """Clear ``canvas`` and draw every enabled layer in order."""
        canvas.clear()
        proj = ViewProjection(view, canvas.width, canvas.height)
        self.last_counts = {}
        for layer in self.order:
            if not options.enabled(layer):
                continue
            self.last_counts[layer] = _LAYER_FUNCS[layer](canvas, scene, proj, options)
        if log.isEnabledFor(logging.DEBUG):
            log.debug("frame %dx%d fov=%.1f: %s", canvas.width, canvas.height, view.fov,
                      ", ".join(f"{k.value}={v}" for k, v in self.last_counts.items()))
        return canvas
