"""
Rendering module — character-grid canvas, layers and pipeline.

Usage:
    from skyterm.rendering import Canvas, RenderPipeline, RenderOptions, SkyScene
    canvas = Canvas(120, 40)
    RenderPipeline().render(canvas, scene, view, RenderOptions())
"""

from .canvas import Canvas, Cell
from .pipeline import Layer, LAYER_ORDER, RenderOptions, RenderPipeline, SkyScene
from .braille import BrailleCanvas, render_stars_braille
from .layers import draw_line

__all__ = [
    "Canvas",
    "Cell",
    "Layer",
    "LAYER_ORDER",
    "RenderOptions",
    "RenderPipeline",
    "SkyScene",
    "BrailleCanvas",
    "render_stars_braille",
    "draw_line",
]
