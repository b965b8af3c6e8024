"""Rendering: matplotlib output (static and interactive)."""

from shaper2d.rendering.interactive import render_interactive
from shaper2d.rendering.painter import ShapeArtists, draw_notation, draw_shape
from shaper2d.rendering.static import render_polygon

__all__ = [
    "ShapeArtists",
    "draw_notation",
    "draw_shape",
    "render_interactive",
    "render_polygon",
]
