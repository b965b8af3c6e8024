"""Core data model for shaper2d: polygon notation, shapes, and style.

Everything is re-exported here so that ``from shaper2d.model import
PolygonSpec`` works regardless of which submodule defines it.
"""

from shaper2d.model.colour import Colour, normalise_colour
from shaper2d.model.polygon_spec import PolygonSpec
from shaper2d.model.render_style import RenderStyle
from shaper2d.model.shape import GeneratedShape

__all__ = [
    "Colour",
    "GeneratedShape",
    "PolygonSpec",
    "RenderStyle",
    "normalise_colour",
]
