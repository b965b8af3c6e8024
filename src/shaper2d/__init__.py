"""shaper2d: live editing and drawing of ``{n/k}`` star polygons.

Type a compact notation such as ``5/2``, ``7/3`` or ``12`` and see the
star polygon drawn with matplotlib, updating as you type or scroll.

Example usage::

    from shaper2d import generate_shape, parse_polygon, render_polygon

    spec = parse_polygon("7/3")
    shape = generate_shape(spec, scale=100.0)
    render_polygon(spec, "heptagram.svg")
"""

from shaper2d.editor import EditAction, EditorState, KeyKind, classify_key
from shaper2d.geometry import generate_shape
from shaper2d.model import (
    Colour,
    GeneratedShape,
    PolygonSpec,
    RenderStyle,
    normalise_colour,
)
from shaper2d.parser import InvalidNotationError, format_polygon, parse_polygon
from shaper2d.rendering import render_interactive, render_polygon
from shaper2d.styles import load_styles, save_styles
from shaper2d.zoom import ScrollUnit, apply_scroll, normalise_scroll

__all__ = [
    "Colour",
    "EditAction",
    "EditorState",
    "GeneratedShape",
    "InvalidNotationError",
    "KeyKind",
    "PolygonSpec",
    "RenderStyle",
    "ScrollUnit",
    "apply_scroll",
    "classify_key",
    "format_polygon",
    "generate_shape",
    "load_styles",
    "normalise_colour",
    "normalise_scroll",
    "parse_polygon",
    "render_interactive",
    "render_polygon",
    "save_styles",
]
