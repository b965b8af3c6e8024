from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from shaper2d._constants import DEFAULT_POLYGON, DEFAULT_SCALE
from shaper2d.model.colour import Colour, normalise_colour

_COLOUR_FIELDS = frozenset({"colour", "background"})


@dataclass
class RenderStyle:
    """Visual style and start-up settings for drawing polygons.

    A default ``RenderStyle()`` gives white vertices and lines on a
    black 500 x 500 pixel canvas, opening on a pentagram.

    Attributes:
        colour: Colour of vertex markers, edges, and the notation text.
        background: Canvas colour.
        vertex_radius: Radius of the vertex markers in points.
        line_width: Width of the edges in points.
        font_size: Size of the notation text in points.
        font_family: Font family for the notation text.  A monospace
            family keeps the caret marker aligned with the characters
            below it.
        show_notation: Whether to draw the ``{n/k}`` notation below
            the polygon.
        figsize: Figure size in inches ``(width, height)``.
        dpi: Dots per inch.  Together with *figsize* this fixes the
            canvas size in pixels, which is also the coordinate range
            the polygon is drawn in.
        initial_scale: Circumradius of the polygon, in pixels, when a
            renderer is opened without an explicit scale.
        initial_polygon: Notation of the polygon shown when a renderer
            is opened without an explicit polygon.

    Raises:
        ValueError: If a size is not positive, a width is negative,
            or *initial_polygon* is not valid notation.
    """

    colour: Colour = "white"
    background: Colour = "black"
    vertex_radius: float = 3.0
    line_width: float = 1.0
    font_size: float = 25.0
    font_family: str = "monospace"
    show_notation: bool = True
    figsize: tuple[float, float] = (5.0, 5.0)
    dpi: int = 100
    initial_scale: float = DEFAULT_SCALE
    initial_polygon: str = DEFAULT_POLYGON

    def __post_init__(self) -> None:
        from shaper2d.parser import parse_polygon

        if self.vertex_radius < 0:
            raise ValueError(
                f"vertex_radius must be non-negative, got {self.vertex_radius}"
            )
        if self.line_width < 0:
            raise ValueError(
                f"line_width must be non-negative, got {self.line_width}"
            )
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if len(self.figsize) != 2 or min(self.figsize) <= 0:
            raise ValueError(
                f"figsize must be two positive numbers, got {self.figsize}"
            )
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        if self.initial_scale <= 0:
            raise ValueError(
                f"initial_scale must be positive, got {self.initial_scale}"
            )
        # Surfaces InvalidNotationError (a ValueError) for bad notation.
        parse_polygon(self.initial_polygon)

    @property
    def canvas_size(self) -> tuple[float, float]:
        """Canvas ``(width, height)`` in pixels."""
        width, height = self.figsize
        return (width * self.dpi, height * self.dpi)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        normalised to ``[r, g, b]`` lists.
        """
        d: dict = {}
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name in _COLOUR_FIELDS:
                if normalise_colour(val) != normalise_colour(f.default):
                    d[f.name] = list(normalise_colour(val))
            elif val != f.default:
                d[f.name] = list(val) if f.name == "figsize" else val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> RenderStyle:
        """Deserialise from a dictionary.

        Missing fields use their defaults and unknown keys are ignored.
        Colour and ``figsize`` lists are converted to tuples.
        """
        kwargs: dict = {}
        for f in dataclasses.fields(cls):
            if f.name in d:
                val = d[f.name]
                if isinstance(val, list):
                    val = tuple(val)
                kwargs[f.name] = val
        return cls(**kwargs)
