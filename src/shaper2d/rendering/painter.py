"""Drawing generated shapes into a matplotlib Axes.

Every call to :func:`draw_shape` returns a :class:`ShapeArtists`
handle owning exactly the artists it created.  Redrawing a shape means
removing the previous handle's artists and drawing the new shape; no
other artists on the axes are touched.
"""

from __future__ import annotations

from dataclasses import dataclass

from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PathCollection
from matplotlib.text import Text

from shaper2d.model import GeneratedShape, RenderStyle, normalise_colour

# Vertex markers sit above the edges that meet at them.
_EDGE_ZORDER = 1
_VERTEX_ZORDER = 2
_TEXT_ZORDER = 3

# Offset of the notation text from the bottom-left corner, in axes
# fraction units.
_TEXT_MARGIN = 0.02


@dataclass
class ShapeArtists:
    """The matplotlib artists drawn for one :class:`GeneratedShape`.

    Attributes:
        edges: One line segment per edge.
        vertices: One marker per vertex.
    """

    edges: LineCollection
    vertices: PathCollection

    def remove(self) -> None:
        """Remove these artists from their axes."""
        self.edges.remove()
        self.vertices.remove()


def _configure_axes(ax: Axes, style: RenderStyle) -> None:
    """Set up *ax* as a pixel-unit canvas centred on the origin.

    The data limits match the canvas size in pixels, so a polygon of
    scale 100 has a circumradius of 100 pixels.
    """
    width, height = style.canvas_size
    ax.set_xlim(-width / 2, width / 2)
    ax.set_ylim(-height / 2, height / 2)
    ax.set_aspect("equal")
    ax.set_facecolor(normalise_colour(style.background))
    ax.set_axis_off()


def draw_shape(ax: Axes, shape: GeneratedShape, style: RenderStyle) -> ShapeArtists:
    """Draw the vertices and edges of *shape* into *ax*.

    Args:
        ax: Target axes.
        shape: The shape to draw.
        style: Colours and sizes.

    Returns:
        A handle owning the new artists.
    """
    rgb = normalise_colour(style.colour)
    edges = LineCollection(
        list(shape.edges),
        colors=[rgb],
        linewidths=style.line_width,
        zorder=_EDGE_ZORDER,
    )
    ax.add_collection(edges, autolim=False)
    # Scatter sizes are marker areas in points squared.
    vertices = ax.scatter(
        shape.vertices[:, 0],
        shape.vertices[:, 1],
        s=(2.0 * style.vertex_radius) ** 2,
        color=[rgb],
        linewidths=0,
        zorder=_VERTEX_ZORDER,
    )
    return ShapeArtists(edges=edges, vertices=vertices)


def draw_notation(ax: Axes, label: str, style: RenderStyle) -> Text:
    """Draw the notation label in the bottom-left corner of *ax*."""
    return ax.text(
        _TEXT_MARGIN, _TEXT_MARGIN, label,
        transform=ax.transAxes,
        fontsize=style.font_size,
        fontfamily=style.font_family,
        color=normalise_colour(style.colour),
        horizontalalignment="left",
        verticalalignment="bottom",
        zorder=_TEXT_ZORDER,
    )
