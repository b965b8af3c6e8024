"""Static matplotlib renderer: :func:`render_polygon` entry point."""

from __future__ import annotations

import dataclasses
from dataclasses import replace
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from shaper2d.geometry import generate_shape
from shaper2d.model import PolygonSpec, RenderStyle, normalise_colour
from shaper2d.parser import parse_polygon
from shaper2d.rendering.painter import _configure_axes, draw_notation, draw_shape

_STYLE_FIELDS = frozenset(f.name for f in dataclasses.fields(RenderStyle))
_DEFAULT_RENDER_STYLE = RenderStyle()


def _resolve_style(style: RenderStyle | None, **kwargs: Any) -> RenderStyle:
    """Build a :class:`RenderStyle` from an optional base plus overrides.

    Any kwarg whose name matches a ``RenderStyle`` field replaces that
    field's value.  Passing ``None`` is treated as "not provided" and
    keeps the base value.

    Raises:
        TypeError: If a kwarg name does not match any ``RenderStyle`` field.
    """
    unknown = kwargs.keys() - _STYLE_FIELDS
    if unknown:
        raise TypeError(
            f"Unknown style keyword argument(s): {', '.join(sorted(unknown))}"
        )

    s = style if style is not None else replace(_DEFAULT_RENDER_STYLE)
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        s = replace(s, **overrides)
    return s


def _resolve_polygon(
    polygon: PolygonSpec | str | None, style: RenderStyle,
) -> PolygonSpec:
    if polygon is None:
        return parse_polygon(style.initial_polygon)
    if isinstance(polygon, str):
        return parse_polygon(polygon)
    return polygon


def render_polygon(
    polygon: PolygonSpec | str | None = None,
    output: str | Path | None = None,
    *,
    scale: float | None = None,
    style: RenderStyle | None = None,
    show: bool | None = None,
    **style_kwargs: object,
) -> Figure:
    """Render a star polygon as a static matplotlib figure.

    Example usage::

        render_polygon("7/3", "heptagram.png")
        render_polygon(PolygonSpec(12, 5), "star.svg", scale=200.0,
                       background="white", colour="black")

    Args:
        polygon: The polygon, as a :class:`PolygonSpec` or notation
            string.  ``None`` uses ``style.initial_polygon``.
        output: Optional file path to save the figure.  The format is
            inferred from the extension.
        scale: Circumradius in pixels.  ``None`` uses
            ``style.initial_scale``.
        style: A :class:`RenderStyle` controlling visual appearance.
        show: Whether to call ``plt.show()``.  Defaults to ``True``
            when *output* is ``None`` and ``False`` when saving.
        **style_kwargs: Any :class:`RenderStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure` object.

    Raises:
        InvalidNotationError: If *polygon* is a string that does not
            parse.
    """
    resolved = _resolve_style(style, **style_kwargs)
    spec = _resolve_polygon(polygon, resolved)
    shape = generate_shape(
        spec, scale if scale is not None else resolved.initial_scale,
    )

    fig, ax = plt.subplots(1, 1, figsize=resolved.figsize, dpi=resolved.dpi)
    fig.set_facecolor(normalise_colour(resolved.background))
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    _configure_axes(ax, resolved)
    draw_shape(ax, shape, resolved)
    if resolved.show_notation:
        draw_notation(ax, "\n{" + str(spec) + "}", resolved)

    if output is not None:
        fig.savefig(
            str(output), dpi=resolved.dpi, facecolor=fig.get_facecolor(),
        )
    if show is None:
        show = output is None
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig
