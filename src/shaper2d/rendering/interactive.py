"""Interactive matplotlib editor with keyboard and scroll controls."""

from __future__ import annotations

import logging

import matplotlib.pyplot as plt

from shaper2d.editor import EditorState, classify_key
from shaper2d.model import PolygonSpec, RenderStyle, normalise_colour
from shaper2d.rendering.painter import _configure_axes, draw_notation, draw_shape
from shaper2d.rendering.static import _resolve_polygon, _resolve_style
from shaper2d.zoom import ScrollUnit, normalise_scroll

logger = logging.getLogger(__name__)

_WINDOW_TITLE = "Shaper 2D"


def _apply_key(key: str | None, state: EditorState) -> str:
    """Apply a key press to *state*.

    Returns a string indicating the required redraw kind:

    - ``"shape"`` — the polygon was replaced; regenerate and redraw.
    - ``"text"`` — the buffer changed but does not parse; only the
      notation label needs updating.
    - ``"none"`` — not an editing key, nothing to do.
    """
    action = classify_key(key)
    if action is None:
        return "none"
    return "shape" if state.edit(action) else "text"


def _apply_scroll(step: float, state: EditorState) -> str:
    """Apply a scroll step, returning ``"shape"`` or ``"none"``."""
    if state.zoom(normalise_scroll(step, ScrollUnit.LINE)):
        return "shape"
    return "none"


def render_interactive(
    polygon: PolygonSpec | str | None = None,
    *,
    scale: float | None = None,
    style: RenderStyle | None = None,
    **style_kwargs: object,
) -> EditorState:
    """Open a window for editing a star polygon live.

    **Keyboard:**

    - **0**-**9** and **/** append to the notation.
    - **Backspace** deletes the last character.

    After each key press the notation is reparsed.  Valid notation
    redraws the polygon at once; invalid notation keeps the last valid
    polygon on screen and marks the offending character with a ``v``
    above it.

    **Mouse:**

    - **Scroll** to zoom in/out.

    When the window is closed the final :class:`EditorState` is
    returned, so the polygon can be reused::

        state = render_interactive("7/2")
        render_polygon(state.polygon, "final.png", scale=state.scale)

    Args:
        polygon: Starting polygon, as a :class:`PolygonSpec` or notation
            string.  ``None`` uses ``style.initial_polygon``.
        scale: Starting circumradius in pixels.  ``None`` uses
            ``style.initial_scale``.
        style: A :class:`RenderStyle` controlling visual appearance.
        **style_kwargs: Any :class:`RenderStyle` field name as a
            keyword argument.  Unknown names raise :class:`TypeError`.

    Returns:
        The editor state at the time the window was closed.
    """
    resolved = _resolve_style(style, **style_kwargs)
    state = EditorState(
        polygon=_resolve_polygon(polygon, resolved),
        scale=scale if scale is not None else resolved.initial_scale,
    )

    fig, ax = plt.subplots(1, 1, figsize=resolved.figsize, dpi=resolved.dpi)
    fig.set_facecolor(normalise_colour(resolved.background))
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    _configure_axes(ax, resolved)

    artists = {"shape": draw_shape(ax, state.shape(), resolved)}
    label = draw_notation(ax, state.label(), resolved)
    label.set_visible(resolved.show_notation)

    # ---- Redraw helpers ----

    def _redraw_shape() -> None:
        """Replace the previous shape's artists with the current shape."""
        shape = state.shape()
        artists["shape"].remove()
        artists["shape"] = draw_shape(ax, shape, resolved)
        logger.debug("redrew %s at scale %g", state.polygon, state.scale)

    def _refresh(kind: str) -> None:
        if kind == "none":
            return
        if kind == "shape":
            _redraw_shape()
        label.set_text(state.label())
        fig.canvas.draw_idle()

    # ---- Event handlers ----

    def on_key_press(event):
        _refresh(_apply_key(event.key, state))

    def on_scroll(event):
        _refresh(_apply_scroll(event.step, state))

    fig.canvas.mpl_connect("key_press_event", on_key_press)
    fig.canvas.mpl_connect("scroll_event", on_scroll)

    # Disconnect matplotlib's default key handler, which binds several
    # editing keys (e.g. backspace for "back" in the navigation history).
    manager = fig.canvas.manager
    if manager is not None:
        manager.set_window_title(_WINDOW_TITLE)
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            fig.canvas.mpl_disconnect(handler_id)

    plt.show()
    return state
