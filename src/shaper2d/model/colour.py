from __future__ import annotations

#: Any colour matplotlib understands for a polygon or its background:
#: a named or hex colour (``"white"``, ``"#202020"``), a grey level
#: between ``0.0`` (black) and ``1.0`` (white), or an ``(r, g, b)``
#: sequence of values in ``[0, 1]``.
Colour = str | float | tuple[float, float, float] | list[float]


def normalise_colour(colour: Colour) -> tuple[float, float, float]:
    """Resolve *colour* to the ``(r, g, b)`` tuple matplotlib draws with.

    Two spellings of the same colour normalise to the same tuple, which
    is how :meth:`RenderStyle.to_dict` recognises default colours.

    Raises:
        ValueError: If matplotlib cannot interpret *colour*.
    """
    from matplotlib.colors import to_rgb

    if isinstance(colour, bool):
        raise ValueError(f"Cannot interpret colour: {colour!r}")
    if isinstance(colour, (int, float)):
        # Matplotlib only reads grey levels from strings.
        colour = str(float(colour))
    try:
        r, g, b = to_rgb(colour)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot interpret colour: {colour!r}") from exc
    return (float(r), float(g), float(b))
