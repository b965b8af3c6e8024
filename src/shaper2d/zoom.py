"""Scroll-to-zoom policy.

Zoom is exponential in the accumulated scroll: each line of scroll
multiplies the scale by :data:`ZOOM_BASE`, so the zoom feels the same
at every magnification.  The result is clamped to
[:data:`MIN_SCALE`, :data:`MAX_SCALE`] so the scale stays finite and
zooming back out always works.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import StrEnum

from shaper2d._constants import (
    MAX_SCALE,
    MIN_SCALE,
    PIXEL_SCROLL_FACTOR,
    ZOOM_BASE,
)

# Enough scroll to cross the whole scale range; larger exponents would
# only overflow before clamping.
_MAX_EXPONENT = math.log(MAX_SCALE / MIN_SCALE) / math.log(ZOOM_BASE)


class ScrollUnit(StrEnum):
    """Units in which a scroll device reports its deltas.

    Attributes:
        LINE: Discrete wheel notches (matplotlib ``event.step``).
        PIXEL: Fine-grained deltas from touchpads and smooth-scrolling
            mice.
    """

    LINE = "line"
    PIXEL = "pixel"


def normalise_scroll(delta: float, unit: ScrollUnit | str = ScrollUnit.LINE) -> float:
    """Convert a raw scroll delta to line units."""
    unit = ScrollUnit(unit)
    if unit is ScrollUnit.PIXEL:
        return delta * PIXEL_SCROLL_FACTOR
    return delta


def apply_scroll(scale: float, deltas: float | Iterable[float]) -> float:
    """Return *scale* after one tick of scrolling.

    Args:
        scale: Current scale; must be positive.
        deltas: A single delta or all deltas received in this tick, in
            line units (see :func:`normalise_scroll`).

    Returns:
        ``scale * ZOOM_BASE ** sum(deltas)``, clamped to
        ``[MIN_SCALE, MAX_SCALE]``.  When the deltas sum to exactly
        zero, *scale* itself is returned.

    Raises:
        ValueError: If *scale* is not positive.
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    if isinstance(deltas, Iterable):
        total = float(sum(deltas))
    else:
        total = float(deltas)
    if total == 0.0:
        return scale
    exponent = max(-_MAX_EXPONENT, min(_MAX_EXPONENT, total))
    return max(MIN_SCALE, min(MAX_SCALE, scale * ZOOM_BASE**exponent))
