"""Shared constants used across the parser, geometry, and rendering layers."""

DIVISOR: str = "/"
"""Separator between the vertex count and the step in ``n/k`` notation."""

MAX_SECTION_VALUE: int = 2**64 - 1
"""Largest value accepted for either number in the notation."""

DEFAULT_POLYGON: str = "5/2"
"""Notation shown when the editor opens (a pentagram)."""

DEFAULT_SCALE: float = 100.0
"""Circumradius, in display units, of a freshly opened polygon."""

ZOOM_BASE: float = 1.1
"""Multiplicative zoom per unit of scroll."""

PIXEL_SCROLL_FACTOR: float = 0.01
"""Conversion from pixel-based scroll deltas to line units."""

MIN_SCALE: float = 0.01
"""Smallest scale reachable by zooming out."""

MAX_SCALE: float = 1.0e6
"""Largest scale reachable by zooming in."""
