from __future__ import annotations

from dataclasses import dataclass

from shaper2d._constants import DIVISOR


@dataclass(frozen=True)
class PolygonSpec:
    """A star polygon written in ``{n/k}`` notation.

    Vertex ``i`` is joined to vertex ``(i + k) % n``.  With ``k == 1``
    this is a convex regular polygon; larger steps give self-intersecting
    star polygons such as the pentagram ``{5/2}``.  The step need not be
    coprime with *n*.

    ``str(spec)`` gives the canonical notation, which omits the step
    when it is ``1``::

        >>> str(PolygonSpec(5, 2))
        '5/2'
        >>> str(PolygonSpec(12))
        '12'

    Attributes:
        n: Number of vertices.  Zero is allowed and yields an empty
            shape.
        k: Step between connected vertices.

    Raises:
        ValueError: If *n* or *k* is not a non-negative integer.
    """

    n: int
    k: int = 1

    def __post_init__(self) -> None:
        for name in ("n", "k"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(f"{name} must be an integer, got {val!r}")
            if val < 0:
                raise ValueError(f"{name} must be non-negative, got {val}")

    def __str__(self) -> str:
        if self.k == 1:
            return f"{self.n}"
        return f"{self.n}{DIVISOR}{self.k}"

    @classmethod
    def from_string(cls, text: str) -> PolygonSpec:
        """Parse polygon notation such as ``"7/3"``.

        See :func:`shaper2d.parser.parse_polygon`.

        Raises:
            InvalidNotationError: If *text* is not valid notation.
        """
        from shaper2d.parser import parse_polygon

        return parse_polygon(text)

    def target(self, index: int) -> int:
        """Return the index of the vertex that vertex *index* connects to."""
        if self.n == 0:
            raise ValueError("a polygon with no vertices has no targets")
        return (index + self.k) % self.n
