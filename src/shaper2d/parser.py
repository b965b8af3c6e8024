"""Parser for ``n/k`` star polygon notation.

The parser runs after every keystroke, so it has to cope with
half-typed input such as ``""``, ``"7/"`` or ``"7//"``.  Rather than a
bare failure it reports the index of the first character that cannot
be part of a valid polygon, which the editor uses to place a caret
under the offending text.
"""

from __future__ import annotations

import logging

from shaper2d._constants import DIVISOR, MAX_SECTION_VALUE
from shaper2d.model.polygon_spec import PolygonSpec

logger = logging.getLogger(__name__)


class InvalidNotationError(ValueError):
    """Polygon notation that cannot be parsed.

    Attributes:
        text: The rejected input.
        position: Zero-based index into *text* where parsing first
            becomes invalid.
    """

    def __init__(self, text: str, position: int) -> None:
        super().__init__(
            f"invalid polygon notation {text!r} at position {position}"
        )
        self.text = text
        self.position = position


def _parse_count(section: str) -> int | None:
    """Return the value of a run of ASCII digits, or ``None``.

    Signs, whitespace, underscores and non-ASCII digits are all
    rejected, as are values above :data:`MAX_SECTION_VALUE`.
    """
    if not (section.isascii() and section.isdigit()):
        return None
    value = int(section)
    if value > MAX_SECTION_VALUE:
        return None
    return value


def _reject(text: str, position: int) -> InvalidNotationError:
    logger.debug("rejected polygon notation %r at position %d", text, position)
    return InvalidNotationError(text, position)


def parse_polygon(text: str) -> PolygonSpec:
    """Parse polygon notation of the form ``n`` or ``n/k``.

    Error positions are deliberately coarse within a number:

    - A bad vertex count is always reported at index ``0``.
    - A bad step is reported just after the divisor.
    - A second divisor is reported at its own index.

    Example usage::

        parse_polygon("7/2")   # PolygonSpec(n=7, k=2)
        parse_polygon("12")    # PolygonSpec(n=12, k=1)
        parse_polygon("5//")   # raises, position 2

    A vertex count of zero is accepted; it describes an empty shape
    rather than malformed notation.

    Args:
        text: The notation to parse.

    Returns:
        The parsed :class:`PolygonSpec`.

    Raises:
        InvalidNotationError: If *text* is not valid notation.
    """
    sections = text.split(DIVISOR)

    if len(sections) == 1:
        n = _parse_count(text)
        if n is None:
            raise _reject(text, 0)
        return PolygonSpec(n)

    if len(sections) == 2:
        n = _parse_count(sections[0])
        if n is None:
            raise _reject(text, 0)
        k = _parse_count(sections[1])
        if k is None:
            raise _reject(text, text.index(DIVISOR) + 1)
        return PolygonSpec(n, k)

    second = text.index(DIVISOR, text.index(DIVISOR) + 1)
    raise _reject(text, second)


def format_polygon(spec: PolygonSpec) -> str:
    """Return the canonical notation for *spec*.

    The step is omitted when it is ``1``, so ``format_polygon`` is the
    inverse of :func:`parse_polygon`.
    """
    return str(spec)
