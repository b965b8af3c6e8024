"""Live notation editing: key classification and the editor state."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from shaper2d._constants import DEFAULT_POLYGON, DEFAULT_SCALE, DIVISOR
from shaper2d.geometry import generate_shape
from shaper2d.model import GeneratedShape, PolygonSpec
from shaper2d.parser import InvalidNotationError, parse_polygon
from shaper2d.zoom import apply_scroll

logger = logging.getLogger(__name__)


class KeyKind(StrEnum):
    """The kinds of key press that edit the notation buffer.

    Attributes:
        DIGIT: An ASCII digit, appended to the buffer.
        DIVISOR: The ``/`` separator, appended to the buffer.
        DELETE: Backspace, removes the last character.
    """

    DIGIT = "digit"
    DIVISOR = "divisor"
    DELETE = "delete"


@dataclass(frozen=True)
class EditAction:
    """A single edit to the notation buffer.

    Attributes:
        kind: What the key does.
        char: The character appended to the buffer.  Empty for
            :attr:`KeyKind.DELETE`.
    """

    kind: KeyKind
    char: str = ""


_DELETE_KEYS = frozenset({"backspace"})


def classify_key(key: str | None) -> EditAction | None:
    """Map a matplotlib key name to an edit, or ``None`` if it is not one."""
    if key is None:
        return None
    if len(key) == 1 and key.isascii() and key.isdigit():
        return EditAction(KeyKind.DIGIT, key)
    if key == DIVISOR:
        return EditAction(KeyKind.DIVISOR, key)
    if key in _DELETE_KEYS:
        return EditAction(KeyKind.DELETE)
    return None


def _default_polygon() -> PolygonSpec:
    return parse_polygon(DEFAULT_POLYGON)


@dataclass
class EditorState:
    """The current polygon, its notation buffer, and the zoom scale.

    The editor owns exactly one polygon at a time.  Every edit reparses
    the whole buffer: a valid buffer replaces :attr:`polygon`, an
    invalid one leaves it untouched and records where parsing failed.

    Example usage::

        state = EditorState()
        state.edit(EditAction(KeyKind.DELETE))      # "5/" -> invalid
        state.error_position                         # 2
        state.edit(EditAction(KeyKind.DIGIT, "3"))  # "5/3" -> True

    Attributes:
        polygon: The last successfully parsed polygon.
        scale: Circumradius used when generating the shape.
        buffer: Notation text as typed.  ``None`` starts from the
            canonical notation of *polygon*.
        error_position: Index of the first invalid character in
            *buffer*, or ``None`` if the buffer parses.

    Raises:
        ValueError: If *scale* is not positive.
    """

    polygon: PolygonSpec = field(default_factory=_default_polygon)
    scale: float = DEFAULT_SCALE
    buffer: str | None = None
    error_position: int | None = None

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        if self.buffer is None:
            self.buffer = str(self.polygon)
        self._reparse()

    def _reparse(self) -> bool:
        """Parse the buffer, replacing the polygon on success."""
        try:
            polygon = parse_polygon(self.buffer)
        except InvalidNotationError as exc:
            self.error_position = exc.position
            return False
        self.polygon = polygon
        self.error_position = None
        return True

    def edit(self, action: EditAction) -> bool:
        """Apply one edit and reparse the buffer.

        Returns:
            ``True`` if the buffer parsed and the shape must be
            regenerated; ``False`` if the previous polygon is kept.
        """
        if action.kind is KeyKind.DELETE:
            self.buffer = self.buffer[:-1]
        else:
            self.buffer += action.char
        replaced = self._reparse()
        if replaced:
            logger.debug("polygon replaced by %s", self.polygon)
        return replaced

    def zoom(self, deltas: float | Iterable[float]) -> bool:
        """Apply one tick of scroll deltas, in line units.

        Returns:
            ``True`` if the scale changed.  Deltas summing to zero
            never change the scale.
        """
        scale = apply_scroll(self.scale, deltas)
        if scale == self.scale:
            return False
        logger.debug("scale changed from %g to %g", self.scale, scale)
        self.scale = scale
        return True

    def shape(self) -> GeneratedShape:
        """Generate the shape for the current polygon and scale."""
        return generate_shape(self.polygon, self.scale)

    def display_text(self) -> str:
        """The buffer wrapped in braces, as shown to the user."""
        return "{" + self.buffer + "}"

    def caret_line(self) -> str:
        """A marker line with ``v`` above the first invalid character.

        The marker is offset by one extra column to account for the
        opening brace of :meth:`display_text`.  Returns an empty string
        when the buffer is valid.
        """
        if self.error_position is None:
            return ""
        return " " * (self.error_position + 1) + "v"

    def label(self) -> str:
        """Caret line and display text, one above the other."""
        return self.caret_line() + "\n" + self.display_text()
