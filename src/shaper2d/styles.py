"""Render style save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from shaper2d.model import RenderStyle

_VALID_SECTIONS = frozenset({"render_style"})


def save_styles(path: str | Path, render_style: RenderStyle) -> None:
    """Save a render style to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.

    Args:
        path: Destination file path.
        render_style: The style to save.
    """
    data = {"render_style": render_style.to_dict()}
    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_styles(path: str | Path) -> RenderStyle:
    """Load a render style from a JSON file.

    A file without a ``"render_style"`` section gives the default
    style.

    Args:
        path: Source file path.

    Returns:
        The loaded :class:`RenderStyle`.

    Raises:
        ValueError: If the file contains unknown top-level keys, or a
            style field has an invalid value.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )

    return RenderStyle.from_dict(data.get("render_style", {}))
