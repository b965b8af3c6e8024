from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class GeneratedShape:
    """Render-ready vertex and edge coordinates for one polygon.

    A new shape is produced on every regeneration; consumers should
    discard whatever they drew for the previous shape before drawing
    this one.

    Attributes:
        vertices: Vertex positions, shape ``(n, 2)``.
        edges: Line segments, shape ``(n, 2, 2)``.  ``edges[i]`` is the
            ``(start, end)`` pair for the line leaving vertex ``i``.

    Raises:
        ValueError: If the arrays have the wrong shape or disagree on
            the number of vertices.
    """

    vertices: np.ndarray
    edges: np.ndarray

    def __post_init__(self) -> None:
        vertices = np.asarray(self.vertices, dtype=float)
        edges = np.asarray(self.edges, dtype=float)
        # Empty inputs such as ``[]`` carry no shape information.
        if vertices.size == 0:
            vertices = vertices.reshape(0, 2)
        if edges.size == 0:
            edges = edges.reshape(0, 2, 2)
        if vertices.ndim != 2 or vertices.shape[1] != 2:
            raise ValueError(
                f"vertices must have shape (n, 2), got {vertices.shape}"
            )
        if edges.ndim != 3 or edges.shape[1:] != (2, 2):
            raise ValueError(
                f"edges must have shape (n, 2, 2), got {edges.shape}"
            )
        if len(vertices) != len(edges):
            raise ValueError(
                f"expected one edge per vertex, got {len(vertices)} "
                f"vertices and {len(edges)} edges"
            )
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "edges", edges)

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def n_vertices(self) -> int:
        """Number of vertices (and edges) in the shape."""
        return len(self.vertices)
