"""Vertex and edge geometry for ``{n/k}`` star polygons."""

from __future__ import annotations

import numpy as np

from shaper2d.model import GeneratedShape, PolygonSpec


def rotation_matrix(angle: float) -> np.ndarray:
    """2D rotation matrix for *angle* radians (anticlockwise)."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, -s],
        [s,  c],
    ])


def generate_shape(spec: PolygonSpec, scale: float = 1.0) -> GeneratedShape:
    """Compute vertex positions and edges for a star polygon.

    Vertices lie on a circle of radius *scale* about the origin, the
    first at ``(scale, 0)`` and the rest following anticlockwise.  The
    edge leaving vertex ``i`` ends at vertex ``(i + k) % n``, so
    ``{5/1}`` is a pentagon and ``{5/2}`` a pentagram.

    Each vertex is obtained by rotating the previous one.  The end of
    each edge is the current vertex rotated by the connector angle
    ``2*pi*k/n``.

    Args:
        spec: The polygon to generate.
        scale: Circumradius; every coordinate is multiplied by it.

    Returns:
        A :class:`GeneratedShape` with ``spec.n`` vertices and edges.
        A zero-vertex polygon gives an empty shape.  A one-vertex
        polygon gives a single vertex and a zero-length edge.

    Raises:
        ValueError: If *scale* is not positive.
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    n = spec.n
    if n == 0:
        return GeneratedShape(
            vertices=np.empty((0, 2)), edges=np.empty((0, 2, 2)),
        )

    vertex_step = rotation_matrix(2.0 * np.pi / n)
    connector = rotation_matrix(2.0 * np.pi * spec.k / n)

    vertices = np.empty((n, 2))
    ends = np.empty((n, 2))
    point = np.array([1.0, 0.0])
    for i in range(n):
        vertices[i] = point
        ends[i] = connector @ point
        point = vertex_step @ point

    vertices *= scale
    ends *= scale
    return GeneratedShape(
        vertices=vertices,
        edges=np.stack([vertices, ends], axis=1),
    )
