"""Post-hoc checks on a triangulation result.

These helpers are not used by the triangulator itself. They back the test
suite and let callers audit a result: empty-circumcircle violations,
super-triangle leakage, edge multiplicity and the expected triangle count
from the planar Euler relation.
"""
from __future__ import annotations

from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .constants import EPS_CIRCUMCIRCLE, MIN_POINTS
from .logging_utils import get_logger
from .triangulation import TriangulationResult, as_points

logger = get_logger('navtri.diagnostics')

__all__ = [
    'circumcircle_violations',
    'super_vertex_leaks',
    'edge_multiplicity',
    'expected_triangle_count',
]


def circumcircle_violations(result: TriangulationResult, points: Iterable,
                            eps: float = EPS_CIRCUMCIRCLE) -> List[Tuple[int, int]]:
    """Return (triangle_index, point_index) pairs breaking the Delaunay property.

    A pair is reported when the point is not a vertex of the triangle and lies
    inside its circumcircle by more than ``eps``: ``dist^2 - r^2 < -eps``.
    Degenerate (non-finite) circles are skipped.
    """
    pts = as_points(points)
    if not result.triangles or not pts:
        return []
    xy = np.array([p.xy for p in pts], dtype=np.float64)
    centers = np.array([(t.circle.x, t.circle.y) for t in result.triangles], dtype=np.float64)
    r2 = np.array([t.circle.radius_sq for t in result.triangles], dtype=np.float64)

    # (T, P) power of every point with respect to every circumcircle
    d = centers[:, None, :] - xy[None, :, :]
    power = np.einsum('tpk,tpk->tp', d, d) - r2[:, None]
    with np.errstate(invalid='ignore'):
        inside = power < -eps

    # vertices of a triangle are on its circle by construction
    vert_xy = np.array([[v.xy for v in t.vertices] for t in result.triangles], dtype=np.float64)
    is_vertex = np.any(np.all(vert_xy[:, :, None, :] == xy[None, None, :, :], axis=-1), axis=1)
    bad = np.argwhere(inside & ~is_vertex)
    if bad.size:
        logger.debug("found %d circumcircle violation(s)", len(bad))
    return [(int(t), int(p)) for t, p in bad]


def super_vertex_leaks(result: TriangulationResult) -> List[int]:
    """Indices of triangles that still touch a super-triangle corner."""
    if result.super_vertices is None:
        return []
    return [i for i, t in enumerate(result.triangles)
            if any(t.has_vertex(c) for c in result.super_vertices)]


def edge_multiplicity(result: TriangulationResult) -> Dict[FrozenSet[Tuple[float, float]], int]:
    """Occurrences of each undirected edge in the flattened edge list."""
    return dict(Counter(e.key for e in result.edges))


def expected_triangle_count(points: Iterable) -> int:
    """``2n - h - 2`` for distinct points, ``h`` counting every hull boundary point.

    Points are deduplicated by (x, y). Returns 0 for fewer than three distinct
    points. Raises ``ValueError`` when the points are collinear.
    """
    xy = np.unique(np.array([p.xy for p in as_points(points)], dtype=np.float64).reshape(-1, 2), axis=0)
    n = len(xy)
    if n < MIN_POINTS:
        return 0
    try:
        hull = ConvexHull(xy)
    except QhullError as e:
        raise ValueError(f"Cannot compute convex hull (collinear input?): {e}") from e
    # Hull vertices only; add points lying on hull edges
    h = len(hull.vertices)
    on_edge = 0
    for simplex in hull.simplices:
        a, b = xy[simplex[0]], xy[simplex[1]]
        ab = b - a
        for i in range(n):
            if i in simplex:
                continue
            ap = xy[i] - a
            cross = ab[0] * ap[1] - ab[1] * ap[0]
            if cross != 0.0:
                continue
            t = float(np.dot(ap, ab))
            if 0.0 < t < float(np.dot(ab, ab)):
                on_edge += 1
    return 2 * n - (h + on_edge) - 2
