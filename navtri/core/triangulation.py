"""Incremental (Bowyer-Watson) 2D Delaunay triangulation.

Points are inserted one at a time into a triangulation seeded with a large
super-triangle. Each insertion removes every triangle whose circumcircle
contains the new point, then re-fans the cavity boundary around it. After all
insertions, triangles touching a super-triangle corner are discarded.

Heights (``z``) ride along with the vertices and are never interpolated: a
triangle created around an inserted point takes that point as-is.
"""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import TriangulationConfig
from .constants import MIN_POINTS
from .edges import get_edge_cancellation
from .logging_utils import get_logger
from .primitives import Point, Edge, Triangle
from .stats import TriangulationStats, format_stats

logger = get_logger('navtri.triangulation')

__all__ = [
    'TriangulationResult',
    'DegenerateInputError',
    'Triangulator',
    'triangulate',
    'triangulate_many',
    'as_points',
    'super_triangle',
]


class DegenerateInputError(ValueError):
    """Raised when input cannot yield a non-degenerate triangulation.

    Either a triangle with collinear vertices would enter the mesh, or three
    or more points produced no triangle at all.
    """

    def __init__(self, message: str, triangle: Optional[Triangle] = None):
        super().__init__(message)
        self.triangle = triangle


@dataclass
class TriangulationResult:
    """Surviving triangles plus their flattened, non-deduplicated edges."""
    triangles: List[Triangle] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    super_vertices: Optional[Tuple[Point, Point, Point]] = None
    stats: Optional[TriangulationStats] = None

    @property
    def is_empty(self) -> bool:
        return not self.triangles

    def __len__(self) -> int:
        return len(self.triangles)

    def unique_edges(self) -> List[Edge]:
        """Edges with duplicates removed, first occurrence order."""
        seen = set()
        out = []
        for e in self.edges:
            k = e.key
            if k in seen:
                continue
            seen.add(k)
            out.append(e)
        return out

    def degenerate_triangles(self) -> List[Triangle]:
        return [t for t in self.triangles if t.is_degenerate]

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return (vertices (N,3) float, triangles (M,3) int, 0-based).

        Vertices are numbered in first-seen order, matched by exact (x, y, z).
        """
        index = {}
        verts = []
        tris = np.empty((len(self.triangles), 3), dtype=np.int64)
        for ti, t in enumerate(self.triangles):
            for k, p in enumerate(t.vertices):
                key = p.xyz
                vi = index.get(key)
                if vi is None:
                    vi = len(verts)
                    index[key] = vi
                    verts.append(key)
                tris[ti, k] = vi
        points = np.asarray(verts, dtype=np.float64).reshape(-1, 3)
        return points, tris


def as_points(points: Iterable) -> List[Point]:
    """Coerce an iterable of Points / coordinate sequences / an (N,2|3) array."""
    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] not in (2, 3):
            raise ValueError(f"points array must be (N, 2) or (N, 3), got shape {points.shape}")
    return [Point.of(p) for p in points]


def super_triangle(points: Sequence[Point], scale: float) -> Tuple[Point, Point, Point]:
    """Corners of a triangle enclosing the (x, y) bounding box of ``points``.

    Corners take ``z`` from the first point; it has no geometric role.
    """
    xmin = xmax = points[0].x
    ymin = ymax = points[0].y
    for p in points:
        xmin = min(xmin, p.x)
        xmax = max(xmax, p.x)
        ymin = min(ymin, p.y)
        ymax = max(ymax, p.y)
    dmax = max(xmax - xmin, ymax - ymin)
    midx = (xmin + xmax) / 2.0
    midy = (ymin + ymax) / 2.0
    z = points[0].z
    return (
        Point(midx - scale * dmax, midy - dmax, z),
        Point(midx, midy + scale * dmax, z),
        Point(midx + scale * dmax, midy - dmax, z),
    )


class Triangulator:
    """Stateless triangulation engine bound to a ``TriangulationConfig``.

    A single instance may be shared between threads; every call builds its
    own working set.
    """

    def __init__(self, config: Optional[TriangulationConfig] = None):
        self.config = (config or TriangulationConfig()).validate()
        self._cancel = get_edge_cancellation(self.config.edge_cancellation)

    def triangulate(self, points: Iterable) -> TriangulationResult:
        pts = as_points(points)
        stats = TriangulationStats(points=len(pts)) if self.config.collect_stats else None
        if len(pts) < MIN_POINTS:
            logger.debug("triangulate: %d point(s), nothing to triangulate", len(pts))
            return TriangulationResult(stats=stats)

        t0 = time.perf_counter()
        corners = super_triangle(pts, self.config.super_triangle_scale)
        triangles = [Triangle(*corners)]
        for pt in pts:
            triangles = self._insert(triangles, pt, stats)

        kept = [t for t in triangles if not any(t.has_vertex(c) for c in corners)]
        if self.config.reject_degenerate and not kept:
            logger.warning("%d points produced no triangles", len(pts))
            raise DegenerateInputError(
                f"{len(pts)} points produced no triangles (collinear or coincident input)")
        edges = []
        for t in kept:
            edges.extend(t.edges)

        if stats is not None:
            stats.super_triangles_removed = len(triangles) - len(kept)
            stats.degenerate_triangles = sum(1 for t in kept if t.is_degenerate)
            stats.time_total = time.perf_counter() - t0
            logger.debug("triangulate: %s", format_stats(stats))
        return TriangulationResult(triangles=kept, edges=edges,
                                   super_vertices=corners, stats=stats)

    def _insert(self, triangles: List[Triangle], pt: Point,
                stats: Optional[TriangulationStats]) -> List[Triangle]:
        eps = self.config.eps
        cavity_edges: List[Edge] = []
        good: List[Triangle] = []
        n_bad = 0
        for tri in triangles:
            if tri.circle.contains(pt, eps):
                cavity_edges.extend(tri.edges)
                n_bad += 1
            else:
                good.append(tri)

        boundary = self._cancel(cavity_edges)
        for e in boundary:
            tri = Triangle(e.p0, e.p1, pt)
            if self.config.reject_degenerate and tri.is_degenerate:
                logger.warning("degenerate triangle at insertion of (%g, %g)", pt.x, pt.y)
                raise DegenerateInputError(
                    f"Collinear triangle formed when inserting point ({pt.x!r}, {pt.y!r})",
                    triangle=tri)
            good.append(tri)

        if stats is not None:
            stats.record_insertion(n_bad, len(cavity_edges), len(boundary))
        return good


def triangulate(points: Iterable, config: Optional[TriangulationConfig] = None) -> TriangulationResult:
    """Delaunay-triangulate ``points`` (Points or (x, y[, z]) sequences).

    Fewer than three points yields an empty result.
    """
    return Triangulator(config).triangulate(points)


def triangulate_many(polygons: Iterable[Iterable], config: Optional[TriangulationConfig] = None,
                     max_workers: Optional[int] = None) -> List[TriangulationResult]:
    """Triangulate independent point sets, returning results in input order.

    Runs on a thread pool when ``max_workers`` > 1; calls share no state.
    """
    engine = Triangulator(config)
    polys = [list(p) for p in polygons]
    if not max_workers or max_workers <= 1 or len(polys) <= 1:
        return [engine.triangulate(p) for p in polys]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(engine.triangulate, polys))
