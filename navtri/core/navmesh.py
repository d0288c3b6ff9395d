"""Navigation-mesh polygons to a global vertex/face table.

Each polygon (a sequence of (x, y, z) vertices, typically one navmesh poly)
is triangulated on its own. Vertices are collected into a single table,
deduplicated by exact (x, y, z), and faces refer to it with 1-based indices
as the OBJ format expects.

With the default 'swap' winding a triangle (p0, p1, p2) is written as the
face (p0, p2, p1).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .config import NavMeshExportConfig
from .constants import MIN_POINTS, WINDING_SWAP
from .logging_utils import get_logger
from .primitives import Point
from .triangulation import Triangulator, as_points

logger = get_logger('navtri.navmesh')

Vertex = Tuple[float, float, float]
Face = Tuple[int, int, int]

__all__ = ['NavMesh', 'build_navmesh']


@dataclass
class NavMesh:
    vertices: List[Vertex] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    _index: Dict[Vertex, int] = field(init=False, default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        for i, v in enumerate(self.vertices):
            self._index.setdefault(tuple(v), i)

    def add_vertex(self, v: Vertex) -> int:
        """Append ``v`` unless already present; return its 0-based index."""
        idx = self._index.get(v)
        if idx is None:
            idx = len(self.vertices)
            self._index[v] = idx
            self.vertices.append(v)
        return idx

    def index_of(self, p: Point) -> int:
        """1-based index of ``p`` matched on (x, y, z); KeyError if absent."""
        try:
            return self._index[p.xyz] + 1
        except KeyError:
            raise KeyError(f"Vertex {p.xyz} not in navmesh vertex table") from None


def build_navmesh(polygons: Iterable[Iterable], config: Optional[NavMeshExportConfig] = None) -> NavMesh:
    """Triangulate every polygon and gather the faces into one ``NavMesh``."""
    cfg = (config or NavMeshExportConfig()).validate()
    engine = Triangulator(cfg.triangulation)
    mesh = NavMesh()
    skipped = 0
    n_polys = 0
    for pi, poly in enumerate(polygons):
        n_polys += 1
        pts = as_points(poly)
        for p in pts:
            mesh.add_vertex(p.xyz)
        if len(pts) < MIN_POINTS:
            logger.debug("polygon %d has %d vertices, skipping", pi, len(pts))
            skipped += 1
            continue
        result = engine.triangulate(pts)
        if result.is_empty:
            logger.warning("polygon %d (%d vertices) produced no triangles", pi, len(pts))
            continue
        for tri in result.triangles:
            a, b, c = (mesh.index_of(tri.p0), mesh.index_of(tri.p1), mesh.index_of(tri.p2))
            mesh.faces.append((a, c, b) if cfg.winding == WINDING_SWAP else (a, b, c))
    logger.info("navmesh: %d polygons (%d skipped) -> %d vertices, %d faces",
                n_polys, skipped, len(mesh.vertices), len(mesh.faces))
    return mesh
