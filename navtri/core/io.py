"""Mesh file I/O: navmesh OBJ files and legacy VTK export.

OBJ layout written by ``write_obj``::

    v X Y Z          one line per vertex, %g formatting
    f a b c          one line per face, 1-based indices
    #VerticesCount: N
    #FaceCount: M
    #IndicdeOffset: K

The footer keys, including the offset key's spelling, are what existing
navmesh readers look for.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import numpy as np

from .logging_utils import get_logger
from .config import NavMeshExportConfig
from .navmesh import NavMesh, build_navmesh

logger = get_logger('navtri.io')

PathLike = Union[str, Path]

FOOTER_VERTICES = 'VerticesCount'
FOOTER_FACES = 'FaceCount'
FOOTER_OFFSET = 'IndicdeOffset'


def _export_axes(v):
    # engine (x, y, z) -> export (y, z, x)
    return (v[1], v[2], v[0])


def write_obj(filepath: PathLike, navmesh: NavMesh, remap_axes: bool = True,
              index_offset: int = 0) -> None:
    """Write ``navmesh`` as an OBJ-style vertex/face file with count footer."""
    with open(filepath, 'w') as f:
        for v in navmesh.vertices:
            x, y, z = _export_axes(v) if remap_axes else v
            f.write(f"v {x:g} {y:g} {z:g}\n")
        for a, b, c in navmesh.faces:
            f.write(f"f {a} {b} {c}\n")
        f.write(f"#{FOOTER_VERTICES}: {len(navmesh.vertices)}\n")
        f.write(f"#{FOOTER_FACES}: {len(navmesh.faces)}\n")
        f.write(f"#{FOOTER_OFFSET}: {index_offset}\n")
    logger.debug("wrote %s (%d vertices, %d faces)", filepath, len(navmesh.vertices), len(navmesh.faces))


def read_obj(filepath: PathLike) -> Tuple[np.ndarray, np.ndarray]:
    """Read ``v`` / ``f`` records; returns (vertices (N,3), faces (M,3) 1-based).

    Comments, blank lines and other record types are ignored. Face entries of
    the form ``i/t/n`` use the vertex index only.
    """
    verts = []
    faces = []
    with open(filepath, 'r') as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line or line.startswith('#'):
                continue
            parts = line.split()
            tag, fields = parts[0], parts[1:]
            try:
                if tag == 'v':
                    if len(fields) < 3:
                        raise ValueError("vertex needs 3 coordinates")
                    verts.append([float(t) for t in fields[:3]])
                elif tag == 'f':
                    if len(fields) != 3:
                        raise ValueError("only triangular faces are supported")
                    faces.append([int(t.split('/')[0]) for t in fields])
            except ValueError as e:
                raise ValueError(f"{filepath}:{lineno}: malformed '{tag}' record: {e}") from e
    return (np.asarray(verts, dtype=np.float64).reshape(-1, 3),
            np.asarray(faces, dtype=np.int64).reshape(-1, 3))


def write_vtk(filepath: PathLike,
              points: np.ndarray,
              triangles: np.ndarray,
              cell_data: Optional[Dict[str, np.ndarray]] = None,
              title: str = "navtri triangulation") -> None:
    """Write a triangle mesh to legacy ASCII VTK (unstructured grid).

    Parameters
    ----------
    points : (N, 2) or (N, 3) ndarray
        Vertex coordinates. If 2D, z=0 is added; otherwise z is the height.
    triangles : (M, 3) ndarray
        Triangle connectivity (0-indexed), e.g. from ``TriangulationResult.to_arrays``.
    cell_data : dict, optional
        Scalar fields per triangle, each an (M,) array.
    """
    points = np.asarray(points, dtype=np.float64)
    triangles = np.asarray(triangles)
    if points.ndim != 2 or points.shape[1] not in (2, 3):
        raise ValueError(f"points must be (N, 2) or (N, 3), got shape {points.shape}")
    if triangles.ndim != 2 or triangles.shape[1] != 3:
        raise ValueError(f"triangles must be (M, 3), got shape {triangles.shape}")
    if points.shape[1] == 2:
        points = np.column_stack([points, np.zeros(len(points))])

    n_pts, n_tris = len(points), len(triangles)
    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")
        f.write(f"POINTS {n_pts} double\n")
        for p in points:
            f.write(f"{p[0]:.16e} {p[1]:.16e} {p[2]:.16e}\n")
        f.write(f"\nCELLS {n_tris} {n_tris * 4}\n")
        for t in triangles:
            f.write(f"3 {t[0]} {t[1]} {t[2]}\n")
        # 5 = VTK_TRIANGLE
        f.write(f"\nCELL_TYPES {n_tris}\n")
        f.write("5\n" * n_tris)
        if cell_data:
            f.write(f"\nCELL_DATA {n_tris}\n")
            for name, data in cell_data.items():
                data = np.asarray(data, dtype=np.float64)
                if data.shape != (n_tris,):
                    raise ValueError(f"cell_data['{name}'] must have shape ({n_tris},), got {data.shape}")
                f.write(f"SCALARS {name} double 1\n")
                f.write("LOOKUP_TABLE default\n")
                for val in data:
                    f.write(f"{val:.16e}\n")


def export_navmesh(polygons, filepath: PathLike,
                   config: Optional[NavMeshExportConfig] = None) -> NavMesh:
    """Build a navmesh from ``polygons`` and write it to ``filepath``."""
    cfg = (config or NavMeshExportConfig()).validate()
    mesh = build_navmesh(polygons, cfg)
    write_obj(filepath, mesh, remap_axes=cfg.remap_axes, index_offset=cfg.index_offset)
    logger.info("saved navmesh export to %s", filepath)
    return mesh


__all__ = ['write_obj', 'read_obj', 'write_vtk', 'export_navmesh']
