#!/usr/bin/env python3
"""Export navmesh polygons to an OBJ file.

Input is a JSON document holding a list of polygons, each a list of
[x, y, z] vertices, e.g. as dumped from an engine's navmesh tiles:

    [[[0, 0, 0], [1, 0, 0], [1, 1, 0]], ...]

Every polygon is Delaunay-triangulated on (x, y) and written as faces of a
single vertex table.
"""
from __future__ import annotations

import argparse
import json
import time

from navtri.core.config import NavMeshExportConfig, TriangulationConfig
from navtri.core.io import export_navmesh
from navtri.core.logging_utils import configure_logging, get_logger

logger = get_logger('navtri.scripts.export_navmesh')


def main():
    ap = argparse.ArgumentParser(description='Triangulate navmesh polygons and write an OBJ file.')
    ap.add_argument('polygons', help='JSON file with a list of polygons ([[x, y, z], ...])')
    ap.add_argument('out', help='Output .obj path')
    ap.add_argument('--winding', choices=['swap', 'keep'], default='swap')
    ap.add_argument('--no-remap-axes', action='store_true', help='Write vertices as (x, y, z) instead of (y, z, x)')
    ap.add_argument('--edge-cancellation', choices=['pairwise', 'hashed'], default='pairwise')
    ap.add_argument('--reject-degenerate', action='store_true')
    ap.add_argument('--log-level', default='INFO')
    args = ap.parse_args()

    configure_logging(args.log_level)
    with open(args.polygons, 'r') as f:
        polygons = json.load(f)

    cfg = NavMeshExportConfig(
        winding=args.winding,
        remap_axes=not args.no_remap_axes,
        triangulation=TriangulationConfig(
            edge_cancellation=args.edge_cancellation,
            reject_degenerate=args.reject_degenerate,
        ),
    )
    t0 = time.perf_counter()
    mesh = export_navmesh(polygons, args.out, cfg)
    logger.info("exported %d vertices / %d faces in %.1f ms",
                len(mesh.vertices), len(mesh.faces), (time.perf_counter() - t0) * 1e3)


if __name__ == '__main__':
    main()
