"""
navtri Example: Basic Triangulation

This example demonstrates the core workflow:
1. Triangulate a small point set with heights
2. Inspect triangles, the flattened edge list and per-call stats
3. Check the Delaunay property
4. Visualize the result and export it to VTK
"""

import numpy as np

from navtri import triangulate, write_vtk
from navtri.core.diagnostics import circumcircle_violations, expected_triangle_count
from navtri.core.stats import format_stats
from navtri.core.visualization import plot_triangulation


def main():
    print("=" * 60)
    print("navtri Example: Basic Triangulation")
    print("=" * 60)

    print("\n[1] Triangulating a unit square with its center...")
    square = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.2), (1.0, 1.0, 0.4), (0.0, 1.0, 0.2), (0.5, 0.5, 1.0)]
    result = triangulate(square)
    print(f"  {len(result.triangles)} triangles, {len(result.edges)} edges "
          f"({len(result.unique_edges())} unique)")
    for t in result.triangles:
        print(f"    {t.p0.xyz} {t.p1.xyz} {t.p2.xyz}")

    print("\n[2] Triangulating 200 random points...")
    rng = np.random.default_rng(0)
    pts = np.hstack([rng.uniform(0.0, 100.0, size=(200, 2)), rng.uniform(0.0, 5.0, size=(200, 1))])
    result = triangulate(pts)
    print(f"  {format_stats(result.stats)}")
    print(f"  hull-based expected count: {expected_triangle_count(pts)}")

    print("\n[3] Checking empty-circumcircle property...")
    bad = circumcircle_violations(result, pts)
    print(f"  violations: {len(bad)}")

    print("\n[4] Saving plot and VTK file...")
    plot_triangulation(result, "basic_triangulation.png", points=pts)
    verts, tris = result.to_arrays()
    write_vtk("basic_triangulation.vtk", verts, tris, cell_data={'index': np.arange(len(tris))})
    print("  wrote basic_triangulation.png, basic_triangulation.vtk")


if __name__ == "__main__":
    main()
