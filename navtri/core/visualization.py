"""Plotting helpers for triangulation results."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.patches import Circle

from .logging_utils import get_logger
from .triangulation import TriangulationResult, as_points

logger = get_logger('navtri.viz')


def plot_triangulation(result: TriangulationResult, outname: str = "triangulation.png",
                       points=None, show_circles: bool = False, title=None):
    """Draw triangle edges (and optionally circumcircles) and save to ``outname``.

    Args:
        result: TriangulationResult to draw
        outname: output image path
        points: optional input points drawn as markers; defaults to the
            triangle vertices
        show_circles: overlay every finite circumcircle
        title: figure title; defaults to a triangle/point count summary
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    segs = [((e.p0.x, e.p0.y), (e.p1.x, e.p1.y)) for e in result.unique_edges()]
    if segs:
        ax.add_collection(LineCollection(segs, colors='steelblue', linewidths=0.9))

    if points is not None:
        xy = np.array([p.xy for p in as_points(points)], dtype=float).reshape(-1, 2)
    else:
        xy = np.array([v.xy for t in result.triangles for v in t.vertices], dtype=float).reshape(-1, 2)
    if len(xy):
        s = max(0.6, min(12.0, 200.0 / float(len(xy))))
        ax.scatter(xy[:, 0], xy[:, 1], s=s, color='black', zorder=3)

    if show_circles:
        for t in result.triangles:
            c = t.circle
            if not c.is_finite:
                continue
            ax.add_patch(Circle((c.x, c.y), np.sqrt(c.radius_sq), fill=False,
                                color=(0.85, 0.2, 0.2), alpha=0.35, linewidth=0.6))

    ax.set_title(title or f"{len(result.triangles)} triangles, {len(xy)} points")
    ax.set_aspect('equal')
    ax.autoscale_view()
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug("saved plot %s", outname)


__all__ = ['plot_triangulation']
