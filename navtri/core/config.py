"""Configuration objects for triangulation and navmesh export."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from .constants import (
    EPS_CIRCUMCIRCLE, SUPER_TRIANGLE_SCALE,
    EDGE_CANCELLATION_PAIRWISE, EDGE_CANCELLATION_HASHED,
    WINDING_SWAP, WINDING_KEEP,
)

EDGE_CANCELLATION_CHOICES = (EDGE_CANCELLATION_PAIRWISE, EDGE_CANCELLATION_HASHED)
WINDING_CHOICES = (WINDING_SWAP, WINDING_KEEP)


@dataclass
class TriangulationConfig:
    """Tunables for a single triangulation call.

    Attributes
    ----------
    eps : float
        Circumcircle containment tolerance applied to ``dist^2 - r^2``.
    super_triangle_scale : float
        Distance of the super-triangle corners from the bounding-box center,
        in units of the larger box extent.
    edge_cancellation : str
        ``'pairwise'`` (quadratic reference scan) or ``'hashed'`` (edge-count
        map). Both produce identical output.
    reject_degenerate : bool
        Raise ``DegenerateInputError`` instead of keeping triangles whose
        circumcircle is not finite (collinear vertices).
    collect_stats : bool
        Attach per-call ``TriangulationStats`` to the result.
    """
    eps: float = EPS_CIRCUMCIRCLE
    super_triangle_scale: float = SUPER_TRIANGLE_SCALE
    edge_cancellation: str = EDGE_CANCELLATION_PAIRWISE
    reject_degenerate: bool = False
    collect_stats: bool = True

    def validate(self) -> 'TriangulationConfig':
        if not math.isfinite(self.eps) or self.eps < 0:
            raise ValueError(f"eps must be a finite non-negative number, got {self.eps!r}")
        if not math.isfinite(self.super_triangle_scale) or self.super_triangle_scale <= 1.0:
            raise ValueError(f"super_triangle_scale must be finite and > 1, got {self.super_triangle_scale!r}")
        if self.edge_cancellation not in EDGE_CANCELLATION_CHOICES:
            raise ValueError(
                f"Unknown edge_cancellation {self.edge_cancellation!r}; "
                f"expected one of {EDGE_CANCELLATION_CHOICES}")
        return self


@dataclass
class NavMeshExportConfig:
    """Options for turning navmesh polygons into an OBJ-style face table.

    - winding: 'swap' writes faces as (p0, p2, p1); 'keep' as (p0, p1, p2).
    - remap_axes: write vertices as (y, z, x) of the source coordinates.
    - index_offset: value recorded in the file footer.
    """
    winding: str = WINDING_SWAP
    remap_axes: bool = True
    index_offset: int = 0
    triangulation: TriangulationConfig = field(default_factory=TriangulationConfig)

    def validate(self) -> 'NavMeshExportConfig':
        if self.winding not in WINDING_CHOICES:
            raise ValueError(f"Unknown winding {self.winding!r}; expected one of {WINDING_CHOICES}")
        self.triangulation.validate()
        return self


__all__ = [
    'TriangulationConfig', 'NavMeshExportConfig',
    'EDGE_CANCELLATION_CHOICES', 'WINDING_CHOICES',
]
