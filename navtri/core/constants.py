"""Central numerical tolerances and triangulation constants.

This module centralizes tiny numeric thresholds used across the codebase so
they can be tuned consistently and referenced without scattering literals.
"""
from __future__ import annotations

# Circumcircle containment: a point is "inside" when dist^2 - r^2 <= EPS.
# Absolute tolerance, independent of coordinate magnitude.
EPS_CIRCUMCIRCLE: float = 1e-4

# Super-triangle corners sit this many bounding-box extents from the center
SUPER_TRIANGLE_SCALE: float = 20.0

# Minimum number of points for a non-empty triangulation
MIN_POINTS: int = 3

# Edge cancellation strategy names
EDGE_CANCELLATION_PAIRWISE: str = 'pairwise'
EDGE_CANCELLATION_HASHED: str = 'hashed'

# Face winding conventions for navmesh export
WINDING_SWAP: str = 'swap'
WINDING_KEEP: str = 'keep'

__all__ = [
    'EPS_CIRCUMCIRCLE',
    'SUPER_TRIANGLE_SCALE',
    'MIN_POINTS',
    'EDGE_CANCELLATION_PAIRWISE',
    'EDGE_CANCELLATION_HASHED',
    'WINDING_SWAP',
    'WINDING_KEEP',
]
