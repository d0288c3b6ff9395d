"""Per-call triangulation statistics and presentation utilities."""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class TriangulationStats:
    points: int = 0
    insertions: int = 0
    bad_triangles: int = 0
    max_cavity_triangles: int = 0
    cavity_edges: int = 0
    cancelled_edges: int = 0
    created_triangles: int = 0
    super_triangles_removed: int = 0
    degenerate_triangles: int = 0
    time_total: float = 0.0

    def record_insertion(self, n_bad: int, n_edges: int, n_boundary: int) -> None:
        self.insertions += 1
        self.bad_triangles += n_bad
        self.max_cavity_triangles = max(self.max_cavity_triangles, n_bad)
        self.cavity_edges += n_edges
        self.cancelled_edges += n_edges - n_boundary
        self.created_triangles += n_boundary

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['avg_cavity_triangles'] = (self.bad_triangles / self.insertions) if self.insertions else 0.0
        return d


def format_stats(stats: TriangulationStats) -> str:
    """Return a one-line human readable summary."""
    return (f"points={stats.points} insertions={stats.insertions} "
            f"created={stats.created_triangles} cancelled_edges={stats.cancelled_edges} "
            f"max_cavity={stats.max_cavity_triangles} super_removed={stats.super_triangles_removed} "
            f"degenerate={stats.degenerate_triangles} time_ms={stats.time_total * 1e3:.3f}")


__all__ = ['TriangulationStats', 'format_stats']
