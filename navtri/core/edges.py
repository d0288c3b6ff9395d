"""Cavity-boundary extraction by duplicate-edge cancellation.

The edges of all triangles invalidated by one insertion are collected into a
single list. An edge shared by two of those triangles is interior to the
cavity and is dropped together with its twin; an edge seen once lies on the
cavity boundary and is kept. Both strategies below keep survivors in their
original list order and produce identical output.
"""
from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, List, Sequence

from .constants import EDGE_CANCELLATION_PAIRWISE, EDGE_CANCELLATION_HASHED
from .primitives import Edge

__all__ = [
    'cancel_shared_edges_pairwise',
    'cancel_shared_edges_hashed',
    'get_edge_cancellation',
]


def cancel_shared_edges_pairwise(edges: Sequence[Edge]) -> List[Edge]:
    """Reference O(k^2) scan: mark both members of every equal pair."""
    n = len(edges)
    remove = [False] * n
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            if edges[i] == edges[j]:
                remove[i] = True
                remove[j] = True
    return [e for e, r in zip(edges, remove) if not r]


def cancel_shared_edges_hashed(edges: Sequence[Edge]) -> List[Edge]:
    """O(k) variant keyed on the undirected endpoint pair."""
    counts = Counter(e.key for e in edges)
    return [e for e in edges if counts[e.key] == 1]


_STRATEGIES: Dict[str, Callable[[Sequence[Edge]], List[Edge]]] = {
    EDGE_CANCELLATION_PAIRWISE: cancel_shared_edges_pairwise,
    EDGE_CANCELLATION_HASHED: cancel_shared_edges_hashed,
}


def get_edge_cancellation(name: str) -> Callable[[Sequence[Edge]], List[Edge]]:
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown edge cancellation strategy {name!r}; "
                         f"expected one of {sorted(_STRATEGIES)}") from None
