"""Geometric primitives for planar Delaunay triangulation.

``Point`` carries a height coordinate ``z`` that travels with the vertex but
never takes part in a geometric decision: equality, hashing and every
spatial predicate look at ``(x, y)`` only, with exact comparison.

``Circumcircle`` follows IEEE float semantics for collinear vertices: the
center and squared radius become inf/NaN instead of raising, and a NaN
circle never reports containment.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

import numpy as np

__all__ = ['Point', 'Edge', 'Circumcircle', 'Triangle']


@dataclass(frozen=True, eq=False)
class Point:
    x: float
    y: float
    z: float = 0.0

    @classmethod
    def of(cls, obj) -> 'Point':
        """Coerce a Point, an (x, y) / (x, y, z) sequence or a numpy row."""
        if isinstance(obj, Point):
            return obj
        try:
            n = len(obj)
        except TypeError:
            raise ValueError(f"Cannot interpret {obj!r} as a point") from None
        if n == 2:
            return cls(float(obj[0]), float(obj[1]), 0.0)
        if n == 3:
            return cls(float(obj[0]), float(obj[1]), float(obj[2]))
        raise ValueError(f"Point needs 2 or 3 coordinates, got {n}")

    @property
    def xy(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def xyz(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True, eq=False)
class Edge:
    """Undirected segment; ``Edge(a, b) == Edge(b, a)``."""
    p0: Point
    p1: Point

    @property
    def key(self) -> FrozenSet[Tuple[float, float]]:
        return frozenset((self.p0.xy, self.p1.xy))

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return ((self.p0 == other.p0 and self.p1 == other.p1) or
                (self.p0 == other.p1 and self.p1 == other.p0))

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        return hash(self.key)


@dataclass(frozen=True)
class Circumcircle:
    x: float
    y: float
    radius_sq: float

    @classmethod
    def from_points(cls, p0: Point, p1: Point, p2: Point) -> 'Circumcircle':
        ax = p1.x - p0.x
        ay = p1.y - p0.y
        bx = p2.x - p0.x
        by = p2.y - p0.y
        m = p1.x * p1.x - p0.x * p0.x + p1.y * p1.y - p0.y * p0.y
        u = p2.x * p2.x - p0.x * p0.x + p2.y * p2.y - p0.y * p0.y
        # Collinear vertices make the determinant zero; let it go to inf/NaN
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            s = np.float64(1.0) / (2.0 * (ax * by - ay * bx))
            cx = ((p2.y - p0.y) * m + (p0.y - p1.y) * u) * s
            cy = ((p0.x - p2.x) * m + (p1.x - p0.x) * u) * s
            dx = p0.x - cx
            dy = p0.y - cy
            r2 = dx * dx + dy * dy
        return cls(float(cx), float(cy), float(r2))

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.radius_sq)

    def power(self, p: Point) -> float:
        """Squared distance from the center to ``p`` minus the squared radius."""
        dx = self.x - p.x
        dy = self.y - p.y
        return (dx * dx + dy * dy) - self.radius_sq

    def contains(self, p: Point, eps: float) -> bool:
        # NaN power compares False, so degenerate circles never contain anything
        return self.power(p) <= eps


@dataclass(frozen=True, eq=False)
class Triangle:
    p0: Point
    p1: Point
    p2: Point
    e0: Edge = field(init=False, repr=False)
    e1: Edge = field(init=False, repr=False)
    e2: Edge = field(init=False, repr=False)
    circle: Circumcircle = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'e0', Edge(self.p0, self.p1))
        object.__setattr__(self, 'e1', Edge(self.p1, self.p2))
        object.__setattr__(self, 'e2', Edge(self.p0, self.p2))
        object.__setattr__(self, 'circle', Circumcircle.from_points(self.p0, self.p1, self.p2))

    @property
    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.p0, self.p1, self.p2)

    @property
    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return (self.e0, self.e1, self.e2)

    def has_vertex(self, p: Point) -> bool:
        return self.p0 == p or self.p1 == p or self.p2 == p

    @property
    def is_degenerate(self) -> bool:
        return not self.circle.is_finite
