"""Tests for Point / Edge / Circumcircle / Triangle value semantics."""
import math

import numpy as np
import pytest

from navtri.core.primitives import Point, Edge, Circumcircle, Triangle


def test_point_equality_ignores_height():
    assert Point(1.0, 2.0, 3.0) == Point(1.0, 2.0, -7.5)
    assert hash(Point(1.0, 2.0, 3.0)) == hash(Point(1.0, 2.0, 0.0))
    assert Point(1.0, 2.0) != Point(1.0, 2.0000001)


def test_point_of_accepts_sequences_and_arrays():
    assert Point.of((1, 2)).xyz == (1.0, 2.0, 0.0)
    assert Point.of([1, 2, 3]).xyz == (1.0, 2.0, 3.0)
    assert Point.of(np.array([4.5, 5.5, 6.5])).xyz == (4.5, 5.5, 6.5)
    p = Point(1, 2, 3)
    assert Point.of(p) is p


@pytest.mark.parametrize('bad', [(1,), (1, 2, 3, 4), 5.0])
def test_point_of_rejects_bad_arity(bad):
    with pytest.raises(ValueError):
        Point.of(bad)


def test_edge_is_undirected():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    assert Edge(a, b) == Edge(b, a)
    assert hash(Edge(a, b)) == hash(Edge(b, a))
    assert Edge(a, b).key == Edge(b, a).key
    assert Edge(a, b) != Edge(a, c)


def test_edge_equality_uses_xy_only():
    assert Edge(Point(0, 0, 1), Point(1, 1, 2)) == Edge(Point(1, 1, 9), Point(0, 0, 9))


def test_circumcircle_right_triangle():
    c = Circumcircle.from_points(Point(0, 0), Point(2, 0), Point(0, 2))
    assert c.x == pytest.approx(1.0)
    assert c.y == pytest.approx(1.0)
    assert c.radius_sq == pytest.approx(2.0)
    assert c.is_finite


def test_circumcircle_containment_tolerance():
    c = Circumcircle.from_points(Point(0, 0), Point(2, 0), Point(0, 2))
    eps = 1e-4
    assert c.contains(Point(1, 1), eps)
    # on the circle: power ~ 0 -> inside (ties go to invalidation)
    assert c.contains(Point(2, 2), eps)
    assert not c.contains(Point(3, 3), eps)


def test_circumcircle_contains_point_just_outside_within_eps():
    # centre (1, 1), r^2 = 2; power of the point is ~5e-5
    c = Circumcircle.from_points(Point(0, 0), Point(2, 0), Point(0, 2))
    p = Point(1 + math.sqrt(2 + 5e-5), 1)
    assert 0.0 < c.power(p) < 1e-4
    assert c.contains(p, 1e-4)
    assert not c.contains(p, 0.0)


def test_circumcircle_rejects_point_beyond_eps():
    c = Circumcircle.from_points(Point(0, 0), Point(2, 0), Point(0, 2))
    p = Point(1 + math.sqrt(2 + 2e-4), 1)
    assert c.power(p) > 1e-4
    assert not c.contains(p, 1e-4)


def test_circumcircle_power_equal_to_eps_is_inside():
    c = Circumcircle(0.0, 0.0, 1.0)
    p = Point(1.0, 0.5)
    power = c.power(p)
    assert power == 0.25
    assert c.contains(p, 0.25)
    assert not c.contains(p, float(np.nextafter(0.25, 0.0)))

    c = Circumcircle.from_points(Point(0, 0), Point(2, 0), Point(0, 2))
    p = Point(1 + math.sqrt(2 + 1e-4), 1)
    eps = c.power(p)
    assert c.contains(p, eps)
    assert not c.contains(p, float(np.nextafter(eps, 0.0)))


def test_circumcircle_collinear_is_nan_not_exception():
    c = Circumcircle.from_points(Point(0, 0), Point(1, 0), Point(2, 0))
    assert not c.is_finite
    assert math.isnan(c.radius_sq)
    # NaN comparisons are false: never contains anything
    assert not c.contains(Point(1, 0), 1e-4)
    assert not c.contains(Point(100, 100), 1e9)


def test_triangle_edges_and_circle():
    p0, p1, p2 = Point(0, 0, 1), Point(1, 0, 2), Point(0, 1, 3)
    t = Triangle(p0, p1, p2)
    assert t.e0 == Edge(p0, p1)
    assert t.e1 == Edge(p1, p2)
    assert t.e2 == Edge(p0, p2)
    assert t.edges == (t.e0, t.e1, t.e2)
    assert t.vertices == (p0, p1, p2)
    assert t.circle == Circumcircle.from_points(p0, p1, p2)
    assert t.has_vertex(Point(1, 0, 99))
    assert not t.has_vertex(Point(1, 1))
    assert not t.is_degenerate


def test_triangle_is_immutable():
    t = Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
    with pytest.raises(AttributeError):
        t.p0 = Point(5, 5)
