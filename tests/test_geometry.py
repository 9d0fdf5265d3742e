import math

import pytest

from algonotes.geometry import (
    Circle,
    Line,
    Point,
    angle,
    closest_point_on_segment,
    distance,
    distance_squared,
    dot,
    intersection,
    line_distance,
    perpendicular,
    projection,
    segment_distance,
    to_degrees,
)

A = Point(0, 0)
B = Point(1, 3)
C = Point(5, 0)


def test_point_arithmetic_round_trip():
    p, q = Point(1.5, -2), Point(3, 4)
    assert (p + q) - q == p
    assert p * 2 == p + p


def test_cross_product_antisymmetric_and_collinear():
    o, a, b = Point(1, 1), Point(4, 2), Point(2, 7)
    assert o.cross_product(a, b) == -o.cross_product(b, a)
    assert o.cross_product(Point(2, 2), Point(3, 3)) == 0


def test_cross_product_truncates_differences():
    o = Point(0, 0)
    assert o.cross_product(Point(1.9, 0), Point(0, 2.9)) == o.cross_product(
        Point(1, 0), Point(0, 2)
    )


def test_line_through_contains_both_points():
    line = Line.through(B, C)
    assert line.contains(B)
    assert line.contains(C)
    assert not line.contains(A)


def test_circle_contains():
    circle = Circle(Point(0, 0), 2)
    assert circle.contains(Point(2, 0))
    assert circle.contains(Point(1, 1))
    assert not circle.contains(Point(2, 1))


def test_distance_consistency():
    assert distance(B, C) ** 2 == pytest.approx(distance_squared(B, C))
    assert dot(B - A, B - A) == pytest.approx(distance_squared(A, B))


def test_perpendicular_passes_through_point_and_is_orthogonal():
    line = Line.through(A, B)
    perp = perpendicular(line, C)
    assert perp.contains(C)
    assert line.a * perp.a + line.b * perp.b == pytest.approx(0)


def test_intersection_lies_on_both_lines():
    l1, l2 = Line.through(A, B), Line.through(Point(0, 2), C)
    p = intersection(l1, l2)
    assert l1.contains(p)
    assert l2.contains(p)


def test_intersection_parallel_raises():
    with pytest.raises(ValueError):
        intersection(Line.through(A, C), Line.through(Point(0, 1), Point(5, 1)))


def test_projection_of_b_on_ac():
    h = projection(Line.through(A, C), B)
    assert h.x == pytest.approx(1)
    assert h.y == pytest.approx(0)


@pytest.mark.parametrize(
    "line_points, point", [((A, C), B), ((A, B), C), ((B, C), A)]
)
def test_projection_is_foot_of_perpendicular(line_points, point):
    start, end = line_points
    line = Line.through(start, end)
    foot = projection(line, point)
    assert line.contains(foot)
    assert dot(point - foot, end - start) == pytest.approx(0, abs=1e-9)
    expected = abs(line.a * point.x + line.b * point.y + line.c) / math.hypot(
        line.a, line.b
    )
    assert line_distance(line, point) == pytest.approx(expected)


def test_angles_of_triangle_sum_to_pi():
    total = angle(B, A, C) + angle(A, B, C) + angle(A, C, B)
    assert total == pytest.approx(math.pi)


def test_right_angle():
    assert angle(Point(1, 0), Point(0, 0), Point(0, 1)) == pytest.approx(math.pi / 2)


def test_angle_degenerate_raises():
    with pytest.raises(ValueError):
        angle(A, A, C)


def test_to_degrees_matches_math():
    for value in (0.0, 0.5, 1.0, math.pi):
        assert to_degrees(value) == pytest.approx(math.degrees(value))


def test_closest_point_clamps_to_endpoints():
    assert closest_point_on_segment(A, C, Point(-3, 4)) == A
    assert closest_point_on_segment(A, C, Point(9, 4)) == C
    assert closest_point_on_segment(B, B, C) == B


def test_segment_distance_inside_equals_line_distance():
    line = Line.through(A, C)
    assert segment_distance(A, C, B) == pytest.approx(line_distance(line, B))
    assert segment_distance(A, C, Point(8, 4)) == pytest.approx(distance(C, Point(8, 4)))