"""Plane geometry on points, lines, circles and segments."""

from __future__ import annotations

import math
from dataclasses import dataclass

_ON_LINE_TOLERANCE = 1e-6
_IN_CIRCLE_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Point:
    """A point (or vector) in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    def cross_product(self, a: Point, b: Point) -> int:
        """Cross product of (a - self) and (b - self).

        Coordinate differences are truncated toward zero to integers first.
        """
        x1, x2 = int(a.x - self.x), int(b.x - self.x)
        y1, y2 = int(a.y - self.y), int(b.y - self.y)
        return x1 * y2 - y1 * x2


@dataclass(frozen=True)
class Line:
    """The line a*x + b*y + c = 0."""

    a: float
    b: float
    c: float

    @staticmethod
    def through(p: Point, q: Point) -> Line:
        """Return the line through two points."""
        return Line(q.y - p.y, p.x - q.x, q.x * p.y - p.x * q.y)

    def contains(self, point: Point) -> bool:
        """Whether the point lies on the line, within a small tolerance."""
        return abs(self.a * point.x + self.b * point.y + self.c) <= _ON_LINE_TOLERANCE


@dataclass(frozen=True)
class Circle:
    """A circle given by its center and radius."""

    center: Point
    radius: float

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside or on the circle."""
        return (
            distance_squared(self.center, point) - self.radius * self.radius
            < _IN_CIRCLE_TOLERANCE
        )


def dot(p: Point, q: Point) -> float:
    """Dot product of two vectors."""
    return p.x * q.x + p.y * q.y


def distance_squared(p: Point, q: Point) -> float:
    """Squared Euclidean distance between two points."""
    return (p.x - q.x) ** 2 + (p.y - q.y) ** 2


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance_squared(p, q))


def perpendicular(line: Line, point: Point) -> Line:
    """Return the line perpendicular to ``line`` passing through ``point``."""
    return Line(-line.b, line.a, line.b * point.x - line.a * point.y)


def intersection(l1: Line, l2: Line) -> Point:
    """Return the intersection point of two non-parallel lines."""
    if l1.a * l2.b - l1.b * l2.a == 0:
        raise ValueError("lines are parallel")
    if l1.a == 0:
        y = -l1.c / l1.b
        x = (l1.c * l2.b - l2.c * l1.b) / (l2.a * l1.b)
    else:
        y = (l1.c * l2.a - l1.a * l2.c) / (l1.a * l2.b - l1.b * l2.a)
        x = (-l1.c - l1.b * y) / l1.a
    return Point(x, y)


def projection(line: Line, point: Point) -> Point:
    """Orthogonal projection of a point onto a line."""
    return intersection(perpendicular(line, point), line)


def line_distance(line: Line, point: Point) -> float:
    """Distance from a point to a line."""
    return distance(projection(line, point), point)


def angle(a: Point, b: Point, c: Point) -> float:
    """Angle ABC at vertex ``b``, in radians."""
    side_a = distance(b, c)
    side_b = distance(a, c)
    side_c = distance(a, b)
    if side_a == 0 or side_c == 0:
        raise ValueError("angle is undefined when a point coincides with the vertex")
    cosine = (side_a**2 + side_c**2 - side_b**2) / (2 * side_a * side_c)
    return math.acos(max(-1.0, min(1.0, cosine)))


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return 180 * radians / math.pi


def closest_point_on_segment(start: Point, end: Point, point: Point) -> Point:
    """Point of the segment [start, end] closest to ``point``."""
    length_sq = distance_squared(start, end)
    if length_sq == 0:
        return start
    t = max(0.0, min(1.0, dot(point - start, end - start) / length_sq))
    return start + (end - start) * t


def segment_distance(start: Point, end: Point, point: Point) -> float:
    """Distance from a point to the segment [start, end]."""
    return distance(closest_point_on_segment(start, end, point), point)