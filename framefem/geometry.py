"""Plane geometry primitives used by cross-section profiles and frame elements."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Polygon:
    """A polygon given by its corner points, in order."""

    points: list[Point] = field(default_factory=list)

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Yield consecutive point pairs, wrapping from the last point to the first."""
        if not self.points:
            return
        yield from zip(self.points, self.points[1:] + self.points[:1])


@dataclass
class Rectangle:
    """An axis-aligned rectangle with its lower left corner at (x, y)."""

    x: float
    y: float
    width: float
    height: float


def bounding_box(polygon: Polygon) -> Rectangle:
    """Return the axis-aligned bounding box of the polygon."""
    if not polygon.points:
        raise ValueError("cannot compute the bounding box of an empty polygon")
    xs = [p.x for p in polygon.points]
    ys = [p.y for p in polygon.points]
    min_x, min_y = min(xs), min(ys)
    return Rectangle(min_x, min_y, max(xs) - min_x, max(ys) - min_y)


def _signed_area(polygon: Polygon) -> float:
    return 0.5 * sum(a.x * b.y - b.x * a.y for a, b in polygon.edges())


def calculate_area(polygon: Polygon) -> float:
    """Return the area of the polygon, independent of the point order."""
    return abs(_signed_area(polygon))


def centroid_from_polygon(polygon: Polygon) -> Point:
    """Return the centroid of the polygon."""
    area = _signed_area(polygon)
    if area == 0.0:
        raise ValueError("cannot compute the centroid of a polygon with no area")
    cx = 0.0
    cy = 0.0
    for a, b in polygon.edges():
        cross = a.x * b.y - b.x * a.y
        cx += (a.x + b.x) * cross
        cy += (a.y + b.y) * cross
    return Point(cx / (6.0 * area), cy / (6.0 * area))


def calc_length_between_points(start: Point, end: Point) -> float:
    """Return the distance between two points."""
    return math.hypot(end.x - start.x, end.y - start.y)


def get_angle_from_points(start: Point, end: Point) -> float:
    """Return the direction from start to end in degrees, in the range [0, 360)."""
    angle = math.degrees(math.atan2(end.y - start.y, end.x - start.x))
    return angle % 360.0


def rotate_point(center: Point, point: Point, angle: float) -> Point:
    """Rotate the point counter-clockwise about the center by the angle in degrees."""
    radians = math.radians(angle)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(
        center.x + dx * cos_a - dy * sin_a,
        center.y + dx * sin_a + dy * cos_a,
    )