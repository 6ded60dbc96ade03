"""Points, polygons and circles in the integer plane."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def magnitude(self) -> float:
        """Distance of the point from the origin."""
        return math.sqrt(self.x**2 + self.y**2)

    def dist(self, other: Point) -> float:
        """Distance between this point and ``other``."""
        return (self - other).magnitude()

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass
class Polygon:
    """A closed polygon given by its corner points in order."""

    points: list[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> None:
        """Append a corner point."""
        self.points.append(point)

    def left_most_point(self) -> Point | None:
        """Return the first point with the smallest x, or None if empty."""
        return min(self.points, key=lambda point: point.x, default=None)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def length(self) -> float:
        """Length of the closed outline through all points."""
        if not self.points:
            return 0.0
        following = self.points[1:] + self.points[:1]
        return sum(
            (a.dist(b) for a, b in zip(self.points, following)), 0.0
        )

    def perimeter(self) -> float:
        """Perimeter of the polygon."""
        return self.length()


@dataclass
class Circle:
    """A circle with an integer radius."""

    center: Point
    radius: int

    def circumference(self) -> float:
        """Circumference of the circle."""
        return 2.0 * math.pi * float(self.radius)

    def dist(self, other: Circle) -> float:
        """Distance between the centres of two circles."""
        return self.center.dist(other.center)

    def perimeter(self) -> float:
        """Perimeter of the circle."""
        return self.circumference()


Shape = Union[Polygon, Circle]


def perimeter(shape: Shape) -> float:
    """Return the perimeter of a polygon or circle."""
    if isinstance(shape, Polygon):
        return shape.length()
    if isinstance(shape, Circle):
        return shape.circumference()
    raise TypeError(f"not a shape: {shape!r}")