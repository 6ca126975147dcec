"""Points, polygons, circles and their perimeters."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def magnitude(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.x**2 + self.y**2)

    def dist(self, other: Point) -> float:
        """Distance to another point."""
        return (self - other).magnitude()

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)


@dataclass
class Polygon:
    """A closed polygon given by its corner points in order."""

    points: list[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> None:
        """Append a corner point."""
        self.points.append(point)

    def left_most_point(self) -> Point | None:
        """The point with the smallest x, or None for an empty polygon."""
        return min(self.points, key=lambda p: p.x, default=None)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def length(self) -> float:
        """Length of the closed outline through all points."""
        if not self.points:
            return 0.0
        closed = self.points + self.points[:1]
        return sum(a.dist(b) for a, b in zip(closed, closed[1:]))


@dataclass
class Circle:
    """A circle given by its center and integer radius."""

    center: Point
    radius: int

    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    def dist(self, other: Circle) -> float:
        """Distance between the centers of two circles."""
        return self.center.dist(other.center)


Shape = Polygon | Circle


def perimeter(shape: Shape) -> float:
    """Perimeter of a polygon or circle."""
    if isinstance(shape, Polygon):
        return shape.length()
    if isinstance(shape, Circle):
        return shape.circumference()
    raise TypeError(f"not a shape: {shape!r}")