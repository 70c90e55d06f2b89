"""Plane geometry: points, paths, and types built on points."""

import itertools
import math
from dataclasses import dataclass
from typing import Iterable


@dataclass
class Point:
    """A point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, q: "Point") -> float:
        """Return the distance from this point to ``q``."""
        return math.hypot(q.x - self.x, q.y - self.y)

    def scale_by(self, factor: float) -> None:
        """Scale both coordinates by ``factor`` in place."""
        self.x *= factor
        self.y *= factor


def distance(p: Point, q: Point) -> float:
    """Return the distance between ``p`` and ``q``."""
    return math.hypot(q.x - p.x, q.y - p.y)


class Path(list):
    """A journey connecting points with straight lines."""

    def __init__(self, points: Iterable[Point] = ()) -> None:
        super().__init__(points)

    def distance(self) -> float:
        """Return the distance travelled along the path."""
        return sum(a.distance(b) for a, b in itertools.pairwise(self))


@dataclass
class ColoredPoint(Point):
    """A point with an RGBA colour."""

    color: tuple[int, int, int, int] = (0, 0, 0, 0)

    @property
    def point(self) -> Point:
        """The plain point, without its colour."""
        return Point(self.x, self.y)


@dataclass
class Circle(Point):
    """A circle around its centre point."""

    radius: int = 0


@dataclass
class Wheel(Circle):
    """A circle with spokes."""

    spokes: int = 0