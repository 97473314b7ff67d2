"""Compass box: directional reference points of a bounding box."""

from collections.abc import Iterable
from dataclasses import dataclass

from polyshaper.domain.point import Point


@dataclass(frozen=True, slots=True)
class CompassBox:
    """The 8 reference points of an axis-aligned bounding box.

    Corners are SW, SE, NE and NW; edge midpoints are S, E, N and W.
    Used for directional placement math only.

    Attributes:
        min_x: West edge
        min_y: South edge
        max_x: East edge
        max_y: North edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "CompassBox":
        """Build the compass box enclosing ``points``.

        Raises:
            ValueError: If no points are supplied
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot build a compass box from no points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def size_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def size_y(self) -> float:
        return self.max_y - self.min_y

    @property
    def sw(self) -> Point:
        return Point(self.min_x, self.min_y)

    @property
    def se(self) -> Point:
        return Point(self.max_x, self.min_y)

    @property
    def ne(self) -> Point:
        return Point(self.max_x, self.max_y)

    @property
    def nw(self) -> Point:
        return Point(self.min_x, self.max_y)

    @property
    def n(self) -> Point:
        return Point((self.min_x + self.max_x) / 2.0, self.max_y)

    @property
    def s(self) -> Point:
        return Point((self.min_x + self.max_x) / 2.0, self.min_y)

    @property
    def e(self) -> Point:
        return Point(self.max_x, (self.min_y + self.max_y) / 2.0)

    @property
    def w(self) -> Point:
        return Point(self.min_x, (self.min_y + self.max_y) / 2.0)

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in placement order: SW, SE, NE, NW."""
        return (self.sw, self.se, self.ne, self.nw)
