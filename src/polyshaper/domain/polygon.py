"""Validated polygon type.

This module defines the polygon value that flows through the whole library:
- Polygon: A simple, closed, non-degenerate polygon
- WindingDirection: Enum for polygon winding direction

Construction validates the vertex list, so holding a ``Polygon`` means
holding a simple polygon. Predicates that need robust planar topology
(intersection, containment) delegate to shapely.
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

import shapely
from shapely.geometry import LinearRing
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from polyshaper.domain.compass import CompassBox
from polyshaper.domain.point import Point, Segment
from polyshaper.exceptions import InvalidPolygonError


class WindingDirection(Enum):
    """Polygon winding direction.

    Positive signed area winds counter-clockwise, negative clockwise.
    Every polygon leaving the boolean engine winds counter-clockwise.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


def _shoelace(vertices: Sequence[Point]) -> float:
    n = len(vertices)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += vertices[i].x * vertices[j].y
        area -= vertices[j].x * vertices[i].y
    return area / 2.0


@dataclass(frozen=True)
class Polygon:
    """A simple closed polygon.

    The last vertex connects implicitly to the first. Orientation is derived
    from the signed area, never stored.

    Attributes:
        vertices: Ordered vertices of the boundary

    Raises:
        InvalidPolygonError: If there are fewer than 3 vertices, two
            consecutive vertices coincide, the area is zero or the boundary
            crosses itself
    """

    vertices: tuple[Point, ...]
    _shape: ShapelyPolygon = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        object.__setattr__(self, "vertices", vertices)

        n = len(vertices)
        if n < 3:
            raise InvalidPolygonError(f"need at least 3 vertices, got {n}")
        for i in range(n):
            if vertices[i] == vertices[(i + 1) % n]:
                raise InvalidPolygonError(f"zero-length edge at vertex {i}")
        if _shoelace(vertices) == 0.0:
            raise InvalidPolygonError("zero area")

        ring = LinearRing([v.to_tuple() for v in vertices])
        if not ring.is_simple:
            raise InvalidPolygonError("boundary intersects itself")
        object.__setattr__(self, "_shape", ShapelyPolygon(ring))

    @classmethod
    def from_tuples(cls, coords: Iterable[Sequence[float]]) -> "Polygon":
        """Build a polygon from ``(x, y)`` or ``(x, y, z)`` tuples."""
        return cls(tuple(Point.from_sequence(c) for c in coords))

    def signed_area(self) -> float:
        """Signed area by the shoelace formula.

        Returns:
            Positive for counter-clockwise, negative for clockwise winding
        """
        return _shoelace(self.vertices)

    def area(self) -> float:
        return abs(self.signed_area())

    def is_clockwise(self) -> bool:
        return self.signed_area() < 0.0

    @property
    def winding(self) -> WindingDirection:
        if self.is_clockwise():
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def reversed(self) -> "Polygon":
        """Same boundary traversed in the opposite direction."""
        return Polygon(tuple(reversed(self.vertices)))

    def normalized(self) -> "Polygon":
        """This polygon wound counter-clockwise."""
        if self.is_clockwise():
            return self.reversed()
        return self

    def segments(self) -> list[Segment]:
        """Edges in order, including the closing edge."""
        n = len(self.vertices)
        return [Segment(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def compass(self) -> CompassBox:
        """The 8-point compass box of the bounding box."""
        return CompassBox(*self.bounding_box())

    def centroid(self) -> Point:
        c = self._shape.centroid
        return Point(c.x, c.y)

    def intersects(self, other: "Polygon") -> bool:
        """True if the interiors of the two polygons overlap.

        Polygons that only share boundary (a common wall or corner) do not
        intersect.
        """
        return self._shape.intersects(other._shape) and not self._shape.touches(other._shape)

    def intersects_any(self, others: Iterable["Polygon"]) -> bool:
        return any(self.intersects(other) for other in others)

    def intersection(self, other: "Polygon") -> list["Polygon"]:
        """Overlap of the two polygons as a list of fragments.

        Lower-dimensional pieces (shared edges or points) are dropped.
        Fragment winding is whatever shapely produces.
        """
        result = self._shape.intersection(other._shape)
        fragments = []
        for part in shapely.get_parts(result):
            if part.geom_type != "Polygon" or part.is_empty or part.area == 0.0:
                continue
            fragments.append(Polygon.from_tuples(part.exterior.coords[:-1]))
        return fragments

    def covers_point(self, point: Point) -> bool:
        """True if ``point`` lies inside the polygon or on its boundary."""
        return self._shape.covers(ShapelyPoint(point.x, point.y))

    def covers(self, other: "Polygon") -> bool:
        """True if no part of ``other`` lies outside this polygon."""
        return self._shape.covers(other._shape)

    def translate(self, dx: float, dy: float) -> "Polygon":
        return Polygon(tuple(Point(v.x + dx, v.y + dy) for v in self.vertices))

    def move_from_to(self, start: Point, end: Point) -> "Polygon":
        """Rigidly translate the polygon so ``start`` lands on ``end``."""
        return self.translate(end.x - start.x, end.y - start.y)

    def rotate(self, pivot: Point, degrees: float) -> "Polygon":
        """Rotate counter-clockwise about ``pivot`` by ``degrees``."""
        theta = math.radians(degrees)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        rotated = []
        for v in self.vertices:
            dx = v.x - pivot.x
            dy = v.y - pivot.y
            rotated.append(
                Point(pivot.x + dx * cos_t - dy * sin_t, pivot.y + dx * sin_t + dy * cos_t)
            )
        return Polygon(tuple(rotated))

    def to_tuples(self) -> list[tuple[float, float]]:
        return [v.to_tuple() for v in self.vertices]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the polygon
        """
        return {"vertices": [v.to_dict() for v in self.vertices]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(tuple(Point.from_dict(v) for v in data["vertices"]))
