"""Tests for domain models to verify they work correctly."""

import dataclasses

import pytest

from polyshaper.domain import CompassBox, Point, Polygon, Segment, WindingDirection
from polyshaper.exceptions import InvalidPolygonError


def square(x: float, y: float, size: float = 1.0) -> Polygon:
    return Polygon.from_tuples([(x, y), (x + size, y), (x + size, y + size), (x, y + size)])


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_from_sequence_ignores_z(self) -> None:
        """Test that a third coordinate is dropped."""
        p = Point.from_sequence((1.0, 2.0, 3.0))
        assert p == Point(1.0, 2.0)

    def test_point_from_short_sequence(self) -> None:
        """Test that a single coordinate is rejected."""
        with pytest.raises(ValueError):
            Point.from_sequence((1.0,))

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(3.5, -2.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_distance(self) -> None:
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0


class TestSegment:
    """Tests for Segment class."""

    def test_length_and_midpoint(self) -> None:
        seg = Segment(Point(0, 0), Point(4, 0))
        assert seg.length() == 4.0
        assert seg.midpoint() == Point(2.0, 0.0)


class TestCompassBox:
    """Tests for CompassBox class."""

    def test_reference_points(self) -> None:
        """Test corners and edge midpoints of a 4 x 2 box."""
        box = CompassBox(0.0, 0.0, 4.0, 2.0)
        assert box.sw == Point(0, 0)
        assert box.se == Point(4, 0)
        assert box.ne == Point(4, 2)
        assert box.nw == Point(0, 2)
        assert box.n == Point(2, 2)
        assert box.s == Point(2, 0)
        assert box.e == Point(4, 1)
        assert box.w == Point(0, 1)
        assert box.center == Point(2, 1)
        assert box.size_x == 4.0
        assert box.size_y == 2.0

    def test_corner_order(self) -> None:
        """Corners come in SW, SE, NE, NW order."""
        box = CompassBox(0.0, 0.0, 1.0, 1.0)
        assert box.corners() == (Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1))

    def test_from_points(self) -> None:
        box = CompassBox.from_points([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert box == CompassBox(-2.0, -1.0, 4.0, 5.0)

    def test_from_no_points(self) -> None:
        with pytest.raises(ValueError):
            CompassBox.from_points([])


class TestPolygonValidation:
    """Tests for Polygon construction checks."""

    def test_valid_polygon(self) -> None:
        polygon = square(0, 0)
        assert len(polygon.vertices) == 4
        assert isinstance(polygon.vertices, tuple)

    def test_too_few_vertices(self) -> None:
        with pytest.raises(InvalidPolygonError):
            Polygon.from_tuples([(0, 0), (1, 0)])

    def test_consecutive_duplicate(self) -> None:
        with pytest.raises(InvalidPolygonError):
            Polygon.from_tuples([(0, 0), (1, 0), (1, 0), (1, 1)])

    def test_closing_duplicate(self) -> None:
        """A repeated first vertex makes a zero-length closing edge."""
        with pytest.raises(InvalidPolygonError):
            Polygon.from_tuples([(0, 0), (1, 0), (1, 1), (0, 0)])

    def test_collinear(self) -> None:
        with pytest.raises(InvalidPolygonError):
            Polygon.from_tuples([(0, 0), (1, 0), (2, 0)])

    def test_self_intersecting(self) -> None:
        """A bowtie is rejected."""
        with pytest.raises(InvalidPolygonError):
            Polygon.from_tuples([(0, 0), (1, 1), (1, 0), (0, 1)])

    def test_z_ignored(self) -> None:
        polygon = Polygon.from_tuples([(0, 0, 5), (1, 0, 5), (1, 1, 5)])
        assert polygon.area() == pytest.approx(0.5)

    def test_polygon_immutable(self) -> None:
        polygon = square(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            polygon.vertices = ()  # type: ignore


class TestPolygonWinding:
    """Tests for signed area and winding."""

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for counter-clockwise square."""
        polygon = square(0, 0, 10)
        assert polygon.signed_area() == pytest.approx(100.0)
        assert polygon.winding == WindingDirection.COUNTER_CLOCKWISE
        assert not polygon.is_clockwise()

    def test_signed_area_clockwise(self) -> None:
        """Test signed area for clockwise square."""
        polygon = square(0, 0, 10).reversed()
        assert polygon.signed_area() == pytest.approx(-100.0)
        assert polygon.winding == WindingDirection.CLOCKWISE
        assert polygon.area() == pytest.approx(100.0)

    def test_signed_area_of_irregular_polygon(self) -> None:
        """Test the shoelace sum on a non-rectangular outline."""
        polygon = Polygon.from_tuples([(0, 0), (4, 0), (4, 1), (1, 1), (1, 3), (0, 3)])
        assert polygon.signed_area() == pytest.approx(6.0)
        assert polygon.reversed().signed_area() == pytest.approx(-6.0)

    def test_normalized_is_idempotent(self) -> None:
        cw = square(0, 0).reversed()
        once = cw.normalized()
        twice = once.normalized()
        assert once == twice
        assert once.signed_area() > 0

    def test_normalized_keeps_ccw(self) -> None:
        ccw = square(0, 0)
        assert ccw.normalized() is ccw


class TestPolygonQueries:
    """Tests for bounding box, segments and predicates."""

    def test_bounding_box(self) -> None:
        polygon = Polygon.from_tuples([(10, 20), (100, 30), (50, 150)])
        assert polygon.bounding_box() == (10.0, 20.0, 100.0, 150.0)

    def test_segments_include_closing_edge(self) -> None:
        segments = square(0, 0).segments()
        assert len(segments) == 4
        assert segments[-1] == Segment(Point(0, 1), Point(0, 0))

    def test_compass(self) -> None:
        box = Polygon.from_tuples([(0, 0), (4, 0), (4, 2), (0, 2)]).compass()
        assert box.ne == Point(4, 2)

    def test_centroid(self) -> None:
        c = square(0, 0, 2).centroid()
        assert c.x == pytest.approx(1.0)
        assert c.y == pytest.approx(1.0)

    def test_intersects_overlapping(self) -> None:
        assert square(0, 0, 2).intersects(square(1, 1, 2))

    def test_shared_edge_is_not_intersection(self) -> None:
        """Rooms sharing a wall do not intersect."""
        assert not square(0, 0).intersects(square(1, 0))

    def test_disjoint(self) -> None:
        assert not square(0, 0).intersects(square(5, 5))

    def test_intersects_any(self) -> None:
        assert square(0, 0, 2).intersects_any([square(5, 5), square(1, 1)])
        assert not square(0, 0).intersects_any([])

    def test_intersection_fragments(self) -> None:
        fragments = square(0, 0, 2).intersection(square(1, 1, 2))
        assert len(fragments) == 1
        assert fragments[0].area() == pytest.approx(1.0)

    def test_intersection_of_touching_is_empty(self) -> None:
        assert square(0, 0).intersection(square(1, 0)) == []

    def test_covers_point_on_boundary(self) -> None:
        polygon = square(0, 0, 2)
        assert polygon.covers_point(Point(1, 1))
        assert polygon.covers_point(Point(2, 1))
        assert not polygon.covers_point(Point(3, 1))

    def test_covers_polygon(self) -> None:
        assert square(0, 0, 4).covers(square(1, 1))
        assert not square(0, 0, 4).covers(square(3, 3, 2))


class TestPolygonTransforms:
    """Tests for translation and rotation."""

    def test_move_from_to(self) -> None:
        moved = square(0, 0).move_from_to(Point(0, 0), Point(5, -2))
        assert moved.bounding_box() == (5.0, -2.0, 6.0, -1.0)

    def test_rotate_quarter_turn(self) -> None:
        rotated = Polygon.from_tuples([(1, 0), (2, 0), (2, 1), (1, 1)]).rotate(Point(0, 0), 90.0)
        min_x, min_y, max_x, max_y = rotated.bounding_box()
        assert min_x == pytest.approx(-1.0)
        assert min_y == pytest.approx(1.0)
        assert max_x == pytest.approx(0.0, abs=1e-12)
        assert max_y == pytest.approx(2.0)
        assert rotated.signed_area() == pytest.approx(1.0)

    def test_serialization(self) -> None:
        polygon = square(1, 2, 3)
        assert Polygon.from_dict(polygon.to_dict()) == polygon

    def test_to_tuples(self) -> None:
        assert square(0, 0).to_tuples() == [(0, 0), (1, 0), (1, 1), (0, 1)]
