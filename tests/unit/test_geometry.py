"""Unit tests for geometric helpers used to validate clipper output."""

from polyshaper.core.geometry import (
    edges_from_points,
    has_zero_length_edge,
    near_equal,
    segments_intersect,
    self_intersects,
)
from polyshaper.domain import Point, Segment


class TestEdges:
    """Tests for edge construction and zero-length detection."""

    def test_closing_edge(self):
        edges = edges_from_points([Point(0, 0), Point(1, 0), Point(0, 1)])
        assert edges[-1] == Segment(Point(0, 1), Point(0, 0))

    def test_zero_length(self):
        edges = edges_from_points([Point(0, 0)])
        assert has_zero_length_edge(edges)

    def test_no_zero_length(self):
        edges = edges_from_points([Point(0, 0), Point(1, 0), Point(0, 1)])
        assert not has_zero_length_edge(edges)


class TestSegmentsIntersect:
    """Tests for segment intersection."""

    def test_crossing(self):
        assert segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))

    def test_parallel(self):
        assert not segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))

    def test_endpoint_touching(self):
        """A T-junction counts as contact."""
        assert segments_intersect(Point(0, 0), Point(2, 0), Point(1, 0), Point(1, 1))

    def test_collinear_overlap(self):
        assert segments_intersect(Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0))

    def test_collinear_apart(self):
        assert not segments_intersect(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))

    def test_lines_cross_outside_segments(self):
        assert not segments_intersect(Point(0, 0), Point(1, 1), Point(3, 0), Point(2, 1))


class TestSelfIntersects:
    """Tests for the pairwise non-adjacent edge scan."""

    def test_square(self):
        edges = edges_from_points([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        assert not self_intersects(edges)

    def test_bowtie(self):
        edges = edges_from_points([Point(0, 0), Point(1, 1), Point(1, 0), Point(0, 1)])
        assert self_intersects(edges)

    def test_pinched_loop(self):
        """Two lobes touching at a vertex are rejected."""
        points = [
            Point(0, 0),
            Point(2, 0),
            Point(2, 2),
            Point(4, 2),
            Point(4, 4),
            Point(2, 4),
            Point(2, 2),
            Point(0, 2),
        ]
        assert self_intersects(edges_from_points(points))

    def test_triangle(self):
        edges = edges_from_points([Point(0, 0), Point(1, 0), Point(0, 1)])
        assert not self_intersects(edges)

    def test_empty(self):
        assert self_intersects([])


class TestNearEqual:
    def test_within_tolerance(self):
        assert near_equal(1.0, 1.0 + 1e-10)

    def test_outside_tolerance(self):
        assert not near_equal(1.0, 1.001)
        assert near_equal(1.0, 1.001, tolerance=0.01)
