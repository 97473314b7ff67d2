"""Geometric helpers for validating clipper output.

This module provides core mathematical utilities for:
- Building the closed edge list of a vertex loop
- Zero-length edge detection
- Segment intersection (boundary contact included)
- Pairwise self-intersection scanning

All functions are pure and stateless.
"""

from collections.abc import Sequence

from polyshaper.domain import Point, Segment


def edges_from_points(points: Sequence[Point]) -> list[Segment]:
    """Edges between consecutive points, including the closing edge.

    Examples:
        >>> len(edges_from_points([Point(0, 0), Point(1, 0), Point(0, 1)]))
        3
    """
    n = len(points)
    return [Segment(points[i], points[(i + 1) % n]) for i in range(n)]


def has_zero_length_edge(edges: Sequence[Segment]) -> bool:
    return any(edge.start == edge.end for edge in edges)


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _within_bounds(a: Point, b: Point, p: Point) -> bool:
    return min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Test whether segment p1-p2 meets segment p3-p4.

    Touching counts: an endpoint lying on the other segment, or collinear
    overlap, is an intersection.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        True if the segments share at least one point

    Examples:
        >>> segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        True
        >>> segments_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))
        False
    """
    d1 = _cross(p3, p4, p1)
    d2 = _cross(p3, p4, p2)
    d3 = _cross(p1, p2, p3)
    d4 = _cross(p1, p2, p4)

    # Proper crossing
    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True

    # Collinear contact
    if d1 == 0 and _within_bounds(p3, p4, p1):
        return True
    if d2 == 0 and _within_bounds(p3, p4, p2):
        return True
    if d3 == 0 and _within_bounds(p1, p2, p3):
        return True
    if d4 == 0 and _within_bounds(p1, p2, p4):
        return True

    return False


def self_intersects(edges: Sequence[Segment]) -> bool:
    """Scan every pair of non-adjacent edges of a closed loop for contact.

    An empty edge list counts as self-intersecting.

    Args:
        edges: Closed edge loop as produced by edges_from_points

    Returns:
        True if any two non-adjacent edges share a point
    """
    n = len(edges)
    if n == 0:
        return True

    for i in range(n):
        for j in range(i + 2, n):
            # First and last edges meet at the closing vertex
            if i == 0 and j == n - 1:
                continue
            a, b = edges[i], edges[j]
            if segments_intersect(a.start, a.end, b.start, b.end):
                return True
    return False


def near_equal(this_value: float, that_value: float, tolerance: float = 1e-9) -> bool:
    """True if the two values differ by no more than ``tolerance``."""
    return abs(this_value - that_value) <= tolerance
