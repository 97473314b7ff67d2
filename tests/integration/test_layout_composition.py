"""Integration test composing a small floor plan from the public API.

A hall and a kitchen are placed inside an L-shaped outline, the remaining
floor is carved out of the outline, and candidate placements for a
cupboard are filtered down to the ones that fit.
"""

import pytest

from polyshaper.core import (
    BooleanEngine,
    adjacent_area,
    differences,
    in_quadrant,
    l_shape,
    near_polygons,
    non_intersecting,
)
from polyshaper.domain import Orient, Point, Polygon, Quadrant


def box(min_x: float, min_y: float, max_x: float, max_y: float) -> Polygon:
    return Polygon.from_tuples([(min_x, min_y), (max_x, min_y), (max_x, max_y), (min_x, max_y)])


@pytest.fixture
def engine() -> BooleanEngine:
    return BooleanEngine()


@pytest.fixture
def outline() -> Polygon:
    return l_shape(Point(0.0, 0.0), (20.0, 20.0), 10.0)


@pytest.fixture
def hall() -> Polygon:
    return box(0, 0, 10, 4)


@pytest.fixture
def kitchen(hall: Polygon) -> Polygon:
    return adjacent_area(hall, 40.0, Orient.N)


class TestFloorPlan:
    """Compose rooms with boolean operations and spatial predicates."""

    def test_outline(self, outline: Polygon):
        assert outline.area() == pytest.approx(300.0)

    def test_kitchen_sits_north_of_hall(self, kitchen: Polygon):
        assert kitchen.bounding_box() == pytest.approx((0.0, 4.0, 10.0, 8.0))

    def test_rooms_merge(self, engine: BooleanEngine, hall: Polygon, kitchen: Polygon):
        assert engine.can_merge(hall, kitchen)
        merged = engine.merge([hall, kitchen])
        assert len(merged) == 1
        assert merged[0].area() == pytest.approx(80.0)

    def test_remaining_floor(
        self, engine: BooleanEngine, outline: Polygon, hall: Polygon, kitchen: Polygon
    ):
        remainder = engine.difference(outline, [hall, kitchen])
        assert remainder is not None
        assert remainder.area() == pytest.approx(220.0)
        assert not remainder.intersects(hall)
        assert not remainder.intersects(kitchen)

    def test_remaining_floor_fragments(self, outline: Polygon, hall: Polygon, kitchen: Polygon):
        pieces = differences(outline, [hall, kitchen])
        assert [round(p.area(), 6) for p in pieces] == [260.0, 220.0]

    def test_cupboard_placements(self, outline: Polygon, hall: Polygon, kitchen: Polygon):
        cupboard = box(0, 0, 4, 4)
        candidates = near_polygons(hall, cupboard)
        free = non_intersecting([hall, kitchen], candidates)
        fitting = [c for c in free if outline.covers(c)]

        assert box(10, 0, 14, 4) in fitting
        assert all(not c.intersects(hall) for c in fitting)
        assert in_quadrant(fitting, Quadrant.I) == fitting
