"""Spatial predicates and placement helpers composed from the boolean engine.

Key functions:
- adjacent_area: Rectangle of a given area flush against a bounding-box side
- fit_within / fit_to: Clip a polygon to a boundary and carve out neighbors
- non_intersecting / in_quadrant: Candidate filters
- near_polygons: Candidate placements touching each vertex of an anchor
- convex_hull: Hull of the vertices of several polygons
- axis_quad: Centerline of a four-sided polygon
"""

from collections.abc import Callable, Sequence

from shapely.geometry import MultiPoint
from shapely.geometry.polygon import orient as orient_polygon

from polyshaper.core.clipper import BooleanEngine, difference
from polyshaper.core.shapes import rectangle
from polyshaper.domain import Orient, Point, Polygon, Quadrant, Segment
from polyshaper.exceptions import GeometryError, InvalidParametersError

ORIGIN = Point(0.0, 0.0)

_QUADRANT_TESTS: dict[Quadrant, Callable[[Point], bool]] = {
    Quadrant.I: lambda p: p.x >= 0.0 and p.y >= 0.0,
    Quadrant.II: lambda p: p.x <= 0.0 and p.y >= 0.0,
    Quadrant.III: lambda p: p.x <= 0.0 and p.y <= 0.0,
    Quadrant.IV: lambda p: p.x >= 0.0 and p.y <= 0.0,
}


def adjacent_area(polygon: Polygon, area: float, orient: Orient) -> Polygon:
    """Rectangle of ``area`` placed flush against one side of the bounding box.

    North and south rectangles share the box's x extent and solve their
    depth from the area; east and west ones share its y extent.

    Args:
        polygon: Polygon whose bounding box anchors the new rectangle
        area: Area of the new rectangle
        orient: Side of the box to place the rectangle against

    Returns:
        A new counter-clockwise rectangle

    Raises:
        InvalidParametersError: If area is not positive
    """
    if area <= 0.0:
        raise InvalidParametersError("adjacent area", f"area {area} must be positive")

    box = polygon.compass()
    if orient in (Orient.N, Orient.S):
        size_x = box.size_x
        size_y = area / box.size_x
    else:
        size_x = area / box.size_y
        size_y = box.size_y

    if orient is Orient.N:
        origin = box.nw
    elif orient is Orient.E:
        origin = box.se
    elif orient is Orient.S:
        origin = Point(box.min_x, box.min_y - size_y)
    else:
        origin = Point(box.min_x - size_x, box.min_y)
    return rectangle(origin, size_x, size_y)


def fit_within(polygon: Polygon, within: Polygon) -> list[Polygon]:
    """Parts of ``polygon`` inside ``within``, wound counter-clockwise."""
    if not within.intersects(polygon):
        return []
    return [fragment.normalized() for fragment in within.intersection(polygon)]


def fit_to(
    polygon: Polygon,
    within: Polygon | None = None,
    among: Sequence[Polygon] | None = None,
    engine: BooleanEngine | None = None,
) -> list[Polygon]:
    """Clip ``polygon`` to a boundary, then carve every neighbor out of it.

    Each fragment keeps only its largest remainder after subtracting
    ``among``. A fragment the neighbors consume entirely is kept as it was
    before subtraction.

    Args:
        polygon: Polygon to fit
        within: Optional constraining outer boundary
        among: Optional neighbors to subtract
        engine: Boolean engine to use (default engine if None)

    Returns:
        Fitted fragments
    """
    fragments = fit_within(polygon, within) if within is not None else [polygon]
    if not among:
        return fragments

    subtract = engine.difference if engine is not None else difference
    fitted = []
    for fragment in fragments:
        remainder = subtract(fragment, among)
        fitted.append(remainder if remainder is not None else fragment)
    return fitted


def non_intersecting(
    reference: Polygon | Sequence[Polygon],
    candidates: Sequence[Polygon],
) -> list[Polygon]:
    """Candidates whose interiors overlap neither ``reference`` polygon(s)."""
    references = [reference] if isinstance(reference, Polygon) else list(reference)
    return [c for c in candidates if not c.intersects_any(references)]


def in_quadrant(candidates: Sequence[Polygon], quadrant: Quadrant) -> list[Polygon]:
    """Candidates with every vertex in ``quadrant``; axes belong to both sides."""
    test = _QUADRANT_TESTS[quadrant]
    return [c for c in candidates if all(test(v) for v in c.vertices)]


def near_polygons(anchor: Polygon, template: Polygon, rotated: bool = False) -> list[Polygon]:
    """Placements of ``template`` touching each vertex of ``anchor``.

    At every anchor vertex the template is moved so each of its bounding-box
    corners (SW, SE, NE, NW) in turn lands on the vertex. With ``rotated``
    the same placements follow for the template turned 90 degrees about the
    origin. No placement is filtered.

    Returns:
        4 placements per anchor vertex, 8 when rotated
    """
    templates = [template]
    if rotated:
        templates.append(template.rotate(ORIGIN, 90.0))

    placements = []
    for shape in templates:
        corners = shape.compass().corners()
        for vertex in anchor.vertices:
            for corner in corners:
                placements.append(shape.move_from_to(corner, vertex))
    return placements


def convex_hull(polygons: Sequence[Polygon]) -> Polygon:
    """Counter-clockwise convex hull of all vertices of ``polygons``.

    Raises:
        GeometryError: If the vertices do not span an area
    """
    points = [v.to_tuple() for polygon in polygons for v in polygon.vertices]
    hull = MultiPoint(points).convex_hull
    if hull.is_empty or hull.geom_type != "Polygon":
        raise GeometryError(f"Convex hull of {len(points)} points is degenerate")
    hull = orient_polygon(hull, sign=1.0)
    return Polygon.from_tuples(hull.exterior.coords[:-1])


def axis_quad(polygon: Polygon) -> Segment:
    """Hypothesized centerline of a four-sided polygon.

    Runs from the midpoint of the shortest side to the midpoint of the line
    joining the other two vertices.

    Raises:
        InvalidParametersError: If the polygon does not have 4 sides
    """
    segments = polygon.segments()
    if len(segments) != 4:
        raise InvalidParametersError("axis quad", f"polygon must have 4 sides, got {len(segments)}")
    shortest = min(segments, key=Segment.length)
    others = [v for v in polygon.vertices if v not in (shortest.start, shortest.end)]
    return Segment(shortest.midpoint(), Segment(others[0], others[-1]).midpoint())
