"""Parametric shape factories.

Rectangles sized by area or proportion, and letter-shaped polygons (C, E,
F, H, L, T, U, X) drawn inside an enclosing box. Each letter is built with
its southwest box corner at the origin and then moved to ``origin``.

Every factory raises InvalidParametersError when the stroke width does not
leave room for the letter inside the box.
"""

import math
from collections.abc import Callable

from polyshaper.domain import Point, Polygon
from polyshaper.exceptions import InvalidParametersError

ORIGIN = Point(0.0, 0.0)

Size = tuple[float, float]


def rectangle(origin: Point, size_x: float, size_y: float) -> Polygon:
    """Axis-aligned counter-clockwise rectangle with its SW corner at ``origin``."""
    return Polygon(
        (
            origin,
            Point(origin.x + size_x, origin.y),
            Point(origin.x + size_x, origin.y + size_y),
            Point(origin.x, origin.y + size_y),
        )
    )


def rectangle_by_area(area: float, ratio: float = 1.0) -> Polygon:
    """Rectangle of the given area whose width is ``ratio`` times its depth.

    The southwest corner sits at the origin.

    Args:
        area: Required area
        ratio: Width to depth proportion

    Returns:
        A new rectangle

    Raises:
        InvalidParametersError: If area or ratio is not positive

    Examples:
        >>> rectangle_by_area(12.0, ratio=3.0).bounding_box()
        (0.0, 0.0, 6.0, 2.0)
    """
    if area <= 0.0 or ratio <= 0.0:
        raise InvalidParametersError("rectangle", f"area {area} and ratio {ratio} must be positive")
    size_x = math.sqrt(area * ratio)
    return rectangle(ORIGIN, size_x, area / size_x)


def rectangle_by_ratio(ratio: float = 1.0) -> Polygon:
    """Unit-wide rectangle ``ratio`` units deep, SW corner at the origin."""
    if ratio <= 0.0:
        raise InvalidParametersError("rectangle", f"ratio {ratio} must be positive")
    return rectangle(ORIGIN, 1.0, ratio)


def _check_strokes(shape: str, size: Size, width: float, strokes_x: int, strokes_y: int) -> None:
    """Validate that ``strokes_x`` and ``strokes_y`` strokes fit inside the box."""
    size_x, size_y = size
    if size_x <= 0.0 or size_y <= 0.0:
        raise InvalidParametersError(shape, f"size ({size_x}, {size_y}) must be positive")
    if width <= 0.0:
        raise InvalidParametersError(shape, f"width {width} must be positive")
    if width * strokes_x >= size_x:
        raise InvalidParametersError(
            shape, f"{strokes_x} strokes of width {width} do not fit in size x {size_x}"
        )
    if width * strokes_y >= size_y:
        raise InvalidParametersError(
            shape, f"{strokes_y} strokes of width {width} do not fit in size y {size_y}"
        )


def _place(coords: list[tuple[float, float]], origin: Point) -> Polygon:
    return Polygon.from_tuples(coords).move_from_to(ORIGIN, origin)


def c_shape(origin: Point, size: Size, width: float) -> Polygon:
    """C-shaped polygon opening east.

    Raises:
        InvalidParametersError: If width >= size x or 3 * width >= size y
    """
    _check_strokes("C shape", size, width, 1, 3)
    sx, sy = size
    return _place(
        [
            (0.0, 0.0),
            (sx, 0.0),
            (sx, width),
            (width, width),
            (width, sy - width),
            (sx, sy - width),
            (sx, sy),
            (0.0, sy),
        ],
        origin,
    )


def e_shape(origin: Point, size: Size, width: float) -> Polygon:
    """E-shaped polygon with its middle arm centered on the box.

    Raises:
        InvalidParametersError: If width >= size x or 3 * width >= size y
    """
    _check_strokes("E shape", size, width, 1, 3)
    sx, sy = size
    half = width * 0.5
    mid = sy * 0.5
    return _place(
        [
            (0.0, 0.0),
            (sx, 0.0),
            (sx, width),
            (width, width),
            (width, mid - half),
            (sx, mid - half),
            (sx, mid + half),
            (width, mid + half),
            (width, sy - width),
            (sx, sy - width),
            (sx, sy),
            (0.0, sy),
        ],
        origin,
    )


def f_shape(origin: Point, size: Size, width: float) -> Polygon:
    """F-shaped polygon with its middle arm centered on the box.

    Raises:
        InvalidParametersError: If width >= size x or 3 * width >= size y
    """
    _check_strokes("F shape", size, width, 1, 3)
    sx, sy = size
    half = width * 0.5
    mid = sy * 0.5
    return _place(
        [
            (0.0, 0.0),
            (width, 0.0),
            (width, mid - half),
            (sx, mid - half),
            (sx, mid + half),
            (width, mid + half),
            (width, sy - width),
            (sx, sy - width),
            (sx, sy),
            (0.0, sy),
        ],
        origin,
    )


def h_shape(origin: Point, size: Size, width: float) -> Polygon:
    """H-shaped polygon with its crossbar centered on the box.

    Raises:
        InvalidParametersError: If 2 * width >= size x or width >= size y
    """
    _check_strokes("H shape", size, width, 2, 1)
    sx, sy = size
    half = width * 0.5
    mid = sy * 0.5
    right = sx - width
    return _place(
        [
            (0.0, 0.0),
            (width, 0.0),
            (width, mid - half),
            (right, mid - half),
            (right, 0.0),
            (sx, 0.0),
            (sx, sy),
            (right, sy),
            (right, mid + half),
            (width, mid + half),
            (width, sy),
            (0.0, sy),
        ],
        origin,
    )


def l_shape(origin: Point, size: Size, width: float) -> Polygon:
    """L-shaped polygon along the west and south sides of the box.

    Raises:
        InvalidParametersError: If width >= size x or width >= size y
    """
    _check_strokes("L shape", size, width, 1, 1)
    sx, sy = size
    return _place(
        [
            (0.0, 0.0),
            (sx, 0.0),
            (sx, width),
            (width, width),
            (width, sy),
            (0.0, sy),
        ],
        origin,
    )


def t_shape(origin: Point, size: Size, width: float) -> Polygon:
    """T-shaped polygon with its stem centered on the box.

    Raises:
        InvalidParametersError: If width >= size x or width >= size y
    """
    _check_strokes("T shape", size, width, 1, 1)
    sx, sy = size
    half = width * 0.5
    stem = sx * 0.5
    return _place(
        [
            (stem - half, 0.0),
            (stem + half, 0.0),
            (stem + half, sy - width),
            (sx, sy - width),
            (sx, sy),
            (0.0, sy),
            (0.0, sy - width),
            (stem - half, sy - width),
        ],
        origin,
    )


def u_shape(origin: Point, size: Size, width: float) -> Polygon:
    """U-shaped polygon opening north.

    Raises:
        InvalidParametersError: If 2 * width >= size x or width >= size y
    """
    _check_strokes("U shape", size, width, 2, 1)
    sx, sy = size
    return _place(
        [
            (0.0, 0.0),
            (sx, 0.0),
            (sx, sy),
            (sx - width, sy),
            (sx - width, width),
            (width, width),
            (width, sy),
            (0.0, sy),
        ],
        origin,
    )


def x_shape(origin: Point, size: Size, width: float) -> Polygon:
    """Cross-shaped polygon with both bars centered on the box.

    Raises:
        InvalidParametersError: If width >= size x or width >= size y
    """
    _check_strokes("X shape", size, width, 1, 1)
    sx, sy = size
    half = width * 0.5
    mid_y = sy * 0.5
    mid_x = sx * 0.5
    return _place(
        [
            (mid_x - half, 0.0),
            (mid_x + half, 0.0),
            (mid_x + half, mid_y - half),
            (sx, mid_y - half),
            (sx, mid_y + half),
            (mid_x + half, mid_y + half),
            (mid_x + half, sy),
            (mid_x - half, sy),
            (mid_x - half, mid_y + half),
            (0.0, mid_y + half),
            (0.0, mid_y - half),
            (mid_x - half, mid_y - half),
        ],
        origin,
    )


LETTER_SHAPES: dict[str, Callable[[Point, Size, float], Polygon]] = {
    "C": c_shape,
    "E": e_shape,
    "F": f_shape,
    "H": h_shape,
    "L": l_shape,
    "T": t_shape,
    "U": u_shape,
    "X": x_shape,
}
