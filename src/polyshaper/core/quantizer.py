"""Conversion between floating point polygons and integer clipper paths.

The clipper works in exact integer arithmetic, so every vertex is snapped
onto a lattice of ``1 / scale`` units before clipping and mapped back
afterwards. Per-axis error is bounded by ``0.5 / scale``.
"""

from collections.abc import Iterable, Sequence
from typing import TypeVar

from polyshaper.config.settings import DEFAULT_SCALE
from polyshaper.domain import Point, Polygon

IntPath = list[tuple[int, int]]

T = TypeVar("T")


def dedupe_consecutive(items: Iterable[T]) -> list[T]:
    """Drop items equal to their predecessor, treating the sequence as a loop.

    Examples:
        >>> dedupe_consecutive([1, 1, 2, 3, 3, 1])
        [1, 2, 3]
    """
    result: list[T] = []
    for item in items:
        if not result or result[-1] != item:
            result.append(item)
    while len(result) > 1 and result[-1] == result[0]:
        result.pop()
    return result


class Quantizer:
    """Maps vertices to and from a fixed integer lattice.

    Attributes:
        scale: Lattice points per coordinate unit
    """

    def __init__(self, scale: float = DEFAULT_SCALE) -> None:
        if scale <= 0:
            raise ValueError(f"Quantization scale must be positive, got {scale}")
        self.scale = scale

    def quantize_points(self, points: Iterable[Point]) -> IntPath:
        return dedupe_consecutive(
            (round(p.x * self.scale), round(p.y * self.scale)) for p in points
        )

    def quantize(self, polygon: Polygon) -> IntPath:
        """Integer clipper path for ``polygon``."""
        return self.quantize_points(polygon.vertices)

    def dequantize(self, path: Sequence[Sequence[int]]) -> list[Point]:
        """Points for an integer clipper path."""
        return dedupe_consecutive(Point(x / self.scale, y / self.scale) for x, y in path)
