"""Core algorithms for polyshaper.

This module contains the core algorithms for:

- Quantization of vertices onto the clipper's integer lattice
- Boolean combination (union, difference, intersection, xor) and merging
- Sequential difference with largest-fragment or all-fragment policies
- Spatial predicates (adjacency, containment, quadrants, hulls)
- Parametric shape factories

All services are:
- Stateless (safe to share between threads)
- Pure (no side effects)

Key classes:
- Quantizer: Float to integer lattice conversion
- BooleanEngine: Clipper orchestration, merge and difference
- RandomSource: Seedable random values
"""

from polyshaper.core.clipper import (
    BooleanEngine,
    can_merge,
    combine,
    difference,
    differences,
    merge,
    mergeable,
    normalize_winding,
)
from polyshaper.core.geometry import (
    edges_from_points,
    has_zero_length_edge,
    near_equal,
    segments_intersect,
    self_intersects,
)
from polyshaper.core.quantizer import Quantizer, dedupe_consecutive
from polyshaper.core.sampling import RandomSource
from polyshaper.core.shapes import (
    LETTER_SHAPES,
    c_shape,
    e_shape,
    f_shape,
    h_shape,
    l_shape,
    rectangle,
    rectangle_by_area,
    rectangle_by_ratio,
    t_shape,
    u_shape,
    x_shape,
)
from polyshaper.core.spatial import (
    adjacent_area,
    axis_quad,
    convex_hull,
    fit_to,
    fit_within,
    in_quadrant,
    near_polygons,
    non_intersecting,
)

__all__ = [
    # Engine classes
    "BooleanEngine",
    "Quantizer",
    "RandomSource",
    # Boolean operations
    "can_merge",
    "combine",
    "difference",
    "differences",
    "merge",
    "mergeable",
    "normalize_winding",
    # Geometry functions
    "dedupe_consecutive",
    "edges_from_points",
    "has_zero_length_edge",
    "near_equal",
    "segments_intersect",
    "self_intersects",
    # Shapes
    "LETTER_SHAPES",
    "c_shape",
    "e_shape",
    "f_shape",
    "h_shape",
    "l_shape",
    "rectangle",
    "rectangle_by_area",
    "rectangle_by_ratio",
    "t_shape",
    "u_shape",
    "x_shape",
    # Spatial predicates
    "adjacent_area",
    "axis_quad",
    "convex_hull",
    "fit_to",
    "fit_within",
    "in_quadrant",
    "near_polygons",
    "non_intersecting",
]
