"""Domain models for polyshaper.

This module contains the value types the boolean engine and the spatial
predicates operate on. All models are:

- Immutable (frozen dataclasses)
- Constructed fresh per operation, never shared or mutated
- Independent of the clipping library's integer path representation

Key classes:
- Point: A 2D point
- Segment: A straight edge between two points
- Polygon: A validated, simple, closed polygon
- CompassBox: Bounding-box reference points for directional placement
"""

from polyshaper.domain.compass import CompassBox
from polyshaper.domain.enums import BooleanMode, ConsumedPolicy, FillRule, Orient, Quadrant
from polyshaper.domain.point import Point, Segment
from polyshaper.domain.polygon import Polygon, WindingDirection

__all__: list[str] = [
    # Enums
    "BooleanMode",
    "ConsumedPolicy",
    "FillRule",
    "Orient",
    "Quadrant",
    "WindingDirection",
    # Core types
    "Point",
    "Segment",
    "Polygon",
    "CompassBox",
]
