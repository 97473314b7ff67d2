"""Polyshaper - Polygon set algebra for rectilinear layout generation.

Polyshaper combines 2D polygons with exact integer clipping (union,
difference, intersection, xor), builds parametric letter-shaped rooms
and offers spatial predicates for placing regions next to each other.

Example:
    >>> from polyshaper.core import combine, rectangle_by_area
    >>> from polyshaper.domain import BooleanMode
    >>> room = rectangle_by_area(12.0, ratio=3.0)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
