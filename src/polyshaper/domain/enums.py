"""Enumerations shared by the boolean engine and spatial predicates."""

from enum import Enum


class BooleanMode(str, Enum):
    """Boolean operation applied between subject and clip polygons.

    - DIFFERENCE: subject and not clip
    - UNION: subject or clip
    - INTERSECTION: subject and clip
    - XOR: either subject or clip but not both
    """

    DIFFERENCE = "difference"
    UNION = "union"
    INTERSECTION = "intersection"
    XOR = "xor"


class FillRule(str, Enum):
    """Rule deciding which regions of overlapping paths count as inside."""

    EVEN_ODD = "even_odd"
    NON_ZERO = "non_zero"
    POSITIVE = "positive"
    NEGATIVE = "negative"


class Orient(str, Enum):
    """Cardinal direction relative to a polygon's bounding box."""

    N = "n"
    E = "e"
    S = "s"
    W = "w"


class Quadrant(str, Enum):
    """Cartesian quadrant relative to the origin."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"


class ConsumedPolicy(str, Enum):
    """What a fragment-preserving difference does once a subtrahend consumes
    the running polygon entirely.

    - STOP: return the fragments accumulated so far, ignore remaining subtrahends
    - SKIP: ignore that subtrahend and keep reducing the previous running polygon
    """

    STOP = "stop"
    SKIP = "skip"
