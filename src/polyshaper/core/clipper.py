"""Boolean combination of polygons on top of the exact integer clipper.

This module provides the BooleanEngine, which:
1. Quantizes polygons onto the integer lattice
2. Runs a single pyclipper execution per boolean step
3. Rebuilds validated, counter-clockwise polygons from the returned paths

Degenerate output (zero-length edges, self-intersecting loops) is dropped,
never repaired and never raised. Callers check for ``None`` or empty lists.
"""

import logging
from collections.abc import Sequence

import pyclipper

from polyshaper.config import ClipperConfig
from polyshaper.core.geometry import edges_from_points, has_zero_length_edge, self_intersects
from polyshaper.core.quantizer import IntPath, Quantizer
from polyshaper.domain import BooleanMode, ConsumedPolicy, FillRule, Polygon
from polyshaper.exceptions import InvalidPolygonError

logger = logging.getLogger(__name__)

_CLIP_TYPES = {
    BooleanMode.DIFFERENCE: pyclipper.CT_DIFFERENCE,
    BooleanMode.UNION: pyclipper.CT_UNION,
    BooleanMode.INTERSECTION: pyclipper.CT_INTERSECTION,
    BooleanMode.XOR: pyclipper.CT_XOR,
}

_FILL_TYPES = {
    FillRule.EVEN_ODD: pyclipper.PFT_EVENODD,
    FillRule.NON_ZERO: pyclipper.PFT_NONZERO,
    FillRule.POSITIVE: pyclipper.PFT_POSITIVE,
    FillRule.NEGATIVE: pyclipper.PFT_NEGATIVE,
}


def normalize_winding(polygon: Polygon) -> Polygon:
    """Return ``polygon`` wound counter-clockwise."""
    return polygon.normalized()


def _by_area(polygon: Polygon) -> float:
    return polygon.area()


class BooleanEngine:
    """Union, difference, intersection and xor of polygon sets.

    Stateless apart from its configuration, so one engine can be shared
    freely between threads.

    Example:
        engine = BooleanEngine(ClipperConfig(scale=4096.0))
        pieces = engine.combine([room], [corridor], BooleanMode.DIFFERENCE)
    """

    def __init__(self, config: ClipperConfig | None = None) -> None:
        self.config = config or ClipperConfig()
        self.quantizer = Quantizer(self.config.scale)

    def combine(
        self,
        subjects: Sequence[Polygon],
        clips: Sequence[Polygon],
        mode: BooleanMode,
        fill_rule: FillRule | None = None,
    ) -> list[Polygon]:
        """Apply a boolean operation between two polygon sets.

        Args:
            subjects: Polygons to clip
            clips: Polygons to clip with
            mode: Operation to apply
            fill_rule: Fill rule for both sets (default from config)

        Returns:
            Result fragments, each simple and counter-clockwise. Empty when
            the operation has no solution.
        """
        subject_paths = [self.quantizer.quantize(p) for p in subjects]
        clip_paths = [self.quantizer.quantize(p) for p in clips]
        solution = self._execute(subject_paths, clip_paths, mode, fill_rule or self.config.fill_rule)
        if not solution:
            logger.debug("Clipper returned no solution for %s", mode.value)
            return []
        return self._reconstruct_all(solution)

    def reconstruct(self, path: Sequence[Sequence[int]]) -> Polygon | None:
        """Rebuild a polygon from a clipper path.

        Returns:
            Counter-clockwise polygon, or None if the path collapsed into
            degenerate or self-intersecting geometry
        """
        points = self.quantizer.dequantize(path)
        edges = edges_from_points(points)
        if has_zero_length_edge(edges):
            logger.debug("Rejected fragment with zero-length edge")
            return None
        if self_intersects(edges):
            logger.debug("Rejected self-intersecting fragment with %d vertices", len(points))
            return None
        try:
            polygon = Polygon(tuple(points))
        except InvalidPolygonError as e:
            logger.debug("Rejected fragment: %s", e.reason)
            return None
        return normalize_winding(polygon)

    def merge(
        self,
        polygons: Sequence[Polygon],
        fill_rule: FillRule | None = None,
    ) -> list[Polygon]:
        """Fuse touching or overlapping polygons.

        The same path set is submitted as both subject and clip of a union,
        so adjacent inputs collapse into fewer fragments while disjoint ones
        stay separate.

        Args:
            polygons: Polygons to fuse
            fill_rule: Fill rule (default from config, NonZero)

        Returns:
            Merged fragments, or the input unchanged when there is nothing
            to fuse
        """
        if not polygons:
            return list(polygons)

        paths = [self.quantizer.quantize(p) for p in polygons]
        solution = self._execute(
            paths, paths, BooleanMode.UNION, fill_rule or self.config.merge_fill_rule
        )
        if not solution:
            logger.debug("Merge produced no solution, returning %d inputs", len(polygons))
            return list(polygons)
        return self._reconstruct_all(solution)

    def can_merge(self, target: Polygon, candidate: Polygon) -> bool:
        """True if merging the two polygons yields exactly one fragment."""
        return len(self.merge([target, candidate])) == 1

    def mergeable(self, target: Polygon, candidates: Sequence[Polygon]) -> list[Polygon]:
        """Candidates that fuse with ``target`` into a single fragment."""
        return [c for c in candidates if self.can_merge(target, c)]

    def difference(self, polygon: Polygon, subtrahends: Sequence[Polygon]) -> Polygon | None:
        """Subtract polygons in order, keeping only the largest fragment.

        After each subtraction every fragment but the one with the greatest
        area is discarded. Use ``differences`` to keep them all.

        Args:
            polygon: Polygon to subtract from
            subtrahends: Polygons to subtract, in order

        Returns:
            The remaining counter-clockwise polygon, or None once a
            subtrahend consumes it entirely
        """
        running = polygon
        for index, subtrahend in enumerate(subtrahends):
            fragments = self.combine([running], [subtrahend], BooleanMode.DIFFERENCE)
            if not fragments:
                logger.debug("Polygon consumed by subtrahend %d", index)
                return None
            running = max(fragments, key=_by_area)
        return normalize_winding(running)

    def differences(
        self,
        polygon: Polygon,
        subtrahends: Sequence[Polygon],
        on_consumed: ConsumedPolicy = ConsumedPolicy.STOP,
    ) -> list[Polygon]:
        """Subtract polygons in order, keeping every fragment produced.

        The largest fragment of each step is carried on as the running
        polygon; all fragments of all steps are collected.

        Args:
            polygon: Polygon to subtract from
            subtrahends: Polygons to subtract, in order
            on_consumed: STOP returns what has been collected as soon as a
                subtrahend consumes the running polygon; SKIP ignores that
                subtrahend and carries on with the rest

        Returns:
            Fragments sorted by descending area. Empty when there are no
            subtrahends.
        """
        collected: list[Polygon] = []
        running = polygon
        for index, subtrahend in enumerate(subtrahends):
            fragments = self.combine([running], [subtrahend], BooleanMode.DIFFERENCE)
            if not fragments:
                if on_consumed is ConsumedPolicy.STOP:
                    logger.debug("Polygon consumed by subtrahend %d, stopping", index)
                    break
                logger.debug("Polygon consumed by subtrahend %d, skipping it", index)
                continue
            collected.extend(fragments)
            running = max(fragments, key=_by_area)
        return sorted(collected, key=_by_area, reverse=True)

    def _execute(
        self,
        subject_paths: list[IntPath],
        clip_paths: list[IntPath],
        mode: BooleanMode,
        fill_rule: FillRule,
    ) -> list[IntPath]:
        clipper = pyclipper.Pyclipper()
        self._add_paths(clipper, subject_paths, pyclipper.PT_SUBJECT)
        self._add_paths(clipper, clip_paths, pyclipper.PT_CLIP)
        fill_type = _FILL_TYPES[fill_rule]
        return clipper.Execute(_CLIP_TYPES[mode], fill_type, fill_type)

    def _add_paths(self, clipper: pyclipper.Pyclipper, paths: list[IntPath], poly_type: int) -> None:
        if not paths:
            return
        try:
            clipper.AddPaths(paths, poly_type, True)
        except pyclipper.ClipperException:
            # Every path degenerated on the lattice; they contribute no area.
            logger.debug("Clipper rejected all %d paths", len(paths))

    def _reconstruct_all(self, solution: list[IntPath]) -> list[Polygon]:
        fragments = []
        for path in solution:
            polygon = self.reconstruct(path)
            if polygon is not None:
                fragments.append(polygon)
        return fragments


_default_engine = BooleanEngine()


def combine(
    subjects: Sequence[Polygon],
    clips: Sequence[Polygon],
    mode: BooleanMode,
    fill_rule: FillRule | None = None,
) -> list[Polygon]:
    """Apply a boolean operation with the default engine."""
    return _default_engine.combine(subjects, clips, mode, fill_rule)


def merge(polygons: Sequence[Polygon], fill_rule: FillRule | None = None) -> list[Polygon]:
    """Fuse touching or overlapping polygons with the default engine."""
    return _default_engine.merge(polygons, fill_rule)


def can_merge(target: Polygon, candidate: Polygon) -> bool:
    return _default_engine.can_merge(target, candidate)


def mergeable(target: Polygon, candidates: Sequence[Polygon]) -> list[Polygon]:
    return _default_engine.mergeable(target, candidates)


def difference(polygon: Polygon, subtrahends: Sequence[Polygon]) -> Polygon | None:
    """Largest-fragment sequential difference with the default engine."""
    return _default_engine.difference(polygon, subtrahends)


def differences(
    polygon: Polygon,
    subtrahends: Sequence[Polygon],
    on_consumed: ConsumedPolicy = ConsumedPolicy.STOP,
) -> list[Polygon]:
    """All-fragments sequential difference with the default engine."""
    return _default_engine.differences(polygon, subtrahends, on_consumed)
