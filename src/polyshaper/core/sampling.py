"""Seedable random values for reproducible layout generation."""

import random


class RandomSource:
    """A reusable random generator with an explicit seed.

    One instance is meant to be shared by every caller of a layout run, so
    the whole run replays exactly when the seed is fixed.

    Attributes:
        seed: Seed the generator was created with (None = system entropy)
    """

    def __init__(self, seed: int | None = None, precision: float = 1e-6) -> None:
        if precision <= 0.0:
            raise ValueError(f"Precision must be positive, got {precision}")
        self.seed = seed
        self.precision = precision
        self._rng = random.Random(seed)

    def uniform(self, min_value: float, max_value: float) -> float:
        """Random value in ``[min_value, max_value)`` rounded to ``precision``.

        Raises:
            ValueError: If max_value is below min_value
        """
        if max_value < min_value:
            raise ValueError(f"Empty range [{min_value}, {max_value})")
        steps = round(1.0 / self.precision)
        low = round(min_value * steps)
        high = round(max_value * steps)
        if high <= low:
            return low / steps
        return self._rng.randrange(low, high) / steps
