"""Unit tests for the seedable random source."""

import pytest

from polyshaper.core.sampling import RandomSource


class TestRandomSource:
    def test_seed_replays(self):
        first = RandomSource(seed=42)
        second = RandomSource(seed=42)
        assert [first.uniform(0, 10) for _ in range(20)] == [second.uniform(0, 10) for _ in range(20)]

    def test_within_range(self):
        source = RandomSource(seed=7)
        for _ in range(200):
            value = source.uniform(-2.5, 3.5)
            assert -2.5 <= value < 3.5

    def test_rounded_to_precision(self):
        source = RandomSource(seed=1, precision=0.25)
        for _ in range(50):
            assert (source.uniform(0, 10) * 4) % 1 == 0

    def test_empty_range(self):
        assert RandomSource(seed=1).uniform(3.0, 3.0) == pytest.approx(3.0)

    def test_inverted_range(self):
        with pytest.raises(ValueError):
            RandomSource(seed=1).uniform(5.0, 1.0)

    def test_invalid_precision(self):
        with pytest.raises(ValueError):
            RandomSource(precision=0.0)
