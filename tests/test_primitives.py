"""
Tests for the scoring primitives and random sources.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from travelverse.core.primitives import (
    SeededRandomSource,
    SequenceRandomSource,
    bound_position,
    clamp,
    inject_noise,
    seed_from_string,
    weighted_sum,
    wrap_longitude,
)


class TestClamp:
    """Tests for clamp."""

    def test_inside_interval_unchanged(self):
        assert clamp(0.42, 0.0, 1.0) == 0.42

    def test_bounds(self):
        assert clamp(1.3, 0.0, 1.0) == 1.0
        assert clamp(-0.2, 0.0, 1.0) == 0.0
        assert clamp(-1.7, -1.0, 1.0) == -1.0

    def test_inverted_interval_rejected(self):
        with pytest.raises(ValueError):
            clamp(0.5, 1.0, 0.0)


class TestGlobeBounds:
    """Tests for wrap_longitude and bound_position."""

    @pytest.mark.parametrize("lng,expected", [
        (0.0, 0.0),
        (179.5, 179.5),
        (180.0, -180.0),
        (180.25, -179.75),
        (-180.0, -180.0),
        (-180.5, 179.5),
        (540.0, -180.0),
    ])
    def test_wrap_longitude(self, lng, expected):
        assert wrap_longitude(lng) == pytest.approx(expected)

    def test_tiny_negative_stays_in_range(self):
        assert -180.0 <= wrap_longitude(-1e-20) < 180.0

    def test_bound_position_clamps_latitude(self):
        assert bound_position(90.0005, 10.0) == (90.0, 10.0)
        assert bound_position(-91.0, 10.0) == (-90.0, 10.0)


class TestWeightedSum:
    """Tests for weighted_sum."""

    def test_basic(self):
        score = weighted_sum([(0.5, 0.2), (1.0, 0.3)])
        assert score == pytest.approx(0.4)

    def test_negative_weight_acts_as_penalty(self):
        score = weighted_sum([(1.0, 0.5), (0.3, -0.1)])
        assert score == pytest.approx(0.47)

    def test_empty(self):
        assert weighted_sum([]) == 0.0


class TestInjectNoise:
    """Tests for inject_noise."""

    def test_midpoint_draw_is_noise_free(self):
        rng = SequenceRandomSource([0.5])
        assert inject_noise(0.7, 0.05, rng) == pytest.approx(0.7)

    def test_low_draw_subtracts_full_magnitude(self):
        rng = SequenceRandomSource([0.0])
        assert inject_noise(0.7, 0.05, rng) == pytest.approx(0.65)

    def test_perturbation_bounded(self):
        rng = SeededRandomSource(7)
        for _ in range(200):
            noisy = inject_noise(0.5, 0.05, rng)
            assert 0.45 <= noisy < 0.55, f"Noise escaped its magnitude: {noisy}"

    def test_consumes_exactly_one_draw(self):
        rng = SequenceRandomSource([0.1, 0.9])
        inject_noise(0.5, 0.1, rng)
        assert rng.draws == 1

    def test_negative_magnitude_rejected(self):
        with pytest.raises(ValueError):
            inject_noise(0.5, -0.1, SequenceRandomSource([0.5]))


class TestRandomSources:
    """Tests for the injectable random sources."""

    def test_sequence_cycles(self):
        rng = SequenceRandomSource([0.1, 0.2])
        assert [rng.next() for _ in range(5)] == [0.1, 0.2, 0.1, 0.2, 0.1]

    def test_sequence_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            SequenceRandomSource([0.5, 1.0])

    def test_sequence_rejects_empty(self):
        with pytest.raises(ValueError):
            SequenceRandomSource([])

    def test_same_seed_same_stream(self):
        a = SeededRandomSource("trip-123")
        b = SeededRandomSource("trip-123")
        assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]

    def test_different_seeds_differ(self):
        a = SeededRandomSource("trip-123")
        b = SeededRandomSource("trip-124")
        assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]

    def test_string_seed_is_stable(self):
        assert seed_from_string("abc") == seed_from_string("abc")
        assert SeededRandomSource("abc").seed == seed_from_string("abc")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
