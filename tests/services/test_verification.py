"""Tests for one-to-one verification."""
import numpy as np
import pytest

from facematch.core.exceptions import DimensionMismatchError
from facematch.services.verification import verify


class TestVerify:
    def test_identical_descriptors_match(self, random_descriptor):
        d = random_descriptor()
        result = verify(d, d, threshold=0.5)
        assert result.is_match is True
        assert result.distance == 0.0
        assert result.score == 100.0

    def test_distance_equal_to_threshold_is_not_a_match(self, origin, axis):
        result = verify(origin, axis(0, 0.5), threshold=0.5)
        assert result.distance == 0.5
        assert result.is_match is False

    def test_distance_just_below_threshold_matches(self, origin, axis):
        threshold = float(np.nextafter(0.5, 1.0))
        result = verify(origin, axis(0, 0.5), threshold=threshold)
        assert result.is_match is True

    def test_score_follows_distance(self, origin, axis):
        result = verify(origin, axis(1, 0.25), threshold=0.6)
        assert result.score == pytest.approx(75.0)
        assert result.rounded_percentage == 75

    def test_far_probe_scores_zero(self, origin, axis):
        result = verify(origin, axis(1, 1.5), threshold=0.6)
        assert result.is_match is False
        assert result.score == 0.0

    def test_threshold_is_per_call(self, origin, axis):
        probe = axis(3, 0.55)
        assert verify(origin, probe, threshold=0.5).is_match is False
        assert verify(origin, probe, threshold=0.6).is_match is True

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            verify([0.0, 0.0], [0.0, 0.0, 0.0], threshold=0.5)
