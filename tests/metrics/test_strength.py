"""Tests for 1RM estimation."""

import pytest

from hevy_notes.metrics.strength import best_one_rep_max, estimate_one_rep_max
from hevy_notes.models.workouts import RemoteSet


class TestEstimateOneRepMax:
    """Tests for the Epley estimate."""

    def test_epley_formula(self):
        """Test 100 kg x 5 reps."""
        assert estimate_one_rep_max(100, 5) == pytest.approx(116.6667, abs=1e-4)

    def test_single_rep(self):
        assert estimate_one_rep_max(100, 1) == pytest.approx(103.3333, abs=1e-4)

    def test_missing_values(self):
        """Test that missing or zero weight/reps estimate zero."""
        assert estimate_one_rep_max(None, 5) == 0.0
        assert estimate_one_rep_max(100, None) == 0.0
        assert estimate_one_rep_max(0, 5) == 0.0
        assert estimate_one_rep_max(100, 0) == 0.0

    def test_monotonic_in_reps(self):
        """Test that more reps at the same weight never lowers the estimate."""
        estimates = [estimate_one_rep_max(60, reps) for reps in range(1, 21)]
        assert all(a < b for a, b in zip(estimates, estimates[1:]))

    @pytest.mark.parametrize("weight,reps", [(20, 1), (62.5, 3), (100, 5), (180, 12)])
    def test_never_below_lifted_weight(self, weight, reps):
        assert estimate_one_rep_max(weight, reps) >= weight

    def test_monotonic_in_weight(self):
        estimates = [estimate_one_rep_max(weight, 5) for weight in (20, 40, 60, 80)]
        assert estimates == sorted(estimates)


class TestBestOneRepMax:
    """Tests for best_one_rep_max."""

    def test_picks_highest_estimate(self):
        """Test that the best set wins, not the heaviest."""
        sets = [
            RemoteSet(weight_kg=100, reps=5),
            RemoteSet(weight_kg=90, reps=8),
            RemoteSet(weight_kg=80, reps=15),
        ]
        # 80 x 15 = 120.0 beats 100 x 5 = 116.7
        assert best_one_rep_max(sets) == pytest.approx(120.0)

    def test_ignores_incomplete_sets(self):
        sets = [
            RemoteSet(weight_kg=None, reps=10),
            RemoteSet(weight_kg=50, reps=None),
            RemoteSet(weight_kg=60, reps=3),
        ]
        assert best_one_rep_max(sets) == pytest.approx(66.0)

    def test_no_usable_sets(self):
        """Test that bodyweight-only exercises estimate zero."""
        assert best_one_rep_max([RemoteSet(reps=12)]) == 0.0
        assert best_one_rep_max([]) == 0.0
