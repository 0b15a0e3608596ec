"""
Tests for shared formulas module.

Tests the mathematical formulas used across calculators.
"""

import pytest
import math

from tendon_load.shared.constants import Grip
from tendon_load.shared.formulas import (
    clamp,
    relative_intensity,
    freshness_factor,
    density_factor,
    climb_weight,
    edge_scaling,
    grip_multiplier,
)


# =============================================================================
# Test Relative Intensity
# =============================================================================

class TestRelativeIntensity:
    """Tests for relative_intensity function."""

    def test_formula_matches_documentation(self):
        """Verify formula: RI = 0.35 + 0.75 / (1 + exp(delta - 1.5))."""
        for delta in [-2.0, -1.0, 0.0, 1.0, 2.0, 4.0]:
            expected = 0.35 + 0.75 / (1 + math.exp(delta - 1.5))
            assert relative_intensity(delta) == pytest.approx(expected, rel=1e-9)

    def test_known_values(self):
        """Climbs 2, 1 and 0 grades below max."""
        assert relative_intensity(2.0) == pytest.approx(0.6332, abs=1e-4)
        assert relative_intensity(1.0) == pytest.approx(0.8168, abs=1e-4)
        assert relative_intensity(0.0) == pytest.approx(0.9632, abs=1e-4)

    def test_midpoint(self):
        """At delta = 1.5 the logistic term is exactly half."""
        assert relative_intensity(1.5) == pytest.approx(0.35 + 0.375)

    def test_monotonic_non_increasing(self):
        """Easier climbs (larger delta) never score higher."""
        deltas = [d / 4 for d in range(-40, 41)]
        values = [relative_intensity(d) for d in deltas]
        for a, b in zip(values, values[1:]):
            assert b <= a

    def test_bounds_for_extreme_deltas(self):
        """No overflow; floor ~0.35, ceiling ~1.1, never above 1.15."""
        for delta in [-1e6, -1000.0, -50.0, 50.0, 1000.0, 1e6]:
            ri = relative_intensity(delta)
            assert 0.0 <= ri <= 1.15

        assert relative_intensity(1000.0) == pytest.approx(0.35)
        assert relative_intensity(-1000.0) == pytest.approx(1.1)

    def test_above_max_grade(self):
        """Climbs above max approach the 1.1 asymptote."""
        assert 1.0 < relative_intensity(-3.0) < 1.1


# =============================================================================
# Test Freshness Factor
# =============================================================================

class TestFreshnessFactor:
    """Tests for freshness_factor function."""

    def test_zero_rest(self):
        assert freshness_factor(0) == pytest.approx(0.85)

    def test_two_days(self):
        assert freshness_factor(2) == pytest.approx(0.89)

    def test_flat_beyond_ten_days(self):
        """All rest >= 10 days gives FR(10) = 1.05."""
        assert freshness_factor(10) == pytest.approx(1.05)
        for days in [10, 11, 14, 30, 365]:
            assert freshness_factor(days) == freshness_factor(10)

    def test_negative_rest_treated_as_zero(self):
        assert freshness_factor(-5) == pytest.approx(0.85)

    def test_always_within_bounds(self):
        for days in [-100, -1, 0, 0.5, 3, 7.5, 10, 100]:
            assert 0.75 <= freshness_factor(days) <= 1.1

    def test_monotonic_non_decreasing(self):
        values = [freshness_factor(d / 2) for d in range(0, 30)]
        for a, b in zip(values, values[1:]):
            assert b >= a


# =============================================================================
# Test Density Factor
# =============================================================================

class TestDensityFactor:
    """Tests for density_factor function."""

    def test_zero_exponent_disables(self):
        """DF(w, r, 0) = 1 for any w, r >= 0."""
        for work, rest in [(0, 0), (10, 0), (0, 100), (90, 180)]:
            assert density_factor(work, rest, 0) == 1.0

    def test_no_rest_is_full_credit(self):
        """DF(w, 0, e) = 1 once work covers the 1-second guard."""
        for work in [1, 50, 300]:
            for exponent in [0.25, 0.5, 1.0]:
                assert density_factor(work, 0, exponent) == pytest.approx(1.0)

    def test_known_value(self):
        """90s work, 180s rest, exponent 0.5 -> sqrt(1/3)."""
        assert density_factor(90, 180, 0.5) == pytest.approx(math.sqrt(1 / 3))

    def test_linear_exponent(self):
        assert density_factor(50, 150, 1.0) == pytest.approx(0.25)

    def test_zero_work_and_rest(self):
        """max(1, ...) guard prevents division by zero."""
        assert density_factor(0, 0, 0.5) == 0.0

    def test_non_decreasing_in_work(self):
        values = [density_factor(w, 100, 0.5) for w in range(0, 500, 25)]
        for a, b in zip(values, values[1:]):
            assert b >= a

    def test_non_increasing_in_rest(self):
        values = [density_factor(100, r, 0.5) for r in range(0, 500, 25)]
        for a, b in zip(values, values[1:]):
            assert b <= a


# =============================================================================
# Test Climb Weight
# =============================================================================

class TestClimbWeight:
    """Tests for climb_weight function."""

    def test_first_climb_always_one(self):
        for rate in [0.0, 0.02, 0.5, 3.0]:
            assert climb_weight(1, rate) == 1.0

    def test_zero_rate_no_weighting(self):
        for position in range(1, 30):
            assert climb_weight(position, 0) == 1.0

    def test_negative_rate_no_weighting(self):
        assert climb_weight(10, -0.5) == 1.0

    def test_twentieth_climb(self):
        """exp(-0.02 * 19) ~ 0.684."""
        assert climb_weight(20, 0.02) == pytest.approx(math.exp(-0.38))
        assert climb_weight(20, 0.02) == pytest.approx(0.684, abs=1e-3)

    def test_strictly_decreasing(self):
        values = [climb_weight(i, 0.1) for i in range(1, 15)]
        for a, b in zip(values, values[1:]):
            assert b < a


# =============================================================================
# Test Edge and Grip
# =============================================================================

class TestEdgeAndGrip:
    """Tests for edge_scaling and grip_multiplier."""

    def test_reference_edge(self):
        assert edge_scaling(20) == pytest.approx(1.0)

    def test_smaller_edge_scales_up(self):
        assert edge_scaling(15, 0.45) == pytest.approx((20 / 15) ** 0.45)
        assert edge_scaling(15) > 1.0
        assert edge_scaling(25) < 1.0

    def test_zero_edge_is_caller_error(self):
        with pytest.raises(ZeroDivisionError):
            edge_scaling(0)

    def test_negative_edge_is_caller_error(self):
        with pytest.raises(ValueError):
            edge_scaling(-10, 0.45)

    def test_grip_multipliers(self):
        assert grip_multiplier(Grip.OPEN) == 0.85
        assert grip_multiplier(Grip.HALF) == 1.0
        assert grip_multiplier(Grip.FULL) == 1.1

    def test_grip_from_string(self):
        assert grip_multiplier("full") == 1.1


# =============================================================================
# Test Clamp
# =============================================================================

class TestClamp:

    def test_clamp(self):
        assert clamp(5, 0, 1) == 1
        assert clamp(-5, 0, 1) == 0
        assert clamp(0.5, 0, 1) == 0.5
