"""
Tests for per-climb bouldering load.

Tests compute_bouldering_tli and its intermediate metrics.
"""

import math

import pytest

from tendon_load.features.bouldering.calculators import (
    Climb,
    BoulderingParams,
    compute_bouldering_tli,
    session_rest_seconds,
)
from tendon_load.shared.calculator_types import BoulderingMode
from tendon_load.shared.formulas import relative_intensity


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_params():
    """V8 climber, 2 rest days, three climbs up to max grade."""
    return BoulderingParams(
        v_max=8,
        rest_days=2,
        avg_rest_between_climbs_sec=90,
        density_exp=0.5,
        use_density=True,
        fatigue_rate=0.02,
        climbs=(Climb(6, 25), Climb(7, 30), Climb(8, 35)),
    )


def _params(**overrides):
    values = dict(
        v_max=8,
        rest_days=0,
        avg_rest_between_climbs_sec=0,
        density_exp=0.5,
        use_density=False,
        fatigue_rate=0.0,
        climbs=(),
    )
    values.update(overrides)
    return BoulderingParams(**values)


# =============================================================================
# Test Worked Example
# =============================================================================

class TestWorkedExample:
    """End-to-end example with every factor active."""

    def test_intermediate_metrics(self, sample_params):
        result = compute_bouldering_tli(sample_params)

        assert result.total_tut == 90
        assert result.total_rest_within == 180
        assert result.freshness_factor == pytest.approx(0.89)
        assert result.density_factor == pytest.approx(math.sqrt(90 / 270))
        assert result.mode == BoulderingMode.PER_CLIMB

    def test_contributions(self, sample_params):
        result = compute_bouldering_tli(sample_params)
        c1, c2, c3 = result.contributions

        assert (c1.position, c1.delta, c1.weight) == (1, 2, 1.0)
        assert c1.contribution == pytest.approx(relative_intensity(2) * 25)

        assert c2.weight == pytest.approx(math.exp(-0.02))
        assert c2.contribution == pytest.approx(relative_intensity(1) * 30 * math.exp(-0.02))

        assert c3.weight == pytest.approx(math.exp(-0.04))
        assert c3.contribution == pytest.approx(relative_intensity(0) * 35 * math.exp(-0.04))

    def test_total(self, sample_params):
        result = compute_bouldering_tli(sample_params)

        raw = sum(c.contribution for c in result.contributions)
        assert raw == pytest.approx(72.24, abs=0.01)
        assert result.total == pytest.approx(0.89 * math.sqrt(1 / 3) * raw)
        assert result.total == pytest.approx(37.12, abs=0.01)


# =============================================================================
# Test Edge Cases
# =============================================================================

class TestEdgeCases:
    """Tests for edge cases and boundary conditions."""

    def test_no_climbs(self):
        result = compute_bouldering_tli(_params(use_density=True, rest_days=3))

        assert result.total == 0
        assert result.total_tut == 0
        assert result.total_rest_within == 0
        assert result.contributions == []

    def test_single_climb_has_no_rest(self):
        result = compute_bouldering_tli(
            _params(avg_rest_between_climbs_sec=120, climbs=(Climb(7, 40),))
        )
        assert result.total_rest_within == 0

    def test_negative_tut_clamped(self):
        result = compute_bouldering_tli(
            _params(climbs=(Climb(7, -30), Climb(7, 20)))
        )
        assert result.total_tut == 20
        assert result.contributions[0].contribution == 0
        assert result.contributions[0].tut_sec == 0

    def test_negative_rest_clamped(self):
        assert session_rest_seconds(5, -60) == 0
        assert session_rest_seconds(0, 60) == 0
        assert session_rest_seconds(4, 60) == 180

    def test_density_disabled(self):
        result = compute_bouldering_tli(
            _params(avg_rest_between_climbs_sec=300, climbs=(Climb(7, 20), Climb(7, 20)))
        )
        assert result.density_factor == 1.0

    def test_zero_density_exponent(self):
        result = compute_bouldering_tli(
            _params(
                use_density=True,
                density_exp=0,
                avg_rest_between_climbs_sec=300,
                climbs=(Climb(7, 20), Climb(7, 20)),
            )
        )
        assert result.density_factor == 1.0


# =============================================================================
# Test Order Sensitivity
# =============================================================================

class TestOrderSensitivity:
    """Fatigue weighting follows list order, not grade order."""

    def test_order_matters_with_fatigue(self):
        hard_first = _params(fatigue_rate=0.1, climbs=(Climb(8, 30), Climb(5, 30)))
        easy_first = _params(fatigue_rate=0.1, climbs=(Climb(5, 30), Climb(8, 30)))

        assert compute_bouldering_tli(hard_first).total > compute_bouldering_tli(easy_first).total

    def test_order_irrelevant_without_fatigue(self):
        a = _params(climbs=(Climb(8, 30), Climb(5, 30)))
        b = _params(climbs=(Climb(5, 30), Climb(8, 30)))

        assert compute_bouldering_tli(a).total == pytest.approx(compute_bouldering_tli(b).total)

    def test_more_rest_days_more_load(self):
        """Freshness raises credited load."""
        tired = compute_bouldering_tli(_params(rest_days=0, climbs=(Climb(7, 30),)))
        fresh = compute_bouldering_tli(_params(rest_days=5, climbs=(Climb(7, 30),)))

        assert fresh.total > tired.total
        assert fresh.total / tired.total == pytest.approx(0.95 / 0.85)


class TestToDict:

    def test_to_dict(self, sample_params):
        data = compute_bouldering_tli(sample_params).to_dict()

        assert data["mode"] == "per_climb"
        assert data["total"] == pytest.approx(37.12, abs=0.01)
        assert len(data["contributions"]) == 3
