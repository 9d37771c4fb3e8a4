"""Unit tests for z-score and percentile math."""

import math

import pytest

from conftest import at_mean
from dkt_mcp.models import MetricNorm
from dkt_mcp.norms import BASIC_METRIC_NORMS, REFERENCE_NORMS
from dkt_mcp.scoring import (
    GAUSSIAN,
    LANGUAGE_LATERALIZATION,
    NOSTRIL,
    basic_metric_percentile,
    clamp_percentile,
    composite_z_score,
    round_half_up,
    z_score,
    z_to_percentile,
)


class TestRoundHalfUp:
    """Test half-up rounding."""

    def test_half_rounds_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_negative_half_rounds_toward_positive(self):
        assert round_half_up(-0.5) == 0
        assert round_half_up(-1.5) == -1

    def test_decimals(self):
        assert round_half_up(0.125, 2) == 0.13

    def test_nan_passes_through(self):
        assert math.isnan(round_half_up(math.nan, 3))

    def test_infinity_passes_through(self):
        assert round_half_up(math.inf) == math.inf

    def test_too_large_to_scale_passes_through(self):
        assert round_half_up(1e306, 3) == 1e306
        assert round_half_up(-1e306, 3) == -1e306


class TestCompositeZScore:
    """Test the weighted per-channel z-score."""

    def test_z_score(self):
        assert z_score(1370.0, MetricNorm(1250.0, 120.0)) == pytest.approx(1.0)

    def test_at_mean_is_zero(self):
        norm = REFERENCE_NORMS["precentral"]

        assert composite_z_score(at_mean("precentral"), norm, (60, 30, 10)) == 0.0

    def test_weights_divided_by_100(self):
        norm = REFERENCE_NORMS["precentral"]
        metrics = at_mean("precentral", thickness=2.83, surface_area=6050)

        # thickness z=+1, surface area z=+1, volume z=0
        assert composite_z_score(metrics, norm, (60, 30, 10)) == pytest.approx(0.9)

    def test_unclamped(self):
        norm = REFERENCE_NORMS["cuneus"]
        metrics = at_mean("cuneus", thickness=1.95 + 10 * 0.15)

        assert composite_z_score(metrics, norm, (100, 0, 0)) == pytest.approx(10.0)

    def test_nan_propagates(self):
        norm = REFERENCE_NORMS["cuneus"]

        assert math.isnan(composite_z_score(at_mean("cuneus", thickness=math.nan), norm, (92, 4, 4)))


class TestZToPercentile:
    """Test the normal-CDF percentile converter."""

    def test_zero_is_midpoint(self):
        assert z_to_percentile(0.0) == 50

    @pytest.mark.parametrize("z,expected", [(1.0, 84), (-1.0, 16), (2.0, 98), (0.66, 75)])
    def test_known_values(self, z, expected):
        assert z_to_percentile(z) == expected

    def test_monotonic(self):
        values = [z_to_percentile(z / 10) for z in range(-40, 41)]

        assert values == sorted(values)

    @pytest.mark.parametrize("z", [0.3, 1.0, 1.7, 2.2])
    def test_symmetric(self, z):
        assert z_to_percentile(z) + z_to_percentile(-z) == 100

    def test_unclamped_extremes(self):
        assert z_to_percentile(5.0) == 100
        assert z_to_percentile(-5.0) == 0

    def test_nan_propagates(self):
        assert math.isnan(z_to_percentile(math.nan))


class TestClampPercentile:
    def test_clamps(self):
        assert clamp_percentile(0) == 1
        assert clamp_percentile(100) == 99
        assert clamp_percentile(42) == 42

    def test_nan_passes_through(self):
        assert math.isnan(clamp_percentile(math.nan))


class TestPercentileStrategies:
    """Test the three percentile curves."""

    def test_gaussian_clamped(self):
        assert GAUSSIAN.percentile(3.0) == 99
        assert GAUSSIAN.percentile(-3.0) == 1
        assert GAUSSIAN.percentile(0.0) == 50

    def test_gaussian_returns_int(self):
        assert isinstance(GAUSSIAN.percentile(0.4), int)

    @pytest.mark.parametrize(
        "li,expected",
        [
            (0.0, 50),
            (0.10, 85),
            (0.20, 95),
            (0.50, 99),
            (-0.10, 5),
            (-0.5, 1),
        ],
    )
    def test_language_lateralization_curve(self, li, expected):
        assert LANGUAGE_LATERALIZATION.percentile(li) == expected

    def test_language_lateralization_nan(self):
        assert math.isnan(LANGUAGE_LATERALIZATION.percentile(math.nan))

    @pytest.mark.parametrize("score,expected", [(0.0, 50), (0.5, 70), (-0.5, 30), (2.0, 99), (-2.0, 1)])
    def test_nostril_curve(self, score, expected):
        assert NOSTRIL.percentile(score) == expected

    def test_strategies_named(self):
        assert {GAUSSIAN.name, LANGUAGE_LATERALIZATION.name, NOSTRIL.name} == {
            "gaussian",
            "language_lateralization",
            "nostril",
        }


class TestBasicMetricPercentile:
    """Test the whole-brain "top X%" rank."""

    def test_mean_is_fifty(self):
        assert basic_metric_percentile(1250.0, BASIC_METRIC_NORMS["brain_vol"]) == 50

    def test_one_sd_above_is_top_sixteen(self):
        assert basic_metric_percentile(1370.0, BASIC_METRIC_NORMS["brain_vol"]) == 16

    def test_one_sd_below(self):
        assert basic_metric_percentile(1130.0, BASIC_METRIC_NORMS["brain_vol"]) == 84

    def test_clamped(self):
        assert basic_metric_percentile(5000.0, BASIC_METRIC_NORMS["brain_vol"]) == 1
        assert basic_metric_percentile(0.0, BASIC_METRIC_NORMS["brain_vol"]) == 99
