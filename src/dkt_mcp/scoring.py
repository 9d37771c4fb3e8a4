"""Shared scoring math: composite z-scores and percentile conversion.

The normal CDF is the Abramowitz-Stegun 7.1.26 rational approximation of
erf, not ``math.erf``. Published percentiles were produced with this
approximation and must reproduce exactly.

References:
    Abramowitz M, Stegun IA. Handbook of Mathematical Functions. 1964. Eq. 7.1.26.
    Hastings C. Approximations for Digital Computers. 1955.
"""

import math

from dkt_mcp.constants import (
    METRIC_WEIGHT_TOTAL,
    PERCENTILE_MAX,
    PERCENTILE_MIN,
)
from dkt_mcp.models import MetricNorm, RegionMetrics, RegionNorm

# Abramowitz-Stegun 7.1.26 coefficients
A1 = 0.254829592
A2 = -0.284496736
A3 = 1.421413741
A4 = -1.453152027
A5 = 1.061405429
P = 0.3275911

MetricWeights = tuple[float, float, float]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves toward +infinity, leaving NaN and infinities untouched.

    Python's ``round`` rounds half to even, which shifts percentiles such as
    50.5 down to 50; reports have always shown 51. Values too large to scale
    are returned as-is.
    """
    scaled = value * 10 ** ndigits + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / 10 ** ndigits


def z_score(value: float, norm: MetricNorm) -> float:
    return (value - norm.mean) / norm.std


def composite_z_score(metrics: RegionMetrics, norm: RegionNorm, metric_weights: MetricWeights) -> float:
    """Weighted sum of per-channel z-scores for one region on one side.

    Args:
        metrics: Observed thickness, surface area and volume
        norm: Reference norms for the region
        metric_weights: (thickness, surface area, volume) in percent, summing to 100

    Returns:
        Composite z-score (unclamped)
    """
    w_thick, w_area, w_vol = (w / METRIC_WEIGHT_TOTAL for w in metric_weights)
    return (
        z_score(metrics.thickness, norm.thickness) * w_thick
        + z_score(metrics.surface_area, norm.surface_area) * w_area
        + z_score(metrics.volume, norm.volume) * w_vol
    )


def z_to_percentile(z: float) -> float:
    """Convert a z-score to a population percentile in [0, 100].

    Higher z gives a higher percentile. NaN propagates.
    """
    sign = -1.0 if z < 0 else 1.0
    abs_z = abs(z)
    t = 1.0 / (1.0 + P * abs_z)
    y = 1.0 - (((((A5 * t + A4) * t) + A3) * t + A2) * t + A1) * t * math.exp(-abs_z * abs_z / 2)
    return round_half_up(0.5 * (1.0 + sign * y) * 100)


def clamp_percentile(percentile: float) -> float:
    """Clamp to [1, 99]; NaN passes through."""
    if math.isnan(percentile):
        return percentile
    return min(PERCENTILE_MAX, max(PERCENTILE_MIN, percentile))


def as_percentile(value: float) -> float:
    """Return an int when finite so results serialize as whole numbers."""
    return int(value) if math.isfinite(value) else value


# =============================================================================
# Percentile Strategies
# =============================================================================


class PercentileStrategy:
    """Maps an index score to a percentile. One subclass per curve shape."""

    name = "base"

    def percentile(self, score: float) -> float:
        raise NotImplementedError


class GaussianPercentile(PercentileStrategy):
    """Shared normal-CDF converter, clamped to [1, 99]."""

    name = "gaussian"

    def percentile(self, score: float) -> float:
        return as_percentile(clamp_percentile(z_to_percentile(score)))


class LanguageLateralizationPercentile(PercentileStrategy):
    """Piecewise-linear curve for the bounded language laterality ratio.

    Breakpoints at li = 0.20, 0.05, -0.05 and -0.15.
    """

    name = "language_lateralization"

    def percentile(self, score: float) -> float:
        li = score
        if li >= 0.20:
            raw = min(99.0, 95 + (li - 0.20) * 20)
        elif li >= 0.05:
            raw = 80 + (li - 0.05) * 100
        elif li >= -0.05:
            raw = 50 + li * 300
        elif li >= -0.15:
            raw = 20 + (li + 0.05) * 300
        elif math.isnan(li):
            return li
        else:
            raw = max(1.0, 5 + (li + 0.15) * 100)
        return as_percentile(round_half_up(clamp_percentile(raw)))


class NostrilPercentile(PercentileStrategy):
    """Linear curve: 50 + 40 per unit of score, clamped to [1, 99]."""

    name = "nostril"

    def percentile(self, score: float) -> float:
        return as_percentile(clamp_percentile(round_half_up(50 + score * 40)))


GAUSSIAN = GaussianPercentile()
LANGUAGE_LATERALIZATION = LanguageLateralizationPercentile()
NOSTRIL = NostrilPercentile()


# =============================================================================
# Whole-brain Metric Percentiles
# =============================================================================


def basic_metric_percentile(value: float, norm: MetricNorm) -> float:
    """Population "top X%" rank of a whole-brain metric, clamped to [1, 99].

    Uses the Hastings polynomial approximation of the normal CDF. A value at
    the mean gives 50; larger values give smaller (better) ranks.
    """
    z = (value - norm.mean) / norm.std
    t = 1 / (1 + 0.2316419 * abs(z))
    d = 0.3989423 * math.exp(-z * z / 2)
    p = d * t * (0.3193815 + t * (-0.3565638 + t * (1.781478 + t * (-1.821256 + t * 1.330274))))
    cdf = 1 - p if z > 0 else p
    return as_percentile(clamp_percentile(round_half_up((1 - cdf) * 100)))
