"""Index calculator skeleton and configuration records.

Every one of the 19 indices is an ``IndexSpec``: a frozen record holding
its contributing regions, hemisphere blend, aggregation rule, rounding,
interpretation ladder, percentile curve and descriptive metadata.
``calculate_index`` evaluates any spec against a pair of hemisphere maps.

Sign conventions differ between indices. A positive handedness score means
left-hemisphere (right-hand) dominance, a positive spatial attention score
means right-hemisphere dominance. The blend on each spec is authoritative.
"""

import logging
import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional

from dkt_mcp.constants import (
    DETAIL_DECIMALS,
    DYSLEXIA_COVERAGE_SCALE,
    LANGUAGE_LI_EPSILON,
    METRIC_WEIGHT_TOTAL,
)
from dkt_mcp.models import HemisphereRegionMap, IndexResult, RegionDetail, RegionNorm
from dkt_mcp.norms import REFERENCE_NORMS
from dkt_mcp.scoring import GAUSSIAN, MetricWeights, PercentileStrategy, composite_z_score, round_half_up

logger = logging.getLogger("dkt-mcp")


# =============================================================================
# Index Identity
# =============================================================================


class IndexId(Enum):
    """The 19 indices, in the positional order consumers rely on."""

    # Basic lateralization (0-3)
    HANDEDNESS = "Handedness Index"
    DOMINANT_EYE = "Dominant Eye Index"
    PREFERRED_NOSTRIL = "Preferred Nostril Index"
    LANGUAGE_LATERALIZATION = "Language Lateralization Index"
    # Advanced functional lateralization (4-10)
    SPATIAL_ATTENTION = "Spatial Attention Lateralization Index"
    EMOTION = "Emotion Processing Lateralization Index"
    FACE_RECOGNITION = "Face Recognition Lateralization Index"
    MUSIC = "Music Perception Lateralization Index"
    THEORY_OF_MIND = "Theory of Mind Lateralization Index"
    LOGICAL_REASONING = "Logical Reasoning Lateralization Index"
    MATHEMATICAL_ABILITY = "Mathematical Ability Lateralization Index"
    # Sensory (11)
    OLFACTORY = "Olfactory Function Index"
    # Language and reading (12-14)
    LANGUAGE = "Language Composite Index"
    READING = "Reading Fluency Index"
    DYSLEXIA_RISK = "Dyslexia Structural Risk Index"
    # Cognitive ability (15-18)
    EMPATHY = "Empathy Index"
    EXECUTIVE = "Executive Function Index"
    SPATIAL = "Spatial Processing Index"
    FLUID_INTELLIGENCE = "Fluid Intelligence Index (Structural)"


# =============================================================================
# Configuration Records
# =============================================================================


@dataclass(frozen=True)
class RegionWeight:
    """One contributing region of an index.

    ``source_region`` lets a region without its own parcel borrow another's
    data (piriform cortex is read from entorhinal).
    """

    region: str
    weight: float
    metric_weights: MetricWeights
    source_region: Optional[str] = None

    @property
    def data_region(self) -> str:
        return self.source_region or self.region

    @property
    def weights_used(self) -> str:
        return ":".join(f"{w:g}" for w in self.metric_weights)


@dataclass(frozen=True)
class Blend:
    """Linear hemisphere combination ``left * zL + right * zR``.

    ``detail_left``/``detail_right`` are the factors applied to ``weight * z``
    in the per-region contribution columns.
    """

    left: float
    right: float
    detail_left: float = 1.0
    detail_right: float = 1.0

    def combine(self, z_left: float, z_right: float) -> float:
        return self.left * z_left + self.right * z_right


RIGHT_MINUS_LEFT = Blend(-1.0, 1.0)
LEFT_MINUS_RIGHT = Blend(1.0, -1.0)
# Olfaction reports undivided contributions; the cognitive averages report halves
MEAN_OF_HEMISPHERES = Blend(0.5, 0.5)
MEAN_OF_HEMISPHERES_HALF_DETAIL = Blend(0.5, 0.5, 0.5, 0.5)


class Aggregation(Enum):
    WEIGHTED_SUM = "weighted_sum"
    LATERALITY_RATIO = "laterality_ratio"
    COVERAGE_RENORMALIZED = "coverage_renormalized"


class ReportedZ(Enum):
    NONE = "none"
    RAW_SCORE = "raw_score"
    MEAN_STRENGTH = "mean_strength"


_BAND_OPERATORS: dict[str, Callable[[float, float], bool]] = {
    ">=": operator.ge,
    ">": operator.gt,
    "<=": operator.le,
    "<": operator.lt,
}


@dataclass(frozen=True)
class Band:
    """One rung of an interpretation ladder: ``score <op> threshold``."""

    op: str
    threshold: float
    text: str

    def matches(self, score: float) -> bool:
        return _BAND_OPERATORS[self.op](score, self.threshold)


def select_band(score: float, bands: tuple[Band, ...], fallback: str) -> str:
    """Return the first matching band's text, evaluated in ladder order."""
    for band in bands:
        if band.matches(score):
            return band.text
    return fallback


@dataclass(frozen=True)
class IndexSpec:
    index_id: IndexId
    regions: tuple[RegionWeight, ...]
    blend: Blend
    bands: tuple[Band, ...]
    fallback_band: str
    threshold: str
    formula: str
    references: tuple[str, ...]
    region_labels: tuple[str, ...]
    weights_description: str
    decimals: int = 3
    aggregation: Aggregation = Aggregation.WEIGHTED_SUM
    percentile_strategy: PercentileStrategy = GAUSSIAN
    reported_z: ReportedZ = ReportedZ.NONE

    @property
    def name(self) -> str:
        return self.index_id.value

    def interpret(self, score: float) -> str:
        return select_band(score, self.bands, self.fallback_band)

    def to_dict(self) -> dict[str, Any]:
        """Static description of the index for catalogs (no subject data)."""
        return {
            "name": self.name,
            "regions": [
                {
                    "region": rw.region,
                    "weight": rw.weight,
                    "metric_weights": rw.weights_used,
                    "data_region": rw.data_region,
                }
                for rw in self.regions
            ],
            "bands": [{"op": b.op, "threshold": b.threshold, "text": b.text} for b in self.bands],
            "fallback_band": self.fallback_band,
            "threshold": self.threshold,
            "formula": self.formula,
            "references": list(self.references),
            "weights": self.weights_description,
            "decimals": self.decimals,
            "aggregation": self.aggregation.value,
            "percentile_strategy": self.percentile_strategy.name,
        }

    def validate(self) -> None:
        """Check the configuration invariants (used by tests and at import)."""
        for rw in self.regions:
            total = sum(rw.metric_weights)
            if not math.isclose(total, METRIC_WEIGHT_TOTAL):
                raise ValueError(f"{self.name}: metric weights for {rw.region} sum to {total}, not 100")
            if not 0 < rw.weight <= 1:
                raise ValueError(f"{self.name}: region weight for {rw.region} out of range: {rw.weight}")
        for band in self.bands:
            if band.op not in _BAND_OPERATORS:
                raise ValueError(f"{self.name}: unknown band operator {band.op!r}")


# =============================================================================
# Shared Skeleton
# =============================================================================


def _detail(rw: RegionWeight, blend: Blend, z_left: float, z_right: float) -> RegionDetail:
    return RegionDetail(
        region=rw.region,
        region_weight=rw.weight,
        z_left=round_half_up(z_left, DETAIL_DECIMALS),
        z_right=round_half_up(z_right, DETAIL_DECIMALS),
        contrib_left=round_half_up(rw.weight * blend.detail_left * z_left, DETAIL_DECIMALS),
        contrib_right=round_half_up(rw.weight * blend.detail_right * z_right, DETAIL_DECIMALS),
        weights_used=rw.weights_used,
    )


def calculate_index(
    spec: IndexSpec,
    lh: HemisphereRegionMap,
    rh: HemisphereRegionMap,
    norms: Mapping[str, RegionNorm] = REFERENCE_NORMS,
) -> IndexResult:
    """Score one index for a subject.

    Regions missing from the reference table or from either hemisphere are
    skipped; their weight is not redistributed (except for coverage
    renormalized indices). Never raises on missing or NaN data.

    Args:
        spec: Index configuration
        lh: Left-hemisphere region map
        rh: Right-hemisphere region map
        norms: Reference norms, defaults to the built-in adult table

    Returns:
        Populated IndexResult
    """
    raw_score = 0.0
    sum_left = 0.0
    sum_right = 0.0
    strength = 0.0
    realized_weight = 0.0
    details: list[RegionDetail] = []

    for rw in spec.regions:
        source = rw.data_region
        norm = norms.get(source)
        if norm is None or source not in lh or source not in rh:
            logger.debug(f"{spec.name}: region {source} unavailable, skipped")
            continue

        z_left = composite_z_score(lh[source], norm, rw.metric_weights)
        z_right = composite_z_score(rh[source], norm, rw.metric_weights)

        raw_score += rw.weight * spec.blend.combine(z_left, z_right)
        sum_left += rw.weight * z_left
        sum_right += rw.weight * z_right
        strength += (z_left + z_right) / 2 * rw.weight
        realized_weight += rw.weight
        details.append(_detail(rw, spec.blend, z_left, z_right))

    if spec.aggregation is Aggregation.LATERALITY_RATIO:
        score = (sum_left - sum_right) / (abs(sum_left) + abs(sum_right) + LANGUAGE_LI_EPSILON)
    elif spec.aggregation is Aggregation.COVERAGE_RENORMALIZED and realized_weight > 0:
        score = raw_score / realized_weight * len(spec.regions) * DYSLEXIA_COVERAGE_SCALE
    else:
        score = raw_score

    if math.isnan(score):
        logger.warning(f"{spec.name}: score is NaN (unparsable stats values in contributing regions)")

    z_value: Optional[float] = None
    if spec.reported_z is ReportedZ.RAW_SCORE:
        z_value = round_half_up(raw_score, 3)
    elif spec.reported_z is ReportedZ.MEAN_STRENGTH:
        z_value = round_half_up(strength, 3)

    return IndexResult(
        name=spec.name,
        value=round_half_up(score, spec.decimals),
        percentile=spec.percentile_strategy.percentile(score),
        interpretation=spec.interpret(score),
        threshold=spec.threshold,
        formula=spec.formula,
        references=spec.references,
        regions=spec.region_labels,
        weights=spec.weights_description,
        z_score=z_value,
        details=tuple(details),
        configured_regions=len(spec.regions),
    )
