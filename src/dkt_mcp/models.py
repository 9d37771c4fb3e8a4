"""Value types shared by the parser, the index calculators and the tools.

Everything here is immutable. Results are built once per analysis and
serialized with ``to_dict`` for the MCP layer, which speaks JSON.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class RegionMetrics:
    """Thickness (mm), surface area (mm^2) and gray-matter volume (mm^3) of one region."""

    thickness: float
    surface_area: float
    volume: float

    def to_dict(self) -> dict[str, float]:
        return {
            "thickness": self.thickness,
            "surface_area": self.surface_area,
            "volume": self.volume,
        }


# Region name -> metrics for one hemisphere
HemisphereRegionMap = dict[str, RegionMetrics]


@dataclass(frozen=True)
class MetricNorm:
    """Population mean and standard deviation for one morphometric channel."""

    mean: float
    std: float


@dataclass(frozen=True)
class RegionNorm:
    """Reference norms for the three channels of one region."""

    thickness: MetricNorm
    surface_area: MetricNorm
    volume: MetricNorm


@dataclass(frozen=True)
class RegionDetail:
    """Per-region breakdown of one index computation."""

    region: str
    region_weight: float
    z_left: float
    z_right: float
    contrib_left: float
    contrib_right: float
    weights_used: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "region": self.region,
            "region_weight": self.region_weight,
            "z_left": self.z_left,
            "z_right": self.z_right,
            "contrib_left": self.contrib_left,
            "contrib_right": self.contrib_right,
            "weights_used": self.weights_used,
        }


@dataclass(frozen=True)
class IndexResult:
    """One scored index.

    ``value`` is the rounded composite score and ``percentile`` an integer in
    [1, 99]. Both become NaN when an unparsable stats field reached the
    contributing regions.
    """

    name: str
    value: float
    percentile: float
    interpretation: str
    threshold: str
    formula: str
    references: tuple[str, ...]
    regions: tuple[str, ...]
    weights: str
    z_score: Optional[float] = None
    details: tuple[RegionDetail, ...] = ()
    configured_regions: int = 0

    @property
    def coverage(self) -> float:
        """Fraction of configured regions that were present in both hemispheres."""
        if self.configured_regions == 0:
            return 0.0
        return len(self.details) / self.configured_regions

    def to_dict(self) -> dict[str, Any]:
        result = {
            "name": self.name,
            "value": self.value,
            "percentile": self.percentile,
            "interpretation": self.interpretation,
            "threshold": self.threshold,
            "formula": self.formula,
            "references": list(self.references),
            "regions": list(self.regions),
            "weights": self.weights,
            "details": [d.to_dict() for d in self.details],
            "coverage": round(self.coverage, 3),
        }
        if self.z_score is not None:
            result["z_score"] = self.z_score
        return result


@dataclass(frozen=True)
class AnalysisSummary:
    top_strengths: tuple[str, ...] = ()
    special_features: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "top_strengths": list(self.top_strengths),
            "special_features": list(self.special_features),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one ``run_analysis`` call: 19 indices in positional order plus the summary."""

    indices: tuple[IndexResult, ...]
    summary: AnalysisSummary = field(default_factory=AnalysisSummary)
    overall_score: int = 75

    def to_dict(self) -> dict[str, Any]:
        return {
            "indices": [i.to_dict() for i in self.indices],
            "summary": self.summary.to_dict(),
            "overall_score": self.overall_score,
        }
