"""Whole-brain metrics from aseg and aparc stats headers.

Volumes are reported in cm^3 and ranked against adult norms as a
"top X%" figure (50 at the population mean, smaller is larger).
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from dkt_mcp.constants import ASEG_MEASURE_KEYS, MEAN_THICKNESS_KEY, MM3_PER_CM3
from dkt_mcp.norms import BASIC_METRIC_NORMS
from dkt_mcp.scoring import basic_metric_percentile, round_half_up
from dkt_mcp.stats_parser import extract_measure, parse_float

logger = logging.getLogger("dkt-mcp")

# Greedy: takes the last numeric field of the MeanThickness measure line
_MEAN_THICKNESS = re.compile(rf"# Measure Cortex, {MEAN_THICKNESS_KEY}.*,\s*([\d.]+)")


@dataclass(frozen=True)
class WholeBrainMetrics:
    """Raw whole-brain measures: volumes in mm^3, thickness in mm. Missing values are 0."""

    etiv: float
    brain_vol: float
    cortex_vol: float
    white_vol: float
    lh_thickness: float
    rh_thickness: float

    def to_dict(self) -> dict[str, Any]:
        """Display form: volumes in cm^3 with a top-X% rank where a norm exists."""
        volumes = {
            "etiv": self.etiv,
            "brain_vol": self.brain_vol,
            "cortex_vol": self.cortex_vol,
            "white_vol": self.white_vol,
        }
        report: dict[str, Any] = {}
        for key, mm3 in volumes.items():
            report[key] = _metric_entry(key, mm3 / MM3_PER_CM3, "cm3")
        report["lh_thickness"] = _metric_entry("lh_thickness", self.lh_thickness, "mm")
        report["rh_thickness"] = _metric_entry("rh_thickness", self.rh_thickness, "mm")
        return report


def _metric_entry(key: str, value: float, unit: str) -> dict[str, Any]:
    entry: dict[str, Any] = {"value": round_half_up(value, 2), "unit": unit}
    norm = BASIC_METRIC_NORMS.get(key)
    if norm is not None:
        entry["top_percent"] = basic_metric_percentile(value, norm)
        entry["reference"] = {"mean": norm.mean, "std": norm.std}
    return entry


def extract_mean_thickness(content: str) -> float:
    """Return the hemisphere ``MeanThickness`` measure from aparc stats text, or 0.0."""
    match = _MEAN_THICKNESS.search(content)
    return parse_float(match.group(1)) if match else 0.0


def extract_whole_brain_metrics(aseg: str, lh_aparc: str, rh_aparc: str) -> WholeBrainMetrics:
    """Collect eTIV, brain, cortex and white-matter volumes and mean thickness.

    Args:
        aseg: aseg.stats text
        lh_aparc: lh.aparc.stats text
        rh_aparc: rh.aparc.stats text

    Returns:
        WholeBrainMetrics in raw units
    """
    metrics = WholeBrainMetrics(
        etiv=extract_measure(aseg, ASEG_MEASURE_KEYS["etiv"]),
        brain_vol=extract_measure(aseg, ASEG_MEASURE_KEYS["brain_vol"]),
        cortex_vol=extract_measure(aseg, ASEG_MEASURE_KEYS["cortex_vol"]),
        white_vol=extract_measure(aseg, ASEG_MEASURE_KEYS["white_vol"]),
        lh_thickness=extract_mean_thickness(lh_aparc),
        rh_thickness=extract_mean_thickness(rh_aparc),
    )
    logger.debug(f"Whole-brain metrics: eTIV={metrics.etiv}, BrainSegVol={metrics.brain_vol}")
    return metrics
