"""Reference norms for DKT atlas cortical regions.

Adult reference population, per region and per morphometric channel
(cortical thickness in mm, surface area in mm^2, gray-matter volume in mm^3).
The table is process-wide and read-only; analyses never modify it.
"""

from types import MappingProxyType
from typing import Mapping

from dkt_mcp.models import MetricNorm, RegionNorm


def _norm(
    thickness: tuple[float, float],
    surface_area: tuple[float, float],
    volume: tuple[float, float],
) -> RegionNorm:
    return RegionNorm(
        thickness=MetricNorm(*thickness),
        surface_area=MetricNorm(*surface_area),
        volume=MetricNorm(*volume),
    )


# =============================================================================
# Adult Reference Population
# =============================================================================
# (mean, std) per channel: thickness, surface area, volume

REFERENCE_NORMS: Mapping[str, RegionNorm] = MappingProxyType({
    # Sensorimotor
    "precentral": _norm((2.65, 0.18), (5400, 650), (16500, 2200)),
    "postcentral": _norm((2.15, 0.16), (5200, 600), (13500, 1800)),
    "paracentral": _norm((2.45, 0.17), (1700, 280), (4800, 700)),
    # Visual
    "pericalcarine": _norm((1.55, 0.14), (1900, 320), (2400, 400)),
    "cuneus": _norm((1.95, 0.15), (2300, 380), (4600, 650)),
    "lingual": _norm((2.05, 0.15), (3800, 500), (8200, 1100)),
    "lateraloccipital": _norm((2.20, 0.16), (6300, 800), (15000, 2000)),
    # Medial temporal and orbitofrontal
    "entorhinal": _norm((3.20, 0.35), (480, 100), (1600, 350)),
    "parahippocampal": _norm((2.75, 0.22), (700, 120), (2200, 380)),
    "medialorbitofrontal": _norm((2.45, 0.20), (1800, 300), (5000, 750)),
    "lateralorbitofrontal": _norm((2.55, 0.20), (3500, 480), (9800, 1400)),
    # Temporal and perisylvian language areas
    "superiortemporal": _norm((2.85, 0.20), (5800, 700), (19000, 2500)),
    "middletemporal": _norm((2.85, 0.19), (5000, 650), (16000, 2200)),
    "inferiortemporal": _norm((2.80, 0.20), (3900, 520), (12500, 1700)),
    "fusiform": _norm((2.70, 0.18), (3300, 450), (9500, 1300)),
    "parsopercularis": _norm((2.55, 0.16), (1600, 250), (4500, 650)),
    "parstriangularis": _norm((2.40, 0.17), (1550, 280), (4000, 600)),
    "insula": _norm((3.05, 0.22), (2500, 350), (7800, 1000)),
    # Parietal
    "supramarginal": _norm((2.60, 0.17), (3800, 500), (11500, 1600)),
    "inferiorparietal": _norm((2.50, 0.16), (5500, 700), (15500, 2100)),
    "superiorparietal": _norm((2.25, 0.15), (5200, 650), (13000, 1700)),
    "precuneus": _norm((2.40, 0.16), (4600, 580), (12000, 1600)),
    # Cingulate
    "rostralanteriorcingulate": _norm((2.85, 0.22), (1100, 200), (3500, 550)),
    "posteriorcingulate": _norm((2.45, 0.20), (1500, 250), (4000, 600)),
    # Frontal
    "superiorfrontal": _norm((2.75, 0.18), (9500, 1200), (30000, 4000)),
    "rostralmiddlefrontal": _norm((2.40, 0.17), (4700, 600), (13000, 1800)),
    "caudalmiddlefrontal": _norm((2.65, 0.17), (2600, 400), (7500, 1000)),
})
"""Region name -> reference norms. Keys follow FreeSurfer DKT atlas naming."""

KNOWN_REGIONS = frozenset(REFERENCE_NORMS)


# =============================================================================
# Whole-brain Reference Norms
# =============================================================================
# Volumes in cm^3, thickness in mm.

BASIC_METRIC_NORMS: Mapping[str, MetricNorm] = MappingProxyType({
    "brain_vol": MetricNorm(1250.0, 120.0),
    "cortex_vol": MetricNorm(550.0, 55.0),
    "white_vol": MetricNorm(475.0, 50.0),
    "lh_thickness": MetricNorm(2.55, 0.15),
    "rh_thickness": MetricNorm(2.55, 0.15),
})
