"""Shared pytest fixtures for DKT index tests."""

import pytest

from dkt_mcp.models import RegionMetrics
from dkt_mcp.norms import REFERENCE_NORMS

COLUMN_HEADERS = "# ColHeaders StructName NumVert SurfArea GrayVol ThickAvg ThickStd MeanCurv GausCurv FoldInd CurvInd"


def at_mean(region: str, **overrides: float) -> RegionMetrics:
    """RegionMetrics at the reference means of ``region``, with optional channel overrides."""
    norm = REFERENCE_NORMS[region]
    values = {
        "thickness": norm.thickness.mean,
        "surface_area": norm.surface_area.mean,
        "volume": norm.volume.mean,
    }
    values.update(overrides)
    return RegionMetrics(**values)


def make_stats_text(
    regions: dict,
    hemi: str = "lh",
    subject: str = "bert",
    mean_thickness: float = 2.55,
) -> str:
    """Render an aparc-style stats file.

    Args:
        regions: Region name -> RegionMetrics
        hemi: Hemisphere tag written to the header
        subject: Value of the ``# subjectname`` header
        mean_thickness: Value of the MeanThickness measure
    """
    lines = [
        "# Table of FreeSurfer cortical parcellation anatomical statistics",
        "#",
        f"# subjectname {subject}",
        f"# hemi {hemi}",
        "# Measure Cortex, NumVert, Number of Vertices, 140000, unitless",
        f"# Measure Cortex, MeanThickness, Mean Thickness, {mean_thickness}, mm",
        "# NTableCols 10",
        COLUMN_HEADERS,
    ]
    for name, m in regions.items():
        lines.append(f"{name} 1000 {m.surface_area} {m.volume} {m.thickness} 0.50 0.12 0.15 10 1.2")
    return "\n".join(lines) + "\n"


def make_aseg_text(subject: str = "bert") -> str:
    """Render an aseg stats header with whole-brain measures at the reference means."""
    return "\n".join(
        [
            "# Title Segmentation Statistics",
            f"# subjectname {subject}",
            "# Measure BrainSeg, BrainSegVol, Brain Segmentation Volume, 1250000.000000, mm^3",
            "# Measure Cortex, CortexVol, Total cortical gray matter volume, 550000.000000, mm^3",
            "# Measure TotalCerebralWhiteMatter, CerebralWhiteMatterVol, "
            "Total cerebral white matter volume, 475000.000000, mm^3",
            "# Measure EstimatedTotalIntraCranialVol, eTIV, Estimated Total Intracranial Volume, 1500000.000000, mm^3",
            "",
        ]
    )


@pytest.fixture
def mean_hemisphere():
    """Every known region at the reference means (all z-scores 0)."""
    return {region: at_mean(region) for region in REFERENCE_NORMS}


@pytest.fixture
def subject_dir(tmp_path, mean_hemisphere):
    """A FreeSurfer-like subject directory with a complete stats/ folder.

    Returns:
        Path to the subject directory
    """
    stats = tmp_path / "bert" / "stats"
    stats.mkdir(parents=True)
    (stats / "lh.aparc.DKTatlas.stats").write_text(make_stats_text(mean_hemisphere, "lh"))
    (stats / "rh.aparc.DKTatlas.stats").write_text(make_stats_text(mean_hemisphere, "rh"))
    (stats / "lh.aparc.stats").write_text(make_stats_text(mean_hemisphere, "lh"))
    (stats / "rh.aparc.stats").write_text(make_stats_text(mean_hemisphere, "rh"))
    (stats / "aseg.stats").write_text(make_aseg_text())
    return tmp_path / "bert"
