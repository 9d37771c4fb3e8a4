"""MCP tool implementations for the DKT index server."""

import logging
import math
import os
from typing import Any, Dict, List, Optional

from dkt_mcp.analysis import INDEX_SPECS, run_analysis
from dkt_mcp.constants import (
    ANALYSIS_WORKERS,
    MAX_PATH_LENGTH,
    MAX_REGION_NAME_LENGTH,
    MAX_STATS_BYTES,
    METRIC_WEIGHT_TOTAL,
    REQUIRED_STATS_FILES,
    STATS_FILE_HINTS,
)
from dkt_mcp.metrics import track_request
from dkt_mcp.models import HemisphereRegionMap, RegionMetrics
from dkt_mcp.norms import KNOWN_REGIONS, REFERENCE_NORMS
from dkt_mcp.scoring import GAUSSIAN, composite_z_score, round_half_up, z_score
from dkt_mcp.stats_parser import (
    detect_stats_file_type,
    extract_measure,
    extract_subject_name,
    is_plausible_stats,
    parse_region_stats,
)
from dkt_mcp.whole_brain import extract_mean_thickness, extract_whole_brain_metrics

logger = logging.getLogger("dkt-mcp")


# =============================================================================
# Errors
# =============================================================================


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str, value: str):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)


class StatsFileError(Exception):
    """Raised when a stats file cannot be read or is not FreeSurfer stats text."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation
# =============================================================================


def validate_path(path: str, field: str) -> str:
    """Validate a user-supplied file or directory path.

    Args:
        path: Path as given by the caller
        field: Parameter name, for error reporting

    Returns:
        Absolute, user-expanded path

    Raises:
        ValidationError: If the path is empty, too long or contains NUL bytes
    """
    if not path or not path.strip():
        raise ValidationError("Path cannot be empty", field, path or "")

    if len(path) > MAX_PATH_LENGTH:
        raise ValidationError(f"Path exceeds maximum length ({MAX_PATH_LENGTH})", field, path[:50] + "...")

    if "\x00" in path:
        raise ValidationError("Path contains a NUL byte", field, path.replace("\x00", "\\0")[:50])

    return os.path.abspath(os.path.expanduser(path.strip()))


def validate_hemisphere(path: str, hemisphere: str, field: str) -> None:
    """Reject a file whose name identifies the opposite hemisphere.

    Names that match no known stats file are accepted as-is.

    Raises:
        ValidationError: If an lh file was given for rh or vice versa
    """
    file_type = detect_stats_file_type(os.path.basename(path))
    if file_type is None or file_type == "aseg":
        return

    detected = file_type.split("_", 1)[0]
    if detected != hemisphere:
        expected_name = "left" if hemisphere == "lh" else "right"
        raise ValidationError(
            f"Expected a {expected_name}-hemisphere ({hemisphere}.) stats file, got '{os.path.basename(path)}'",
            field,
            path,
        )


def validate_region_name(region: str) -> str:
    """Validate a DKT region name against the reference table.

    Raises:
        ValidationError: If the name is empty, too long or not a known region
    """
    if not region:
        raise ValidationError("Region name cannot be empty", "region", region or "")

    normalized = region.strip().lower()
    if len(normalized) > MAX_REGION_NAME_LENGTH:
        raise ValidationError(
            f"Region name exceeds maximum length ({MAX_REGION_NAME_LENGTH})", "region", normalized[:50] + "..."
        )

    if normalized not in KNOWN_REGIONS:
        raise ValidationError(
            f"Unknown region '{normalized}'. Must be one of: {', '.join(sorted(KNOWN_REGIONS))}",
            "region",
            normalized,
        )

    return normalized


def validate_metric_weights(metric_weights: List[float]) -> tuple[float, float, float]:
    """Validate a (thickness, surface area, volume) percentage triple.

    Raises:
        ValidationError: If there are not exactly 3 non-negative weights summing to 100
    """
    if len(metric_weights) != 3:
        raise ValidationError(
            f"Expected 3 metric weights (thickness, surface area, volume), got {len(metric_weights)}",
            "metric_weights",
            str(metric_weights),
        )

    if not all(math.isfinite(w) for w in metric_weights):
        raise ValidationError("Metric weights must be finite numbers", "metric_weights", str(metric_weights))

    if any(w < 0 for w in metric_weights):
        raise ValidationError("Metric weights must be non-negative", "metric_weights", str(metric_weights))

    total = sum(metric_weights)
    if abs(total - METRIC_WEIGHT_TOTAL) > 1e-6:
        raise ValidationError(
            f"Metric weights must sum to {METRIC_WEIGHT_TOTAL}, got {total:g}", "metric_weights", str(metric_weights)
        )

    thickness, surface_area, volume = metric_weights
    return (thickness, surface_area, volume)


# =============================================================================
# File Access
# =============================================================================


def read_stats_file(path: str) -> str:
    """Read a stats file after size and plausibility checks.

    Args:
        path: Absolute path to the file

    Returns:
        File text (undecodable bytes replaced)

    Raises:
        StatsFileError: If the file is missing, too large, unreadable or not stats text
    """
    if not os.path.isfile(path):
        raise StatsFileError(f"Stats file not found: {path}", details={"path": path})

    try:
        size = os.path.getsize(path)
        if size > MAX_STATS_BYTES:
            raise StatsFileError(
                f"Stats file exceeds size limit ({size} > {MAX_STATS_BYTES} bytes)",
                details={"path": path, "size": size, "limit": MAX_STATS_BYTES},
            )

        with open(path, encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        raise StatsFileError(f"Failed to read stats file: {e}", details={"path": path}) from e

    if not is_plausible_stats(content):
        raise StatsFileError(
            f"Not a FreeSurfer stats file (no '# Measure' lines): {path}", details={"path": path}
        )

    logger.debug(f"Read stats file {path} ({len(content)} chars)")
    return content


def _load_region_map(path: str) -> HemisphereRegionMap:
    regions = parse_region_stats(read_stats_file(path))
    if not regions:
        logger.warning(f"No region rows found in {path}")
    return regions


def find_stats_files(directory: str) -> Dict[str, str]:
    """Locate FreeSurfer stats files by name in a directory or its ``stats/`` child.

    Returns:
        Stats file key (e.g. "lh_dkt") -> absolute path; first match wins
    """
    search_dirs = [directory]
    stats_dir = os.path.join(directory, "stats")
    if os.path.isdir(stats_dir):
        search_dirs.insert(0, stats_dir)

    found: Dict[str, str] = {}
    for search_dir in search_dirs:
        for entry in sorted(os.listdir(search_dir)):
            full_path = os.path.join(search_dir, entry)
            file_type = detect_stats_file_type(entry)
            if file_type is not None and file_type not in found and os.path.isfile(full_path):
                found[file_type] = full_path

    logger.info(f"Found {len(found)} stats files in {directory}: {', '.join(sorted(found))}")
    return found


# =============================================================================
# Tools
# =============================================================================


def analyze_stats_files(
    lh_path: str,
    rh_path: str,
    lh_aux_path: Optional[str] = None,
    rh_aux_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Compute the 19 DKT indices from a pair of hemisphere stats files.

    Args:
        lh_path: Left-hemisphere DKT stats file (lh.aparc.DKTatlas.stats)
        rh_path: Right-hemisphere DKT stats file (rh.aparc.DKTatlas.stats)
        lh_aux_path: Optional left auxiliary stats file (e.g. lh.BA_exvivo.stats)
        rh_aux_path: Optional right auxiliary stats file

    Returns:
        Dict with success status, indices, summary and overall score

    Raises:
        ValidationError: If a path is invalid or names the wrong hemisphere
        StatsFileError: If a file cannot be read
    """
    with track_request("analyze_stats_files"):
        lh_file = validate_path(lh_path, "lh_path")
        rh_file = validate_path(rh_path, "rh_path")
        validate_hemisphere(lh_file, "lh", "lh_path")
        validate_hemisphere(rh_file, "rh", "rh_path")
        lh_aux_file = validate_path(lh_aux_path, "lh_aux_path") if lh_aux_path else None
        rh_aux_file = validate_path(rh_aux_path, "rh_aux_path") if rh_aux_path else None
        if lh_aux_file:
            validate_hemisphere(lh_aux_file, "lh", "lh_aux_path")
        if rh_aux_file:
            validate_hemisphere(rh_aux_file, "rh", "rh_aux_path")

        try:
            lh = _load_region_map(lh_file)
            rh = _load_region_map(rh_file)
            lh_aux = _load_region_map(lh_aux_file) if lh_aux_file else None
            rh_aux = _load_region_map(rh_aux_file) if rh_aux_file else None
        except StatsFileError as e:
            logger.error(f"Stats file analysis failed: {e.message}")
            raise

        result = run_analysis(lh, rh, lh_aux, rh_aux, max_workers=ANALYSIS_WORKERS)

        logger.info(f"Analyzed {lh_file} / {rh_file}: overall score {result.overall_score}")

        return {
            "success": True,
            "lh_path": lh_file,
            "rh_path": rh_file,
            "lh_region_count": len(lh),
            "rh_region_count": len(rh),
            **result.to_dict(),
        }


def analyze_subject_directory(directory: str) -> Dict[str, Any]:
    """Analyze a FreeSurfer subject directory (or its ``stats/`` folder).

    Args:
        directory: Subject directory containing the stats files

    Returns:
        Dict with subject name, files used, analysis and whole-brain metrics

    Raises:
        ValidationError: If the directory path is invalid
        StatsFileError: If the directory or any required stats file is missing or unreadable
    """
    with track_request("analyze_subject_directory"):
        subject_dir = validate_path(directory, "directory")
        if not os.path.isdir(subject_dir):
            raise StatsFileError(f"Not a directory: {subject_dir}", details={"path": subject_dir})

        try:
            files = find_stats_files(subject_dir)
            missing = sorted(REQUIRED_STATS_FILES - files.keys())
            if missing:
                raise StatsFileError(
                    f"Missing required stats files: {', '.join(STATS_FILE_HINTS[k] for k in missing)}",
                    details={"directory": subject_dir, "missing": [STATS_FILE_HINTS[k] for k in missing]},
                )

            contents = {key: read_stats_file(path) for key, path in files.items()}
        except OSError as e:
            logger.error(f"Subject directory scan failed: {e}")
            raise StatsFileError(f"Failed to scan directory: {e}", details={"path": subject_dir}) from e
        except StatsFileError as e:
            logger.error(f"Subject directory analysis failed: {e.message}")
            raise

        lh = parse_region_stats(contents["lh_dkt"])
        rh = parse_region_stats(contents["rh_dkt"])
        lh_aux = parse_region_stats(contents["lh_ba"]) if "lh_ba" in contents else None
        rh_aux = parse_region_stats(contents["rh_ba"]) if "rh_ba" in contents else None

        result = run_analysis(lh, rh, lh_aux, rh_aux, max_workers=ANALYSIS_WORKERS)
        whole_brain = extract_whole_brain_metrics(contents["aseg"], contents["lh_aparc"], contents["rh_aparc"])

        subject_name = None
        for key in ("aseg", "lh_dkt", "rh_dkt"):
            subject_name = extract_subject_name(contents[key])
            if subject_name:
                break

        logger.info(f"Analyzed subject {subject_name or subject_dir}: overall score {result.overall_score}")

        return {
            "success": True,
            "subject_name": subject_name,
            "directory": subject_dir,
            "files": files,
            "whole_brain": whole_brain.to_dict(),
            **result.to_dict(),
        }


def parse_stats_file(path: str) -> Dict[str, Any]:
    """Parse one stats file into its region table and header measures.

    Args:
        path: Path to any FreeSurfer stats file

    Returns:
        Dict with file type, subject name, mean thickness and per-region metrics

    Raises:
        ValidationError: If the path is invalid
        StatsFileError: If the file cannot be read
    """
    with track_request("parse_stats_file"):
        stats_file = validate_path(path, "path")

        try:
            content = read_stats_file(stats_file)
        except StatsFileError as e:
            logger.error(f"Stats file parse failed: {e.message}")
            raise

        regions = parse_region_stats(content)
        file_type = detect_stats_file_type(os.path.basename(stats_file))

        result: Dict[str, Any] = {
            "success": True,
            "path": stats_file,
            "file_type": file_type,
            "subject_name": extract_subject_name(content),
            "region_count": len(regions),
            "regions": {name: metrics.to_dict() for name, metrics in regions.items()},
        }

        if file_type == "aseg":
            result["etiv"] = extract_measure(content, "eTIV")
        else:
            result["mean_thickness"] = extract_mean_thickness(content)

        logger.info(f"Parsed {stats_file}: {len(regions)} regions")
        return result


def score_region(
    region: str,
    thickness: float,
    surface_area: float,
    volume: float,
    metric_weights: Optional[List[float]] = None,
) -> Dict[str, Any]:
    """Score one region's measurements against the reference norms.

    Args:
        region: DKT region name (e.g. "superiortemporal")
        thickness: Mean cortical thickness in mm
        surface_area: Surface area in mm^2
        volume: Gray-matter volume in mm^3
        metric_weights: (thickness, surface area, volume) percentages, default [60, 30, 10]

    Returns:
        Dict with per-channel z-scores, the composite z-score and its percentile

    Raises:
        ValidationError: If the region or weights are invalid
    """
    with track_request("score_region"):
        name = validate_region_name(region)
        weights = validate_metric_weights(metric_weights if metric_weights is not None else [60, 30, 10])

        norm = REFERENCE_NORMS[name]
        metrics = RegionMetrics(thickness=thickness, surface_area=surface_area, volume=volume)
        composite = composite_z_score(metrics, norm, weights)

        return {
            "success": True,
            "region": name,
            "metric_weights": list(weights),
            "z_thickness": round_half_up(z_score(thickness, norm.thickness), 3),
            "z_surface_area": round_half_up(z_score(surface_area, norm.surface_area), 3),
            "z_volume": round_half_up(z_score(volume, norm.volume), 3),
            "composite_z": round_half_up(composite, 3),
            "percentile": GAUSSIAN.percentile(composite),
        }


def list_indices() -> Dict[str, Any]:
    """Describe the 19 indices in positional order.

    Returns:
        Dict with the index catalog and total count
    """
    with track_request("list_indices"):
        catalog = [{"position": position, **spec.to_dict()} for position, spec in enumerate(INDEX_SPECS.values())]
        return {"success": True, "indices": catalog, "total_count": len(catalog)}
