"""MCP resource implementations for the DKT index server."""

import json
import logging
from datetime import datetime, timezone

from dkt_mcp import __version__
from dkt_mcp.analysis import INDEX_SPECS
from dkt_mcp.constants import ANALYSIS_WORKERS, MAX_STATS_BYTES
from dkt_mcp.metrics import is_metrics_enabled
from dkt_mcp.norms import BASIC_METRIC_NORMS, REFERENCE_NORMS

logger = logging.getLogger("dkt-mcp")


def _iso_timestamp() -> str:
    """UTC timestamp in YYYY-MM-DDTHH:MM:SSZ form."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _metric_norm(norm) -> dict:
    return {"mean": norm.mean, "std": norm.std}


def get_reference_norms_resource() -> str:
    """Get the regional and whole-brain reference norms as JSON.

    Returns:
        JSON string with per-region (mean, std) for thickness, surface area and volume
    """
    regions = {
        name: {
            "thickness": _metric_norm(norm.thickness),
            "surface_area": _metric_norm(norm.surface_area),
            "volume": _metric_norm(norm.volume),
        }
        for name, norm in REFERENCE_NORMS.items()
    }
    data = {
        "units": {"thickness": "mm", "surface_area": "mm2", "volume": "mm3", "whole_brain_volume": "cm3"},
        "region_count": len(regions),
        "regions": regions,
        "whole_brain": {name: _metric_norm(norm) for name, norm in BASIC_METRIC_NORMS.items()},
    }

    logger.info(f"Reference norms resource retrieved: {len(regions)} regions")
    return json.dumps(data, indent=2)


def get_indices_resource() -> str:
    """Get the index catalog (configuration only) as JSON."""
    indices = [{"position": position, **spec.to_dict()} for position, spec in enumerate(INDEX_SPECS.values())]
    return json.dumps({"indices": indices, "total_count": len(indices)}, indent=2, ensure_ascii=False)


def get_status_resource() -> str:
    """Get server configuration and health as JSON.

    Returns:
        JSON string with version, index and region counts, limits and metrics state
    """
    status = {
        "status": "ok",
        "version": __version__,
        "index_count": len(INDEX_SPECS),
        "region_count": len(REFERENCE_NORMS),
        "max_stats_bytes": MAX_STATS_BYTES,
        "analysis_workers": ANALYSIS_WORKERS,
        "metrics_enabled": is_metrics_enabled(),
        "last_check": _iso_timestamp(),
    }

    logger.info("Status resource retrieved")
    return json.dumps(status, indent=2)
