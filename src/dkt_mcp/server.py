"""DKT index MCP server entry point."""

import logging
import sys
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from dkt_mcp import resources, tools

# Configure logging to stderr (stdout reserved for MCP protocol)
logging.basicConfig(
    level=logging.INFO,
    format='{"timestamp":"%(asctime)s","level":"%(levelname)s","message":"%(message)s"}',
    stream=sys.stderr
)
logger = logging.getLogger("dkt-mcp")

mcp = FastMCP("dkt-index")

logger.info("Initializing DKT index MCP server")


# Register Tools
# ==============

@mcp.tool()
def analyze_stats_files(
    lh_path: str,
    rh_path: str,
    lh_aux_path: Optional[str] = None,
    rh_aux_path: Optional[str] = None
) -> dict:
    """Compute 19 lateralization and cognitive indices from a pair of FreeSurfer DKT stats files.

    Args:
        lh_path: Path to lh.aparc.DKTatlas.stats
        rh_path: Path to rh.aparc.DKTatlas.stats
        lh_aux_path: Optional path to an auxiliary left stats file (e.g. lh.BA_exvivo.stats)
        rh_aux_path: Optional path to an auxiliary right stats file

    Returns:
        Dict with indices (value, percentile, interpretation, per-region details), summary and overall score
    """
    return tools.analyze_stats_files(lh_path, rh_path, lh_aux_path, rh_aux_path)


@mcp.tool()
def analyze_subject_directory(directory: str) -> dict:
    """Analyze a FreeSurfer subject directory, locating its stats files by name.

    Requires lh/rh.aparc.DKTatlas.stats, lh/rh.aparc.stats and aseg.stats in the
    directory or its stats/ subfolder.

    Args:
        directory: FreeSurfer subject directory (or its stats/ folder)

    Returns:
        Dict with subject name, whole-brain metrics, indices, summary and overall score
    """
    return tools.analyze_subject_directory(directory)


@mcp.tool()
def parse_stats_file(path: str) -> dict:
    """Parse a FreeSurfer stats file into per-region thickness, surface area and volume.

    Args:
        path: Path to a stats file

    Returns:
        Dict with file type, subject name, region count and per-region metrics
    """
    return tools.parse_stats_file(path)


@mcp.tool()
def score_region(
    region: str,
    thickness: float,
    surface_area: float,
    volume: float,
    metric_weights: Optional[List[float]] = None
) -> dict:
    """Score one DKT region's measurements against adult reference norms.

    Args:
        region: DKT region name, e.g. "superiortemporal"
        thickness: Mean cortical thickness in mm
        surface_area: Surface area in mm^2
        volume: Gray-matter volume in mm^3
        metric_weights: [thickness, surface_area, volume] percentages summing to 100 (default [60, 30, 10])

    Returns:
        Dict with per-channel z-scores, composite z-score and percentile
    """
    return tools.score_region(region, thickness, surface_area, volume, metric_weights)


@mcp.tool()
def list_indices() -> dict:
    """List the 19 indices with their regions, weights, bands and references.

    Returns:
        Dict with the index catalog in positional order and total count
    """
    return tools.list_indices()


# Register Resources
# ==================

@mcp.resource("dkt://reference-norms")
def get_reference_norms() -> str:
    """Get the per-region and whole-brain reference norms (mean, std).

    Returns:
        JSON string with regional norms for thickness, surface area, volume and whole-brain norms
    """
    return resources.get_reference_norms_resource()


@mcp.resource("dkt://indices")
def get_indices() -> str:
    """Get the static configuration of all 19 indices.

    Returns:
        JSON string with the index catalog
    """
    return resources.get_indices_resource()


@mcp.resource("dkt://status")
def get_status() -> str:
    """Get server version, limits and metrics state.

    Returns:
        JSON string with status, version, index_count, region_count, limits and last_check timestamp
    """
    return resources.get_status_resource()


# Main Entry Point
# ================

def main():
    """Run the DKT index MCP server with stdio transport."""
    logger.info("Starting DKT index MCP server")
    logger.info("Registered 5 tools: analyze_stats_files, analyze_subject_directory, parse_stats_file, score_region, list_indices")
    logger.info("Registered 3 resources: dkt://reference-norms, dkt://indices, dkt://status")

    try:
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
