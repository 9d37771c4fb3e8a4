"""MCP server computing DKT atlas lateralization and cognitive indices."""

__version__ = "1.0.0"

from dkt_mcp.analysis import run_analysis
from dkt_mcp.server import main
from dkt_mcp.stats_parser import parse_region_stats
from dkt_mcp.tools import StatsFileError, ValidationError

__all__ = [
    "__version__",
    "main",
    "run_analysis",
    "parse_region_stats",
    "StatsFileError",
    "ValidationError",
]
