"""Centralized constants for the DKT index MCP bridge."""

import os

# =============================================================================
# Stats Table Parsing
# =============================================================================
TABLE_HEADER_MARKER = "ColHeaders"
COMMENT_PREFIX = "#"
MEASURE_MARKER = "# Measure"
MIN_ROW_FIELDS = 5

# 0-indexed column positions in a FreeSurfer aparc stats row
COLUMN_REGION_NAME = 0
COLUMN_SURFACE_AREA = 2
COLUMN_VOLUME = 3
COLUMN_THICKNESS = 4

# =============================================================================
# Stats File Names (FreeSurfer subject stats/ directory)
# =============================================================================
# Ordered: the DKT patterns must be tested before the plain aparc ones.
STATS_FILE_PATTERNS: tuple[tuple[str, str], ...] = (
    ("lh_dkt", r"lh\.aparc\.DKTatlas\.stats$"),
    ("rh_dkt", r"rh\.aparc\.DKTatlas\.stats$"),
    ("lh_aparc", r"lh\.aparc\.stats$"),
    ("rh_aparc", r"rh\.aparc\.stats$"),
    ("aseg", r"aseg\.stats$"),
    ("lh_ba", r"lh\.BA_exvivo\.stats$"),
    ("rh_ba", r"rh\.BA_exvivo\.stats$"),
)

STATS_FILE_HINTS = {
    "lh_dkt": "lh.aparc.DKTatlas.stats",
    "rh_dkt": "rh.aparc.DKTatlas.stats",
    "lh_aparc": "lh.aparc.stats",
    "rh_aparc": "rh.aparc.stats",
    "aseg": "aseg.stats",
    "lh_ba": "lh.BA_exvivo.stats",
    "rh_ba": "rh.BA_exvivo.stats",
}

REQUIRED_STATS_FILES = frozenset(["lh_dkt", "rh_dkt", "lh_aparc", "rh_aparc", "aseg"])
OPTIONAL_STATS_FILES = frozenset(["lh_ba", "rh_ba"])

# =============================================================================
# Whole-brain Measures
# =============================================================================
ASEG_MEASURE_KEYS = {
    "etiv": "eTIV",
    "brain_vol": "BrainSegVol",
    "cortex_vol": "CortexVol",
    "white_vol": "CerebralWhiteMatterVol",
}
MEAN_THICKNESS_KEY = "MeanThickness"
MM3_PER_CM3 = 1000.0

# =============================================================================
# Numeric Conventions
# =============================================================================
LANGUAGE_LI_EPSILON = 0.001
DYSLEXIA_COVERAGE_SCALE = 0.2
PERCENTILE_MIN = 1
PERCENTILE_MAX = 99
PERCENTILE_MIDPOINT = 50
DETAIL_DECIMALS = 3

# =============================================================================
# Summary Rules
# =============================================================================
TOP_STRENGTH_PERCENTILE = 84
TOP_STRENGTH_LIMIT = 5
EXCELLENT_PERCENTILE = 95
WEAK_PERCENTILE = 20

# =============================================================================
# Validation Limits
# =============================================================================
MAX_REGION_NAME_LENGTH = 64
MAX_PATH_LENGTH = 4096
METRIC_WEIGHT_TOTAL = 100

# =============================================================================
# Environment Configuration
# =============================================================================
DEFAULT_MAX_STATS_BYTES = 5 * 1024 * 1024
MAX_STATS_BYTES = int(os.environ.get("DKT_MAX_STATS_BYTES", DEFAULT_MAX_STATS_BYTES))
ANALYSIS_WORKERS = int(os.environ.get("DKT_ANALYSIS_WORKERS", "1"))
