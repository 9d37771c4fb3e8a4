"""Parsers for FreeSurfer stats text (aparc DKT tables, aseg measures).

All functions here are best-effort and never raise on malformed content:
bad rows are skipped and unparsable numbers become NaN.
"""

import logging
import math
import re
from typing import Optional

from dkt_mcp.constants import (
    COLUMN_REGION_NAME,
    COLUMN_SURFACE_AREA,
    COLUMN_THICKNESS,
    COLUMN_VOLUME,
    COMMENT_PREFIX,
    MEASURE_MARKER,
    MIN_ROW_FIELDS,
    STATS_FILE_PATTERNS,
    TABLE_HEADER_MARKER,
)
from dkt_mcp.models import HemisphereRegionMap, RegionMetrics

logger = logging.getLogger("dkt-mcp")

# Leading decimal literal, the part of a field a lenient float parse would keep
_LEADING_FLOAT = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_SUBJECT_NAME = re.compile(r"^#\s*subjectname\s+(.+)$", re.MULTILINE)
_COMPILED_FILE_PATTERNS = tuple(
    (file_type, re.compile(pattern, re.IGNORECASE)) for file_type, pattern in STATS_FILE_PATTERNS
)


def parse_float(text: str) -> float:
    """Parse the leading decimal number of ``text``; NaN when there is none.

    Trailing garbage is ignored ("2.5mm" -> 2.5), matching how the stats
    files have always been read. A literal "Infinity" parses to +/-inf.
    """
    match = _LEADING_FLOAT.match(text.strip())
    if not match:
        return math.nan
    return float(match.group(0))


# =============================================================================
# Region Table
# =============================================================================


def parse_region_stats(content: str) -> HemisphereRegionMap:
    """Parse the per-region table of one hemisphere's aparc stats text.

    Rows are read after the ``ColHeaders`` line. Column 0 is the region
    name, column 2 surface area, column 3 gray-matter volume and column 4
    mean thickness. A repeated region name overwrites the earlier row.

    Args:
        content: Raw stats file text

    Returns:
        Region name -> RegionMetrics (possibly empty)
    """
    regions: HemisphereRegionMap = {}
    in_table = False
    skipped = 0

    for line in content.split("\n"):
        if TABLE_HEADER_MARKER in line:
            in_table = True
            continue
        if not in_table or not line.strip() or line.startswith(COMMENT_PREFIX):
            continue

        fields = line.split()
        if len(fields) < MIN_ROW_FIELDS:
            skipped += 1
            continue

        regions[fields[COLUMN_REGION_NAME]] = RegionMetrics(
            thickness=parse_float(fields[COLUMN_THICKNESS]),
            surface_area=parse_float(fields[COLUMN_SURFACE_AREA]),
            volume=parse_float(fields[COLUMN_VOLUME]),
        )

    if skipped:
        logger.debug(f"Skipped {skipped} malformed stats rows")
    logger.debug(f"Parsed {len(regions)} regions from stats table")
    return regions


# =============================================================================
# Scalar Measures and Header Fields
# =============================================================================


def extract_measure(content: str, key: str) -> float:
    """Extract a scalar ``# Measure`` value such as eTIV or MeanThickness.

    Tries the canonical ``# Measure <category>, <key>, <description>, <value>``
    shape first, then falls back to the first number following ``key``
    anywhere in the text. Returns 0.0 when neither is found.
    """
    escaped = re.escape(key)
    match = re.search(
        rf"# Measure[^,]*,\s*{escaped}[^,]*,[^,]*,\s*([\d.]+)", content, re.IGNORECASE
    )
    if match is None:
        match = re.search(rf"{escaped}[^\d]*([\d.]+)", content, re.IGNORECASE)
    if match is None:
        logger.debug(f"Measure {key} not found, defaulting to 0")
        return 0.0
    return parse_float(match.group(1))


def extract_subject_name(content: str) -> Optional[str]:
    """Return the ``# subjectname`` header value, if present."""
    match = _SUBJECT_NAME.search(content)
    return match.group(1).strip() if match else None


def is_plausible_stats(content: str) -> bool:
    """Cheap sanity check used before accepting a file as FreeSurfer stats."""
    return MEASURE_MARKER in content


def detect_stats_file_type(file_name: str) -> Optional[str]:
    """Identify a FreeSurfer stats file by its name.

    Returns:
        One of the ``STATS_FILE_PATTERNS`` keys (e.g. "lh_dkt", "aseg"), or None
    """
    for file_type, pattern in _COMPILED_FILE_PATTERNS:
        if pattern.search(file_name):
            return file_type
    return None
