"""Unit tests for MCP resource implementations."""

import json
from datetime import datetime
from unittest.mock import patch

from dkt_mcp import __version__
from dkt_mcp.resources import (
    _iso_timestamp,
    get_indices_resource,
    get_reference_norms_resource,
    get_status_resource,
)


class TestIsoTimestamp:
    """Test _iso_timestamp helper function."""

    def test_iso_timestamp_ends_with_z_suffix(self):
        """_iso_timestamp should end with 'Z' suffix for UTC."""
        ts = _iso_timestamp()
        assert ts.endswith("Z"), f"Expected timestamp to end with 'Z', got: {ts}"

    def test_iso_timestamp_format_structure(self):
        """_iso_timestamp should follow YYYY-MM-DDTHH:MM:SSZ format."""
        ts = _iso_timestamp()

        assert len(ts) == 20, f"Expected 20 characters, got {len(ts)}: {ts}"
        assert ts[4] == "-"
        assert ts[7] == "-"
        assert ts[10] == "T"
        assert ts[13] == ":"
        assert ts[16] == ":"

    def test_iso_timestamp_is_utc(self):
        """_iso_timestamp should parse to a UTC datetime."""
        parsed = datetime.fromisoformat(_iso_timestamp().replace("Z", "+00:00"))

        assert parsed.utcoffset().total_seconds() == 0

    def test_iso_timestamp_seconds_precision(self):
        """_iso_timestamp should have seconds precision (not milliseconds)."""
        assert "." not in _iso_timestamp()


class TestGetReferenceNormsResource:
    """Test get_reference_norms_resource function."""

    def test_regions(self):
        """Resource should list all 27 regions with three channels each."""
        result = json.loads(get_reference_norms_resource())

        assert result["region_count"] == 27
        assert len(result["regions"]) == 27
        assert result["regions"]["precentral"]["thickness"] == {"mean": 2.65, "std": 0.18}
        assert set(result["regions"]["insula"]) == {"thickness", "surface_area", "volume"}

    def test_whole_brain_norms(self):
        result = json.loads(get_reference_norms_resource())

        assert result["whole_brain"]["brain_vol"] == {"mean": 1250.0, "std": 120.0}
        assert result["units"]["whole_brain_volume"] == "cm3"


class TestGetIndicesResource:
    """Test get_indices_resource function."""

    def test_catalog(self):
        result = json.loads(get_indices_resource())

        assert result["total_count"] == 19
        assert result["indices"][0]["name"] == "Handedness Index"
        assert result["indices"][18]["position"] == 18

    def test_no_subject_data(self):
        """The catalog describes configuration only, never scores."""
        for entry in json.loads(get_indices_resource())["indices"]:
            assert "value" not in entry
            assert "percentile" not in entry


class TestGetStatusResource:
    """Test get_status_resource function."""

    def test_status_fields(self):
        result = json.loads(get_status_resource())

        assert result["status"] == "ok"
        assert result["version"] == __version__
        assert result["index_count"] == 19
        assert result["region_count"] == 27
        assert isinstance(result["metrics_enabled"], bool)
        assert result["last_check"].endswith("Z")

    def test_reports_metrics_state(self):
        with patch("dkt_mcp.resources.is_metrics_enabled", return_value=True):
            result = json.loads(get_status_resource())

        assert result["metrics_enabled"] is True
