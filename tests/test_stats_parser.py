"""Unit tests for FreeSurfer stats text parsing."""

import math

import pytest

from conftest import COLUMN_HEADERS, make_aseg_text, make_stats_text
from dkt_mcp.models import RegionMetrics
from dkt_mcp.stats_parser import (
    detect_stats_file_type,
    extract_measure,
    extract_subject_name,
    is_plausible_stats,
    parse_float,
    parse_region_stats,
)


class TestParseFloat:
    """Test lenient leading-number parsing."""

    def test_plain_number(self):
        assert parse_float("2.534") == 2.534

    def test_trailing_garbage_ignored(self):
        assert parse_float("2.5mm") == 2.5

    def test_exponent(self):
        assert parse_float("-1.5e2x") == -150.0

    def test_leading_dot(self):
        assert parse_float(".5") == 0.5

    def test_infinity_literal(self):
        assert parse_float("Infinity") == math.inf
        assert parse_float("-Infinity") == -math.inf
        assert parse_float("Infinityx") == math.inf

    def test_lowercase_inf_is_nan(self):
        assert math.isnan(parse_float("inf"))

    def test_no_number_is_nan(self):
        assert math.isnan(parse_float("abc"))

    def test_empty_is_nan(self):
        assert math.isnan(parse_float(""))


class TestParseRegionStats:
    """Test the aparc region table parser."""

    def test_reads_columns(self):
        text = make_stats_text({"precentral": RegionMetrics(2.61, 5321, 16012)})

        regions = parse_region_stats(text)

        assert regions == {"precentral": RegionMetrics(thickness=2.61, surface_area=5321.0, volume=16012.0)}

    def test_rows_before_header_are_ignored(self):
        text = "precentral 1000 5400 16500 2.65 0.5 0.1 0.1 10 1.0\n" + COLUMN_HEADERS + "\n"

        assert parse_region_stats(text) == {}

    def test_short_rows_skipped(self):
        text = COLUMN_HEADERS + "\nprecentral 1000 5400 16500\ncuneus 1000 2300 4600 1.95 0.4\n"

        regions = parse_region_stats(text)

        assert list(regions) == ["cuneus"]

    def test_blank_and_comment_lines_skipped(self):
        text = COLUMN_HEADERS + "\n\n# a comment\n   \ncuneus 1000 2300 4600 1.95 0.4\n"

        assert list(parse_region_stats(text)) == ["cuneus"]

    def test_last_occurrence_wins(self):
        text = COLUMN_HEADERS + "\ncuneus 1000 2300 4600 1.95 0.4\ncuneus 1000 2400 4700 2.05 0.4\n"

        assert parse_region_stats(text)["cuneus"] == RegionMetrics(2.05, 2400.0, 4700.0)

    def test_unparsable_value_becomes_nan(self):
        text = COLUMN_HEADERS + "\ncuneus 1000 2300 4600 abc 0.4\n"

        metrics = parse_region_stats(text)["cuneus"]

        assert math.isnan(metrics.thickness)
        assert metrics.surface_area == 2300.0

    def test_tabs_and_repeated_spaces(self):
        text = COLUMN_HEADERS + "\ncuneus\t1000   2300\t\t4600 1.95 0.4\n"

        assert parse_region_stats(text)["cuneus"] == RegionMetrics(1.95, 2300.0, 4600.0)

    def test_empty_text(self):
        assert parse_region_stats("") == {}


class TestExtractMeasure:
    """Test scalar measure extraction."""

    def test_strict_measure_line(self):
        assert extract_measure(make_aseg_text(), "CortexVol") == 550000.0

    def test_case_insensitive(self):
        assert extract_measure(make_aseg_text(), "etiv") == 1500000.0

    def test_first_measure_wins_for_prefixed_keys(self):
        text = make_aseg_text() + "# Measure BrainSegNotVent, BrainSegVolNotVent, Brain Seg Not Vent, 999.0, mm^3\n"

        assert extract_measure(text, "BrainSegVol") == 1250000.0

    def test_fallback_first_number_after_key(self):
        assert extract_measure("eTIV = 1500123.5 mm^3", "eTIV") == 1500123.5

    def test_missing_defaults_to_zero(self):
        assert extract_measure("# nothing here", "eTIV") == 0.0


class TestHeaderFields:
    """Test subject name extraction and plausibility check."""

    def test_subject_name(self):
        assert extract_subject_name(make_stats_text({}, subject="sub-01")) == "sub-01"

    def test_subject_name_missing(self):
        assert extract_subject_name("# hemi lh\n") is None

    def test_plausible_stats(self):
        assert is_plausible_stats(make_aseg_text())

    def test_implausible_stats(self):
        assert not is_plausible_stats("just some text\n")


class TestDetectStatsFileType:
    """Test stats file identification by name."""

    @pytest.mark.parametrize(
        "file_name,expected",
        [
            ("lh.aparc.DKTatlas.stats", "lh_dkt"),
            ("rh.aparc.DKTatlas.stats", "rh_dkt"),
            ("lh.aparc.stats", "lh_aparc"),
            ("rh.aparc.stats", "rh_aparc"),
            ("aseg.stats", "aseg"),
            ("lh.BA_exvivo.stats", "lh_ba"),
            ("rh.BA_exvivo.stats", "rh_ba"),
            ("RH.APARC.DKTATLAS.STATS", "rh_dkt"),
        ],
    )
    def test_known_names(self, file_name, expected):
        assert detect_stats_file_type(file_name) == expected

    def test_unknown_name(self):
        assert detect_stats_file_type("wmparc.stats") is None

    def test_dkt_not_confused_with_plain_aparc(self):
        assert detect_stats_file_type("subject_lh.aparc.DKTatlas.stats") == "lh_dkt"
