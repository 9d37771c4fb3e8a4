"""Unit tests for MCP tool implementations."""

import os
from unittest.mock import patch

import pytest

from conftest import at_mean, make_stats_text
from dkt_mcp.tools import (
    StatsFileError,
    ValidationError,
    analyze_stats_files,
    analyze_subject_directory,
    find_stats_files,
    list_indices,
    parse_stats_file,
    read_stats_file,
    score_region,
    validate_hemisphere,
    validate_metric_weights,
    validate_path,
    validate_region_name,
)


@pytest.fixture
def stats_pair(tmp_path, mean_hemisphere):
    """lh/rh DKT stats files with every region at the reference means."""
    lh = tmp_path / "lh.aparc.DKTatlas.stats"
    rh = tmp_path / "rh.aparc.DKTatlas.stats"
    lh.write_text(make_stats_text(mean_hemisphere, "lh"))
    rh.write_text(make_stats_text(mean_hemisphere, "rh"))
    return str(lh), str(rh)


class TestValidatePath:
    """Test path validation."""

    def test_returns_absolute_path(self, tmp_path):
        result = validate_path(str(tmp_path / "x.stats"), "path")
        assert os.path.isabs(result)

    def test_expands_user(self):
        assert not validate_path("~/x.stats", "path").startswith("~")

    def test_empty_path(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_path("", "lh_path")
        assert exc_info.value.field == "lh_path"
        assert "cannot be empty" in str(exc_info.value)

    def test_whitespace_path(self):
        with pytest.raises(ValidationError):
            validate_path("   ", "path")

    def test_nul_byte(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_path("/tmp/a\x00b", "path")
        assert "NUL" in str(exc_info.value)

    def test_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_path("/" + "a" * 5000, "path")
        assert "maximum length" in str(exc_info.value)


class TestValidateHemisphere:
    """Test hemisphere mix-up detection."""

    def test_matching_hemisphere(self):
        validate_hemisphere("/data/lh.aparc.DKTatlas.stats", "lh", "lh_path")

    def test_unrecognized_name_accepted(self):
        validate_hemisphere("/data/left_dkt.txt", "lh", "lh_path")

    def test_swapped_hemisphere(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_hemisphere("/data/rh.aparc.DKTatlas.stats", "lh", "lh_path")
        assert exc_info.value.field == "lh_path"
        assert "left-hemisphere" in str(exc_info.value)

    def test_swapped_right(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_hemisphere("/data/lh.aparc.stats", "rh", "rh_path")
        assert "right-hemisphere" in str(exc_info.value)


class TestValidateRegionName:
    def test_normalizes_case(self):
        assert validate_region_name(" SuperiorTemporal ") == "superiortemporal"

    def test_unknown_region(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_region_name("bankssts")
        assert exc_info.value.field == "region"
        assert "Unknown region" in str(exc_info.value)

    def test_empty(self):
        with pytest.raises(ValidationError):
            validate_region_name("")

    def test_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_region_name("x" * 100)
        assert "maximum length" in str(exc_info.value)


class TestValidateMetricWeights:
    def test_valid(self):
        assert validate_metric_weights([92, 4, 4]) == (92, 4, 4)

    def test_wrong_count(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_metric_weights([50, 50])
        assert exc_info.value.field == "metric_weights"

    def test_negative(self):
        with pytest.raises(ValidationError):
            validate_metric_weights([120, -10, -10])

    def test_nan_weight(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_metric_weights([float("nan"), 50, 50])
        assert "finite" in str(exc_info.value)

    def test_infinite_weight(self):
        with pytest.raises(ValidationError):
            validate_metric_weights([float("inf"), 0, 0])

    def test_wrong_total(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_metric_weights([60, 30, 20])
        assert "sum to 100" in str(exc_info.value)


class TestReadStatsFile:
    """Test stats file access checks."""

    def test_reads_content(self, stats_pair):
        lh_path, _ = stats_pair
        assert "# Measure Cortex" in read_stats_file(lh_path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(StatsFileError) as exc_info:
            read_stats_file(str(tmp_path / "nope.stats"))
        assert "not found" in str(exc_info.value)

    def test_not_stats_text(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello\n")

        with pytest.raises(StatsFileError) as exc_info:
            read_stats_file(str(path))
        assert "Not a FreeSurfer stats file" in str(exc_info.value)

    def test_size_limit(self, stats_pair):
        lh_path, _ = stats_pair

        with patch("dkt_mcp.tools.MAX_STATS_BYTES", 10):
            with pytest.raises(StatsFileError) as exc_info:
                read_stats_file(lh_path)

        assert "size limit" in str(exc_info.value)
        assert exc_info.value.details["limit"] == 10


class TestFindStatsFiles:
    def test_prefers_stats_subdirectory(self, subject_dir):
        (subject_dir / "aseg.stats").write_text("# Measure decoy\n")

        files = find_stats_files(str(subject_dir))

        assert files["aseg"] == str(subject_dir / "stats" / "aseg.stats")
        assert set(files) == {"lh_dkt", "rh_dkt", "lh_aparc", "rh_aparc", "aseg"}

    def test_flat_directory(self, stats_pair, tmp_path):
        files = find_stats_files(str(tmp_path))

        assert set(files) == {"lh_dkt", "rh_dkt"}


class TestAnalyzeStatsFiles:
    """Test the two-file analysis tool."""

    def test_neutral_subject(self, stats_pair):
        lh_path, rh_path = stats_pair

        result = analyze_stats_files(lh_path, rh_path)

        assert result["success"] is True
        assert result["lh_region_count"] == 27
        assert result["rh_region_count"] == 27
        assert len(result["indices"]) == 19
        assert result["overall_score"] == 75
        assert result["indices"][0]["name"] == "Handedness Index"

    def test_lateralized_subject(self, tmp_path, mean_hemisphere):
        lh_regions = {**mean_hemisphere, "precentral": at_mean("precentral", thickness=2.83)}
        rh_regions = {**mean_hemisphere, "precentral": at_mean("precentral", thickness=2.47)}
        lh = tmp_path / "lh.aparc.DKTatlas.stats"
        rh = tmp_path / "rh.aparc.DKTatlas.stats"
        lh.write_text(make_stats_text(lh_regions, "lh"))
        rh.write_text(make_stats_text(rh_regions, "rh"))

        result = analyze_stats_files(str(lh), str(rh))

        handedness = result["indices"][0]
        assert handedness["value"] > 0
        assert handedness["percentile"] > 50

    def test_with_auxiliary_files(self, stats_pair, tmp_path):
        lh_path, rh_path = stats_pair
        aux = tmp_path / "lh.BA_exvivo.stats"
        aux.write_text(make_stats_text({"BA44_exvivo": at_mean("parsopercularis")}, "lh"))

        result = analyze_stats_files(lh_path, rh_path, lh_aux_path=str(aux))

        assert result["success"] is True
        assert result["overall_score"] == 75

    def test_swapped_auxiliary_file(self, stats_pair, tmp_path):
        lh_path, rh_path = stats_pair
        aux = tmp_path / "rh.BA_exvivo.stats"
        aux.write_text(make_stats_text({"BA44_exvivo": at_mean("parsopercularis")}, "rh"))

        with pytest.raises(ValidationError) as exc_info:
            analyze_stats_files(lh_path, rh_path, lh_aux_path=str(aux))
        assert exc_info.value.field == "lh_aux_path"

    def test_swapped_files(self, stats_pair):
        lh_path, rh_path = stats_pair

        with pytest.raises(ValidationError) as exc_info:
            analyze_stats_files(rh_path, lh_path)
        assert exc_info.value.field == "lh_path"

    def test_missing_file(self, stats_pair, tmp_path):
        lh_path, _ = stats_pair

        with pytest.raises(StatsFileError):
            analyze_stats_files(lh_path, str(tmp_path / "rh.aparc.DKTatlas.stats.bak"))

    def test_empty_region_table_is_neutral(self, tmp_path):
        lh = tmp_path / "lh.aparc.DKTatlas.stats"
        rh = tmp_path / "rh.aparc.DKTatlas.stats"
        lh.write_text(make_stats_text({}, "lh"))
        rh.write_text(make_stats_text({}, "rh"))

        result = analyze_stats_files(str(lh), str(rh))

        assert all(index["value"] == 0 for index in result["indices"])
        assert all(index["coverage"] == 0 for index in result["indices"])


class TestAnalyzeSubjectDirectory:
    """Test the subject directory tool."""

    def test_complete_directory(self, subject_dir):
        result = analyze_subject_directory(str(subject_dir))

        assert result["success"] is True
        assert result["subject_name"] == "bert"
        assert len(result["indices"]) == 19
        assert result["files"]["aseg"].endswith("aseg.stats")

    def test_accepts_stats_folder_itself(self, subject_dir):
        result = analyze_subject_directory(str(subject_dir / "stats"))

        assert result["subject_name"] == "bert"

    def test_whole_brain_metrics(self, subject_dir):
        whole_brain = analyze_subject_directory(str(subject_dir))["whole_brain"]

        assert whole_brain["brain_vol"]["value"] == 1250.0
        assert whole_brain["brain_vol"]["unit"] == "cm3"
        assert whole_brain["brain_vol"]["top_percent"] == 50
        assert whole_brain["etiv"]["value"] == 1500.0
        assert "top_percent" not in whole_brain["etiv"]
        assert whole_brain["lh_thickness"]["value"] == 2.55
        assert whole_brain["lh_thickness"]["top_percent"] == 50

    def test_missing_required_file(self, subject_dir):
        os.remove(subject_dir / "stats" / "aseg.stats")

        with pytest.raises(StatsFileError) as exc_info:
            analyze_subject_directory(str(subject_dir))
        assert "aseg.stats" in str(exc_info.value)
        assert exc_info.value.details["missing"] == ["aseg.stats"]

    def test_not_a_directory(self, tmp_path):
        with pytest.raises(StatsFileError) as exc_info:
            analyze_subject_directory(str(tmp_path / "missing"))
        assert "Not a directory" in str(exc_info.value)

    def test_invalid_path(self):
        with pytest.raises(ValidationError):
            analyze_subject_directory("")


class TestParseStatsFile:
    def test_aparc_file(self, stats_pair):
        lh_path, _ = stats_pair

        result = parse_stats_file(lh_path)

        assert result["file_type"] == "lh_dkt"
        assert result["subject_name"] == "bert"
        assert result["region_count"] == 27
        assert result["mean_thickness"] == 2.55
        assert result["regions"]["cuneus"]["thickness"] == 1.95

    def test_aseg_file(self, subject_dir):
        result = parse_stats_file(str(subject_dir / "stats" / "aseg.stats"))

        assert result["file_type"] == "aseg"
        assert result["etiv"] == 1500000.0
        assert result["region_count"] == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(StatsFileError):
            parse_stats_file(str(tmp_path / "lh.aparc.stats"))


class TestScoreRegion:
    """Test single-region scoring."""

    def test_at_mean(self):
        result = score_region("precentral", 2.65, 5400, 16500)

        assert result["composite_z"] == 0
        assert result["percentile"] == 50
        assert result["metric_weights"] == [60, 30, 10]

    def test_custom_weights(self):
        # thickness one SD above the mean, weighted 100%
        result = score_region("precentral", 2.83, 5400, 16500, metric_weights=[100, 0, 0])

        assert result["z_thickness"] == 1.0
        assert result["composite_z"] == 1.0
        assert result["percentile"] == 84

    def test_unknown_region(self):
        with pytest.raises(ValidationError):
            score_region("hippocampus", 2.5, 1000, 3000)

    def test_huge_measurement(self):
        result = score_region("precentral", 1e306, 5400, 16500)

        assert result["composite_z"] > 1e300
        assert result["percentile"] == 99

    def test_bad_weights(self):
        with pytest.raises(ValidationError):
            score_region("precentral", 2.65, 5400, 16500, metric_weights=[50, 50, 50])


class TestListIndices:
    def test_catalog(self):
        result = list_indices()

        assert result["success"] is True
        assert result["total_count"] == 19
        assert [entry["position"] for entry in result["indices"]] == list(range(19))
        assert result["indices"][3]["name"] == "Language Lateralization Index"
        assert result["indices"][3]["percentile_strategy"] == "language_lateralization"

    def test_entries_describe_regions(self):
        handedness = list_indices()["indices"][0]

        assert handedness["regions"][0]["region"] == "precentral"
        assert handedness["regions"][0]["metric_weights"] == "60:30:10"
