"""Tests for the pollumap command line interface."""

import json

import pytest
from click.testing import CliRunner

from pollumap import __version__
from pollumap.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def geojson_file(tmp_path, sample_features):
    path = tmp_path / "wards.geojson"
    path.write_text(json.dumps({"type": "FeatureCollection", "features": sample_features}))
    return str(path)


class TestInfoCommands:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_agents_lists_catalog(self, runner):
        result = runner.invoke(main, ["agents"])
        assert result.exit_code == 0
        assert "pesticide" in result.output
        assert "stubble_burning" in result.output

    def test_classify_soil(self, runner):
        result = runner.invoke(main, ["classify", "soil", "340"])
        assert result.exit_code == 0
        assert "tier 3" in result.output
        assert "toxic" in result.output

    def test_classify_absent_air(self, runner):
        result = runner.invoke(main, ["classify", "air", "75"])
        assert result.exit_code == 0
        assert "not present" in result.output

    def test_classify_unknown_category(self, runner):
        result = runner.invoke(main, ["classify", "noise", "10"])
        assert result.exit_code == 2


class TestSimulateCommand:
    def test_soil_scenario(self, runner, geojson_file):
        result = runner.invoke(
            main, ["simulate", geojson_file, "--category", "soil", "--set", "pesticide=2.0", "--seed", "1"]
        )
        assert result.exit_code == 0
        assert "Rohini" in result.output
        assert "340" in result.output

    def test_out_of_range_multiplier_fails(self, runner, geojson_file):
        result = runner.invoke(main, ["simulate", geojson_file, "--set", "pesticide=3.5"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_malformed_assignment_is_usage_error(self, runner, geojson_file):
        result = runner.invoke(main, ["simulate", geojson_file, "--set", "bad"])
        assert result.exit_code == 2

    def test_unreadable_region_file_fails(self, runner, tmp_path):
        path = tmp_path / "broken.geojson"
        path.write_text("{not json")
        result = runner.invoke(main, ["simulate", str(path)])
        assert result.exit_code == 1


class TestInspectCommand:
    def test_inspect_land_region(self, runner, geojson_file):
        result = runner.invoke(main, ["inspect", geojson_file, "Rohini", "--set", "pesticide=2.0"])
        assert result.exit_code == 0
        assert "ROHINI" in result.output
        assert "Composite toxicity" in result.output

    @pytest.mark.parametrize("region_id", ["Yamuna", "#", "Atlantis"])
    def test_inspect_rejects_ineligible(self, runner, geojson_file, region_id):
        result = runner.invoke(main, ["inspect", geojson_file, region_id])
        assert result.exit_code == 1
