"""Tests for PolluMap settings and shared utilities."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from pollumap.settings import PolluMapSettings
from pollumap.utils import (
    ConfigurationError,
    DataLoadError,
    InvalidInputError,
    PolluMapError,
    read_json,
)


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("POLLUMAP_BASELINE_SEED", raising=False)
        s = PolluMapSettings(_env_file=None)
        assert s.regions_file == "delhi_combined2.geojson"
        assert s.baseline_seed is None
        assert s.map_zoom == 10
        assert s.map_bounds == (28.20, 76.60, 29.10, 77.80)

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("POLLUMAP_BASELINE_SEED", "42")
        monkeypatch.setenv("POLLUMAP_MAP_ZOOM", "12")
        s = PolluMapSettings(_env_file=None)
        assert s.baseline_seed == 42
        assert s.map_zoom == 12

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("POLLUMAP_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            PolluMapSettings(_env_file=None)

    def test_relative_regions_file_resolves_to_data_dir(self):
        s = PolluMapSettings(_env_file=None, regions_file="wards.geojson")
        assert s.regions_path == s.data_dir / "wards.geojson"
        assert s.data_dir.name == "data"

    def test_absolute_regions_file_used_as_is(self, tmp_path):
        target = tmp_path / "wards.geojson"
        s = PolluMapSettings(_env_file=None, regions_file=str(target))
        assert s.regions_path == target


class TestUtils:
    def test_exception_hierarchy(self):
        for error in (ConfigurationError, InvalidInputError, DataLoadError):
            assert issubclass(error, PolluMapError)
        assert issubclass(InvalidInputError, ValueError)

    def test_read_json(self, tmp_path):
        path = tmp_path / "x.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert read_json(path) == {"a": 1}
        assert isinstance(read_json(Path(path)), dict)
