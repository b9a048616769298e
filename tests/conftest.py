"""Shared test fixtures for the PolluMap test suite."""

import os

import pytest

# Ensure test environment variables are set before any settings import
os.environ.setdefault("POLLUMAP_LOG_LEVEL", "WARNING")
os.environ.setdefault("POLLUMAP_BASELINE_SEED", "7")

from pollumap.causes.registry import AgentRegistry  # noqa: E402
from pollumap.engine import SimulationEngine  # noqa: E402
from pollumap.models import PLACEHOLDER_ID, Reading, Region, RegionKind  # noqa: E402


class FixedBaseline:
    """Baseline provider returning the same reading and counting calls."""

    def __init__(self, air=150, water=40, soil=200):
        self.reading = Reading(air=air, water=water, soil=soil)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.reading


@pytest.fixture
def registry():
    return AgentRegistry()


@pytest.fixture
def fixed_baseline():
    return FixedBaseline()


@pytest.fixture
def engine(fixed_baseline):
    return SimulationEngine(baseline_provider=fixed_baseline)


@pytest.fixture
def land_region():
    return Region(
        id="Rohini",
        kind=RegionKind.land,
        baseline=Reading(air=120, water=40, soil=200),
    )


@pytest.fixture
def water_region():
    return Region(
        id="Yamuna",
        kind=RegionKind.water,
        baseline=Reading(air=80, water=90, soil=60),
    )


@pytest.fixture
def placeholder_region():
    return Region(
        id=PLACEHOLDER_ID,
        kind=RegionKind.land,
        baseline=Reading(air=300, water=20, soil=100),
    )


@pytest.fixture
def sample_features():
    """Raw GeoJSON features covering every id and kind rule."""
    square = {
        "type": "Polygon",
        "coordinates": [[[77.0, 28.5], [77.1, 28.5], [77.1, 28.6], [77.0, 28.6], [77.0, 28.5]]],
    }
    line = {"type": "LineString", "coordinates": [[77.2, 28.8], [77.3, 28.5]]}
    return [
        {"type": "Feature", "geometry": square,
         "properties": {"Ward_Name": "Rohini", "stats": {"air": 120, "water": 40, "soil": 200}}},
        {"type": "Feature", "geometry": square,
         "properties": {"Ward_Name": "Dwarka", "name": "ignored",
                        "stats": {"air": 150, "water": 20, "soil": 100}}},
        {"type": "Feature", "geometry": line,
         "properties": {"name": "Yamuna", "isRiver": True,
                        "stats": {"air": 90, "water": 90, "soil": 60}}},
        {"type": "Feature", "geometry": square,
         "properties": {"NAME": "Sanjay Lake", "natural": "water"}},
        {"type": "Feature", "geometry": square,
         "properties": {"Ward_No": 162}},
        {"type": "Feature", "geometry": square, "properties": {}},
    ]
