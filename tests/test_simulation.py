"""Tests for the simulation evaluator (pollumap/simulation/evaluator.py)."""

import pytest

from pollumap.models import CauseCategory, Reading, Region
from pollumap.simulation.evaluator import composite_toxicity, scale, simulate


def _factors(air=1.0, water=1.0, soil=1.0):
    return {CauseCategory.air: air, CauseCategory.water: water, CauseCategory.soil: soil}


class TestSimulate:
    def test_unit_factors_reproduce_baseline(self, land_region):
        assert simulate(land_region, _factors()) == land_region.baseline

    def test_soil_scenario(self, land_region):
        reading = simulate(land_region, _factors(soil=1.7))
        assert reading.soil == 340

    def test_halved_air(self):
        region = Region(id="Dwarka", baseline=Reading(air=150, water=20, soil=100))
        assert simulate(region, _factors(air=0.5)).air == 75

    def test_truncates_toward_zero(self):
        region = Region(id="Narela", baseline=Reading(air=101, water=33, soil=99))
        reading = simulate(region, _factors(air=1.5, water=1.5, soil=1.5))
        assert reading == Reading(air=151, water=49, soil=148)

    def test_unbounded_above(self):
        region = Region(id="Anand Vihar", baseline=Reading(air=500, water=110, soil=350))
        reading = simulate(region, _factors(3.0, 3.0, 3.0))
        assert reading == Reading(air=1500, water=330, soil=1050)

    def test_is_pure(self, land_region):
        factors = _factors(air=1.3, water=0.7, soil=2.2)
        first = simulate(land_region, factors)
        second = simulate(land_region, factors)
        assert first == second
        assert land_region.baseline == Reading(air=120, water=40, soil=200)
        assert factors == _factors(air=1.3, water=0.7, soil=2.2)

    def test_missing_factor_raises(self, land_region):
        with pytest.raises(KeyError):
            simulate(land_region, {CauseCategory.air: 1.0})


class TestScale:
    def test_float_noise_does_not_drop_a_unit(self):
        # 100 * 1.15 == 114.99999999999999 in binary floating point
        assert scale(100, 1.15) == 115

    def test_real_fractions_still_truncate(self):
        assert scale(99, 1.5) == 148
        assert scale(3, 0.5) == 1

    def test_zero_baseline(self):
        assert scale(0, 3.0) == 0


class TestCompositeToxicity:
    def test_weighted_sum(self):
        # 0.5 * 120 + 3 * 40 + 0.2 * 200
        assert composite_toxicity(Reading(air=120, water=40, soil=200)) == 220

    def test_truncates(self):
        # 37.5 + 33 + 6.6 = 77.1
        assert composite_toxicity(Reading(air=75, water=11, soil=33)) == 77

    def test_water_dominates(self):
        dirty_water = composite_toxicity(Reading(air=0, water=100, soil=0))
        smoky_air = composite_toxicity(Reading(air=400, water=0, soil=0))
        assert dirty_water > smoky_air
