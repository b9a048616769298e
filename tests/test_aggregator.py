"""Tests for weighted-average factor aggregation (pollumap/causes/aggregator.py)."""

import itertools
from unittest.mock import MagicMock

import pytest

from pollumap.causes.aggregator import aggregate, aggregate_all, default_multipliers
from pollumap.causes.constants import MULTIPLIER_MAX, MULTIPLIER_MIN
from pollumap.models import CauseCategory
from pollumap.utils import ConfigurationError


class TestAggregate:
    def test_defaults_give_exactly_one(self, registry):
        multipliers = default_multipliers(registry)
        for category in CauseCategory:
            assert aggregate(category, multipliers, registry) == 1.0

    def test_soil_weighted_average(self, registry):
        multipliers = {"pesticide": 2.0, "dumping": 1.0}
        # (2.0 * 0.7 + 1.0 * 0.3) / 1.0
        assert aggregate("soil", multipliers, registry) == pytest.approx(1.7)

    def test_missing_agents_count_as_default(self, registry):
        assert aggregate(CauseCategory.soil, {"pesticide": 2.0}, registry) == pytest.approx(1.7)
        assert aggregate(CauseCategory.air, {}, registry) == 1.0

    def test_normalizes_by_weight_sum(self, registry):
        # Water weights sum to 1.2
        multipliers = {"industrial_effluent": 3.0}
        expected = (3.0 * 0.5 + 1.0 * 0.4 + 1.0 * 0.3) / 1.2
        assert aggregate("water", multipliers, registry) == pytest.approx(expected)

    def test_other_categories_unaffected(self, registry):
        multipliers = {"stubble_burning": 3.0}
        assert aggregate("soil", multipliers, registry) == 1.0
        assert aggregate("water", multipliers, registry) == 1.0
        assert aggregate("air", multipliers, registry) > 1.0

    def test_zero_weight_fails_fast(self):
        registry = MagicMock()
        registry.agents_for.return_value = ()
        with pytest.raises(ConfigurationError):
            aggregate(CauseCategory.soil, {}, registry)


class TestConvexityBound:
    @pytest.mark.parametrize("category", list(CauseCategory))
    def test_factor_within_multiplier_bounds(self, registry, category):
        agents = registry.agents_for(category)
        for values in itertools.product((MULTIPLIER_MIN, 1.0, 1.7, MULTIPLIER_MAX), repeat=len(agents)):
            multipliers = {agent.id: v for agent, v in zip(agents, values)}
            factor = aggregate(category, multipliers, registry)
            assert MULTIPLIER_MIN - 1e-12 <= factor <= MULTIPLIER_MAX + 1e-12

    @pytest.mark.parametrize("value", [MULTIPLIER_MIN, MULTIPLIER_MAX])
    def test_uniform_multipliers_reproduce_value(self, registry, value):
        multipliers = {agent_id: value for agent_id in registry.all_agent_ids()}
        for category in CauseCategory:
            assert aggregate(category, multipliers, registry) == pytest.approx(value)


class TestAggregateAll:
    def test_returns_every_category(self, registry):
        factors = aggregate_all(default_multipliers(registry), registry)
        assert set(factors) == set(CauseCategory)
        assert all(f == 1.0 for f in factors.values())

    def test_default_multipliers_cover_registry(self, registry):
        multipliers = default_multipliers(registry)
        assert set(multipliers) == registry.all_agent_ids()
        assert set(multipliers.values()) == {1.0}
