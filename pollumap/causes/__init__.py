"""Causative agent catalog, registry and per-category factor aggregation."""

from pollumap.causes.aggregator import aggregate, aggregate_all, default_multipliers
from pollumap.causes.registry import AgentRegistry

__all__ = ["AgentRegistry", "aggregate", "aggregate_all", "default_multipliers"]
