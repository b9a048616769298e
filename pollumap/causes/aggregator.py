"""Weighted-average aggregation of agent multipliers into category factors.

    factor = sum(multiplier[a] * weight[a]) / sum(weight[a])

Because weights are positive the factor is a convex combination of the
multipliers, so it stays within the multiplier bounds whenever every
multiplier does.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from pollumap.causes.constants import MULTIPLIER_DEFAULT
from pollumap.causes.registry import AgentRegistry
from pollumap.models import CauseCategory
from pollumap.utils import ConfigurationError

logger = logging.getLogger(__name__)


def default_multipliers(registry: AgentRegistry) -> dict[str, float]:
    """One entry per registered agent, all at the default multiplier."""
    return {agent_id: MULTIPLIER_DEFAULT for agent_id in sorted(registry.all_agent_ids())}


def aggregate(
    category: CauseCategory | str,
    multipliers: Mapping[str, float],
    registry: AgentRegistry,
) -> float:
    """Weighted average of the category's agent multipliers.

    Agents absent from ``multipliers`` count at the default of 1.0.
    """
    agents = registry.agents_for(category)
    total_weight = sum(agent.weight for agent in agents)
    if total_weight <= 0:
        raise ConfigurationError(f"Category {CauseCategory(category).value} has zero total weight")

    weighted = sum(
        multipliers.get(agent.id, MULTIPLIER_DEFAULT) * agent.weight
        for agent in agents
    )
    return weighted / total_weight


def aggregate_all(
    multipliers: Mapping[str, float],
    registry: AgentRegistry,
) -> dict[CauseCategory, float]:
    """Aggregate factor for every category."""
    factors = {
        category: aggregate(category, multipliers, registry)
        for category in CauseCategory
    }
    logger.debug("Aggregate factors: %s", {c.value: round(f, 4) for c, f in factors.items()})
    return factors
