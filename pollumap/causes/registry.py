"""Read-only registry of causative agents grouped by pollution category.

The registry is validated once at construction. An inconsistent catalog is
a configuration error and prevents any engine from being built on it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pollumap.causes.constants import AGENT_CATALOG
from pollumap.models import CausativeAgent, CauseCategory
from pollumap.utils import ConfigurationError

logger = logging.getLogger(__name__)


class AgentRegistry:
    """Static catalog: for each category, an ordered tuple of agents."""

    def __init__(
        self,
        catalog: Mapping[CauseCategory | str, Iterable[CausativeAgent | Mapping[str, Any]]] | None = None,
    ) -> None:
        source = AGENT_CATALOG if catalog is None else catalog
        self._agents: dict[CauseCategory, tuple[CausativeAgent, ...]] = {}
        self._category_of: dict[str, CauseCategory] = {}
        self._by_id: dict[str, CausativeAgent] = {}

        for raw_category, entries in source.items():
            try:
                category = CauseCategory(raw_category)
            except ValueError:
                raise ConfigurationError(f"Unknown cause category: {raw_category!r}") from None

            agents = tuple(self._coerce(category, entry) for entry in entries)
            for agent in agents:
                if agent.id in self._by_id:
                    raise ConfigurationError(
                        f"Agent id '{agent.id}' in {category.value} collides with "
                        f"{self._category_of[agent.id].value}"
                    )
                self._by_id[agent.id] = agent
                self._category_of[agent.id] = category

            if sum(agent.weight for agent in agents) <= 0:
                raise ConfigurationError(f"Category {category.value} has zero total weight")
            self._agents[category] = agents

        missing = [c.value for c in CauseCategory if c not in self._agents]
        if missing:
            raise ConfigurationError(f"No agents registered for: {', '.join(missing)}")

        logger.debug(
            "Agent registry built: %s",
            {c.value: len(a) for c, a in self._agents.items()},
        )

    # -- Lookups --------------------------------------------------------------

    def agents_for(self, category: CauseCategory | str) -> tuple[CausativeAgent, ...]:
        """Agents of a category in display order."""
        return self._agents[CauseCategory(category)]

    def all_agent_ids(self) -> set[str]:
        return set(self._by_id)

    def get_agent(self, agent_id: str) -> CausativeAgent | None:
        return self._by_id.get(agent_id)

    def category_of(self, agent_id: str) -> CauseCategory | None:
        return self._category_of.get(agent_id)

    def total_weight(self, category: CauseCategory | str) -> float:
        return sum(agent.weight for agent in self.agents_for(category))

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    @staticmethod
    def _coerce(category: CauseCategory, entry: CausativeAgent | Mapping[str, Any]) -> CausativeAgent:
        if isinstance(entry, CausativeAgent):
            return entry
        try:
            return CausativeAgent.model_validate(entry)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid agent in {category.value}: {e}") from e
