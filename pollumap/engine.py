"""Simulation engine: owned multiplier, visibility and selection state.

All mutation of the simulation goes through this class:

    update_multiplier(agent_id, value)  -- rejected outside [0.5, 3.0]
    toggle_visibility(category)
    select(region) / deselect()

Factors and simulated readings are never cached. Every call recomputes
them from the current multipliers, so a multiplier update is visible to
the very next read. A selection keeps the reading taken when it was made.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Mapping
from typing import Any

from pollumap.causes.aggregator import aggregate_all, default_multipliers
from pollumap.causes.constants import MULTIPLIER_MAX, MULTIPLIER_MIN
from pollumap.causes.registry import AgentRegistry
from pollumap.models import (
    CauseCategory,
    LayerCell,
    Reading,
    Region,
    Selection,
    SeverityTier,
)
from pollumap.regions.store import BaselineProvider, RegionStore
from pollumap.simulation.classifier import classify, classify_reading
from pollumap.simulation.evaluator import simulate
from pollumap.utils import ConfigurationError, InvalidInputError

logger = logging.getLogger(__name__)


class SimulationEngine:
    """One independent simulation session."""

    def __init__(
        self,
        registry: AgentRegistry | None = None,
        store: RegionStore | None = None,
        baseline_provider: BaselineProvider | None = None,
    ) -> None:
        if store is not None and baseline_provider is not None:
            raise ConfigurationError(
                "Pass baseline_provider to the RegionStore, not alongside an existing store"
            )
        self.registry = registry if registry is not None else AgentRegistry()
        self.store = store if store is not None else RegionStore(baseline_provider=baseline_provider)
        self._multipliers: dict[str, float] = default_multipliers(self.registry)
        self._visibility: dict[CauseCategory, bool] = {c: True for c in CauseCategory}
        self._selection: Selection | None = None

    # -- Data -----------------------------------------------------------------

    def load_regions(self, raw_features: Iterable[Any] | Mapping[str, Any]) -> tuple[Region, ...]:
        """Populate the region store. On DataLoadError the store is unchanged."""
        return self.store.load(raw_features)

    @property
    def regions(self) -> tuple[Region, ...]:
        return self.store.regions

    # -- Multipliers ----------------------------------------------------------

    @property
    def multipliers(self) -> dict[str, float]:
        return dict(self._multipliers)

    def update_multiplier(self, agent_id: str, value: float) -> None:
        """Set one agent's multiplier. Raises InvalidInputError on rejection."""
        if agent_id not in self.registry:
            logger.warning("Rejected multiplier for unknown agent '%s'", agent_id)
            raise InvalidInputError(f"Unknown agent: {agent_id}")

        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            logger.warning("Rejected non-numeric multiplier %r for '%s'", value, agent_id)
            raise InvalidInputError(f"Multiplier for {agent_id} is not a number: {value!r}")

        number = float(value)

        if not math.isfinite(number) or not (MULTIPLIER_MIN <= number <= MULTIPLIER_MAX):
            logger.warning("Rejected multiplier %r for '%s'", value, agent_id)
            raise InvalidInputError(
                f"Multiplier for {agent_id} must be within "
                f"[{MULTIPLIER_MIN}, {MULTIPLIER_MAX}], got {value!r}"
            )

        self._multipliers[agent_id] = number
        logger.debug("Multiplier %s = %.2f", agent_id, number)

    def reset_multipliers(self) -> None:
        self._multipliers = default_multipliers(self.registry)

    def current_factors(self) -> dict[CauseCategory, float]:
        return aggregate_all(self._multipliers, self.registry)

    # -- Simulation -----------------------------------------------------------

    def simulate(self, region: Region) -> Reading:
        return simulate(region, self.current_factors())

    def classify(self, region: Region) -> dict[CauseCategory, SeverityTier]:
        return classify_reading(self.simulate(region))

    # -- Visibility -----------------------------------------------------------

    @property
    def visibility(self) -> dict[CauseCategory, bool]:
        return dict(self._visibility)

    def is_visible(self, category: CauseCategory | str) -> bool:
        return self._visibility[CauseCategory(category)]

    def toggle_visibility(self, category: CauseCategory | str) -> bool:
        """Flip a category's visibility and return the new value."""
        category = CauseCategory(category)
        self._visibility[category] = not self._visibility[category]
        return self._visibility[category]

    # -- Selection ------------------------------------------------------------

    @property
    def selection(self) -> Selection | None:
        return self._selection

    def select(self, region: Region) -> bool:
        """Snapshot a land region's current simulated reading.

        Water regions and placeholder-id regions are ignored; the current
        selection is left as it was. Returns True when the region was selected.
        """
        if not region.is_selectable:
            logger.debug("Ignored selection of non-selectable region '%s'", region.id)
            return False

        factors = self.current_factors()
        self._selection = Selection(
            region=region,
            snapshot=simulate(region, factors),
            factors=factors,
        )
        logger.info("Selected region '%s'", region.id)
        return True

    def select_by_id(self, region_id: str) -> bool:
        region = self.store.get(region_id)
        if region is None:
            return False
        return self.select(region)

    def deselect(self) -> None:
        self._selection = None

    # -- Rendering surface ----------------------------------------------------

    def layer(self, category: CauseCategory | str) -> list[LayerCell]:
        """Cells of one category layer under the current factors.

        Air and soil are drawn over land only; water quality covers every
        region. Air cells below the visibility floor are left out.
        """
        category = CauseCategory(category)
        factors = self.current_factors()
        cells: list[LayerCell] = []
        for index, region in enumerate(self.store):
            if region.is_water and category != CauseCategory.water:
                continue
            value = simulate(region, factors).value(category)
            tier = classify(category, value)
            if not tier.present:
                continue
            cells.append(LayerCell(
                index=index,
                region_id=region.id,
                kind=region.kind,
                category=category,
                value=value,
                tier=tier,
            ))
        return cells

    def render_frame(self) -> dict[CauseCategory, list[LayerCell]]:
        """Layers for every visible category."""
        return {
            category: self.layer(category)
            for category in CauseCategory
            if self._visibility[category]
        }
