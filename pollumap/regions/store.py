"""Region store: one-time enrichment of raw features into immutable regions.

Each raw feature is enriched with:
  1. kind      - water when flagged as a river or natural water body
  2. id        - first non-empty candidate name field, else the placeholder
  3. baseline  - supplied ``stats``/``baseline`` values, else one draw from
                 the baseline provider

A load either commits the whole enriched set or nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from pollumap.models import PLACEHOLDER_ID, Reading, Region, RegionKind
from pollumap.regions.baselines import RandomBaselineGenerator
from pollumap.utils import DataLoadError

logger = logging.getLogger(__name__)

# Priority order of name fields across the ward and river datasets
ID_FIELDS: tuple[str, ...] = ("Ward_Name", "name", "NAME", "Ward_No")

# Property keys that may carry a precomputed baseline
BASELINE_FIELDS: tuple[str, ...] = ("stats", "baseline")

BaselineProvider = Callable[[], Reading]


def resolve_kind(properties: Mapping[str, Any]) -> RegionKind:
    if properties.get("isRiver") or properties.get("natural") == "water":
        return RegionKind.water
    return RegionKind.land


def resolve_id(properties: Mapping[str, Any]) -> str:
    for field in ID_FIELDS:
        value = properties.get(field)
        if value:
            return str(value)
    return PLACEHOLDER_ID


class RegionStore:
    """Holds the enriched, immutable region list for one data load."""

    def __init__(self, baseline_provider: BaselineProvider | None = None) -> None:
        self._baseline_provider = baseline_provider or RandomBaselineGenerator()
        self._regions: tuple[Region, ...] = ()
        self._loaded = False

    # -- Loading --------------------------------------------------------------

    def load(self, raw_features: Iterable[Any] | Mapping[str, Any]) -> tuple[Region, ...]:
        """Enrich ``raw_features`` and replace the stored regions.

        Accepts a list of GeoJSON features, bare property mappings, or a
        FeatureCollection mapping. Raises DataLoadError on malformed input,
        in which case the previous regions are kept.
        """
        if isinstance(raw_features, Mapping):
            raw_features = raw_features.get("features")
        if raw_features is None or isinstance(raw_features, (str, bytes)):
            raise DataLoadError("Region data is not a feature collection")

        try:
            features = iter(raw_features)
        except TypeError as e:
            raise DataLoadError(f"Region data is not iterable: {e}") from e

        enriched = [self._enrich(index, feature) for index, feature in enumerate(features)]

        self._regions = tuple(enriched)
        self._loaded = True
        placeholders = sum(1 for r in self._regions if not r.is_interactive)
        logger.info(
            "Loaded %d regions (%d water, %d without a name)",
            len(self._regions),
            sum(1 for r in self._regions if r.is_water),
            placeholders,
        )
        return self._regions

    def _enrich(self, index: int, feature: Any) -> Region:
        if not isinstance(feature, Mapping):
            raise DataLoadError(f"Feature {index} is not a mapping")

        properties = feature["properties"] if "properties" in feature else feature
        if not isinstance(properties, Mapping):
            raise DataLoadError(f"Feature {index} has malformed properties")

        try:
            return Region(
                id=resolve_id(properties),
                kind=resolve_kind(properties),
                baseline=self._baseline(properties),
            )
        except ValidationError as e:
            raise DataLoadError(f"Feature {index} has an invalid baseline: {e}") from e

    def _baseline(self, properties: Mapping[str, Any]) -> Reading:
        for field in BASELINE_FIELDS:
            supplied = properties.get(field)
            if supplied is not None:
                if isinstance(supplied, Reading):
                    return supplied
                if not isinstance(supplied, Mapping):
                    raise DataLoadError(f"Baseline field '{field}' is not a mapping")
                return Reading.model_validate(
                    {key: supplied.get(key) for key in ("air", "water", "soil")}
                )
        return self._baseline_provider()

    # -- Accessors ------------------------------------------------------------

    @property
    def regions(self) -> tuple[Region, ...]:
        return self._regions

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get(self, region_id: str) -> Region | None:
        """First interactive region with this id, or None."""
        if region_id == PLACEHOLDER_ID:
            return None
        for region in self._regions:
            if region.id == region_id:
                return region
        return None

    def interactive_regions(self) -> list[Region]:
        return [r for r in self._regions if r.is_interactive]

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)
