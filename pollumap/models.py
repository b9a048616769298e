"""Pydantic v2 models for the causal pollution simulation.

Importable without Streamlit, pydeck, or any region data on disk.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Region id assigned when no candidate name field resolves.
PLACEHOLDER_ID = "#"


class CauseCategory(str, Enum):
    """Independent pollution dimension with its own agents and thresholds."""
    air = "air"
    water = "water"
    soil = "soil"


class RegionKind(str, Enum):
    land = "land"
    water = "water"


class CausativeAgent(BaseModel):
    """A named contributing cause within a category."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    label: str
    weight: float = Field(..., gt=0)


class Reading(BaseModel):
    """Per-category pollution values for one region.

    Used for both the baseline fixed at load time and the simulated
    values derived from it.
    """

    model_config = ConfigDict(frozen=True)

    air: int = Field(..., ge=0)
    water: int = Field(..., ge=0)
    soil: int = Field(..., ge=0)

    def value(self, category: CauseCategory) -> int:
        return getattr(self, CauseCategory(category).value)

    def as_dict(self) -> dict[CauseCategory, int]:
        return {category: self.value(category) for category in CauseCategory}


class Region(BaseModel):
    """A named region with its immutable baseline reading."""

    model_config = ConfigDict(frozen=True)

    id: str
    kind: RegionKind = RegionKind.land
    baseline: Reading

    @property
    def is_water(self) -> bool:
        return self.kind == RegionKind.water

    @property
    def is_interactive(self) -> bool:
        """Placeholder-id regions are rendered but never respond to input."""
        return self.id != PLACEHOLDER_ID

    @property
    def is_selectable(self) -> bool:
        return self.is_interactive and not self.is_water


class SeverityTier(BaseModel):
    """Discrete classification of a simulated value.

    ``level`` is ordinal within a category only. ``present`` is False for
    the air tier below the visibility floor, meaning the region takes no
    part in the air layer at all.
    """

    model_config = ConfigDict(frozen=True)

    category: CauseCategory
    level: int = Field(..., ge=0)
    label: str
    present: bool = True


class Selection(BaseModel):
    """A selected land region and its readings frozen at selection time."""

    model_config = ConfigDict(frozen=True)

    region: Region
    snapshot: Reading
    factors: Mapping[CauseCategory, float]

    @field_validator("factors", mode="after")
    @classmethod
    def _read_only_factors(cls, v: Mapping[CauseCategory, float]) -> Mapping[CauseCategory, float]:
        return MappingProxyType(dict(v))


class LayerCell(BaseModel):
    """One region's contribution to a category layer on the rendering surface.

    ``index`` is the region's position in the store, which matches the
    order of the raw features it was loaded from.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    region_id: str
    kind: RegionKind
    category: CauseCategory
    value: int
    tier: SeverityTier
