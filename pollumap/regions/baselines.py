"""Placeholder baseline readings for regions that arrive without any.

The ranges mirror the mock data of the first Delhi dashboard: air on an
AQI-like 50-449 scale, water on a WQI-like 10-109 scale, and a soil index
of 50-349. Seeding makes a session reproducible.
"""

from __future__ import annotations

import numpy as np

from pollumap.models import CauseCategory, Reading

# Half-open integer ranges [low, high)
BASELINE_RANGES: dict[CauseCategory, tuple[int, int]] = {
    CauseCategory.air: (50, 450),
    CauseCategory.water: (10, 110),
    CauseCategory.soil: (50, 350),
}


class RandomBaselineGenerator:
    """Callable returning a fresh random baseline Reading on each call."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def __call__(self) -> Reading:
        return Reading(**{
            category.value: int(self._rng.integers(low, high))
            for category, (low, high) in BASELINE_RANGES.items()
        })
