"""Apply aggregate factors to a region's baseline reading.

simulated = floor(baseline * factor), per category. Values are unbounded
above; the classifier clamps them to the highest tier.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from pollumap.models import CauseCategory, Reading, Region
from pollumap.simulation.constants import TOXICITY_WEIGHTS

# Products are rounded to this many places before truncation so that
# float noise (339.99999999999994) does not drop a whole unit.
_PRODUCT_PRECISION = 9


def scale(baseline: int, factor: float) -> int:
    """Truncate ``baseline * factor`` toward zero."""
    return math.floor(round(baseline * factor, _PRODUCT_PRECISION))


def simulate(region: Region, factors: Mapping[CauseCategory, float]) -> Reading:
    """Simulated reading for ``region`` under ``factors``. Pure."""
    return Reading(**{
        category.value: scale(region.baseline.value(category), factors[category])
        for category in CauseCategory
    })


def composite_toxicity(reading: Reading) -> int:
    """Single health number for a reading: 0.5*air + 3*water + 0.2*soil."""
    score = sum(
        reading.value(category) * weight
        for category, weight in TOXICITY_WEIGHTS.items()
    )
    return math.floor(round(score, _PRODUCT_PRECISION))
