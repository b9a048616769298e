"""Map simulated values to category-specific severity tiers."""

from __future__ import annotations

from pollumap.models import CauseCategory, Reading, SeverityTier
from pollumap.simulation.constants import ABSENT_TIERS, SEVERITY_THRESHOLDS, TIER_LABELS


def classify(category: CauseCategory | str, value: float) -> SeverityTier:
    """Highest strictly-exceeded threshold wins; tier 0 otherwise.

    Arbitrarily large values land in the highest tier.
    """
    category = CauseCategory(category)
    thresholds = SEVERITY_THRESHOLDS[category]

    level = 0
    for i in range(len(thresholds) - 1, -1, -1):
        if value > thresholds[i]:
            level = i + 1
            break

    return SeverityTier(
        category=category,
        level=level,
        label=TIER_LABELS[category][level],
        present=level not in ABSENT_TIERS.get(category, frozenset()),
    )


def classify_reading(reading: Reading) -> dict[CauseCategory, SeverityTier]:
    return {category: classify(category, reading.value(category)) for category in CauseCategory}


def tier_count(category: CauseCategory | str) -> int:
    return len(TIER_LABELS[CauseCategory(category)])
