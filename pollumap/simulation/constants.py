"""Severity thresholds and tier labels per pollution category.

Each category lists its boundaries in ascending order. A value is placed
in the tier of the highest boundary it strictly exceeds; values exceeding
none fall in tier 0.
"""

from __future__ import annotations

from pollumap.models import CauseCategory

SEVERITY_THRESHOLDS: dict[CauseCategory, tuple[int, ...]] = {
    CauseCategory.soil:  (120, 200, 280),
    CauseCategory.air:   (100, 200, 300, 400, 600),
    CauseCategory.water: (30, 50, 80, 150),
}

# One label more than thresholds per category
TIER_LABELS: dict[CauseCategory, tuple[str, ...]] = {
    CauseCategory.soil:  ("baseline", "elevated", "warning", "toxic"),
    CauseCategory.air:   ("not_present", "haze", "mist", "smoke", "thick_smoke", "severe_smog"),
    CauseCategory.water: ("clean", "moderate", "polluted", "heavy", "critical"),
}

# Air below its first boundary is treated as absent, not merely mild
ABSENT_TIERS: dict[CauseCategory, frozenset[int]] = {
    CauseCategory.air: frozenset({0}),
}

# Composite toxicity score weights: one number summarising a ward
TOXICITY_WEIGHTS: dict[CauseCategory, float] = {
    CauseCategory.air: 0.5,
    CauseCategory.water: 3.0,
    CauseCategory.soil: 0.2,
}
