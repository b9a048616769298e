"""Static causative agent catalog and multiplier bounds.

Weights are relative within a category. They need not sum to 1; the
aggregator divides by the category's weight sum.
"""

from __future__ import annotations

from pollumap.models import CauseCategory

# Slider range for every agent multiplier
MULTIPLIER_MIN = 0.5
MULTIPLIER_MAX = 3.0
MULTIPLIER_DEFAULT = 1.0
MULTIPLIER_STEP = 0.1

# Display order within a category follows list order
AGENT_CATALOG: dict[CauseCategory, list[dict]] = {
    CauseCategory.air: [
        {"id": "stubble_burning",     "label": "Stubble Burning",     "weight": 0.35},
        {"id": "vehicular_emissions", "label": "Vehicular Emissions", "weight": 0.30},
        {"id": "industrial_stacks",   "label": "Industrial Stacks",   "weight": 0.20},
        {"id": "construction_dust",   "label": "Construction Dust",   "weight": 0.15},
    ],
    CauseCategory.water: [
        {"id": "industrial_effluent", "label": "Industrial Effluent", "weight": 0.5},
        {"id": "untreated_sewage",    "label": "Untreated Sewage",    "weight": 0.4},
        {"id": "agricultural_runoff", "label": "Agricultural Runoff", "weight": 0.3},
    ],
    CauseCategory.soil: [
        {"id": "pesticide", "label": "Pesticide Use",    "weight": 0.7},
        {"id": "dumping",   "label": "Landfill Dumping", "weight": 0.3},
    ],
}
