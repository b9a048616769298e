"""
PolluMap - Causal Pollution Simulation
Causal factor simulation and severity classification for the Delhi dashboard
"""

__version__ = "0.1.0"
__author__ = "PolluMap Team"

from pollumap.causes.registry import AgentRegistry
from pollumap.engine import SimulationEngine
from pollumap.models import (
    PLACEHOLDER_ID,
    CausativeAgent,
    CauseCategory,
    Reading,
    Region,
    RegionKind,
    Selection,
    SeverityTier,
)
from pollumap.regions.store import RegionStore
from pollumap.utils import (
    ConfigurationError,
    DataLoadError,
    InvalidInputError,
    PolluMapError,
)

__all__ = [
    "PLACEHOLDER_ID",
    "AgentRegistry",
    "CausativeAgent",
    "CauseCategory",
    "ConfigurationError",
    "DataLoadError",
    "InvalidInputError",
    "PolluMapError",
    "Reading",
    "Region",
    "RegionKind",
    "RegionStore",
    "Selection",
    "SeverityTier",
    "SimulationEngine",
]
