"""Region ingestion: GeoJSON reading, baseline generation and the region store."""

from pollumap.regions.baselines import RandomBaselineGenerator
from pollumap.regions.geojson import read_features
from pollumap.regions.store import RegionStore

__all__ = ["RandomBaselineGenerator", "RegionStore", "read_features"]
