"""PolluMap Configuration Settings using Pydantic.

Values are read from ``POLLUMAP_*`` environment variables or a ``.env`` file.
Domain constants (agent catalog, thresholds) are not configurable and live in
``pollumap.causes.constants`` and ``pollumap.simulation.constants``.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PolluMapSettings(BaseSettings):
    """Central configuration for the PolluMap application."""

    model_config = SettingsConfigDict(
        env_prefix="POLLUMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # --- Project Paths ---
    @computed_field
    @property
    def project_root(self) -> Path:
        """Root directory of the project."""
        return Path(__file__).parent.parent

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = None

    # --- Region Data ---
    regions_file: str = Field(default="delhi_combined2.geojson")
    baseline_seed: int | None = None

    # --- Map View (Delhi) ---
    map_center_lat: float = 28.65
    map_center_lon: float = 77.15
    map_zoom: int = Field(default=10, ge=1, le=20)
    # south, west, north, east
    map_bounds: tuple[float, float, float, float] = (28.20, 76.60, 29.10, 77.80)

    # --- Path Helpers ---
    @property
    def data_dir(self) -> Path:
        return self.project_root / "data"

    @property
    def regions_path(self) -> Path:
        path = Path(self.regions_file)
        return path if path.is_absolute() else self.data_dir / path


# Singleton instance
settings = PolluMapSettings()
