"""Read raw region features from a GeoJSON file on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pollumap.utils import DataLoadError, read_json

logger = logging.getLogger(__name__)


def read_features(path: str | Path) -> list[dict[str, Any]]:
    """Return the feature list of a FeatureCollection (or a bare feature list).

    Raises DataLoadError when the file is missing, not JSON, or has no
    feature list.
    """
    path = Path(path)
    try:
        data = read_json(path)
    except FileNotFoundError as e:
        raise DataLoadError(f"Region file not found: {path}") from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Could not read region file {path}: {e}") from e

    if isinstance(data, dict):
        features = data.get("features")
    else:
        features = data

    if not isinstance(features, list):
        raise DataLoadError(f"{path} does not contain a feature list")

    logger.info("Read %d features from %s", len(features), path)
    return features
