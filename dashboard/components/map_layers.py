"""Build the four stacked pydeck layers of the Delhi Vision map.

    1. GROUND       soil tiers as solid colored wards
    2. RIVERS       water tiers as glowing cyan lines and polygons
    3. AIR          smoke over wards whose air reading is present
    4. INTERACTION  invisible, carries the tooltips

Layer data are plain GeoJSON FeatureCollections whose features are copied
from the raw input and annotated with a ``fill_color``/``line_color``.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

import pydeck as pdk

from dashboard.components.palette import (
    TRANSPARENT,
    air_style,
    region_label,
    soil_style,
    water_style,
)
from pollumap.models import CauseCategory, LayerCell, Region, RegionKind

logger = logging.getLogger(__name__)

INTERACTION_LAYER_ID = "interaction"

_STYLERS = {
    CauseCategory.soil: soil_style,
    CauseCategory.air: air_style,
    CauseCategory.water: water_style,
}


def _annotate(feature: dict[str, Any], **props: Any) -> dict[str, Any]:
    annotated = copy.deepcopy(feature)
    properties = dict(annotated.get("properties") or {})
    properties.update(props)
    annotated["properties"] = properties
    return annotated


def build_layer_data(
    features: list[dict[str, Any]],
    cells: list[LayerCell],
) -> dict[str, Any]:
    """FeatureCollection for one category layer, one feature per cell."""
    out = []
    for cell in cells:
        color = _STYLERS[cell.category](cell.tier)
        out.append(_annotate(
            features[cell.index],
            fill_color=color,
            line_color=color,
            value=cell.value,
            tier=cell.tier.label,
        ))
    return {"type": "FeatureCollection", "features": out}


def build_interaction_data(
    features: list[dict[str, Any]],
    regions: tuple[Region, ...],
) -> dict[str, Any]:
    """Tooltip carriers for every named region; placeholders are skipped."""
    out = []
    for feature, region in zip(features, regions):
        if not region.is_interactive:
            continue
        title, color = region_label(region)
        out.append(_annotate(
            feature,
            region_id=region.id,
            tooltip_title=title,
            tooltip_color=color,
            fill_color=list(TRANSPARENT),
        ))
    return {"type": "FeatureCollection", "features": out}


def build_layers(
    features: list[dict[str, Any]],
    regions: tuple[Region, ...],
    frame: dict[CauseCategory, list[LayerCell]],
) -> list[pdk.Layer]:
    """pydeck layers, bottom to top, for the visible categories in ``frame``."""
    layers: list[pdk.Layer] = []

    if CauseCategory.soil in frame:
        layers.append(pdk.Layer(
            "GeoJsonLayer",
            id="ground",
            data=build_layer_data(features, frame[CauseCategory.soil]),
            get_fill_color="properties.fill_color",
            get_line_color=[0, 0, 0, 127],
            line_width_min_pixels=1,
            pickable=False,
        ))

    if CauseCategory.water in frame:
        water_cells = [c for c in frame[CauseCategory.water] if c.kind == RegionKind.water]
        layers.append(pdk.Layer(
            "GeoJsonLayer",
            id="rivers",
            data=build_layer_data(features, water_cells),
            get_fill_color="properties.fill_color",
            get_line_color="properties.line_color",
            line_width_min_pixels=4,
            line_cap_rounded=True,
            pickable=False,
        ))

    if CauseCategory.air in frame:
        layers.append(pdk.Layer(
            "GeoJsonLayer",
            id="air",
            data=build_layer_data(features, frame[CauseCategory.air]),
            get_fill_color="properties.fill_color",
            get_line_color="properties.line_color",
            line_width_min_pixels=25,
            pickable=False,
        ))

    layers.append(pdk.Layer(
        "GeoJsonLayer",
        id=INTERACTION_LAYER_ID,
        data=build_interaction_data(features, regions),
        get_fill_color="properties.fill_color",
        get_line_color=list(TRANSPARENT),
        line_width_min_pixels=20,
        pickable=True,
        auto_highlight=True,
    ))

    logger.debug("Built %d map layers", len(layers))
    return layers


def picked_region_id(selection: Mapping[str, Any] | None) -> str | None:
    """Region id of the feature clicked on the interaction layer, if any.

    ``selection`` is the chart selection state:
    ``{"indices": {layer_id: [...]}, "objects": {layer_id: [feature, ...]}}``.
    """
    if not selection:
        return None
    picked = (selection.get("objects") or {}).get(INTERACTION_LAYER_ID) or []
    if not picked:
        return None
    properties = picked[0].get("properties") or {}
    return properties.get("region_id")


def clamp_center(
    center: tuple[float, float],
    bounds: tuple[float, float, float, float],
) -> tuple[float, float]:
    """Pull a (lat, lon) center inside (south, west, north, east) bounds."""
    south, west, north, east = bounds
    lat, lon = center
    return min(max(lat, south), north), min(max(lon, west), east)


def build_deck(
    layers: list[pdk.Layer],
    center: tuple[float, float],
    zoom: int,
    bounds: tuple[float, float, float, float] | None = None,
) -> pdk.Deck:
    if bounds is not None:
        center = clamp_center(center, bounds)
    view_state = pdk.ViewState(
        latitude=center[0],
        longitude=center[1],
        zoom=zoom,
        min_zoom=zoom,
        max_zoom=18,
        pitch=0,
        bearing=0,
    )
    return pdk.Deck(
        layers=layers,
        initial_view_state=view_state,
        tooltip={
            "html": (
                "<div style='text-align:center'>"
                "<span style='font-size:10px;letter-spacing:1px'>{tooltip_title}</span><br/>"
                "<strong style='font-size:14px;text-transform:uppercase'>{region_id}</strong>"
                "</div>"
            ),
            "style": {
                "backgroundColor": "rgba(0, 0, 0, 0.9)",
                "border": "1px solid #00ffff",
                "color": "#fff",
                "fontFamily": "'Courier New', monospace",
            },
        },
        map_style=pdk.map_styles.CARTO_DARK,
    )
