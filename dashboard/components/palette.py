"""Tier -> color mapping for the map layers, plus shared UI colors.

Colors are returned as ``[r, g, b, a]`` lists, the form pydeck expects.
"""

from __future__ import annotations

from pollumap.models import Region, SeverityTier

# ---------------------------------------------------------------------------
# UI color constants
# ---------------------------------------------------------------------------
COLORS: dict[str, str] = {
    "bg_app": "#050505",
    "accent_cyan": "#00ffff",
    "accent_green": "#00ff9d",
    "text_heading": "#FFFFFF",
    "text_muted": "#94A3B8",
    "panel_border": "#00ffff",
    "danger": "#EF5350",
}

TRANSPARENT = [0, 0, 0, 0]

# Ground layer: cyber green -> electric blue -> golden yellow -> deep purple
_SOIL_COLORS: tuple[str, ...] = ("#00ff9d", "#00ccff", "#ffbb00", "#9900ff")
_SOIL_OPACITY = 0.8

# Smoke layer: (color, opacity) per air tier; tier 0 is never drawn
_AIR_COLORS: tuple[tuple[str, float], ...] = (
    ("#000000", 0.0),
    ("#ffffff", 0.3),
    ("#f0f0f0", 0.5),
    ("#dcdcdc", 0.8),
    ("#b4b4b4", 0.85),
    ("#8c8c8c", 0.9),
)

# River network: pure cyan when clean, murkier as quality worsens
_WATER_COLORS: tuple[str, ...] = ("#00ffff", "#00d4c8", "#7fbf3f", "#c08a2e", "#8b4513")


def hex_to_rgba(hex_color: str, opacity: float = 1.0) -> list[int]:
    """'#00ffff', 0.5 -> [0, 255, 255, 127]"""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb, got {hex_color!r}")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return [r, g, b, int(max(0.0, min(1.0, opacity)) * 255)]


def _pick(palette: tuple, level: int):
    return palette[min(level, len(palette) - 1)]


def soil_style(tier: SeverityTier) -> list[int]:
    return hex_to_rgba(_pick(_SOIL_COLORS, tier.level), _SOIL_OPACITY)


def air_style(tier: SeverityTier) -> list[int]:
    if not tier.present:
        return list(TRANSPARENT)
    color, opacity = _pick(_AIR_COLORS, tier.level)
    return hex_to_rgba(color, opacity)


def water_style(tier: SeverityTier) -> list[int]:
    return hex_to_rgba(_pick(_WATER_COLORS, tier.level))


def region_label(region: Region) -> tuple[str, str]:
    """Tooltip heading and its color for a region."""
    if region.is_water:
        return "WATER BODY", COLORS["accent_cyan"]
    return "SECTOR", COLORS["accent_green"]
