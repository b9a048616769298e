"""Delhi Vision dashboard components.

Each module exposes render or build functions consumed by streamlit_app.py.
Palette and layer builders are pure and importable without a running
Streamlit session.
"""

from dashboard.components.palette import (  # noqa: F401
    COLORS,
    air_style,
    hex_to_rgba,
    region_label,
    soil_style,
    water_style,
)
