"""Delhi Vision - causal pollution simulation dashboard.

Overlays simulated air, water and soil severity on Delhi wards. Sidebar
sliders scale the causative agents; every rerun recomputes the layers from
the current multipliers.

Usage:
    streamlit run dashboard/streamlit_app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Load .env from project root so POLLUMAP_* vars are available
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Ensure project root is importable
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from dashboard.components.controls import (  # noqa: E402
    render_agent_sliders,
    render_region_picker,
    render_visibility_toggles,
)
from dashboard.components.map_layers import (  # noqa: E402
    build_deck,
    build_layers,
    picked_region_id,
)
from dashboard.components.palette import COLORS  # noqa: E402
from dashboard.components.region_panel import render_region_panel  # noqa: E402
from pollumap.engine import SimulationEngine  # noqa: E402
from pollumap.regions.baselines import RandomBaselineGenerator  # noqa: E402
from pollumap.regions.geojson import read_features  # noqa: E402
from pollumap.settings import settings  # noqa: E402
from pollumap.utils import DataLoadError, setup_logging  # noqa: E402

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page Configuration
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Delhi Vision",
    page_icon=None,
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    f"""
    <style>
    .stApp {{ background: {COLORS["bg_app"]}; }}
    .dv-title {{ font-family: Impact, sans-serif; letter-spacing: 1px;
                 color: {COLORS["text_heading"]}; margin: 0; }}
    .dv-title span {{ color: {COLORS["accent_cyan"]}; }}
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------------------------------------------------------------------------
# Data Loading (cached)
# ---------------------------------------------------------------------------


@st.cache_data
def _load_features(path: str) -> list[dict]:
    return read_features(path)


def _load_into(engine: SimulationEngine) -> None:
    try:
        features = _load_features(str(settings.regions_path))
        engine.load_regions(features)
        st.session_state.features = features
    except DataLoadError as e:
        logger.warning("Region load failed: %s", e)
        st.session_state.load_error = str(e)
    else:
        st.session_state.load_error = None


# ---------------------------------------------------------------------------
# Session State Initialization
# ---------------------------------------------------------------------------
if "engine" not in st.session_state:
    st.session_state.engine = SimulationEngine(
        baseline_provider=RandomBaselineGenerator(settings.baseline_seed)
    )
    st.session_state.features = []
    _load_into(st.session_state.engine)

engine: SimulationEngine = st.session_state.engine

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
with st.sidebar:
    st.markdown('<h2 class="dv-title">DELHI <span>VISION</span></h2>', unsafe_allow_html=True)
    st.markdown("---")
    render_visibility_toggles(engine)
    st.markdown("---")
    render_region_picker(engine)
    st.markdown("---")
    render_agent_sliders(engine)

# ---------------------------------------------------------------------------
# Map
# ---------------------------------------------------------------------------
if st.session_state.get("load_error"):
    st.error(f"Region data unavailable: {st.session_state.load_error}")
    if st.button("Retry Load", key="retry_load"):
        _load_features.clear()
        _load_into(engine)
        st.rerun()

factors = engine.current_factors()
st.caption(" | ".join(f"{c.value.upper()} x{f:.2f}" for c, f in factors.items()))

layers = build_layers(st.session_state.features, engine.regions, engine.render_frame())
deck = build_deck(
    layers,
    center=(settings.map_center_lat, settings.map_center_lon),
    zoom=settings.map_zoom,
    bounds=settings.map_bounds,
)
event = st.pydeck_chart(
    deck,
    use_container_width=True,
    on_select="rerun",
    selection_mode="single-object",
    key="ward_map",
)

# A click selects the ward once; water bodies and unnamed regions are ignored
picked = picked_region_id(event.selection)
if picked != st.session_state.get("last_pick"):
    st.session_state.last_pick = picked
    if picked is not None:
        engine.select_by_id(picked)

render_region_panel(engine)
