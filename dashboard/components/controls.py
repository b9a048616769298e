"""Sidebar controls: agent sliders, layer toggles and the region picker."""

from __future__ import annotations

import logging

import streamlit as st

from pollumap.causes.constants import (
    MULTIPLIER_DEFAULT,
    MULTIPLIER_MAX,
    MULTIPLIER_MIN,
    MULTIPLIER_STEP,
)
from pollumap.engine import SimulationEngine
from pollumap.models import CauseCategory
from pollumap.utils import InvalidInputError

logger = logging.getLogger(__name__)

_CATEGORY_TITLES: dict[CauseCategory, str] = {
    CauseCategory.air: "Air",
    CauseCategory.water: "Water",
    CauseCategory.soil: "Soil",
}


def _slider_key(agent_id: str) -> str:
    return f"mult_{agent_id}"


def _reset(engine: SimulationEngine) -> None:
    engine.reset_multipliers()
    for agent_id in engine.registry.all_agent_ids():
        st.session_state[_slider_key(agent_id)] = MULTIPLIER_DEFAULT


def render_agent_sliders(engine: SimulationEngine) -> None:
    """One slider per causative agent, grouped by category."""
    current = engine.multipliers
    for category in CauseCategory:
        st.markdown(f"#### {_CATEGORY_TITLES[category]} Causes")
        for agent in engine.registry.agents_for(category):
            key = _slider_key(agent.id)
            if key not in st.session_state:
                st.session_state[key] = current[agent.id]
            value = st.slider(
                agent.label,
                min_value=MULTIPLIER_MIN,
                max_value=MULTIPLIER_MAX,
                step=MULTIPLIER_STEP,
                key=key,
                help=f"Relative weight {agent.weight:.2f}",
            )
            if value != current[agent.id]:
                try:
                    engine.update_multiplier(agent.id, value)
                except InvalidInputError as e:
                    st.warning(str(e))

    st.button("Reset to Baseline", key="reset_multipliers", on_click=_reset, args=(engine,))


def render_visibility_toggles(engine: SimulationEngine) -> None:
    st.markdown("#### Layers")
    for category in CauseCategory:
        shown = st.checkbox(
            _CATEGORY_TITLES[category],
            value=engine.is_visible(category),
            key=f"visible_{category.value}",
        )
        if shown != engine.is_visible(category):
            engine.toggle_visibility(category)


def render_region_picker(engine: SimulationEngine) -> None:
    """Select a land ward; water bodies and unnamed regions are not offered."""
    names = sorted({r.id for r in engine.regions if r.is_selectable})
    if not names:
        st.caption("No selectable wards loaded.")
        return

    st.markdown("#### Sector")
    choice = st.selectbox("Ward", names, key="region_choice", label_visibility="collapsed")
    if st.button("Analyse Sector", key="select_region"):
        engine.select_by_id(choice)
