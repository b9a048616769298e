"""Selected-sector panel: frozen snapshot, tiers and a baseline comparison."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from dashboard.components.palette import COLORS
from pollumap.engine import SimulationEngine
from pollumap.models import CauseCategory, Selection
from pollumap.simulation.classifier import classify_reading
from pollumap.simulation.evaluator import composite_toxicity


def build_snapshot_chart(selection: Selection) -> go.Figure:
    """Grouped bars of baseline vs simulated reading per category."""
    categories = [c.value.upper() for c in CauseCategory]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        name="Baseline",
        x=categories,
        y=[selection.region.baseline.value(c) for c in CauseCategory],
        marker_color=COLORS["text_muted"],
    ))
    fig.add_trace(go.Bar(
        name="Simulated",
        x=categories,
        y=[selection.snapshot.value(c) for c in CauseCategory],
        marker_color=COLORS["accent_cyan"],
    ))
    fig.update_layout(
        barmode="group",
        height=260,
        margin=dict(l=10, r=10, t=10, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=COLORS["text_heading"], family="Courier New, monospace"),
        legend=dict(orientation="h", y=1.1),
    )
    return fig


def render_region_panel(engine: SimulationEngine) -> None:
    selection = engine.selection
    if selection is None:
        return

    tiers = classify_reading(selection.snapshot)
    st.markdown(f"## {selection.region.id}")

    cols = st.columns(len(CauseCategory) + 1)
    for col, category in zip(cols, CauseCategory):
        tier = tiers[category]
        col.metric(
            category.value.upper(),
            selection.snapshot.value(category),
            delta=selection.snapshot.value(category) - selection.region.baseline.value(category),
            delta_color="inverse",
            help=f"Tier {tier.level}: {tier.label} (factor {selection.factors[category]:.2f})",
        )
    cols[-1].metric("TOXICITY", composite_toxicity(selection.snapshot))

    st.plotly_chart(build_snapshot_chart(selection), use_container_width=True, key="snapshot_chart")
    st.caption("Snapshot taken at selection time; later slider changes do not alter it.")

    if st.button("CLOSE PANEL", key="close_panel", use_container_width=True):
        engine.deselect()
        st.rerun()
