"""Chart components for score visualization."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ogoue_scoring.domain.models.result import ScoringResult

# Classification bands on the 0-100 gauge
GAUGE_STEPS = [
    {"range": [0, 40], "color": "#f8d7da"},
    {"range": [40, 60], "color": "#fff3cd"},
    {"range": [60, 80], "color": "#d1ecf1"},
    {"range": [80, 100], "color": "#d4edda"},
]


def build_contribution_figure(df: pd.DataFrame) -> go.Figure:
    """Horizontal bars of weighted score vs. weight per variable.

    Args:
        df: Output of details_frame()
    """
    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=df["Variable"],
        x=df["Poids (%)"],
        name="Poids",
        orientation="h",
        marker=dict(color="#dee2e6"),
    ))
    fig.add_trace(go.Bar(
        y=df["Variable"],
        x=df["Score pondéré"],
        name="Score pondéré",
        orientation="h",
        marker=dict(color="#28a745"),
    ))
    fig.update_layout(
        title="Contribution des variables",
        barmode="overlay",
        xaxis_title="Points",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def build_score_gauge(result: ScoringResult) -> go.Figure:
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=result.score_final,
        number={"suffix": "/100"},
        gauge={
            "axis": {"range": [0, 100]},
            "bar": {"color": "#343a40"},
            "steps": GAUGE_STEPS,
        },
    ))
    fig.update_layout(height=250, margin=dict(t=20, b=0, l=20, r=20))
    return fig


def render_contribution_chart(df: pd.DataFrame, key: str = "contrib") -> None:
    if df is None or df.empty:
        st.info("Aucune variable évaluée.")
        return
    st.plotly_chart(build_contribution_figure(df), use_container_width=True, key=key)


def render_score_gauge(result: ScoringResult, key: str = "gauge") -> None:
    st.plotly_chart(build_score_gauge(result), use_container_width=True, key=key)
