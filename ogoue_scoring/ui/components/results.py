"""Result display components."""

from __future__ import annotations

import streamlit as st

from ogoue_scoring.application.services.simulation import SimulationOutcome, SimulationStats, details_frame
from ogoue_scoring.core.scoring_constants import (
    CLASSIFICATION_LABELS,
    STATUS_LABELS,
    Classification,
    Recommendation,
    ScoringStatus,
)
from ogoue_scoring.ui.components.charts import render_contribution_chart, render_score_gauge


def get_classification_badge(classification: Classification) -> tuple[str, str, str]:
    """Badge (icon, label, color) for a classification."""
    badges = {
        Classification.RISQUE: ("🔴", CLASSIFICATION_LABELS[Classification.RISQUE], "#dc3545"),
        Classification.MOYEN: ("🟠", CLASSIFICATION_LABELS[Classification.MOYEN], "#fd7e14"),
        Classification.BON: ("🔵", CLASSIFICATION_LABELS[Classification.BON], "#17a2b8"),
        Classification.EXCELLENT: ("🟢", CLASSIFICATION_LABELS[Classification.EXCELLENT], "#28a745"),
    }
    return badges[classification]


def format_score(value: float | None) -> str:
    if value is None:
        return "—"
    return f"{value:.2f}".rstrip("0").rstrip(".") + " / 100"


RECOMMENDATION_LABELS = {
    Recommendation.ELIGIBLE: "✅ Éligible",
    Recommendation.CONDITIONAL: "⚠️ Sous conditions",
    Recommendation.INELIGIBLE: "⛔ Non éligible",
}


def render_outcome(outcome: SimulationOutcome) -> None:
    """Render score, status, blocking failures and per-variable details."""
    result = outcome.result

    if result.status is ScoringStatus.CONFIG_ERROR:
        st.error(f"{STATUS_LABELS[result.status]} : {result.error}")
        st.caption(f"Somme des poids : {result.weight_sum:.2f}%")
        return

    icon, label, color = get_classification_badge(result.classification)

    col1, col2, col3 = st.columns(3)
    col1.metric("Score final", format_score(result.score_final))
    col2.markdown(
        f"**Classification**<br><span style='color:{color};font-size:1.4em'>{icon} {label}</span>",
        unsafe_allow_html=True,
    )
    col3.metric("Statut", STATUS_LABELS[result.status])

    render_score_gauge(result)

    if outcome.recommendation is not None:
        st.info(f"{RECOMMENDATION_LABELS[outcome.recommendation]} : {outcome.recommendation_reason}")

    if result.blocking_failed:
        st.warning("Critères bloquants non respectés :")
        for failure in result.blocking_failed:
            st.markdown(f"- {failure.message}")

    df = details_frame(result)
    render_contribution_chart(df)
    with st.expander("Détail par variable", expanded=False):
        st.dataframe(df, use_container_width=True, hide_index=True)


def render_stats(stats: SimulationStats) -> None:
    """Session statistics over past simulations."""
    col1, col2, col3 = st.columns(3)
    col1.metric("Simulations", stats.total_simulations)
    col2.metric("Score moyen", f"{stats.average_score:.2f}")
    col3.metric(f"≥ {stats.threshold:g}", f"{stats.percentage_above_threshold:.2f} %")
