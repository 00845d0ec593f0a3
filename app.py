"""Simulator entry point.

Run with ``streamlit run app.py``.
"""

import streamlit as st

from ogoue_scoring.core.exceptions import InvalidParameterError
from ogoue_scoring.core.logging import get_logger
from ogoue_scoring.core.settings import get_settings
from ogoue_scoring.ui.app_controller import load_models, model_warnings, session_stats, simulate
from ogoue_scoring.ui.components.form import render_policy_selector, render_variable_inputs
from ogoue_scoring.ui.components.results import render_outcome, render_stats
from ogoue_scoring.ui.state import SessionManager

log = get_logger(__name__)


def main() -> None:
    st.set_page_config(page_title="OGOUÉ · Simulation de crédit", page_icon="📊", layout="wide")
    SessionManager.initialize()

    st.title("📊 Simulation d'éligibilité")

    models = load_models()
    if not models:
        st.stop()

    with st.sidebar:
        st.title("⚙️ Paramètres")
        idx = min(SessionManager.get_selected_idx(), len(models) - 1)
        idx = st.selectbox(
            "Modèle de scoring",
            range(len(models)),
            index=idx,
            format_func=lambda i: models[i].name,
        )
        SessionManager.set_selected_idx(idx)
        policy = render_policy_selector(get_settings().default_missing_policy)

        if SessionManager.get_history():
            st.divider()
            render_stats(session_stats())

    model = models[idx]
    if model.description:
        st.caption(model.description)

    for warning in model_warnings(model):
        st.warning(warning)

    with st.form("simulation_form"):
        values = render_variable_inputs(model)
        submitted = st.form_submit_button("Calculer le score", type="primary")

    if submitted:
        try:
            simulate(model, values, policy)
        except InvalidParameterError as e:
            log.error("simulation_rejected", error=str(e))
            st.error(str(e))

    outcome = SessionManager.get_last_outcome()
    if outcome is not None:
        render_outcome(outcome)


if __name__ == "__main__":
    main()
