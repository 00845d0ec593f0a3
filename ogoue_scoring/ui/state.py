"""Session state management for the Streamlit simulator.

Centralized accessors over ``st.session_state`` with default values.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from ogoue_scoring.application.services.simulation import SimulationOutcome
from ogoue_scoring.domain.models.variable import ScoringModel

T = TypeVar("T")


def get_state(key: str, default: T) -> T:
    """Get a value from session state, storing the default if absent."""
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize session state values that don't exist yet."""
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the simulator.

    Sessions share one process, so every session gets its own containers.
    """

    @staticmethod
    def defaults() -> dict[str, Any]:
        """Fresh default values for a new session."""
        return {
            "scoring_models": [],
            "selected_model_idx": 0,
            "last_outcome": None,
            "history": [],
        }

    @classmethod
    def initialize(cls) -> None:
        init_state(cls.defaults())

        # Hydrate selected model from URL if present
        model_param = st.query_params.get("model")
        if model_param is not None and model_param.isdigit():
            set_state("selected_model_idx", int(model_param))

    @classmethod
    def get_models(cls) -> list[ScoringModel]:
        return get_state("scoring_models", [])

    @classmethod
    def set_models(cls, models: list[ScoringModel]) -> None:
        set_state("scoring_models", list(models))

    @classmethod
    def get_selected_idx(cls) -> int:
        return get_state("selected_model_idx", 0)

    @classmethod
    def set_selected_idx(cls, idx: int) -> None:
        set_state("selected_model_idx", idx)
        st.query_params["model"] = str(idx)

    @classmethod
    def get_last_outcome(cls) -> SimulationOutcome | None:
        return get_state("last_outcome", None)

    @classmethod
    def record_outcome(cls, outcome: SimulationOutcome) -> None:
        """Store the latest outcome and add it to the session history."""
        set_state("last_outcome", outcome)
        set_state("history", [*get_state("history", []), outcome])

    @classmethod
    def get_history(cls) -> list[SimulationOutcome]:
        return get_state("history", [])
