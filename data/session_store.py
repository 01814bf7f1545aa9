"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import Optional, Tuple
from data.planner_state import PlannerState


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "planner": PlannerState(),
        "last_message": None,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def get_planner() -> PlannerState:
    if "planner" not in st.session_state:
        st.session_state["planner"] = PlannerState()
    return st.session_state["planner"]


# --- Flash messages (survive one st.rerun) ---

def set_flash(message: str, level: str = "success"):
    st.session_state["last_message"] = (level, message)


def pop_flash() -> Optional[Tuple[str, str]]:
    return st.session_state.pop("last_message", None)
