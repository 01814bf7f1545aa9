"""Tab 2: Allocate Exam. Request seats and review the allocation history."""

import streamlit as st

from config.defaults import ERR_INVALID_STUDENT_COUNT
from data.session_store import get_planner
from components.metrics_cards import render_available_indicator
from components.tables import render_allocation_plan
from models.history import HistoryEntry


def _render_request_form(planner):
    st.subheader("Allocate Exam Seats")
    disabled = not planner.classrooms

    with st.form("allocate_exam", clear_on_submit=True):
        students = st.number_input("Number of Students", min_value=0, step=1, value=None,
                                   placeholder="e.g., 100", disabled=disabled)
        submitted = st.form_submit_button("Allocate", icon="⚡", type="primary", disabled=disabled)

    render_available_indicator(planner.total_available)
    if disabled:
        st.info("Add classrooms first to allocate seats.")

    if submitted:
        if students is None or students <= 0:
            st.error(ERR_INVALID_STUDENT_COUNT)
            return
        planner.allocate(int(students))
        st.rerun()


def _render_entry(entry: HistoryEntry, number: int, is_latest: bool):
    result = entry.result
    time_label = entry.timestamp.strftime("%H:%M")

    if not result.success:
        with st.container(border=True):
            st.markdown(f"**Allocation Failed** · {time_label}")
            st.error(result.error)
        return

    with st.container(border=True):
        header = f"**Allocation #{number}** · {time_label}"
        if is_latest:
            header += " · :green[Latest]"
        st.markdown(header)
        st.markdown(f"### :green[{result.total_requested}] students allocated")
        render_allocation_plan(result.allocations)
        n = result.classrooms_used
        st.caption(f"Used {n} classroom{'s' if n != 1 else ''}")


def _render_history(planner):
    col1, col2 = st.columns([4, 1])
    col1.subheader(f"Allocation Results ({len(planner.history)})")
    if planner.history and col2.button("Clear", icon="🔄", key="clear_history"):
        planner.clear_history()
        st.rerun()

    if not planner.history:
        st.info("No allocations yet. Allocate seats to see results here.")
        return

    total = len(planner.history)
    for idx, entry in enumerate(planner.history):
        _render_entry(entry, number=total - idx, is_latest=idx == 0)


def render():
    """Render the Allocate Exam tab."""
    planner = get_planner()
    col1, col2 = st.columns(2)
    with col1:
        _render_request_form(planner)
    with col2:
        _render_history(planner)
