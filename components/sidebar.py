"""Global sidebar: seat totals and the reset action."""

import streamlit as st
from config.defaults import APP_TITLE, APP_SUBTITLE
from data.session_store import get_planner, set_flash
from engine.utilization import get_capacity_summary


def render_sidebar():
    """Render the sidebar summary and handle 'Reset All'."""
    planner = get_planner()
    summary = get_capacity_summary(planner.classrooms)

    with st.sidebar:
        st.title(APP_TITLE)
        st.caption(APP_SUBTITLE)
        st.divider()

        st.metric("Classrooms", summary["room_count"])
        st.metric("Total Capacity", f"{summary['total_capacity']:,}")
        st.metric("Available Seats", f"{summary['available_seats']:,}")
        st.metric(
            "Utilization",
            f"{summary['utilization_pct']:.0%}" if summary["total_capacity"] > 0 else "N/A",
        )
        st.caption(f"Allocations run: {len(planner.history)}")

        st.divider()
        if planner.classrooms:
            if st.button("Reset All", icon="🔄", use_container_width=True,
                         help="Free every seat and clear the allocation history"):
                planner.reset_usage()
                set_flash("All classrooms reset to 0 used seats.", "info")
                st.rerun()

        st.divider()
        st.caption(
            "Seats are allocated greedily: partially used rooms are filled first, "
            "lower floors are preferred, and capacity limits are never exceeded."
        )
