"""Tab 1: Classrooms. Add, import, list and delete rooms."""

import streamlit as st

from data.loader import load_file, parse_classrooms
from data.validator import validate_roster
from data.sample_data import generate_classrooms_df
from data.session_store import get_planner, set_flash
from engine.utilization import get_room_utilization, get_floor_utilization, get_capacity_summary
from components.tables import render_classroom_table
from components.metrics_cards import render_capacity_summary
from components.charts import classroom_usage_bar, floor_usage_bar, utilization_donut


def _import_roster(df):
    """Validate a roster DataFrame and admit its rooms."""
    result = validate_roster(df)
    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return

    for w in result.warnings:
        st.warning(w)

    planner = get_planner()
    before = len(planner.classrooms)
    rejected = planner.import_classrooms(parse_classrooms(df))
    added = len(planner.classrooms) - before

    message = f"Imported {added} classroom{'s' if added != 1 else ''}."
    if rejected or result.warnings:
        # Stay on this run so the rejection messages remain visible
        for r in rejected:
            st.warning(r)
        st.success(message)
        return
    set_flash(message)
    st.rerun()


def _render_add_form():
    st.subheader("Add Classroom")
    with st.form("add_classroom", clear_on_submit=True):
        col1, col2, col3, col4 = st.columns(4)
        room_id = col1.text_input("Room ID", placeholder="e.g., A101")
        capacity = col2.number_input("Capacity", min_value=0, step=1, value=None, placeholder="e.g., 60")
        floor_no = col3.number_input("Floor Number", min_value=0, step=1, value=None, placeholder="e.g., 1")
        near_washroom = col4.checkbox("Near Washroom")
        submitted = st.form_submit_button("Add Classroom", icon="➕", type="primary")

    if submitted:
        result = get_planner().add_classroom(room_id, capacity, floor_no, near_washroom)
        if result.is_valid:
            set_flash(f"Classroom {room_id.strip().upper()} added.")
            st.rerun()
        else:
            st.error(result.error)


def _render_upload():
    with st.expander("Import classrooms from file"):
        st.caption("Columns: Room ID, Capacity, Floor No, and optionally Near Washroom (Yes/No).")
        uploaded = st.file_uploader("Classroom roster (CSV or XLSX)", type=["csv", "xlsx"], key="roster_upload")
        col1, col2 = st.columns(2)
        if uploaded is not None and col1.button("Import file", key="import_roster"):
            try:
                df = load_file(uploaded)
            except ValueError as exc:
                st.error(str(exc))
                return
            _import_roster(df)
        if col2.button("Load sample classrooms", key="load_sample"):
            _import_roster(generate_classrooms_df())


def render():
    """Render the Classrooms tab."""
    _render_add_form()
    _render_upload()

    st.divider()
    planner = get_planner()
    classrooms = planner.classrooms

    if not classrooms:
        st.subheader("Classroom List")
        st.info("No classrooms added yet. Add a classroom using the form above to get started.")
        return

    st.subheader(f"Classroom List ({len(classrooms)} rooms)")
    room_util = get_room_utilization(classrooms)
    render_classroom_table(room_util)
    render_capacity_summary(get_capacity_summary(classrooms))

    col1, col2 = st.columns([3, 2])
    with col1:
        to_delete = st.selectbox("Delete classroom", options=planner.room_ids, index=None,
                                 placeholder="Choose a room", key="delete_room")
    with col2:
        st.write("")
        st.write("")
        if st.button("Delete", icon="🗑️", disabled=to_delete is None, key="delete_btn"):
            planner.delete_classroom(to_delete)
            set_flash(f"Classroom {to_delete} deleted.", "info")
            st.rerun()

    st.divider()
    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(classroom_usage_bar(room_util), use_container_width=True)
    with col2:
        summary = get_capacity_summary(classrooms)
        st.plotly_chart(utilization_donut(summary["used_seats"], summary["total_capacity"]),
                        use_container_width=True)
    st.plotly_chart(floor_usage_bar(get_floor_utilization(classrooms)), use_container_width=True)
