"""Reusable KPI metric card widgets."""

import streamlit as st


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally help.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], help=m.get("help"))


def render_capacity_summary(summary: dict):
    """Total / used / available seat cards shown under the classroom list."""
    render_metric_row([
        {"label": "Total Capacity", "value": f"{summary['total_capacity']:,}"},
        {"label": "Used Seats", "value": f"{summary['used_seats']:,}"},
        {"label": "Available", "value": f"{summary['available_seats']:,}"},
    ])


def render_available_indicator(total_available: int):
    if total_available > 0:
        st.success(f"Available seats: **{total_available:,}**", icon="🟢")
    else:
        st.error(f"Available seats: **{total_available:,}**", icon="🔴")
