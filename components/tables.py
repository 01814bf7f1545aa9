"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List

from config.defaults import USAGE_COLORS
from engine.utilization import usage_level
from models.allocation import AllocationPlanEntry


def classroom_table_df(room_utilization: List[dict]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Room ID": r["room_id"],
        "Capacity": r["capacity"],
        "Floor": r["floor_no"],
        "Washroom": "Yes" if r["near_washroom"] else "—",
        "Used": r["used_seats"],
        "Available": r["available_seats"],
        "Usage": r["utilization_pct"],
    } for r in room_utilization])


def render_classroom_table(room_utilization: List[dict]):
    """Render the classroom list with colour-coded usage and full rooms flagged."""
    def color_usage(val):
        return f"color: {USAGE_COLORS[usage_level(val)]}; font-weight: bold"

    def color_available(val):
        return "color: #cc0000; font-weight: bold" if val == 0 else "color: #155724"

    df = classroom_table_df(room_utilization)
    styled = (
        df.style
        .map(color_usage, subset=["Usage"])
        .map(color_available, subset=["Available"])
        .format({"Usage": "{:.0%}"})
    )
    st.dataframe(styled, use_container_width=True, hide_index=True)


def render_allocation_plan(allocations: List[AllocationPlanEntry]):
    """Per-room breakdown of one allocation: +seats and previous → new usage."""
    df = pd.DataFrame([{
        "Room": a.room_id,
        "Floor": a.floor_no,
        "Seats Allocated": f"+{a.seats_allocated}",
        "Usage": f"{a.previous_used} → {a.new_used} / {a.capacity}",
    } for a in allocations])
    st.dataframe(df, use_container_width=True, hide_index=True)
