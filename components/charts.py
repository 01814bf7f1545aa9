"""Plotly chart builders for the College Exam Seat Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from config.defaults import USAGE_COLORS


def classroom_usage_bar(
    room_utilization: List[dict],
    title: str = "Seat Usage by Classroom",
) -> go.Figure:
    """Stacked bar of used vs available seats per classroom."""
    df = pd.DataFrame(room_utilization)
    fig = px.bar(
        df, x="room_id", y=["used_seats", "available_seats"],
        barmode="stack",
        labels={"value": "Seats", "room_id": "Room", "variable": ""},
        title=title,
        color_discrete_map={"used_seats": "#E8734A", "available_seats": "#4A90D9"},
    )
    fig.update_layout(legend_title_text="", height=380, xaxis_type="category")
    return fig


def floor_usage_bar(floor_utilization: List[dict]) -> go.Figure:
    """Horizontal bar of utilization per floor, coloured by usage."""
    df = pd.DataFrame(floor_utilization).sort_values("floor_no", ascending=False)
    df["floor_label"] = df["floor_no"].map(lambda f: f"Floor {f}")

    fig = px.bar(
        df, x="utilization_pct", y="floor_label",
        orientation="h",
        title="Utilization by Floor",
        labels={"utilization_pct": "Utilization %", "floor_label": "Floor"},
        color="utilization_pct",
        color_continuous_scale=[USAGE_COLORS["low"], USAGE_COLORS["medium"], USAGE_COLORS["high"]],
        range_color=[0, 1],
    )
    fig.update_layout(height=max(250, len(df) * 45), yaxis_type="category")
    fig.update_traces(texttemplate="%{x:.0%}", textposition="auto")
    return fig


def utilization_donut(used: int, total: int, title: str = "Overall Seat Usage") -> go.Figure:
    """Donut chart showing overall seat usage."""
    available = total - used
    fig = go.Figure(data=[go.Pie(
        labels=["Used", "Available"],
        values=[used, available],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=320,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
