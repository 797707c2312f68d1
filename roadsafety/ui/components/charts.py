"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
from plotly.subplots import make_subplots
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
# Series colours follow the original dashboard legend
SERIES_COLORS: Dict[str, str] = {
    "staff": "#3b82f6",
    "service": "#10b981",
    "restroom": "#f59e0b",
    "assistance": "#8b5cf6",
    "accident": "#ef4444",
    "fatality": "#1f2937",
    "previous": "#9ca3af",
}


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        legend_title=legend_title,
        hovermode="x unified",
        margin=dict(l=40, r=20, t=60, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
    )
    fig.update_yaxes(title=yaxis_title, showgrid=True, zeroline=True)
    fig.update_xaxes(title=xaxis_title, showgrid=False)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def grouped_bar_chart(
    df: pd.DataFrame,
    x: str,
    series: Sequence[str],
    labels: Dict[str, str],
    colors: Optional[Dict[str, str]] = None,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    text_auto: bool = True,
) -> go.Figure:
    """Bar chart with one bar per column in `series`, grouped by `x`."""
    long_df = df.melt(id_vars=[x], value_vars=list(series), var_name="series", value_name="value")
    long_df["series"] = long_df["series"].map(labels)
    color_map = {labels[s]: (colors or {}).get(s) for s in series if (colors or {}).get(s)}
    fig = px.bar(
        long_df,
        x=x,
        y="value",
        color="series",
        barmode="group",
        color_discrete_map=color_map,
        text_auto=text_auto,
    )
    fig = _configure_layout(fig, title, yaxis_title)
    fig.update_xaxes(tickangle=-45)
    if text_auto:
        fig.update_traces(textposition="outside", cliponaxis=False)
    return fig


def line_chart(
    df: pd.DataFrame,
    x: str,
    series: Sequence[str],
    labels: Dict[str, str],
    colors: Optional[Dict[str, str]] = None,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    markers: bool = True,
) -> go.Figure:
    long_df = df.melt(id_vars=[x], value_vars=list(series), var_name="series", value_name="value")
    long_df["series"] = long_df["series"].map(labels)
    color_map = {labels[s]: (colors or {}).get(s) for s in series if (colors or {}).get(s)}
    fig = px.line(
        long_df,
        x=x,
        y="value",
        color="series",
        markers=markers,
        color_discrete_map=color_map,
    )
    fig = _configure_layout(fig, title, yaxis_title)
    fig.update_xaxes(tickformat="%d %b")
    return fig


def dual_axis_line_chart(
    df: pd.DataFrame,
    x: str,
    left: str,
    right: str,
    labels: Dict[str, str],
    colors: Optional[Dict[str, str]] = None,
    title: Optional[str] = None,
) -> go.Figure:
    """Two line series sharing the x axis, `right` plotted on a secondary y axis."""
    colors = colors or {}
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    for column, secondary in ((left, False), (right, True)):
        fig.add_trace(
            go.Scatter(
                x=df[x],
                y=df[column],
                mode="lines+markers",
                name=labels.get(column, column),
                line=dict(color=colors.get(column), width=2),
            ),
            secondary_y=secondary,
        )
    fig = _configure_layout(fig, title)
    fig.update_yaxes(title_text=labels.get(left, left), secondary_y=False)
    fig.update_yaxes(title_text=labels.get(right, right), secondary_y=True, showgrid=False)
    fig.update_xaxes(tickformat="%d %b")
    return fig
