"""
Overview page: key findings and performance radar
"""
import streamlit as st
import plotly.graph_objects as go

from ..config import CHART_HEIGHT, PERCENT_AXIS_RANGE, model_color, model_label
from ..utils.ui_components import display_finding


def display_overview(view_model):
    """Display key findings and the radar chart"""
    st.header("Key Findings")

    cols = st.columns(2)
    for idx, finding in enumerate(view_model.findings):
        with cols[idx % 2]:
            display_finding(finding)

    st.header("Performance Radar")
    st.plotly_chart(build_radar_figure(view_model), use_container_width=True)


def build_radar_figure(view_model):
    metrics = [row["metric"] for row in view_model.radar_series]

    fig = go.Figure()
    for model in view_model.present_models:
        values = [row[model] for row in view_model.radar_series]
        # Repeat the first point to close the polygon
        fig.add_trace(go.Scatterpolar(
            r=values + values[:1],
            theta=metrics + metrics[:1],
            name=model_label(model),
            line=dict(color=model_color(model)),
            fill="toself",
            opacity=0.5,
        ))

    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=list(PERCENT_AXIS_RANGE))),
        showlegend=True,
        height=CHART_HEIGHT,
    )
    return fig
