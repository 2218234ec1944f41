"""
Confusion page: one confusion matrix heatmap per model
"""
import streamlit as st
import plotly.graph_objects as go

from ..analysis.projector import CONFUSION_COLUMN_LABELS, CONFUSION_ROW_LABELS, project_confusion_grid
from ..config import model_label

CELL_NAMES = [["TP", "FN"], ["FP", "TN"]]


def display_confusion(view_model):
    """Display confusion matrices side by side"""
    if not view_model.present_models:
        st.warning("No model results available for this dataset.")
        return

    cols = st.columns(len(view_model.present_models))
    for col, model in zip(cols, view_model.present_models):
        with col:
            st.subheader(f"{model_label(model)} Confusion Matrix")
            fig = build_confusion_figure(view_model.record.get_result(model))
            st.plotly_chart(fig, use_container_width=True)


def build_confusion_figure(result):
    grid = project_confusion_grid(result)
    text = [
        [f"{grid[i][j]}<br>{CELL_NAMES[i][j]}" for j in range(2)]
        for i in range(2)
    ]

    fig = go.Figure(go.Heatmap(
        z=grid,
        x=CONFUSION_COLUMN_LABELS,
        y=CONFUSION_ROW_LABELS,
        text=text,
        texttemplate="%{text}",
        colorscale="Blues",
        showscale=False,
        hovertemplate="<b>%{y}</b><br><b>%{x}</b><br>Count: %{z}<extra></extra>",
    ))
    fig.update_yaxes(autorange="reversed")
    fig.update_layout(height=350, margin=dict(t=20))
    return fig
