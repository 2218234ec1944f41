"""
Errors page: error type comparison and per-model breakdown
"""
import streamlit as st
import pandas as pd
import plotly.express as px

from ..analysis.findings import error_bias
from ..config import CHART_HEIGHT, model_color, model_label


def display_errors(view_model):
    """Display error analysis visualizations"""
    if not view_model.present_models:
        st.warning("No model results available for this dataset.")
        return

    st.header("Error Analysis")

    long_df = pd.DataFrame(view_model.error_series).melt(
        id_vars="errorType",
        value_vars=view_model.present_models,
        var_name="model",
        value_name="count",
    )
    long_df["model"] = long_df["model"].map(model_label)

    fig = px.bar(
        long_df,
        x="errorType",
        y="count",
        color="model",
        barmode="group",
        labels={"errorType": "Error Type", "count": "Count", "model": "Model"},
        color_discrete_map={model_label(m): model_color(m) for m in view_model.present_models},
        height=CHART_HEIGHT,
    )
    st.plotly_chart(fig, use_container_width=True)

    cols = st.columns(len(view_model.error_breakdown))
    for col, breakdown in zip(cols, view_model.error_breakdown):
        result = view_model.record.get_result(breakdown["model"])
        with col:
            with st.container(border=True):
                st.subheader(f"{model_label(breakdown['model'])} Error Breakdown")
                st.metric("False Positives", breakdown["false_positives"])
                st.metric("False Negatives", breakdown["false_negatives"])
                st.metric("Total Errors", breakdown["total_errors"])
                st.caption(f"Bias: {error_bias(result)}")
