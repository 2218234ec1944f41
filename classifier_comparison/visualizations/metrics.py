"""
Metrics page: grouped bar chart and detailed metrics table
"""
import streamlit as st
import pandas as pd
import plotly.express as px

from ..config import CHART_HEIGHT, PERCENT_AXIS_RANGE, model_color, model_label


def display_metrics(view_model):
    """Display metric comparison visualizations"""
    if not view_model.present_models:
        st.warning("No model results available for this dataset.")
        return

    st.header("Metric Comparison")
    st.plotly_chart(build_metrics_figure(view_model), use_container_width=True)

    st.header("Detailed Metrics")
    st.dataframe(build_metrics_table(view_model), use_container_width=True, hide_index=True)


def build_metrics_figure(view_model):
    # Long format: one row per (metric, model)
    long_df = pd.DataFrame(view_model.metrics_table).melt(
        id_vars="metric",
        value_vars=view_model.present_models,
        var_name="model",
        value_name="value",
    )
    long_df["value"] = long_df["value"].astype(float)
    long_df["model"] = long_df["model"].map(model_label)

    fig = px.bar(
        long_df,
        x="metric",
        y="value",
        color="model",
        barmode="group",
        labels={"metric": "Metric", "value": "Score (%)", "model": "Model"},
        color_discrete_map={model_label(m): model_color(m) for m in view_model.present_models},
        height=CHART_HEIGHT,
    )
    fig.update_yaxes(range=list(PERCENT_AXIS_RANGE))
    return fig


def build_metrics_table(view_model):
    """Metric table with full model names and a difference column when both models are present"""
    record = view_model.record
    rows = []
    for idx, row in enumerate(view_model.metrics_table):
        table_row = {"Metric": row["metric"]}
        for model in view_model.present_models:
            table_row[record.get_result(model).name] = f"{row[model]}%"
        if view_model.metric_differences is not None:
            table_row["Difference"] = f"{view_model.metric_differences[idx]['difference']}%"
        rows.append(table_row)
    return pd.DataFrame(rows)
