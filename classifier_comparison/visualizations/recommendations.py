"""
Recommendations panel
"""
import streamlit as st

from ..utils.ui_components import display_finding


def display_recommendations(view_model):
    """Display the recommendations panel when it is toggled on"""
    if not view_model.show_recommendations:
        return

    st.header("Recommendations")
    for recommendation in view_model.recommendations:
        display_finding(recommendation)
