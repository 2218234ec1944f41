"""
UI component utilities for the classifier comparison dashboard
"""
import streamlit as st

from ..config import DASHBOARD_HEADING, DASHBOARD_SUBHEADING
from ..state.view_state import View
from .formatting import format_count

# Card styles per finding tone; "neutral" cards use a bordered container
TONE_RENDERERS = {
    "info": st.info,
    "success": st.success,
    "warning": st.warning,
}


def display_header(record):
    """Display the dashboard header with the dataset summary"""
    st.title(DASHBOARD_HEADING)
    st.markdown(DASHBOARD_SUBHEADING)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**Dataset:** {format_count(record.total_samples)} samples")
    with col2:
        st.markdown(
            f"**Classes:** mednarr ({record.class_distribution['mednarr']}) | "
            f"non-mednarr ({record.class_distribution['nonMednarr']})"
        )


def dataset_selector(repository, view_state):
    """Buttons for switching the current dataset"""
    keys = repository.list_keys()
    cols = st.columns(len(keys))
    for col, key in zip(cols, keys):
        with col:
            st.button(
                repository.get_dataset(key).name,
                key=f"btn_dataset_{key}",
                type="primary" if key == view_state.selected_dataset_key else "secondary",
                on_click=view_state.select_dataset,
                args=(key,),
                use_container_width=True,
            )


def view_selector(view_state):
    """Buttons for switching between pages plus the recommendations toggle"""
    cols = st.columns(len(View) + 1)
    for col, view in zip(cols, View):
        with col:
            st.button(
                view.label,
                key=f"btn_view_{view.value}",
                type="primary" if view == view_state.selected_view else "secondary",
                on_click=view_state.select_view,
                args=(view,),
                use_container_width=True,
            )

    with cols[-1]:
        label = "Hide Recommendations" if view_state.show_recommendations else "Show Recommendations"
        st.button(
            label,
            key="btn_toggle_recommendations",
            type="primary" if view_state.show_recommendations else "secondary",
            on_click=view_state.toggle_recommendations,
            use_container_width=True,
        )


def display_finding(finding):
    """Display a single finding as a card"""
    body = f"**{finding.title}**\n\n{finding.message}"
    if finding.detail:
        body += f"\n\n_{finding.detail}_"

    if finding.tone in TONE_RENDERERS:
        TONE_RENDERERS[finding.tone](body)
    else:
        with st.container(border=True):
            st.markdown(body)
