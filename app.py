#!/usr/bin/env python3
"""
Main application for the Classifier Comparison Dashboard
"""
import argparse
import logging

import streamlit as st

from classifier_comparison.config import DATA_FILE, LOG_FORMAT, LOG_LEVEL, PAGE_ICON, PAGE_TITLE
from classifier_comparison.data.repository import load_repository
from classifier_comparison.state.view_state import View, ViewState, build_view_model

# Import UI components
from classifier_comparison.utils.ui_components import dataset_selector, display_header, view_selector

# Import visualization modules
from classifier_comparison.visualizations import (
    display_confusion,
    display_errors,
    display_metrics,
    display_overview,
    display_recommendations
)

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)
logger = logging.getLogger(__name__)

VIEW_RENDERERS = {
    View.OVERVIEW: display_overview,
    View.METRICS: display_metrics,
    View.ERRORS: display_errors,
    View.CONFUSION: display_confusion,
}


def parse_args():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description="Classifier Comparison Dashboard")
    parser.add_argument(
        "--data-file",
        type=str,
        help="JSON file with dataset results (defaults to the built-in datasets)",
        default=DATA_FILE
    )
    return parser.parse_args()


# Set page configuration
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="wide",
    initial_sidebar_state="collapsed",
)


def log_rerender(selection):
    logger.debug(f"Re-rendering for {selection}")


def main():
    # Parse command line arguments
    args = parse_args()

    # Load the datasets once per session
    if 'repository' not in st.session_state:
        try:
            st.session_state.repository = load_repository(args.data_file)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load datasets from {args.data_file}: {e}")
            st.error(f"Could not load datasets from '{args.data_file}': {e}")
            return
    repository = st.session_state.repository

    if len(repository) == 0:
        st.error("No datasets available.")
        return

    if 'view_state' not in st.session_state:
        st.session_state.view_state = ViewState(repository.list_keys(), listeners=[log_rerender])
    view_state = st.session_state.view_state

    view_model = build_view_model(view_state.snapshot(), repository)

    display_header(view_model.record)
    dataset_selector(repository, view_state)
    view_selector(view_state)

    VIEW_RENDERERS[view_model.view](view_model)
    display_recommendations(view_model)


if __name__ == "__main__":
    main()
