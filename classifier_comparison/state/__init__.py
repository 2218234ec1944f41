"""
View state controller for the dashboard
"""

from .view_state import (
    View,
    ViewSelection,
    ViewState,
    DashboardViewModel,
    build_view_model
)
