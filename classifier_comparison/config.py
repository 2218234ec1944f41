# classifier_comparison/config.py
"""
Central configuration for the classifier comparison dashboard.
All constants and default values should be defined here.
"""

import os
from typing import Dict, Final, Optional, Tuple

# ============================================================================
# LOGGING
# ============================================================================

LOG_LEVEL: Final[str] = os.getenv("CLASSIFIER_DASHBOARD_LOG_LEVEL", "INFO").upper()
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ============================================================================
# DATA
# ============================================================================

# JSON file replacing the built-in datasets; unset means use the fixtures
DATA_FILE: Final[Optional[str]] = os.getenv("CLASSIFIER_DASHBOARD_DATA_FILE") or None

# ============================================================================
# MODELS
# ============================================================================

DEFAULT_MODEL_PAIR: Final[Tuple[str, str]] = ("distilbert", "longformer")

MODEL_DISPLAY_NAMES: Final[Dict[str, str]] = {
    "distilbert": "DistilBERT",
    "longformer": "Longformer",
}

MODEL_COLORS: Final[Dict[str, str]] = {
    "distilbert": "#3b82f6",
    "longformer": "#10b981",
}

DEFAULT_MODEL_COLOR: Final[str] = "#6b7280"

# ============================================================================
# PAGE / CHARTS
# ============================================================================

PAGE_TITLE: Final[str] = "Classifier Comparison Dashboard"
PAGE_ICON: Final[str] = "📊"
DASHBOARD_HEADING: Final[str] = "OCR Text Classification Model Comparison"
DASHBOARD_SUBHEADING: Final[str] = "Binary Classification Performance Analysis - Form Type Recognition"

# Percentage axis range shared by the radar and the metric bar chart
PERCENT_AXIS_RANGE: Final[Tuple[float, float]] = (85.0, 100.0)
CHART_HEIGHT: Final[int] = 400


def model_label(model_key: str) -> str:
    """Short chart label for a model key, falling back to the key itself."""
    return MODEL_DISPLAY_NAMES.get(model_key, model_key)


def model_color(model_key: str) -> str:
    return MODEL_COLORS.get(model_key, DEFAULT_MODEL_COLOR)
