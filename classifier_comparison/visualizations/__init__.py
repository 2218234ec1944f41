"""
Visualization components for the classifier comparison dashboard
"""

from .overview import display_overview
from .metrics import display_metrics
from .errors import display_errors
from .confusion import display_confusion
from .recommendations import display_recommendations
