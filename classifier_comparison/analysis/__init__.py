"""
Projections, winner selection and findings for a dataset record
"""

from .projector import (
    project_metrics_table,
    project_radar_series,
    project_error_series,
    project_metric_differences,
    project_error_breakdown,
    project_confusion_grid,
    to_frame
)

from .winner import TIE, select_winner

from .findings import (
    Finding,
    error_bias,
    key_findings,
    build_recommendations
)
