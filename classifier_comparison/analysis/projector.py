"""
Chart-ready projections of a dataset record

Every projection takes an optional ordered list of model keys (defaulting to
the models with a result). Models without a result are left out of the rows
rather than filled with placeholders.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from ..data.schemas import MEDNARR, DatasetRecord, ModelResult
from ..utils.formatting import as_percent, format_percentage, format_signed

# (table label, radar label, accessor) for the compared metrics, in display order
METRICS: List[Tuple[str, str, Callable[[ModelResult], float]]] = [
    ("Accuracy", "Accuracy", lambda result: result.accuracy),
    ("Mednarr Precision", "Mednarr Precision", lambda result: result.classes[MEDNARR].precision),
    ("Mednarr Recall", "Mednarr Recall", lambda result: result.classes[MEDNARR].recall),
    ("Mednarr F1-Score", "Mednarr F1", lambda result: result.classes[MEDNARR].f1),
]

ERROR_TYPES: List[Tuple[str, Callable[[ModelResult], int]]] = [
    ("Mednarr to Non-mednarr", lambda result: result.errors.mednarr_to_non_mednarr),
    ("Non-mednarr to Mednarr", lambda result: result.errors.non_mednarr_to_mednarr),
]

CONFUSION_ROW_LABELS = ["True: Mednarr", "True: Non-mednarr"]
CONFUSION_COLUMN_LABELS = ["Pred: Mednarr", "Pred: Non-mednarr"]


def present_results(record: DatasetRecord, model_keys: Optional[Iterable[str]] = None) -> List[Tuple[str, ModelResult]]:
    """(key, result) pairs for the requested models that have a result."""
    if model_keys is None:
        model_keys = record.present_model_keys()
    pairs = []
    for key in model_keys:
        result = record.get_result(key)
        if result is not None:
            pairs.append((key, result))
    return pairs


def project_metrics_table(record: DatasetRecord, model_keys: Optional[Sequence[str]] = None) -> List[Dict[str, str]]:
    """Four metric rows with each model's value as a two-decimal percentage string."""
    results = present_results(record, model_keys)
    rows = []
    for label, _, accessor in METRICS:
        row = {"metric": label}
        for key, result in results:
            row[key] = format_percentage(accessor(result))
        rows.append(row)
    return rows


def project_radar_series(record: DatasetRecord, model_keys: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
    """Four metric rows with each model's value as an unrounded percentage."""
    results = present_results(record, model_keys)
    rows = []
    for _, label, accessor in METRICS:
        row = {"metric": label}
        for key, result in results:
            row[key] = as_percent(accessor(result))
        rows.append(row)
    return rows


def project_error_series(record: DatasetRecord, model_keys: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
    """Misclassification counts per error direction."""
    results = present_results(record, model_keys)
    rows = []
    for label, accessor in ERROR_TYPES:
        row = {"errorType": label}
        for key, result in results:
            row[key] = accessor(result)
        rows.append(row)
    return rows


def project_metric_differences(record: DatasetRecord, model_a: str, model_b: str) -> Optional[List[Dict[str, str]]]:
    """
    Signed difference ``model_a - model_b`` for every row of the metrics table.

    Returns:
        Rows of ``{"metric", "difference"}``, or None if either model has no result
    """
    if not (record.has_result(model_a) and record.has_result(model_b)):
        return None
    rows = []
    for row in project_metrics_table(record, [model_a, model_b]):
        diff = float(row[model_a]) - float(row[model_b])
        rows.append({"metric": row["metric"], "difference": format_signed(diff)})
    return rows


def project_error_breakdown(record: DatasetRecord, model_keys: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
    """False positive, false negative and total error counts for each present model."""
    return [
        {
            "model": key,
            "false_positives": result.false_positives,
            "false_negatives": result.false_negatives,
            "total_errors": result.mismatches,
        }
        for key, result in present_results(record, model_keys)
    ]


def project_confusion_grid(result: ModelResult) -> List[List[int]]:
    """Confusion matrix as [[tp, fn], [fp, tn]] (rows: true class, columns: predicted class)."""
    cm = result.confusion_matrix
    return [[cm.tp, cm.fn], [cm.fp, cm.tn]]


def to_frame(rows: List[Dict[str, Any]], index: str) -> pd.DataFrame:
    """Turn projection rows into a DataFrame indexed by their label column."""
    if not rows:
        return pd.DataFrame()
    return pd.DataFrame(rows).set_index(index)
