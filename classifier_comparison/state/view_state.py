"""
View selection state and the state-to-view-model mapping
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Union

from ..analysis.findings import Finding, build_recommendations, key_findings
from ..analysis.projector import (
    project_error_breakdown,
    project_error_series,
    project_metric_differences,
    project_metrics_table,
    project_radar_series,
)
from ..analysis.winner import select_winner
from ..config import DEFAULT_MODEL_PAIR
from ..data.repository import DatasetRepository, NotFoundError
from ..data.schemas import DatasetRecord

logger = logging.getLogger(__name__)


class View(str, Enum):
    """Pages of the dashboard."""
    OVERVIEW = "overview"
    METRICS = "metrics"
    ERRORS = "errors"
    CONFUSION = "confusion"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ViewSelection(NamedTuple):
    """Immutable snapshot of the view state."""
    selected_dataset_key: str
    selected_view: View
    show_recommendations: bool


Listener = Callable[[ViewSelection], None]


class ViewState:
    """
    Holds the selected dataset, the selected view and the recommendations toggle.

    Every mutation is synchronous and notifies the subscribed listeners with
    the new selection once it has been applied.
    """

    def __init__(self, dataset_keys: Sequence[str], listeners: Sequence[Listener] = ()):
        if not dataset_keys:
            raise ValueError("dataset_keys cannot be empty")
        self._dataset_keys = list(dataset_keys)
        self._listeners: List[Listener] = list(listeners)
        self.selected_dataset_key = self._dataset_keys[0]
        self.selected_view = View.OVERVIEW
        self.show_recommendations = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a re-render callback; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> ViewSelection:
        return ViewSelection(self.selected_dataset_key, self.selected_view, self.show_recommendations)

    def select_dataset(self, key: str):
        """
        Raises:
            NotFoundError: If ``key`` is not one of the known dataset keys
        """
        if key not in self._dataset_keys:
            raise NotFoundError(key, self._dataset_keys)
        self.selected_dataset_key = key
        self._notify()

    def select_view(self, view: Union[View, str]):
        """
        Raises:
            ValueError: If ``view`` is not a known view
        """
        self.selected_view = View(view)
        self._notify()

    def toggle_recommendations(self):
        self.show_recommendations = not self.show_recommendations
        self._notify()

    def _notify(self):
        selection = self.snapshot()
        logger.debug(f"View state changed: {selection}")
        for listener in list(self._listeners):
            listener(selection)


@dataclass(frozen=True)
class DashboardViewModel:
    """Everything the renderer needs to paint one frame."""
    dataset_key: str
    record: DatasetRecord
    view: View
    model_keys: List[str]
    present_models: List[str]
    metrics_table: List[Dict[str, str]]
    metric_differences: Optional[List[Dict[str, str]]]
    radar_series: List[Dict[str, Any]]
    error_series: List[Dict[str, Any]]
    error_breakdown: List[Dict[str, Any]]
    winner: Optional[str]
    findings: List[Finding]
    recommendations: Optional[List[Finding]]

    @property
    def show_recommendations(self) -> bool:
        return self.recommendations is not None


def build_view_model(selection: ViewSelection, repository: DatasetRepository,
                     model_a: str = DEFAULT_MODEL_PAIR[0],
                     model_b: str = DEFAULT_MODEL_PAIR[1]) -> DashboardViewModel:
    """
    Map a view selection to display data.

    Raises:
        NotFoundError: If the selected dataset is not in the repository
    """
    record = repository.get_dataset(selection.selected_dataset_key)
    model_keys = [model_a, model_b]
    recommendations = build_recommendations(record, model_a, model_b) if selection.show_recommendations else None
    return DashboardViewModel(
        dataset_key=selection.selected_dataset_key,
        record=record,
        view=selection.selected_view,
        model_keys=model_keys,
        present_models=[key for key in model_keys if record.has_result(key)],
        metrics_table=project_metrics_table(record, model_keys),
        metric_differences=project_metric_differences(record, model_a, model_b),
        radar_series=project_radar_series(record, model_keys),
        error_series=project_error_series(record, model_keys),
        error_breakdown=project_error_breakdown(record, model_keys),
        winner=select_winner(record, model_a, model_b),
        findings=key_findings(record, model_a, model_b),
        recommendations=recommendations,
    )
