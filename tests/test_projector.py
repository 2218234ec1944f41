# tests/test_projector.py
"""
Tests for the chart-ready projections.
"""

import pandas as pd

from classifier_comparison.analysis.projector import (
    project_confusion_grid,
    project_error_breakdown,
    project_error_series,
    project_metric_differences,
    project_metrics_table,
    project_radar_series,
    to_frame,
)


class TestMetricsTable:
    def test_rows_in_fixed_order(self, dataset1):
        rows = project_metrics_table(dataset1)
        assert [row["metric"] for row in rows] == [
            "Accuracy",
            "Mednarr Precision",
            "Mednarr Recall",
            "Mednarr F1-Score",
        ]

    def test_accuracy_formatted_with_two_decimals(self, dataset1):
        rows = project_metrics_table(dataset1)
        assert rows[0]["distilbert"] == "99.34"
        assert rows[0]["longformer"] == "99.30"

    def test_ties_round_half_up(self, fixture_data):
        from classifier_comparison.data.schemas import DatasetRecord

        data = fixture_data["dataset1"]
        data["results"]["longformer"]["classes"]["mednarr"]["precision"] = 0.85125
        record = DatasetRecord.from_dict(data)
        assert project_metrics_table(record, ["longformer"])[1]["longformer"] == "85.13"

    def test_whole_percentages_keep_two_decimals(self, dataset2):
        rows = project_metrics_table(dataset2)
        assert rows[1]["longformer"] == "100.00"
        assert rows[2]["longformer"] == "95.00"

    def test_field_count_matches_present_models(self, dataset1, longformer_only):
        for row in project_metrics_table(dataset1):
            assert set(row) == {"metric", "distilbert", "longformer"}
        for row in project_metrics_table(longformer_only):
            assert set(row) == {"metric", "longformer"}

    def test_single_model_still_has_four_rows(self, longformer_only):
        rows = project_metrics_table(longformer_only, ["distilbert", "longformer"])
        assert len(rows) == 4
        assert rows[0] == {"metric": "Accuracy", "longformer": "96.20"}

    def test_explicit_model_order(self, dataset1):
        row = project_metrics_table(dataset1, ["longformer", "distilbert"])[0]
        assert list(row) == ["metric", "longformer", "distilbert"]

    def test_unknown_model_key_is_omitted(self, dataset1):
        row = project_metrics_table(dataset1, ["distilbert", "bert-large"])[0]
        assert "bert-large" not in row


class TestRadarSeries:
    def test_values_are_raw_percentages(self, dataset1):
        rows = project_radar_series(dataset1)
        assert abs(rows[0]["distilbert"] - 99.34) < 1e-9
        assert abs(rows[1]["longformer"] - 96.0) < 1e-9
        assert isinstance(rows[0]["distilbert"], float)

    def test_metric_labels(self, dataset1):
        assert [row["metric"] for row in project_radar_series(dataset1)] == [
            "Accuracy",
            "Mednarr Precision",
            "Mednarr Recall",
            "Mednarr F1",
        ]

    def test_not_clamped_to_axis_range(self, fixture_data):
        from classifier_comparison.data.schemas import DatasetRecord

        data = fixture_data["dataset1"]
        data["results"]["longformer"]["classes"]["mednarr"]["precision"] = 0.5
        record = DatasetRecord.from_dict(data)
        assert project_radar_series(record)[1]["longformer"] == 50.0

    def test_single_model(self, longformer_only):
        for row in project_radar_series(longformer_only):
            assert set(row) == {"metric", "longformer"}


class TestErrorSeries:
    def test_error_counts(self, dataset1):
        assert project_error_series(dataset1) == [
            {"errorType": "Mednarr to Non-mednarr", "distilbert": 6, "longformer": 42},
            {"errorType": "Non-mednarr to Mednarr", "distilbert": 60, "longformer": 28},
        ]

    def test_single_model(self, longformer_only):
        assert project_error_series(longformer_only) == [
            {"errorType": "Mednarr to Non-mednarr", "longformer": 38},
            {"errorType": "Non-mednarr to Mednarr", "longformer": 0},
        ]


class TestMetricDifferences:
    def test_signed_differences(self, dataset1):
        diffs = project_metric_differences(dataset1, "distilbert", "longformer")
        assert diffs == [
            {"metric": "Accuracy", "difference": "+0.04"},
            {"metric": "Mednarr Precision", "difference": "-3.00"},
            {"metric": "Mednarr Recall", "difference": "+4.00"},
            {"metric": "Mednarr F1-Score", "difference": "+1.00"},
        ]

    def test_equal_values_have_no_sign(self, dataset2):
        diffs = project_metric_differences(dataset2, "distilbert", "longformer")
        assert diffs[1] == {"metric": "Mednarr Precision", "difference": "0.00"}

    def test_missing_model(self, longformer_only):
        assert project_metric_differences(longformer_only, "distilbert", "longformer") is None


class TestErrorBreakdown:
    def test_breakdown(self, dataset2):
        assert project_error_breakdown(dataset2) == [
            {"model": "distilbert", "false_positives": 1, "false_negatives": 4, "total_errors": 5},
            {"model": "longformer", "false_positives": 0, "false_negatives": 38, "total_errors": 38},
        ]

    def test_missing_model_omitted(self, longformer_only):
        breakdown = project_error_breakdown(longformer_only, ["distilbert", "longformer"])
        assert [item["model"] for item in breakdown] == ["longformer"]


def test_confusion_grid(dataset1):
    assert project_confusion_grid(dataset1.get_result("longformer")) == [[737, 42], [28, 9183]]


class TestToFrame:
    def test_indexed_by_label(self, dataset1):
        df = to_frame(project_error_series(dataset1), "errorType")
        assert list(df.columns) == ["distilbert", "longformer"]
        assert df.loc["Non-mednarr to Mednarr", "longformer"] == 28

    def test_empty_rows(self):
        assert to_frame([], "metric").empty

    def test_returns_dataframe(self, longformer_only):
        assert isinstance(to_frame(project_metrics_table(longformer_only), "metric"), pd.DataFrame)
