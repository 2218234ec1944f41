# tests/test_schemas.py
"""
Tests for the evaluation result data model.
"""

import pytest

from classifier_comparison.data.schemas import (
    ClassMetrics,
    ConfusionMatrix,
    DatasetRecord,
    ErrorBreakdown,
    ModelResult,
)


class TestClassMetrics:
    def test_valid_metrics(self):
        metrics = ClassMetrics(precision=0.93, recall=0.99, f1=0.96, support=779)
        assert metrics.support == 779

    @pytest.mark.parametrize("field", ["precision", "recall", "f1"])
    def test_fraction_out_of_range(self, field):
        values = {"precision": 0.5, "recall": 0.5, "f1": 0.5, "support": 10}
        values[field] = 1.2
        with pytest.raises(ValueError, match=field):
            ClassMetrics(**values)

    def test_negative_support(self):
        with pytest.raises(ValueError, match="support"):
            ClassMetrics(precision=0.5, recall=0.5, f1=0.5, support=-1)


class TestConfusionMatrix:
    def test_derived_counts(self):
        cm = ConfusionMatrix(tp=773, fn=6, fp=60, tn=9151)
        assert cm.positive_support == 779
        assert cm.negative_support == 9211
        assert cm.total == 9990

    def test_negative_cell(self):
        with pytest.raises(ValueError, match="fp"):
            ConfusionMatrix(tp=1, fn=1, fp=-1, tn=1)


class TestModelResult:
    def test_from_dict(self, fixture_data):
        result = ModelResult.from_dict(fixture_data["dataset1"]["results"]["distilbert"])
        assert result.name == "DistilBERT-uncased"
        assert result.false_positives == 60
        assert result.false_negatives == 6
        assert result.total == 9990

    def test_classes_are_read_only(self, dataset1):
        with pytest.raises(TypeError):
            dataset1.get_result("distilbert").classes["mednarr"] = None

    def test_matches_must_equal_tp_plus_tn(self, fixture_data):
        data = fixture_data["dataset1"]["results"]["distilbert"]
        data["matches"] = 9900
        with pytest.raises(ValueError, match="matches"):
            ModelResult.from_dict(data)

    def test_errors_must_match_confusion_matrix(self, fixture_data):
        data = fixture_data["dataset1"]["results"]["distilbert"]
        data["errors"] = {"mednarr_to_non_mednarr": 60, "non_mednarr_to_mednarr": 6}
        with pytest.raises(ValueError, match="mednarr_to_non_mednarr"):
            ModelResult.from_dict(data)

    def test_support_must_match_confusion_matrix(self, fixture_data):
        data = fixture_data["dataset1"]["results"]["distilbert"]
        data["classes"]["mednarr"]["support"] = 780
        with pytest.raises(ValueError, match="support"):
            ModelResult.from_dict(data)

    def test_missing_class(self, fixture_data):
        data = fixture_data["dataset1"]["results"]["distilbert"]
        del data["classes"]["nonMednarr"]
        with pytest.raises(ValueError, match="missing class metrics"):
            ModelResult.from_dict(data)


class TestDatasetRecord:
    def test_distribution_must_sum_to_total(self, fixture_data):
        data = fixture_data["dataset1"]
        data["total_samples"] = 10000
        with pytest.raises(ValueError, match="class_distribution sums to"):
            DatasetRecord.from_dict(data)

    def test_total_samples_must_be_positive(self):
        with pytest.raises(ValueError, match="total_samples"):
            DatasetRecord(name="empty", total_samples=0, class_distribution={"mednarr": 0, "nonMednarr": 0})

    def test_result_support_must_match_distribution(self, fixture_data):
        data = fixture_data["dataset1"]
        data["class_distribution"] = {"mednarr": 780, "nonMednarr": 9210}
        with pytest.raises(ValueError, match="support does not match"):
            DatasetRecord.from_dict(data)

    def test_absent_result_is_tolerated(self, longformer_only):
        assert longformer_only.get_result("distilbert") is None
        assert not longformer_only.has_result("distilbert")
        assert longformer_only.present_model_keys() == ["longformer"]

    def test_none_result_counts_as_absent(self, fixture_data):
        data = fixture_data["dataset2"]
        data["results"]["distilbert"] = None
        record = DatasetRecord.from_dict(data)
        assert "distilbert" in record.results
        assert record.present_model_keys() == ["longformer"]

    def test_present_model_keys_keep_order(self, dataset1):
        assert dataset1.present_model_keys() == ["distilbert", "longformer"]


class TestFixtureInvariants:
    """Invariants that must hold for every shipped result."""

    def _results(self, repository):
        for key in repository.list_keys():
            record = repository.get_dataset(key)
            for model_key in record.present_model_keys():
                yield record, record.get_result(model_key)

    def test_counts_add_up(self, repository):
        for record, result in self._results(repository):
            assert result.matches + result.mismatches == record.total_samples
            assert result.confusion_matrix.tp + result.confusion_matrix.tn == result.matches

    def test_error_breakdown_matches_confusion_matrix(self, repository):
        for _, result in self._results(repository):
            assert result.errors.mednarr_to_non_mednarr == result.confusion_matrix.fn
            assert result.errors.non_mednarr_to_mednarr == result.confusion_matrix.fp

    def test_error_breakdown_type(self, dataset2):
        assert dataset2.get_result("longformer").errors == ErrorBreakdown(
            mednarr_to_non_mednarr=38, non_mednarr_to_mednarr=0
        )
