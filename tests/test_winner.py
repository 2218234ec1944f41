# tests/test_winner.py
"""
Tests for false-positive based winner selection.
"""

import pytest

from classifier_comparison.analysis.winner import TIE, select_winner


def test_fewer_false_positives_wins(dataset1):
    # 60 vs 28 false positives
    assert select_winner(dataset1, "distilbert", "longformer") == "longformer"


def test_accuracy_is_ignored(dataset2):
    # DistilBERT is more accurate (99.50% vs 96.20%) but has 1 false positive vs 0
    assert dataset2.get_result("distilbert").accuracy > dataset2.get_result("longformer").accuracy
    assert select_winner(dataset2, "distilbert", "longformer") == "longformer"


def test_equal_false_positives_tie(tied_record):
    assert select_winner(tied_record, "distilbert", "longformer") == TIE


def test_missing_model_returns_none(longformer_only):
    assert select_winner(longformer_only, "distilbert", "longformer") is None
    assert select_winner(longformer_only, "longformer", "distilbert") is None


def test_unknown_model_key_returns_none(dataset1):
    assert select_winner(dataset1, "distilbert", "bert-large") is None


@pytest.mark.parametrize("record_name", ["dataset1", "dataset2", "tied_record"])
def test_symmetric_under_argument_swap(record_name, request):
    record = request.getfixturevalue(record_name)
    forward = select_winner(record, "distilbert", "longformer")
    backward = select_winner(record, "longformer", "distilbert")
    if forward == TIE:
        assert backward == TIE
    else:
        assert forward == backward
