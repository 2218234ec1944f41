# tests/conftest.py
"""
Pytest configuration and shared fixtures for all tests.
"""

import copy
import sys
from pathlib import Path

import pytest

# Make the project root importable without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from classifier_comparison.data.fixtures import DATASET_FIXTURES  # noqa: E402


@pytest.fixture
def repository():
    """Repository with the built-in datasets"""
    from classifier_comparison.data.repository import build_default_repository

    return build_default_repository()


@pytest.fixture
def dataset1(repository):
    return repository.get_dataset("dataset1")


@pytest.fixture
def dataset2(repository):
    return repository.get_dataset("dataset2")


@pytest.fixture
def fixture_data():
    """Deep copy of the raw fixture dicts, safe to modify in a test"""
    return copy.deepcopy(DATASET_FIXTURES)


@pytest.fixture
def longformer_only(fixture_data):
    """Dataset 2 with the DistilBERT result removed"""
    from classifier_comparison.data.schemas import DatasetRecord

    data = fixture_data["dataset2"]
    del data["results"]["distilbert"]
    return DatasetRecord.from_dict(data)


@pytest.fixture
def tied_record(fixture_data):
    """Dataset 1 with Longformer's counts rearranged to give 60 false positives"""
    from classifier_comparison.data.schemas import DatasetRecord

    data = fixture_data["dataset1"]
    longformer = data["results"]["longformer"]
    longformer["confusion_matrix"] = {"tp": 769, "fn": 10, "fp": 60, "tn": 9151}
    longformer["errors"] = {"mednarr_to_non_mednarr": 10, "non_mednarr_to_mednarr": 60}
    longformer["matches"] = 9920
    longformer["mismatches"] = 70
    return DatasetRecord.from_dict(data)
