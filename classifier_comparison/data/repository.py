"""
Read-only repository of dataset records
"""
import json
import logging
from typing import Any, Dict, List, Mapping

from .fixtures import DATASET_FIXTURES
from .schemas import DatasetRecord

logger = logging.getLogger(__name__)


class NotFoundError(KeyError):
    """Raised when an unknown dataset key is requested."""

    def __init__(self, key: str, available: List[str]):
        super().__init__(key)
        self.key = key
        self.available = available

    def __str__(self):
        return f"Unknown dataset '{self.key}'. Available datasets: {', '.join(self.available) or 'none'}"


class DatasetRepository:
    """
    Immutable, ordered collection of dataset records.

    Records are looked up by key; the key order is the insertion order of
    the mapping passed to the constructor.
    """

    def __init__(self, records: Mapping[str, DatasetRecord]):
        self._records: Dict[str, DatasetRecord] = dict(records)
        logger.info(f"Loaded {len(self._records)} datasets: {', '.join(self._records)}")

    def get_dataset(self, key: str) -> DatasetRecord:
        """
        Look up a dataset record.

        Raises:
            NotFoundError: If no dataset is registered under ``key``
        """
        try:
            record = self._records[key]
        except KeyError:
            raise NotFoundError(key, self.list_keys()) from None
        logger.debug(f"Resolved dataset '{key}' -> {record.name}")
        return record

    def list_keys(self) -> List[str]:
        return list(self._records)

    def __contains__(self, key) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    @classmethod
    def from_dict(cls, data: Mapping[str, Dict[str, Any]]) -> "DatasetRepository":
        """Build a repository from plain dicts in the fixture layout."""
        records = {}
        for key, record_data in data.items():
            try:
                record = DatasetRecord.from_dict(record_data)
            except (KeyError, TypeError, AttributeError) as e:
                raise ValueError(f"Dataset '{key}' is malformed: missing or invalid field {e}") from e
            for model_key, result in record.results.items():
                if result is None:
                    logger.info(f"Dataset '{key}' has no result for model '{model_key}'")
            records[key] = record
        return cls(records)

    @classmethod
    def from_json(cls, path: str) -> "DatasetRepository":
        """
        Load a repository from a JSON file in the fixture layout.

        Raises:
            FileNotFoundError: If the file doesn't exist
            json.JSONDecodeError: If the file contains invalid JSON
            ValueError: If a record breaks a data invariant or misses a field
        """
        logger.info(f"Loading datasets from {path}")
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)


def build_default_repository() -> DatasetRepository:
    """Repository holding the built-in datasets."""
    return DatasetRepository.from_dict(DATASET_FIXTURES)


def load_repository(data_file=None) -> DatasetRepository:
    """Load datasets from ``data_file`` when given, else the built-in fixtures."""
    if data_file:
        return DatasetRepository.from_json(data_file)
    return build_default_repository()
