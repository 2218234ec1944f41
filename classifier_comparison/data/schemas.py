"""
Data model for precomputed classifier evaluation results
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

# Class labels of the binary task
MEDNARR = "mednarr"
NON_MEDNARR = "nonMednarr"
CLASS_LABELS = (MEDNARR, NON_MEDNARR)


def _check_fraction(name: str, value: float):
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}")


def _check_count(name: str, value: int):
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}")


@dataclass(frozen=True)
class ClassMetrics:
    """
    Per-class precision, recall and F1 with the class support.

    Attributes:
        precision: Fraction of predictions of this class that were correct
        recall: Fraction of ground-truth instances of this class that were found
        f1: Harmonic mean of precision and recall
        support: Number of ground-truth instances of this class
    """
    precision: float
    recall: float
    f1: float
    support: int

    def __post_init__(self):
        _check_fraction("precision", self.precision)
        _check_fraction("recall", self.recall)
        _check_fraction("f1", self.f1)
        _check_count("support", self.support)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClassMetrics":
        return cls(
            precision=float(data["precision"]),
            recall=float(data["recall"]),
            f1=float(data["f1"]),
            support=int(data["support"]),
        )


@dataclass(frozen=True)
class ConfusionMatrix:
    """Binary confusion matrix with mednarr as the positive class."""
    tp: int
    fn: int
    fp: int
    tn: int

    def __post_init__(self):
        for name in ("tp", "fn", "fp", "tn"):
            _check_count(name, getattr(self, name))

    @property
    def positive_support(self) -> int:
        return self.tp + self.fn

    @property
    def negative_support(self) -> int:
        return self.fp + self.tn

    @property
    def total(self) -> int:
        return self.tp + self.fn + self.fp + self.tn

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfusionMatrix":
        return cls(
            tp=int(data["tp"]),
            fn=int(data["fn"]),
            fp=int(data["fp"]),
            tn=int(data["tn"]),
        )


@dataclass(frozen=True)
class ErrorBreakdown:
    """
    Misclassification counts by direction.

    Attributes:
        mednarr_to_non_mednarr: mednarr documents predicted as non-mednarr (false negatives)
        non_mednarr_to_mednarr: non-mednarr documents predicted as mednarr (false positives)
    """
    mednarr_to_non_mednarr: int
    non_mednarr_to_mednarr: int

    def __post_init__(self):
        _check_count("mednarr_to_non_mednarr", self.mednarr_to_non_mednarr)
        _check_count("non_mednarr_to_mednarr", self.non_mednarr_to_mednarr)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ErrorBreakdown":
        return cls(
            mednarr_to_non_mednarr=int(data["mednarr_to_non_mednarr"]),
            non_mednarr_to_mednarr=int(data["non_mednarr_to_mednarr"]),
        )


@dataclass(frozen=True)
class ModelResult:
    """
    Evaluation result of one model on one dataset.

    Raises:
        ValueError: If the counts, confusion matrix and error breakdown disagree
    """
    name: str
    accuracy: float
    matches: int
    mismatches: int
    classes: Mapping[str, ClassMetrics]
    confusion_matrix: ConfusionMatrix
    errors: ErrorBreakdown

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        _check_fraction("accuracy", self.accuracy)
        _check_count("matches", self.matches)
        _check_count("mismatches", self.mismatches)

        missing = [label for label in CLASS_LABELS if label not in self.classes]
        if missing:
            raise ValueError(f"{self.name}: missing class metrics for {missing}")
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))

        cm = self.confusion_matrix
        if self.matches != cm.tp + cm.tn:
            raise ValueError(f"{self.name}: matches ({self.matches}) != tp + tn ({cm.tp + cm.tn})")
        if self.mismatches != cm.fp + cm.fn:
            raise ValueError(f"{self.name}: mismatches ({self.mismatches}) != fp + fn ({cm.fp + cm.fn})")
        if self.errors.mednarr_to_non_mednarr != cm.fn:
            raise ValueError(f"{self.name}: mednarr_to_non_mednarr must equal the confusion matrix fn")
        if self.errors.non_mednarr_to_mednarr != cm.fp:
            raise ValueError(f"{self.name}: non_mednarr_to_mednarr must equal the confusion matrix fp")
        if self.classes[MEDNARR].support != cm.positive_support:
            raise ValueError(f"{self.name}: mednarr support must equal tp + fn")
        if self.classes[NON_MEDNARR].support != cm.negative_support:
            raise ValueError(f"{self.name}: nonMednarr support must equal fp + tn")

    @property
    def total(self) -> int:
        return self.matches + self.mismatches

    @property
    def false_positives(self) -> int:
        return self.errors.non_mednarr_to_mednarr

    @property
    def false_negatives(self) -> int:
        return self.errors.mednarr_to_non_mednarr

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelResult":
        return cls(
            name=data["name"],
            accuracy=float(data["accuracy"]),
            matches=int(data["matches"]),
            mismatches=int(data["mismatches"]),
            classes={label: ClassMetrics.from_dict(metrics) for label, metrics in data["classes"].items()},
            confusion_matrix=ConfusionMatrix.from_dict(data["confusion_matrix"]),
            errors=ErrorBreakdown.from_dict(data["errors"]),
        )


@dataclass(frozen=True)
class DatasetRecord:
    """
    A dataset with its ground-truth class distribution and per-model results.

    A model key that is missing from ``results`` or maps to ``None`` has no
    result yet; this is a valid state, not an error.

    Raises:
        ValueError: If the distribution does not add up or a result disagrees with it
    """
    name: str
    total_samples: int
    class_distribution: Mapping[str, int]
    results: Mapping[str, Optional[ModelResult]] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        if self.total_samples <= 0:
            raise ValueError(f"total_samples must be positive, got {self.total_samples}")

        missing = [label for label in CLASS_LABELS if label not in self.class_distribution]
        if missing:
            raise ValueError(f"{self.name}: class_distribution is missing {missing}")
        for label, count in self.class_distribution.items():
            _check_count(f"class_distribution[{label}]", count)
        if sum(self.class_distribution.values()) != self.total_samples:
            raise ValueError(
                f"{self.name}: class_distribution sums to {sum(self.class_distribution.values())}, "
                f"expected {self.total_samples}"
            )

        for key, result in self.results.items():
            if result is None:
                continue
            if result.total != self.total_samples:
                raise ValueError(
                    f"{self.name}/{key}: matches + mismatches ({result.total}) != total_samples ({self.total_samples})"
                )
            for label in CLASS_LABELS:
                if result.classes[label].support != self.class_distribution[label]:
                    raise ValueError(f"{self.name}/{key}: {label} support does not match class_distribution")

        object.__setattr__(self, "class_distribution", MappingProxyType(dict(self.class_distribution)))
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))

    def get_result(self, model_key: str) -> Optional[ModelResult]:
        """Result for a model, or None when the model has no result for this dataset."""
        return self.results.get(model_key)

    def has_result(self, model_key: str) -> bool:
        return self.get_result(model_key) is not None

    def present_model_keys(self) -> List[str]:
        """Model keys that have a result, in insertion order."""
        return [key for key, result in self.results.items() if result is not None]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DatasetRecord":
        results = {}
        for key, result in data.get("results", {}).items():
            results[key] = ModelResult.from_dict(result) if result is not None else None
        return cls(
            name=data["name"],
            total_samples=int(data["total_samples"]),
            class_distribution={label: int(count) for label, count in data["class_distribution"].items()},
            results=results,
        )
