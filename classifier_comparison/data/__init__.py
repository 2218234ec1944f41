"""
Data model and dataset repository for classifier comparison
"""

from .schemas import (
    MEDNARR,
    NON_MEDNARR,
    CLASS_LABELS,
    ClassMetrics,
    ConfusionMatrix,
    ErrorBreakdown,
    ModelResult,
    DatasetRecord
)

from .repository import (
    NotFoundError,
    DatasetRepository,
    build_default_repository,
    load_repository
)
