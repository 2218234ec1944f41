"""
Winner selection between two models on a dataset
"""
import logging
from typing import Optional

from ..data.schemas import DatasetRecord

logger = logging.getLogger(__name__)

TIE = "tie"


def select_winner(record: DatasetRecord, model_a: str, model_b: str) -> Optional[str]:
    """
    Pick the model with fewer false positives on the mednarr class.

    Non-mednarr documents flagged as mednarr are the costlier mistake, so
    only ``errors.non_mednarr_to_mednarr`` is compared; accuracy and F1 do
    not take part.

    Returns:
        ``model_a`` or ``model_b`` for a strict winner, ``"tie"`` for equal
        counts, or None if either model has no result for the dataset
    """
    result_a = record.get_result(model_a)
    result_b = record.get_result(model_b)
    if result_a is None or result_b is None:
        logger.debug(f"No winner for {record.name}: missing result for {model_a if result_a is None else model_b}")
        return None

    fp_a = result_a.false_positives
    fp_b = result_b.false_positives
    if fp_a < fp_b:
        return model_a
    if fp_b < fp_a:
        return model_b
    return TIE
