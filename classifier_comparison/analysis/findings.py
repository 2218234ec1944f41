"""
Key findings and recommendations derived from a dataset record
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import model_label
from ..data.schemas import MEDNARR, DatasetRecord, ModelResult
from ..utils.formatting import format_percentage
from .winner import TIE, select_winner

FURTHER_INVESTIGATION = (
    "Analyze the specific cases where each model fails to identify patterns. "
    "Consider ensemble methods, threshold tuning, or using different models for different "
    "document characteristics. The performance varies significantly between datasets, "
    "suggesting domain-specific optimization may be beneficial."
)


@dataclass(frozen=True)
class Finding:
    """
    A titled statement shown as a card.

    Attributes:
        title: Card heading
        message: Main statement
        detail: Optional supporting line
        tone: Renderer hint: "info", "success", "warning" or "neutral"
    """
    title: str
    message: str
    detail: Optional[str] = None
    tone: str = "info"


def error_bias(result: ModelResult) -> str:
    """Describe which way a model's errors lean."""
    fp = result.false_positives
    fn = result.false_negatives
    if fp == 0 and fn > 0:
        return "Only false negatives, perfect precision on mednarr"
    if fp > fn:
        return "More likely to classify non-mednarr as mednarr"
    if fn > fp:
        return "More likely to miss mednarr cases"
    return "Balanced error profile"


def winner_finding(record: DatasetRecord, model_a: str, model_b: str) -> Optional[Finding]:
    winner = select_winner(record, model_a, model_b)
    if winner is None:
        return None

    result_a = record.get_result(model_a)
    result_b = record.get_result(model_b)
    if winner == TIE:
        message = "Both models have equal false positive rates"
        tone = "neutral"
    else:
        message = f"{record.get_result(winner).name} has fewer false positives"
        tone = "info" if winner == model_a else "success"
    detail = (
        f"False Positives: {model_label(model_a)}: {result_a.false_positives} | "
        f"{model_label(model_b)}: {result_b.false_positives}"
    )
    return Finding("Winner Based on False Positives", message, detail, tone)


def missing_result_findings(record: DatasetRecord, model_keys: Sequence[str]) -> List[Finding]:
    """One finding per model that has no result for this dataset."""
    present = [key for key in model_keys if record.has_result(key)]
    findings = []
    for key in model_keys:
        if record.has_result(key):
            continue
        if present:
            available = ", ".join(record.get_result(other).name for other in present)
            message = f"Only {available} results available for {record.name}"
        else:
            message = f"No model results available for {record.name}"
        findings.append(Finding(f"Awaiting {model_label(key)} Results", message, tone="warning"))
    return findings


def _tradeoff_finding(record: DatasetRecord, model_a: str, model_b: str) -> Optional[Finding]:
    result_a = record.get_result(model_a)
    result_b = record.get_result(model_b)
    if result_a is None or result_b is None:
        return None

    a, b = result_a.classes[MEDNARR], result_b.classes[MEDNARR]
    label_a, label_b = model_label(model_a), model_label(model_b)
    if a.precision > b.precision and a.recall < b.recall:
        message = (
            f"{label_a}: Better precision ({a.precision:.0%} vs {b.precision:.0%}) "
            f"but lower recall ({a.recall:.0%} vs {b.recall:.0%})"
        )
    elif b.precision > a.precision and b.recall < a.recall:
        message = (
            f"{label_b}: Better precision ({b.precision:.0%} vs {a.precision:.0%}) "
            f"but lower recall ({b.recall:.0%} vs {a.recall:.0%})"
        )
    else:
        # No precision/recall split, so contrast accuracy with false positives
        more_accurate, other = (model_a, model_b) if result_a.accuracy >= result_b.accuracy else (model_b, model_a)
        acc, other_acc = record.get_result(more_accurate), record.get_result(other)
        message = (
            f"{model_label(more_accurate)}: Higher accuracy ({format_percentage(acc.accuracy)}% vs "
            f"{format_percentage(other_acc.accuracy)}%) with {acc.false_positives} false positives "
            f"vs {model_label(other)}'s {other_acc.false_positives}"
        )
    return Finding("Trade-off Analysis", message, tone="warning")


def _error_pattern_finding(record: DatasetRecord, model_keys: Sequence[str]) -> Optional[Finding]:
    parts = []
    for key in model_keys:
        result = record.get_result(key)
        if result is None:
            continue
        parts.append(
            f"{model_label(key)}: {result.false_positives} FP, {result.false_negatives} FN "
            f"({error_bias(result).lower()})"
        )
    if not parts:
        return None
    return Finding("Error Pattern", ". ".join(parts), tone="neutral")


def key_findings(record: DatasetRecord, model_a: str, model_b: str) -> List[Finding]:
    """Findings for the overview page, most important first."""
    findings = []
    winner = winner_finding(record, model_a, model_b)
    if winner is not None:
        findings.append(winner)
    findings.extend(missing_result_findings(record, [model_a, model_b]))
    tradeoff = _tradeoff_finding(record, model_a, model_b)
    if tradeoff is not None:
        findings.append(tradeoff)
    pattern = _error_pattern_finding(record, [model_a, model_b])
    if pattern is not None:
        findings.append(pattern)
    return findings


def build_recommendations(record: DatasetRecord, model_a: str, model_b: str) -> List[Finding]:
    """Recommendation cards for the selected dataset."""
    recommendations = []
    result_a = record.get_result(model_a)
    result_b = record.get_result(model_b)

    winner = select_winner(record, model_a, model_b)
    if winner is not None and winner != TIE:
        loser = model_b if winner == model_a else model_a
        win, lose = record.get_result(winner), record.get_result(loser)
        message = (
            f"{win.name} wins with {win.false_positives} false positives vs "
            f"{model_label(loser)}'s {lose.false_positives}"
        )
        if lose.false_positives > 0:
            reduction = (lose.false_positives - win.false_positives) / lose.false_positives
            message += f". This is {reduction:.0%} fewer false positives"
        message += ", making it the better choice when minimizing non-mednarr cases incorrectly classified as mednarr."
        if lose.accuracy > win.accuracy:
            message += (
                f" {model_label(loser)} has higher overall accuracy "
                f"({format_percentage(lose.accuracy)}% vs {format_percentage(win.accuracy)}%)."
            )
        recommendations.append(Finding(f"Winner for {record.name}", message, tone="info"))
    elif winner == TIE:
        recommendations.append(Finding(
            f"Winner for {record.name}",
            f"Both models produce {result_a.false_positives} false positives; compare recall to break the tie.",
            tone="info",
        ))

    present = [(key, result) for key, result in ((model_a, result_a), (model_b, result_b)) if result is not None]
    if present:
        _, best = max(present, key=lambda pair: pair[1].classes[MEDNARR].recall)
        mednarr = best.classes[MEDNARR]
        recommendations.append(Finding(
            "For Maximizing Recall",
            f"{best.name} achieves {mednarr.recall:.0%} recall on mednarr class, missing only "
            f"{best.false_negatives} out of {mednarr.support} cases.",
            tone="success",
        ))

    if result_a is not None and result_b is not None:
        more_precise, other = (result_a, result_b) if result_a.false_positives <= result_b.false_positives else (result_b, result_a)
        recommendations.append(Finding(
            "Trade-offs Summary",
            f"{more_precise.name} raises fewer false alarms ({more_precise.false_positives} vs "
            f"{other.false_positives}) while {other.name} misses "
            f"{other.false_negatives} mednarr cases vs {more_precise.false_negatives}. "
            "Choose based on whether false positives or false negatives are more costly.",
            tone="warning",
        ))

    recommendations.append(Finding("Further Investigation", FURTHER_INVESTIGATION, tone="neutral"))
    return recommendations
