"""
Number formatting shared by the projections and the renderer
"""
from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def as_percent(value: float) -> float:
    """Scale a fraction to a percentage."""
    return value * 100


def round_half_up(value: float) -> Decimal:
    """Round the exact binary value of a float to two places, ties away from zero."""
    return Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_percentage(value: float) -> str:
    """Fraction as a percentage with exactly two decimals, e.g. 0.9934 -> '99.34'."""
    return str(round_half_up(as_percent(value)))


def format_signed(value: float) -> str:
    """Two decimals with a leading '+' for positive values."""
    sign = "+" if value > 0 else ""
    return f"{sign}{round_half_up(value)}"


def format_count(value: int) -> str:
    """Integer with thousands separators, e.g. 9990 -> '9,990'."""
    return f"{value:,}"
