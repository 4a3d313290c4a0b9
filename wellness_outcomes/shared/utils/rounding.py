"""Rounding and arithmetic policy shared by every analytics calculator.

All reported figures go through these helpers so that results are
reproducible across implementations:

- ``round1`` rounds to one decimal place.
- ``round_int`` rounds to the nearest whole unit.

``round1`` uses ROUND_HALF_UP applied to the exact binary value of the
float (``Decimal(float)``), the same way fixed-point display formatting
behaves: halves round away from zero. ``round_int`` rounds halves toward
positive infinity, so -0.5 becomes 0 and -37.5 becomes -37.

Ratios whose denominator is zero are reported as ``None`` ("insufficient
data") rather than NaN or Infinity.
"""
import math
from decimal import Decimal, ROUND_HALF_DOWN, ROUND_HALF_UP
from typing import Iterable, Optional

_ONE_DECIMAL = Decimal("0.1")
_WHOLE = Decimal("1")


def _is_reportable(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def round1(value: Optional[float]) -> Optional[float]:
    """Round to one decimal place, half-up.

    Args:
        value: Number to round (None and non-finite values map to None)

    Returns:
        Rounded float, or None if the value is not reportable
    """
    if not _is_reportable(value):
        return None
    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def round_int(value: Optional[float]) -> Optional[int]:
    """Round to the nearest integer, halves toward positive infinity.

    Args:
        value: Number to round (None and non-finite values map to None)

    Returns:
        Rounded int, or None if the value is not reportable
    """
    if not _is_reportable(value):
        return None
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return int(Decimal(value).quantize(_WHOLE, rounding=rounding))


def safe_mean(values: Iterable[float]) -> float:
    """Arithmetic mean that defaults to 0 for an empty input."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def safe_ratio(numerator: float, denominator: float) -> Optional[float]:
    """numerator / denominator, or None when the denominator is zero."""
    if denominator == 0:
        return None
    return numerator / denominator


def safe_percent(part: float, whole: float) -> Optional[float]:
    """part / whole * 100, or None when whole is zero."""
    ratio = safe_ratio(part, whole)
    if ratio is None:
        return None
    return ratio * 100
