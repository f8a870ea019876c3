"""Numeric helper functions shared by the status and track stages."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

import numpy as np  # type: ignore


def round_fixed(value: float, digits: int) -> float:
    """Round like fixed-point formatting: half away from zero on the exact binary value.

    32.25 -> 32.3 and 1.005 -> 1.0 at one and two digits respectively.
    """
    quantum = Decimal(1).scaleb(-int(digits))
    return float(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mean_or_zero(values: Iterable[float], digits: int) -> float:
    """Return the rounded arithmetic mean of *values*, or 0.0 when empty."""
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return round_fixed(float(np.mean(arr)), digits)


def max_or_zero(values: Iterable[float]) -> float:
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(np.max(arr))


def sorted_unique(values: Iterable[float]) -> List[float]:
    """Deduplicate and sort ascending."""
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        return []
    return [float(v) for v in np.unique(arr)]
