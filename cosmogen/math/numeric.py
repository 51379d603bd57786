"""Finite-value guards used wherever a division, root or average can go bad."""
from __future__ import annotations

import math
from typing import Iterable


def safe_finite(value: float, default: float) -> float:
    """Return ``value`` when it is a finite number, otherwise ``default``."""

    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def finite_average(values: Iterable[float]) -> float:
    """Mean of the finite entries in ``values``; 0.0 when none are finite."""

    total = 0.0
    count = 0
    for value in values:
        if math.isfinite(value):
            total += value
            count += 1
    if count == 0:
        return 0.0
    return total / count


__all__ = ["finite_average", "safe_finite"]
