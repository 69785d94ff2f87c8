from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

_ONE_DECIMAL = Decimal("0.1")
# Enough digits to quantize any finite float (max exponent 308) to 0.1.
_PRECISION = 400


def _round_half_up(value: float) -> float:
    # Round the shortest repr, not the binary expansion: 22.45 -> 22.5.
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return float(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def compute_bmi(weight_kg: float | None, height_cm: float | None) -> float | None:
    """
    Return ``weight / (height_m ** 2)`` rounded to one decimal place.

    Returns ``None`` when either input is missing, zero, negative or not a
    number, or when the ratio is not finite. Never raises.
    """
    if not weight_kg or not height_cm:
        return None
    try:
        weight = float(weight_kg)
        height_m = float(height_cm) / 100
    except (TypeError, ValueError):
        return None

    if not math.isfinite(weight) or not math.isfinite(height_m):
        return None
    if weight <= 0 or height_m <= 0:
        return None

    squared = height_m * height_m
    if not squared:
        return None
    bmi = weight / squared
    if not math.isfinite(bmi):
        return None
    return _round_half_up(bmi)
