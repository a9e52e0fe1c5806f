"""
Numeric normalization shared by all engines.

The engines follow a no-throw, best-effort policy: a single malformed
grade record must not prevent the rest of a grade report from rendering.
Every arithmetic input goes through these helpers, which coerce missing,
non-numeric, NaN, infinite and negative values to safe defaults.
"""

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from ..config import ROUNDING_PLACES
from ..log import get_logger

logger = get_logger("engines.normalize")


def to_number(value: Any, default: float = 0.0, label: str = "value") -> float:
    """
    Coerce ``value`` to a non-negative float.

    COERCION RULES:
    ---------------
    - None or blank string          -> default
    - numeric string ("87.5")       -> parsed
    - bool, other strings, objects  -> default   (logged)
    - NaN, +/-inf, out of range     -> default   (logged)
    - negative number               -> 0.0       (logged)
    """
    if value is None:
        return default

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        try:
            value = float(text)
        except ValueError:
            logger.warning("Ignoring non-numeric %s %r", label, value)
            return default

    # bool is an int subclass; True/False are never grades
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        logger.warning("Ignoring non-numeric %s %r", label, value)
        return default

    try:
        number = float(value)
    except (OverflowError, ValueError):
        # ints beyond float range, signaling Decimal NaN
        logger.warning("Ignoring unrepresentable %s %r", label, value)
        return default
    if math.isnan(number) or math.isinf(number):
        logger.warning("Ignoring non-finite %s %r", label, value)
        return default
    if number < 0:
        logger.warning("Clamping negative %s %r to 0", label, value)
        return 0.0
    return number


def is_blank(value: Any) -> bool:
    """True for values that mean "nothing recorded" (None or blank text)."""
    return value is None or (isinstance(value, str) and not value.strip())


def to_optional_number(value: Any, label: str = "value") -> Optional[float]:
    """Like to_number, but keeps "absent" distinguishable from zero."""
    if is_blank(value):
        return None
    return to_number(value, default=None, label=label)


def to_weight(value: Any) -> Optional[float]:
    """
    Normalize an item weight.

    Returns None for "use an equal share": missing, zero, negative and
    malformed weights all resolve to equal weighting at aggregation time.
    """
    weight = to_optional_number(value, label="weight")
    if not weight:
        return None
    return weight


def fractional_score(score: float, max_score: float) -> float:
    """score / max_score, or 0 when there are no points possible."""
    if max_score <= 0:
        return 0.0
    return score / max_score


def round2(value: float) -> float:
    """Round half-up to the reporting precision (2 decimal places)."""
    # Sums of finite inputs can still overflow to inf, and inf/inf to NaN
    if not math.isfinite(value):
        logger.warning("Cannot round non-finite %r, reporting 0", value)
        return 0.0
    try:
        quantum = Decimal(1).scaleb(-ROUNDING_PLACES)
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError):
        logger.warning("Cannot round %r, reporting 0", value)
        return 0.0
