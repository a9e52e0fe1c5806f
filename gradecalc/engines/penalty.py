"""
Late submission penalties.
"""

from ..models import LatePolicy, LatePolicyType
from .normalize import to_number


def apply_late_penalty(score: float, max_score: float, policy: LatePolicy) -> float:
    """
    Return ``score`` after the course late policy has been applied.

    PERCENTAGE deducts ``value`` percent of the item's max score, FIXED
    deducts ``value`` points. Either way the deduction is capped at
    ``max_deduction`` percent of the max score and the score never goes
    below 0.

    Example (percentage, value=10, max_deduction=100):
        85/100 late  ->  75/100
    """
    if policy is None or policy.type == LatePolicyType.NONE:
        return score

    value = to_number(policy.value, label="late policy value")
    if policy.type == LatePolicyType.PERCENTAGE:
        deduction = max_score * value / 100
    else:
        deduction = value

    cap_percent = to_number(policy.max_deduction, default=100.0, label="late policy max deduction")
    deduction = min(deduction, max_score * cap_percent / 100)

    return max(score - deduction, 0.0)
