"""Null-propagating statistical reducers used by metric derivation.

Strict reducers return None when any attempt is missing; partial attempt sets
are discarded, never averaged over whatever happens to be available.
"""

import math
from collections.abc import Sequence

from player_style.scoring.optional import fold, map2, present

type Values = Sequence[float | None]


def _complete(values: Values, length: int | None = None) -> list[float] | None:
    if not values:
        return None
    if length is not None and len(values) != length:
        return None
    if any(v is None for v in values):
        return None
    return [v for v in values if v is not None]


def mean4(values: Values) -> float | None:
    nums = _complete(values, 4)
    if nums is None:
        return None
    return math.fsum(nums) / 4


def sum_top2_of4(values: Values) -> float | None:
    nums = _complete(values, 4)
    if nums is None:
        return None
    top = sorted(nums, reverse=True)
    return top[0] + top[1]


def sum_all(values: Values) -> float | None:
    if not values:
        return None
    return fold(values, lambda acc, v: acc + v, 0.0)


def avg_all(values: Values) -> float | None:
    total = sum_all(values)
    if total is None:
        return None
    return total / len(values)


def min_all(values: Values) -> float | None:
    nums = _complete(values)
    return min(nums) if nums is not None else None


def max_all(values: Values) -> float | None:
    nums = _complete(values)
    return max(nums) if nums is not None else None


def max_of(values: Values) -> float | None:
    """Lenient max: ignores missing elements, None only if every element is missing."""
    nums = present(values)
    return max(nums) if nums else None


def consistency_range(values: Values) -> float | None:
    return map2(max_all(values), min_all(values), lambda hi, lo: hi - lo)


def safe_ratio(numerator: float | None, denominator: float | None) -> float | None:
    if numerator is None or denominator is None or denominator == 0:
        return None
    return numerator / denominator


def safe_asymmetry_pct(strong: float | None, weak: float | None) -> float | None:
    if strong is None or weak is None or strong == 0:
        return None
    return (strong - weak) / strong * 100


def side_asymmetry_pct(left: float | None, right: float | None) -> float | None:
    """Absolute left/right imbalance as a percentage of the better side."""
    if left is None or right is None:
        return None
    best = max(left, right)
    if best == 0:
        return None
    return abs(left - right) / best * 100


def clamp01(value: float) -> float:
    if value < 0:
        return 0.0
    if value > 1:
        return 1.0
    return value
