"""Small numeric and ordering helpers shared by the scoring modules."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, TypeVar

from linkopt.scoring.constants import FAILING_GRADE, GRADE_THRESHOLDS, PRIORITY_ORDER

T = TypeVar("T")


def round_half_up(value: float, ndigits: int = 0) -> float | int:
    """Round like a spreadsheet would: 0.5 always goes up.

    Python's built-in ``round`` uses banker's rounding, which would turn a
    page total of 86.5 into 86.
    """
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean, ``0.0`` for an empty input."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def get_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


def sort_by_priority(items: Sequence[T]) -> List[T]:
    """Stable sort of anything with a ``priority`` attribute, high first."""
    return sorted(items, key=lambda item: -PRIORITY_ORDER.get(item.priority, 0))
