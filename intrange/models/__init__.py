"""
Data models for integral ranges.
"""

from intrange.models.exceptions import InvalidStepDirectionError, KindBoundsError
from intrange.models.integral_kind import IntegralKind
from intrange.models.integral_range import IntegralRange
from intrange.models.range_iterator import RangeIterator

__all__ = [
    "IntegralKind",
    "IntegralRange",
    "RangeIterator",
    "InvalidStepDirectionError",
    "KindBoundsError",
]
