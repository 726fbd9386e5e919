"""
Integral range utility.

This package provides a lazy, restartable sequence of evenly spaced integers:
- IntegralRange(stop), IntegralRange(start, stop), IntegralRange(start, stop, step)
- size() - distance between start and stop
- length() - number of values produced
- begin()/end() - forward-only cursors, equal once exhausted
- window(start, end) - the values inside a value window
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
