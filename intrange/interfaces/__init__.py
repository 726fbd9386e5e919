"""
Abstract base classes and protocols for integral ranges.
"""

from intrange.interfaces.range_iterable import RangeIterable

__all__ = ["RangeIterable"]
