"""
Shared pytest fixtures for integral range tests.
"""

import pytest

from intrange.models.integral_kind import IntegralKind
from intrange.models.integral_range import IntegralRange


@pytest.fixture
def ascending_range():
    """Provide a range whose size is not a multiple of its step."""
    return IntegralRange(0, 7, 2)


@pytest.fixture
def descending_range():
    """Provide a descending range with an exact step fit."""
    return IntegralRange(10, 0, -2)


@pytest.fixture
def empty_range():
    """Provide an empty range built with an explicit step."""
    return IntegralRange(3, 3, 5)


@pytest.fixture
def int64_extremes():
    """Provide the widest INT64 range."""
    kind = IntegralKind.INT64
    return IntegralRange(kind.min_value, kind.max_value, kind=kind)


@pytest.fixture
def sample_triples():
    """Provide valid (start, stop, step) triples in both directions."""
    return [
        (0, 5, 1),
        (0, 7, 2),
        (-3, 4, 3),
        (1, 100, 7),
        (10, 0, -2),
        (5, -6, -4),
        (0, -1, -10),
        (-50, -51, -1),
    ]
