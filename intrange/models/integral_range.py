"""
IntegralRange - lazy sequence of evenly spaced integers.
"""

import logging
import operator
from collections.abc import AsyncIterator, Iterator

from intrange.interfaces.range_iterable import RangeIterable
from intrange.models.exceptions import InvalidStepDirectionError, KindBoundsError
from intrange.models.integral_kind import IntegralKind
from intrange.models.range_iterator import RangeIterator

logger = logging.getLogger(__name__)


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


class IntegralRange(RangeIterable):
    """
    Immutable range of integers [start, stop) advancing by step.

    Construction forms:
    - IntegralRange(): empty range
    - IntegralRange(stop): same as IntegralRange(0, stop)
    - IntegralRange(start, stop): step is +1, -1 or 0 depending on direction
    - IntegralRange(start, stop, step): explicit step, forced to 0 when start == stop

    Derived quantities:
    - size(): |stop - start|
    - length(): number of values produced, ceil(size / |step|)

    Iteration restarts from start on every begin()/iter() call. Cursors
    returned by begin() and end() compare equal by position.
    """

    __slots__ = ("_start", "_stop", "_step", "_size", "_length", "_kind")

    # Integer kind used when none is given
    DEFAULT_KIND = IntegralKind.UNBOUNDED

    def __init__(self, *args: int, kind: IntegralKind | None = None) -> None:
        """
        Initialize the range.

        Args:
            *args: (), (stop,), (start, stop) or (start, stop, step).
            kind: Integral kind the bounds must fit. Defaults to DEFAULT_KIND.

        Raises:
            TypeError: On too many arguments, non-integer values or a bad kind.
            KindBoundsError: If start or stop does not fit kind.
            InvalidStepDirectionError: If step points away from stop.
        """
        if len(args) > 3:
            raise TypeError(
                f"IntegralRange expected at most 3 arguments, got {len(args)}"
            )

        values = [operator.index(arg) for arg in args]
        if len(values) == 0:
            start, stop, step = 0, 0, None
        elif len(values) == 1:
            start, stop, step = 0, values[0], None
        elif len(values) == 2:
            start, stop, step = values[0], values[1], None
        else:
            start, stop, step = values

        self._initialize(start, stop, step, kind)

    @classmethod
    def from_pair(
        cls,
        bounds: tuple[int, int],
        step: int | None = None,
        kind: IntegralKind | None = None,
    ) -> "IntegralRange":
        """
        Build a range from a (start, stop) pair.

        Args:
            bounds: (start, stop) tuple.
            step: Explicit step. If None, derived from the direction.
            kind: Integral kind the bounds must fit.

        Returns:
            The new range.
        """
        start, stop = bounds
        if step is None:
            return cls(start, stop, kind=kind)
        return cls(start, stop, step, kind=kind)

    def _initialize(
        self, start: int, stop: int, step: int | None, kind: IntegralKind | None
    ) -> None:
        if kind is None:
            kind = self.DEFAULT_KIND
        if not isinstance(kind, IntegralKind):
            raise TypeError(f"kind must be an IntegralKind, got {kind!r}")

        for name, value in (("start", start), ("stop", stop)):
            if not kind.contains(value):
                raise KindBoundsError(name, value, kind)

        if step is None:
            step = (start < stop) - (start > stop)

        self._kind = kind
        self._start = start
        self._stop = stop

        if start == stop:
            if step != 0:
                logger.debug(f"Empty range at {start}: ignoring step {step}")
            self._step = 0
            self._size = 0
            self._length = 0
            return

        # Direction check precedes all size/length arithmetic
        if (start < stop and step <= 0) or (start > stop and step >= 0):
            raise InvalidStepDirectionError(start, stop, step)

        self._step = step
        self._size = abs(stop - start)
        self._length = _ceil_div(self._size, abs(step))
        logger.debug(f"Built {self!r} with length {self._length}")

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def step(self) -> int:
        return self._step

    @property
    def kind(self) -> IntegralKind:
        return self._kind

    def size(self) -> int:
        """Return the distance between start and stop."""
        return self._size

    def length(self) -> int:
        """Return the number of values the range produces."""
        return self._length

    def begin(self) -> RangeIterator:
        """Return a cursor positioned at start."""
        return RangeIterator(self._start, self._step, self._stop)

    def end(self) -> RangeIterator:
        """Return the exhausted sentinel cursor positioned at stop."""
        return RangeIterator(self._stop, self._step, self._stop)

    def window(
        self, start: int | None = None, end: int | None = None
    ) -> "IntegralRange":
        """
        Return the values of this range that fall inside a window.

        The window is read in the step direction: for a descending range,
        start is the upper bound (inclusive) and end the lower one (exclusive).

        Args:
            start: Window start (inclusive). If None, no lower limit on position.
            end: Window end (exclusive). If None, no upper limit on position.

        Returns:
            A new range with the same step and kind covering the window.
        """
        if self._length == 0:
            return self

        direction = 1 if self._step > 0 else -1
        magnitude = abs(self._step)

        first = 0
        if start is not None:
            offset = direction * (operator.index(start) - self._start)
            first = max(0, _ceil_div(offset, magnitude))

        count = self._length
        if end is not None:
            offset = direction * (operator.index(end) - self._start)
            count = min(self._length, max(0, _ceil_div(offset, magnitude)))

        if first >= count:
            return IntegralRange(self._stop, self._stop, kind=self._kind)

        new_start = self._start + first * self._step
        if count == self._length:
            new_stop = self._stop
        else:
            new_stop = self._start + count * self._step
        return IntegralRange(new_start, new_stop, self._step, kind=self._kind)

    def __iter__(self) -> Iterator[int]:
        return self.begin()

    def iterator(
        self, start: int | None = None, end: int | None = None
    ) -> Iterator[int]:
        return self.window(start, end).begin()

    def __aiter__(self) -> AsyncIterator[int]:
        return self.begin()

    def async_iterator(
        self, start: int | None = None, end: int | None = None
    ) -> AsyncIterator[int]:
        return self.window(start, end).begin()

    def __len__(self) -> int:
        return self._length

    def __contains__(self, value: object) -> bool:
        if self._length == 0:
            return False
        try:
            value = operator.index(value)
        except TypeError:
            return False

        offset = value - self._start
        if self._step > 0:
            within = 0 <= offset < self._size
        else:
            within = -self._size < offset <= 0
        return within and offset % self._step == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegralRange):
            return NotImplemented
        return (self._start, self._stop, self._step) == (
            other._start,
            other._stop,
            other._step,
        )

    def __hash__(self) -> int:
        return hash((self._start, self._stop, self._step))

    def __copy__(self) -> "IntegralRange":
        return IntegralRange(self._start, self._stop, self._step, kind=self._kind)

    def __deepcopy__(self, memo: dict) -> "IntegralRange":
        return self.__copy__()

    def __repr__(self) -> str:
        if self._kind is IntegralKind.UNBOUNDED:
            return f"IntegralRange({self._start}, {self._stop}, {self._step})"
        return (
            f"IntegralRange({self._start}, {self._stop}, {self._step}, "
            f"kind=IntegralKind.{self._kind.name})"
        )
