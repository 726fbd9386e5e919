"""
RangeIterator - forward-only cursor over an integral range.
"""

from intrange.models.exceptions import InvalidStepDirectionError


class RangeIterator:
    """
    Read-only cursor that advances by a fixed step until it reaches stop.

    The cursor owns copies of its position, step and stop, so it never
    refers back to the range it was created from. A move that would reach
    or cross stop lands exactly on stop, which is the exhausted state and
    compares equal to the range's end() sentinel.

    Works both as a sync iterator (post-increment on __next__) and as an
    async iterator.
    """

    __slots__ = ("_current", "_step", "_stop")

    def __init__(self, current: int, step: int, stop: int) -> None:
        """
        Initialize cursor.

        Args:
            current: Starting position.
            step: Signed increment applied on each advance.
            stop: Exclusive bound; the position never moves past it.

        Raises:
            InvalidStepDirectionError: If current differs from stop and step
                does not point towards stop.
        """
        if (current < stop and step <= 0) or (current > stop and step >= 0):
            raise InvalidStepDirectionError(current, stop, step)

        self._current = current
        self._step = step
        self._stop = stop

    @property
    def value(self) -> int:
        return self._current

    @property
    def step(self) -> int:
        return self._step

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def exhausted(self) -> bool:
        return self._current == self._stop

    def advance(self) -> "RangeIterator":
        """
        Move the cursor forward by one step.

        Returns:
            This cursor, at its new position.
        """
        if self._current == self._stop:
            return self

        following = self._current + self._step
        if (self._step > 0 and following >= self._stop) or (
            self._step < 0 and following <= self._stop
        ):
            following = self._stop
        self._current = following
        return self

    def copy(self) -> "RangeIterator":
        return RangeIterator(self._current, self._step, self._stop)

    __copy__ = copy

    def __iter__(self) -> "RangeIterator":
        return self

    def __next__(self) -> int:
        """
        Return the current value and advance.

        Raises:
            StopIteration: When the cursor is exhausted.
        """
        if self._current == self._stop:
            raise StopIteration

        value = self._current
        self.advance()
        return value

    def __aiter__(self) -> "RangeIterator":
        return self

    async def __anext__(self) -> int:
        if self._current == self._stop:
            raise StopAsyncIteration

        value = self._current
        self.advance()
        return value

    def __eq__(self, other: object) -> bool:
        # Position only: cursors from the same range share step and stop.
        if not isinstance(other, RangeIterator):
            return NotImplemented
        return self._current == other._current

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"RangeIterator(value={self._current}, "
            f"step={self._step}, stop={self._stop})"
        )
