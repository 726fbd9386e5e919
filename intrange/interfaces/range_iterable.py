"""
RangeIterable protocol for sequences that support bounded iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator


class RangeIterable(ABC):
    """
    Protocol for restartable integer sequences.

    Implementations must support:
    - Full iteration via __iter__ (a fresh iterator on every call)
    - Window-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async window-bounded iteration via async_iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        """Return an iterator over all values, starting from the first."""
        pass

    @abstractmethod
    def iterator(
        self, start: int | None = None, end: int | None = None
    ) -> Iterator[int]:
        """
        Return an iterator over the values inside a window.

        Args:
            start: Window start (inclusive). If None, starts from the first value.
            end: Window end (exclusive). If None, iterates to the last value.

        Returns:
            Iterator yielding values in sequence order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[int]:
        """Return an async iterator over all values."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: int | None = None, end: int | None = None
    ) -> AsyncIterator[int]:
        """
        Return an async iterator over the values inside a window.

        Args:
            start: Window start (inclusive). If None, starts from the first value.
            end: Window end (exclusive). If None, iterates to the last value.

        Returns:
            AsyncIterator yielding values in sequence order.
        """
        pass
