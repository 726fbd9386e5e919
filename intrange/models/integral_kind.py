"""
IntegralKind - integer widths a range can be constrained to.
"""

from enum import Enum


class IntegralKind(Enum):
    """
    Width and signedness of the integers a range holds.

    Python integers never overflow, so UNBOUNDED places no limit on the
    bounds. The fixed-width members reject start/stop values that the
    matching machine integer could not represent.
    """

    INT8 = (8, True)
    INT16 = (16, True)
    INT32 = (32, True)
    INT64 = (64, True)
    UINT8 = (8, False)
    UINT16 = (16, False)
    UINT32 = (32, False)
    UINT64 = (64, False)
    UNBOUNDED = (0, True)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    @property
    def min_value(self) -> int | None:
        if self.bits == 0:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int | None:
        if self.bits == 0:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """
        Check whether a value is representable by this kind.

        Args:
            value: The integer to check.

        Returns:
            True if the value lies within [min_value, max_value].
        """
        if self.bits == 0:
            return True
        return self.min_value <= value <= self.max_value
