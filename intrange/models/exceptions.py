"""
Custom exceptions for integral ranges.
"""

from intrange.models.integral_kind import IntegralKind


class InvalidStepDirectionError(ValueError):
    """
    Raised when a non-zero step points away from the stop value.

    This is a fail-fast error raised at construction time, never during
    iteration.
    """

    def __init__(self, start: int, stop: int, step: int):
        """
        Initialize step direction error.

        Args:
            start: Requested start value.
            stop: Requested stop value.
            step: Requested step whose sign disagrees with stop - start.
        """
        self.start = start
        self.stop = stop
        self.step = step
        direction = "positive" if start < stop else "negative"
        relation = "<" if start < stop else ">"
        super().__init__(
            f"The step must be {direction} when start {relation} stop: "
            f"start={start}, stop={stop}, step={step}"
        )


class KindBoundsError(OverflowError):
    """Raised when a range bound does not fit the requested integral kind."""

    def __init__(self, name: str, value: int, kind: IntegralKind) -> None:
        """
        Initialize bounds error.

        Args:
            name: Which bound was rejected ("start" or "stop").
            value: The rejected value.
            kind: The integral kind the value does not fit.
        """
        self.name = name
        self.value = value
        self.kind = kind
        super().__init__(
            f"{name}={value} is outside {kind.name} bounds "
            f"[{kind.min_value}, {kind.max_value}]"
        )
