"""Domain errors raised by the wheel core."""


class WheelError(Exception):
    """Base class for wheel domain errors."""


class EmptyWheelError(WheelError):
    """Raised when resolving a winner on a wheel without segments."""

    def __init__(self) -> None:
        super().__init__("No segments available")


class NotEnoughSegmentsError(WheelError):
    """Raised when a spin is requested with too few segments."""

    def __init__(self, count: int, minimum: int) -> None:
        super().__init__(
            f"You need at least {minimum} segments to spin the wheel (have {count})"
        )
        self.count = count
        self.minimum = minimum


class SegmentLimitError(WheelError):
    """Raised when adding or removing would break the segment bounds."""


class InvalidSessionUpdateError(WheelError):
    """Raised for unknown session fields or a decreasing spin count."""
