"""Error types raised by the command-line surface."""

from seat_finder.core.errors import SeatFinderError


class InputError(SeatFinderError):
    """Raised when the command line is missing a required argument."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to start: {reason}")
