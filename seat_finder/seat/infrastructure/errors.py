"""Error types raised by seat infrastructure."""

from seat_finder.core.errors import SeatFinderError


class SeatFileError(SeatFinderError):
    """Raised when the seat file cannot be opened or one of its lines cannot be read."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to read seat file: {reason}")
