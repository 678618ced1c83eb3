"""Base exception class for all seat-finder-specific errors."""


class SeatFinderError(Exception):
    """Base class for all seat-finder errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
