"""Error types raised by the seat domain."""

from seat_finder.core.errors import SeatFinderError


class DecodeError(SeatFinderError):
    """Raised when a seat code contains an illegal character or decodes out of range."""

    def __init__(self, code: str, reason: str, line_number: int | None = None) -> None:
        self.code = code
        self.reason = reason
        self.line_number = line_number
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Failed to decode seat code {code!r}{location}: {reason}")


class AnalysisError(SeatFinderError):
    """Raised when a seat collection has no lowest/highest id or no missing id."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to analyze seats: {reason}")
