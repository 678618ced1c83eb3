"""Tests verifying the SeatFinderError type hierarchy."""

from seat_finder.cli.errors import InputError
from seat_finder.core.errors import SeatFinderError
from seat_finder.seat.domain.errors import AnalysisError, DecodeError
from seat_finder.seat.infrastructure.errors import SeatFileError


class TestSeatFinderErrorHierarchy:
    """All seat-finder-specific exceptions inherit from SeatFinderError."""

    def test_input_error_is_seat_finder_error(self) -> None:
        error = InputError(reason="filename argument required")
        assert isinstance(error, SeatFinderError)

    def test_seat_file_error_is_seat_finder_error(self) -> None:
        error = SeatFileError(reason="cannot open seats.txt")
        assert isinstance(error, SeatFinderError)

    def test_decode_error_is_seat_finder_error(self) -> None:
        error = DecodeError(code="FBX", reason="X is an illegal character")
        assert isinstance(error, SeatFinderError)

    def test_analysis_error_is_seat_finder_error(self) -> None:
        error = AnalysisError(reason="no seats to analyze")
        assert isinstance(error, SeatFinderError)

    def test_seat_finder_error_is_exception(self) -> None:
        error = SeatFinderError("test")
        assert isinstance(error, Exception)


class TestMessages:
    """Messages start with 'Failed to ' and carry the reason."""

    def test_input_error_message(self) -> None:
        error = InputError(reason="filename argument required")
        assert str(error) == "Failed to start: filename argument required"

    def test_decode_error_includes_line_number(self) -> None:
        error = DecodeError(code="FBX", reason="X is an illegal character", line_number=7)
        assert str(error) == (
            "Failed to decode seat code 'FBX' on line 7: X is an illegal character"
        )

    def test_seat_file_error_message(self) -> None:
        error = SeatFileError(reason="bad line: boom")
        assert str(error) == "Failed to read seat file: bad line: boom"

    def test_analysis_error_message(self) -> None:
        error = AnalysisError(reason="no seats to analyze")
        assert str(error) == "Failed to analyze seats: no seats to analyze"
