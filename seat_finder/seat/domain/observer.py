"""Observer port for the seat domain — defines events in domain language."""

from typing import Protocol


class SeatObserver(Protocol):
    """Observer port emitting structured events while seats are loaded and analyzed.

    Implementations may log to structlog or record for tests.
    """

    def seats_loading_started(self, path: str) -> None: ...

    def seat_decoded(self, line_number: int, code: str, seat_id: int) -> None: ...

    def seats_loading_completed(self, path: str, total_seats: int) -> None: ...

    def seats_loading_failed(self, path: str, reason: str) -> None: ...

    def analysis_completed(
        self, lowest: int, highest: int, missing: int, total_seats: int
    ) -> None: ...

    def analysis_failed(self, reason: str) -> None: ...
