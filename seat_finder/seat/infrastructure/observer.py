"""Structlog implementation of the SeatObserver port."""

import structlog


class StructlogSeatObserver:
    """Delegates seat domain events to structlog.

    Satisfies the SeatObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def seats_loading_started(self, path: str) -> None:
        self._log.info("seats.loading_started", path=path)

    def seat_decoded(self, line_number: int, code: str, seat_id: int) -> None:
        self._log.debug(
            "seats.seat_decoded", line_number=line_number, code=code, seat_id=seat_id
        )

    def seats_loading_completed(self, path: str, total_seats: int) -> None:
        self._log.info("seats.loading_completed", path=path, total_seats=total_seats)

    def seats_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("seats.loading_failed", path=path, reason=reason)

    def analysis_completed(
        self, lowest: int, highest: int, missing: int, total_seats: int
    ) -> None:
        self._log.info(
            "seats.analysis_completed",
            lowest=lowest,
            highest=highest,
            missing=missing,
            total_seats=total_seats,
        )

    def analysis_failed(self, reason: str) -> None:
        self._log.error("seats.analysis_failed", reason=reason)
