"""Seat file loader — reads a file of seat codes and returns decoded Seat objects."""

from collections.abc import Iterable
from pathlib import Path

from seat_finder.seat.domain.decoder import decode_seat
from seat_finder.seat.domain.errors import DecodeError
from seat_finder.seat.domain.observer import SeatObserver
from seat_finder.seat.domain.seat import Seat
from seat_finder.seat.infrastructure.errors import SeatFileError


class SeatFileLoader:
    """Loads a newline-delimited seat code file and returns a list of Seat value objects."""

    def __init__(self, observer: SeatObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> list[Seat]:
        """
        Decode every non-blank line of the file at path, in file order.

        Stops at the first line that fails; later lines are never decoded.

        Raises:
            SeatFileError: if the file cannot be opened or a line cannot be read.
            DecodeError: for the first line holding an invalid seat code,
                with its 1-based line number attached.
        """
        path_str = str(path)
        self._observer.seats_loading_started(path=path_str)

        try:
            fh = path.open("r", encoding="utf-8")
        except OSError as exc:
            reason = f"cannot open {path_str}: {exc.strerror or exc}"
            self._observer.seats_loading_failed(path=path_str, reason=reason)
            raise SeatFileError(reason=reason) from exc

        with fh:
            try:
                seats = self._decode_lines(lines=fh)
            except (OSError, UnicodeDecodeError) as exc:
                reason = f"bad line: {exc}"
                self._observer.seats_loading_failed(path=path_str, reason=reason)
                raise SeatFileError(reason=reason) from exc
            except DecodeError as exc:
                self._observer.seats_loading_failed(path=path_str, reason=str(exc))
                raise

        self._observer.seats_loading_completed(path=path_str, total_seats=len(seats))
        return seats

    def _decode_lines(self, lines: Iterable[str]) -> list[Seat]:
        """Decode lines one by one, skipping blank ones and aborting on the first error."""
        seats: list[Seat] = []
        for line_number, line in enumerate(lines, start=1):
            code = line.strip()
            if not code:
                continue
            seat = self._decode_line(code=code, line_number=line_number)
            seats.append(seat)
            self._observer.seat_decoded(
                line_number=line_number, code=seat.code, seat_id=seat.id
            )
        return seats

    def _decode_line(self, code: str, line_number: int) -> Seat:
        try:
            return decode_seat(code=code)
        except DecodeError as exc:
            raise DecodeError(
                code=exc.code, reason=exc.reason, line_number=line_number
            ) from exc
