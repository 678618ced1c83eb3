"""SeatFinder — loads a seat file and finds the missing seat id."""

from pathlib import Path

from seat_finder.seat.domain.analysis import SeatAnalysis, analyze_seats
from seat_finder.seat.domain.errors import AnalysisError
from seat_finder.seat.domain.loader import SeatLoader
from seat_finder.seat.domain.observer import SeatObserver


class SeatFinder:
    """Runs the load → decode → analyze pipeline for one seat file."""

    def __init__(self, loader: SeatLoader, observer: SeatObserver) -> None:
        self._loader = loader
        self._observer = observer

    def find(self, path: Path) -> SeatAnalysis:
        """
        Load the seats at path and return their lowest, highest and missing id.

        Raises:
            SeatFileError: if the file cannot be read.
            DecodeError: if any line holds an invalid seat code.
            AnalysisError: if the file holds no seats or the ids have no gap.
        """
        seats = self._loader.load(path=path)

        try:
            analysis = analyze_seats(seats=seats)
        except AnalysisError as exc:
            self._observer.analysis_failed(reason=exc.reason)
            raise

        self._observer.analysis_completed(
            lowest=analysis.lowest,
            highest=analysis.highest,
            missing=analysis.missing,
            total_seats=len(seats),
        )
        return analysis
