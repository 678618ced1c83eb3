"""Seat set analysis — lowest, highest and missing seat id of a collection."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from seat_finder.seat.domain.errors import AnalysisError
from seat_finder.seat.domain.seat import Seat


class SeatAnalysis(BaseModel, frozen=True):
    """Immutable result of analyzing a seat collection."""

    lowest: int = Field(ge=0)
    highest: int = Field(ge=0)
    missing: int = Field(ge=0)


def analyze_seats(seats: Sequence[Seat]) -> SeatAnalysis:
    """
    Find the lowest id, the highest id and the single gap between them.

    Assumes ids are unique and exactly one id in [lowest, highest] is absent.
    Duplicate ids or several gaps give an unspecified (but non-crashing) result.

    Raises:
        AnalysisError: if seats is empty, or if the ids are contiguous.
    """
    if not seats:
        raise AnalysisError("no seats to analyze")

    ordered = sorted(seats)
    lowest = ordered[0].id
    highest = ordered[-1].id

    missing = next(
        (
            seat_id
            for seat_id in range(lowest, highest + 1)
            if ordered[seat_id - lowest].id != seat_id
        ),
        None,
    )
    if missing is None:
        raise AnalysisError(f"no missing seat id between {lowest} and {highest}")

    return SeatAnalysis(lowest=lowest, highest=highest, missing=missing)
