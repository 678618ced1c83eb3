"""SeatLoader Protocol — structural interface for loading decoded seats."""

from pathlib import Path
from typing import Protocol

from seat_finder.seat.domain.seat import Seat


class SeatLoader(Protocol):
    """Loads the list of Seat objects stored at a path."""

    def load(self, path: Path) -> list[Seat]: ...
