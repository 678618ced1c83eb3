"""Seat code format — the fixed constants of the binary seat encoding."""

from pydantic import BaseModel, Field


class SeatCodeFormat(BaseModel, frozen=True):
    """Immutable description of how a seat code maps onto a seat id.

    The first ``row_bits`` characters select the row and the last
    ``column_bits`` characters select the column. Characters in
    ``lower_half`` are 0 bits, characters in ``upper_half`` are 1 bits.
    """

    row_bits: int = Field(default=7, ge=1)
    column_bits: int = Field(default=3, ge=1)
    lower_half: frozenset[str] = frozenset({"F", "L"})
    upper_half: frozenset[str] = frozenset({"B", "R"})

    @property
    def total_bits(self) -> int:
        return self.row_bits + self.column_bits

    @property
    def max_id(self) -> int:
        return (1 << self.total_bits) - 1

    @property
    def column_mask(self) -> int:
        return (1 << self.column_bits) - 1


DEFAULT_SEAT_CODE_FORMAT = SeatCodeFormat()
