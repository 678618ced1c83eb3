"""Seat code decoder — turns a binary-partitioned seat code into a Seat."""

from seat_finder.config.domain.seat_code import DEFAULT_SEAT_CODE_FORMAT, SeatCodeFormat
from seat_finder.seat.domain.errors import DecodeError
from seat_finder.seat.domain.seat import Seat


def to_id(code: str, fmt: SeatCodeFormat = DEFAULT_SEAT_CODE_FORMAT) -> int:
    """
    Compute the seat id encoded by code.

    Position ``i`` carries the bit weight ``2 ** (total_bits - 1 - i)``. Lower-half
    characters leave the bit unset, upper-half characters set it.

    Raises:
        DecodeError: on the first illegal character, or if code is empty or
            has more positions than the format allows.
    """
    if not code:
        raise DecodeError(code=code, reason="no positions to decode")
    if len(code) > fmt.total_bits:
        raise DecodeError(
            code=code,
            reason=f"too many positions ({len(code)} > {fmt.total_bits})",
        )

    seat_id = 0
    for position, character in enumerate(code):
        mask = 1 << (fmt.total_bits - 1 - position)
        if character in fmt.upper_half:
            seat_id |= mask
        elif character not in fmt.lower_half:
            raise DecodeError(code=code, reason=f"{character} is an illegal character")
    return seat_id


def decode_seat(code: str, fmt: SeatCodeFormat = DEFAULT_SEAT_CODE_FORMAT) -> Seat:
    """
    Decode code into a Seat carrying its id, row, column and the code itself.

    Raises:
        DecodeError: if code contains an illegal character, has too many
            positions, or decodes to an id above the format's maximum.
    """
    seat_id = to_id(code=code, fmt=fmt)
    if seat_id > fmt.max_id:
        raise DecodeError(code=code, reason=f"id {seat_id} is too high")

    return Seat(
        id=seat_id,
        code=code,
        row=seat_id >> fmt.column_bits,
        column=seat_id & fmt.column_mask,
    )
