"""Seat domain value object — one decoded seat and the code it came from."""

from pydantic import BaseModel, Field


class Seat(BaseModel, frozen=True):
    """Immutable value object pairing a seat id with its originating code.

    Seats order by ``id`` alone; the code is carried for traceability only.
    """

    id: int = Field(ge=0)
    code: str = Field(min_length=1)
    row: int = Field(ge=0)
    column: int = Field(ge=0)

    def __lt__(self, other: "Seat") -> bool:
        return self.id < other.id
