"""Candidate Block Value Object"""

import attrs

from src.service.seat_allocation.domain.value_object.seat_id import SeatId


@attrs.define(frozen=True)
class CandidateBlock:
    """
    Run of seats within one row, contiguous by physical slot index.

    ``numbers`` are kept in physical (left to right) order.
    """

    row_id: str
    numbers: tuple[int, ...]

    @property
    def start(self) -> int:
        return self.numbers[0]

    @property
    def end(self) -> int:
        return self.numbers[-1]

    @property
    def size(self) -> int:
        return len(self.numbers)

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2

    @property
    def seat_ids(self) -> tuple[SeatId, ...]:
        return tuple(SeatId(row_id=self.row_id, number=n) for n in self.numbers)
