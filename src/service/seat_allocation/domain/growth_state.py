"""
Growth State

The current selection shape ("carrot") of one (date, show, class) session plus
the left/right alternation flag used to break exact center ties.

Seats are kept segment by segment: each row's seats in physical order, rows in
the order they joined the shape. The record never searches the chart; the
allocation use case decides which seat to add and hands it over.
"""

from typing import Iterable, Optional

import attrs

from src.service.seat_allocation.domain.allocation_error import InvalidRequestError
from src.service.seat_allocation.domain.enum import GrowthSide
from src.service.seat_allocation.domain.value_object import SeatId, SessionKey


@attrs.define
class GrowthState:
    session: SessionKey
    seats: list[SeatId] = attrs.Factory(list)
    prefer_left: bool = True  # Alternation flag for exact left/right ties
    last_side: Optional[GrowthSide] = None
    active_row_id: Optional[str] = None

    @property
    def class_key(self) -> str:
        return self.session.class_key

    @property
    def size(self) -> int:
        return len(self.seats)

    @property
    def is_empty(self) -> bool:
        return not self.seats

    @property
    def row_ids(self) -> list[str]:
        """Rows of the shape in the order they joined it"""
        return list(dict.fromkeys(seat.row_id for seat in self.seats))

    def segment(self, row_id: str) -> list[SeatId]:
        return [seat for seat in self.seats if seat.row_id == row_id]

    def active_segment(self) -> list[SeatId]:
        if self.active_row_id is None:
            return []
        return self.segment(self.active_row_id)

    def flip_bias(self) -> None:
        self.prefer_left = not self.prefer_left

    def grow(self, seat: SeatId, side: GrowthSide) -> None:
        """Add exactly one seat at the given edge of its row's segment"""
        if seat in self.seats:
            raise InvalidRequestError(f'Seat {seat} is already part of the selection')

        segment = self.segment(seat.row_id)
        if not segment:
            self.seats.append(seat)
        elif side is GrowthSide.LEFT:
            self.seats.insert(self.seats.index(segment[0]), seat)
        else:
            self.seats.insert(self.seats.index(segment[-1]) + 1, seat)

        self.last_side = side
        self.active_row_id = seat.row_id

    def shrink(self, by: int = 1) -> list[SeatId]:
        """
        Remove ``by`` seats, one at a time, from the active row's segment.

        Each removal takes the edge farthest from the most recently grown side,
        so a grow followed by a shrink keeps the shape anchored where it grew.
        """
        if by < 1:
            raise InvalidRequestError('Shrink step must be positive')
        if by > self.size:
            raise InvalidRequestError(f'Cannot remove {by} seats from a selection of {self.size}')

        removed: list[SeatId] = []
        for _ in range(by):
            segment = self.active_segment() or self.segment(self.seats[-1].row_id)
            victim = segment[0] if self.last_side is GrowthSide.RIGHT else segment[-1]
            self.seats.remove(victim)
            removed.append(victim)

            if not self.segment(victim.row_id):
                self.active_row_id = self.seats[-1].row_id if self.seats else None
            else:
                self.active_row_id = victim.row_id

        if not self.seats:
            self.last_side = None
        return removed

    def replace(self, block: Iterable[SeatId]) -> None:
        self.seats = list(block)
        self.last_side = None
        self.active_row_id = self.seats[-1].row_id if self.seats else None

    def clear(self) -> None:
        self.replace(())
