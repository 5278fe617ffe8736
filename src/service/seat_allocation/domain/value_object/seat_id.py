"""Seat Id Value Object"""

import re

import attrs

from src.service.seat_allocation.domain.allocation_error import InvalidRequestError


_SEAT_ID_PATTERN = re.compile(r'^(?P<row_id>.+?)(?P<number>\d+)$')


@attrs.define(frozen=True, order=True)
class SeatId:
    """Seat identity (Value Object): a row id plus the printed seat number"""

    row_id: str
    number: int

    @property
    def seat_id(self) -> str:
        """Seat identifier as stored by the booking terminal, e.g. ``CB-A12``"""
        return f'{self.row_id}{self.number}'

    def __str__(self) -> str:
        return self.seat_id

    @classmethod
    def from_seat_id(cls, seat_id: str) -> 'SeatId':
        """Create seat id from its string form"""
        match = _SEAT_ID_PATTERN.match(seat_id)
        if not match:
            raise InvalidRequestError(
                f'Invalid seat ID format: {seat_id}. Expected: <row id><seat number>'
            )
        return cls(row_id=match['row_id'], number=int(match['number']))
