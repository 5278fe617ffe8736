"""Allocation DTOs for the seat allocation use case."""

from enum import StrEnum
from typing import Optional

import attrs

from src.service.seat_allocation.domain.enum import AllocationPhase
from src.service.seat_allocation.domain.value_object import SeatId


class RequestKind(StrEnum):
    FRESH = 'fresh'  # Class click with nothing selected
    INCREMENTAL = 'incremental'  # "+" stepper: one seat more than the current selection
    SHRINK = 'shrink'  # "-" stepper: one seat less
    REPLACE = 'replace'  # New count for an existing selection, searched from scratch


@attrs.define(frozen=True)
class AllocationRequest:
    """Seat allocation request"""

    class_key: str
    count: int
    existing_selection: tuple[SeatId, ...] = attrs.field(default=(), converter=tuple)
    anchor_row: Optional[str] = None  # Row to try first for fresh searches

    @property
    def kind(self) -> RequestKind:
        if not self.existing_selection:
            return RequestKind.FRESH
        current = len(self.existing_selection)
        if self.count == current + 1:
            return RequestKind.INCREMENTAL
        if self.count == current - 1:
            return RequestKind.SHRINK
        return RequestKind.REPLACE


@attrs.define(frozen=True)
class AllocationResult:
    """Seat allocation result, with the delta against the previous selection"""

    class_key: str
    seats: tuple[SeatId, ...]
    phase: AllocationPhase
    added: tuple[SeatId, ...] = ()
    removed: tuple[SeatId, ...] = ()

    @property
    def count(self) -> int:
        return len(self.seats)

    @property
    def seat_ids(self) -> list[str]:
        return [seat.seat_id for seat in self.seats]

    @property
    def row_ids(self) -> list[str]:
        return list(dict.fromkeys(seat.row_id for seat in self.seats))
