"""
Snapshot Availability Index

In-memory availability index over one snapshot of seat statuses for the
active (date, show). Seats missing from the snapshot are AVAILABLE, matching
the server sync that only reports booked, BMS and blocked seats.
"""

from typing import Iterable, List, Mapping, Optional

from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.interface import IAvailabilityIndex
from src.service.seat_allocation.domain.enum import SeatStatus
from src.service.seat_allocation.domain.seating_chart import SeatingChart
from src.service.seat_allocation.domain.value_object import SeatId


class SnapshotAvailabilityIndex(IAvailabilityIndex):
    """
    Availability index backed by a status snapshot

    Responsibility: Answer status queries; never writes seat state
    """

    def __init__(
        self,
        chart: SeatingChart,
        statuses: Optional[Mapping[SeatId | str, SeatStatus | str]] = None,
    ) -> None:
        self.chart = chart
        self._statuses: dict[SeatId, SeatStatus] = {}

        for key, status in (statuses or {}).items():
            seat = key if isinstance(key, SeatId) else SeatId.from_seat_id(key)
            if not chart.contains(seat):
                Logger.base.warning(f'⚠️ [AVAILABILITY] Ignoring status for unknown seat {seat}')
                continue
            status = SeatStatus(status)
            if status is not SeatStatus.AVAILABLE:
                self._statuses[seat] = status

    @classmethod
    def from_seat_lists(
        cls,
        chart: SeatingChart,
        *,
        booked: Iterable[str] = (),
        bms_booked: Iterable[str] = (),
        blocked: Iterable[str] = (),
        selected: Iterable[str] = (),
    ) -> 'SnapshotAvailabilityIndex':
        """Build from the seat id lists delivered by the booking store sync"""
        statuses: dict[SeatId | str, SeatStatus | str] = {}
        for status, seat_ids in (
            (SeatStatus.SELECTED, selected),
            (SeatStatus.BLOCKED, blocked),
            (SeatStatus.BMS_BOOKED, bms_booked),
            (SeatStatus.BOOKED, booked),
        ):
            # Later lists win: a seat sold since it was selected reads as sold
            for seat_id in seat_ids:
                statuses[seat_id] = status
        return cls(chart, statuses)

    def status_of(self, seat: SeatId) -> Optional[SeatStatus]:
        if not self.chart.contains(seat):
            return None
        return self._statuses.get(seat, SeatStatus.AVAILABLE)

    def is_available(self, row_id: str, seat_number: int) -> bool:
        return self.status_of(SeatId(row_id=row_id, number=seat_number)) is SeatStatus.AVAILABLE

    def available_seats(self, row_id: str) -> List[SeatId]:
        row = self.chart.get_row(row_id)
        if row is None:
            return []
        return [
            SeatId(row_id=row_id, number=number)
            for number in row.seat_numbers
            if self.is_available(row_id, number)
        ]

    def occupied_neighbors(self, row_id: str, seat_number: int) -> List[SeatId]:
        row = self.chart.get_row(row_id)
        index = row.slot_index(seat_number) if row else None
        if row is None or index is None:
            return []

        neighbors = []
        for neighbor_index in (index - 1, index + 1):
            number = row.seat_at(neighbor_index)
            if number is None:
                continue
            seat = SeatId(row_id=row_id, number=number)
            status = self.status_of(seat)
            if status is not None and status.is_occupied:
                neighbors.append(seat)
        return neighbors

    def releasing(self, seats: Iterable[SeatId]) -> 'SnapshotAvailabilityIndex':
        released = set(seats)
        return SnapshotAvailabilityIndex(
            self.chart,
            {seat: status for seat, status in self._statuses.items() if seat not in released},
        )
