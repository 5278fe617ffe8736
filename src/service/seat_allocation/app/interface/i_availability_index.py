"""
Availability Index Interface

Read-only query surface over the seat statuses of the active (date, show).
The allocation engine never writes seat status; booking commits happen in the
external booking path.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from src.service.seat_allocation.domain.enum import SeatStatus
from src.service.seat_allocation.domain.value_object import SeatId


class IAvailabilityIndex(ABC):
    @abstractmethod
    def available_seats(self, row_id: str) -> List[SeatId]:
        """
        AVAILABLE seats of a row

        Args:
            row_id: Row ID

        Returns:
            Seats in physical (slot index) order, empty for an unknown row
        """
        pass

    @abstractmethod
    def status_of(self, seat: SeatId) -> Optional[SeatStatus]:
        """Status of one seat, None if the seat is not on the chart"""
        pass

    @abstractmethod
    def occupied_neighbors(self, row_id: str, seat_number: int) -> List[SeatId]:
        """BOOKED/BMS_BOOKED seats immediately left or right of a seat by slot index"""
        pass

    @abstractmethod
    def is_available(self, row_id: str, seat_number: int) -> bool:
        pass

    @abstractmethod
    def releasing(self, seats: Iterable[SeatId]) -> 'IAvailabilityIndex':
        """
        View of the same snapshot where the given seats read as AVAILABLE

        Used when the caller's own selection is being replaced, so its seats
        are candidates again.
        """
        pass
