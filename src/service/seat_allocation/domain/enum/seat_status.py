"""Seat Status Enum"""

from enum import StrEnum


class SeatStatus(StrEnum):
    AVAILABLE = 'available'
    SELECTED = 'selected'
    BOOKED = 'booked'
    BMS_BOOKED = 'bms-booked'
    BLOCKED = 'blocked'

    @property
    def is_occupied(self) -> bool:
        """Sold at the box office or through the online channel"""
        return self in (SeatStatus.BOOKED, SeatStatus.BMS_BOOKED)
