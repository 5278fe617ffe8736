"""Seat Allocation Enums"""

from src.service.seat_allocation.domain.enum.allocation_phase import AllocationPhase
from src.service.seat_allocation.domain.enum.growth_side import GrowthSide
from src.service.seat_allocation.domain.enum.seat_status import SeatStatus
from src.service.seat_allocation.domain.enum.show_time import ShowTime

__all__ = ['AllocationPhase', 'GrowthSide', 'SeatStatus', 'ShowTime']
