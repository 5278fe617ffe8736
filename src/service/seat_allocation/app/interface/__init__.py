"""Seat Allocation Application Interfaces"""

from src.service.seat_allocation.app.interface.i_availability_index import IAvailabilityIndex
from src.service.seat_allocation.app.interface.i_growth_state_store import IGrowthStateStore

__all__ = ['IAvailabilityIndex', 'IGrowthStateStore']
