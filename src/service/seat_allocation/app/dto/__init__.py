"""Seat Allocation Application DTOs"""

from src.service.seat_allocation.app.dto.allocation_dto import (
    AllocationRequest,
    AllocationResult,
    RequestKind,
)

__all__ = ['AllocationRequest', 'AllocationResult', 'RequestKind']
