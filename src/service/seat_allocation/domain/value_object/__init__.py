"""Seat Allocation Value Objects"""

from src.service.seat_allocation.domain.value_object.candidate_block import CandidateBlock
from src.service.seat_allocation.domain.value_object.seat_id import SeatId
from src.service.seat_allocation.domain.value_object.seat_slot import Gap, Seat, SeatSlot
from src.service.seat_allocation.domain.value_object.session_key import SessionKey

__all__ = ['CandidateBlock', 'Gap', 'Seat', 'SeatId', 'SeatSlot', 'SessionKey']
