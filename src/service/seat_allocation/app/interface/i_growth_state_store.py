"""
Growth State Store Interface

Registry of the selection shape of every open (date, show, class) session on
one booking terminal.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.seat_allocation.domain.enum import ShowTime
from src.service.seat_allocation.domain.growth_state import GrowthState
from src.service.seat_allocation.domain.value_object import SessionKey


class IGrowthStateStore(ABC):
    @abstractmethod
    def get_or_create(self, session: SessionKey) -> GrowthState:
        """State of a session, creating an empty one on first use"""
        pass

    @abstractmethod
    def get(self, session: SessionKey) -> Optional[GrowthState]:
        pass

    @abstractmethod
    def commit(self, session: SessionKey) -> list[str]:
        """
        Discard the state of a session whose seats went to booking

        Returns:
            Seat ids that were selected, empty if the session was unknown
        """
        pass

    @abstractmethod
    def reset_show(self, show_date: str, show_time: ShowTime | str) -> int:
        """
        Discard every class session of a (date, show)

        Returns:
            Number of sessions discarded
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
