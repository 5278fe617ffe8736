"""
Growth State Store Implementation

Process-local dict of GrowthStates keyed by SessionKey. Switching date or show
resets every class session of the old show, so a stale shape can never be
grown against a different snapshot.
"""

from typing import Dict, Optional

from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.interface import IGrowthStateStore
from src.service.seat_allocation.domain.enum import ShowTime
from src.service.seat_allocation.domain.growth_state import GrowthState
from src.service.seat_allocation.domain.value_object import SessionKey


class InMemoryGrowthStateStore(IGrowthStateStore):
    def __init__(self) -> None:
        # SessionKey → GrowthState
        self._states: Dict[SessionKey, GrowthState] = {}

    def __len__(self) -> int:
        return len(self._states)

    def get_or_create(self, session: SessionKey) -> GrowthState:
        state = self._states.get(session)
        if state is None:
            state = GrowthState(session=session)
            self._states[session] = state
            Logger.base.debug(f'[GROWTH] New session {session.show_date}/{session.show_time}/{session.class_key}')
        return state

    def get(self, session: SessionKey) -> Optional[GrowthState]:
        return self._states.get(session)

    def commit(self, session: SessionKey) -> list[str]:
        state = self._states.pop(session, None)
        if state is None:
            return []
        seat_ids = [seat.seat_id for seat in state.seats]
        Logger.base.info(f'✅ [GROWTH] Committed {len(seat_ids)} seats in {session.class_key}')
        return seat_ids

    def reset_show(self, show_date: str, show_time: ShowTime | str) -> int:
        show_time = ShowTime(show_time)
        stale = [
            key
            for key in self._states
            if key.show_date == show_date and key.show_time is show_time
        ]
        for key in stale:
            del self._states[key]
        if stale:
            Logger.base.info(f'🔄 [GROWTH] Reset {len(stale)} sessions of {show_date} {show_time}')
        return len(stale)

    def clear(self) -> None:
        self._states.clear()
