"""
Conftest for seat allocation unit tests - charts and snapshots, all in memory.
"""

from collections.abc import Callable, Iterable
from typing import Any

import pytest

from src.service.seat_allocation.domain.enum import ShowTime
from src.service.seat_allocation.domain.growth_state import GrowthState
from src.service.seat_allocation.domain.seating_chart import SeatingChart
from src.service.seat_allocation.domain.value_object import SeatId, SessionKey
from src.service.seat_allocation.driven_adapter.layout.seating_layout_loader import (
    build_seating_chart,
    default_seating_chart,
)
from src.service.seat_allocation.driven_adapter.snapshot_availability_index import (
    SnapshotAvailabilityIndex,
)


SHOW_DATE = '2026-10-17'


def straight_layout(
    *, row_names: str = 'ABCD', seat_count: int = 20, base_row: str = 'D'
) -> dict[str, Any]:
    """Single class 'MAIN' of gapless rows M-A, M-B, ... numbered 1..seat_count"""
    return {
        'sections': [
            {
                'classKey': 'MAIN',
                'classLabel': 'MAIN HALL',
                'baseRow': base_row,
                'rows': [
                    {'id': f'M-{name}', 'name': name, 'seats': list(range(1, seat_count + 1))}
                    for name in row_names
                ],
            }
        ]
    }


@pytest.fixture(scope='session')
def theater_chart() -> SeatingChart:
    """Default five-class theater"""
    return default_seating_chart()


@pytest.fixture
def straight_chart() -> SeatingChart:
    return build_seating_chart(straight_layout())


@pytest.fixture
def snapshot() -> Callable[..., SnapshotAvailabilityIndex]:
    def _make(
        chart: SeatingChart,
        *,
        booked: Iterable[str] = (),
        bms_booked: Iterable[str] = (),
        blocked: Iterable[str] = (),
        selected: Iterable[str] = (),
    ) -> SnapshotAvailabilityIndex:
        return SnapshotAvailabilityIndex.from_seat_lists(
            chart, booked=booked, bms_booked=bms_booked, blocked=blocked, selected=selected
        )

    return _make


@pytest.fixture
def growth_state() -> Callable[..., GrowthState]:
    def _make(class_key: str, *selected: SeatId, prefer_left: bool = True) -> GrowthState:
        state = GrowthState(
            session=SessionKey(show_date=SHOW_DATE, show_time=ShowTime.EVENING, class_key=class_key),
            prefer_left=prefer_left,
        )
        if selected:
            state.replace(selected)
        return state

    return _make
