"""
Unit tests for GrowthState
"""

import pytest

from src.service.seat_allocation.domain.allocation_error import InvalidRequestError
from src.service.seat_allocation.domain.enum import GrowthSide, ShowTime
from src.service.seat_allocation.domain.growth_state import GrowthState
from src.service.seat_allocation.domain.value_object import SeatId, SessionKey


def _seat(seat_id: str) -> SeatId:
    return SeatId.from_seat_id(seat_id)


@pytest.fixture
def state() -> GrowthState:
    state = GrowthState(session=SessionKey(show_date='2026-10-17', show_time='NIGHT', class_key='MAIN'))
    state.replace([_seat('M-A10'), _seat('M-A11')])
    return state


class TestGrow:
    @pytest.mark.unit
    def test_left_and_right_keep_physical_order(self, state: GrowthState) -> None:
        state.grow(_seat('M-A9'), GrowthSide.LEFT)
        state.grow(_seat('M-A12'), GrowthSide.RIGHT)

        assert [str(seat) for seat in state.seats] == ['M-A9', 'M-A10', 'M-A11', 'M-A12']
        assert state.last_side is GrowthSide.RIGHT

    @pytest.mark.unit
    def test_vertical_growth_opens_new_segment(self, state: GrowthState) -> None:
        state.grow(_seat('M-B10'), GrowthSide.VERTICAL)

        assert state.row_ids == ['M-A', 'M-B']
        assert state.active_row_id == 'M-B'
        assert state.active_segment() == [_seat('M-B10')]

    @pytest.mark.unit
    def test_seat_already_selected(self, state: GrowthState) -> None:
        with pytest.raises(InvalidRequestError):
            state.grow(_seat('M-A10'), GrowthSide.LEFT)


class TestShrink:
    @pytest.mark.unit
    def test_after_right_growth_drops_left_edge(self, state: GrowthState) -> None:
        state.grow(_seat('M-A12'), GrowthSide.RIGHT)
        assert state.shrink() == [_seat('M-A10')]
        assert state.seats == [_seat('M-A11'), _seat('M-A12')]

    @pytest.mark.unit
    def test_emptying_row_moves_back_to_previous_row(self, state: GrowthState) -> None:
        state.grow(_seat('M-B10'), GrowthSide.VERTICAL)

        assert state.shrink() == [_seat('M-B10')]
        assert state.active_row_id == 'M-A'

    @pytest.mark.unit
    def test_shrink_to_empty(self, state: GrowthState) -> None:
        state.grow(_seat('M-A12'), GrowthSide.RIGHT)
        state.shrink(by=3)

        assert state.is_empty
        assert state.last_side is None
        assert state.active_row_id is None

    @pytest.mark.unit
    @pytest.mark.parametrize('by', [0, 3])
    def test_invalid_steps(self, state: GrowthState, by: int) -> None:
        with pytest.raises(InvalidRequestError):
            state.shrink(by=by)


class TestReset:
    @pytest.mark.unit
    def test_replace_forgets_growth_side(self, state: GrowthState) -> None:
        state.grow(_seat('M-A12'), GrowthSide.RIGHT)
        state.replace([_seat('M-C5')])

        assert state.seats == [_seat('M-C5')]
        assert state.last_side is None
        assert state.active_row_id == 'M-C'

    @pytest.mark.unit
    def test_clear_keeps_bias(self, state: GrowthState) -> None:
        state.flip_bias()
        state.clear()

        assert state.is_empty
        assert state.prefer_left is False
        assert state.session.show_time is ShowTime.NIGHT
