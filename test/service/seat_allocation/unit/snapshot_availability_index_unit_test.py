"""
Unit tests for SnapshotAvailabilityIndex
"""

from collections.abc import Callable

import pytest

from src.service.seat_allocation.domain.allocation_error import InvalidRequestError
from src.service.seat_allocation.domain.enum import SeatStatus
from src.service.seat_allocation.domain.seating_chart import SeatingChart
from src.service.seat_allocation.domain.value_object import SeatId
from src.service.seat_allocation.driven_adapter.snapshot_availability_index import (
    SnapshotAvailabilityIndex,
)


class TestStatusQueries:
    @pytest.mark.unit
    def test_missing_seats_read_as_available(self, theater_chart: SeatingChart) -> None:
        index = SnapshotAvailabilityIndex(theater_chart)
        assert index.status_of(SeatId(row_id='SC-A', number=1)) is SeatStatus.AVAILABLE
        assert index.is_available('SC-A', 1)

    @pytest.mark.unit
    def test_unknown_seat_has_no_status(self, theater_chart: SeatingChart) -> None:
        index = SnapshotAvailabilityIndex(theater_chart)
        assert index.status_of(SeatId(row_id='SC-A', number=99)) is None
        assert not index.is_available('SC-A', 99)

    @pytest.mark.unit
    def test_string_keys_and_values(self, theater_chart: SeatingChart) -> None:
        index = SnapshotAvailabilityIndex(theater_chart, {'SC-A5': 'bms-booked', 'SC-A6': 'blocked'})
        assert index.status_of(SeatId(row_id='SC-A', number=5)) is SeatStatus.BMS_BOOKED
        assert index.status_of(SeatId(row_id='SC-A', number=6)) is SeatStatus.BLOCKED

    @pytest.mark.unit
    def test_seats_outside_chart_are_ignored(self, theater_chart: SeatingChart) -> None:
        index = SnapshotAvailabilityIndex(theater_chart, {'ZZ-A1': SeatStatus.BOOKED})
        assert index.status_of(SeatId(row_id='ZZ-A', number=1)) is None

    @pytest.mark.unit
    def test_malformed_seat_id_rejected(self, theater_chart: SeatingChart) -> None:
        with pytest.raises(InvalidRequestError):
            SnapshotAvailabilityIndex(theater_chart, {'SC-A': SeatStatus.BOOKED})

    @pytest.mark.unit
    def test_available_seats_in_physical_order(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(theater_chart, booked=['BOX-A2'], blocked=['BOX-A5'], selected=['BOX-A7'])
        assert [seat.number for seat in index.available_seats('BOX-A')] == [1, 3, 4, 6]
        assert index.available_seats('NOPE') == []


class TestFromSeatLists:
    @pytest.mark.unit
    def test_booked_wins_over_selected(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        """A seat sold on another terminal after it was selected here reads as sold"""
        index = snapshot(theater_chart, selected=['SC-A3'], booked=['SC-A3'])
        assert index.status_of(SeatId(row_id='SC-A', number=3)) is SeatStatus.BOOKED


class TestOccupiedNeighbors:
    @pytest.mark.unit
    def test_booked_and_bms_neighbors(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(theater_chart, booked=['SC-A9'], bms_booked=['SC-A11'])
        assert index.occupied_neighbors('SC-A', 10) == [
            SeatId(row_id='SC-A', number=9),
            SeatId(row_id='SC-A', number=11),
        ]

    @pytest.mark.unit
    def test_blocked_and_selected_are_not_occupied(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(theater_chart, blocked=['SC-A9'], selected=['SC-A11'])
        assert index.occupied_neighbors('SC-A', 10) == []

    @pytest.mark.unit
    def test_aisle_is_not_a_neighbor(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        """Seat 19 sits across the aisle from 18"""
        index = snapshot(theater_chart, booked=['SC-A19'])
        assert index.occupied_neighbors('SC-A', 18) == []


class TestReleasing:
    @pytest.mark.unit
    def test_released_seats_read_as_available(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(theater_chart, selected=['SC-A12', 'SC-A13'], booked=['SC-A14'])
        released = index.releasing([SeatId(row_id='SC-A', number=12), SeatId(row_id='SC-A', number=13)])

        assert released.is_available('SC-A', 12)
        assert released.is_available('SC-A', 13)
        assert not released.is_available('SC-A', 14)
        # Original snapshot untouched
        assert not index.is_available('SC-A', 12)
