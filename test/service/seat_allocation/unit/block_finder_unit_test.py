"""
Unit tests for BlockFinder

Contiguous runs by physical slot index, centered picks and the
adjacent-to-occupied fallback.
"""

from collections.abc import Callable

import pytest

from src.service.seat_allocation.domain.seating_chart import SeatingChart
from src.service.seat_allocation.driven_adapter.seat_allocation_helper.block_finder import (
    BlockFinder,
)
from src.service.seat_allocation.driven_adapter.snapshot_availability_index import (
    SnapshotAvailabilityIndex,
)


class TestFindContiguousBlocks:
    @pytest.mark.unit
    def test_never_spans_the_aisle(self, theater_chart: SeatingChart) -> None:
        """STAR CLASS 1-18 | 19-26: 18 and 19 are not adjacent"""
        finder = BlockFinder(theater_chart, SnapshotAvailabilityIndex(theater_chart))
        blocks = finder.find_contiguous_blocks('SC-A', 2)

        assert all(theater_chart.is_contiguous('SC-A', block.numbers) for block in blocks)
        assert (18, 19) not in [block.numbers for block in blocks]
        # 17 windows left of the aisle, 7 right of it
        assert len(blocks) == 24

    @pytest.mark.unit
    def test_unavailable_seats_break_runs(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(theater_chart, booked=['BOX-A3'], selected=['BOX-A6'])
        finder = BlockFinder(theater_chart, index)

        assert [block.numbers for block in finder.find_contiguous_blocks('BOX-A', 2)] == [
            (1, 2),
            (4, 5),
        ]

    @pytest.mark.unit
    def test_sorted_by_start(self, straight_chart: SeatingChart) -> None:
        finder = BlockFinder(straight_chart, SnapshotAvailabilityIndex(straight_chart))
        starts = [block.start for block in finder.find_contiguous_blocks('M-A', 5)]
        assert starts == sorted(starts)
        assert starts[0] == 1
        assert starts[-1] == 16

    @pytest.mark.unit
    def test_nothing_fits(self, theater_chart: SeatingChart) -> None:
        finder = BlockFinder(theater_chart, SnapshotAvailabilityIndex(theater_chart))
        assert finder.find_contiguous_blocks('BOX-A', 8) == []
        assert finder.find_contiguous_blocks('BOX-A', 0) == []
        assert finder.find_contiguous_blocks('NOPE', 2) == []


class TestFindBlockNearCenter:
    @pytest.mark.unit
    def test_even_block_straddles_center(self, theater_chart: SeatingChart) -> None:
        """Row 1-18 | 19-26 centers at 13.5, so {13, 14} is exact"""
        finder = BlockFinder(theater_chart, SnapshotAvailabilityIndex(theater_chart))
        block = finder.find_block_near_center('SC-A', 2, prefer_left=True)
        assert block is not None
        assert block.numbers == (13, 14)

    @pytest.mark.unit
    def test_odd_block_tie_follows_bias(self, theater_chart: SeatingChart) -> None:
        """{12,13,14} and {13,14,15} are both 0.5 from 13.5"""
        finder = BlockFinder(theater_chart, SnapshotAvailabilityIndex(theater_chart))

        left = finder.find_block_near_center('SC-A', 3, prefer_left=True)
        right = finder.find_block_near_center('SC-A', 3, prefer_left=False)

        assert left is not None and left.numbers == (12, 13, 14)
        assert right is not None and right.numbers == (13, 14, 15)

    @pytest.mark.unit
    def test_same_inputs_same_block(self, theater_chart: SeatingChart) -> None:
        finder = BlockFinder(theater_chart, SnapshotAvailabilityIndex(theater_chart))
        first = finder.find_block_near_center('FC-A', 4, prefer_left=True)
        second = finder.find_block_near_center('FC-A', 4, prefer_left=True)
        assert first == second

    @pytest.mark.unit
    def test_center_aisle_splits_candidates(self, theater_chart: SeatingChart) -> None:
        """FIRST CLASS 1-15 | 16-30: a pair must sit on one side of the aisle"""
        finder = BlockFinder(theater_chart, SnapshotAvailabilityIndex(theater_chart))
        left = finder.find_block_near_center('FC-A', 2, prefer_left=True)
        right = finder.find_block_near_center('FC-A', 2, prefer_left=False)
        assert left is not None and left.numbers == (14, 15)
        assert right is not None and right.numbers == (16, 17)

    @pytest.mark.unit
    def test_row_without_room(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(theater_chart, booked=[f'BOX-A{n}' for n in range(1, 8)])
        finder = BlockFinder(theater_chart, index)
        assert finder.find_block_near_center('BOX-A', 1, prefer_left=True) is None


class TestFindBlockAdjacentToOccupied:
    @pytest.mark.unit
    def test_prefers_flank_nearer_center(
        self, theater_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        """Seat 10 booked: {11, 12} is nearer 13.5 than {8, 9}"""
        index = snapshot(theater_chart, booked=['SC-A10'])
        finder = BlockFinder(theater_chart, index)

        block = finder.find_block_adjacent_to_occupied('STAR_CLASS', 2)

        assert block is not None
        assert block.row_id == 'SC-A'
        assert block.numbers == (11, 12)

    @pytest.mark.unit
    def test_bms_booking_counts_as_occupied(
        self, straight_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(straight_chart, bms_booked=['M-B4'])
        finder = BlockFinder(straight_chart, index)

        block = finder.find_block_adjacent_to_occupied('MAIN', 3)

        assert block is not None
        assert block.row_id == 'M-B'
        assert block.numbers == (5, 6, 7)

    @pytest.mark.unit
    def test_blocked_seats_do_not_attract(
        self, straight_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(straight_chart, blocked=['M-A10'])
        finder = BlockFinder(straight_chart, index)
        assert finder.find_block_adjacent_to_occupied('MAIN', 2) is None

    @pytest.mark.unit
    def test_restricted_rows(
        self, straight_chart: SeatingChart, snapshot: Callable[..., SnapshotAvailabilityIndex]
    ) -> None:
        index = snapshot(straight_chart, booked=['M-D10'])
        finder = BlockFinder(straight_chart, index)
        seat_class = straight_chart.get_class('MAIN')
        assert seat_class is not None

        assert finder.find_block_adjacent_to_occupied('MAIN', 2) is not None
        assert (
            finder.find_block_adjacent_to_occupied('MAIN', 2, rows=seat_class.rows_before_base)
            is None
        )
