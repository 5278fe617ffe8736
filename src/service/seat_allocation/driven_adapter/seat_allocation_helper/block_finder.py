"""
Block Finder

Enumerates and ranks contiguous runs of AVAILABLE seats. Contiguity is by
physical slot index: aisle gaps and unavailable seats break a run.
"""

from typing import Iterable, List, Optional

from src.platform.config.core_setting import settings
from src.service.seat_allocation.app.interface import IAvailabilityIndex
from src.service.seat_allocation.domain.seating_chart import Row, SeatingChart
from src.service.seat_allocation.domain.value_object import CandidateBlock


class BlockFinder:
    """
    Find contiguous seat blocks within rows of one snapshot

    Responsibility: Candidate enumeration only; returns empty/None when nothing
    fits, never raises
    """

    def __init__(self, chart: SeatingChart, availability: IAvailabilityIndex) -> None:
        self.chart = chart
        self.availability = availability

    def _available_runs(self, row: Row) -> List[List[int]]:
        """Maximal runs of AVAILABLE seat numbers, in physical order"""
        runs: List[List[int]] = []
        current: List[int] = []
        for index in range(len(row.slots)):
            number = row.seat_at(index)
            if number is not None and self.availability.is_available(row.row_id, number):
                current.append(number)
                continue
            if current:
                runs.append(current)
                current = []
        if current:
            runs.append(current)
        return runs

    def find_contiguous_blocks(self, row_id: str, count: int) -> List[CandidateBlock]:
        """
        Every window of ``count`` consecutive AVAILABLE seats in a row

        Returns:
            Candidate blocks in ascending seat-number order; empty for an
            unknown row or non-positive count
        """
        row = self.chart.get_row(row_id)
        if row is None or count < 1:
            return []

        blocks = [
            CandidateBlock(row_id=row_id, numbers=tuple(run[i : i + count]))
            for run in self._available_runs(row)
            for i in range(len(run) - count + 1)
        ]
        return sorted(blocks, key=lambda block: min(block.numbers))

    def find_block_near_center(
        self, row_id: str, count: int, *, prefer_left: bool
    ) -> Optional[CandidateBlock]:
        """
        Block whose midpoint is closest to the row center

        An exact tie between a block left of center and one right of it goes to
        the left block when ``prefer_left`` is set, else to the right one. The
        caller owns the flag and flips it after each use.
        """
        center = self.chart.row_center(row_id)
        blocks = self.find_contiguous_blocks(row_id, count)
        if center is None or not blocks:
            return None

        def rank(block: CandidateBlock) -> tuple[float, float]:
            distance = abs(block.midpoint - center)
            side = block.midpoint if prefer_left else -block.midpoint
            return (_quantize(distance), side)

        return min(blocks, key=rank)

    def find_block_adjacent_to_occupied(
        self, class_key: str, count: int, *, rows: Optional[Iterable[Row]] = None
    ) -> Optional[CandidateBlock]:
        """
        Block whose immediate physical left or right neighbor is BOOKED/BMS_BOOKED

        Args:
            class_key: Class to search
            count: Seats needed
            rows: Rows to scan, in priority order; defaults to every row of the class

        Returns:
            The candidate closest to its row center, then with the smaller
            starting seat number, then in the higher-priority row; None if no
            block touches an occupied seat
        """
        seat_class = self.chart.get_class(class_key)
        if seat_class is None:
            return None

        candidates: List[tuple[float, int, int, CandidateBlock]] = []
        for row in seat_class.rows if rows is None else rows:
            rank = seat_class.rank(row.row_id)
            center = self.chart.row_center(row.row_id)
            if rank is None or center is None:
                continue
            for block in self.find_contiguous_blocks(row.row_id, count):
                if not self._touches_occupied(block):
                    continue
                distance = _quantize(abs(block.midpoint - center))
                candidates.append((distance, block.start, rank, block))

        if not candidates:
            return None
        return min(candidates, key=lambda c: c[:3])[3]

    def _touches_occupied(self, block: CandidateBlock) -> bool:
        first, last = block.numbers[0], block.numbers[-1]
        occupied = {
            seat.number
            for number in (first, last)
            for seat in self.availability.occupied_neighbors(block.row_id, number)
        }
        return bool(occupied - set(block.numbers))


def _quantize(distance: float) -> float:
    """Collapse float noise so distances within TIE_EPSILON compare equal"""
    return round(distance / settings.TIE_EPSILON) * settings.TIE_EPSILON
