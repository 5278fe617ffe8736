"""
Block Scorer

Weighted heuristic that turns a candidate block into one comparable number, so
blocks from different rows can be ranked in a single pass.

    score = center + top_row_bias + bottom_penalty + buffer + aisle_bonus
"""

from typing import Iterable, Optional

import attrs

from src.platform.config.core_setting import Settings, settings
from src.service.seat_allocation.app.interface import IAvailabilityIndex
from src.service.seat_allocation.domain.seating_chart import SeatClass, SeatingChart
from src.service.seat_allocation.domain.value_object import CandidateBlock


@attrs.define(frozen=True)
class ScoreBreakdown:
    center: float
    top_row_bias: float
    bottom_penalty: float
    buffer: float
    aisle_bonus: float

    @property
    def total(self) -> float:
        return self.center + self.top_row_bias + self.bottom_penalty + self.buffer + self.aisle_bonus


class BlockScorer:
    def __init__(
        self,
        chart: SeatingChart,
        availability: IAvailabilityIndex,
        config: Optional[Settings] = None,
    ) -> None:
        self.chart = chart
        self.availability = availability
        self.config = config or settings

    def score(self, block: CandidateBlock, seat_class: SeatClass) -> Optional[ScoreBreakdown]:
        """Score a block of ``seat_class``; None when the row is not part of the class"""
        rank = seat_class.rank(block.row_id)
        center = self.chart.row_center(block.row_id)
        if rank is None or center is None:
            return None

        cfg = self.config
        distance = abs(block.midpoint - center)
        center_score = max(0.0, cfg.CENTER_SCORE_MAX - distance * cfg.CENTER_DECAY_PER_SEAT)

        row_count = len(seat_class.rows)
        top_row_bias = cfg.TOP_ROW_BIAS_MAX * (row_count - rank) / row_count

        bottom_penalty = 0.0
        if rank >= seat_class.base_rank:
            bottom_penalty = (
                cfg.BOTTOM_PENALTY_BASE + (rank - seat_class.base_rank) * cfg.BOTTOM_PENALTY_STEP
            )

        aisle_bonus = cfg.AISLE_BONUS if self.chart.has_center_aisle(block.row_id) else 0.0

        return ScoreBreakdown(
            center=center_score,
            top_row_bias=top_row_bias,
            bottom_penalty=bottom_penalty,
            buffer=self._buffer_score(block),
            aisle_bonus=aisle_bonus,
        )

    def best_block(
        self, blocks: Iterable[CandidateBlock], seat_class: SeatClass
    ) -> Optional[CandidateBlock]:
        """Highest-scoring block; on equal totals the earlier candidate wins"""
        best: Optional[CandidateBlock] = None
        best_total = float('-inf')
        for block in blocks:
            breakdown = self.score(block, seat_class)
            if breakdown is None:
                continue
            if breakdown.total > best_total + self.config.TIE_EPSILON:
                best, best_total = block, breakdown.total
        return best

    def _buffer_score(self, block: CandidateBlock) -> float:
        row = self.chart.get_row(block.row_id)
        if row is None:
            return 0.0
        first = row.slot_index(block.numbers[0])
        last = row.slot_index(block.numbers[-1])
        if first is None or last is None:
            return 0.0
        left, right = sorted((first, last))
        return self._side_score(row.row_id, left, step=-1) + self._side_score(
            row.row_id, right, step=1
        )

    def _side_score(self, row_id: str, edge_index: int, *, step: int) -> float:
        """Free seats beyond one edge; leaving exactly one free seat strands an orphan"""
        row = self.chart.get_row(row_id)
        free = 0
        index = edge_index + step
        while row is not None:
            number = row.seat_at(index)
            if number is None or not self.availability.is_available(row_id, number):
                break
            free += 1
            index += step

        if free == 1:
            return -self.config.ORPHAN_PENALTY
        return min(free, self.config.BUFFER_CAP) * self.config.BUFFER_WEIGHT
