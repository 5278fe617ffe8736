"""
Allocation Phases

Each phase is a pure function of (chart, snapshot, request, growth context)
returning a PhaseOutcome, or None to hand over to the next phase. Phases never
touch the GrowthState; the use case applies the outcome.

Order (DEFAULT_PHASES):
1. fresh_center          - first row by priority that holds N seats, block nearest its center
2. adjacent_to_occupied  - fragmented rows: block flanking a booked seat
3. incremental_growth    - "+" stepper: one more seat at an edge, else in an adjacent row
4. horizontal_widen      - N exceeds any untouched row: whole rows above the base row
5. penalty_expansion     - last resort: best scored block anywhere in the class
"""

from typing import Callable, List, Optional, Sequence

import attrs

from src.platform.config.core_setting import Settings, settings
from src.service.seat_allocation.app.dto import AllocationRequest, RequestKind
from src.service.seat_allocation.app.interface import IAvailabilityIndex
from src.service.seat_allocation.domain.enum import AllocationPhase, GrowthSide
from src.service.seat_allocation.domain.seating_chart import Row, SeatClass, SeatingChart
from src.service.seat_allocation.domain.value_object import CandidateBlock, SeatId
from src.service.seat_allocation.driven_adapter.seat_allocation_helper.block_finder import (
    BlockFinder,
)
from src.service.seat_allocation.driven_adapter.seat_allocation_helper.block_scorer import (
    BlockScorer,
)


@attrs.define(frozen=True)
class PhaseInput:
    chart: SeatingChart
    availability: IAvailabilityIndex
    request: AllocationRequest
    seat_class: SeatClass
    prefer_left: bool = True
    active_row_id: Optional[str] = None
    config: Settings = attrs.field(default=attrs.Factory(lambda: settings))
    finder: BlockFinder = attrs.field(
        init=False,
        default=attrs.Factory(lambda self: BlockFinder(self.chart, self.availability), takes_self=True),
    )
    scorer: BlockScorer = attrs.field(
        init=False,
        default=attrs.Factory(
            lambda self: BlockScorer(self.chart, self.availability, self.config), takes_self=True
        ),
    )

    @property
    def count(self) -> int:
        return self.request.count

    @property
    def is_fresh_search(self) -> bool:
        return self.request.kind in (RequestKind.FRESH, RequestKind.REPLACE)

    def search_rows(self) -> List[Row]:
        """Rows before the base row by priority, with the anchor row (if any) first"""
        rows = list(self.seat_class.rows_before_base)
        anchor = next((row for row in rows if row.row_id == self.request.anchor_row), None)
        if anchor is not None:
            rows.remove(anchor)
            rows.insert(0, anchor)
        return rows


@attrs.define(frozen=True)
class PhaseOutcome:
    """
    What a phase found.

    For incremental growth ``blocks`` holds the single added seat; for every
    other phase it is the complete new selection, one block per row.
    """

    phase: AllocationPhase
    blocks: tuple[CandidateBlock, ...]
    used_bias: bool = False
    grown_side: Optional[GrowthSide] = None

    @property
    def seats(self) -> tuple[SeatId, ...]:
        return tuple(seat for block in self.blocks for seat in block.seat_ids)


Phase = Callable[[PhaseInput], Optional[PhaseOutcome]]


def _quantize(value: float, epsilon: float) -> float:
    return round(value / epsilon) * epsilon


def fresh_center(inp: PhaseInput) -> Optional[PhaseOutcome]:
    if not inp.is_fresh_search:
        return None

    for row in inp.search_rows():
        if len(inp.availability.available_seats(row.row_id)) < inp.count:
            continue
        block = inp.finder.find_block_near_center(
            row.row_id, inp.count, prefer_left=inp.prefer_left
        )
        if block is not None:
            return PhaseOutcome(AllocationPhase.FRESH_CENTER, (block,), used_bias=True)
    return None


def adjacent_to_occupied(inp: PhaseInput) -> Optional[PhaseOutcome]:
    if not inp.is_fresh_search:
        return None

    block = inp.finder.find_block_adjacent_to_occupied(
        inp.seat_class.key, inp.count, rows=inp.seat_class.rows_before_base
    )
    if block is None:
        return None
    return PhaseOutcome(AllocationPhase.ADJACENT_TO_OCCUPIED, (block,))


def incremental_growth(inp: PhaseInput) -> Optional[PhaseOutcome]:
    if inp.request.kind is not RequestKind.INCREMENTAL:
        return None

    selection = inp.request.existing_selection
    selection_rows = {seat.row_id for seat in selection}
    active_row_id = (
        inp.active_row_id if inp.active_row_id in selection_rows else selection[-1].row_id
    )
    row = inp.chart.get_row(active_row_id)
    if row is None:
        return None

    segment = [seat.number for seat in selection if seat.row_id == active_row_id]
    return _grow_horizontally(inp, row, segment) or _grow_vertically(inp, row, segment)


def _grow_horizontally(inp: PhaseInput, row: Row, segment: List[int]) -> Optional[PhaseOutcome]:
    taken = set(inp.request.existing_selection)
    indices = sorted(i for i in (row.slot_index(n) for n in segment) if i is not None)
    if not indices:
        return None
    first, last = row.seat_at(indices[0]), row.seat_at(indices[-1])

    def free(index: int) -> Optional[int]:
        number = row.seat_at(index)
        if number is None or SeatId(row_id=row.row_id, number=number) in taken:
            return None
        return number if inp.availability.is_available(row.row_id, number) else None

    left, right = free(indices[0] - 1), free(indices[-1] + 1)
    if left is None and right is None:
        return None

    used_bias = False
    if left is not None and right is not None:
        center = inp.chart.row_center(row.row_id) or 0.0
        eps = inp.config.TIE_EPSILON
        left_distance = _quantize(abs((left + last) / 2 - center), eps)  # type: ignore[operator]
        right_distance = _quantize(abs((first + right) / 2 - center), eps)  # type: ignore[operator]
        if left_distance == right_distance:
            side = GrowthSide.LEFT if inp.prefer_left else GrowthSide.RIGHT
            used_bias = True
        else:
            side = GrowthSide.LEFT if left_distance < right_distance else GrowthSide.RIGHT
    else:
        side = GrowthSide.LEFT if left is not None else GrowthSide.RIGHT

    number = left if side is GrowthSide.LEFT else right
    block = CandidateBlock(row_id=row.row_id, numbers=(number,))  # type: ignore[arg-type]
    return PhaseOutcome(
        AllocationPhase.INCREMENTAL_GROWTH, (block,), used_bias=used_bias, grown_side=side
    )


def _grow_vertically(inp: PhaseInput, row: Row, segment: List[int]) -> Optional[PhaseOutcome]:
    """One seat in the row behind (else in front of) the shape, under the active span"""
    ranks = [
        rank
        for rank in (inp.seat_class.rank(row_id) for row_id in {s.row_id for s in inp.request.existing_selection})
        if rank is not None
    ]
    if not ranks:
        return None

    low, high = min(segment), max(segment)
    span_mid = (low + high) / 2
    eps = inp.config.TIE_EPSILON
    for rank in (max(ranks) + 1, min(ranks) - 1):
        if not 0 <= rank < inp.seat_class.base_rank:
            continue
        target = inp.seat_class.rows[rank]
        options = [
            number
            for number in target.seat_numbers
            if low <= number <= high and inp.availability.is_available(target.row_id, number)
        ]
        if not options:
            continue

        best_distance = min(_quantize(abs(n - span_mid), eps) for n in options)
        nearest = [n for n in options if _quantize(abs(n - span_mid), eps) == best_distance]
        number = min(nearest) if inp.prefer_left else max(nearest)
        block = CandidateBlock(row_id=target.row_id, numbers=(number,))
        return PhaseOutcome(
            AllocationPhase.INCREMENTAL_GROWTH,
            (block,),
            used_bias=len(nearest) > 1,
            grown_side=GrowthSide.VERTICAL,
        )
    return None


def horizontal_widen(inp: PhaseInput) -> Optional[PhaseOutcome]:
    if not inp.is_fresh_search:
        return None

    rows = list(inp.seat_class.rows_before_base)
    untouched = {
        row.row_id
        for row in rows
        if len(inp.availability.available_seats(row.row_id)) == row.capacity
    }
    if not untouched or inp.count <= max(r.capacity for r in rows if r.row_id in untouched):
        return None

    for start in range(len(rows)):
        blocks: List[CandidateBlock] = []
        remaining = inp.count
        used_bias = False
        for row in rows[start:]:
            if row.row_id in untouched and row.capacity <= remaining:
                blocks.append(CandidateBlock(row_id=row.row_id, numbers=row.seat_numbers))
                remaining -= row.capacity
                if remaining == 0:
                    break
                continue
            block = inp.finder.find_block_near_center(
                row.row_id, remaining, prefer_left=inp.prefer_left
            )
            if block is not None:
                blocks.append(block)
                remaining = 0
                used_bias = True
            break

        if remaining == 0 and blocks:
            return PhaseOutcome(AllocationPhase.HORIZONTAL_WIDEN, tuple(blocks), used_bias=used_bias)
    return None


def penalty_expansion(inp: PhaseInput) -> Optional[PhaseOutcome]:
    if not inp.is_fresh_search:
        return None

    candidates = [
        block
        for row in inp.seat_class.rows
        for block in inp.finder.find_contiguous_blocks(row.row_id, inp.count)
    ]
    best = inp.scorer.best_block(candidates, inp.seat_class)
    if best is None:
        return None
    return PhaseOutcome(AllocationPhase.PENALTY_EXPANSION, (best,))


DEFAULT_PHASES: Sequence[Phase] = (
    fresh_center,
    adjacent_to_occupied,
    incremental_growth,
    horizontal_widen,
    penalty_expansion,
)
