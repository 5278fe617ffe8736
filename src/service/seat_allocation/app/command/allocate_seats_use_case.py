"""
Allocate Seats Use Case - ordered phase pipeline over one availability snapshot
"""

from typing import Iterable, Optional, Sequence

import attrs

from src.platform.config.core_setting import Settings, settings
from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.dto import AllocationRequest, AllocationResult, RequestKind
from src.service.seat_allocation.app.interface import IAvailabilityIndex
from src.service.seat_allocation.app.phase.allocation_phases import (
    DEFAULT_PHASES,
    Phase,
    PhaseInput,
    PhaseOutcome,
)
from src.service.seat_allocation.domain.allocation_error import (
    InsufficientAvailabilityError,
    InvalidRequestError,
)
from src.service.seat_allocation.domain.enum import AllocationPhase, SeatStatus
from src.service.seat_allocation.domain.growth_state import GrowthState
from src.service.seat_allocation.domain.seating_chart import SeatClass, SeatingChart
from src.service.seat_allocation.domain.value_object import SeatId


class AllocateSeatsUseCase:
    """
    Allocate Seats Use Case

    Responsibility: Validate the request, run the phases in order until one
    yields seats, and apply the outcome to the session's GrowthState

    Flow:
    1. Validate request against chart, snapshot and growth state
    2. Shrink requests drop one seat without searching
    3. Replacement requests search a snapshot where the old selection is released
    4. First phase with an outcome wins; bias flag flips if the outcome used it
    5. Return ordered seats plus the delta against the previous selection

    Dependencies:
    - chart: Immutable seating chart of the theater
    - phases: Ordered phase functions (DEFAULT_PHASES)
    """

    def __init__(
        self,
        chart: SeatingChart,
        *,
        phases: Sequence[Phase] = DEFAULT_PHASES,
        config: Optional[Settings] = None,
    ) -> None:
        self.chart = chart
        self.phases = tuple(phases)
        self.config = config or settings

    @Logger.io
    def allocate(
        self, request: AllocationRequest, availability: IAvailabilityIndex, state: GrowthState
    ) -> AllocationResult:
        seat_class = self._validate_request(request, availability, state)
        kind = request.kind
        Logger.base.info(
            f'🎯 [ALLOCATE] {kind} request for {request.count} seats in {request.class_key}'
        )

        if kind is not RequestKind.FRESH and set(state.seats) != set(request.existing_selection):
            # The UI selection is authoritative; realign the shape before growing from it
            state.replace(request.existing_selection)

        if kind is RequestKind.SHRINK:
            return self._shrink(state, seat_class, by=1)

        search_index = (
            availability.releasing(request.existing_selection)
            if kind is RequestKind.REPLACE
            else availability
        )
        phase_input = PhaseInput(
            chart=self.chart,
            availability=search_index,
            request=request,
            seat_class=seat_class,
            prefer_left=state.prefer_left,
            active_row_id=state.active_row_id,
            config=self.config,
        )

        for phase in self.phases:
            outcome = phase(phase_input)
            if outcome is None:
                Logger.base.debug(f'[PHASE] {phase.__name__} found nothing')
                continue
            Logger.base.info(f'✅ [PHASE] {outcome.phase} allocated {len(outcome.seats)} seats')
            return self._apply(outcome, state, seat_class)

        Logger.base.warning(
            f'⚠️ [ALLOCATE] No phase could place {request.count} seats in {request.class_key}'
        )
        raise InsufficientAvailabilityError(
            f'Not enough contiguous seats available in {seat_class.label} for {request.count} seats'
        )

    def select(
        self,
        class_key: str,
        count: int,
        availability: IAvailabilityIndex,
        state: GrowthState,
        *,
        anchor_row: Optional[str] = None,
    ) -> AllocationResult:
        """Class click: allocate ``count`` seats, reusing the session's current selection"""
        request = AllocationRequest(
            class_key=class_key,
            count=count,
            existing_selection=tuple(state.seats),
            anchor_row=anchor_row,
        )
        return self.allocate(request, availability, state)

    def grow(
        self, state: GrowthState, availability: IAvailabilityIndex, by: int = 1
    ) -> AllocationResult:
        """
        Stepper increment: add ``by`` seats one at a time

        Either every step succeeds or the state is left untouched.
        """
        if by < 1:
            raise InvalidRequestError('Grow step must be positive')

        draft = attrs.evolve(state, seats=list(state.seats))
        previous = list(state.seats)
        result: Optional[AllocationResult] = None
        for _ in range(by):
            request = AllocationRequest(
                class_key=state.class_key,
                count=draft.size + 1,
                existing_selection=tuple(draft.seats),
            )
            result = self.allocate(request, availability, draft)

        for field in attrs.fields(GrowthState):
            setattr(state, field.name, getattr(draft, field.name))

        assert result is not None
        kept, current = set(previous), set(result.seats)
        return attrs.evolve(
            result,
            added=tuple(seat for seat in result.seats if seat not in kept),
            removed=tuple(seat for seat in previous if seat not in current),
        )

    def shrink(self, state: GrowthState, by: int = 1) -> AllocationResult:
        """Stepper decrement: drop ``by`` seats from the active row, no search"""
        seat_class = self.chart.get_class(state.class_key)
        if seat_class is None:
            raise InvalidRequestError(f'Unknown seat class: {state.class_key}')
        return self._shrink(state, seat_class, by=by)

    def _shrink(self, state: GrowthState, seat_class: SeatClass, *, by: int) -> AllocationResult:
        removed = state.shrink(by)
        Logger.base.info(f'➖ [GROWTH] Released {", ".join(map(str, removed))}')
        return AllocationResult(
            class_key=seat_class.key,
            seats=self._ordered(state.seats, seat_class),
            phase=AllocationPhase.SHRINK,
            removed=tuple(removed),
        )

    def _apply(
        self, outcome: PhaseOutcome, state: GrowthState, seat_class: SeatClass
    ) -> AllocationResult:
        if outcome.used_bias:
            state.flip_bias()

        previous = list(state.seats)
        if outcome.phase is AllocationPhase.INCREMENTAL_GROWTH:
            seat = outcome.seats[0]
            state.grow(seat, outcome.grown_side)  # type: ignore[arg-type]
            Logger.base.info(f'➕ [GROWTH] Added {seat} on the {outcome.grown_side} side')
        else:
            state.replace(self._ordered(outcome.seats, seat_class))

        before, current = set(previous), set(state.seats)
        return AllocationResult(
            class_key=seat_class.key,
            seats=self._ordered(state.seats, seat_class),
            phase=outcome.phase,
            added=self._ordered((s for s in state.seats if s not in before), seat_class),
            removed=self._ordered((s for s in previous if s not in current), seat_class),
        )

    def _ordered(self, seats: Iterable[SeatId], seat_class: SeatClass) -> tuple[SeatId, ...]:
        """Seats by row priority, then physical slot"""

        def position(seat: SeatId) -> tuple[int, int]:
            row = self.chart.get_row(seat.row_id)
            index = row.slot_index(seat.number) if row else None
            return (seat_class.rank(seat.row_id) or 0, index or 0)

        return tuple(sorted(seats, key=position))

    def _validate_request(
        self, request: AllocationRequest, availability: IAvailabilityIndex, state: GrowthState
    ) -> SeatClass:
        if request.count <= 0:
            raise InvalidRequestError('Seat count must be positive')

        seat_class = self.chart.get_class(request.class_key)
        if seat_class is None:
            raise InvalidRequestError(f'Unknown seat class: {request.class_key}')

        if state.class_key != request.class_key:
            raise InvalidRequestError(
                f'Growth state belongs to {state.class_key}, not {request.class_key}'
            )

        if request.anchor_row is not None and seat_class.rank(request.anchor_row) is None:
            raise InvalidRequestError(
                f'Row {request.anchor_row} is not part of {request.class_key}'
            )

        existing = request.existing_selection
        if len(set(existing)) != len(existing):
            raise InvalidRequestError('Existing selection contains duplicate seats')
        for seat in existing:
            if not self.chart.contains(seat):
                raise InvalidRequestError(f'Unknown seat in existing selection: {seat}')
            if seat_class.rank(seat.row_id) is None:
                raise InvalidRequestError(f'Seat {seat} is not part of {request.class_key}')
            if availability.status_of(seat) not in (SeatStatus.SELECTED, SeatStatus.AVAILABLE):
                raise InvalidRequestError(f'Seat {seat} is no longer held by this selection')

        return seat_class
