"""Allocation Phase Enum"""

from enum import StrEnum


class AllocationPhase(StrEnum):
    """Which step of the allocation pipeline produced a selection"""

    FRESH_CENTER = 'fresh_center'
    ADJACENT_TO_OCCUPIED = 'adjacent_to_occupied'
    INCREMENTAL_GROWTH = 'incremental_growth'
    HORIZONTAL_WIDEN = 'horizontal_widen'
    PENALTY_EXPANSION = 'penalty_expansion'
    SHRINK = 'shrink'  # Stepper decrement, no search involved
