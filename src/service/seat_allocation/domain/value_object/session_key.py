"""Session Key Value Object"""

import attrs

from src.service.seat_allocation.domain.enum import ShowTime


@attrs.define(frozen=True)
class SessionKey:
    """Scope of one selection: a class within one (date, show)"""

    show_date: str  # ISO date, e.g. '2026-10-17'
    show_time: ShowTime = attrs.field(converter=ShowTime)
    class_key: str
