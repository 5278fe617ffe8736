"""
Seat Slot Value Objects

A row is an ordered sequence of physical slots; each slot is either a numbered
seat or an aisle gap. Physical order is what defines contiguity.
"""

import attrs


@attrs.define(frozen=True)
class Seat:
    """Numbered seat occupying one physical slot"""

    number: int


@attrs.define(frozen=True)
class Gap:
    """Aisle slot: breaks physical contiguity"""


SeatSlot = Seat | Gap
