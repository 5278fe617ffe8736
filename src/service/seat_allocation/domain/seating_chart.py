"""
Seating Chart Model

Static topology of the auditorium: classes, their rows in priority order, the
physical slots of every row (seats and aisle gaps) and each class's base row.

Queries return None/False for unknown rows or seats instead of raising, so the
allocation phases can treat "not found" as an ordinary empty result.
"""

from typing import Iterable, Optional

import attrs

from src.platform.config.core_setting import settings
from src.service.seat_allocation.domain.allocation_error import InvalidLayoutError
from src.service.seat_allocation.domain.value_object import Gap, Seat, SeatId, SeatSlot


def _index_seat_slots(row: 'Row') -> dict[int, int]:
    lookup: dict[int, int] = {}
    for index, slot in enumerate(row.slots):
        match slot:
            case Seat(number=number):
                lookup[number] = index
            case Gap():
                pass
    return lookup


@attrs.define(frozen=True)
class Row:
    """One physical row; ``slots`` are in left-to-right order"""

    row_id: str
    name: str
    class_key: str
    slots: tuple[SeatSlot, ...] = attrs.field(converter=tuple)
    _slot_by_number: dict[int, int] = attrs.field(
        init=False,
        repr=False,
        eq=False,
        default=attrs.Factory(_index_seat_slots, takes_self=True),
    )

    @property
    def seat_numbers(self) -> tuple[int, ...]:
        """Seat numbers in physical order"""
        return tuple(slot.number for slot in self.slots if isinstance(slot, Seat))

    @property
    def capacity(self) -> int:
        return len(self._slot_by_number)

    @property
    def has_gap(self) -> bool:
        return any(isinstance(slot, Gap) for slot in self.slots)

    def slot_index(self, number: int) -> Optional[int]:
        return self._slot_by_number.get(number)

    def seat_at(self, index: int) -> Optional[int]:
        """Seat number at a physical index; None for gaps and out-of-range indices"""
        if not 0 <= index < len(self.slots):
            return None
        slot = self.slots[index]
        return slot.number if isinstance(slot, Seat) else None

    def center_gap_index(self, band: float) -> Optional[int]:
        """
        Index of the row's center aisle, if it has one.

        The candidate is the gap nearest the physical middle of the row; it only
        counts as a center aisle when it lies inside the central ``band`` fraction
        of the row and has seats on both sides.
        """
        gaps = [i for i, slot in enumerate(self.slots) if isinstance(slot, Gap)]
        if not gaps:
            return None

        middle = (len(self.slots) - 1) / 2
        nearest = min(gaps, key=lambda i: (abs(i - middle), i))
        if abs(nearest - middle) > band * len(self.slots) / 2:
            return None
        if self._nearest_seat(nearest, step=-1) is None or self._nearest_seat(nearest, step=1) is None:
            return None
        return nearest

    def center(self, band: float) -> Optional[float]:
        """Numeric row center in seat-number terms"""
        numbers = self.seat_numbers
        if not numbers:
            return None

        gap_index = self.center_gap_index(band)
        if gap_index is not None:
            left = self._nearest_seat(gap_index, step=-1)
            right = self._nearest_seat(gap_index, step=1)
            return (left + right) / 2  # type: ignore[operator]

        return (numbers[0] + numbers[-1]) / 2

    def _nearest_seat(self, index: int, *, step: int) -> Optional[int]:
        index += step
        while 0 <= index < len(self.slots):
            number = self.seat_at(index)
            if number is not None:
                return number
            index += step
        return None


@attrs.define(frozen=True)
class SeatClass:
    """Section of the house with its rows in priority order (front first)"""

    key: str
    label: str
    rows: tuple[Row, ...] = attrs.field(converter=tuple)
    base_row_id: str = attrs.field()

    @base_row_id.validator
    def _check_base_row(self, attribute: attrs.Attribute, value: str) -> None:
        if value not in {row.row_id for row in self.rows}:
            raise InvalidLayoutError(f'Base row {value} is not a row of class {self.key}')

    @property
    def row_ids(self) -> tuple[str, ...]:
        return tuple(row.row_id for row in self.rows)

    @property
    def base_rank(self) -> int:
        return self.row_ids.index(self.base_row_id)

    @property
    def rows_before_base(self) -> tuple[Row, ...]:
        return self.rows[: self.base_rank]

    @property
    def penalty_rows(self) -> tuple[Row, ...]:
        return self.rows[self.base_rank :]

    def rank(self, row_id: str) -> Optional[int]:
        """Priority rank of a row; 0 is the front row"""
        try:
            return self.row_ids.index(row_id)
        except ValueError:
            return None


class SeatingChart:
    """Read-only view over every class and row of the auditorium"""

    def __init__(
        self, classes: Iterable[SeatClass], *, center_aisle_band: float | None = None
    ) -> None:
        self._classes: dict[str, SeatClass] = {}
        self._rows: dict[str, Row] = {}
        self.center_aisle_band = (
            settings.CENTER_AISLE_BAND if center_aisle_band is None else center_aisle_band
        )

        for seat_class in classes:
            if seat_class.key in self._classes:
                raise InvalidLayoutError(f'Duplicate class key: {seat_class.key}')
            self._classes[seat_class.key] = seat_class
            for row in seat_class.rows:
                if row.row_id in self._rows:
                    raise InvalidLayoutError(f'Duplicate row ID: {row.row_id}')
                self._rows[row.row_id] = row

    @property
    def classes(self) -> tuple[SeatClass, ...]:
        return tuple(self._classes.values())

    @property
    def total_seats(self) -> int:
        return sum(row.capacity for row in self._rows.values())

    def get_class(self, class_key: str) -> Optional[SeatClass]:
        return self._classes.get(class_key)

    def get_row(self, row_id: str) -> Optional[Row]:
        return self._rows.get(row_id)

    def class_of_row(self, row_id: str) -> Optional[SeatClass]:
        row = self._rows.get(row_id)
        return self._classes.get(row.class_key) if row else None

    def contains(self, seat: SeatId) -> bool:
        return self.slot_index(seat.row_id, seat.number) is not None

    def slot_index(self, row_id: str, seat_number: int) -> Optional[int]:
        row = self._rows.get(row_id)
        return row.slot_index(seat_number) if row else None

    def is_physically_adjacent(self, row_id: str, a: int, b: int) -> bool:
        index_a = self.slot_index(row_id, a)
        index_b = self.slot_index(row_id, b)
        if index_a is None or index_b is None:
            return False
        return abs(index_a - index_b) == 1

    def row_center(self, row_id: str) -> Optional[float]:
        row = self._rows.get(row_id)
        return row.center(self.center_aisle_band) if row else None

    def has_center_aisle(self, row_id: str) -> bool:
        row = self._rows.get(row_id)
        return row is not None and row.center_gap_index(self.center_aisle_band) is not None

    def base_row(self, class_key: str) -> Optional[str]:
        seat_class = self._classes.get(class_key)
        return seat_class.base_row_id if seat_class else None

    def is_contiguous(self, row_id: str, numbers: Iterable[int]) -> bool:
        """True when the seats occupy consecutive physical slots of one row"""
        indices = [self.slot_index(row_id, n) for n in numbers]
        if not indices or any(i is None for i in indices):
            return False
        ordered = sorted(indices)  # type: ignore[type-var]
        return all(b == a + 1 for a, b in zip(ordered, ordered[1:]))
