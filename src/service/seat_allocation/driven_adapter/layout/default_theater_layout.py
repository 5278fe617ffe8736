"""Default layout of the theater: five classes, 590 seats."""

from typing import Any


def _seats(*ranges: tuple[int, int]) -> list[int | str]:
    """Seat numbers for inclusive ranges, with a gap between consecutive ranges"""
    slots: list[int | str] = []
    for i, (first, last) in enumerate(ranges):
        if i:
            slots.append('')
        slots.extend(range(first, last + 1))
    return slots


def _rows(prefix: str, names: str, seats: list[int | str]) -> list[dict[str, Any]]:
    return [{'id': f'{prefix}-{name}', 'name': name, 'seats': list(seats)} for name in names]


DEFAULT_THEATER_LAYOUT: dict[str, Any] = {
    'id': 'default-theater',
    'name': 'Standard Theater Layout',
    'totalSeats': 590,
    'sections': [
        {
            'classKey': 'BOX',
            'classLabel': 'BOX',
            'totalSeats': 22,
            'rows': [
                *_rows('BOX', 'AB', _seats((1, 7))),
                *_rows('BOX', 'C', _seats((1, 8))),
            ],
        },
        {
            'classKey': 'STAR_CLASS',
            'classLabel': 'STAR CLASS',
            'totalSeats': 104,
            'rows': _rows('SC', 'ABCD', _seats((1, 18), (19, 26))),
        },
        {
            'classKey': 'CLASSIC',
            'classLabel': 'CLASSIC BALCONY',
            'baseRow': 'G',
            'totalSeats': 194,
            'rows': [
                *_rows('CB', 'A', _seats((1, 13), (14, 26))),
                *_rows('CB', 'BCDEFGH', _seats((1, 12), (13, 24))),
            ],
        },
        {
            'classKey': 'FIRST_CLASS',
            'classLabel': 'FIRST CLASS',
            'baseRow': 'F',
            'totalSeats': 210,
            'rows': _rows('FC', 'ABCDEFG', _seats((1, 15), (16, 30))),
        },
        {
            'classKey': 'SECOND_CLASS',
            'classLabel': 'SECOND CLASS',
            'totalSeats': 60,
            'rows': _rows('SC2', 'AB', _seats((1, 30))),
        },
    ],
}
