"""Growth Side Enum"""

from enum import StrEnum


class GrowthSide(StrEnum):
    LEFT = 'left'
    RIGHT = 'right'
    VERTICAL = 'vertical'  # New seat started a segment in an adjacent row
