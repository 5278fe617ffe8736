"""Seating layout schemas, as delivered by the layout configuration service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


GAP_MARKER = ''


class RowLayout(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    seats: list[int | str]
    total_seats: Optional[int] = Field(default=None, alias='totalSeats')

    @field_validator('seats')
    @classmethod
    def validate_seats(cls, v: list[int | str]) -> list[int | str]:
        numbers = [slot for slot in v if isinstance(slot, int)]
        if not numbers:
            raise ValueError('Row has no seats')
        if any(isinstance(slot, str) and slot != GAP_MARKER for slot in v):
            raise ValueError('Gap slots must be empty strings')
        if any(number < 1 for number in numbers):
            raise ValueError('Seat numbers must be positive')
        if len(set(numbers)) != len(numbers):
            raise ValueError('Duplicate seat numbers in row')
        return v

    @property
    def seat_count(self) -> int:
        return sum(1 for slot in self.seats if isinstance(slot, int))

    @model_validator(mode='after')
    def validate_total_seats(self) -> 'RowLayout':
        if self.total_seats is not None and self.total_seats != self.seat_count:
            raise ValueError(
                f'Row {self.id} declares {self.total_seats} seats but has {self.seat_count}'
            )
        return self


class SectionLayout(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    class_key: str = Field(..., min_length=1, alias='classKey')
    class_label: Optional[str] = Field(default=None, alias='classLabel')
    base_row: Optional[str] = Field(default=None, alias='baseRow')  # Row name, e.g. 'G'
    total_seats: Optional[int] = Field(default=None, alias='totalSeats')
    rows: list[RowLayout] = Field(..., min_length=1)

    @property
    def label(self) -> str:
        return self.class_label or self.class_key

    @property
    def seat_count(self) -> int:
        return sum(row.seat_count for row in self.rows)

    def base_row_id(self) -> str:
        """Id of the base row; the last row when none is configured"""
        if self.base_row is None:
            return self.rows[-1].id
        return next(row.id for row in self.rows if self.base_row in (row.name, row.id))

    @model_validator(mode='after')
    def validate_section(self) -> 'SectionLayout':
        if self.base_row is not None and not any(
            self.base_row in (row.name, row.id) for row in self.rows
        ):
            raise ValueError(f'Base row {self.base_row} is not a row of {self.class_key}')
        if self.total_seats is not None and self.total_seats != self.seat_count:
            raise ValueError(
                f'Section {self.class_key} declares {self.total_seats} seats but has {self.seat_count}'
            )
        return self


class SeatingLayout(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    total_seats: Optional[int] = Field(default=None, alias='totalSeats')
    sections: list[SectionLayout] = Field(..., min_length=1)

    @model_validator(mode='after')
    def validate_layout(self) -> 'SeatingLayout':
        class_keys = [section.class_key for section in self.sections]
        if len(set(class_keys)) != len(class_keys):
            raise ValueError('Duplicate class keys in layout')

        row_ids = [row.id for section in self.sections for row in section.rows]
        duplicates = sorted({row_id for row_id in row_ids if row_ids.count(row_id) > 1})
        if duplicates:
            raise ValueError(f'Duplicate row IDs: {", ".join(duplicates)}')

        counted = sum(section.seat_count for section in self.sections)
        if self.total_seats is not None and self.total_seats != counted:
            raise ValueError(f'Layout declares {self.total_seats} seats but has {counted}')
        return self
