"""
Seating Layout Loader

Turns a layout document from the configuration service into a SeatingChart.
Everything the allocation engine relies on (unique row ids, unique seat numbers
per row, base row inside its class) is checked here, once, at load time.
"""

from pathlib import Path
from typing import Any, Mapping

import orjson
from pydantic import ValidationError

from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.domain.allocation_error import InvalidLayoutError
from src.service.seat_allocation.domain.seating_chart import Row, SeatClass, SeatingChart
from src.service.seat_allocation.domain.value_object import Gap, Seat
from src.service.seat_allocation.driven_adapter.layout.default_theater_layout import (
    DEFAULT_THEATER_LAYOUT,
)
from src.service.seat_allocation.driven_adapter.layout.seating_layout_schema import (
    SeatingLayout,
    SectionLayout,
)


def _build_seat_class(section: SectionLayout) -> SeatClass:
    rows = [
        Row(
            row_id=row.id,
            name=row.name,
            class_key=section.class_key,
            slots=[Seat(number=slot) if isinstance(slot, int) else Gap() for slot in row.seats],
        )
        for row in section.rows
    ]
    return SeatClass(
        key=section.class_key,
        label=section.label,
        rows=rows,
        base_row_id=section.base_row_id(),
    )


@Logger.io
def build_seating_chart(layout: Mapping[str, Any] | SeatingLayout) -> SeatingChart:
    """
    Validate a layout document and build the chart

    Raises:
        InvalidLayoutError: The document fails validation
    """
    try:
        document = (
            layout if isinstance(layout, SeatingLayout) else SeatingLayout.model_validate(layout)
        )
    except ValidationError as e:
        problems = '; '.join(
            f'{".".join(str(part) for part in error["loc"]) or "layout"}: {error["msg"]}'
            for error in e.errors()
        )
        raise InvalidLayoutError(f'Invalid seating layout: {problems}') from e

    chart = SeatingChart(_build_seat_class(section) for section in document.sections)
    Logger.base.info(
        f'🪑 [LAYOUT] Loaded {len(chart.classes)} classes, {chart.total_seats} seats'
        f'{f" from {document.name}" if document.name else ""}'
    )
    return chart


def load_seating_chart(path: str | Path) -> SeatingChart:
    """Read a layout JSON file and build the chart"""
    try:
        raw = orjson.loads(Path(path).read_bytes())
    except FileNotFoundError as e:
        raise InvalidLayoutError(f'Seating layout not found: {path}') from e
    except orjson.JSONDecodeError as e:
        raise InvalidLayoutError(f'Seating layout is not valid JSON: {e}') from e

    if not isinstance(raw, dict):
        raise InvalidLayoutError('Seating layout must be a JSON object')
    return build_seating_chart(raw)


def default_seating_chart() -> SeatingChart:
    return build_seating_chart(DEFAULT_THEATER_LAYOUT)
