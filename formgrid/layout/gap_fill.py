from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models.config_models import MAX_ROW_SIZE, ColumnOverflowPolicy
from ..models.layout import PLACEHOLDER_TYPE, Placeholder, RowFill, RowGroup
from ..models.position import DEFAULT_SIZE
from .position import field_column, field_size

"""Row gap filling: turn one row group into a fixed-length slot sequence.

Policies:
- size comes from the first field of the row (column order); later sizes are ignored
- size is capped at max_row_size; columns past the cap then follow the overflow policy
- two fields on the same column: the later one wins, the earlier one is unplaced
- column outside 1..size: dropped (unplaced) or clamped, per ColumnOverflowPolicy
- unknown column: takes the leftmost slot still empty after positioned writes
- every remaining empty slot becomes a Placeholder {col, row, size}
"""

__all__ = [
    "row_size",
    "fill_row",
]

logger = logging.getLogger(__name__)


def _describe(field: Any) -> str:
    if isinstance(field, Mapping) and field.get("id") is not None:
        return f"id={field.get('id')}"
    return "id=?"


def row_size(group: RowGroup) -> int:
    """Width of the row as declared by its first field."""
    if not group.fields:
        return DEFAULT_SIZE
    return field_size(group.fields[0])


def fill_row(
    group: RowGroup,
    policy: ColumnOverflowPolicy = ColumnOverflowPolicy.DROP,
    placeholder_type: str = PLACEHOLDER_TYPE,
    max_row_size: int = MAX_ROW_SIZE,
) -> RowFill:
    """Build the complete slot sequence for one row group.

    Returns:
        RowFill whose ``slots`` has exactly ``min(row_size(group), max_row_size)``
        entries, none empty, and whose ``unplaced`` lists authored fields that
        did not get a slot.
    """
    size = row_size(group)
    if size > max_row_size:
        logger.warning(f"row={group.row} size={size} exceeds {max_row_size}; row capped")
        size = max_row_size
    slots: list[Any] = [None] * size
    unplaced: list[Any] = []
    floating: list[Any] = []

    for field in group.fields:
        col = field_column(field)
        if col is None:
            floating.append(field)
            continue
        if not 1 <= col <= size:
            if policy is ColumnOverflowPolicy.CLAMP:
                col = min(max(col, 1), size)
            else:
                logger.warning(
                    f"row={group.row} col={col} outside 1..{size}; field {_describe(field)} dropped"
                )
                unplaced.append(field)
                continue
        previous = slots[col - 1]
        if previous is not None:
            logger.warning(
                f"row={group.row} col={col} claimed twice; field {_describe(previous)} "
                f"replaced by {_describe(field)}"
            )
            unplaced.append(previous)
        slots[col - 1] = field

    for field in floating:
        try:
            free = slots.index(None)
        except ValueError:
            logger.warning(f"row={group.row} has no free slot; field {_describe(field)} dropped")
            unplaced.append(field)
            continue
        slots[free] = field

    filled = tuple(
        slot if slot is not None
        else Placeholder(row=group.row, col=index + 1, size=size, type=placeholder_type)
        for index, slot in enumerate(slots)
    )
    return RowFill(slots=filled, unplaced=tuple(unplaced))
