from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..models.layout import POSITION_OPTION
from ..models.position import DEFAULT_SIZE, UNPOSITIONED, FieldPosition

"""Position accessor: read {row, col, size} from a field's option list.

Total over any input. Missing or malformed metadata never raises; it resolves
to the unknown row/column tag (``None``) and to ``size == 1``.
"""

__all__ = [
    "find_position_option",
    "field_position",
    "field_row",
    "field_column",
    "field_size",
    "unknown_last",
]


def _as_int(value: Any) -> int | None:
    """Accept ints and integral floats. bool is rejected even though it subclasses int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def find_position_option(field: Any) -> Mapping[str, Any] | None:
    """Return the ``value`` of the first ``position`` option, or None."""
    if not isinstance(field, Mapping):
        return None
    options = field.get("options")
    if not isinstance(options, list):
        return None
    for option in options:
        if isinstance(option, Mapping) and option.get("name") == POSITION_OPTION:
            value = option.get("value")
            return value if isinstance(value, Mapping) else None
    return None


def field_position(field: Any) -> FieldPosition:
    """Resolve the full position descriptor of a field."""
    value = find_position_option(field)
    if value is None:
        return UNPOSITIONED
    size = _as_int(value.get("size"))
    if size is None or size < 1:
        size = DEFAULT_SIZE
    return FieldPosition(
        row=_as_int(value.get("row")),
        col=_as_int(value.get("col")),
        size=size,
    )


def field_row(field: Any) -> int | None:
    return field_position(field).row


def field_column(field: Any) -> int | None:
    return field_position(field).col


def field_size(field: Any) -> int:
    return field_position(field).size


def unknown_last(value: int | None) -> tuple[int, int]:
    """Sort key placing every known value before the unknown (None) tag."""
    if value is None:
        return (1, 0)
    return (0, value)
