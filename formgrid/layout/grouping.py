from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..models.layout import RowGroup
from .position import field_column, field_row, unknown_last

"""Row grouping & ordering.

Fields are sorted by column first so that every group already lists its
fields left to right; gap filling then only needs positions, never a re-sort.
"""

__all__ = [
    "sort_fields_by_column",
    "group_rows",
]


def sort_fields_by_column(fields: Iterable[Any]) -> list[Any]:
    """Stable sort by column ascending, unknown column last."""
    return sorted(fields, key=lambda f: unknown_last(field_column(f)))


def group_rows(fields: Iterable[Any] | None) -> list[RowGroup]:
    """Group a section's fields into ordered row groups.

    Steps:
    1. Stable sort by column (ties keep encounter order)
    2. Bucket by row key, keeping the column order inside each bucket
    3. Order buckets by row ascending; the unknown row bucket is always last

    An empty or absent field collection yields no groups.
    """
    buckets: dict[int | None, list[Any]] = {}
    for f in sort_fields_by_column(fields or ()):
        buckets.setdefault(field_row(f), []).append(f)

    ordered_keys = sorted(buckets, key=unknown_last)
    return [RowGroup(row=key, fields=tuple(buckets[key])) for key in ordered_keys]
