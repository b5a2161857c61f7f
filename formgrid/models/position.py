from __future__ import annotations

from dataclasses import dataclass

"""FieldPosition model for the form layout reconstructor.

A position descriptor is authored per field as an option entry
``{"name": "position", "value": {"row": .., "col": .., "size": ..}}``.
Every component is optional. ``None`` is the explicit "unknown" tag for a row
or a column; unknown values always sort after known ones (see
``formgrid.layout.position.unknown_last``).
"""

__all__ = [
    "FieldPosition",
    "UNPOSITIONED",
    "DEFAULT_SIZE",
]

DEFAULT_SIZE = 1


@dataclass(frozen=True)
class FieldPosition:
    """Resolved placement of a single field.

    Attributes:
        row: Row key used for grouping. ``None`` means unknown row bucket
        col: 1-based column used for horizontal ordering. ``None`` means unknown
        size: Row width declared by the field (>= 1, default 1)
    """
    row: int | None
    col: int | None
    size: int = DEFAULT_SIZE

    @property
    def is_known(self) -> bool:
        return self.row is not None and self.col is not None


UNPOSITIONED = FieldPosition(row=None, col=None, size=DEFAULT_SIZE)
