"""Layout reconstruction pipeline.

position -> grouping -> gap_fill -> assembler. Pure functions, no I/O.
"""

from .assembler import (
    Reconstruction,
    format_draggable_sections,
    format_form,
    format_sections,
    reconstruct,
)
from .gap_fill import fill_row
from .grouping import group_rows, sort_fields_by_column
from .position import field_column, field_position, field_row, field_size

__all__ = [
    "Reconstruction",
    "reconstruct",
    "format_form",
    "format_sections",
    "format_draggable_sections",
    "fill_row",
    "group_rows",
    "sort_fields_by_column",
    "field_position",
    "field_row",
    "field_column",
    "field_size",
]
