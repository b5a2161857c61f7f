from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Config dataclasses for the form layout reconstructor.

These are the typed views built by ``formgrid.config.loader`` after the YAML
document passed schema validation.
"""

MAX_ROW_SIZE = 64


class ColumnOverflowPolicy(Enum):
    """What gap filling does with a column outside ``1..size``.

    - DROP: the field is not written into the row and is reported as unplaced
    - CLAMP: the column is clamped into ``1..size`` and written (last write wins)
    """
    DROP = "drop"
    CLAMP = "clamp"


@dataclass(frozen=True)
class LayoutConfig:
    """Reconstruction knobs."""
    column_overflow: ColumnOverflowPolicy = ColumnOverflowPolicy.DROP
    placeholder_type: str = "empty"
    max_row_size: int = MAX_ROW_SIZE  # authored sizes above this are capped


@dataclass(frozen=True)
class AppConfig:
    """Root configuration object for a layout run."""
    source_directory: str  # Directory scanned for form JSON files
    output_directory: str  # Directory receiving <stem>.layout.json files
    layout: LayoutConfig = field(default_factory=LayoutConfig)
