"""Domain models for the form layout reconstructor.

This package contains the position descriptor, the derived layout records and
the bookkeeping models used by the batch driver.
"""

from .config_models import AppConfig, ColumnOverflowPolicy, LayoutConfig
from .fetch_result import FetchResult
from .layout import (
    DraggableSection,
    FormLayout,
    Placeholder,
    RowFill,
    RowGroup,
    SectionLayout,
)
from .position import UNPOSITIONED, FieldPosition

__all__ = [
    # Configuration models
    "AppConfig",
    "ColumnOverflowPolicy",
    "LayoutConfig",
    # Layout models
    "FieldPosition",
    "UNPOSITIONED",
    "Placeholder",
    "RowGroup",
    "RowFill",
    "SectionLayout",
    "DraggableSection",
    "FormLayout",
    # Collaborator values
    "FetchResult",
]
