from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

"""Layout models produced by the reconstructor.

Authored fields travel through the pipeline as the raw mappings received from
the fetch collaborator, so every attribute the designer wrote reaches the
output untouched. Only placeholders are synthesized here.
"""

__all__ = [
    "PLACEHOLDER_TYPE",
    "POSITION_OPTION",
    "Placeholder",
    "RowGroup",
    "RowFill",
    "Slot",
    "SectionLayout",
    "DraggableSection",
    "FormLayout",
]

PLACEHOLDER_TYPE = "empty"
POSITION_OPTION = "position"

RawField = Mapping[str, Any]


@dataclass(frozen=True)
class Placeholder:
    """Synthetic content-less field filling a slot with no authored occupant."""
    row: int | None  # None: unknown row bucket
    col: int  # 1-based slot column
    size: int  # width of the owning row
    type: str = PLACEHOLDER_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "options": [
                {
                    "name": POSITION_OPTION,
                    "value": {"col": self.col, "row": self.row, "size": self.size},
                }
            ],
        }


Slot = Union[RawField, Placeholder]


@dataclass(frozen=True)
class RowGroup:
    """Fields sharing one row key, already in column order."""
    row: int | None  # None: unknown row bucket (always ordered last)
    fields: tuple[RawField, ...]

    @property
    def is_unknown(self) -> bool:
        return self.row is None


@dataclass(frozen=True)
class RowFill:
    """Gap-filled row plus authored fields that could not take a slot."""
    slots: tuple[Slot, ...]
    unplaced: tuple[RawField, ...] = ()

    @property
    def size(self) -> int:
        return len(self.slots)

    @property
    def placeholder_count(self) -> int:
        return sum(1 for s in self.slots if isinstance(s, Placeholder))


def _slot_to_dict(slot: Slot) -> Any:
    if isinstance(slot, Placeholder):
        return slot.to_dict()
    return slot


@dataclass(frozen=True)
class SectionLayout:
    """Section record with its raw field list replaced by derived rows.

    ``attributes`` holds every raw section attribute except ``tempFields``.
    """
    section_id: Any
    attributes: dict[str, Any]
    rows: tuple[tuple[Slot, ...], ...]
    unplaced: tuple[RawField, ...] = ()

    @property
    def placeholder_count(self) -> int:
        return sum(1 for row in self.rows for s in row if isinstance(s, Placeholder))

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.attributes)
        out["rows"] = [[_slot_to_dict(s) for s in row] for row in self.rows]
        return out


@dataclass(frozen=True)
class DraggableSection:
    """Lightweight projection used by drag-and-drop reordering."""
    id: Any
    name: Any
    sortorder: Any

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "sortorder": self.sortorder}


@dataclass(frozen=True)
class FormLayout:
    """Reconstructed form handed to the state-notification collaborator."""
    id: Any
    label: Any
    last_modified: Any
    name: Any
    type: Any
    sections: dict[Any, SectionLayout] = field(default_factory=dict)

    @property
    def row_count(self) -> int:
        return sum(len(s.rows) for s in self.sections.values())

    @property
    def placeholder_count(self) -> int:
        return sum(s.placeholder_count for s in self.sections.values())

    @property
    def unplaced_count(self) -> int:
        return sum(len(s.unplaced) for s in self.sections.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "lastModified": self.last_modified,
            "name": self.name,
            "sections": {sid: s.to_dict() for sid, s in self.sections.items()},
            "type": self.type,
        }
