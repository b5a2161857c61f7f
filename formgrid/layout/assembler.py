from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..models.config_models import ColumnOverflowPolicy, LayoutConfig
from ..models.layout import DraggableSection, FormLayout, SectionLayout
from .gap_fill import fill_row
from .grouping import group_rows

"""Section assembly: run grouping + gap filling over every section of a form.

Pure functions over an already fetched payload. Absent ``tempSections`` or
``tempFields`` are empty collections; nothing here raises on malformed input.
"""

__all__ = [
    "SECTIONS_KEY",
    "FIELDS_KEY",
    "json_key",
    "Reconstruction",
    "section_rows",
    "format_section",
    "format_sections",
    "format_form",
    "format_draggable_section",
    "format_draggable_sections",
    "reconstruct",
]

logger = logging.getLogger(__name__)

SECTIONS_KEY = "tempSections"
FIELDS_KEY = "tempFields"


def _hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def json_key(section_id: Any) -> str:
    """The object key ``json.dumps`` writes for a section id (1 and "1" both give "1")."""
    if isinstance(section_id, str):
        return section_id
    return json.dumps(section_id, default=str)


def _raw_sections(form: Mapping[str, Any] | None) -> list[Mapping[str, Any]]:
    if not form:
        return []
    raw = form.get(SECTIONS_KEY) or []
    if not isinstance(raw, list):
        logger.warning(f"{SECTIONS_KEY} is {type(raw).__name__}, expected list; treated as empty")
        return []
    sections = []
    for section in raw:
        if not isinstance(section, Mapping):
            logger.warning(f"skipping section of type {type(section).__name__}")
            continue
        if not _hashable(section.get("id")):
            logger.warning(f"skipping section with {type(section.get('id')).__name__} id")
            continue
        sections.append(section)
    return sections


def _raw_fields(section: Mapping[str, Any]) -> list[Any]:
    raw = section.get(FIELDS_KEY) or []
    if not isinstance(raw, list):
        logger.warning(
            f"section id={section.get('id')} {FIELDS_KEY} is {type(raw).__name__}; treated as empty"
        )
        return []
    return [f for f in raw if f is not None]


def section_rows(
    fields: Iterable[Any] | None, layout: LayoutConfig | None = None
) -> tuple[tuple[tuple[Any, ...], ...], tuple[Any, ...]]:
    """Rows and unplaced fields for one section's field collection."""
    layout = layout or LayoutConfig()
    rows = []
    unplaced: list[Any] = []
    for group in group_rows(fields):
        fill = fill_row(group, layout.column_overflow, layout.placeholder_type, layout.max_row_size)
        rows.append(fill.slots)
        unplaced.extend(fill.unplaced)
    return tuple(rows), tuple(unplaced)


def format_section(section: Mapping[str, Any], layout: LayoutConfig | None = None) -> SectionLayout:
    """Replace the raw field list of a section with its reconstructed rows."""
    rows, unplaced = section_rows(_raw_fields(section), layout)
    attributes = {k: v for k, v in section.items() if k != FIELDS_KEY}
    return SectionLayout(
        section_id=section.get("id"),
        attributes=attributes,
        rows=rows,
        unplaced=unplaced,
    )


def _json_twins(keys: Iterable[Any], section_id: Any) -> list[Any]:
    """Other ids that would land on the same JSON object key as ``section_id``."""
    key = json_key(section_id)
    return [k for k in keys if k != section_id and json_key(k) == key]


def format_sections(
    form: Mapping[str, Any] | None, layout: LayoutConfig | None = None
) -> dict[Any, SectionLayout]:
    """Map section id -> SectionLayout. A repeated id replaces the earlier section.

    Ids that differ in memory but share a JSON key (``1`` and ``"1"``) count as
    repeated too, so the written document never carries the same key twice.
    """
    sections: dict[Any, SectionLayout] = {}
    for raw in _raw_sections(form):
        section = format_section(raw, layout)
        sid = section.section_id
        if sid in sections:
            logger.warning(f"duplicate section id={sid}; later section wins")
        for twin in _json_twins(sections, sid):
            logger.warning(
                f"section ids {twin!r} and {sid!r} share JSON key \"{json_key(sid)}\"; later section wins"
            )
            del sections[twin]
        sections[sid] = section
    return sections


def format_form(form: Mapping[str, Any], layout: LayoutConfig | None = None) -> FormLayout:
    return FormLayout(
        id=form.get("id"),
        label=form.get("label"),
        last_modified=form.get("lastModified"),
        name=form.get("name"),
        type=form.get("type"),
        sections=format_sections(form, layout),
    )


def format_draggable_section(section: Mapping[str, Any]) -> DraggableSection:
    return DraggableSection(
        id=section.get("id"),
        name=section.get("name"),
        sortorder=section.get("sortorder"),
    )


def format_draggable_sections(
    sections: Iterable[Mapping[str, Any]] | None,
) -> dict[Any, DraggableSection]:
    """id -> {id, name, sortorder}, merged section by section; last value wins."""
    acc: dict[Any, DraggableSection] = {}
    for section in sections or ():
        if not isinstance(section, Mapping) or not _hashable(section.get("id")):
            continue
        projection = format_draggable_section(section)
        twins = _json_twins(acc, projection.id)
        acc = {**{k: v for k, v in acc.items() if k not in twins}, projection.id: projection}
    return acc


@dataclass(frozen=True)
class Reconstruction:
    """Both outputs of one reconstruction, handed over together."""
    form: FormLayout
    draggable_sections: dict[Any, DraggableSection]

    def to_dict(self) -> dict[str, Any]:
        return {
            "form": self.form.to_dict(),
            "draggable_sections": {k: v.to_dict() for k, v in self.draggable_sections.items()},
        }


def reconstruct(
    form: Mapping[str, Any], layout: LayoutConfig | ColumnOverflowPolicy | None = None
) -> Reconstruction:
    """Run the full pipeline for one fetched form payload."""
    if isinstance(layout, ColumnOverflowPolicy):
        layout = LayoutConfig(column_overflow=layout)
    return Reconstruction(
        form=format_form(form, layout),
        draggable_sections=format_draggable_sections(_raw_sections(form)),
    )
