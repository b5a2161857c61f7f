from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from formgrid.models.fetch_result import FetchResult
from formgrid.models.layout import FormLayout, Placeholder, RowFill, SectionLayout
from formgrid.models.position import FieldPosition
from formgrid.models.processing_result import FormStat, ProcessingResult


def test_placeholder_wire_shape():
    p = Placeholder(row=2, col=3, size=4)
    assert p.to_dict() == {
        "type": "empty",
        "options": [{"name": "position", "value": {"col": 3, "row": 2, "size": 4}}],
    }


def test_placeholder_is_immutable():
    p = Placeholder(row=1, col=1, size=1)
    with pytest.raises(AttributeError):
        p.col = 2


def test_field_position_is_immutable():
    p = FieldPosition(row=1, col=1, size=1)
    with pytest.raises(AttributeError):
        p.row = 5


def test_row_fill_counts():
    fill = RowFill(slots=({"id": "a"}, Placeholder(row=1, col=2, size=2)))
    assert fill.size == 2
    assert fill.placeholder_count == 1
    assert fill.unplaced == ()


def test_section_layout_to_dict_serializes_placeholders_only():
    field = {"id": "a", "type": "text"}
    section = SectionLayout(
        section_id=5,
        attributes={"id": 5, "name": "Main"},
        rows=((field, Placeholder(row=1, col=2, size=2)),),
    )
    out = section.to_dict()
    assert out["rows"][0][0] is field
    assert out["rows"][0][1]["type"] == "empty"
    assert section.placeholder_count == 1
    # attributes は元のまま
    assert "rows" not in section.attributes


def test_form_layout_counts_and_keys():
    s1 = SectionLayout(section_id=1, attributes={"id": 1}, rows=(({"id": "x"},),), unplaced=({"id": "y"},))
    s2 = SectionLayout(section_id=2, attributes={"id": 2}, rows=((Placeholder(row=1, col=1, size=1),),) * 2)
    form = FormLayout(id=9, label="l", last_modified="m", name="n", type="t", sections={1: s1, 2: s2})
    assert form.row_count == 3
    assert form.placeholder_count == 2
    assert form.unplaced_count == 1
    out = form.to_dict()
    assert out["lastModified"] == "m"
    assert list(out["sections"]) == [1, 2]


def test_fetch_result_success_and_failure():
    ok = FetchResult.success("a.json", {"id": 1})
    assert ok.ok is True
    assert ok.error_type is None

    bad = FetchResult.failure("b.json", "INVALID_JSON", "line 1 col 1: Expecting value")
    assert bad.ok is False
    assert bad.payload is None
    assert bad.message.startswith("line 1")


def test_processing_result_from_stats():
    start = datetime(2024, 1, 1, tzinfo=UTC)
    end = start + timedelta(seconds=1.5)
    stats = [
        FormStat(file_name="a.json", status="success", sections=2, rows=5, placeholders=3, unplaced_fields=1),
        FormStat(file_name="b.json", status="failed", error="boom"),
        FormStat(file_name="c.json", status="success", sections=1, rows=1),
    ]
    result = ProcessingResult.from_stats(stats, start, end)
    assert result.success_files == 2
    assert result.failed_files == 1
    assert result.total_files == 3
    assert result.total_sections == 3
    assert result.total_rows == 6
    assert result.total_placeholders == 3
    assert result.total_unplaced_fields == 1
    assert result.elapsed_seconds == 1.5
    assert result.form_stats is stats


def test_processing_result_empty():
    now = datetime.now(UTC)
    result = ProcessingResult.from_stats([], now, now)
    assert result.total_files == 0
    assert result.elapsed_seconds == 0
