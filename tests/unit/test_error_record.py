from __future__ import annotations

import json

import pytest

from formgrid.models.error_record import ErrorRecord


def test_error_record_create_sets_utc_timestamp():
    rec = ErrorRecord.create("form.json", "7", "INVALID_JSON", "line 1 col 2: Expecting value")
    assert rec.timestamp.endswith("Z")
    assert "T" in rec.timestamp
    assert rec.file == "form.json"
    assert rec.form_id == "7"


def test_error_record_unknown_form_id():
    rec = ErrorRecord.create("broken.json", None, "INVALID_JSON", "bad")
    data = json.loads(rec.to_json_line())
    assert data["form_id"] is None


def test_error_record_json_line_has_fixed_keys():
    rec = ErrorRecord.create("form.json", "7", "WRITE_ERROR", "disk full")
    data = json.loads(rec.to_json_line())
    assert set(data.keys()) == {"timestamp", "file", "form_id", "error_type", "message"}


def test_error_record_non_ascii_message_kept():
    rec = ErrorRecord.create("フォーム.json", None, "READ_ERROR", "読み込み失敗")
    line = rec.to_json_line()
    assert "フォーム.json" in line
    assert "読み込み失敗" in line


def test_error_record_is_immutable():
    rec = ErrorRecord.create("form.json", None, "READ_ERROR", "x")
    with pytest.raises(AttributeError):
        rec.message = "y"
