from __future__ import annotations

import json
import pathlib

import jsonschema
import pytest

from formgrid.models.error_record import ErrorRecord

"""Error log JSON schema contract test (contracts/error_log_schema.json)."""

SCHEMA_PATH = pathlib.Path(__file__).resolve().parents[2] / "contracts" / "error_log_schema.json"


@pytest.fixture(scope="module")
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "onboarding.json",
        "form_id": "7",
        "error_type": "WRITE_ERROR",
        "message": "failed to write layouts/onboarding.layout.json: disk full",
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_accepts_unknown_form_id(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "broken.json",
        "form_id": None,
        "error_type": "INVALID_JSON",
        "message": "line 1 col 2: Expecting property name enclosed in double quotes",
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_rejects_extra_key(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "broken.json",
        "form_id": None,
        "error_type": "INVALID_JSON",
        "message": "bad",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


def test_error_log_schema_rejects_lowercase_error_type(schema):
    record = {
        "timestamp": "2025-09-26T10:12:33Z",
        "file": "broken.json",
        "form_id": None,
        "error_type": "invalid_json",
        "message": "bad",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


@pytest.mark.parametrize(
    "error_type",
    ["FILE_NOT_FOUND", "READ_ERROR", "INVALID_JSON", "INVALID_FORM", "WRITE_ERROR", "UNEXPECTED_ERROR"],
)
def test_error_record_output_matches_schema(schema, error_type):
    rec = ErrorRecord.create("f.json", None, error_type, "message")
    jsonschema.validate(json.loads(rec.to_json_line()), schema)
