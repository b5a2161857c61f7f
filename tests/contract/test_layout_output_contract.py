from __future__ import annotations

import json
import pathlib

import jsonschema
import pytest

from formgrid.layout.assembler import reconstruct
from tests.helpers import bare, pos

"""Layout document contract test (contracts/layout_output_schema.json)."""

SCHEMA_PATH = pathlib.Path(__file__).resolve().parents[2] / "contracts" / "layout_output_schema.json"


@pytest.fixture(scope="module")
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def _as_written(payload: dict) -> dict:
    # JSON を経由させて書き出し時と同じ形 (キーは文字列) にする
    return json.loads(json.dumps(reconstruct(payload).to_dict()))


def test_sample_form_matches_contract(schema, sample_form):
    jsonschema.validate(_as_written(sample_form), schema)


def test_form_without_sections_matches_contract(schema):
    doc = _as_written({"id": 1, "label": None, "name": "n"})
    jsonschema.validate(doc, schema)
    assert doc["form"]["sections"] == {}
    assert doc["draggable_sections"] == {}


def test_placeholders_match_placeholder_shape(schema):
    form = {
        "id": 1,
        "tempSections": [
            {"id": "s", "name": "S", "sortorder": 0, "tempFields": [pos(1, 3, 4), pos(col=2, size=3), bare()]}
        ],
    }
    doc = _as_written(form)
    jsonschema.validate(doc, schema)
    placeholder_validator = jsonschema.Draft202012Validator(
        {"$ref": "#/$defs/placeholder", "$defs": schema["$defs"]}
    )
    placeholders = [
        slot for row in doc["form"]["sections"]["s"]["rows"] for slot in row if slot.get("type") == "empty"
    ]
    # row1: 3 空き / 不明行 (size 3): bare が左端、col2 に既知列、col3 が空き
    assert len(placeholders) == 4
    for p in placeholders:
        placeholder_validator.validate(p)
