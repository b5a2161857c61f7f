# Shared pytest fixtures
from __future__ import annotations
import json
import tempfile
from pathlib import Path
import pytest

from tests.helpers import pos


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "forms").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("FORMGRID_CONFIG", raising=False)
        yield p

@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./forms
output_directory: ./layouts
layout:
  column_overflow: drop
"""

@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "formgrid.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg

@pytest.fixture()
def sample_form() -> dict:
    return {
        "id": 7,
        "label": "Onboarding",
        "lastModified": "2024-03-01T09:00:00Z",
        "name": "onboarding",
        "type": "internal",
        "tempSections": [
            {
                "id": 10,
                "name": "Identity",
                "sortorder": 1,
                "tempFields": [
                    pos(1, 2, 2, id="last_name"),
                    pos(1, 1, 2, id="first_name"),
                    pos(2, 2, 3, id="email"),
                    {"id": "notes", "type": "textarea", "options": []},
                ],
            },
            {
                "id": 11,
                "name": "Empty",
                "sortorder": 2,
                "tempFields": None,
            },
        ],
    }

@pytest.fixture()
def write_form(temp_workdir: Path):
    def _write(name: str, payload) -> Path:
        f = temp_workdir / "forms" / name
        if isinstance(payload, str):
            f.write_text(payload, encoding="utf-8")
        else:
            f.write_text(json.dumps(payload), encoding="utf-8")
        return f
    return _write
