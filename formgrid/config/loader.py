from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import MAX_ROW_SIZE, AppConfig, ColumnOverflowPolicy, LayoutConfig

"""Config loader.

Responsibilities:
- Resolve the config path (--config > FORMGRID_CONFIG > config/formgrid.yml)
- Load YAML
- Validate against the bundled JSON schema (config_schema.json)
- Apply defaults (column_overflow=drop, placeholder_type=empty)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "resolve_config_path",
    "load_config",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/formgrid.yml")
CONFIG_ENV_VAR = "FORMGRID_CONFIG"


class ConfigError(Exception):
    pass


def resolve_config_path(explicit: str | Path | None = None) -> Path:
    if explicit:
        return Path(explicit)
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def _validate_config_schema(data: Any) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the config
            data fails validation (missing required keys, wrong types, extra keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    layout_raw = data.get("layout") or {}
    layout = LayoutConfig(
        column_overflow=ColumnOverflowPolicy(layout_raw.get("column_overflow", "drop")),
        placeholder_type=layout_raw.get("placeholder_type", "empty"),
        max_row_size=int(layout_raw.get("max_row_size", MAX_ROW_SIZE)),
    )
    return AppConfig(
        source_directory=data["source_directory"],
        output_directory=data["output_directory"],
        layout=layout,
    )
