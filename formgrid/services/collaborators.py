from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..layout.assembler import Reconstruction, reconstruct
from ..models.config_models import LayoutConfig
from ..models.fetch_result import FetchResult

"""File-based collaborators around the reconstructor.

- fetch: ``read_form_file`` turns a form JSON document into a FetchResult
  (errors are values, never raised)
- notify: ``write_layout`` persists one Reconstruction as a single JSON document
- ``reconstruct_fetched`` wires them: reconstruct exactly once per successful
  fetch and hand the whole result to the notifier in one call
"""

__all__ = [
    "WriteError",
    "Notifier",
    "read_form_file",
    "write_layout",
    "reconstruct_fetched",
    "layout_output_path",
]

logger = logging.getLogger(__name__)

Notifier = Callable[[Reconstruction], Any]

LAYOUT_SUFFIX = ".layout.json"


class WriteError(Exception):
    """Raised when a reconstructed layout cannot be written."""


def read_form_file(path: Path) -> FetchResult:
    """Read one raw form payload.

    Error types: FILE_NOT_FOUND, READ_ERROR, INVALID_JSON, INVALID_FORM.
    """
    source = path.name
    if not path.is_file():
        return FetchResult.failure(source, "FILE_NOT_FOUND", f"file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return FetchResult.failure(source, "READ_ERROR", str(e))
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        return FetchResult.failure(source, "INVALID_JSON", f"line {e.lineno} col {e.colno}: {e.msg}")
    if not isinstance(payload, dict):
        return FetchResult.failure(
            source, "INVALID_FORM", f"expected a JSON object, got {type(payload).__name__}"
        )
    return FetchResult.success(source, payload)


def layout_output_path(source: Path, output_directory: Path) -> Path:
    return output_directory / f"{source.stem}{LAYOUT_SUFFIX}"


def write_layout(result: Reconstruction, out_path: Path) -> Path:
    """Persist form layout + draggable projection as one document."""
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
        out_path.write_text(text + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        raise WriteError(f"failed to write {out_path}: {e}") from e
    return out_path


def reconstruct_fetched(
    fetched: FetchResult,
    notify: Notifier,
    layout: LayoutConfig | None = None,
) -> Reconstruction | None:
    """Reconstruct a successful fetch and notify once; failed fetches never reach the reconstructor."""
    if not fetched.ok:
        logger.debug(f"{fetched.source}: fetch failed ({fetched.error_type}); reconstruction skipped")
        return None
    result = reconstruct(fetched.payload, layout)  # type: ignore[arg-type]
    notify(result)
    return result
