from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from ..layout.assembler import Reconstruction
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import AppConfig
from ..models.processing_result import FormStat, ProcessingResult
from .collaborators import (
    WriteError,
    layout_output_path,
    read_form_file,
    reconstruct_fetched,
    write_layout,
)
from .progress import ProgressTracker

"""Service orchestration for a layout run.

Scans the source directory for form JSON files, reconstructs each one, writes
the layout next to the others in the output directory and aggregates metrics.
A failing file is logged to the JSON Lines error log and counted; it never
stops the run.
"""

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Fatal error that prevents the run from starting."""
    pass


def scan_form_files(directory: Path) -> list[Path]:
    """Scan directory for .json form files (non-recursive, sorted by name).

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == ".json")
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def _trace(file_name: str, payload: dict, result: Reconstruction) -> None:
    """DEBUG trace of one reconstruction: input shape, then output layout."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    raw_sections = payload.get("tempSections") or []
    logger.debug(
        f"file={file_name} form_id={payload.get('id')} "
        f"raw_sections={len(raw_sections) if isinstance(raw_sections, list) else 0}"
    )
    logger.debug(f"file={file_name} layout={json.dumps(result.to_dict(), ensure_ascii=False)}")


def process_file(
    file_path: Path,
    config: AppConfig,
    error_log: ErrorLogBuffer,
) -> FormStat:
    """Fetch, reconstruct and write a single form file."""
    fetched = read_form_file(file_path)
    if not fetched.ok:
        logger.error(f"{file_path.name}: {fetched.error_type} {fetched.message}")
        error_log.record(
            file_path.name, None, fetched.error_type or "UNEXPECTED_ERROR", fetched.message or ""
        )
        return FormStat(file_name=file_path.name, status="failed", error=fetched.message)

    form_id = fetched.payload.get("id") if fetched.payload else None
    form_id = None if form_id is None else str(form_id)
    out_path = layout_output_path(file_path, Path(config.output_directory))
    written: list[Path] = []

    def notify(result: Reconstruction) -> None:
        written.append(write_layout(result, out_path))

    try:
        result = reconstruct_fetched(fetched, notify, config.layout)
    except WriteError as e:
        logger.error(f"{file_path.name}: {e}")
        error_log.record(file_path.name, form_id, "WRITE_ERROR", str(e))
        return FormStat(file_name=file_path.name, status="failed", form_id=form_id, error=str(e))
    except Exception as e:
        # Unexpected errors
        message = f"{type(e).__name__}: {e}"
        logger.error(f"{file_path.name}: UNEXPECTED_ERROR {message}")
        error_log.record(file_path.name, form_id, "UNEXPECTED_ERROR", message)
        return FormStat(file_name=file_path.name, status="failed", form_id=form_id, error=message)

    if result is None:
        # reconstruct_fetched は失敗 fetch でのみ None
        return FormStat(file_name=file_path.name, status="failed", form_id=form_id, error=fetched.message)

    _trace(file_path.name, fetched.payload or {}, result)

    form = result.form
    return FormStat(
        file_name=file_path.name,
        status="success",
        form_id=form_id,
        sections=len(form.sections),
        rows=form.row_count,
        placeholders=form.placeholder_count,
        unplaced_fields=form.unplaced_count,
        output_path=str(written[0]) if written else None,
    )


def process_all(config: AppConfig, error_log: ErrorLogBuffer | None = None) -> ProcessingResult:
    """Process all form files in the configured source directory.

    Raises:
        ProcessingError: If the source directory is missing or unreadable
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()

    file_paths = scan_form_files(Path(config.source_directory))
    if not file_paths:
        return ProcessingResult.from_stats([], start_time, datetime.now(UTC))

    stats: list[FormStat] = []
    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_form(file_path)
            stat = process_file(file_path, config, error_log)
            stats.append(stat)
            if stat.status == "success":
                logger.debug(
                    f"file={stat.file_name} sections={stat.sections} rows={stat.rows} "
                    f"placeholders={stat.placeholders} unplaced={stat.unplaced_fields}"
                )
            progress.finish_form(stat)

    # Flush error log once per run
    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning(f"error log flush failed: {e}")
    else:
        if log_path is not None:
            logger.info(f"error log: {log_path}")
            by_type = " ".join(f"{k}={v}" for k, v in sorted(error_log.counts_by_type().items()))
            logger.info(f"errors by type: {by_type}")

    return ProcessingResult.from_stats(stats, start_time, datetime.now(UTC))
