from __future__ import annotations

from collections import Counter
from datetime import UTC, datetime
from pathlib import Path

from formgrid.models.error_record import ErrorRecord

"""Per-run JSON Lines error log for forms that could not be read or written.

One ``logs/errors-YYYYMMDD-HHMMSS.log`` (UTC) per run, created on the first
flush that has records. Each line is an ErrorRecord and nothing else.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """Collects failed-form records in memory; flush() appends them to the run's file.

    The driver is serial, so there is no locking.
    """
    def __init__(self, logs_dir: Path | None = None) -> None:
        self._records: list[ErrorRecord] = []
        self._file_path: Path | None = None
        self._logs_dir = logs_dir or LOGS_DIR
        self._seen: Counter[str] = Counter()

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)
        self._seen[record.error_type] += 1

    def record(self, file: str, form_id: str | None, error_type: str, message: str) -> ErrorRecord:
        """Create a timestamped record for a failed form and buffer it."""
        rec = ErrorRecord.create(file=file, form_id=form_id, error_type=error_type, message=message)
        self.append(rec)
        return rec

    def counts_by_type(self) -> dict[str, int]:
        """error_type -> number of records appended this run (flushed or not)."""
        return dict(self._seen)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records. Returns the log path, or None if nothing was ever logged."""
        if not self._records:
            return self._file_path
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
