from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

from ..models.processing_result import FormStat

"""Progress bar over form files (tqdm, TTY only).

The bar shows the form currently being reconstructed and keeps running
ok/failed/unplaced counters in its postfix. Without a TTY nothing is drawn,
but the counters are still kept.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """One bar per run; ``start_form`` / ``finish_form`` bracket each file."""

    def __init__(self, total_forms: int, *, description: str = "Reconstructing forms") -> None:
        self.total_forms = total_forms
        self.description = description
        self.started = 0
        self.ok = 0
        self.failed = 0
        self.unplaced = 0

        self.pbar: TqdmType[Any] | None = None
        if is_tty_enabled():
            self.pbar = tqdm(
                total=total_forms,
                desc=description,
                unit="form",
                leave=True,
                ncols=80,
                ascii=True,
            )

    @property
    def enabled(self) -> bool:
        return self.pbar is not None

    def start_form(self, file_path: Path) -> None:
        self.started += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({file_path.name})")

    def finish_form(self, stat: FormStat) -> None:
        if stat.status == "success":
            self.ok += 1
            self.unplaced += stat.unplaced_fields
        else:
            self.failed += 1
        if self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)
            self.pbar.set_postfix(ok=self.ok, failed=self.failed, unplaced=self.unplaced)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
