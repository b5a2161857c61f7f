from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Processing result models for the form layout batch driver.

Aggregates per-form statistics into the figures printed on the SUMMARY line.
"""


@dataclass(frozen=True)
class FormStat:
    """Per-file processing statistics (internal helper for ProcessingResult)."""
    file_name: str  # ファイル名
    status: str  # success/failed
    form_id: str | None = None
    sections: int = 0
    rows: int = 0
    placeholders: int = 0
    unplaced_fields: int = 0
    output_path: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results and summary output for a layout run."""
    success_files: int  # 成功ファイル数
    failed_files: int  # 失敗ファイル数
    total_sections: int
    total_rows: int
    total_placeholders: int
    total_unplaced_fields: int
    start_time: datetime  # 全体開始
    end_time: datetime  # 全体終了
    elapsed_seconds: float  # end - start
    form_stats: list[FormStat] | None = None  # ファイル詳細

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files

    @staticmethod
    def from_stats(
        stats: list[FormStat], start_time: datetime, end_time: datetime
    ) -> ProcessingResult:
        """Fold per-file stats into a ProcessingResult."""
        ok = [s for s in stats if s.status == "success"]
        return ProcessingResult(
            success_files=len(ok),
            failed_files=len(stats) - len(ok),
            total_sections=sum(s.sections for s in ok),
            total_rows=sum(s.rows for s in ok),
            total_placeholders=sum(s.placeholders for s in ok),
            total_unplaced_fields=sum(s.unplaced_fields for s in ok),
            start_time=start_time,
            end_time=end_time,
            elapsed_seconds=(end_time - start_time).total_seconds(),
            form_stats=stats,
        )
