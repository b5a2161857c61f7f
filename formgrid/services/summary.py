from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""Summary line rendering service.

Format:
SUMMARY files={total}/{total} success={success} failed={failed} sections={sections}
rows={rows} placeholders={placeholders} unplaced={unplaced} elapsed_sec={elapsed}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Format very small numbers to avoid scientific notation
        return f"{value:.6f}".rstrip('0').rstrip('.')
    return str(round(value, 3))


def render_summary_line(result: ProcessingResult) -> str:
    """Render a SUMMARY line from ProcessingResult.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_sections=2, total_rows=5,
        ...     total_placeholders=3, total_unplaced_fields=0,
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY files=1/1 success=1 failed=0 sections=2 rows=5 placeholders=3 unplaced=0 elapsed_sec=2'
    """
    total = result.total_files
    return (
        f"SUMMARY files={total}/{total} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"sections={result.total_sections} "
        f"rows={result.total_rows} "
        f"placeholders={result.total_placeholders} "
        f"unplaced={result.total_unplaced_fields} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
