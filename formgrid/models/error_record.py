from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for error logging.

This module defines the ErrorRecord dataclass used for structured error logging
while loading and writing form layouts. ``form_id`` is None when the failure
happened before the payload could be parsed (the id is unknown at that point).

The JSON Lines record shape is fixed: {timestamp, file, form_id, error_type, message}.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Form JSON filename being processed
        form_id: Form id from the payload, None if not yet known
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Error description
    """
    timestamp: str  # ISO8601 UTC
    file: str
    form_id: str | None  # 不明な場合 None
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, form_id: str | None, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp.

        Parameters:
            file: Form JSON filename being processed
            form_id: Form id, None when the payload could not be read
            error_type: Error classification in UPPER_SNAKE_CASE format
            message: Error description

        Returns:
            New ErrorRecord instance with current UTC timestamp
        """
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            form_id=form_id,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize ErrorRecord to JSON Lines format.

        Returns:
            JSON string representation without extra keys
        """
        # 追加キー阻止: dataclass -> dict して json.dumps
        return json.dumps(asdict(self), ensure_ascii=False)
