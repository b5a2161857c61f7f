from __future__ import annotations

from dataclasses import dataclass
from typing import Any

"""FetchResult model: explicit success/error value returned by the fetch collaborator.

The reconstructor only ever runs against ``ok`` results; failures are carried
as values so the caller can log and count them without exception handling.
"""

__all__ = [
    "FetchResult",
]


@dataclass(frozen=True)
class FetchResult:
    """Outcome of retrieving one raw form payload.

    Attributes:
        source: Where the payload came from (file name, form id, ...)
        payload: Raw form mapping when ok, otherwise None
        error_type: UPPER_SNAKE error classification when not ok
        message: Human readable error description when not ok
    """
    source: str
    payload: dict[str, Any] | None = None
    error_type: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_type is None and self.payload is not None

    @staticmethod
    def success(source: str, payload: dict[str, Any]) -> FetchResult:
        return FetchResult(source=source, payload=payload)

    @staticmethod
    def failure(source: str, error_type: str, message: str) -> FetchResult:
        return FetchResult(source=source, error_type=error_type, message=message)
