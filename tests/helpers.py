from __future__ import annotations


def pos(row=None, col=None, size=None, **extra) -> dict:
    """Build a field with a position option (components left out when None)."""
    value = {k: v for k, v in (("row", row), ("col", col), ("size", size)) if v is not None}
    field = {"type": "text", "options": [{"name": "position", "value": value}]}
    field.update(extra)
    return field


def bare(**extra) -> dict:
    """Build a field without any position option."""
    field = {"type": "text", "options": []}
    field.update(extra)
    return field
