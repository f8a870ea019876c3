"""Typed failures raised by the log readers."""

from __future__ import annotations

from typing import Optional


class MalformedLogEntry(ValueError):
    """A raw log entry is missing, or has unusable, fields required by its type."""

    def __init__(self, message: str, *, index: Optional[int] = None, entry_type: Optional[str] = None):
        self.index = index
        self.entry_type = entry_type
        prefix = f"entry {index}: " if index is not None else ""
        super().__init__(f"{prefix}{message}")
