"""Time utilities shared across gnsstrack components."""

from __future__ import annotations

from datetime import datetime, timezone


def epoch_ms_to_iso(epoch_ms: float) -> str:
    """Format epoch milliseconds as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    dt = datetime.fromtimestamp(float(epoch_ms) / 1000.0, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_to_epoch_ms(text: str) -> int:
    """Parse an ISO-8601 timestamp (``Z`` suffix allowed) into epoch milliseconds."""
    raw = text.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(round(dt.timestamp() * 1000))
