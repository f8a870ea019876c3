"""Raw GNSS log readers (JSON entry logs and native CSV captures)."""

from __future__ import annotations

import csv
import json
import math
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional

from gnsstrack.catalog.constellations import canonical_name
from gnsstrack.errors import MalformedLogEntry
from gnsstrack.status.types import RawMeasurementSample
from gnsstrack.track.types import LogEntry, RawLocation
from gnsstrack.util.logging import get_logger
from gnsstrack.util.time import epoch_ms_to_iso

logger = get_logger(__name__)

MEASUREMENT = "measurement"
LOCATION = "location"

# Column order written by the on-device capture module.
CSV_COLUMNS = (
    "timestamp",
    "datetime",
    "type",
    "latitude",
    "longitude",
    "altitude",
    "accuracy",
    "speed",
    "bearing",
    "provider",
    "svid",
    "constellation",
    "cn0DbHz",
    "carrierFrequencyHz",
    "timeNanos",
)


def _coerce(raw: Any, key: str, *, index: Optional[int], entry_type: str) -> float:
    if isinstance(raw, bool):
        raise MalformedLogEntry(f"'{key}' must be numeric, got {raw!r}", index=index, entry_type=entry_type)
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise MalformedLogEntry(f"'{key}' must be numeric, got {raw!r}", index=index, entry_type=entry_type) from None


def _blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def _number(entry: Mapping[str, Any], key: str, *, index: Optional[int], entry_type: str) -> Optional[float]:
    """Optional numeric field; blank or non-finite reads as absent."""
    raw = entry.get(key)
    if _blank(raw):
        return None
    value = _coerce(raw, key, index=index, entry_type=entry_type)
    return value if math.isfinite(value) else None


def _required_number(entry: Mapping[str, Any], key: str, *, index: Optional[int], entry_type: str) -> float:
    raw = entry.get(key)
    if _blank(raw):
        raise MalformedLogEntry(f"{entry_type} entry missing '{key}'", index=index, entry_type=entry_type)
    value = _coerce(raw, key, index=index, entry_type=entry_type)
    if not math.isfinite(value):
        raise MalformedLogEntry(f"'{key}' is not finite", index=index, entry_type=entry_type)
    return value


def _flag(entry: Mapping[str, Any], key: str) -> Optional[bool]:
    raw = entry.get(key)
    if raw is None or raw == "":
        return None
    if isinstance(raw, str):
        return raw.strip().lower() in ("1", "true", "yes")
    return bool(raw)


def parse_entry(entry: Any, index: Optional[int] = None) -> LogEntry:
    """Validate one raw entry and convert it into a typed value."""
    if not isinstance(entry, Mapping):
        raise MalformedLogEntry(f"expected an object, got {type(entry).__name__}", index=index)
    entry_type = str(entry.get("type") or "").strip().lower()

    if entry_type == MEASUREMENT:
        svid = _required_number(entry, "svid", index=index, entry_type=entry_type)
        return RawMeasurementSample(
            svid=int(svid),
            constellation=canonical_name(entry.get("constellation")),
            cn0_dbhz=_number(entry, "cn0DbHz", index=index, entry_type=entry_type),
            carrier_frequency_hz=_number(entry, "carrierFrequencyHz", index=index, entry_type=entry_type),
            elevation_deg=_number(entry, "elevation", index=index, entry_type=entry_type),
            azimuth_deg=_number(entry, "azimuth", index=index, entry_type=entry_type),
            used_in_fix=_flag(entry, "usedInFix"),
            time_nanos=_number(entry, "timeNanos", index=index, entry_type=entry_type),
        )

    if entry_type == LOCATION:
        latitude = _required_number(entry, "latitude", index=index, entry_type=entry_type)
        longitude = _required_number(entry, "longitude", index=index, entry_type=entry_type)
        time_ms = _required_number(entry, "time", index=index, entry_type=entry_type)
        if not -90.0 <= latitude <= 90.0 or not -180.0 <= longitude <= 180.0:
            raise MalformedLogEntry(
                f"coordinate out of range ({latitude}, {longitude})", index=index, entry_type=entry_type
            )
        try:
            epoch_ms_to_iso(time_ms)
        except (ValueError, OverflowError, OSError):
            raise MalformedLogEntry(
                f"time {time_ms!r} is outside the representable date range", index=index, entry_type=entry_type
            ) from None
        return RawLocation(
            latitude=latitude,
            longitude=longitude,
            time_ms=time_ms,
            provider=str(entry.get("provider") or ""),
            altitude_m=_number(entry, "altitude", index=index, entry_type=entry_type),
            accuracy_m=_number(entry, "accuracy", index=index, entry_type=entry_type),
            speed_mps=_number(entry, "speed", index=index, entry_type=entry_type),
            bearing_deg=_number(entry, "bearing", index=index, entry_type=entry_type),
        )

    raise MalformedLogEntry(f"unknown entry type {entry.get('type')!r}", index=index)


def parse_entries(entries: Iterable[Any]) -> List[LogEntry]:
    return [parse_entry(entry, idx) for idx, entry in enumerate(entries)]


def _csv_row_to_entry(row: Mapping[str, Optional[str]]) -> Dict[str, Any]:
    def cell(name: str) -> Optional[str]:
        value = row.get(name)
        if value is None:
            return None
        value = value.strip()
        return value or None

    entry_type = (cell("type") or "").lower()
    if entry_type == LOCATION:
        return {
            "type": LOCATION,
            "provider": cell("provider"),
            "latitude": cell("latitude"),
            "longitude": cell("longitude"),
            "time": cell("timestamp"),
            "altitude": cell("altitude"),
            "accuracy": cell("accuracy"),
            "speed": cell("speed"),
            "bearing": cell("bearing"),
        }
    return {
        "type": entry_type,
        "svid": cell("svid"),
        "constellation": cell("constellation"),
        "cn0DbHz": cell("cn0DbHz"),
        "carrierFrequencyHz": cell("carrierFrequencyHz"),
        "timeNanos": cell("timeNanos"),
    }


def read_csv_entries(lines: Iterable[str]) -> List[LogEntry]:
    """Parse a native capture CSV; entry indices count data rows from zero."""
    reader = csv.DictReader(lines)
    if reader.fieldnames is None:
        return []
    missing = {"type", "timestamp"} - set(reader.fieldnames)
    if missing:
        raise MalformedLogEntry(f"CSV header missing columns: {', '.join(sorted(missing))}")
    return [parse_entry(_csv_row_to_entry(row), idx) for idx, row in enumerate(reader)]


def read_json_entries(text: str) -> List[LogEntry]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedLogEntry(f"invalid JSON log: {exc}") from exc
    if isinstance(payload, Mapping):
        payload = payload.get("entries")
    if not isinstance(payload, list):
        raise MalformedLogEntry("JSON log must be an array of entries")
    return parse_entries(payload)


def _undecodable(path: str, exc: UnicodeDecodeError) -> MalformedLogEntry:
    return MalformedLogEntry(f"{path} is not UTF-8 text (byte offset {exc.start})")


def detect_format(path: str) -> str:
    suffix = os.path.splitext(path)[1].lower()
    if suffix == ".csv":
        return "csv"
    if suffix == ".json":
        return "json"
    try:
        with open(path, encoding="utf-8") as fh:
            head = fh.read(256).lstrip()
    except UnicodeDecodeError as exc:
        raise _undecodable(path, exc) from exc
    return "json" if head[:1] in ("[", "{") else "csv"


def load_log(path: str, fmt: str = "auto") -> List[LogEntry]:
    """Read a raw log from disk. ``fmt`` is ``auto``, ``json`` or ``csv``.

    Undecodable bytes are reported as MalformedLogEntry like any other bad
    input; only I/O failures surface as OSError.
    """
    resolved = detect_format(path) if fmt == "auto" else fmt
    if resolved not in ("json", "csv"):
        raise ValueError(f"unsupported log format {fmt!r}")
    try:
        with open(path, newline="", encoding="utf-8") as fh:
            if resolved == "csv":
                entries = read_csv_entries(fh)
            else:
                entries = read_json_entries(fh.read())
    except UnicodeDecodeError as exc:
        raise _undecodable(path, exc) from exc
    logger.debug("read %d entries from %s (%s)", len(entries), path, resolved, extra={"source": path})
    return entries
