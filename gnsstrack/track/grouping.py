"""Pair each location with the measurement batch that preceded it."""

from __future__ import annotations

from typing import Iterable, List

from gnsstrack.status.types import RawMeasurementSample
from gnsstrack.track.types import Fix, LogEntry, RawLocation
from gnsstrack.util.logging import get_logger

logger = get_logger(__name__)


def group_fixes(entries: Iterable[LogEntry]) -> List[Fix]:
    """Split an interleaved entry stream into fixes.

    Single pass and order dependent: measurements accumulate until a location
    arrives, which closes the batch. Fixes with no measurements are dropped,
    as is a trailing batch that no location ever closes.
    """
    fixes: List[Fix] = []
    pending: List[RawMeasurementSample] = []
    for entry in entries:
        if isinstance(entry, RawMeasurementSample):
            pending.append(entry)
        elif isinstance(entry, RawLocation):
            fixes.append(Fix(location=entry, measurements=tuple(pending)))
            pending = []
        else:
            raise TypeError(f"unsupported log entry {type(entry).__name__}")

    if pending:
        logger.debug("dropping %d trailing measurements with no closing location", len(pending))
    kept = [fix for fix in fixes if fix.measurements]
    if len(kept) != len(fixes):
        logger.debug("discarded %d locations without measurements", len(fixes) - len(kept))
    return kept
