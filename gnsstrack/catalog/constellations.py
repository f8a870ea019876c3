"""Constellation names and their numeric codes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

GPS = "GPS"
SBAS = "SBAS"
GLONASS = "GLONASS"
QZSS = "QZSS"
BEIDOU = "BEIDOU"
GALILEO = "GALILEO"
NAVIC = "NAVIC"
UNKNOWN = "UNKNOWN"

# Numbering follows the Android GnssStatus CONSTELLATION_* constants.
CONSTELLATION_CODES: Mapping[str, int] = MappingProxyType(
    {
        UNKNOWN: 0,
        GPS: 1,
        SBAS: 2,
        GLONASS: 3,
        QZSS: 4,
        BEIDOU: 5,
        GALILEO: 6,
        NAVIC: 7,
    }
)

_NAMES_BY_CODE: Mapping[int, str] = MappingProxyType({code: name for name, code in CONSTELLATION_CODES.items()})

# Alternate spellings emitted by log producers.
_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "IRNSS": NAVIC,
        "COMPASS": BEIDOU,
        "BDS": BEIDOU,
        "GAL": GALILEO,
        "GLO": GLONASS,
    }
)


def canonical_name(raw: Any) -> str:
    """Map a producer's constellation label onto a catalog name; anything else is UNKNOWN."""
    if raw is None:
        return UNKNOWN
    if isinstance(raw, int) and not isinstance(raw, bool):
        return _NAMES_BY_CODE.get(raw, UNKNOWN)
    text = str(raw).strip().upper()
    if not text:
        return UNKNOWN
    text = _ALIASES.get(text, text)
    return text if text in CONSTELLATION_CODES else UNKNOWN


def constellation_code(name: Any) -> int:
    return CONSTELLATION_CODES[canonical_name(name)]
