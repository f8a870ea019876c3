"""Carrier-frequency catalog and band classification."""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from gnsstrack.catalog.constellations import (
    BEIDOU,
    GALILEO,
    GLONASS,
    GPS,
    SBAS,
    UNKNOWN,
    canonical_name,
)
from gnsstrack.config import BAND_TOLERANCE_MHZ
from gnsstrack.util.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogBand:
    key: str
    constellation: str
    band: str
    frequency_mhz: float
    is_dual_frequency: bool


@dataclass(frozen=True)
class FrequencyBandInfo:
    """Classification of one observed carrier frequency."""

    frequency: float
    constellation: str
    band: str
    is_dual_frequency: bool

    def as_payload(self) -> Dict[str, Any]:
        return {
            "frequency": self.frequency,
            "constellation": self.constellation,
            "band": self.band,
            "isDualFrequency": self.is_dual_frequency,
        }


# Declaration order is the tie-break: GPS L5, GLONASS L5, Galileo E5a and SBAS L5
# all sit on 1176.45 MHz and classify as GPS L5; 1575.42 classifies as GPS L1 and
# 1207.14 as Galileo E5b.
DEFAULT_BANDS: Tuple[CatalogBand, ...] = (
    CatalogBand("GPS_L1", GPS, "L1", 1575.42, False),
    CatalogBand("GPS_L2", GPS, "L2", 1227.6, True),
    CatalogBand("GPS_L5", GPS, "L5", 1176.45, True),
    CatalogBand("GLONASS_L1_CENTER", GLONASS, "L1", 1602.0, False),
    CatalogBand("GLONASS_L2_CENTER", GLONASS, "L2", 1246.0, True),
    CatalogBand("GLONASS_L5", GLONASS, "L5", 1176.45, True),
    CatalogBand("GALILEO_E1", GALILEO, "E1", 1575.42, False),
    CatalogBand("GALILEO_E5a", GALILEO, "E5a", 1176.45, True),
    CatalogBand("GALILEO_E5b", GALILEO, "E5b", 1207.14, True),
    CatalogBand("BEIDOU_B1", BEIDOU, "B1", 1561.098, False),
    CatalogBand("BEIDOU_B2", BEIDOU, "B2", 1207.14, True),
    CatalogBand("BEIDOU_B3", BEIDOU, "B3", 1268.52, True),
    CatalogBand("SBAS_L1", SBAS, "L1", 1575.42, False),
    CatalogBand("SBAS_L5", SBAS, "L5", 1176.45, True),
)

CARRIER_FREQUENCIES_MHZ: Dict[str, float] = {b.key: b.frequency_mhz for b in DEFAULT_BANDS}


def _truthy(text: str) -> bool:
    return text.strip().lower() in ("1", "true", "yes", "y", "dual")


class GnssBandplan:
    """Ordered band catalog, optionally replaced by a CSV file.

    CSV columns: ``constellation,band,frequency_mhz,dual_frequency`` (plus an
    optional ``key``). Rows are kept in file order, which is also the
    tie-break order for classification.
    """

    def __init__(self, csv_path: Optional[str] = None):
        loaded: List[CatalogBand] = []
        if csv_path and os.path.exists(csv_path):
            loaded = self._load_csv(csv_path)
        self.bands: Tuple[CatalogBand, ...] = tuple(loaded) if loaded else DEFAULT_BANDS

    @staticmethod
    def _load_csv(path: str) -> List[CatalogBand]:
        bands: List[CatalogBand] = []
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for line_no, row in enumerate(reader, start=2):
                freq = row.get("frequency_mhz") or row.get("frequency")
                band = (row.get("band") or "").strip()
                if not freq or not band:
                    logger.warning("bandplan %s line %d: missing band or frequency, skipped", path, line_no)
                    continue
                try:
                    freq_mhz = float(freq)
                except ValueError:
                    logger.warning("bandplan %s line %d: bad frequency %r, skipped", path, line_no, freq)
                    continue
                constellation = canonical_name(row.get("constellation"))
                key = (row.get("key") or f"{constellation}_{band}").strip()
                bands.append(
                    CatalogBand(key, constellation, band, freq_mhz, _truthy(row.get("dual_frequency") or ""))
                )
        return bands

    def classify(self, frequency_mhz: float, tolerance_mhz: float = BAND_TOLERANCE_MHZ) -> FrequencyBandInfo:
        """Return the first catalog band within *tolerance_mhz* of *frequency_mhz*."""
        freq = float(frequency_mhz)
        for band in self.bands:
            if abs(freq - band.frequency_mhz) <= tolerance_mhz:
                return FrequencyBandInfo(freq, band.constellation, band.band, band.is_dual_frequency)
        return FrequencyBandInfo(freq, UNKNOWN, UNKNOWN, False)

    def serialize(self) -> Dict[str, Any]:
        return {
            "bands": [
                {
                    "key": b.key,
                    "constellation": b.constellation,
                    "band": b.band,
                    "frequencyMHz": b.frequency_mhz,
                    "isDualFrequency": b.is_dual_frequency,
                }
                for b in self.bands
            ]
        }


DEFAULT_BANDPLAN = GnssBandplan()


def classify_band(frequency_mhz: float, tolerance_mhz: float = BAND_TOLERANCE_MHZ) -> FrequencyBandInfo:
    return DEFAULT_BANDPLAN.classify(frequency_mhz, tolerance_mhz)
