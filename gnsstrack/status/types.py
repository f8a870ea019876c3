"""Dataclasses shared by the normalizer, aggregator and track layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from gnsstrack.catalog.bandplan import FrequencyBandInfo


@dataclass(frozen=True)
class RawMeasurementSample:
    svid: int
    constellation: str
    cn0_dbhz: Optional[float] = None
    carrier_frequency_hz: Optional[float] = None
    elevation_deg: Optional[float] = None
    azimuth_deg: Optional[float] = None
    used_in_fix: Optional[bool] = None  # None: infer from signal strength
    time_nanos: Optional[float] = None


@dataclass(frozen=True)
class SatelliteInfo:
    svid: int
    constellation_type: int
    constellation_name: str
    cn0_dbhz: Optional[float]
    carrier_frequency_hz: Optional[float]
    has_ephemeris: bool
    has_almanac: bool
    used_in_fix: bool
    elevation_deg: Optional[float] = None
    azimuth_deg: Optional[float] = None
    time_nanos: Optional[float] = None

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "svid": self.svid,
            "constellationType": self.constellation_type,
            "constellationName": self.constellation_name,
            "cn0DbHz": self.cn0_dbhz,
            "carrierFrequencyHz": self.carrier_frequency_hz,
            "hasEphemeris": self.has_ephemeris,
            "hasAlmanac": self.has_almanac,
            "usedInFix": self.used_in_fix,
        }
        if self.elevation_deg is not None:
            payload["elevation"] = self.elevation_deg
        if self.azimuth_deg is not None:
            payload["azimuth"] = self.azimuth_deg
        if self.time_nanos is not None:
            payload["timeNanos"] = self.time_nanos
        return payload


@dataclass(frozen=True)
class GnssStatusResult:
    is_gnss_supported: bool
    is_dual_frequency_supported: bool
    is_navic_supported: bool
    satellites_visible: int
    satellites_used_in_fix: int
    average_signal_to_noise_ratio: float
    supported_constellations: Tuple[str, ...]
    carrier_frequencies: Tuple[float, ...]
    frequency_bands: Tuple[FrequencyBandInfo, ...]
    satellites: Tuple[SatelliteInfo, ...]
    constellation_counts: Tuple[Tuple[str, int], ...] = ()
    api_level: Optional[int] = None
    supports_cn0: Optional[bool] = None
    supports_carrier_freq: Optional[bool] = None

    def as_payload(self, *, include_satellites: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "isGNSSSupported": self.is_gnss_supported,
            "isDualFrequencySupported": self.is_dual_frequency_supported,
            "isNavICSupported": self.is_navic_supported,
            "satellitesVisible": self.satellites_visible,
            "satellitesUsedInFix": self.satellites_used_in_fix,
            "averageSignalToNoiseRatio": self.average_signal_to_noise_ratio,
            "supportedConstellations": list(self.supported_constellations),
            "carrierFrequencies": list(self.carrier_frequencies),
            "frequencyBands": [band.as_payload() for band in self.frequency_bands],
            "constellationCounts": dict(self.constellation_counts),
            "apiLevel": self.api_level,
            "supportsCn0": self.supports_cn0,
            "supportsCarrierFreq": self.supports_carrier_freq,
        }
        if include_satellites:
            payload["satellites"] = [sat.as_payload() for sat in self.satellites]
        return payload
