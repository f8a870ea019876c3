"""Raw measurement -> canonical satellite record."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from gnsstrack.catalog.constellations import canonical_name, constellation_code
from gnsstrack.config import DEFAULT_CONFIG, PipelineConfig
from gnsstrack.status.types import RawMeasurementSample, SatelliteInfo


def _present(value: Optional[float]) -> Optional[float]:
    # Producers report "no reading" as NaN.
    if value is None or not math.isfinite(value):
        return None
    return value


def _meets(cn0_dbhz: Optional[float], threshold: float) -> bool:
    # An absent reading is unknown, never a pass.
    return cn0_dbhz is not None and cn0_dbhz >= threshold


def normalize(sample: RawMeasurementSample, config: Optional[PipelineConfig] = None) -> SatelliteInfo:
    """Derive constellation code and capability flags for one measurement.

    ``usedInFix`` takes the producer's explicit flag when present and falls
    back to the usage threshold otherwise. ``hasEphemeris`` is the looser
    threshold or an explicit usage. ``hasAlmanac`` is always true because no
    source models almanac absence. Non-finite signal and frequency readings
    are carried as absent.
    """
    cfg = config or DEFAULT_CONFIG
    name = canonical_name(sample.constellation)
    cn0 = _present(sample.cn0_dbhz)
    explicit_used = bool(sample.used_in_fix)
    if sample.used_in_fix is None:
        used_in_fix = _meets(cn0, cfg.used_in_fix_cn0_dbhz)
    else:
        used_in_fix = explicit_used
    return SatelliteInfo(
        svid=int(sample.svid),
        constellation_type=constellation_code(name),
        constellation_name=name,
        cn0_dbhz=cn0,
        carrier_frequency_hz=_present(sample.carrier_frequency_hz),
        has_ephemeris=explicit_used or _meets(cn0, cfg.ephemeris_cn0_dbhz),
        has_almanac=True,
        used_in_fix=used_in_fix,
        elevation_deg=_present(sample.elevation_deg),
        azimuth_deg=_present(sample.azimuth_deg),
        time_nanos=sample.time_nanos,
    )


def normalize_batch(
    samples: Iterable[RawMeasurementSample], config: Optional[PipelineConfig] = None
) -> List[SatelliteInfo]:
    return [normalize(sample, config) for sample in samples]
