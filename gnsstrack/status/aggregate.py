"""Satellite records -> GNSS status summary."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from gnsstrack.catalog.bandplan import DEFAULT_BANDPLAN, GnssBandplan
from gnsstrack.config import DEFAULT_CONFIG, PipelineConfig
from gnsstrack.status.types import GnssStatusResult, SatelliteInfo
from gnsstrack.util.math import mean_or_zero, round_fixed, sorted_unique


def carrier_frequencies_mhz(satellites: Sequence[SatelliteInfo]) -> List[float]:
    """Distinct carrier frequencies in MHz, rounded to 3 decimals, ascending."""
    rounded = [
        round_fixed(sat.carrier_frequency_hz / 1_000_000.0, 3)
        for sat in satellites
        if sat.carrier_frequency_hz is not None
    ]
    return sorted_unique(rounded)


def aggregate(
    satellites: Sequence[SatelliteInfo],
    *,
    synthetic: bool = False,
    config: Optional[PipelineConfig] = None,
    bandplan: Optional[GnssBandplan] = None,
) -> GnssStatusResult:
    """Summarize one satellite batch.

    ``synthetic`` marks generated data, which always reports GNSS support even
    for an empty batch. Empty input otherwise yields an all-zero result.
    """
    cfg = config or DEFAULT_CONFIG
    plan = bandplan or DEFAULT_BANDPLAN
    sats = tuple(satellites)

    cn0_samples = [sat.cn0_dbhz for sat in sats if sat.cn0_dbhz is not None]

    counts: Dict[str, int] = {}
    for sat in sats:
        counts[sat.constellation_name] = counts.get(sat.constellation_name, 0) + 1
    supported = tuple(counts.keys())

    frequencies = carrier_frequencies_mhz(sats)
    bands = tuple(plan.classify(freq, cfg.band_tolerance_mhz) for freq in frequencies)
    used = sum(1 for sat in sats if sat.used_in_fix)

    return GnssStatusResult(
        is_gnss_supported=True if synthetic else len(sats) > 0,
        is_dual_frequency_supported=any(band.is_dual_frequency for band in bands),
        is_navic_supported=cfg.regional_constellation in supported,
        satellites_visible=len(sats),
        satellites_used_in_fix=used,
        average_signal_to_noise_ratio=mean_or_zero(cn0_samples, 1),
        supported_constellations=supported,
        carrier_frequencies=tuple(frequencies),
        frequency_bands=bands,
        satellites=sats,
        constellation_counts=tuple(counts.items()),
        api_level=cfg.api_level,
        supports_cn0=len(cn0_samples) > 0,
        supports_carrier_freq=len(frequencies) > 0,
    )
