"""Pipeline thresholds and their environment overrides.

The values here are the canonical set used by every stage. Variants of the
pipeline that need different limits build a PipelineConfig explicitly instead
of patching module constants.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


# Signal-quality thresholds (dB-Hz)
USED_IN_FIX_CN0_DBHZ: float = 30.0
EPHEMERIS_CN0_DBHZ: float = 20.0

# Absolute distance between an observed and a catalog carrier frequency (MHz)
BAND_TOLERANCE_MHZ: float = 1.0

KNOTS_PER_MPS: float = 1.94384

# Upper speed bounds (m/s), inclusive
SEA_STATE_CALM_MAX_MPS: float = 0.5
SEA_STATE_MODERATE_MAX_MPS: float = 3.0
NAV_ANCHORED_MAX_MPS: float = 0.3
NAV_MOORED_MAX_MPS: float = 1.0

API_LEVEL: int = 33
REGIONAL_CONSTELLATION: str = "NAVIC"


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value in (None, ""):
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value in (None, ""):
        return default
    try:
        return int(float(value))
    except ValueError:
        return default


@dataclass(frozen=True)
class PipelineConfig:
    """Named thresholds for normalization, aggregation and motion classification."""

    used_in_fix_cn0_dbhz: float = USED_IN_FIX_CN0_DBHZ
    ephemeris_cn0_dbhz: float = EPHEMERIS_CN0_DBHZ
    band_tolerance_mhz: float = BAND_TOLERANCE_MHZ
    knots_per_mps: float = KNOTS_PER_MPS
    sea_state_calm_max_mps: float = SEA_STATE_CALM_MAX_MPS
    sea_state_moderate_max_mps: float = SEA_STATE_MODERATE_MAX_MPS
    nav_anchored_max_mps: float = NAV_ANCHORED_MAX_MPS
    nav_moored_max_mps: float = NAV_MOORED_MAX_MPS
    api_level: int = API_LEVEL
    regional_constellation: str = REGIONAL_CONSTELLATION

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        return cls(
            used_in_fix_cn0_dbhz=_float_env("GNSSTRACK_USED_IN_FIX_CN0", USED_IN_FIX_CN0_DBHZ),
            ephemeris_cn0_dbhz=_float_env("GNSSTRACK_EPHEMERIS_CN0", EPHEMERIS_CN0_DBHZ),
            band_tolerance_mhz=_float_env("GNSSTRACK_BAND_TOLERANCE_MHZ", BAND_TOLERANCE_MHZ),
            sea_state_calm_max_mps=_float_env("GNSSTRACK_SEA_CALM_MAX_MPS", SEA_STATE_CALM_MAX_MPS),
            sea_state_moderate_max_mps=_float_env("GNSSTRACK_SEA_MODERATE_MAX_MPS", SEA_STATE_MODERATE_MAX_MPS),
            nav_anchored_max_mps=_float_env("GNSSTRACK_NAV_ANCHORED_MAX_MPS", NAV_ANCHORED_MAX_MPS),
            nav_moored_max_mps=_float_env("GNSSTRACK_NAV_MOORED_MAX_MPS", NAV_MOORED_MAX_MPS),
            api_level=_int_env("GNSSTRACK_API_LEVEL", API_LEVEL),
            regional_constellation=(os.getenv("GNSSTRACK_REGIONAL_CONSTELLATION") or REGIONAL_CONSTELLATION).upper(),
        )


DEFAULT_CONFIG = PipelineConfig()
