"""
Configuration constants and environment parsing for gnsstrack Web.

All GNSSTRACK_* web settings are parsed here and exported as module-level
constants. Blueprints import from this module rather than reading os.environ
directly.
"""
from __future__ import annotations

import os
from typing import List


def _int_env(name: str, default: int) -> int:
    """Parse an integer from environment, returning default on missing/invalid."""
    val = os.getenv(name)
    if not val:
        return default
    try:
        return max(1, int(float(val)))
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def _paths_env(name: str) -> List[str]:
    val = os.getenv(name, "")
    return [p for p in val.split(os.pathsep) if p.strip()]


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------
API_TOKEN: str = os.getenv("GNSSTRACK_TOKEN", "")
"""Optional bearer token protecting /api/* endpoints."""


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------
LOG_PATHS: List[str] = _paths_env("GNSSTRACK_LOGS")
"""Raw log files loaded at startup (os.pathsep separated)."""

INCLUDE_DEMO: bool = _bool_env("GNSSTRACK_DEMO", False)
"""Serve the built-in synthetic tracks alongside loaded logs."""

BANDPLAN_PATH: str = os.getenv("GNSSTRACK_BANDPLAN", "")
"""Optional band catalog CSV replacing the built-in table."""


# ---------------------------------------------------------------------------
# Observability
# ---------------------------------------------------------------------------
ERROR_RING_MAX: int = _int_env("GNSSTRACK_ERROR_RING_MAX", 100)
"""Number of recent unhandled errors kept for /api/debug/errors."""
