"""
Blueprints package for gnsstrack Web.

This package contains Flask blueprints that organize routes by function:
- api_debug: Health and observability endpoints (/api/health, /api/debug/*)
- api_tracks: Track feature collections and per-fix status (/api/tracks/*)
- api_bands: Band catalog and frequency classification (/api/bands/*)
"""
from __future__ import annotations
