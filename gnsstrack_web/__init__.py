"""
gnsstrack Web — read-only Flask API over synthesized GNSS tracks.

This package serves, to the map-rendering layer:
- Track feature collections (one LineString + one Point per fix)
- Per-fix GNSS status detail for vessel inspection
- The carrier-frequency band catalog

Usage:
    from gnsstrack_web import create_app
    app = create_app(["gnss_raw.json"], include_demo=True)
    app.run(host="0.0.0.0", port=8080)
"""
from __future__ import annotations

__version__ = "0.1.0"

from gnsstrack_web.app import create_app

__all__ = ["create_app", "__version__"]
