"""
Debug API blueprint for gnsstrack Web.

Provides a health check and access to the recent error ring.
"""
from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from gnsstrack_web import __version__
from gnsstrack_web.auth import require_auth

bp = Blueprint("api_debug", __name__)


@bp.get("/api/health")
def api_health():
    """Liveness check; no auth so load balancers can hit it."""
    return jsonify(
        {
            "ok": True,
            "version": __version__,
            "tracks": len(current_app._tracks),
        }
    )


@bp.get("/api/debug/errors")
def api_debug_errors():
    require_auth()
    ring = list(current_app._error_ring)
    return jsonify({"errors": ring, "count": len(ring), "max": current_app._error_ring_max})


@bp.delete("/api/debug/errors")
def api_debug_errors_clear():
    require_auth()
    current_app._error_ring.clear()
    return jsonify({"ok": True})
