"""
Track API blueprint for gnsstrack Web.

Serves the cached, immutable track products: summaries, the rendering
FeatureCollection, and per-fix GNSS status detail.
"""
from __future__ import annotations

from flask import Blueprint, abort, current_app, jsonify, request

from gnsstrack.pipeline import TrackProduct
from gnsstrack_web.auth import require_auth

bp = Blueprint("api_tracks", __name__, url_prefix="/api/tracks")


def _product_or_404(track_id: str) -> TrackProduct:
    product = current_app._tracks.get(track_id)
    if product is None:
        abort(404, description=f"Track not found: {track_id}")
    return product


# ---------------------------------------------------------------------------
# Track list
# ---------------------------------------------------------------------------


@bp.get("")
def api_tracks_list():
    """List loaded tracks with their summaries."""
    require_auth()
    tracks = []
    for product in current_app._tracks.products():
        summary = product.track.summary()
        summary["source"] = product.source
        tracks.append(summary)
    return jsonify({"tracks": tracks})


# ---------------------------------------------------------------------------
# Feature collection
# ---------------------------------------------------------------------------


@bp.get("/<track_id>")
def api_track_features(track_id: str):
    """GeoJSON FeatureCollection: the LineString first, then one Point per fix."""
    require_auth()
    return jsonify(_product_or_404(track_id).features)


@bp.get("/<track_id>/status")
def api_track_status(track_id: str):
    """Path-level GNSS status; satellites are included only on request."""
    require_auth()
    track = _product_or_404(track_id).track
    include = request.args.get("satellites", "").strip().lower() in ("1", "true", "yes")
    return jsonify(track.path_status.as_payload(include_satellites=include))


# ---------------------------------------------------------------------------
# Per-fix detail
# ---------------------------------------------------------------------------


@bp.get("/<track_id>/fixes")
def api_track_fixes(track_id: str):
    require_auth()
    track = _product_or_404(track_id).track
    return jsonify({"trackId": track_id, "fixes": [point.as_payload() for point in track.points]})


@bp.get("/<track_id>/fixes/<int:fix_index>")
def api_track_fix(track_id: str, fix_index: int):
    require_auth()
    points = _product_or_404(track_id).track.points
    if fix_index >= len(points):
        abort(404, description=f"Fix {fix_index} not in track {track_id}")
    return jsonify(points[fix_index].as_payload())
