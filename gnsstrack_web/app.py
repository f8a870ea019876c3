"""
Application factory for gnsstrack Web.

Loads the configured sources once, then wires blueprints, error handling and
request timing around the cached, read-only track registry.
"""
from __future__ import annotations

import traceback as tb
from datetime import datetime, timezone
from time import perf_counter
from typing import Optional, Sequence

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from gnsstrack.catalog.bandplan import GnssBandplan
from gnsstrack.config import PipelineConfig
from gnsstrack.pipeline import TrackRegistry, demo_tracks, load_track
from gnsstrack.track.types import TrackIdentity
from gnsstrack.util.logging import get_logger
from gnsstrack_web.config import API_TOKEN, BANDPLAN_PATH, ERROR_RING_MAX, INCLUDE_DEMO, LOG_PATHS

logger = get_logger("gnsstrack_web")


def _identity_for(path: str, index: int, count: int) -> TrackIdentity:
    # A single log keeps the default id.
    if count == 1:
        return TrackIdentity()
    return TrackIdentity(track_id=f"native-module-log-track-{index + 1}", leg_name=f"Onboard GNSS Capture ({path})")


def create_app(
    log_paths: Optional[Sequence[str]] = None,
    *,
    include_demo: Optional[bool] = None,
    bandplan_path: Optional[str] = None,
    api_token: Optional[str] = None,
) -> Flask:
    """Create and configure the Flask application.

    A malformed log raises MalformedLogEntry here; the app never starts with
    a partially loaded source.
    """
    app = Flask(__name__)
    app.config["API_TOKEN"] = API_TOKEN if api_token is None else api_token

    paths = list(LOG_PATHS if log_paths is None else log_paths)
    demo = INCLUDE_DEMO if include_demo is None else include_demo
    plan_path = BANDPLAN_PATH if bandplan_path is None else bandplan_path

    # ------------------------------------------------------------------
    # Load sources
    # ------------------------------------------------------------------
    config = PipelineConfig.from_env()
    app._bandplan = GnssBandplan(plan_path or None)
    app._config = config
    app._tracks = TrackRegistry()
    for idx, path in enumerate(paths):
        app._tracks.put(
            load_track(path, _identity_for(path, idx, len(paths)), config=config, bandplan=app._bandplan)
        )
    if demo:
        for product in demo_tracks(config=config, bandplan=app._bandplan):
            app._tracks.put(product)
    logger.info("serving %d track(s)", len(app._tracks))

    # ------------------------------------------------------------------
    # Error ring buffer (exposed via api_debug blueprint)
    # ------------------------------------------------------------------
    app._error_ring = []
    app._error_ring_max = ERROR_RING_MAX

    # ------------------------------------------------------------------
    # Request timing middleware
    # ------------------------------------------------------------------

    @app.before_request
    def log_request_start():
        request._start_time = perf_counter()

    @app.after_request
    def log_request_end(response):
        if hasattr(request, "_start_time"):
            duration_ms = (perf_counter() - request._start_time) * 1000
            if duration_ms > 500 or response.status_code >= 400:
                logger.debug(
                    "%s %s -> %d (%.1fms)",
                    request.method,
                    request.path,
                    response.status_code,
                    duration_ms,
                )
        return response

    # ------------------------------------------------------------------
    # Error handlers
    # ------------------------------------------------------------------

    @app.errorhandler(HTTPException)
    def http_error_as_json(exc: HTTPException):
        response = jsonify({"error": exc.name, "description": exc.description})
        response.status_code = exc.code or 500
        return response

    @app.errorhandler(Exception)
    def capture_error_to_ring(exc: Exception):
        entry = {
            "ts": datetime.now(timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "path": request.path,
            "method": request.method,
            "error": str(exc),
            "type": type(exc).__name__,
            "traceback": tb.format_exc(),
        }
        app._error_ring.append(entry)
        while len(app._error_ring) > app._error_ring_max:
            app._error_ring.pop(0)
        logger.error("unhandled error on %s %s: %s", request.method, request.path, exc, extra={"error_type": type(exc).__name__})
        response = jsonify({"error": "Internal Server Error", "description": str(exc)})
        response.status_code = 500
        return response

    # ------------------------------------------------------------------
    # Register blueprints
    # ------------------------------------------------------------------
    from gnsstrack_web.blueprints.api_bands import bp as api_bands_bp
    from gnsstrack_web.blueprints.api_debug import bp as api_debug_bp
    from gnsstrack_web.blueprints.api_tracks import bp as api_tracks_bp

    app.register_blueprint(api_debug_bp)
    app.register_blueprint(api_tracks_bp)
    app.register_blueprint(api_bands_bp)

    return app
