"""
Band catalog API blueprint for gnsstrack Web.
"""
from __future__ import annotations

import math
from typing import Optional

from flask import Blueprint, abort, current_app, jsonify, request

from gnsstrack_web.auth import require_auth

bp = Blueprint("api_bands", __name__, url_prefix="/api/bands")


def _float_arg(name: str, *, required: bool) -> Optional[float]:
    raw = request.args.get(name, "").strip()
    if not raw:
        if required:
            abort(400, description=f"Missing query parameter: {name}")
        return None
    try:
        value = float(raw)
    except ValueError:
        abort(400, description=f"Invalid {name}: {raw!r}")
    if not math.isfinite(value):
        abort(400, description=f"Invalid {name}: {raw!r}")
    return value


@bp.get("")
def api_bands_list():
    """The band catalog in classification order."""
    require_auth()
    return jsonify(current_app._bandplan.serialize())


@bp.get("/classify")
def api_bands_classify():
    """Classify ?mhz= against the catalog, with an optional ?tolerance= in MHz."""
    require_auth()
    mhz = _float_arg("mhz", required=True)
    tolerance = _float_arg("tolerance", required=False)
    if tolerance is None:
        tolerance = current_app._config.band_tolerance_mhz
    elif tolerance < 0:
        abort(400, description="tolerance must be non-negative")
    info = current_app._bandplan.classify(mhz, tolerance)
    return jsonify(info.as_payload())
