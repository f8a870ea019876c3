"""GeoJSON FeatureCollection output consumed by the map layer.

Property names are a fixed contract with the renderer's style expressions
(``gnssSatVisible`` drives the path colour, ``gnssAvgCn0`` the point colour).
"""

from __future__ import annotations

from typing import Any, Dict, List

from gnsstrack.status.types import GnssStatusResult
from gnsstrack.track.types import Track, TrackPoint


def _status_properties(status: GnssStatusResult) -> Dict[str, Any]:
    return {
        "gnssAvgCn0": status.average_signal_to_noise_ratio,
        "gnssSatVisible": status.satellites_visible,
        "gnssSatUsed": status.satellites_used_in_fix,
        "gnssConstellationCount": len(status.supported_constellations),
    }


def base_properties(track: Track) -> Dict[str, Any]:
    ident = track.identity
    return {
        "trackId": ident.track_id,
        "vesselName": ident.vessel_name,
        "vesselType": ident.vessel_type,
        "legName": ident.leg_name,
        "startTime": track.start_time,
        "endTime": track.end_time,
        "avgSpeedKts": track.avg_speed_kts,
        "maxSpeedKts": track.max_speed_kts,
    }


def line_feature(track: Track) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [list(coord) for coord in track.path],
        },
        "properties": {**base_properties(track), **_status_properties(track.path_status)},
    }


def point_feature(track: Track, point: TrackPoint) -> Dict[str, Any]:
    properties = {
        **base_properties(track),
        "fixIndex": point.fix_index,
        "timestamp": point.timestamp,
        "speedMps": point.speed_mps,
        "speedKts": point.speed_kts,
        "accuracyM": point.accuracy_m,
        "altitudeM": point.altitude_m,
        "seaState": point.sea_state,
        "navStatus": point.nav_status,
        **_status_properties(point.status),
    }
    properties.update(point.extras())
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": list(point.coordinate)},
        "properties": properties,
    }


def build_feature_collection(track: Track) -> Dict[str, Any]:
    """One LineString for the path followed by one Point per fix."""
    features: List[Dict[str, Any]] = [line_feature(track)]
    features.extend(point_feature(track, point) for point in track.points)
    return {"type": "FeatureCollection", "features": features}
